"""Health endpoint router composition for orchestration probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from k8s_probe_demo.availability import ApplicationAvailability
from k8s_probe_demo.db import DatabaseHealthPort
from k8s_probe_demo.domain import LivenessState, ReadinessState

STATUS_UP = "UP"
STATUS_DOWN = "DOWN"
STATUS_OUT_OF_SERVICE = "OUT_OF_SERVICE"


def api_create_health_router(
    availability: ApplicationAvailability,
    db_health_service: DatabaseHealthPort,
) -> APIRouter:
    """Create health router with aggregate, liveness and readiness probes.

    Args:
        availability: Process availability state holder read by the probes.
        db_health_service: DB-layer health service interface.

    Returns:
        APIRouter: Router exposing `/actuator/health` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if availability is None:
        raise ValueError("availability must not be None")
    if db_health_service is None:
        raise ValueError("db_health_service must not be None")

    router = APIRouter(prefix="/actuator/health", tags=["health"])

    def api_health_liveness_component() -> dict[str, str]:
        if availability.liveness_state is LivenessState.CORRECT:
            return {"status": STATUS_UP}
        return {"status": STATUS_DOWN}

    def api_health_readiness_component() -> dict[str, str]:
        if availability.readiness_state is ReadinessState.ACCEPTING_TRAFFIC:
            return {"status": STATUS_UP}
        return {"status": STATUS_OUT_OF_SERVICE}

    async def api_health_db_component() -> dict[str, str]:
        try:
            db_health = await db_health_service.db_check_health()
            return {
                "status": db_health.status,
                "detail": db_health.detail,
                "target": db_health_service.db_connection_label(),
            }
        except ConnectionError as error:
            return {
                "status": STATUS_DOWN,
                "detail": str(error),
                "target": db_health_service.db_connection_label(),
            }

    def api_health_response(payload: dict) -> JSONResponse:
        status_code = status.HTTP_200_OK if payload["status"] == STATUS_UP else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    @router.get("")
    async def api_health_status() -> JSONResponse:
        """Return aggregate health of storage, liveness and readiness.

        Returns:
            JSONResponse: `UP` with HTTP 200 only when every component is up,
            otherwise `DOWN` with HTTP 503.
        """

        components = {
            "db": await api_health_db_component(),
            "livenessState": api_health_liveness_component(),
            "readinessState": api_health_readiness_component(),
        }
        overall_status = (
            STATUS_UP if all(component["status"] == STATUS_UP for component in components.values()) else STATUS_DOWN
        )
        return api_health_response({"status": overall_status, "components": components})

    @router.get("/liveness")
    async def api_health_liveness() -> JSONResponse:
        """Report liveness for the orchestrator's restart decision."""

        return api_health_response(api_health_liveness_component())

    @router.get("/readiness")
    async def api_health_readiness() -> JSONResponse:
        """Report readiness for the orchestrator's routing decision."""

        return api_health_response(api_health_readiness_component())

    return router
