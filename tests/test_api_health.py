"""Tests for health probe endpoint behavior.

These tests validate deterministic response behavior for healthy,
database-unavailable, broken-liveness and not-ready states.
"""

from fastapi.testclient import TestClient

from k8s_probe_demo.api.application import create_api_application
from k8s_probe_demo.availability import ApplicationAvailability
from k8s_probe_demo.config import AppSettings
from k8s_probe_demo.domain import HealthStatus, LivenessState, ReadinessState


class _HealthyDatabaseService:
    """Test double that simulates a healthy database target."""

    def db_connection_label(self) -> str:
        """Return deterministic target label.

        Returns:
            str: Health target label.
        """

        return "sqlite+aiosqlite://test"

    async def db_check_health(self) -> HealthStatus:
        """Return healthy database result.

        Returns:
            HealthStatus: Healthy DB response.
        """

        return HealthStatus(status="UP", detail="database connectivity verified")


class _FailingDatabaseService:
    """Test double that simulates a database connectivity failure."""

    def db_connection_label(self) -> str:
        """Return deterministic target label.

        Returns:
            str: Health target label.
        """

        return "sqlite+aiosqlite://test"

    async def db_check_health(self) -> HealthStatus:
        """Raise deterministic connection error.

        Raises:
            ConnectionError: Always raised by this test double.
        """

        raise ConnectionError("database connectivity check failed")


class _EmptyCustomerRepositoryStub:
    """Minimal repository stub for API factory dependency injection."""

    async def save(self, customer):
        return customer

    async def find_all(self):
        for customer in ():
            yield customer


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.
    """

    return AppSettings(environment_name="test", database_url="sqlite+aiosqlite:///:memory:")


def _build_client(db_health_service, availability: ApplicationAvailability) -> TestClient:
    application = create_api_application(
        _build_settings(),
        availability,
        _EmptyCustomerRepositoryStub(),
        db_health_service,
    )
    return TestClient(application)


def test_api_health_returns_success_when_all_components_are_up() -> None:
    """Return HTTP 200 and UP payload when storage, liveness and readiness are up."""

    availability = ApplicationAvailability(readiness_state=ReadinessState.ACCEPTING_TRAFFIC)
    client = _build_client(_HealthyDatabaseService(), availability)

    response = client.get("/actuator/health")

    assert response.status_code == 200
    assert response.json()["status"] == "UP"
    assert response.json()["components"]["db"]["status"] == "UP"
    assert response.json()["components"]["db"]["target"] == "sqlite+aiosqlite://test"
    assert response.json()["components"]["livenessState"] == {"status": "UP"}
    assert response.json()["components"]["readinessState"] == {"status": "UP"}


def test_api_health_returns_service_unavailable_when_database_is_down() -> None:
    """Return HTTP 503 and DOWN payload when DB service reports failure."""

    availability = ApplicationAvailability(readiness_state=ReadinessState.ACCEPTING_TRAFFIC)
    client = _build_client(_FailingDatabaseService(), availability)

    response = client.get("/actuator/health")

    assert response.status_code == 503
    assert response.json()["status"] == "DOWN"
    assert response.json()["components"]["db"]["status"] == "DOWN"
    assert response.json()["components"]["db"]["detail"] == "database connectivity check failed"
    assert response.json()["components"]["livenessState"] == {"status": "UP"}


def test_api_health_liveness_reflects_broken_state() -> None:
    """Return HTTP 503 from liveness and aggregate probes once liveness is BROKEN."""

    availability = ApplicationAvailability(readiness_state=ReadinessState.ACCEPTING_TRAFFIC)
    client = _build_client(_HealthyDatabaseService(), availability)

    assert client.get("/actuator/health/liveness").json() == {"status": "UP"}

    availability.mark_broken()
    liveness_response = client.get("/actuator/health/liveness")
    health_response = client.get("/actuator/health")

    assert availability.liveness_state is LivenessState.BROKEN
    assert liveness_response.status_code == 503
    assert liveness_response.json() == {"status": "DOWN"}
    assert health_response.status_code == 503
    assert health_response.json()["components"]["livenessState"] == {"status": "DOWN"}


def test_api_health_readiness_is_out_of_service_before_startup() -> None:
    """Report OUT_OF_SERVICE while the application lifespan has not started."""

    client = _build_client(_HealthyDatabaseService(), ApplicationAvailability())

    response = client.get("/actuator/health/readiness")

    assert response.status_code == 503
    assert response.json() == {"status": "OUT_OF_SERVICE"}


def test_api_health_readiness_follows_application_lifespan() -> None:
    """Accept traffic while the lifespan runs and refuse it after shutdown."""

    availability = ApplicationAvailability()
    client = _build_client(_HealthyDatabaseService(), availability)

    with client:
        response = client.get("/actuator/health/readiness")
        assert response.status_code == 200
        assert response.json() == {"status": "UP"}

    assert availability.readiness_state is ReadinessState.REFUSING_TRAFFIC
