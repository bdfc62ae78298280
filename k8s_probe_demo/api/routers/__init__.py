"""API router package for endpoint composition."""

from .availability import api_create_availability_router
from .customers import api_create_customer_router
from .health import api_create_health_router

__all__ = ["api_create_availability_router", "api_create_customer_router", "api_create_health_router"]
