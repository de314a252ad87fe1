"""HTTP helpers for Filegate."""

from filegate.web.app import create_app
from filegate.web.files import clean_user_file_request, rejection_detail
from filegate.web.health import HealthMessage, HealthResponse, health_check
from filegate.web.health import router as health_router
from filegate.web.requests import RequestLoggingMiddleware, log_incoming

__all__ = [
    "create_app",
    "clean_user_file_request",
    "rejection_detail",
    "health_check",
    "health_router",
    "HealthMessage",
    "HealthResponse",
    "RequestLoggingMiddleware",
    "log_incoming",
]
