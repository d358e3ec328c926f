# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .notification_service import NotificationError, NotificationService

__all__ = [
    "NotificationError",
    "NotificationService",
]
