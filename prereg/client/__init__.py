"""
Client layer - State the browser side of the site keeps.

Persisted record stores, the notification banner, the registration
submission workflow and the admin dashboard view-model.
"""

from .admin import AdminDashboard, DashboardStats, calculate_stats
from .banner import Banner, BannerKind, BannerStore
from .context import ClientContext
from .scheduling import AsyncioScheduler
from .stores import NotificationStore, PersistedRecordStore, ReservationStore
from .workflow import (
    RegistrationForm,
    RegistrationWorkflow,
    SubmissionOutcome,
    SubmissionResult,
)

__all__ = [
    "AdminDashboard",
    "AsyncioScheduler",
    "Banner",
    "BannerKind",
    "BannerStore",
    "ClientContext",
    "DashboardStats",
    "NotificationStore",
    "PersistedRecordStore",
    "RegistrationForm",
    "RegistrationWorkflow",
    "ReservationStore",
    "SubmissionOutcome",
    "SubmissionResult",
    "calculate_stats",
]
