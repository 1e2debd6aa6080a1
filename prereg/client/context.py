"""
Client context - Wires the client-side state once per process.

The context is created by whatever UI surface hosts the client and is
passed explicitly to the components that need it. There are no module
level store singletons.
"""

import logging
from dataclasses import dataclass

from prereg.adapters.http.client import HttpRegistrationClient
from prereg.adapters.storage.json_file import JsonDirectorySlotStorage
from prereg.config.settings import Settings
from prereg.domain.ports import Navigator, Scheduler, SlotStorage

from .admin import AdminDashboard
from .banner import BannerStore
from .scheduling import AsyncioScheduler
from .stores import NotificationStore, ReservationStore
from .workflow import RegistrationWorkflow

logger = logging.getLogger(__name__)


@dataclass
class ClientContext:
    """All client-side state for one process."""

    storage: SlotStorage
    reservations: ReservationStore
    notifications: NotificationStore
    banner: BannerStore
    client: HttpRegistrationClient
    workflow: RegistrationWorkflow

    @classmethod
    def create(
        cls,
        settings: Settings,
        navigator: Navigator,
        scheduler: Scheduler | None = None,
        storage: SlotStorage | None = None,
        client: HttpRegistrationClient | None = None,
    ) -> "ClientContext":
        """
        Build the client state from settings.

        Args:
            settings: Application settings (storage directory, API base URL)
            navigator: UI navigation handle
            scheduler: Timer source, defaults to the running asyncio loop
            storage: Slot storage, defaults to JSON files under settings.storage_dir
            client: Registration client, defaults to httpx against settings.api_base_url
        """
        scheduler = scheduler or AsyncioScheduler()
        storage = storage or JsonDirectorySlotStorage(settings.storage_dir)
        client = client or HttpRegistrationClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
        )

        reservations = ReservationStore(storage)
        notifications = NotificationStore(storage)
        banner = BannerStore(scheduler)
        workflow = RegistrationWorkflow(
            client=client,
            reservations=reservations,
            notifications=notifications,
            banner=banner,
            navigator=navigator,
            scheduler=scheduler,
        )
        logger.info(
            "Client state ready (%d reservations, %d notifications)",
            len(reservations),
            len(notifications),
        )
        return cls(
            storage=storage,
            reservations=reservations,
            notifications=notifications,
            banner=banner,
            client=client,
            workflow=workflow,
        )

    def dashboard(self) -> AdminDashboard:
        """New admin view-model over this context's stores."""
        return AdminDashboard(self.reservations, self.notifications)

    async def aclose(self) -> None:
        """Release store watches and the HTTP client."""
        self.reservations.close()
        self.notifications.close()
        await self.client.aclose()
