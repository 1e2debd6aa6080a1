"""
Notification banner store - Transient single-slot UI feedback.

Banner Lifecycle
================

States:
- EMPTY: no banner
- VISIBLE: banner shown, ``is_closing`` is False
- CLOSING: banner shown, ``is_closing`` is True (exit animation running)

Transitions:
    EMPTY | VISIBLE | CLOSING -> VISIBLE   show() (new banner object, new id)
    VISIBLE -> CLOSING                     hide() or auto-dismiss timer
    CLOSING -> EMPTY                       close-animation timer

hide() in EMPTY or CLOSING is a no-op. There is no queue: show()
replaces whatever is displayed. Every timer carries the id of the banner
it was scheduled for and does nothing if a different banner is current
when it fires.

Nothing is persisted.
"""

import itertools
import logging
from dataclasses import dataclass, replace
from enum import Enum

from prereg.domain.events import ChangeEmitter
from prereg.domain.ports import Scheduler

logger = logging.getLogger(__name__)

AUTO_DISMISS_SECONDS = 5.0
CLOSE_ANIMATION_SECONDS = 0.3


class BannerKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Banner:
    id: str
    kind: BannerKind
    message: str
    description: str | None = None
    is_closing: bool = False


class BannerStore:
    """
    Holds at most one live banner.

    Subscribers to ``changes`` receive the current banner (or None)
    after every state transition.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        auto_dismiss: float = AUTO_DISMISS_SECONDS,
        close_delay: float = CLOSE_ANIMATION_SECONDS,
    ) -> None:
        self._scheduler = scheduler
        self.auto_dismiss = auto_dismiss
        self.close_delay = close_delay
        self._ids = itertools.count(1)
        self._banner: Banner | None = None
        self.changes = ChangeEmitter()

    @property
    def banner(self) -> Banner | None:
        return self._banner

    def show(self, kind: BannerKind | str, message: str, description: str | None = None) -> Banner:
        """Replace the current banner and schedule its auto-dismiss."""
        banner = Banner(
            id=str(next(self._ids)),
            kind=BannerKind(kind),
            message=message,
            description=description,
        )
        self._set(banner)
        self._scheduler.call_later(self.auto_dismiss, self._dismiss, banner.id)
        return banner

    def show_success(self, message: str, description: str | None = None) -> Banner:
        return self.show(BannerKind.SUCCESS, message, description)

    def show_error(self, message: str, description: str | None = None) -> Banner:
        return self.show(BannerKind.ERROR, message, description)

    def hide(self) -> None:
        """Start closing the current banner; no-op if empty or already closing."""
        if self._banner is None or self._banner.is_closing:
            return
        self._begin_close(self._banner)

    def _dismiss(self, banner_id: str) -> None:
        current = self._banner
        if current is None or current.id != banner_id or current.is_closing:
            return
        self._begin_close(current)

    def _begin_close(self, banner: Banner) -> None:
        self._set(replace(banner, is_closing=True))
        self._scheduler.call_later(self.close_delay, self._remove, banner.id)

    def _remove(self, banner_id: str) -> None:
        if self._banner is not None and self._banner.id == banner_id:
            self._set(None)

    def _set(self, banner: Banner | None) -> None:
        self._banner = banner
        logger.debug("Banner state: %s", banner)
        self.changes.emit(banner)
