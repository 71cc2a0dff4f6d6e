"""BaseService — common foundation for dobcheck services.

Every service receives the resolved :class:`DobSettings` at construction
time so defaults (verification zones, benchmark sizes) come from one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from dobcheck.config.settings import DobSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class VerificationService(BaseService):
            def verify_dates(self, ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: DobSettings) -> None:
        self._settings = settings
        self._log = structlog.get_logger(f"dobcheck.services.{type(self).__name__}")

    @property
    def settings(self) -> DobSettings:
        return self._settings
