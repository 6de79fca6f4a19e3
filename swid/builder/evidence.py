from __future__ import annotations
from datetime import datetime
from typing import Optional

from ..config import LanguageProvider
from ..errors import InvalidArgumentError
from ..util import require_non_empty, require_non_null
from .resource import ResourceCollectionBuilder


class EvidenceBuilder(ResourceCollectionBuilder):
    """Resources observed on a device when the product was detected."""

    def reset(self) -> None:
        super().reset()
        self._date: Optional[datetime] = None
        self._device_id: Optional[str] = None

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "EvidenceBuilder":
        return cls(language_provider)

    def get_date(self) -> Optional[datetime]:
        return self._date

    def get_device_id(self) -> Optional[str]:
        return self._device_id

    def date(self, date: datetime) -> "EvidenceBuilder":
        require_non_null(date, "date")
        if not isinstance(date, datetime):
            raise InvalidArgumentError(f"date must be a datetime, got {type(date).__name__}", "date")
        self._date = date
        return self

    def device_id(self, device_id: str) -> "EvidenceBuilder":
        self._device_id = require_non_empty(device_id, "deviceId")
        return self
