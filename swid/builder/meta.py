from __future__ import annotations
from typing import Dict, Optional

from ..config import LanguageProvider
from ..errors import ValidationError
from ..util import require_non_empty, require_non_null
from .base import AbstractBuilder


class MetaBuilder(AbstractBuilder):
    """Free-form key/value metadata attached to a tag, in insertion order."""

    def reset(self) -> None:
        super().reset()
        self._attributes: Dict[str, str] = {}

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "MetaBuilder":
        return cls(language_provider)

    def get_attributes(self) -> Dict[str, str]:
        return self._attributes

    def get_attribute(self, key: str) -> Optional[str]:
        return self._attributes.get(key)

    def attribute(self, key: str, value: str) -> "MetaBuilder":
        require_non_empty(key, "key")
        self._attributes[key] = require_non_null(value, key)
        return self

    def colloquial_version(self, value: str) -> "MetaBuilder":
        return self.attribute("colloquialVersion", require_non_empty(value, "colloquialVersion"))

    def edition(self, value: str) -> "MetaBuilder":
        return self.attribute("edition", require_non_empty(value, "edition"))

    def product(self, value: str) -> "MetaBuilder":
        return self.attribute("product", require_non_empty(value, "product"))

    def revision(self, value: str) -> "MetaBuilder":
        return self.attribute("revision", require_non_empty(value, "revision"))

    def summary(self, value: str) -> "MetaBuilder":
        return self.attribute("summary", require_non_empty(value, "summary"))

    def validate(self) -> None:
        if not self._attributes:
            raise ValidationError("meta must carry at least one attribute", "meta")
