from __future__ import annotations
from typing import Optional

from ..config import LanguageProvider
from .resource import ResourceCollectionBuilder


class PayloadBuilder(ResourceCollectionBuilder):
    """Files and directories distributed with the product."""

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "PayloadBuilder":
        return cls(language_provider)
