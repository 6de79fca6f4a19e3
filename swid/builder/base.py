"""
Shared builder contract.

Every builder carries a content language and implements reset(),
is_valid() and validate(). validate() raises ValidationError on the first
broken rule; is_valid() answers the same question without raising.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from ..config import LanguageProvider, locale_language
from ..errors import ValidationError
from ..util import require_non_empty


class AbstractBuilder(ABC):

    def __init__(self, language_provider: Optional[LanguageProvider] = None):
        self._language_provider: LanguageProvider = language_provider or locale_language
        self._language: Optional[str] = None
        self.reset()

    def reset(self) -> None:
        """Restore defaults. Subclasses call super().reset() first."""
        self._language = self._language_provider()

    def get_language(self) -> Optional[str]:
        return self._language

    def language(self, tag: str):
        require_non_empty(tag, "language")
        self._language = tag
        return self

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    @abstractmethod
    def validate(self) -> None:
        ...
