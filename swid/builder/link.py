from __future__ import annotations
from typing import Optional, Union

from ..config import LanguageProvider
from ..enums import Ownership, Use
from ..util import require_enum, require_non_empty, require_present
from .base import AbstractBuilder


class LinkBuilder(AbstractBuilder):
    """Relates the tag to another tag or resource via href + rel."""

    def reset(self) -> None:
        super().reset()
        self._href: Optional[str] = None
        self._rel: Optional[str] = None
        self._artifact: Optional[str] = None
        self._media: Optional[str] = None
        self._ownership: Optional[Ownership] = None
        self._use: Optional[Use] = None

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "LinkBuilder":
        return cls(language_provider)

    def get_href(self) -> Optional[str]:
        return self._href

    def get_rel(self) -> Optional[str]:
        return self._rel

    def get_artifact(self) -> Optional[str]:
        return self._artifact

    def get_media(self) -> Optional[str]:
        return self._media

    def get_ownership(self) -> Optional[Ownership]:
        return self._ownership

    def get_use(self) -> Optional[Use]:
        return self._use

    def href(self, href: str) -> "LinkBuilder":
        self._href = require_non_empty(href, "href")
        return self

    def rel(self, rel: str) -> "LinkBuilder":
        self._rel = require_non_empty(rel, "rel")
        return self

    def artifact(self, artifact: str) -> "LinkBuilder":
        self._artifact = require_non_empty(artifact, "artifact")
        return self

    def media(self, media: str) -> "LinkBuilder":
        self._media = require_non_empty(media, "media")
        return self

    def ownership(self, ownership: Union[Ownership, str]) -> "LinkBuilder":
        self._ownership = require_enum(ownership, Ownership, "ownership")
        return self

    def use(self, use: Union[Use, str]) -> "LinkBuilder":
        self._use = require_enum(use, Use, "use")
        return self

    def validate(self) -> None:
        require_present(self._href, "href")
        require_present(self._rel, "rel")
