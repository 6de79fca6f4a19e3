"""
Top-level tag builder.

Collects the identity fields of a software tag together with its child
builders (entities, evidence, links, metas and payload) and checks the
tag's structural rules before it is handed to a serializer.
"""
from __future__ import annotations
from typing import List, Optional, Union

from ..constants import TAG_VERSION_DEFAULT, VERSION_DEFAULT, VERSION_SCHEME_DEFAULT
from ..config import LanguageProvider
from ..enums import TagType
from ..errors import InvalidArgumentError, ValidationError
from ..logging import log
from ..util import require_enum, require_non_empty, require_non_null, require_present
from .base import AbstractBuilder
from .entity import EntityBuilder
from .evidence import EvidenceBuilder
from .link import LinkBuilder
from .meta import MetaBuilder
from .payload import PayloadBuilder


class TagBuilder(AbstractBuilder):

    def reset(self) -> None:
        super().reset()
        self._tag_type: TagType = TagType.PRIMARY
        self._name: Optional[str] = None
        self._tag_id: Optional[str] = None
        self._tag_version: int = TAG_VERSION_DEFAULT
        self._version: Optional[str] = None
        self._version_scheme: Optional[str] = None
        self._entities: List[EntityBuilder] = []
        self._evidence: Optional[EvidenceBuilder] = None
        self._links: List[LinkBuilder] = []
        self._metas: List[MetaBuilder] = []
        self._payload: Optional[PayloadBuilder] = None
        self._media: Optional[str] = None

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "TagBuilder":
        return cls(language_provider)

    # ---- accessors ----

    def get_tag_type(self) -> TagType:
        return self._tag_type

    def get_name(self) -> Optional[str]:
        return self._name

    def get_tag_id(self) -> Optional[str]:
        return self._tag_id

    def get_tag_version(self) -> int:
        return self._tag_version

    def get_version(self) -> str:
        return VERSION_DEFAULT if self._version is None else self._version

    def get_version_scheme(self) -> str:
        return VERSION_SCHEME_DEFAULT if self._version_scheme is None else self._version_scheme

    def get_media(self) -> Optional[str]:
        return self._media

    def get_entities(self) -> List[EntityBuilder]:
        return self._entities

    def get_evidence(self) -> Optional[EvidenceBuilder]:
        return self._evidence

    def get_links(self) -> List[LinkBuilder]:
        return self._links

    def get_metas(self) -> List[MetaBuilder]:
        return self._metas

    def get_payload(self) -> Optional[PayloadBuilder]:
        return self._payload

    def new_evidence(self) -> EvidenceBuilder:
        """Return the tag's evidence builder, creating it on first use."""
        if self._evidence is None:
            log().debug("creating evidence builder")
            self._evidence = EvidenceBuilder.create(self._language_provider)
        return self._evidence

    def new_payload(self) -> PayloadBuilder:
        """Return the tag's payload builder, creating it on first use."""
        if self._payload is None:
            log().debug("creating payload builder")
            self._payload = PayloadBuilder.create(self._language_provider)
        return self._payload

    # ---- fluent setters ----

    def tag_type(self, tag_type: Union[TagType, str]) -> "TagBuilder":
        self._tag_type = require_enum(tag_type, TagType, "tagType")
        return self

    def name(self, name: str) -> "TagBuilder":
        self._name = require_non_empty(name, "name")
        return self

    def tag_id(self, tag_id: str) -> "TagBuilder":
        self._tag_id = require_non_empty(tag_id, "tagId")
        return self

    def tag_version(self, version: int) -> "TagBuilder":
        require_non_null(version, "tagVersion")
        if isinstance(version, bool) or not isinstance(version, int):
            raise InvalidArgumentError(f"tagVersion must be an int, got {type(version).__name__}", "tagVersion")
        self._tag_version = version
        return self

    def version(self, version: str) -> "TagBuilder":
        require_non_empty(version, "version")
        self._version = None if version == VERSION_DEFAULT else version
        return self

    def version_scheme(self, scheme: str) -> "TagBuilder":
        """Identify how the product version is interpreted, e.g. semver."""
        require_non_empty(scheme, "versionScheme")
        self._version_scheme = None if scheme == VERSION_SCHEME_DEFAULT else scheme
        return self

    def media(self, media: str) -> "TagBuilder":
        self._media = require_non_null(media, "media")
        return self

    def add_entity(self, entity: EntityBuilder) -> "TagBuilder":
        self._entities.append(require_non_null(entity, "entity"))
        return self

    def add_link(self, link: LinkBuilder) -> "TagBuilder":
        self._links.append(require_non_null(link, "link"))
        return self

    def add_meta(self, meta: MetaBuilder) -> "TagBuilder":
        self._metas.append(require_non_null(meta, "meta"))
        return self

    def payload(self, payload: PayloadBuilder) -> "TagBuilder":
        self._payload = require_non_null(payload, "payload")
        return self

    def evidence(self, evidence: EvidenceBuilder) -> "TagBuilder":
        self._evidence = require_non_null(evidence, "evidence")
        return self

    # ---- validation ----

    def is_valid(self) -> bool:
        retval = self._name is not None and self._tag_id is not None
        if retval:
            retval = bool(self._entities) and all(e.is_valid() for e in self._entities)
        if retval:
            retval = self._evidence is None or self._payload is None
        if retval:
            retval = self._evidence is None or self._evidence.is_valid()
        if retval:
            retval = all(link.is_valid() for link in self._links)
        if retval:
            retval = all(meta.is_valid() for meta in self._metas)
        if retval:
            retval = self._payload is None or self._payload.is_valid()
        return retval

    def validate(self) -> None:
        try:
            self._validate()
        except ValidationError as e:
            log().debug(f"tag {self._tag_id!r} failed validation: {e}")
            raise
        log().debug(f"tag {self._tag_id!r} validated ({len(self._entities)} entities)")

    def _validate(self) -> None:
        require_present(self._name, "name")
        require_present(self._tag_id, "tagId")
        if not self._entities:
            raise ValidationError("at least a single entity must be provided", "entity")
        for entity in self._entities:
            entity.validate()

        if self._payload is not None and self._evidence is not None:
            raise ValidationError("evidence and payload cannot be both provided", "payload")

        if self._payload is not None:
            self._payload.validate()
        if self._evidence is not None:
            self._evidence.validate()
        for link in self._links:
            link.validate()
        for meta in self._metas:
            meta.validate()
