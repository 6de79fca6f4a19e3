"""
File and directory resources listed by a payload or evidence.

Directories may nest further resources; validation walks them in order.
"""
from __future__ import annotations
import re
from typing import Dict, List, Optional, Union

from ..config import LanguageProvider
from ..enums import HashAlgorithm
from ..errors import InvalidArgumentError
from ..util import require_enum, require_non_empty, require_non_null, require_present
from .base import AbstractBuilder

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


class AbstractResourceBuilder(AbstractBuilder):

    def reset(self) -> None:
        super().reset()
        self._name: Optional[str] = None
        self._location: Optional[str] = None
        self._root: Optional[str] = None
        self._key: Optional[bool] = None

    def get_name(self) -> Optional[str]:
        return self._name

    def get_location(self) -> Optional[str]:
        return self._location

    def get_root(self) -> Optional[str]:
        return self._root

    def get_key(self) -> Optional[bool]:
        return self._key

    def name(self, name: str):
        self._name = require_non_empty(name, "name")
        return self

    def location(self, location: str):
        self._location = require_non_empty(location, "location")
        return self

    def root(self, root: str):
        self._root = require_non_empty(root, "root")
        return self

    def key(self, key: bool):
        self._key = bool(require_non_null(key, "key"))
        return self

    def validate(self) -> None:
        require_present(self._name, "name")


class FileBuilder(AbstractResourceBuilder):

    def reset(self) -> None:
        super().reset()
        self._size: Optional[int] = None
        self._version: Optional[str] = None
        self._hashes: Dict[HashAlgorithm, str] = {}

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "FileBuilder":
        return cls(language_provider)

    def get_size(self) -> Optional[int]:
        return self._size

    def get_version(self) -> Optional[str]:
        return self._version

    def get_hashes(self) -> Dict[HashAlgorithm, str]:
        return self._hashes

    def size(self, size: int) -> "FileBuilder":
        require_non_null(size, "size")
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidArgumentError(f"size must be a non-negative int, got {size!r}", "size")
        self._size = size
        return self

    def version(self, version: str) -> "FileBuilder":
        self._version = require_non_empty(version, "version")
        return self

    def hash(self, algorithm: Union[HashAlgorithm, str], value: str) -> "FileBuilder":
        algorithm = require_enum(algorithm, HashAlgorithm, "algorithm")
        require_non_empty(value, "hash")
        if len(value) != algorithm.hex_length or not _HEX_RE.match(value):
            raise InvalidArgumentError(
                f"{algorithm.value} hash must be {algorithm.hex_length} hex characters", "hash")
        self._hashes[algorithm] = value.lower()
        return self


class DirectoryBuilder(AbstractResourceBuilder):

    def reset(self) -> None:
        super().reset()
        self._resources: List[AbstractResourceBuilder] = []

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "DirectoryBuilder":
        return cls(language_provider)

    def get_resources(self) -> List[AbstractResourceBuilder]:
        return self._resources

    def add_resource(self, resource: AbstractResourceBuilder) -> "DirectoryBuilder":
        self._resources.append(require_non_null(resource, "resource"))
        return self

    def new_file(self) -> FileBuilder:
        f = FileBuilder.create(self._language_provider)
        self._resources.append(f)
        return f

    def new_directory(self) -> "DirectoryBuilder":
        d = DirectoryBuilder.create(self._language_provider)
        self._resources.append(d)
        return d

    def validate(self) -> None:
        super().validate()
        for resource in self._resources:
            resource.validate()


class ResourceCollectionBuilder(AbstractBuilder):
    """Ordered list of resources shared by payload and evidence."""

    def reset(self) -> None:
        super().reset()
        self._resources: List[AbstractResourceBuilder] = []

    def get_resources(self) -> List[AbstractResourceBuilder]:
        return self._resources

    def add_resource(self, resource: AbstractResourceBuilder):
        self._resources.append(require_non_null(resource, "resource"))
        return self

    def new_file(self) -> FileBuilder:
        f = FileBuilder.create(self._language_provider)
        self._resources.append(f)
        return f

    def new_directory(self) -> DirectoryBuilder:
        d = DirectoryBuilder.create(self._language_provider)
        self._resources.append(d)
        return d

    def validate(self) -> None:
        for resource in self._resources:
            resource.validate()
