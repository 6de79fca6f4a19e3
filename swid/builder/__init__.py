from .base import AbstractBuilder
from .entity import EntityBuilder
from .evidence import EvidenceBuilder
from .link import LinkBuilder
from .meta import MetaBuilder
from .payload import PayloadBuilder
from .resource import AbstractResourceBuilder, DirectoryBuilder, FileBuilder, ResourceCollectionBuilder
from .tag import TagBuilder

__all__ = [
    "AbstractBuilder",
    "AbstractResourceBuilder",
    "DirectoryBuilder",
    "EntityBuilder",
    "EvidenceBuilder",
    "FileBuilder",
    "LinkBuilder",
    "MetaBuilder",
    "PayloadBuilder",
    "ResourceCollectionBuilder",
    "TagBuilder",
]
