"""
swid - construct and validate software identification tags.

Components:
- builder/: fluent builders for the tag and its children
- config.py: default language and verbosity
- errors.py: argument and validation errors
- logging.py: Rich-backed package logger
"""

__version__ = "0.1.0"

from .builder import (
    DirectoryBuilder,
    EntityBuilder,
    EvidenceBuilder,
    FileBuilder,
    LinkBuilder,
    MetaBuilder,
    PayloadBuilder,
    TagBuilder,
)
from .config import BuilderConfig
from .enums import HashAlgorithm, Ownership, Role, TagType, Use
from .errors import ConfigError, InvalidArgumentError, SwidError, ValidationError
