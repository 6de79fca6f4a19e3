from __future__ import annotations
from enum import Enum


class TagType(str, Enum):
    PRIMARY = "primary"
    CORPUS = "corpus"
    PATCH = "patch"
    SUPPLEMENTAL = "supplemental"


class Role(str, Enum):
    AGGREGATOR = "aggregator"
    DISTRIBUTOR = "distributor"
    LICENSOR = "licensor"
    SOFTWARE_CREATOR = "softwareCreator"
    TAG_CREATOR = "tagCreator"


class Ownership(str, Enum):
    ABANDON = "abandon"
    PRIVATE = "private"
    SHARED = "shared"


class Use(str, Enum):
    OPTIONAL = "optional"
    REQUIRED = "required"
    RECOMMENDED = "recommended"


class HashAlgorithm(str, Enum):
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def hex_length(self) -> int:
        """Length of a hex encoded digest for this algorithm"""
        return {"sha256": 64, "sha384": 96, "sha512": 128}[self.value]
