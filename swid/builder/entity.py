from __future__ import annotations
from typing import List, Optional, Union

from ..config import LanguageProvider
from ..constants import REGID_DEFAULT
from ..enums import Role
from ..errors import ValidationError
from ..util import require_enum, require_non_empty, require_present
from .base import AbstractBuilder


class EntityBuilder(AbstractBuilder):
    """A party (publisher, producer, distributor...) tied to the product."""

    def reset(self) -> None:
        super().reset()
        self._name: Optional[str] = None
        self._regid: str = REGID_DEFAULT
        self._roles: List[Role] = []
        self._thumbprint: Optional[str] = None

    @classmethod
    def create(cls, language_provider: Optional[LanguageProvider] = None) -> "EntityBuilder":
        return cls(language_provider)

    def get_name(self) -> Optional[str]:
        return self._name

    def get_regid(self) -> str:
        return self._regid

    def get_roles(self) -> List[Role]:
        return self._roles

    def get_thumbprint(self) -> Optional[str]:
        return self._thumbprint

    def name(self, name: str) -> "EntityBuilder":
        self._name = require_non_empty(name, "name")
        return self

    def regid(self, regid: str) -> "EntityBuilder":
        self._regid = require_non_empty(regid, "regid")
        return self

    def add_role(self, role: Union[Role, str]) -> "EntityBuilder":
        role = require_enum(role, Role, "role")
        if role not in self._roles:
            self._roles.append(role)
        return self

    def thumbprint(self, thumbprint: str) -> "EntityBuilder":
        self._thumbprint = require_non_empty(thumbprint, "thumbprint")
        return self

    def validate(self) -> None:
        require_present(self._name, "name")
        if not self._roles:
            raise ValidationError(f"entity {self._name!r} must have at least one role", "role")
        if Role.TAG_CREATOR in self._roles and self._regid == REGID_DEFAULT:
            raise ValidationError(f"tag creator {self._name!r} must provide a regid", "regid")
