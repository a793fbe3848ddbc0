"""Host-facing payload models for record and grant submissions."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class RecordPayload(BaseModel):
    """
    Field values submitted for a record create or update.

    Values are carried as supplied; length rules are enforced by the store so
    that each violation maps to its own failure kind.
    """  # noqa: E501

    title: str = Field(description="Record title.")
    integrity_hash: str = Field(description="Content checksum.", alias="integrityHash")
    payload: str = Field(description="Record content.")
    category: Optional[str] = Field(default=None, description="Record category. Ignored on update.")
    tags: List[str] = Field(default_factory=list, description="Ordered record tags.")
    __properties: ClassVar[list[str]] = ["title", "integrityHash", "payload", "category", "tags"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)


class GrantPayload(BaseModel):
    """
    Delegation of access over one record to one principal.
    """  # noqa: E501

    grantee: str = Field(description="Principal receiving access.")
    level: str = Field(description="viewer, editor or administrator.")
    duration: int = Field(description="Grant lifetime in logical time units.")
    modification_rights: bool = Field(default=False, alias="modificationRights")
    __properties: ClassVar[list[str]] = ["grantee", "level", "duration", "modificationRights"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
