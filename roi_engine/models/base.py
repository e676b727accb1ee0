"""Shared pydantic base for all persisted ROI documents."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

M = TypeVar("M", bound="DocumentModel")


class DocumentModel(BaseModel):
    """Immutable model serialized with camelCase keys.

    Attribute access is snake_case; the wire shape (``to_document``) uses the
    camelCase names the persisted store has always used.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    @classmethod
    def field_name(cls, key: str) -> str:
        """Map a camelCase alias to its attribute name; other keys pass through."""
        for name, info in cls.model_fields.items():
            if key == name or key == (info.alias or to_camel(name)):
                return name
        return key

    @classmethod
    def normalize_keys(cls, changes: Mapping[str, Any]) -> dict[str, Any]:
        return {cls.field_name(k): v for k, v in changes.items()}

    def merged(self: M, changes: Mapping[str, Any]) -> M:
        """Shallow-merge ``changes`` into a copy and re-validate it."""
        data = self.model_dump()
        data.update(self.normalize_keys(changes))
        return type(self).model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """JSON-safe camelCase dict for persistence."""
        return self.model_dump(mode="json", by_alias=True)
