"""Mutation commands accepted by ``ReportStore.dispatch``.

Field maps use attribute names or their camelCase aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from roi_engine.models import Report


@dataclass(frozen=True)
class SetClientInfo:
    """Shallow-merge top-level report fields (client name, currency, ...)."""

    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoadReport:
    report: Report


@dataclass(frozen=True)
class SaveCurrentReport:
    """Upsert the current report into the saved list by id."""


@dataclass(frozen=True)
class CreateNewReport:
    """Replace the current report with an empty one; saved reports are untouched."""


@dataclass(frozen=True)
class UpdateSettings:
    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddOperation:
    """Append a default operation merged with ``overrides``; any id given is replaced."""

    overrides: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateOperation:
    operation_id: str
    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RemoveOperation:
    operation_id: str


@dataclass(frozen=True)
class DuplicateOperation:
    operation_id: str


StoreCommand = Union[
    SetClientInfo,
    LoadReport,
    SaveCurrentReport,
    CreateNewReport,
    UpdateSettings,
    AddOperation,
    UpdateOperation,
    RemoveOperation,
    DuplicateOperation,
]
