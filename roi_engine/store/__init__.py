from .commands import (
    AddOperation,
    CreateNewReport,
    DuplicateOperation,
    LoadReport,
    RemoveOperation,
    SaveCurrentReport,
    SetClientInfo,
    StoreCommand,
    UpdateOperation,
    UpdateSettings,
)
from .report_store import DUPLICATE_SUFFIX, ConcurrentModificationError, ReportStore

__all__ = [
    "AddOperation",
    "CreateNewReport",
    "DuplicateOperation",
    "LoadReport",
    "RemoveOperation",
    "SaveCurrentReport",
    "SetClientInfo",
    "StoreCommand",
    "UpdateOperation",
    "UpdateSettings",
    "DUPLICATE_SUFFIX",
    "ConcurrentModificationError",
    "ReportStore",
]
