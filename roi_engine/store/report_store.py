"""ReportStore: the current report, the saved-report history and their mutations.

One store instance per editing session. Every mutation is a command that
produces a new ``ROIState`` which replaces the old one in a single
assignment, then is written through to the persistence adapter. In-memory
state is authoritative; a failed write is logged, never rolled back.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from uuid import uuid4

from pydantic import ValidationError

from roi_engine.config import get_settings
from roi_engine.engine import ReportSummary, ROICalculator, ROIResult
from roi_engine.engine import formulas
from roi_engine.models import (
    Language,
    Operation,
    Report,
    ROIState,
    build_operation,
    new_report,
)
from roi_engine.persistence import PersistenceAdapter, PersistenceError
from roi_engine.store.commands import (
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

logger = logging.getLogger(__name__)

DUPLICATE_SUFFIX = {
    Language.PL: " (kopia)",
    Language.EN: " (copy)",
}


class ConcurrentModificationError(RuntimeError):
    """Raised when a command was prepared against an outdated state version."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected state version {expected}, store is at {actual}")
        self.expected = expected
        self.actual = actual


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class ReportStore:
    """Mutable container for the working report and its save history."""

    def __init__(
        self,
        adapter: Optional[PersistenceAdapter] = None,
        namespace: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._adapter = adapter
        self._namespace = namespace or get_settings().persistence_namespace
        self._clock = clock or _utcnow
        self._new_id = id_factory or _new_id
        state = self._rehydrate()
        if state is None:
            state = ROIState(report=new_report(self._new_id(), sequence=1, now=self._clock()))
        self._state = state
        self._handlers: dict[type, Callable[[ROIState, Any], ROIState]] = {
            SetClientInfo: self._set_client_info,
            LoadReport: self._load_report,
            SaveCurrentReport: self._save_current_report,
            CreateNewReport: self._create_new_report,
            UpdateSettings: self._update_settings,
            AddOperation: self._add_operation,
            UpdateOperation: self._update_operation,
            RemoveOperation: self._remove_operation,
            DuplicateOperation: self._duplicate_operation,
        }

    # ------------------------------------------------------------------
    # Readable state
    # ------------------------------------------------------------------

    # Readers get deep copies; every change goes through dispatch.

    @property
    def state(self) -> ROIState:
        return self._state.model_copy(deep=True)

    @property
    def report(self) -> Report:
        return self._state.report.model_copy(deep=True)

    @property
    def saved_reports(self) -> list[Report]:
        return [r.model_copy(deep=True) for r in self._state.saved_reports]

    @property
    def version(self) -> int:
        return self._state.version

    @property
    def namespace(self) -> str:
        return self._namespace

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, command: StoreCommand, expected_version: Optional[int] = None) -> None:
        """Apply ``command`` and write the new state through.

        Commands that change nothing (e.g. an unknown operation id) leave the
        version and the persisted copy untouched.
        """
        if expected_version is not None and expected_version != self._state.version:
            raise ConcurrentModificationError(expected_version, self._state.version)

        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported store command: {type(command).__name__}")

        current = self._state
        updated = handler(current, command)
        if updated == current:
            logger.debug("%s was a no-op", type(command).__name__)
            return

        self._state = updated.model_copy(update={"version": current.version + 1})
        logger.debug("Applied %s (version %d)", type(command).__name__, self._state.version)
        self._persist()

    # ------------------------------------------------------------------
    # Report actions
    # ------------------------------------------------------------------

    def set_client_info(self, **fields: Any) -> None:
        self.dispatch(SetClientInfo(fields=fields))

    def load_report(self, report: Report) -> None:
        self.dispatch(LoadReport(report=report))

    def save_current_report(self) -> None:
        self.dispatch(SaveCurrentReport())

    def create_new_report(self) -> None:
        self.dispatch(CreateNewReport())

    def update_settings(self, **fields: Any) -> None:
        self.dispatch(UpdateSettings(fields=fields))

    # ------------------------------------------------------------------
    # Operation actions
    # ------------------------------------------------------------------

    def add_operation(self, **overrides: Any) -> None:
        self.dispatch(AddOperation(overrides=overrides))

    def update_operation(self, operation_id: str, **changes: Any) -> None:
        self.dispatch(UpdateOperation(operation_id=operation_id, fields=changes))

    def remove_operation(self, operation_id: str) -> None:
        self.dispatch(RemoveOperation(operation_id=operation_id))

    def duplicate_operation(self, operation_id: str) -> None:
        self.dispatch(DuplicateOperation(operation_id=operation_id))

    # ------------------------------------------------------------------
    # Calculations (pull-based, against the current report)
    # ------------------------------------------------------------------

    def calculator(self) -> ROICalculator:
        return ROICalculator(self.report)

    def calculate_roi(self, op: Operation) -> ROIResult:
        return formulas.calculate_roi(op, self._state.report)

    def calculate_total_summary(self) -> ReportSummary:
        return formulas.calculate_total_summary(self._state.report)

    # ------------------------------------------------------------------
    # Command handlers: (state, command) -> new state
    # ------------------------------------------------------------------

    @staticmethod
    def _with_report(state: ROIState, report: Report) -> ROIState:
        return state.model_copy(update={"report": report})

    def _set_client_info(self, state: ROIState, command: SetClientInfo) -> ROIState:
        return self._with_report(state, state.report.merged(command.fields))

    def _load_report(self, state: ROIState, command: LoadReport) -> ROIState:
        return self._with_report(state, command.report.model_copy(deep=True))

    def _save_current_report(self, state: ROIState, command: SaveCurrentReport) -> ROIState:
        report = state.report.model_copy(deep=True)
        saved = list(state.saved_reports)
        idx = next((i for i, r in enumerate(saved) if r.id == report.id), None)
        if idx is None:
            saved.append(report)
        else:
            saved[idx] = report
        return state.model_copy(update={"saved_reports": saved})

    def _create_new_report(self, state: ROIState, command: CreateNewReport) -> ROIState:
        # Numbered from the saved count, so an unsaved report's number is reused.
        sequence = len(state.saved_reports) + 1
        report = new_report(self._new_id(), sequence=sequence, now=self._clock())
        logger.info("Created report %s", report.report_number)
        return self._with_report(state, report)

    def _update_settings(self, state: ROIState, command: UpdateSettings) -> ROIState:
        settings = state.report.settings.merged(command.fields)
        return self._with_report(state, state.report.model_copy(update={"settings": settings}))

    def _replace_operations(self, state: ROIState, operations: list[Operation]) -> ROIState:
        return self._with_report(state, state.report.model_copy(update={"operations": operations}))

    def _add_operation(self, state: ROIState, command: AddOperation) -> ROIState:
        op = build_operation(self._new_id(), dict(command.overrides))
        return self._replace_operations(state, [*state.report.operations, op])

    def _update_operation(self, state: ROIState, command: UpdateOperation) -> ROIState:
        changes = Operation.normalize_keys(command.fields)
        if changes.pop("id", None) is not None:
            logger.warning("Ignoring id change for operation %s", command.operation_id)

        operations = [
            op.merged(changes) if op.id == command.operation_id else op
            for op in state.report.operations
        ]
        return self._replace_operations(state, operations)

    def _remove_operation(self, state: ROIState, command: RemoveOperation) -> ROIState:
        operations = [op for op in state.report.operations if op.id != command.operation_id]
        return self._replace_operations(state, operations)

    def _duplicate_operation(self, state: ROIState, command: DuplicateOperation) -> ROIState:
        source = state.report.find_operation(command.operation_id)
        if source is None:
            return state
        suffix = DUPLICATE_SUFFIX[state.report.settings.language]
        clone = source.model_copy(
            update={"id": self._new_id(), "name": source.name + suffix},
            deep=True,
        )
        return self._replace_operations(state, [*state.report.operations, clone])

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _rehydrate(self) -> Optional[ROIState]:
        if self._adapter is None:
            return None
        try:
            raw = self._adapter.load(self._namespace)
        except PersistenceError:
            logger.warning("Could not load namespace %s, starting fresh", self._namespace, exc_info=True)
            return None
        if raw is None:
            return None
        try:
            state = ROIState.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding invalid persisted state in %s: %d errors",
                self._namespace,
                e.error_count(),
            )
            return None
        logger.info(
            "Rehydrated report %s with %d saved reports",
            state.report.report_number,
            len(state.saved_reports),
        )
        return state

    def _persist(self) -> None:
        if self._adapter is None:
            return
        try:
            self._adapter.save(self._namespace, self._state.to_document())
        except Exception:
            logger.exception("Failed to persist namespace %s", self._namespace)
