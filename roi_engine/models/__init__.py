from .enums import Category, Currency, FrequencyUnit, Language, TimeUnit
from .operation import (
    DEFAULT_INPUT_TOKEN_SHARE,
    HiringData,
    LOCAction,
    Operation,
    TokenCosts,
    build_operation,
    default_operation_data,
)
from .report import (
    GlobalSettings,
    Report,
    ROIState,
    TransformationBreakdown,
    default_settings,
    format_report_number,
    new_report,
)

__all__ = [
    "Category",
    "Currency",
    "FrequencyUnit",
    "Language",
    "TimeUnit",
    "DEFAULT_INPUT_TOKEN_SHARE",
    "HiringData",
    "LOCAction",
    "Operation",
    "TokenCosts",
    "build_operation",
    "default_operation_data",
    "GlobalSettings",
    "Report",
    "ROIState",
    "TransformationBreakdown",
    "default_settings",
    "format_report_number",
    "new_report",
]
