"""Operation record: one manual, repeatable business activity."""

from __future__ import annotations

import copy
from typing import Any, Optional

from pydantic import ConfigDict, Field

from .base import DocumentModel
from .enums import Category, FrequencyUnit, TimeUnit

# Share of tokens billed at the input price when the record does not say otherwise.
DEFAULT_INPUT_TOKEN_SHARE = 0.7


class LOCAction(DocumentModel):
    """A recurring lost-opportunity cost event tied to an operation."""

    id: str
    name: str = ""
    events_per_month: float = 0
    avg_cost_per_event: float = 0


class TokenCosts(DocumentModel):
    """AI inference spend for an automated operation."""

    model_config = ConfigDict(protected_namespaces=())

    monthly_api_calls: float = 0
    avg_tokens_per_call: float = 0
    input_price_per_m_token: float = 0
    output_price_per_m_token: float = 0
    model_name: str = ""
    input_token_share: float = DEFAULT_INPUT_TOKEN_SHARE


class HiringData(DocumentModel):
    """Headcount that has to be hired for the operation to keep running."""

    count: int = 0
    employee_gross: float = 0
    employer_gross: float = 0
    use_standard_employer_cost: bool = True
    recruitment_cost: float = 0
    onboarding_cost: float = 0
    new_employee_errors_cost: float = 0
    bad_recruitment_cost: float = 0
    team_expansion_cost: float = 0  # informational only


class Operation(DocumentModel):
    """A manual process evaluated for automation.

    ``automation_percent``, ``human_in_loop_percent``, ``implementation_difficulty``
    and ``loc_multiplier`` are carried on the record but do not enter any
    formula.
    """

    id: str
    name: str
    category: Category = Category.OPERATIONS

    # Labor cost
    employee_count: int
    avg_hourly_rate: float
    employer_cost_enabled: bool = True

    # Frequency & duration
    frequency: float
    frequency_unit: FrequencyUnit = FrequencyUnit.DAY
    time_per_execution: float
    time_unit: TimeUnit = TimeUnit.MINUTES

    # Optimization
    efficiency_gain: float
    implementation_difficulty: int = 5
    automation_percent: float = 0
    human_in_loop_percent: float = 0

    # Lost opportunity cost
    loc_enabled: bool = False
    loc_actions: list[LOCAction] = Field(default_factory=list)
    loc_multiplier: float = 1

    # AI token costs
    token_costs_enabled: bool = False
    token_costs: Optional[TokenCosts] = None

    # Hiring
    hiring_enabled: bool = False
    hiring: Optional[HiringData] = None


_DEFAULT_OPERATION: dict[str, Any] = {
    "name": "Nowa operacja",
    "category": Category.OPERATIONS,
    "employee_count": 1,
    "avg_hourly_rate": 50,
    "employer_cost_enabled": True,
    "frequency": 1,
    "frequency_unit": FrequencyUnit.DAY,
    "time_per_execution": 15,
    "time_unit": TimeUnit.MINUTES,
    "efficiency_gain": 0.7,
    "implementation_difficulty": 5,
    "loc_enabled": False,
    "loc_actions": [],
    "loc_multiplier": 1,
    "automation_percent": 70,
    "human_in_loop_percent": 20,
    "token_costs_enabled": False,
    "token_costs": {
        "monthly_api_calls": 1000,
        "avg_tokens_per_call": 2000,
        "input_price_per_m_token": 2.5,
        "output_price_per_m_token": 10,
        "model_name": "GPT-4o",
    },
    "hiring_enabled": False,
    "hiring": {
        "count": 1,
        "employee_gross": 5000,
        "employer_gross": 6020,
        "use_standard_employer_cost": True,
        "recruitment_cost": 0,
        "onboarding_cost": 0,
        "new_employee_errors_cost": 0,
        "bad_recruitment_cost": 0,
        "team_expansion_cost": 0,
    },
}


def default_operation_data() -> dict[str, Any]:
    """Return a fresh copy of the template every new operation starts from."""
    return copy.deepcopy(_DEFAULT_OPERATION)


def build_operation(operation_id: str, overrides: Optional[dict[str, Any]] = None) -> Operation:
    """Template merged with ``overrides``; ``operation_id`` always wins."""
    data = default_operation_data()
    data.update(Operation.normalize_keys(overrides or {}))
    data["id"] = operation_id
    return Operation.model_validate(data)
