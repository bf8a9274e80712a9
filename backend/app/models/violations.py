"""Violation models - advisories found while verifying a schedule."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# JSON-serializable value types for violation details
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class ViolationSeverity(str, Enum):
    """Severity levels for schedule violations."""

    ADVISORY = "advisory"
    BLOCKING = "blocking"


class ViolationKind(str, Enum):
    """Categories of schedule checks."""

    FEASIBILITY = "feasibility"
    TIMING = "timing"


class Violation(BaseModel):
    """A schedule concern detected during verification.

    The scheduler always produces a best-effort plan; violations let the UI
    flag segments the user should double-check.
    """

    kind: ViolationKind
    code: str  # Machine-usable short code, e.g., "DAY_OVERRUN"
    message: str  # Human-readable description (1-2 sentences)
    severity: ViolationSeverity
    affected_item_ids: list[str]  # ItineraryItem.id values
    details: dict[str, JsonValue] = Field(default_factory=dict)
