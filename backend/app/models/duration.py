"""Duration models - tagged union over the shapes providers send."""

import math
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class Minutes(BaseModel):
    """Duration already expressed in minutes."""

    kind: Literal["minutes"] = "minutes"
    value: int = Field(..., ge=0)


class IsoDuration(BaseModel):
    """ISO-8601 duration string, e.g. ``PT2H30M``."""

    kind: Literal["iso"] = "iso"
    value: str


class FreeText(BaseModel):
    """Free-text duration, e.g. ``2 hours 15 min``."""

    kind: Literal["text"] = "text"
    value: str


Duration = Annotated[Minutes | IsoDuration | FreeText, Field(discriminator="kind")]


def coerce_duration(raw: Any) -> Any:
    """Wrap a raw provider duration into a Duration union member.

    Numbers become Minutes, strings starting with ``P`` become IsoDuration,
    any other string becomes FreeText. Dicts and model instances pass through
    unchanged so pydantic can validate them against the discriminator.

    Args:
        raw: Value as received from an untyped provider payload

    Returns:
        Duration model, dict for pydantic validation, or None
    """
    if raw is None or isinstance(raw, Minutes | IsoDuration | FreeText | dict):
        return raw

    # bool is an int subclass but never a duration
    if isinstance(raw, bool):
        return None

    if isinstance(raw, int | float):
        # NaN and infinities carry no duration
        if not math.isfinite(raw):
            return None
        return Minutes(value=max(0, int(raw)))

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if text.upper().startswith("P"):
            return IsoDuration(value=text)
        return FreeText(value=text)

    return raw
