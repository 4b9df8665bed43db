"""Demo settings models.

This module defines the density tier enum and the DemoSettings model
that a session is initialized with.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

from dealease_demo.errors import InvalidArgumentError

# Validation context for records read back from storage or an import.
# Defaults fill in for in-code construction only; on the wire every key
# must be written out.
WIRE_CONTEXT: dict[str, Any] = {"complete": True}


class DensityTier(str, Enum):
    """Named generation-volume preset.

    Determines how many synthetic records are generated. Has no other
    semantics.
    """

    light = "light"
    medium = "medium"
    heavy = "heavy"


def parse_density(value: DensityTier | str) -> DensityTier:
    """Resolve user input into a DensityTier.

    Args:
        value: A DensityTier or its string value.

    Returns:
        The matching DensityTier.

    Raises:
        InvalidArgumentError: If the value is not a known tier.

    Example:
        >>> parse_density("light")
        <DensityTier.light: 'light'>
    """
    if isinstance(value, DensityTier):
        return value
    try:
        return DensityTier(value)
    except ValueError:
        raise InvalidArgumentError(
            "density",
            value,
            allowed=[tier.value for tier in DensityTier],
        ) from None


class DemoSettings(BaseModel):
    """Settings of a demo session.

    Attributes:
        data_density: Generation volume tier.
        auto_generate_activity: Host may schedule simulated activity.
        simulate_real_time: Anchor generated timestamps to "now".
        enable_notifications: Host may surface demo notifications.

    Example:
        >>> settings = DemoSettings(data_density=DensityTier.light)
        >>> settings.model_dump(by_alias=True)["dataDensity"]
        <DensityTier.light: 'light'>
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        # Defaults are for in-code construction; documents must carry every key.
        json_schema_extra={
            "required": [
                "dataDensity",
                "autoGenerateActivity",
                "simulateRealTime",
                "enableNotifications",
            ]
        },
    )

    data_density: DensityTier = Field(
        default=DensityTier.medium,
        description="Generation volume tier",
    )
    auto_generate_activity: bool = Field(
        default=True,
        description="Allow the host to schedule simulated activity",
    )
    simulate_real_time: bool = Field(
        default=True,
        description="Anchor generated timestamps to the current time",
    )
    enable_notifications: bool = Field(
        default=True,
        description="Allow the host to surface demo notifications",
    )

    @model_validator(mode="before")
    @classmethod
    def _require_all_keys_on_wire(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context or {}).get("complete") or not isinstance(data, dict):
            return data
        missing = [
            field.alias or name
            for name, field in cls.model_fields.items()
            if name not in data and (field.alias or name) not in data
        ]
        if missing:
            raise ValueError(f"missing settings keys: {', '.join(missing)}")
        return data
