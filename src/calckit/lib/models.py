"""Data models for calckit calculations.

Typed dataclasses that replace raw dict access for the distance scenario
and the discount rules. Mappings are validated before construction and
raise clear errors on missing or invalid fields.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping

from calckit.exceptions import InvalidScenarioError
from calckit.lib import config


# ---------------------------------------------------------------------------
# Scenario model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Scenario:
    """Forces and timing for a two-phase acceleration problem.

    Attributes:
        primary_force: Force acting from time zero.
        secondary_force: Extra force that starts acting after ``delay``.
        mass: Mass of the body; must be positive.
        delay: Time at which the secondary force kicks in.
    """

    primary_force: float
    secondary_force: float
    mass: float
    delay: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Scenario:
        """Build from a snake_case or camelCase mapping.

        Args:
            data: Mapping with ``primary_force``/``primaryForce``,
                ``secondary_force``/``secondaryForce``, ``mass`` and ``delay``.

        Returns:
            Validated Scenario instance.

        Raises:
            InvalidScenarioError: If the mapping fails validation.
        """
        errors = validate_scenario(data)
        if errors:
            raise InvalidScenarioError(errors)
        normalized = _normalize_keys(data)
        return cls(
            primary_force=normalized["primary_force"],
            secondary_force=normalized["secondary_force"],
            mass=normalized["mass"],
            delay=normalized["delay"],
        )


def _normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    aliases = config.scenario_aliases()
    return {aliases.get(key, key): value for key, value in data.items()}


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_scenario(data: Any) -> list[str]:
    """Validate the structure of a scenario mapping.

    Returns a list of human-readable error strings (empty = valid).

    Args:
        data: The candidate scenario mapping.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not isinstance(data, Mapping):
        errors.append(config.message("scenario_not_mapping", type_name=type(data).__name__))
        return errors

    normalized = _normalize_keys(data)
    for field_name in config.scenario_fields():
        if field_name not in normalized:
            errors.append(config.message("missing_field", field=field_name))
            continue
        value = normalized[field_name]
        if not _is_number(value) or (isinstance(value, float) and math.isnan(value)):
            errors.append(
                config.message(
                    "non_numeric_field", field=field_name, type_name=type(value).__name__
                )
            )

    mass = normalized.get("mass")
    if _is_number(mass) and mass <= 0:
        errors.append(config.message("non_positive_mass", value=mass))

    delay = normalized.get("delay")
    if _is_number(delay) and delay < 0:
        errors.append(config.message("negative_delay", value=delay))

    return errors


# ---------------------------------------------------------------------------
# Discount rule model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DiscountRule:
    """A single threshold deduction.

    Attributes:
        name: Identifier for the rule.
        field: Input the rule looks at (``value`` or ``quantity``).
        threshold: The rule fires when the input is strictly above this.
        deduction: Amount subtracted from the price when the rule fires.
    """

    name: str
    field: str
    threshold: float
    deduction: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DiscountRule:
        """Build from a raw rule mapping (e.g. an entry of pricing.rules).

        Raises:
            ValueError: If ``field`` is not a known discount input.
        """
        name = data["name"]
        field_name = data["field"]
        if field_name not in config.rule_fields():
            raise ValueError(config.message("invalid_rule_field", name=name, field=field_name))
        return cls(
            name=name,
            field=field_name,
            threshold=data["threshold"],
            deduction=data["deduction"],
        )

    def applies(self, inputs: Mapping[str, float]) -> bool:
        """Return True when this rule's input exceeds its threshold."""
        return inputs[self.field] > self.threshold


def default_discount_rules() -> tuple[DiscountRule, ...]:
    """Return the discount rules declared in defaults.yaml, in order."""
    return tuple(DiscountRule.from_dict(raw) for raw in config.pricing_rules())
