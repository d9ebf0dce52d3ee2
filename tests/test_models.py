"""Unit tests for calckit.lib.models typed dataclasses."""

from __future__ import annotations

import dataclasses

import pytest

from calckit.exceptions import InvalidScenarioError
from calckit.lib.models import (
    DiscountRule,
    Scenario,
    default_discount_rules,
    validate_scenario,
)


class TestScenario:
    """Tests for Scenario dataclass."""

    def test_from_dict_camel_case(self, scenario_dict) -> None:
        """camelCase keys map onto snake_case fields."""
        sc = Scenario.from_dict(scenario_dict)
        assert sc == Scenario(primary_force=10, secondary_force=20, mass=5, delay=2)

    def test_from_dict_snake_case(self) -> None:
        """snake_case keys are used as-is."""
        sc = Scenario.from_dict(
            {"primary_force": 1.5, "secondary_force": 0, "mass": 3, "delay": 0.5}
        )
        assert sc.primary_force == 1.5
        assert sc.delay == 0.5

    def test_frozen(self, scenario) -> None:
        """Scenario is immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            scenario.mass = 10  # type: ignore[misc]

    def test_from_dict_invalid_raises(self) -> None:
        """Invalid data raises InvalidScenarioError with every error."""
        with pytest.raises(InvalidScenarioError) as exc_info:
            Scenario.from_dict({"primaryForce": 10, "mass": 0})
        assert len(exc_info.value.errors) == 3


class TestValidateScenario:
    """Tests for validate_scenario."""

    def test_valid(self, scenario_dict) -> None:
        """Reference scenario has no errors."""
        assert validate_scenario(scenario_dict) == []

    def test_not_a_mapping(self) -> None:
        """Non-mapping returns a single error."""
        errors = validate_scenario([1, 2, 3])
        assert len(errors) == 1
        assert "list" in errors[0]

    def test_missing_fields(self) -> None:
        """Each missing field is reported."""
        errors = validate_scenario({"mass": 1})
        assert len(errors) == 3
        assert any("primary_force" in e for e in errors)

    def test_non_numeric(self, scenario_dict) -> None:
        """Strings are rejected."""
        scenario_dict["delay"] = "2"
        errors = validate_scenario(scenario_dict)
        assert errors == ["'delay' must be a number, got str"]

    def test_bool_rejected(self, scenario_dict) -> None:
        """Booleans are not numbers here."""
        scenario_dict["mass"] = True
        assert len(validate_scenario(scenario_dict)) == 1

    def test_nan_rejected(self, scenario_dict) -> None:
        """NaN is not a usable number."""
        scenario_dict["primaryForce"] = float("nan")
        assert len(validate_scenario(scenario_dict)) == 1

    def test_non_positive_mass(self, scenario_dict) -> None:
        """Mass must be above zero."""
        scenario_dict["mass"] = -1
        errors = validate_scenario(scenario_dict)
        assert errors == ["'mass' must be greater than zero, got -1"]

    def test_negative_delay(self, scenario_dict) -> None:
        """Delay may be zero but not negative."""
        scenario_dict["delay"] = 0
        assert validate_scenario(scenario_dict) == []
        scenario_dict["delay"] = -0.5
        assert len(validate_scenario(scenario_dict)) == 1


class TestDiscountRule:
    """Tests for DiscountRule dataclass."""

    def test_from_dict(self) -> None:
        """All fields populated from dict."""
        rule = DiscountRule.from_dict(
            {"name": "r", "field": "quantity", "threshold": 10, "deduction": 3}
        )
        assert rule == DiscountRule(name="r", field="quantity", threshold=10, deduction=3)

    def test_unknown_field_rejected(self) -> None:
        """Rules may only target value or quantity."""
        with pytest.raises(ValueError, match="price"):
            DiscountRule.from_dict(
                {"name": "r", "field": "price", "threshold": 10, "deduction": 3}
            )

    def test_applies_is_strict(self) -> None:
        """The threshold itself does not trigger the rule."""
        rule = DiscountRule(name="r", field="value", threshold=50, deduction=2)
        assert not rule.applies({"value": 50, "quantity": 0})
        assert rule.applies({"value": 50.01, "quantity": 0})

    def test_default_rules(self) -> None:
        """defaults.yaml declares the value and quantity rules in order."""
        rules = default_discount_rules()
        assert [(r.field, r.threshold, r.deduction) for r in rules] == [
            ("value", 50, 2),
            ("quantity", 100, 1),
        ]
