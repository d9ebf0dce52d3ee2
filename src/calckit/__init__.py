"""calckit — small pure calculators for pricing and kinematics.

Stable public API:
    discount: Apply threshold deductions to a unit price.
    distance_travelled: Distance covered under two-phase acceleration.
    Scenario: Frozen dataclass describing the forces and timing.
    DiscountRule: Frozen dataclass for a single threshold deduction.
    validate_scenario: Structural validation for scenario mappings.
    calculate: Run a calculation by name with timing and telemetry.
    CalculationResult: Dataclass returned by calculate.
    InvalidScenarioError, UnknownOperationError, CalculationError:
        Exceptions raised by the models and the engine.
"""

__version__ = "0.1.0"

from calckit.engine import CalculationResult, calculate
from calckit.exceptions import (
    CalculationError,
    InvalidScenarioError,
    UnknownOperationError,
)
from calckit.lib.kinematics import distance_travelled
from calckit.lib.models import DiscountRule, Scenario, validate_scenario
from calckit.lib.pricing import discount

__all__ = [
    "__version__",
    "discount",
    "distance_travelled",
    "Scenario",
    "DiscountRule",
    "validate_scenario",
    "calculate",
    "CalculationResult",
    "InvalidScenarioError",
    "UnknownOperationError",
    "CalculationError",
]
