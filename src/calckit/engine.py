"""calckit engine — thin orchestrator over the calculators.

Looks up a calculation by name, runs it, times it and returns a structured
result. This is the entry point for callers that want telemetry; the
calculators in ``calckit.lib`` stay pure and can be called directly.

Design notes:
    The engine never does arithmetic itself. Arithmetic and type failures
    raised inside a calculator are wrapped in CalculationError so callers
    handle one exception type. Scenario validation errors are not wrapped:
    InvalidScenarioError already describes what is wrong with the input.
"""

from __future__ import annotations

import dataclasses
import inspect
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from calckit.exceptions import CalculationError, UnknownOperationError
from calckit.lib import config
from calckit.lib.kinematics import distance_travelled
from calckit.lib.logger import log_calculation
from calckit.lib.pricing import discount


@dataclass
class CalculationResult:
    """Result of running one calculation through the engine."""

    operation: str
    inputs: dict[str, Any] = field(default_factory=dict)
    result: Any = None
    status: str = ""
    elapsed_ms: float = 0.0


_OPERATIONS: dict[str, Callable[..., Any]] = {
    "discount": discount,
    "distance_travelled": distance_travelled,
}


def _serialize(value: Any) -> Any:
    """Convert dataclasses (Scenario, DiscountRule) into plain data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


def calculate(
    operation: str,
    *args: Any,
    log_dir: str = "",
    **kwargs: Any,
) -> CalculationResult:
    """Run a named calculation and return a structured result.

    Args:
        operation: 'discount' or 'distance_travelled'.
        *args: Positional arguments for the calculator.
        log_dir: Directory for JSONL telemetry. Empty disables logging.
        **kwargs: Keyword arguments for the calculator.

    Returns:
        CalculationResult with the value, inputs and timing.

    Raises:
        UnknownOperationError: If ``operation`` is not registered.
        TypeError: If the arguments do not match the calculator signature.
        InvalidScenarioError: If a scenario mapping fails validation.
        CalculationError: If the calculator fails with an arithmetic
            or type error.
    """
    if operation not in _OPERATIONS:
        raise UnknownOperationError(operation, sorted(_OPERATIONS))
    func = _OPERATIONS[operation]

    bound = inspect.signature(func).bind(*args, **kwargs)
    inputs = {name: _serialize(val) for name, val in bound.arguments.items()}

    status_ok = config.status("ok")
    status_error = config.status("error")
    precision = config.elapsed_precision()

    start = time.perf_counter()
    try:
        value = func(*bound.args, **bound.kwargs)
    except (ArithmeticError, TypeError) as exc:
        elapsed_ms = round((time.perf_counter() - start) * 1000, precision)
        error = CalculationError(operation, exc)
        log_calculation(log_dir, operation, inputs, str(error), status_error, elapsed_ms)
        raise error from exc
    elapsed_ms = round((time.perf_counter() - start) * 1000, precision)

    log_calculation(log_dir, operation, inputs, value, status_ok, elapsed_ms)

    return CalculationResult(
        operation=operation,
        inputs=inputs,
        result=value,
        status=status_ok,
        elapsed_ms=elapsed_ms,
    )
