"""Custom exceptions for calckit.

Defines the exception hierarchy used by the models and the engine. All
exceptions are importable from the top-level ``calckit`` package.

Exceptions:
    InvalidScenarioError — Raised when a scenario mapping fails
        validation. Subclasses ValueError.
    UnknownOperationError — Raised by the engine for an unregistered
        operation name. Subclasses KeyError.
    CalculationError — Raised by the engine when a calculation fails
        with an arithmetic or type error. Wraps the original exception.
"""

from __future__ import annotations

from calckit.lib import config


class InvalidScenarioError(ValueError):
    """Raised when a scenario mapping fails structural validation.

    Carries every validation error, not just the first, so callers can
    report them together.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize with validation errors.

        Args:
            errors: Human-readable validation messages.
        """
        self.errors = errors
        sep = config.message("error_separator")
        super().__init__(config.message("invalid_scenario", errors=sep.join(errors)))


class UnknownOperationError(KeyError):
    """Raised when the engine is asked for an operation it does not know."""

    def __init__(self, operation: str, choices: list[str]) -> None:
        self.operation = operation
        self.choices = choices
        super().__init__(
            config.message(
                "unknown_operation", operation=operation, choices=", ".join(choices)
            )
        )

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument.
        return str(self.args[0])


class CalculationError(Exception):
    """Raised when a calculation fails inside the engine.

    Captures the operation name and the underlying error for diagnostics.
    """

    def __init__(self, operation: str, original_error: Exception) -> None:
        """Initialize with calculation failure details.

        Args:
            operation: Name of the operation that failed.
            original_error: The underlying exception.
        """
        self.operation = operation
        self.original_error = original_error
        super().__init__(
            config.message("calculation_error", operation=operation, error=original_error)
        )
