"""config — packaged calckit settings, read through typed accessors.

``config/defaults.yaml`` holds the discount rules, the scenario field names,
the engine statuses, the telemetry format and every message template.  It is
parsed on first use and the parsed mapping is the only cache: ``reset()``
drops it, and every accessor below re-reads from the fresh copy.

Each accessor names the section it reads, so a typo in a key or a wrongly
typed value in the YAML fails at the call-site with a KeyError or TypeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_DEFAULTS: dict[str, Any] | None = None

_CONFIG_FILE = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"


@dataclass(frozen=True)
class TelemetryFormat:
    """How a JSONL telemetry line is named and rendered.

    Attributes:
        filename: Log file created inside the log directory.
        event: Value of the ``event`` key on every line.
        utc_offset_source: Offset suffix produced by ``isoformat()``.
        utc_offset_replacement: Suffix written instead (``Z``).
        json_separators: Item and key separators passed to ``json.dumps``.
    """

    filename: str
    event: str
    utc_offset_source: str
    utc_offset_replacement: str
    json_separators: tuple[str, str]


def load_defaults() -> dict[str, Any]:
    """Parse defaults.yaml once and return the cached mapping.

    Raises:
        FileNotFoundError: If defaults.yaml is missing.
        yaml.YAMLError: If defaults.yaml contains invalid YAML.
        TypeError: If the top level is not a mapping.
    """
    global _DEFAULTS  # noqa: PLW0603
    if _DEFAULTS is None:
        with open(_CONFIG_FILE, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if not isinstance(data, dict):
            msg = f"defaults.yaml must be a YAML mapping, got {type(data).__name__}"
            raise TypeError(msg)
        _DEFAULTS = data
    return _DEFAULTS


def _entry(section: str, key: str, expected: type) -> Any:
    block = load_defaults().get(section)
    if not isinstance(block, dict) or key not in block:
        raise KeyError(f"defaults.yaml has no {section}.{key}")
    value = block[key]
    if not isinstance(value, expected) or isinstance(value, bool):
        msg = (
            f"{section}.{key} must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )
        raise TypeError(msg)
    return value


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------


def pricing_rules() -> list[dict[str, Any]]:
    """Return the raw discount rule mappings, in evaluation order."""
    return _entry("pricing", "rules", list)


def rule_fields() -> list[str]:
    """Return the discount inputs a rule may target."""
    return _entry("pricing", "rule_fields", list)


# ---------------------------------------------------------------------------
# Scenario
# ---------------------------------------------------------------------------


def scenario_fields() -> list[str]:
    """Return the snake_case fields every scenario must carry."""
    return _entry("scenario", "required_fields", list)


def scenario_aliases() -> dict[str, str]:
    """Return the camelCase to snake_case key map for scenario mappings."""
    return _entry("scenario", "aliases", dict)


# ---------------------------------------------------------------------------
# Engine and telemetry
# ---------------------------------------------------------------------------


def status(name: str) -> str:
    """Return the status label for ``name`` ('ok' or 'error')."""
    return _entry("engine", "statuses", dict)[name]


def elapsed_precision() -> int:
    """Return the number of decimals kept on elapsed milliseconds."""
    return _entry("engine", "elapsed_precision", int)


def telemetry_format() -> TelemetryFormat:
    separators = _entry("telemetry", "json_separators", list)
    return TelemetryFormat(
        filename=_entry("telemetry", "filename", str),
        event=_entry("telemetry", "event", str),
        utc_offset_source=_entry("telemetry", "utc_offset_source", str),
        utc_offset_replacement=_entry("telemetry", "utc_offset_replacement", str),
        json_separators=(separators[0], separators[1]),
    )


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def message(name: str, /, **fields: Any) -> str:
    """Render the message template ``messages.<name>`` with ``fields``.

    Raises:
        KeyError: If there is no such template, or it needs a field
            that was not supplied.
    """
    return _entry("messages", name, str).format(**fields)


def reset() -> None:
    """Drop the parsed defaults so the next accessor re-reads the file."""
    global _DEFAULTS  # noqa: PLW0603
    _DEFAULTS = None
