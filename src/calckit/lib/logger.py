"""logger — JSONL calculation telemetry.

Each engine call made with a log directory appends a single JSON line to a
log file inside that directory.  Every entry captures the operation name, its
inputs, the result (or the error message), the status and timing.  The log
file name and formatting constants are read from ``config/defaults.yaml``.
"""

from __future__ import annotations

import datetime
import json
import os
from typing import Any

from calckit.lib import config


def log_calculation(
    log_dir: str,
    operation: str,
    inputs: dict[str, Any],
    result: Any,
    status: str,
    elapsed_ms: float,
) -> None:
    """Write a JSONL log entry for a calculation.

    Args:
        log_dir: Directory to write the log file in. Empty disables logging.
        operation: Name of the operation that ran.
        inputs: Arguments the operation was called with.
        result: The calculated value, or the error message on failure.
        status: 'ok' or 'error'.
        elapsed_ms: Duration of the calculation in milliseconds.
    """
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    fmt = config.telemetry_format()
    log_path = os.path.join(log_dir, fmt.filename)

    entry: dict[str, Any] = {
        "timestamp": (
            datetime.datetime.now(datetime.timezone.utc)
            .isoformat()
            .replace(fmt.utc_offset_source, fmt.utc_offset_replacement)
        ),
        "event": fmt.event,
        "operation": operation,
        "inputs": inputs,
        "result": result,
        "status": status,
        "elapsed_ms": elapsed_ms,
    }

    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(json.dumps(entry, separators=fmt.json_separators, default=str) + "\n")
