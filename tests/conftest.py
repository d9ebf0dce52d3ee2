"""Shared fixtures for the calckit test suite."""

from __future__ import annotations

from typing import Any

import pytest

from calckit.lib import config
from calckit.lib.models import Scenario


@pytest.fixture()
def scenario_dict() -> dict[str, Any]:
    """Return the reference scenario in camelCase form."""
    return {"primaryForce": 10, "secondaryForce": 20, "mass": 5, "delay": 2}


@pytest.fixture()
def scenario() -> Scenario:
    """Return the reference scenario as a Scenario instance."""
    return Scenario(primary_force=10, secondary_force=20, mass=5, delay=2)


@pytest.fixture()
def swap_defaults(tmp_path, monkeypatch):
    """Point calckit.lib.config at a YAML document written by the test."""

    def _write(text: str) -> None:
        path = tmp_path / "defaults.yaml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setattr(config, "_CONFIG_FILE", path)
        config.reset()

    yield _write
    config.reset()
