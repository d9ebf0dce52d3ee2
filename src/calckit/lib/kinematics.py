"""kinematics — distance covered under two phases of constant acceleration.

The primary force accelerates the body from rest at time zero.  Once
``delay`` has elapsed the secondary force joins in; from then on the body
keeps the velocity it reached in the first phase and accelerates under the
combined force.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from calckit.lib.models import Scenario


def _as_scenario(scenario: Union[Scenario, Mapping[str, Any]]) -> Scenario:
    if isinstance(scenario, Scenario):
        return scenario
    return Scenario.from_dict(scenario)


def distance_travelled(
    scenario: Union[Scenario, Mapping[str, Any]],
    time: float,
) -> float:
    """Return the distance travelled after ``time`` units.

    Args:
        scenario: A Scenario, or a mapping accepted by Scenario.from_dict.
        time: Elapsed time since the primary force started acting.

    Returns:
        Distance from the starting point.

    Raises:
        InvalidScenarioError: If a mapping scenario fails validation.
    """
    sc = _as_scenario(scenario)

    primary_acc = sc.primary_force / sc.mass
    primary_time = min(time, sc.delay)
    result = 0.5 * primary_acc * primary_time * primary_time

    secondary_time = time - sc.delay
    if secondary_time > 0:
        primary_velocity = primary_acc * sc.delay
        secondary_acc = (sc.primary_force + sc.secondary_force) / sc.mass
        result += (
            primary_velocity * secondary_time
            + 0.5 * secondary_acc * secondary_time * secondary_time
        )
    return result
