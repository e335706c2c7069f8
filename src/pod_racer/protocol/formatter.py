"""Render commands as host protocol lines."""

from __future__ import annotations

from pod_racer.guidance.actions import Action, Boost, Command, Shield, Thrust

BOOST_TOKEN = "BOOST"
SHIELD_TOKEN = "SHIELD"


def format_action(action: Action, max_thrust: float = 100.0) -> str:
    """Thrust as an integer in ``[0, max_thrust]``, or the boost/shield token."""
    if isinstance(action, Boost):
        return BOOST_TOKEN
    if isinstance(action, Shield):
        return SHIELD_TOKEN
    if isinstance(action, Thrust):
        return str(int(round(min(max(action.magnitude, 0.0), max_thrust))))
    raise TypeError(f"Unknown action: {action!r}")


def format_command(command: Command, max_thrust: float = 100.0) -> str:
    """``"<x> <y> <action>"`` with the steer point rounded to integers."""
    x = int(round(command.steer_point.x))
    y = int(round(command.steer_point.y))
    return f"{x} {y} {format_action(command.action, max_thrust)}"
