"""Per-turn guidance: targeting, proportional navigation and the shield guard.

Public API
----------
navigate            - full decision for one pod for one turn
Command             - steer point + action (+ computed thrust)
Thrust, Boost, Shield - propulsion actions
prioritize_opponent - pick the leading opponent
"""

from pod_racer.guidance.actions import Action, Boost, Command, Shield, Thrust
from pod_racer.guidance.engine import navigate
from pod_racer.guidance.prioritizer import prioritize_opponent

__all__ = [
    "Action",
    "Boost",
    "Command",
    "Shield",
    "Thrust",
    "navigate",
    "prioritize_opponent",
]
