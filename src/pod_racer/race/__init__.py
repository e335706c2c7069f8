"""Race state: pods, per-turn snapshots and track geometry.

Public API
----------
Role            - racer / attacker targeting policy
Pod             - one pod's kinematic state
PodSnapshot     - one pod's per-turn reading
Track           - cyclic waypoint sequence

The per-turn :class:`~pod_racer.race.controller.RaceController` is imported
from its own module.
"""

from pod_racer.race.models import Pod, PodSnapshot, Role, Track

__all__ = ["Pod", "PodSnapshot", "Role", "Track"]
