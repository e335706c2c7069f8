"""RaceController — owns the friendly pods and issues each turn's commands."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pod_racer.config import DEFAULT_CONFIG, GuidanceConfig
from pod_racer.guidance.actions import Boost, Command, Thrust
from pod_racer.guidance.engine import navigate
from pod_racer.guidance.targeting import racer_target
from pod_racer.race.models import Pod, PodSnapshot, Role, Track

_logger = logging.getLogger(__name__)


class RaceController:
    """Folds per-turn snapshots into pod state and runs guidance.

    Parameters
    ----------
    track:
        Waypoints and lap count, fixed for the race.
    roles:
        One :class:`Role` per friendly pod, in the order their snapshots
        arrive each turn.
    n_opponents:
        Number of opponent snapshots per turn.
    config:
        Guidance constants.

    The first call to :meth:`turn` issues the opening moves: racers boost
    toward their first target, attackers go full thrust at their waypoint.
    Every later call runs :func:`~pod_racer.guidance.engine.navigate`.
    """

    def __init__(
        self,
        track: Track,
        roles: Sequence[Role],
        n_opponents: int,
        config: GuidanceConfig = DEFAULT_CONFIG,
    ) -> None:
        if n_opponents < 1:
            raise ValueError("A race needs at least one opponent")
        self._track = track
        self._config = config
        self._pods = [Pod(role) for role in roles]
        self._opponents = [Pod.racer() for _ in range(n_opponents)]
        self._turn = 0
        _logger.info(
            "Race: %d waypoints, %d laps, pods=%s, %d opponents",
            len(track),
            track.laps,
            [r.value for r in roles],
            n_opponents,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def pods(self) -> list[Pod]:
        """Current state of the friendly pods (copy)."""
        return list(self._pods)

    @property
    def opponents(self) -> list[Pod]:
        """Current state of the opponent pods (copy)."""
        return list(self._opponents)

    @property
    def turn_count(self) -> int:
        return self._turn

    def turn(
        self, friendly: Sequence[PodSnapshot], opponents: Sequence[PodSnapshot]
    ) -> list[Command]:
        """Apply this turn's snapshots and return one command per friendly pod.

        Raises
        ------
        ValueError
            If the snapshot counts do not match the configured pods.
        """
        self._apply(friendly, opponents)
        self._turn += 1

        if self._turn == 1:
            return [self._opening_command(pod) for pod in self._pods]

        commands = [
            navigate(pod, self._track, self._opponents, self._config) for pod in self._pods
        ]
        self._pods = [pod.with_accel(cmd.thrust) for pod, cmd in zip(self._pods, commands)]
        return commands

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _apply(
        self, friendly: Sequence[PodSnapshot], opponents: Sequence[PodSnapshot]
    ) -> None:
        if len(friendly) != len(self._pods):
            raise ValueError(f"Expected {len(self._pods)} friendly snapshots, got {len(friendly)}")
        if len(opponents) != len(self._opponents):
            raise ValueError(
                f"Expected {len(self._opponents)} opponent snapshots, got {len(opponents)}"
            )
        self._pods = [pod.updated(snap) for pod, snap in zip(self._pods, friendly)]
        self._opponents = [pod.updated(snap) for pod, snap in zip(self._opponents, opponents)]

    def _opening_command(self, pod: Pod) -> Command:
        max_thrust = self._config.max_thrust
        if pod.role is Role.RACER:
            target, _ = racer_target(pod, self._track, self._config)
            return Command(steer_point=target, action=Boost(), thrust=max_thrust)
        waypoint = self._track.waypoint(pod.checkpoint_idx)
        return Command(steer_point=waypoint, action=Thrust(max_thrust), thrust=max_thrust)
