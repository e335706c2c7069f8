"""Race data models: pods, per-turn snapshots and the track."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from pod_racer.config import MAX_THRUST
from pod_racer.geometry.vector import Vector2


class Role(Enum):
    """Targeting policy a pod keeps for the whole race."""

    RACER = "racer"
    ATTACKER = "attacker"


@dataclass(frozen=True)
class PodSnapshot:
    """One pod's kinematic reading for a single turn."""

    x: float
    y: float
    vx: float
    vy: float
    angle_deg: float
    """Absolute heading in degrees; 0 = +x, counter-clockwise positive."""

    checkpoint_idx: int
    """Index of the waypoint the pod is heading toward."""


@dataclass(frozen=True)
class Pod:
    """Kinematic state of one pod for the current turn.

    Pods are replaced each turn via :meth:`updated`, never mutated.
    """

    role: Role
    pos: Vector2 = Vector2()
    vel: Vector2 = Vector2()
    orientation: Vector2 = Vector2(1.0, 0.0)
    """Unit heading vector, independent of the velocity direction."""

    checkpoint_idx: int = 0
    lap: int = 0
    """Number of checkpoint-index changes seen (waypoints passed, not circuits)."""

    accel: float = MAX_THRUST
    """Last commanded thrust; feeds next turn's flight-time estimate."""

    @classmethod
    def racer(cls) -> Pod:
        return cls(Role.RACER)

    @classmethod
    def attacker(cls) -> Pod:
        return cls(Role.ATTACKER)

    def updated(self, snapshot: PodSnapshot) -> Pod:
        """Return the next state after folding in *snapshot*.

        ``accel`` and ``role`` carry over unchanged.
        """
        lap = self.lap + 1 if snapshot.checkpoint_idx != self.checkpoint_idx else self.lap
        return replace(
            self,
            pos=Vector2(snapshot.x, snapshot.y),
            vel=Vector2(snapshot.vx, snapshot.vy),
            orientation=Vector2.unit_x().rotate_degrees(snapshot.angle_deg),
            checkpoint_idx=snapshot.checkpoint_idx,
            lap=lap,
        )

    def with_accel(self, accel: float) -> Pod:
        return replace(self, accel=accel)


@dataclass(frozen=True)
class Track:
    """Cyclic sequence of waypoints plus the number of laps to race.

    Indices wrap modulo the waypoint count.  A single-waypoint track is
    degenerate: its segment direction is the zero vector.
    """

    waypoints: tuple[Vector2, ...]
    laps: int = 3

    def __post_init__(self) -> None:
        if not self.waypoints:
            raise ValueError("Track needs at least one waypoint")
        # accept any sequence, store a tuple so the track stays hashable
        object.__setattr__(self, "waypoints", tuple(self.waypoints))

    def __len__(self) -> int:
        return len(self.waypoints)

    def waypoint(self, idx: int) -> Vector2:
        return self.waypoints[idx % len(self.waypoints)]

    def next_index(self, idx: int) -> int:
        return (idx + 1) % len(self.waypoints)

    def next_waypoint(self, idx: int) -> Vector2:
        return self.waypoints[self.next_index(idx)]

    def segment(self, idx: int) -> Vector2:
        """Vector from waypoint *idx* to the one after it."""
        return self.next_waypoint(idx) - self.waypoint(idx)

    def direction(self, idx: int) -> Vector2:
        """Unit direction of the leg leaving waypoint *idx* (zero if degenerate)."""
        return self.segment(idx).normalized()
