"""Propulsion actions and the per-pod command."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from pod_racer.geometry.vector import Vector2


@dataclass(frozen=True)
class Thrust:
    """Accelerate toward the steer point with the given magnitude."""

    magnitude: float


@dataclass(frozen=True)
class Boost:
    """One-shot maximum acceleration; usable once per race."""


@dataclass(frozen=True)
class Shield:
    """Forgo thrust this turn to resist a collision impulse."""


Action = Union[Thrust, Boost, Shield]


@dataclass(frozen=True)
class Command:
    """Decision for one pod for one turn.

    Unpacks as ``steer_point, action``.  ``thrust`` is the magnitude the
    guidance law computed; it is kept even when the action was overridden so
    the caller can store it as the pod's ``accel``.
    """

    steer_point: Vector2
    action: Action
    thrust: float

    def __iter__(self) -> Iterator:
        yield self.steer_point
        yield self.action
