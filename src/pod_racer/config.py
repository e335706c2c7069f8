"""Guidance tuning constants and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

MAX_THRUST = 100.0
POD_RADIUS = 400.0
DRAG = 0.85
FUTURE_TIME = 4.0

_ENV_PREFIX = "POD_RACER_"


@dataclass(frozen=True)
class GuidanceConfig:
    """Constants shared by targeting, guidance and the collision guard."""

    max_thrust: float = MAX_THRUST
    """Thrust ceiling; also the radius of the steering circle."""

    pod_radius: float = POD_RADIUS
    """Offset used for waypoint bias and the shield safety radius."""

    drag: float = DRAG
    """Fraction of velocity kept each turn."""

    future_time: float = FUTURE_TIME
    """Racer aims at the following waypoint when closer than this (turns)."""

    shield_radius_factor: float = 2.2
    """Shield fires when a forward opponent is within this many pod radii."""

    aim_cosine: float = 0.8
    """Attacker ambushes the route when already heading this close to its target."""

    thrust_gain: float = 16.0
    """Steepness of the tanh thrust curve."""

    def __post_init__(self) -> None:
        if self.max_thrust <= 0:
            raise ValueError("max_thrust must be positive")
        if not 0.0 < self.drag < 1.0:
            raise ValueError("drag must be in (0, 1)")

    @property
    def shield_radius(self) -> float:
        return self.shield_radius_factor * self.pod_radius

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GuidanceConfig:
        """Build a config with ``POD_RACER_<FIELD>`` overrides applied.

        E.g. ``POD_RACER_POD_RADIUS=350``.  Unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, float] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw:
                kwargs[f.name] = float(raw)
        return cls(**kwargs)


DEFAULT_CONFIG = GuidanceConfig()
