"""Target acquisition: role policy choosing what each pod steers at.

Every policy returns ``(target, rel_vel)``: the point to navigate toward
and the velocity of that point relative to the pod, which the guidance law
uses for its line-of-sight rotation term.
"""

from __future__ import annotations

from collections.abc import Sequence

from pod_racer.config import DEFAULT_CONFIG, GuidanceConfig
from pod_racer.geometry.vector import Vector2
from pod_racer.guidance.prioritizer import prioritize_opponent
from pod_racer.race.models import Pod, Role, Track


def racer_target(
    pod: Pod, track: Track, config: GuidanceConfig = DEFAULT_CONFIG
) -> tuple[Vector2, Vector2]:
    """Aim one pod radius past the current waypoint, along the next leg.

    Waypoints are stationary so the relative velocity is ``-pod.vel``.
    """
    idx = pod.checkpoint_idx
    target = track.waypoint(idx) + track.direction(idx) * config.pod_radius
    return target, -pod.vel


def is_aimed_at(pod: Pod, point: Vector2, min_cosine: float) -> bool:
    """True if *pod* is already moving toward *point* within *min_cosine*."""
    line_of_sight = (point - pod.pos).normalized()
    return line_of_sight.inner_product(pod.vel.normalized()) > min_cosine


def attacker_target(
    pod: Pod,
    track: Track,
    opponents: Sequence[Pod],
    config: GuidanceConfig = DEFAULT_CONFIG,
) -> tuple[Vector2, Vector2]:
    """Intercept the leading opponent.

    When the attacker already heads at the opponent, it ambushes the middle
    of the opponent's current leg instead of chasing the pod.  Otherwise it
    aims one pod radius beyond the opponent's next position, toward the
    opponent's waypoint.
    """
    opponent = prioritize_opponent(opponents, track)
    rel_vel = opponent.vel - pod.vel
    idx = opponent.checkpoint_idx

    if is_aimed_at(pod, opponent.pos, config.aim_cosine):
        target = track.waypoint(idx) + track.segment(idx) / 2.0
    else:
        to_checkpoint = (track.waypoint(idx) - opponent.pos).normalized()
        target = opponent.pos + opponent.vel + to_checkpoint * config.pod_radius
    return target, rel_vel


def acquire_target(
    pod: Pod,
    track: Track,
    opponents: Sequence[Pod],
    config: GuidanceConfig = DEFAULT_CONFIG,
) -> tuple[Vector2, Vector2]:
    """Dispatch to the policy for ``pod.role``."""
    if pod.role is Role.RACER:
        return racer_target(pod, track, config)
    return attacker_target(pod, track, opponents, config)
