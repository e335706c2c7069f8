"""Collision guard: shield when an opponent is about to hit us head on."""

from __future__ import annotations

from collections.abc import Iterable

from pod_racer.config import DEFAULT_CONFIG, GuidanceConfig
from pod_racer.race.models import Pod


def is_threat(pod: Pod, opponent: Pod, shield_radius: float) -> bool:
    """True if *opponent*'s next position is ahead of *pod* and within range."""
    closing = (opponent.pos + opponent.vel) - (pod.pos + pod.vel)
    return pod.orientation.inner_product(closing) > 0 and closing.norm() <= shield_radius


def shield_required(
    pod: Pod, opponents: Iterable[Pod], config: GuidanceConfig = DEFAULT_CONFIG
) -> bool:
    """True if any opponent is a threat this turn."""
    return any(is_threat(pod, opp, config.shield_radius) for opp in opponents)
