"""navigate() — one pod's full decision for one turn."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pod_racer.config import DEFAULT_CONFIG, GuidanceConfig
from pod_racer.guidance.actions import Command, Shield, Thrust
from pod_racer.guidance.collision import shield_required
from pod_racer.guidance.navigation import guide
from pod_racer.guidance.targeting import acquire_target
from pod_racer.race.models import Pod, Track

_logger = logging.getLogger(__name__)


def navigate(
    pod: Pod,
    track: Track,
    opponents: Sequence[Pod],
    config: GuidanceConfig = DEFAULT_CONFIG,
) -> Command:
    """Run target acquisition, guidance and the collision guard for *pod*.

    Pure: the same inputs always give the same command.  The caller stores
    ``command.thrust`` as the pod's ``accel`` for the next turn.
    """
    target, rel_vel = acquire_target(pod, track, opponents, config)
    steer, thrust = guide(pod, target, rel_vel, track, config)

    if shield_required(pod, opponents, config):
        _logger.debug("%s at %s: shield (opponent within %.0f)",
                      pod.role.value, pod.pos.to_tuple(), config.shield_radius)
        action = Shield()
    else:
        action = Thrust(thrust)

    _logger.debug(
        "%s cp=%d target=(%.0f, %.0f) steer=(%.0f, %.0f) thrust=%.1f",
        pod.role.value,
        pod.checkpoint_idx,
        target.x,
        target.y,
        steer.x,
        steer.y,
        thrust,
    )
    return Command(steer_point=steer, action=action, thrust=thrust)
