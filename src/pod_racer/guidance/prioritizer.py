"""Picks the opponent furthest along the race."""

from __future__ import annotations

from collections.abc import Sequence

from pod_racer.race.models import Pod, Track


def prioritize_opponent(opponents: Sequence[Pod], track: Track) -> Pod:
    """Return the opponent with the most race progress.

    Ranking: highest ``lap``, then highest ``checkpoint_idx``, then the
    smallest distance to the waypoint at that index.  Remaining ties go to
    the first opponent in *opponents*.

    Raises
    ------
    ValueError
        If *opponents* is empty; a valid race always has one.
    """
    if not opponents:
        raise ValueError("prioritize_opponent() needs at least one opponent")

    max_lap = max(pod.lap for pod in opponents)
    leaders = [pod for pod in opponents if pod.lap == max_lap]
    max_checkpoint = max(pod.checkpoint_idx for pod in leaders)
    leaders = [pod for pod in leaders if pod.checkpoint_idx == max_checkpoint]

    checkpoint = track.waypoint(max_checkpoint)
    # min() keeps the first of equal keys
    return min(leaders, key=lambda pod: pod.pos.distance_to(checkpoint))
