"""Guidance law — proportional navigation, flight time and thrust curve.

Given a target point and its velocity relative to the pod, proportional
navigation turns the line-of-sight rotation rate into a lateral correction
``a_n``.  The steer point is placed on the circle of radius ``max_thrust``
around the pod: the forward component toward the target takes whatever
authority the lateral correction leaves over.

::

    lead = pos + unit(range) * sqrt(T^2 - |a_n|^2) + a_n      if |a_n| < T
    lead = pos + unit(a_n) * T                                otherwise

Thrust is ``tanh(gain * cos^4) * T`` where ``cos`` is the alignment between
the pod's heading and the steer direction, so thrust ramps up only once the
pod roughly faces where it wants to go.
"""

from __future__ import annotations

import math

from pod_racer.config import DEFAULT_CONFIG, GuidanceConfig
from pod_racer.geometry.vector import Vector2
from pod_racer.race.models import Pod, Role, Track


def rotation_rate(range_vec: Vector2, rel_vel: Vector2) -> float:
    """Line-of-sight rotation rate; 0 when the range vector is zero."""
    range_sq = range_vec.inner_product(range_vec)
    if range_sq == 0:
        return 0.0
    return range_vec.outer_product(rel_vel) / range_sq


def normal_acceleration(range_vec: Vector2, rel_vel: Vector2) -> Vector2:
    """Lateral correction perpendicular to the closing velocity."""
    rate = rotation_rate(range_vec, rel_vel)
    return Vector2(rel_vel.y * rate, -rel_vel.x * rate)


def lead_point(
    pos: Vector2,
    target: Vector2,
    rel_vel: Vector2,
    max_thrust: float = DEFAULT_CONFIG.max_thrust,
) -> Vector2:
    """Steer point on the max-thrust circle around *pos*."""
    range_vec = target - pos
    a_n = normal_acceleration(range_vec, rel_vel)
    if a_n.norm() < max_thrust:
        forward = math.sqrt(max_thrust**2 - a_n.inner_product(a_n))
        return pos + range_vec.normalized() * forward + a_n
    # lateral correction alone saturates the available thrust
    return pos + a_n.normalized() * max_thrust


def flight_time(
    distance: float,
    speed: float,
    accel: float,
    drag: float = DEFAULT_CONFIG.drag,
) -> float:
    """Approximate turns to cover *distance* at constant thrust *accel*.

    Drag-compensated: each turn the pod keeps ``drag`` of its velocity.
    ``accel`` is floored at 1 so a zero-thrust pod still yields a finite
    estimate.
    """
    accel = max(accel, 1.0)
    return distance * (1.0 - drag) / drag / accel - speed / accel + drag / (1.0 - drag)


def thrust_for(
    orientation: Vector2,
    steer_direction: Vector2,
    max_thrust: float = DEFAULT_CONFIG.max_thrust,
    gain: float = DEFAULT_CONFIG.thrust_gain,
) -> float:
    """Saturating thrust in ``[0, max_thrust]`` from heading alignment."""
    alignment = orientation.inner_product(steer_direction.normalized())
    return math.tanh(gain * alignment**4) * max_thrust


def guide(
    pod: Pod,
    target: Vector2,
    rel_vel: Vector2,
    track: Track,
    config: GuidanceConfig = DEFAULT_CONFIG,
) -> tuple[Vector2, float]:
    """Return ``(steer_point, thrust)`` for *pod* chasing *target*.

    A racer that will reach its target within ``config.future_time`` turns
    aims straight at the following waypoint instead.
    """
    steer = lead_point(pod.pos, target, rel_vel, config.max_thrust)

    if pod.role is Role.RACER:
        eta = flight_time((target - pod.pos).norm(), pod.vel.norm(), pod.accel, config.drag)
        if eta < config.future_time:
            steer = track.next_waypoint(pod.checkpoint_idx)

    thrust = thrust_for(pod.orientation, steer - pod.pos, config.max_thrust, config.thrust_gain)
    return steer, thrust
