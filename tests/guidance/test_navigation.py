"""Tests for the guidance law — proportional navigation and thrust."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest

from pod_racer.config import DRAG, MAX_THRUST
from pod_racer.geometry.vector import Vector2
from pod_racer.guidance.navigation import (
    flight_time,
    guide,
    lead_point,
    normal_acceleration,
    rotation_rate,
    thrust_for,
)
from pod_racer.guidance.targeting import racer_target
from pod_racer.race.models import Pod, Track

TRIANGLE = Track((Vector2(0.0, 0.0), Vector2(1000.0, 0.0), Vector2(500.0, 1000.0)), laps=3)

# ---------------------------------------------------------------------------
# Proportional navigation terms
# ---------------------------------------------------------------------------


def test_rotation_rate_zero_range_is_zero():
    assert rotation_rate(Vector2.zero(), Vector2(50.0, 20.0)) == 0.0


def test_rotation_rate_value():
    assert rotation_rate(Vector2(100.0, 0.0), Vector2(0.0, 10.0)) == pytest.approx(0.1)


def test_no_rotation_when_closing_along_line_of_sight():
    assert rotation_rate(Vector2(100.0, 0.0), Vector2(-30.0, 0.0)) == 0.0
    assert normal_acceleration(Vector2(100.0, 0.0), Vector2(-30.0, 0.0)).norm() == 0.0


def test_normal_acceleration_perpendicular_to_relative_velocity():
    rel_vel = Vector2(12.0, -5.0)
    a_n = normal_acceleration(Vector2(300.0, 200.0), rel_vel)
    assert a_n.inner_product(rel_vel) == pytest.approx(0.0, abs=1e-9)


# ---------------------------------------------------------------------------
# Lead point
# ---------------------------------------------------------------------------


def test_lead_point_straight_at_stationary_target():
    pos = Vector2(100.0, 100.0)
    lead = lead_point(pos, Vector2(100.0, 1100.0), Vector2.zero())
    assert lead.is_close(Vector2(100.0, 100.0 + MAX_THRUST), 1e-9)


def test_lead_point_saturates_on_large_lateral_correction():
    pos = Vector2(10.0, 20.0)
    lead = lead_point(pos, pos + Vector2(1.0, 0.0), Vector2(1000.0, 1000.0))
    offset = lead - pos
    assert offset.norm() == pytest.approx(MAX_THRUST)
    assert offset.normalized().is_close(Vector2(1.0, -1.0).normalized(), 1e-9)


def test_lead_point_degenerate_range_is_finite():
    pos = Vector2(5.0, 5.0)
    lead = lead_point(pos, pos, Vector2(10.0, 0.0))
    assert lead == pos
    assert math.isfinite(lead.x) and math.isfinite(lead.y)


def test_lead_point_bends_toward_crossing_target():
    """A target sliding to the left pulls the steer point left of the line of sight."""
    pos = Vector2.zero()
    lead = lead_point(pos, Vector2(1000.0, 0.0), Vector2(-10.0, 30.0))
    assert lead.x > 0.0
    assert lead.y != 0.0


# ---------------------------------------------------------------------------
# Flight time
# ---------------------------------------------------------------------------


def test_flight_time_from_rest():
    expected = 400.0 * (1 - DRAG) / DRAG / 100.0 + DRAG / (1 - DRAG)
    assert flight_time(400.0, 0.0, 100.0) == pytest.approx(expected)


def test_flight_time_decreases_with_speed():
    assert flight_time(1000.0, 500.0, 100.0) < flight_time(1000.0, 0.0, 100.0)


def test_flight_time_floors_accel_at_one():
    assert flight_time(100.0, 10.0, 0.0) == flight_time(100.0, 10.0, 1.0)


# ---------------------------------------------------------------------------
# Thrust curve
# ---------------------------------------------------------------------------


def test_thrust_full_when_aligned():
    assert thrust_for(Vector2(1.0, 0.0), Vector2(250.0, 0.0)) == pytest.approx(MAX_THRUST)


def test_thrust_zero_when_perpendicular():
    assert thrust_for(Vector2(1.0, 0.0), Vector2(0.0, 250.0)) == pytest.approx(0.0, abs=1e-9)


def test_thrust_zero_for_zero_steer_direction():
    assert thrust_for(Vector2(1.0, 0.0), Vector2.zero()) == 0.0


def test_thrust_ramps_up_with_alignment():
    heading = Vector2(1.0, 0.0)
    values = [thrust_for(heading, heading.rotate_degrees(a)) for a in (80.0, 60.0, 40.0, 20.0)]
    assert values == sorted(values)


@pytest.mark.parametrize("heading_deg", [0.0, 37.0, 90.0, 180.0, 271.0])
def test_thrust_always_within_bounds(heading_deg):
    heading = Vector2.unit_x().rotate_degrees(heading_deg)
    for steer_deg in range(0, 360, 15):
        steer = Vector2(500.0, 0.0).rotate_degrees(steer_deg)
        thrust = thrust_for(heading, steer)
        assert 0.0 <= thrust <= MAX_THRUST


# ---------------------------------------------------------------------------
# guide()
# ---------------------------------------------------------------------------


def _fast_pod(factory):
    return replace(
        factory(),
        pos=Vector2(600.0, 0.0),
        vel=Vector2(500.0, 0.0),
        checkpoint_idx=1,
    )


def test_racer_close_to_waypoint_aims_at_following_one():
    pod = _fast_pod(Pod.racer)
    target, rel_vel = racer_target(pod, TRIANGLE)
    steer, thrust = guide(pod, target, rel_vel, TRIANGLE)
    assert steer == Vector2(500.0, 1000.0)
    assert 0.0 <= thrust <= MAX_THRUST


def test_attacker_has_no_early_turn_override():
    pod = _fast_pod(Pod.attacker)
    target = Vector2(821.0, 358.0)
    steer, _ = guide(pod, target, -pod.vel, TRIANGLE)
    # lateral correction saturates: steer straight across the line of sight
    assert steer.is_close(Vector2(600.0, 100.0), 1e-9)


def test_racer_far_from_waypoint_uses_lead_point():
    pod = Pod.racer()
    target, rel_vel = racer_target(pod, TRIANGLE)
    steer, thrust = guide(pod, target, rel_vel, TRIANGLE)
    assert steer.is_close(Vector2(MAX_THRUST, 0.0), 1e-9)
    assert thrust == pytest.approx(MAX_THRUST)


def test_guide_degenerate_inputs_are_finite():
    pod = replace(Pod.racer(), pos=Vector2(400.0, 0.0))
    steer, thrust = guide(pod, Vector2(400.0, 0.0), Vector2.zero(), TRIANGLE)
    assert math.isfinite(steer.x) and math.isfinite(steer.y)
    assert math.isfinite(thrust)
