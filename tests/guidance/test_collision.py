"""Tests for the collision guard."""

from __future__ import annotations

from dataclasses import replace

import pytest

from pod_racer.config import POD_RADIUS, GuidanceConfig
from pod_racer.geometry.vector import Vector2
from pod_racer.guidance.collision import is_threat, shield_required
from pod_racer.race.models import Pod

SHIELD_RADIUS = 2.2 * POD_RADIUS


def _pod(x=0.0, y=0.0, vx=0.0, vy=0.0, heading=Vector2(1.0, 0.0)) -> Pod:
    return replace(Pod.racer(), pos=Vector2(x, y), vel=Vector2(vx, vy), orientation=heading)


# ---------------------------------------------------------------------------
# Boundary cases
# ---------------------------------------------------------------------------


def test_opponent_ahead_just_inside_radius_triggers():
    assert shield_required(_pod(), [_pod(x=SHIELD_RADIUS - 0.5)])


def test_opponent_ahead_just_outside_radius_does_not_trigger():
    assert not shield_required(_pod(), [_pod(x=SHIELD_RADIUS + 0.5)])


def test_opponent_behind_does_not_trigger():
    assert not shield_required(_pod(), [_pod(x=-100.0)])


def test_opponent_abeam_does_not_trigger():
    """Exactly perpendicular to the heading is not 'ahead'."""
    assert not shield_required(_pod(), [_pod(y=300.0)])


def test_uses_predicted_positions():
    me = _pod(vx=200.0)
    # now 1000 ahead, but both move: next-turn gap is 1000 - 200 - 100 = 700
    assert shield_required(me, [_pod(x=1000.0, vx=-100.0)])
    # now 500 ahead, but it pulls away: next-turn gap is 500 + 600 - 200 = 900
    assert not shield_required(me, [_pod(x=500.0, vx=600.0)])


def test_any_opponent_is_enough():
    opponents = [_pod(x=-5000.0), _pod(x=5000.0), _pod(x=300.0, y=100.0)]
    assert shield_required(_pod(), opponents)


def test_no_opponents_no_shield():
    assert not shield_required(_pod(), [])


def test_heading_not_velocity_decides_forward():
    me = _pod(vx=-50.0, heading=Vector2(0.0, 1.0))
    assert is_threat(me, _pod(x=-50.0, y=400.0), SHIELD_RADIUS)
    assert not is_threat(me, _pod(x=-50.0, y=-400.0), SHIELD_RADIUS)


def test_radius_follows_config():
    config = GuidanceConfig(pod_radius=100.0)
    assert config.shield_radius == pytest.approx(220.0)
    assert not shield_required(_pod(), [_pod(x=300.0)], config)
    assert shield_required(_pod(), [_pod(x=200.0)], config)
