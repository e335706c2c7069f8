"""2D vector algebra for track-plane geometry."""

from pod_racer.geometry.vector import Vector2

__all__ = ["Vector2"]
