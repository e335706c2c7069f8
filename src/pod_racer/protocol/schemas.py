"""Pydantic schemas for one line of host input."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pod_racer.geometry.vector import Vector2
from pod_racer.race.models import PodSnapshot


class CountLine(BaseModel):
    value: int = Field(ge=1)


class WaypointLine(BaseModel):
    x: float
    y: float

    def to_vector(self) -> Vector2:
        return Vector2(self.x, self.y)


class PodLine(BaseModel):
    x: float
    y: float
    vx: float
    vy: float
    angle: float
    next_checkpoint_id: int = Field(ge=0)

    def to_snapshot(self) -> PodSnapshot:
        return PodSnapshot(
            x=self.x,
            y=self.y,
            vx=self.vx,
            vy=self.vy,
            angle_deg=self.angle,
            checkpoint_idx=self.next_checkpoint_id,
        )
