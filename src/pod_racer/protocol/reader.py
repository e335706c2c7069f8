"""SnapshotReader — parses the host's startup block and per-turn lines.

Startup::

    <laps>
    <checkpoint count>
    <x> <y>            (one line per checkpoint)

Each turn, one line per pod::

    <x> <y> <vx> <vy> <angle> <next checkpoint id>
"""

from __future__ import annotations

import logging
from typing import TextIO

from pydantic import BaseModel, ValidationError

from pod_racer.protocol.errors import EndOfRace, ProtocolError
from pod_racer.protocol.schemas import CountLine, PodLine, WaypointLine
from pod_racer.race.models import PodSnapshot, Track

_logger = logging.getLogger(__name__)


class SnapshotReader:
    """Reads structured race input from a text stream (usually stdin).

    Parameters
    ----------
    stream:
        Any object with ``readline()``.  Injected for testability.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line_no = 0

    def read_race(self) -> Track:
        """Read laps and the waypoint list.

        Raises
        ------
        ProtocolError
            If a line is malformed or a checkpoint index would fall outside
            the track.
        """
        laps = self._parse(CountLine, ("value",)).value
        count = self._parse(CountLine, ("value",)).value
        waypoints = [
            self._parse(WaypointLine, ("x", "y")).to_vector() for _ in range(count)
        ]
        _logger.info("Track: %d laps, %d waypoints", laps, count)
        return Track(tuple(waypoints), laps=laps)

    def read_turn(self, n_pods: int, track: Track | None = None) -> list[PodSnapshot]:
        """Read *n_pods* pod lines for one turn.

        When *track* is given, checkpoint ids are checked against it.
        """
        snapshots: list[PodSnapshot] = []
        for _ in range(n_pods):
            line = self._parse(PodLine, tuple(PodLine.model_fields))
            if track is not None and line.next_checkpoint_id >= len(track):
                raise ProtocolError(
                    f"line {self._line_no}: checkpoint {line.next_checkpoint_id} "
                    f"outside track of {len(track)}"
                )
            snapshots.append(line.to_snapshot())
        return snapshots

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _next_line(self) -> str:
        raw = self._stream.readline()
        if not raw:
            raise EndOfRace(f"input closed after line {self._line_no}")
        self._line_no += 1
        return raw.strip()

    def _parse(self, schema: type[BaseModel], names: tuple[str, ...]):
        tokens = self._next_line().split()
        if len(tokens) != len(names):
            raise ProtocolError(
                f"line {self._line_no}: expected {len(names)} fields, got {len(tokens)}"
            )
        try:
            return schema.model_validate(dict(zip(names, tokens)))
        except ValidationError as exc:
            raise ProtocolError(f"line {self._line_no}: {exc}") from exc
