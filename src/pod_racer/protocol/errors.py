"""Protocol exceptions."""

from __future__ import annotations


class ProtocolError(Exception):
    """Raised when host input is malformed or incomplete."""


class EndOfRace(ProtocolError):
    """Raised when the input stream ends; the host has stopped the race."""
