"""Line protocol with the race host: snapshot reader and command formatter.

Public API
----------
SnapshotReader  - text stream → Track / PodSnapshot lists
format_command  - Command → protocol line
ProtocolError   - malformed or missing input
EndOfRace       - input stream closed
"""

from pod_racer.protocol.errors import EndOfRace, ProtocolError
from pod_racer.protocol.formatter import format_action, format_command
from pod_racer.protocol.reader import SnapshotReader

__all__ = ["EndOfRace", "ProtocolError", "SnapshotReader", "format_action", "format_command"]
