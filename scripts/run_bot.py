"""Pod racing bot — reads the race from stdin, writes commands to stdout.

Logs go to stderr; stdout carries only protocol lines.

Usage:
    uv run python scripts/run_bot.py
    uv run python scripts/run_bot.py --racers 1 --attackers 1 --opponents 2
    uv run python scripts/run_bot.py --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from pod_racer.config import GuidanceConfig  # noqa: E402
from pod_racer.protocol import EndOfRace, ProtocolError, SnapshotReader, format_command  # noqa: E402
from pod_racer.race.controller import RaceController  # noqa: E402
from pod_racer.race.models import Role  # noqa: E402

_logger = logging.getLogger("pod_racer")


def run(args: argparse.Namespace, stdin=sys.stdin, stdout=sys.stdout) -> int:
    """Play one race; return the process exit status."""
    config = GuidanceConfig.from_env()
    reader = SnapshotReader(stdin)
    roles = [Role.RACER] * args.racers + [Role.ATTACKER] * args.attackers

    try:
        track = reader.read_race()
        controller = RaceController(track, roles, args.opponents, config)
        while True:
            friendly = reader.read_turn(len(roles), track)
            opponents = reader.read_turn(args.opponents, track)
            for command in controller.turn(friendly, opponents):
                print(format_command(command, config.max_thrust), file=stdout, flush=True)
    except EndOfRace:
        _logger.info("Input closed; race over")
        return 0
    except ProtocolError as exc:
        _logger.error("Protocol error: %s", exc)
        return 1


def main() -> None:
    ap = argparse.ArgumentParser(description="Pod racing guidance bot")
    ap.add_argument("--racers", type=int, default=1, help="Friendly pods with the racer role")
    ap.add_argument("--attackers", type=int, default=1, help="Friendly pods with the attacker role")
    ap.add_argument("--opponents", type=int, default=2, help="Opponent pods per turn")
    ap.add_argument("--log-level", default="WARNING", help="Logging level for stderr")
    args = ap.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
