"""Pod racer: per-turn guidance engine for pod racing bots."""

__version__ = "0.1.0"
