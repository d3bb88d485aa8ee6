"""DanceFace whitelist and leaderboard backend."""

__version__ = "0.2.0"
