"""Hotel API: hotel and review listings backed by PostgreSQL, with partner sync."""

__version__ = "0.1.0"
