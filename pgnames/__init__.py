"""pgnames - deterministic names for objects owned by Postgres clusters."""

__version__ = "0.1.0"
