"""Workshop registration service with roster-based member pricing."""

__version__ = "0.1.0"
