"""Cricket player statistics: multi-source reconciliation and analytics."""

__version__ = "0.1.0"
