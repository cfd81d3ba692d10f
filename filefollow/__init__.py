"""File follower agent configuration layer."""

__version__ = "0.1.0"
