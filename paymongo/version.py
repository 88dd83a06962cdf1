"""Version information for the PayMongo SDK."""

__version__ = "0.1.0"
