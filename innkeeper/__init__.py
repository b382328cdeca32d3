"""Hotel and in-room dining service."""

__version__ = "1.0.0"
