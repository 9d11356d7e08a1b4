"""VistarAds: build Vistar Media ad requests from player parameters."""

__version__ = "0.1.0"
