"""Domain models for Vistar ad requests."""

from VistarAds.core.models import AdRequest, DeviceAttribute, DisplayArea

__all__ = ["AdRequest", "DeviceAttribute", "DisplayArea"]
