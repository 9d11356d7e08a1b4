from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class DisplayArea:
    """One display surface and the media it can play.

    Attributes:
        id: Display area identifier, unique within a request.
        width: Width in pixels.
        height: Height in pixels.
        allow_audio: Whether creatives with audio may be served.
        supported_media: Accepted MIME types, in preference order.
        static_duration: Play time in seconds for static (image) creatives.
    """

    id: str = ""
    width: int = 0
    height: int = 0
    allow_audio: bool = False
    supported_media: list[str] = field(default_factory=list)
    static_duration: int = 0

    def copy(self) -> DisplayArea:
        """Return a copy that does not share ``supported_media``."""
        return replace(self, supported_media=list(self.supported_media))


@dataclass(slots=True)
class DeviceAttribute:
    """Free-form name/value pair reported with an ad request."""

    name: str = ""
    value: str = ""


@dataclass(slots=True)
class AdRequest:
    """Ad request sent to the Vistar ad-serving API.

    The object is built by the caller (usually with its own display areas and
    device attributes) and then enriched by ``AdConfig.update_ad_request``.

    Attributes:
        api_key: Network API key.
        network_id: Network identifier.
        device_id: Device identifier; always equal to ``venue_id``.
        venue_id: Venue identifier.
        direct_connection: Whether the player talks to the API directly.
        latitude: Venue latitude.
        longitude: Venue longitude.
        display_time: Unix timestamp when the ad will be shown, 0 when unset.
        number_of_screens: Number of screens driven by the player.
        display_areas: Display surfaces, in caller order.
        device_attributes: Extra device attributes, in caller order.
    """

    api_key: str = ""
    network_id: str = ""
    device_id: str = ""
    venue_id: str = ""
    direct_connection: bool = False
    latitude: float = 0.0
    longitude: float = 0.0
    display_time: int = 0
    number_of_screens: int = 0
    display_areas: list[DisplayArea] = field(default_factory=list)
    device_attributes: list[DeviceAttribute] = field(default_factory=list)
