"""Vistar ad request configuration.

``parse_ad_config`` turns the ``vistar.*`` parameters into an ``AdConfig``
whose base request carries the player's identity, location and one default
display area. ``AdConfig.update_ad_request`` then stamps those defaults onto
each outgoing request.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Mapping

from VistarAds import __version__
from VistarAds.config.common import parse_array, parse_bool, parse_float, parse_int, parse_str
from VistarAds.core.models import AdRequest, DeviceAttribute, DisplayArea
from VistarAds.utils.log import log

DEFAULT_URL = "https://sandbox-api.vistarmedia.com/api/v1/get_ad/json"
DEFAULT_DISPLAY_AREA_ID = "display-0"
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_STATIC_DURATION = 10
DEFAULT_MIME_TYPES: tuple[str, ...] = ()
DEFAULT_PLAYER_MODEL = "VistarAds"


@dataclass(frozen=True, slots=True)
class AdConfig:
    """Parsed ad-serving settings.

    Attributes:
        url: Ad-serving endpoint.
        base_request: Defaults merged into every outgoing request.
    """

    url: str
    base_request: AdRequest

    def update_ad_request(self, req: AdRequest, now: int | None = None) -> None:
        """Merge the base request into ``req`` in place.

        Identity and location fields are overwritten. ``display_time`` is set
        to ``now`` (current unix time when omitted). The default display area
        and device attributes are appended after the ones already on ``req``.

        Args:
            req: Request to update.
            now: Display timestamp in unix seconds.
        """
        base = self.base_request
        req.api_key = base.api_key
        req.network_id = base.network_id
        req.device_id = base.device_id
        req.venue_id = base.venue_id
        req.direct_connection = base.direct_connection
        req.latitude = base.latitude
        req.longitude = base.longitude
        req.number_of_screens = base.number_of_screens
        req.display_time = int(time.time()) if now is None else now

        # build both lists first, req may be the base request itself
        areas = [area.copy() for area in base.display_areas]
        attributes = [DeviceAttribute(name=attr.name, value=attr.value) for attr in base.device_attributes]
        req.display_areas.extend(areas)
        req.device_attributes.extend(attributes)
        log.debug(
            "Updated ad request venue=%s display_areas=%d device_attributes=%d",
            req.venue_id,
            len(req.display_areas),
            len(req.device_attributes),
        )


def parse_ad_config(params: Mapping[str, str]) -> AdConfig:
    """Build an ``AdConfig`` from ``vistar.*`` parameters.

    Missing or malformed values fall back to the module defaults; this never
    raises. ``vistar.venue_id`` is used for both device and venue id.

    Args:
        params: Flat parameter map.

    Returns:
        Parsed ad configuration with ``display_time`` left at 0.
    """
    venue_id = parse_str(params, "vistar.venue_id", "")
    display_area = DisplayArea(
        id=parse_str(params, "vistar.display_area_id", DEFAULT_DISPLAY_AREA_ID),
        width=parse_int(params, "vistar.width", DEFAULT_WIDTH),
        height=parse_int(params, "vistar.height", DEFAULT_HEIGHT),
        allow_audio=parse_bool(params, "vistar.allow_audio", False),
        supported_media=list(parse_array(params, "vistar.mime_types", DEFAULT_MIME_TYPES)),
        static_duration=parse_int(params, "vistar.static_duration", DEFAULT_STATIC_DURATION),
    )
    base_request = AdRequest(
        api_key=parse_str(params, "vistar.api_key", ""),
        network_id=parse_str(params, "vistar.network_id", ""),
        device_id=venue_id,
        venue_id=venue_id,
        direct_connection=parse_bool(params, "vistar.direct_connection", False),
        latitude=parse_float(params, "vistar.latitude", 0.0),
        longitude=parse_float(params, "vistar.longitude", 0.0),
        display_time=0,
        number_of_screens=1,
        display_areas=[display_area],
        device_attributes=_default_device_attributes(params),
    )
    if not base_request.api_key:
        log.warning("vistar.api_key is not set")
    if not venue_id:
        log.warning("vistar.venue_id is not set")
    return AdConfig(url=parse_str(params, "vistar.url", DEFAULT_URL), base_request=base_request)


def _default_device_attributes(params: Mapping[str, str]) -> list[DeviceAttribute]:
    return [
        DeviceAttribute(
            name="PlayerModel",
            value=parse_str(params, "vistar.player_model", DEFAULT_PLAYER_MODEL),
        ),
        DeviceAttribute(
            name="PlayerVersion",
            value=parse_str(params, "vistar.player_version", __version__),
        ),
    ]
