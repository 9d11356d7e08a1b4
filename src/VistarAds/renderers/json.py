"""JSON renderers for ad requests.

Renders ``AdRequest`` into the snake_case body accepted by the Vistar
ad-serving API, and reads such bodies back into ``AdRequest`` objects.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from VistarAds.config.ad import AdConfig
from VistarAds.core.models import AdRequest, DeviceAttribute, DisplayArea
from VistarAds.utils.log import log


def render_ad_request(req: AdRequest) -> dict[str, Any]:
    """Render an ad request into a JSON-serializable dict."""
    return {
        "api_key": req.api_key,
        "network_id": req.network_id,
        "device_id": req.device_id,
        "venue_id": req.venue_id,
        "direct_connection": req.direct_connection,
        "latitude": req.latitude,
        "longitude": req.longitude,
        "display_time": req.display_time,
        "number_of_screens": req.number_of_screens,
        "display_area": [
            {
                "id": area.id,
                "width": area.width,
                "height": area.height,
                "allow_audio": area.allow_audio,
                "supported_media": list(area.supported_media),
                "static_duration": area.static_duration,
            }
            for area in req.display_areas
        ],
        "device_attribute": [{"name": attr.name, "value": attr.value} for attr in req.device_attributes],
    }


def render_ad_config(config: AdConfig) -> dict[str, Any]:
    """Render the endpoint and base request of an ``AdConfig``."""
    return {"url": config.url, "base_request": render_ad_request(config.base_request)}


def dumps(payload: Any) -> str:
    """Serialize ``payload`` as strict JSON; NaN and infinities raise ``ValueError``."""
    return json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)


def load_ad_request(data: Mapping[str, Any]) -> AdRequest:
    """Load an ad request from a rendered JSON dict.

    Missing fields keep the ``AdRequest`` defaults.

    Args:
        data: Dict in the format produced by ``render_ad_request``.

    Returns:
        Reconstructed request.
    """
    defaults = AdRequest()
    return AdRequest(
        api_key=data.get("api_key", defaults.api_key),
        network_id=data.get("network_id", defaults.network_id),
        device_id=data.get("device_id", defaults.device_id),
        venue_id=data.get("venue_id", defaults.venue_id),
        direct_connection=data.get("direct_connection", defaults.direct_connection),
        latitude=data.get("latitude", defaults.latitude),
        longitude=data.get("longitude", defaults.longitude),
        display_time=data.get("display_time", defaults.display_time),
        number_of_screens=data.get("number_of_screens", defaults.number_of_screens),
        display_areas=[
            DisplayArea(
                id=item.get("id", ""),
                width=item.get("width", 0),
                height=item.get("height", 0),
                allow_audio=item.get("allow_audio", False),
                supported_media=list(item.get("supported_media", [])),
                static_duration=item.get("static_duration", 0),
            )
            for item in data.get("display_area", [])
        ],
        device_attributes=[
            DeviceAttribute(name=item.get("name", ""), value=item.get("value", ""))
            for item in data.get("device_attribute", [])
        ],
    )


def read_ad_request(path: Path) -> AdRequest:
    """Read an ad request from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        raise ValueError(f"{path} must contain a JSON object")
    return load_ad_request(data)


class JsonFileWriter:
    """Write rendered payloads under ``<base_dir>/json``."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"

    def write(self, payload: Any, action: str) -> Path:
        """Write ``payload`` to ``<action>_<timestamp>.json`` and return the path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(dumps(payload), encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
