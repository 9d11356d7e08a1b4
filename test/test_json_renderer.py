"""Tests for JSON rendering of ad requests."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from VistarAds.config.ad import parse_ad_config
from VistarAds.core.models import AdRequest, DeviceAttribute, DisplayArea
from VistarAds.renderers.json import (
    JsonFileWriter,
    dumps,
    load_ad_request,
    read_ad_request,
    render_ad_config,
    render_ad_request,
)


class TestRenderAdRequest(unittest.TestCase):
    def test_render_uses_api_field_names(self) -> None:
        req = AdRequest(
            api_key="k",
            network_id="n",
            device_id="v",
            venue_id="v",
            direct_connection=True,
            latitude=1.0,
            longitude=2.0,
            display_time=99,
            number_of_screens=1,
            display_areas=[DisplayArea(id="d1", width=10, height=20, supported_media=["image/png"])],
            device_attributes=[DeviceAttribute(name="a", value="b")],
        )
        body = render_ad_request(req)

        self.assertEqual(body["api_key"], "k")
        self.assertEqual(body["display_time"], 99)
        self.assertEqual(
            body["display_area"],
            [
                {
                    "id": "d1",
                    "width": 10,
                    "height": 20,
                    "allow_audio": False,
                    "supported_media": ["image/png"],
                    "static_duration": 0,
                }
            ],
        )
        self.assertEqual(body["device_attribute"], [{"name": "a", "value": "b"}])
        json.dumps(body)

    def test_load_reverses_render(self) -> None:
        req = AdRequest(venue_id="v", display_areas=[DisplayArea(id="d1", supported_media=["x"])])
        self.assertEqual(load_ad_request(render_ad_request(req)), req)

    def test_load_partial_request_keeps_defaults(self) -> None:
        req = load_ad_request({"display_area": [{"id": "d1", "width": 500}]})
        self.assertEqual(req.api_key, "")
        self.assertEqual(req.display_areas[0].width, 500)
        self.assertEqual(req.display_areas[0].supported_media, [])
        self.assertEqual(req.device_attributes, [])

    def test_render_config(self) -> None:
        payload = render_ad_config(parse_ad_config({"vistar.url": "u", "vistar.venue_id": "v"}))
        self.assertEqual(payload["url"], "u")
        self.assertEqual(payload["base_request"]["device_id"], "v")
        self.assertEqual(payload["base_request"]["display_time"], 0)


class TestDumps(unittest.TestCase):
    def test_non_finite_numbers_rejected(self) -> None:
        with self.assertRaises(ValueError):
            dumps(render_ad_request(AdRequest(latitude=float("inf"))))

    def test_output_is_strict_json(self) -> None:
        text = dumps(render_ad_request(AdRequest(latitude=1.5)))
        self.assertEqual(json.loads(text)["latitude"], 1.5)


class TestJsonFiles(unittest.TestCase):
    def test_read_ad_request_rejects_non_object(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "req.json"
            path.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_ad_request(path)

    def test_writer_writes_timestamped_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = JsonFileWriter(temp_dir).write({"api_key": "k"}, "request")

            self.assertEqual(path.parent, Path(temp_dir) / "json")
            self.assertTrue(path.name.startswith("request_"))
            self.assertEqual(json.loads(path.read_text(encoding="utf-8")), {"api_key": "k"})


if __name__ == "__main__":
    unittest.main()
