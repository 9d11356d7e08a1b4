"""Tests for YAML parameter loading, env overrides and runtime config."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from VistarAds.config import (
    apply_env_overrides,
    flatten_params,
    load_config,
    load_params,
    load_params_with_defaults,
    parse_params,
)
from VistarAds.config.runtime import load_runtime


_DEFAULT_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

vistar:
  url: https://example.test/get_ad
  api_key: default-key
  network_id: default-network
  venue_id: default-venue
  direct_connection: false
  latitude: 1.5
  longitude: 2.5
  mime_types: [image/jpeg, image/png]
  width: 1280
  height: 720
  allow_audio: false
  static_duration: 8
"""

_OVERRIDE_YAML = """
vistar:
  venue_id: lobby-1
  allow_audio: true
  mime_types: "video/mp4, image/png"
"""


class TestFlattenParams(unittest.TestCase):
    def test_nested_mapping_to_dotted_strings(self) -> None:
        flat = flatten_params(
            {
                "vistar": {"width": 100, "allow_audio": True, "latitude": 4.5, "mime_types": ["a", "b"]},
                "log": {"dir": None},
                "top": "x",
            }
        )
        self.assertEqual(
            flat,
            {
                "vistar.width": "100",
                "vistar.allow_audio": "true",
                "vistar.latitude": "4.5",
                "vistar.mime_types": "a,b",
                "top": "x",
            },
        )

    def test_flattened_yaml_parses_back(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "default.yml"
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
            cfg = parse_params(load_params(path))

        base = cfg.ad.base_request
        self.assertEqual(cfg.ad.url, "https://example.test/get_ad")
        self.assertEqual(base.venue_id, "default-venue")
        self.assertEqual(base.latitude, 1.5)
        self.assertEqual(base.display_areas[0].supported_media, ["image/jpeg", "image/png"])
        self.assertEqual(base.display_areas[0].width, 1280)
        self.assertFalse(base.display_areas[0].allow_audio)


class TestLoadWithDefaults(unittest.TestCase):
    def test_override_merges_onto_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            default_path = temp_path / "default.yml"
            override_path = temp_path / "override.yml"
            default_path.write_text(_DEFAULT_YAML, encoding="utf-8")
            override_path.write_text(_OVERRIDE_YAML, encoding="utf-8")

            params = load_params_with_defaults(override_path, default_path)

        self.assertEqual(params["vistar.venue_id"], "lobby-1")
        self.assertEqual(params["vistar.api_key"], "default-key")
        self.assertEqual(params["vistar.allow_audio"], "true")
        self.assertEqual(params["vistar.mime_types"], "video/mp4, image/png")

    def test_no_files_gives_empty_params(self) -> None:
        self.assertEqual(load_params_with_defaults(None, None), {})

    def test_non_mapping_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "bad.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_params(path)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(OSError):
            load_params(Path("does/not/exist.yml"))


class TestEnvOverrides(unittest.TestCase):
    def test_vistar_prefixed_variables_override(self) -> None:
        params = {"vistar.api_key": "file-key", "vistar.width": "100"}
        merged = apply_env_overrides(
            params,
            {"VISTAR_API_KEY": "env-key", "VISTAR_": "ignored", "HOME": "/root"},
        )
        self.assertEqual(merged, {"vistar.api_key": "env-key", "vistar.width": "100"})
        self.assertEqual(params["vistar.api_key"], "file-key")

    def test_load_config_reads_process_environment(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "default.yml"
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
            with patch.dict(os.environ, {"VISTAR_VENUE_ID": "env-venue"}, clear=False):
                cfg = load_config(path)

        self.assertEqual(cfg.ad.base_request.venue_id, "env-venue")
        self.assertEqual(cfg.ad.base_request.device_id, "env-venue")


class TestRuntimeConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        runtime = load_runtime({})
        self.assertEqual(runtime.level, "INFO")
        self.assertFalse(runtime.to_file)
        self.assertEqual(runtime.dir, "log")

    def test_values_and_fallbacks(self) -> None:
        runtime = load_runtime({"log.level": "debug", "log.to_file": "yes", "log.dir": "  "})
        self.assertEqual(runtime.level, "DEBUG")
        self.assertTrue(runtime.to_file)
        self.assertEqual(runtime.dir, "log")

    def test_unknown_level_falls_back(self) -> None:
        self.assertEqual(load_runtime({"log.level": "loud"}).level, "INFO")


if __name__ == "__main__":
    unittest.main()
