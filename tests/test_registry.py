"""Tests for serial number → action resolution."""

import pytest

from lasttimei.lib.registry import ACTION_REGISTRY, registered_actions, resolve


class TestResolve:

    def test_kids_bed_sheets_button(self):
        assert resolve("G030MD027383CRCB") == "ACTION_WASHED_KIDS_BED_SHEETS"

    def test_every_registered_serial_resolves(self):
        for serial, action in ACTION_REGISTRY.items():
            assert resolve(serial) == action

    def test_unknown_serial_is_none(self):
        assert resolve("UNKNOWN_SERIAL_0000") is None

    def test_match_is_exact(self):
        assert resolve("g030md027383crcb") is None
        assert resolve(" G030MD027383CRCB") is None
        assert resolve("G030MD027383CRC") is None

    def test_deterministic(self):
        before = dict(ACTION_REGISTRY)
        assert resolve("G030MD027383CRCB") == resolve("G030MD027383CRCB")
        assert resolve("nope") == resolve("nope")
        assert dict(ACTION_REGISTRY) == before


class TestRegistry:

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            ACTION_REGISTRY["NEW"] = "ACTION_X"

    def test_registered_actions_returns_copy(self):
        actions = registered_actions()
        actions["NEW"] = "ACTION_X"
        assert "NEW" not in ACTION_REGISTRY
        assert registered_actions()["G030MD027383CRCB"] == "ACTION_WASHED_KIDS_BED_SHEETS"
