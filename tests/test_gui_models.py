"""Tests for toxgui.gui.models – settings value types."""

import dataclasses

import pytest

from toxgui.gui.models import DhtServer, WindowSettings


class TestDhtServer:
    def test_defaults(self):
        server = DhtServer()
        assert server.name == ""
        assert server.port == 0

    def test_label(self):
        server = DhtServer(name="sonOfRa", user_id="04", address="144.76.60.215", port=33445)
        assert server.label() == "sonOfRa (144.76.60.215:33445)"

    def test_immutable(self):
        server = DhtServer(name="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            server.name = "b"

    def test_duplicates_compare_equal(self):
        a = DhtServer("n", "id", "host", 1)
        assert a == DhtServer("n", "id", "host", 1)
        assert [a, a].count(a) == 2


class TestWindowSettings:
    def test_empty_blobs(self):
        ws = WindowSettings()
        assert ws.geometry == b""
        assert ws.state == b""
