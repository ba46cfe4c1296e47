"""Tests for toxgui.gui.settings_dialog – preferences dialog and save glue."""

import pytest
from PyQt6.QtWidgets import QDialog

from toxgui.gui.settings import SettingsStore
from toxgui.gui.settings_dialog import SettingsDialog


@pytest.fixture
def store(qapp, tmp_path):
    store = SettingsStore(config_dir=tmp_path / "config",
                          default_path=tmp_path / "missing-default.ini")
    store.load()
    return store


@pytest.fixture
def font_events(store):
    events = []
    store.emoji_font_changed.connect(lambda: events.append("font"))
    return events


def _fake_exec(edit, accept=True):
    """Replace the modal loop: apply *edit* to the widgets, then close."""
    def exec_(dialog):
        edit(dialog)
        if accept:
            dialog.accept()
            return QDialog.DialogCode.Accepted.value
        dialog.reject()
        return QDialog.DialogCode.Rejected.value
    return exec_


class TestExecuteSettingsDialog:
    def test_accept_saves(self, store, font_events, monkeypatch):
        def edit(dialog):
            dialog.username_edit.setText("Alice")
            dialog.status_edit.setText("Online")
            dialog.animation_check.setChecked(False)
            dialog.font_size_spin.setValue(20)

        monkeypatch.setattr(SettingsDialog, "exec", _fake_exec(edit))
        assert store.execute_settings_dialog() is True

        assert store.username() == "Alice"
        assert store.status_message() == "Online"
        assert store.is_animation_enabled() is False
        assert store.emoji_font_point_size() == 20
        assert font_events == ["font"]

        text = store.user_path().read_text()
        assert "Alice" in text
        assert "emojiFontPointSize=20" in text

    def test_cancel_changes_nothing(self, store, font_events, monkeypatch):
        size = store.emoji_font_point_size()

        def edit(dialog):
            dialog.username_edit.setText("Mallory")
            dialog.font_size_spin.setValue(size + 5)

        monkeypatch.setattr(SettingsDialog, "exec", _fake_exec(edit, accept=False))
        assert store.execute_settings_dialog() is False

        assert store.username() == "My name"
        assert store.emoji_font_point_size() == size
        assert font_events == []
        assert not store.user_path().exists()

    def test_toggle_custom_font_notifies(self, store, font_events, monkeypatch):
        def edit(dialog):
            dialog.custom_font_check.setChecked(False)

        monkeypatch.setattr(SettingsDialog, "exec", _fake_exec(edit))
        store.execute_settings_dialog()
        assert store.is_custom_emoji_font() is False
        assert font_events == ["font"]


class TestSettingsDialog:
    def test_widgets_filled_from_store(self, store):
        store.set_username("Alice")
        store.set_emoji_font_point_size(14)
        dialog = SettingsDialog(store)
        assert dialog.username_edit.text() == "Alice"
        assert dialog.status_edit.text() == "My status"
        assert dialog.custom_font_check.isChecked() is True
        assert dialog.font_size_spin.value() == 14

    def test_unchanged_accept_is_silent(self, store, font_events):
        dialog = SettingsDialog(store)
        family = store.emoji_font_family()
        dialog.accept()
        assert font_events == []
        assert store.emoji_font_family() == family

    def test_large_point_size_kept(self, store, font_events):
        store.set_emoji_font_point_size(96)
        font_events.clear()

        dialog = SettingsDialog(store)
        assert dialog.font_size_spin.value() == 96
        dialog.accept()
        assert store.emoji_font_point_size() == 96
        assert font_events == []
