"""Persistent user preferences backed by an INI file through QSettings.

One :class:`SettingsStore` is created by the application entry point and
handed to every widget that needs it.  ``load()`` reads the user's
``settings.ini`` from the platform config directory, falling back to the copy
bundled with the package when the user has none yet; ``save()`` always writes
the user file.

Group and key names are fixed: files written by older clients must keep
loading.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PyQt6.QtCore import QByteArray, QObject, QSettings, QStandardPaths, pyqtSignal
from PyQt6.QtWidgets import QApplication

from toxgui.gui.models import DhtServer, WindowSettings


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

BUNDLED_SETTINGS = Path(__file__).resolve().parent.parent / "resources" / "settings.ini"

# Used when no QApplication exists yet (CLI, tests)
_FALLBACK_FONT_POINT_SIZE = 10


def default_config_dir() -> Path:
    """Return the platform's per-user configuration directory."""
    return Path(QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation))


def default_font_point_size() -> int:
    if QApplication.instance() is None:
        return _FALLBACK_FONT_POINT_SIZE
    size = QApplication.font().pointSize()
    return size if size > 0 else _FALLBACK_FONT_POINT_SIZE


def _as_bytes(value) -> bytes:
    if isinstance(value, QByteArray):
        return value.data()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return b""


def _as_str(value, default: str) -> str:
    if value is None:
        return default
    # Unquoted commas in hand-edited files come back as a list
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def _as_int(value, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return default


class SettingsStore(QObject):
    """In-memory mirror of all preferences plus load/save to ``settings.ini``."""

    FILENAME = "settings.ini"

    dht_server_list_changed = pyqtSignal()
    smiley_pack_changed = pyqtSignal()
    emoji_font_changed = pyqtSignal()

    def __init__(self, config_dir: Optional[PathLike] = None,
                 default_path: Optional[PathLike] = None, parent=None):
        super().__init__(parent)
        self._config_dir = Path(config_dir) if config_dir is not None else default_config_dir()
        self._default_path = Path(default_path) if default_path is not None else BUNDLED_SETTINGS
        self._loaded = False

        self._dht_server_list: list[DhtServer] = []
        self._window_settings: dict[str, WindowSettings] = {}

        self._username = "My name"
        self._status_message = "My status"
        # Not persisted yet, the [Logging] group is reserved
        self._enable_logging = False
        self._encrypt_logs = True
        self._animation_enabled = True
        self._smiley_pack = b""
        self._custom_emoji_font = True
        self._emoji_font_family = "DejaVu Sans"
        self._emoji_font_point_size = default_font_point_size()

    # ── Paths ────────────────────────────────────────────────────────

    def user_path(self) -> Path:
        """Path of the user-writable settings file (the one ``save()`` writes)."""
        return self._config_dir / self.FILENAME

    def source_path(self) -> Path:
        """Path ``load()`` reads: the user file if present, else the bundled one."""
        path = self.user_path()
        if path.is_file():
            return path
        return self._default_path

    def is_loaded(self) -> bool:
        return self._loaded

    # ── Load / save ──────────────────────────────────────────────────

    def load(self) -> None:
        """Populate every field from disk.  Runs only once per store."""
        if self._loaded:
            return

        path = self.source_path()
        logger.debug("Loading settings from %s", path)
        s = QSettings(str(path), QSettings.Format.IniFormat)

        s.beginGroup("DHT Server")
        size = s.beginReadArray("dhtServerList")
        servers = []
        for i in range(size):
            s.setArrayIndex(i)
            servers.append(DhtServer(
                name=_as_str(s.value("name"), ""),
                user_id=_as_str(s.value("userId"), ""),
                address=_as_str(s.value("address"), ""),
                port=_as_int(s.value("port"), 0),
            ))
        s.endArray()
        s.endGroup()
        self._dht_server_list = servers

        s.beginGroup("General")
        self._username = _as_str(s.value("username"), "My name")
        self._status_message = _as_str(s.value("statusMessage"), "My status")
        s.endGroup()

        s.beginGroup("WindowSettings")
        for name in s.childGroups():
            s.beginGroup(name)
            self._window_settings[name] = WindowSettings(
                geometry=_as_bytes(s.value("geometry")),
                state=_as_bytes(s.value("state")),
            )
            s.endGroup()
        s.endGroup()

        s.beginGroup("GUI")
        self._animation_enabled = _as_bool(s.value("smoothAnimation"), True)
        self._smiley_pack = _as_bytes(s.value("smileyPack"))
        self._custom_emoji_font = _as_bool(s.value("customEmojiFont"), True)
        self._emoji_font_family = _as_str(s.value("emojiFontFamily"), "DejaVu Sans")
        self._emoji_font_point_size = _as_int(
            s.value("emojiFontPointSize"), default_font_point_size())
        s.endGroup()

        self._loaded = True
        logger.debug("Loaded %d DHT server(s), %d window layout(s)",
                     len(self._dht_server_list), len(self._window_settings))

    def save(self) -> None:
        """Overwrite the user settings file with the in-memory state.

        Failures are logged, never raised.
        """
        path = self.user_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Cannot create settings directory %s: %s", path.parent, e)
            return

        s = QSettings(str(path), QSettings.Format.IniFormat)
        s.clear()

        s.beginGroup("DHT Server")
        s.beginWriteArray("dhtServerList", len(self._dht_server_list))
        for i, server in enumerate(self._dht_server_list):
            s.setArrayIndex(i)
            s.setValue("name", server.name)
            s.setValue("userId", server.user_id)
            s.setValue("address", server.address)
            s.setValue("port", server.port)
        s.endArray()
        s.endGroup()

        s.beginGroup("General")
        s.setValue("username", self._username)
        s.setValue("statusMessage", self._status_message)
        s.endGroup()

        s.beginGroup("WindowSettings")
        for name, window in self._window_settings.items():
            s.beginGroup(name)
            s.setValue("geometry", QByteArray(window.geometry))
            s.setValue("state", QByteArray(window.state))
            s.endGroup()
        s.endGroup()

        s.beginGroup("GUI")
        s.setValue("smoothAnimation", self._animation_enabled)
        s.setValue("smileyPack", QByteArray(self._smiley_pack))
        s.setValue("customEmojiFont", self._custom_emoji_font)
        s.setValue("emojiFontFamily", self._emoji_font_family)
        s.setValue("emojiFontPointSize", self._emoji_font_point_size)
        s.endGroup()

        s.sync()
        if s.status() != QSettings.Status.NoError:
            logger.warning("Writing %s failed: %s", path, s.status().name)
        else:
            logger.debug("Saved settings to %s", path)

    def execute_settings_dialog(self, parent=None) -> bool:
        """Run the modal preferences dialog; save if the user accepts."""
        from PyQt6.QtWidgets import QDialog
        from toxgui.gui.settings_dialog import SettingsDialog

        dialog = SettingsDialog(self, parent)
        if dialog.exec() == QDialog.DialogCode.Accepted.value:
            self.save()
            return True
        return False

    # ── DHT servers ──────────────────────────────────────────────────

    def dht_server_list(self) -> list[DhtServer]:
        return list(self._dht_server_list)

    def set_dht_server_list(self, servers) -> None:
        self._dht_server_list = list(servers)
        self.dht_server_list_changed.emit()

    # ── General ──────────────────────────────────────────────────────

    def username(self) -> str:
        return self._username

    def set_username(self, name: str) -> None:
        self._username = name

    def status_message(self) -> str:
        return self._status_message

    def set_status_message(self, message: str) -> None:
        self._status_message = message

    # ── Logging (in memory only) ─────────────────────────────────────

    def enable_logging(self) -> bool:
        return self._enable_logging

    def set_enable_logging(self, value: bool) -> None:
        self._enable_logging = value

    def encrypt_logs(self) -> bool:
        return self._encrypt_logs

    def set_encrypt_logs(self, value: bool) -> None:
        self._encrypt_logs = value

    # ── Window layouts ───────────────────────────────────────────────

    def save_window(self, window) -> None:
        """Remember *window*'s geometry and state under its object name."""
        self._window_settings[window.objectName()] = WindowSettings(
            geometry=_as_bytes(window.saveGeometry()),
            state=_as_bytes(window.saveState()),
        )

    def load_window(self, window) -> None:
        """Restore *window*'s layout; leaves it alone if none was saved."""
        saved = self._window_settings.get(window.objectName())
        if saved is None:
            return
        window.restoreGeometry(saved.geometry)
        window.restoreState(saved.state)

    def window_names(self) -> list[str]:
        return sorted(self._window_settings)

    # ── GUI ──────────────────────────────────────────────────────────

    def is_animation_enabled(self) -> bool:
        return self._animation_enabled

    def set_animation_enabled(self, value: bool) -> None:
        self._animation_enabled = value

    def smiley_pack(self) -> bytes:
        return self._smiley_pack

    def set_smiley_pack(self, value: bytes) -> None:
        self._smiley_pack = bytes(value)
        self.smiley_pack_changed.emit()

    def is_custom_emoji_font(self) -> bool:
        return self._custom_emoji_font

    def set_custom_emoji_font(self, value: bool) -> None:
        self._custom_emoji_font = value
        self.emoji_font_changed.emit()

    def emoji_font_family(self) -> str:
        return self._emoji_font_family

    def set_emoji_font_family(self, family: str) -> None:
        self._emoji_font_family = family
        self.emoji_font_changed.emit()

    def emoji_font_point_size(self) -> int:
        return self._emoji_font_point_size

    def set_emoji_font_point_size(self, size: int) -> None:
        self._emoji_font_point_size = size
        self.emoji_font_changed.emit()
