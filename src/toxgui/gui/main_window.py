"""Main application window – profile header and DHT server list."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QFont
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLabel,
    QListWidget,
    QStatusBar,
)

from toxgui.gui.settings import SettingsStore


class MainWindow(QMainWindow):
    """toxgui main window.

    The window never reads the preference file itself; everything goes
    through the injected :class:`SettingsStore`.
    """

    def __init__(self, store: SettingsStore):
        super().__init__()
        self._store = store
        self.setObjectName("MainWindow")
        self.setWindowTitle("Tox")
        self.resize(420, 640)

        self._build_menu_bar()

        # ── Central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)

        self._name_label = QLabel()
        name_font = QFont()
        name_font.setBold(True)
        self._name_label.setFont(name_font)
        layout.addWidget(self._name_label)

        self._status_label = QLabel()
        layout.addWidget(self._status_label)

        self._emoji_preview = QLabel("\U0001F600 \U0001F44D ❤")
        layout.addWidget(self._emoji_preview)

        layout.addWidget(QLabel(self.tr("DHT servers")))
        self.server_list = QListWidget()
        layout.addWidget(self.server_list, stretch=1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        # ── Connect signals ───────────────────────────────────────────
        store.dht_server_list_changed.connect(self._refresh_servers)
        store.emoji_font_changed.connect(self._refresh_emoji_font)

        self._refresh_profile()
        self._refresh_servers()
        self._refresh_emoji_font()

        store.load_window(self)

    # ── Menu bar ──────────────────────────────────────────────────────

    def _build_menu_bar(self):
        menu_bar = self.menuBar()
        self._settings_menu = menu_bar.addMenu(self.tr("Settings"))
        self._prefs_action = QAction(self.tr("Preferences…"), self)
        self._prefs_action.triggered.connect(self._on_preferences)
        self._settings_menu.addAction(self._prefs_action)

        self._quit_action = QAction(self.tr("Quit"), self)
        self._quit_action.triggered.connect(self.close)
        self._settings_menu.addAction(self._quit_action)

    def _on_preferences(self):
        if self._store.execute_settings_dialog(self):
            # Username and status do not notify
            self._refresh_profile()
            self.status_bar.showMessage(self.tr("Preferences saved"), 3000)

    # ── Signal handlers ───────────────────────────────────────────────

    def _refresh_profile(self):
        self._name_label.setText(self._store.username())
        self._status_label.setText(self._store.status_message())

    def _refresh_servers(self):
        self.server_list.clear()
        for server in self._store.dht_server_list():
            self.server_list.addItem(server.label())

    def _refresh_emoji_font(self):
        store = self._store
        if store.is_custom_emoji_font():
            font = QFont(store.emoji_font_family(), store.emoji_font_point_size())
        else:
            font = QFont()
        self._emoji_preview.setFont(font)

    def closeEvent(self, event):
        """Record window geometry on close."""
        self._store.save_window(self)
        super().closeEvent(event)
