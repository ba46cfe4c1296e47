"""Modal preferences dialog – edits the fields of a SettingsStore."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QVBoxLayout,
    QLineEdit,
    QCheckBox,
    QFontComboBox,
    QSpinBox,
)

from toxgui.gui.settings import SettingsStore


class SettingsDialog(QDialog):
    """Preferences editor.

    Widgets are filled from *store* on construction; the values are written
    back only when the dialog is accepted.
    """

    def __init__(self, store: SettingsStore, parent=None):
        super().__init__(parent)
        self._store = store
        self.setWindowTitle(self.tr("Preferences"))
        self.setModal(True)

        layout = QVBoxLayout(self)

        # ── General ───────────────────────────────────────────────────
        general_box = QGroupBox(self.tr("General"))
        general_form = QFormLayout(general_box)
        self.username_edit = QLineEdit(store.username())
        general_form.addRow(self.tr("Username:"), self.username_edit)
        self.status_edit = QLineEdit(store.status_message())
        general_form.addRow(self.tr("Status message:"), self.status_edit)
        layout.addWidget(general_box)

        # ── GUI ───────────────────────────────────────────────────────
        gui_box = QGroupBox(self.tr("Appearance"))
        gui_form = QFormLayout(gui_box)
        self.animation_check = QCheckBox(self.tr("Smooth animation"))
        self.animation_check.setChecked(store.is_animation_enabled())
        gui_form.addRow(self.animation_check)

        self.custom_font_check = QCheckBox(self.tr("Use custom emoji font"))
        self.custom_font_check.setChecked(store.is_custom_emoji_font())
        gui_form.addRow(self.custom_font_check)

        self.font_combo = QFontComboBox()
        self.font_combo.setCurrentFont(QFont(store.emoji_font_family()))
        # The combo falls back to an installed font when the stored one is missing
        self._initial_family = self.font_combo.currentFont().family()
        gui_form.addRow(self.tr("Emoji font:"), self.font_combo)

        self.font_size_spin = QSpinBox()
        self.font_size_spin.setRange(1, max(72, store.emoji_font_point_size()))
        self.font_size_spin.setValue(store.emoji_font_point_size())
        gui_form.addRow(self.tr("Emoji font size:"), self.font_size_spin)

        self.custom_font_check.toggled.connect(self._update_font_widgets)
        self._update_font_widgets(self.custom_font_check.isChecked())
        layout.addWidget(gui_box)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _update_font_widgets(self, enabled: bool):
        self.font_combo.setEnabled(enabled)
        self.font_size_spin.setEnabled(enabled)

    def accept(self):
        """Copy the widget values into the store, then close."""
        store = self._store
        store.set_username(self.username_edit.text())
        store.set_status_message(self.status_edit.text())
        store.set_animation_enabled(self.animation_check.isChecked())

        # Font setters notify listeners; skip the ones that did not change
        custom = self.custom_font_check.isChecked()
        if custom != store.is_custom_emoji_font():
            store.set_custom_emoji_font(custom)
        family = self.font_combo.currentFont().family()
        if family != self._initial_family and family != store.emoji_font_family():
            store.set_emoji_font_family(family)
        size = self.font_size_spin.value()
        if size != store.emoji_font_point_size():
            store.set_emoji_font_point_size(size)

        super().accept()
