from __future__ import annotations

from pathlib import Path

from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from notepad.appearance import NotepadSettings, SettingsProvider, list_font_names, normalize_color
from notepad.logging_setup import log
from notepad.settings import CREATE_NEW_FILE_DIALOG, NEW_NOTE_DEFAULT_NAME


class QtPrompter:
    """Blocking modal prompts used by NoteSession."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def ask_yes_no(self, title: str, message: str) -> bool:
        answer = QMessageBox.question(
            self._parent,
            title,
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.Yes,
        )
        return answer == QMessageBox.Yes

    def notify(self, title: str, message: str) -> None:
        QMessageBox.information(self._parent, title, message)

    def ask_new_file_name(self) -> str | None:
        name, ok = QInputDialog.getText(
            self._parent,
            CREATE_NEW_FILE_DIALOG,
            "File name:",
            text=NEW_NOTE_DEFAULT_NAME,
        )
        name = (name or "").strip()
        if not ok or not name:
            return None
        return name


class _ColorButton(QPushButton):
    def __init__(self, color: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.color = color
        self.clicked.connect(self._pick)
        self._refresh()

    def _refresh(self) -> None:
        self.setText(self.color)
        self.setStyleSheet(f"QPushButton {{ background-color: {self.color}; }}")

    def _pick(self) -> None:
        picked = QColorDialog.getColor(QColor(self.color), self, "Pick colour")
        if picked.isValid():
            self.color = normalize_color(picked.name(), self.color)
            self._refresh()


class SettingsDialog(QDialog):
    """Editor for the notepad settings asset; changes are written only on Save."""

    def __init__(self, parent: QWidget | None, *, provider: SettingsProvider, fonts_dir: Path) -> None:
        super().__init__(parent)
        self.setWindowTitle("Notepad Settings")
        self.setModal(True)
        self.resize(420, 220)

        self._provider = provider
        self.settings: NotepadSettings = provider.load_settings()

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.text_color = _ColorButton(self.settings.text_color)
        self.background_color = _ColorButton(self.settings.background_color)
        form.addRow("Text Color", self.text_color)
        form.addRow("Background Color", self.background_color)

        self.font_combo = QComboBox()
        fonts = list_font_names(fonts_dir)
        if self.settings.selected_font not in fonts:
            fonts.insert(0, self.settings.selected_font)
        self.font_combo.addItems(fonts)
        self.font_combo.setCurrentText(self.settings.selected_font)
        form.addRow("Font Name", self.font_combo)

        self.use_custom_font = QCheckBox()
        self.use_custom_font.setChecked(self.settings.use_custom_font)
        form.addRow("Use Custom Font", self.use_custom_font)
        layout.addLayout(form)

        if not list_font_names(fonts_dir):
            layout.addWidget(QLabel(f"No fonts found in {fonts_dir}"))

        buttons = QHBoxLayout()
        btn_cancel = QPushButton("Cancel")
        btn_save = QPushButton("Save")
        btn_save.setDefault(True)
        btn_cancel.clicked.connect(self.reject)
        btn_save.clicked.connect(self._save)
        buttons.addStretch(1)
        buttons.addWidget(btn_cancel)
        buttons.addWidget(btn_save)
        layout.addLayout(buttons)

    def _save(self) -> None:
        self.settings = NotepadSettings(
            text_color=self.text_color.color,
            background_color=self.background_color.color,
            selected_font=self.font_combo.currentText(),
            use_custom_font=self.use_custom_font.isChecked(),
        )
        try:
            self._provider.save_settings(self.settings)
        except OSError as e:
            log.exception("Failed to save settings asset")
            QMessageBox.critical(self, "Notepad Settings", f"Could not save settings:\n{e}")
            return
        self.accept()
