from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QSlider,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from notepad.appearance import NotepadSettings, SettingsProvider, text_area_stylesheet
from notepad.logging_setup import log
from notepad.notes.catalog import FileCatalog
from notepad.notes.repo import NotesDirectory
from notepad.preferences import Preferences
from notepad.session import NoteSession
from notepad.settings import (
    FONT_SIZE_LABEL,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    MENU_CUSTOM_FONT,
    MENU_SETTINGS,
    MENU_TITLE,
    NOTEPAD_TITLE,
    SELECT_FILE,
    NotepadConfig,
)
from notepad.ui.dialogs import QtPrompter, SettingsDialog
from notepad.ui.qt_utils import blocked_signals, default_font, load_custom_font


class NotepadWindow(QMainWindow):
    def __init__(
        self,
        *,
        config: NotepadConfig,
        prefs: Preferences,
        settings_provider: SettingsProvider,
    ):
        super().__init__()
        self.setWindowTitle(NOTEPAD_TITLE)

        self.config = config
        self.prefs = prefs
        self._settings_provider = settings_provider
        self._appearance: NotepadSettings = settings_provider.load_settings()

        self.prompter = QtPrompter(self)
        self.session = NoteSession(
            catalog=FileCatalog(config.notes_dir),
            notes=NotesDirectory(config.notes_dir),
            prompter=self.prompter,
            on_disk_changed=self._on_disk_changed,
        )

        # UI
        self.file_combo = QComboBox()
        self.file_combo.setSizeAdjustPolicy(QComboBox.AdjustToContents)

        self.reload_btn = QToolButton()
        self.reload_btn.setIcon(self.style().standardIcon(QStyle.SP_BrowserReload))
        self.reload_btn.setToolTip("Reload files")
        self.new_btn = QToolButton()
        self.new_btn.setIcon(self.style().standardIcon(QStyle.SP_FileIcon))
        self.new_btn.setToolTip("Create new file")

        self.font_slider = QSlider(Qt.Horizontal)
        self.font_slider.setRange(FONT_SIZE_MIN, FONT_SIZE_MAX)
        self.font_slider.setValue(self.prefs.font_size)
        self.font_size_value = QLabel(str(self.prefs.font_size))

        self.editor = QPlainTextEdit()

        top = QHBoxLayout()
        top.addWidget(QLabel(SELECT_FILE))
        top.addWidget(self.file_combo, 1)
        top.addWidget(self.reload_btn)
        top.addWidget(self.new_btn)

        size_row = QHBoxLayout()
        size_row.addWidget(QLabel(FONT_SIZE_LABEL))
        size_row.addWidget(self.font_slider, 1)
        size_row.addWidget(self.font_size_value)

        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.addLayout(top)
        root_layout.addLayout(size_row)
        root_layout.addWidget(self.editor, 1)
        self.setCentralWidget(root)

        geo = self.prefs.geometry
        if geo:
            try:
                self.restoreGeometry(geo)
            except Exception:
                log.exception("Failed to restore window geometry")

        # Signals
        self.file_combo.currentIndexChanged.connect(self._on_select_file)
        self.reload_btn.clicked.connect(lambda: self.session.reload())
        self.new_btn.clicked.connect(lambda: self.create_note_dialog())
        self.font_slider.valueChanged.connect(self._on_font_size_changed)
        self.editor.textChanged.connect(self._on_text_changed)
        self.session.on_changed(self._on_model_updated)

        self._build_menu()
        self._apply_text_style()

        self.session.init(preferred=self.prefs.last_note or None)
        log.info("Notepad window ready: notes_dir=%s files=%d", config.notes_dir, len(self.session.files))

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu(MENU_TITLE)

        act_save = QAction("Save", self)
        act_save.setShortcut(QKeySequence.Save)
        act_save.triggered.connect(lambda: self.session.save())

        act_new = QAction("New File…", self)
        act_new.setShortcut(QKeySequence.New)
        act_new.triggered.connect(lambda: self.create_note_dialog())

        act_reload = QAction("Reload Files", self)
        act_reload.setShortcut(QKeySequence.Refresh)
        act_reload.triggered.connect(lambda: self.session.reload())

        self.act_custom_font = QAction(MENU_CUSTOM_FONT, self, checkable=True)
        self.act_custom_font.setChecked(self.prefs.use_custom_font)
        self.act_custom_font.triggered.connect(lambda: self._toggle_custom_font())

        act_settings = QAction(MENU_SETTINGS, self)
        act_settings.triggered.connect(lambda: self.open_settings_dialog())

        menu.addAction(act_save)
        menu.addAction(act_new)
        menu.addAction(act_reload)
        menu.addSeparator()
        menu.addAction(self.act_custom_font)
        menu.addAction(act_settings)

    def closeEvent(self, event):  # type: ignore[override]
        """Give the user a last chance to save before the window goes away."""
        try:
            self.session.dispose()
        except Exception:
            log.exception("Failed to dispose note session on close")
        self.prefs.geometry = self.saveGeometry()
        super().closeEvent(event)

    # ───────────────────────── session → view ─────────────────────────

    def _on_model_updated(self) -> None:
        s = self.session
        self.setWindowTitle(s.title)

        files = list(s.files)
        with blocked_signals(self.file_combo):
            if [self.file_combo.itemText(i) for i in range(self.file_combo.count())] != files:
                self.file_combo.clear()
                self.file_combo.addItems(files)
            self.file_combo.setCurrentIndex(s.selected_index)

        if self.editor.toPlainText() != s.text:
            with blocked_signals(self.editor):
                self.editor.setPlainText(s.text)

        if s.selected_index != -1 and self.prefs.last_note != s.current_name:
            self.prefs.last_note = s.current_name

    def _on_disk_changed(self) -> None:
        self.statusBar().showMessage(f"Saved {self.session.current_name}", 2000)

    # ───────────────────────── view → session ─────────────────────────

    def _on_select_file(self, index: int) -> None:
        self.session.select_index(index)
        # failed switch: put the dropdown back on the open file
        if self.file_combo.currentIndex() != self.session.selected_index:
            with blocked_signals(self.file_combo):
                self.file_combo.setCurrentIndex(self.session.selected_index)

    def _on_text_changed(self) -> None:
        self.session.edit(self.editor.toPlainText())

    def create_note_dialog(self) -> None:
        name = self.prompter.ask_new_file_name()
        if name is None:
            return
        self.session.create_new(name)

    def _on_font_size_changed(self, value: int) -> None:
        self.font_size_value.setText(str(value))
        self.prefs.font_size = value
        self._apply_text_style()

    def _toggle_custom_font(self) -> None:
        self.act_custom_font.setChecked(self.prefs.toggle_custom_font())
        self._apply_text_style()

    def open_settings_dialog(self) -> None:
        dlg = SettingsDialog(self, provider=self._settings_provider, fonts_dir=self.config.fonts_dir)
        if dlg.exec():
            self._appearance = dlg.settings
            self.prefs.use_custom_font = self._appearance.use_custom_font
            self.act_custom_font.setChecked(self._appearance.use_custom_font)
            self._apply_text_style()

    def _apply_text_style(self) -> None:
        size = self.font_slider.value()
        if self.prefs.use_custom_font:
            font = load_custom_font(self.config.fonts_dir, self._appearance.selected_font, size)
        else:
            font = default_font(size)
        self.editor.setFont(font)
        self.editor.setStyleSheet(text_area_stylesheet(self._appearance))
