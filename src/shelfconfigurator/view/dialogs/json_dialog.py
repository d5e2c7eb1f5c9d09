"""
JSON Export / Import Dialog
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QFontDatabase, QGuiApplication
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QPlainTextEdit, QDialogButtonBox, QLabel, QPushButton, QWidget
)

logger = logging.getLogger(__name__)


class JsonDialog(QDialog):
    """
    Shows the configuration as editable JSON text.
    Export mode: read-only text plus a 'Copy' button.
    Import mode: the user pastes text; ``text()`` returns it after accept.
    """
    def __init__(self, title: str, text: str = "", read_only: bool = False,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(560, 520)

        layout = QVBoxLayout(self)

        hint = "Copy this text to keep or share the configuration." if read_only \
            else "Paste a configuration exported earlier."
        layout.addWidget(QLabel(hint))

        self.editor = QPlainTextEdit()
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.editor.setPlainText(text)
        self.editor.setReadOnly(read_only)
        layout.addWidget(self.editor)

        if read_only:
            buttons = QDialogButtonBox(QDialogButtonBox.Close)
            btn_copy = QPushButton("Copy to Clipboard")
            btn_copy.clicked.connect(self.copy_to_clipboard)
            buttons.addButton(btn_copy, QDialogButtonBox.ActionRole)
            buttons.rejected.connect(self.reject)
        else:
            buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
            buttons.accepted.connect(self.accept)
            buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def text(self) -> str:
        return self.editor.toPlainText()

    def copy_to_clipboard(self) -> bool:
        """Best effort; a missing clipboard never blocks the export."""
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            logger.warning("Clipboard is not available.")
            return False
        clipboard.setText(self.text())
        return True
