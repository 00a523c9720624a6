"""Card picker popup dialog.

Displays a 13x4 grid of rank x suit buttons covering the 52 valid card
tokens. Clicking a card selects it and closes the popup. Cards already
placed in another slot are disabled to prevent duplicates.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QPushButton,
    QWidget,
)

from poker_helper.utils.card import all_card_tokens
from poker_helper.utils.constants import Suit

_COLUMNS = len(Suit)

_SUIT_COLORS = {
    Suit.SPADES: "#1a1a2e",
    Suit.HEARTS: "#e63946",
    Suit.DIAMONDS: "#2a7de1",
    Suit.CLUBS: "#2d6a4f",
}


class CardPickerPopup(QDialog):
    """A 13x4 grid dialog for selecting a single card.

    Emits card_selected(str) with the card token (e.g. 'A♥').
    """

    card_selected = Signal(str)

    def __init__(self, used_cards: set[str] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Pick a Card")
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)
        self._used = used_cards or set()
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setSpacing(2)

        # Tokens come aces first, one suit per column
        for i, token in enumerate(all_card_tokens()):
            row, col = divmod(i, _COLUMNS)
            btn = QPushButton(token)
            btn.setFixedSize(48, 36)
            btn.setStyleSheet(
                f"QPushButton {{"
                f"  color: {_SUIT_COLORS[Suit(token[-1])]}; font-weight: bold; font-size: 13px;"
                f"  border: 1px solid #ccc; border-radius: 4px; background: #fafafa;"
                f"}}"
                f"QPushButton:hover {{ background: #e0e7ff; }}"
                f"QPushButton:disabled {{ color: #ccc; background: #f0f0f0; }}"
            )
            if token in self._used:
                btn.setEnabled(False)
            else:
                btn.clicked.connect(lambda checked=False, c=token: self._pick(c))
            layout.addWidget(btn, row, col)

    def _pick(self, token: str) -> None:
        self.card_selected.emit(token)
        self.accept()


class CardSlotButton(QPushButton):
    """A button holding one card slot (hole or community).

    Shows '?' when empty. Click opens CardPickerPopup, right-click clears.
    """

    card_changed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("?", parent)
        self._card: str = ""
        self.setFixedSize(56, 40)
        self.setCursor(Qt.PointingHandCursor)
        self._update_display()

    @property
    def card(self) -> str:
        return self._card

    @card.setter
    def card(self, value: str) -> None:
        self._card = value
        self._update_display()
        self.card_changed.emit()

    def clear_card(self) -> None:
        self.card = ""

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.RightButton:
            self.clear_card()
        else:
            super().mousePressEvent(event)

    def _update_display(self) -> None:
        if not self._card:
            self.setText("?")
            self.setStyleSheet(
                "QPushButton { font-size: 16px; font-weight: bold; color: #999;"
                " border: 2px dashed #ccc; border-radius: 6px; background: #fafafa; }"
                "QPushButton:hover { border-color: #888; background: #f0f0ff; }"
            )
            return
        color = _SUIT_COLORS.get(Suit(self._card[-1]), "#000")
        self.setText(self._card)
        self.setStyleSheet(
            f"QPushButton {{ font-size: 14px; font-weight: bold; color: {color};"
            f" border: 2px solid {color}; border-radius: 6px; background: #fff; }}"
            f"QPushButton:hover {{ background: #e0e7ff; }}"
        )
