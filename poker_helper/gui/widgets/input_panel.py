"""Input panel widget for the decision helper GUI.

Two hole card slots, five community card slots, position dropdown,
player count, pot/bet/stack inputs, and the calculate button.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from poker_helper.gui.widgets.card_picker import CardPickerPopup, CardSlotButton
from poker_helper.utils.constants import MAX_PLAYERS, MIN_PLAYERS, Position

_MAX_AMOUNT = 1_000_000.0


class InputPanel(QWidget):
    """Top input section: cards, table state, calculate button."""

    calculate_requested = Signal()
    inputs_changed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._hole_slots: list[CardSlotButton] = []
        self._board_slots: list[CardSlotButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Row 1: Cards ---
        cards_row = QHBoxLayout()

        hole_group = QGroupBox("Your Hand")
        hole_layout = QHBoxLayout(hole_group)
        for _ in range(2):
            hole_layout.addWidget(self._make_slot(self._hole_slots))
        cards_row.addWidget(hole_group)

        board_group = QGroupBox("Community Cards")
        board_layout = QHBoxLayout(board_group)
        for _ in range(5):
            board_layout.addWidget(self._make_slot(self._board_slots))
        cards_row.addWidget(board_group)

        main_layout.addLayout(cards_row)

        # --- Row 2: Position and players ---
        table_row = QHBoxLayout()

        self._position_combo = QComboBox()
        for position in Position:
            self._position_combo.addItem(position.value.title(), position.value)
        self._position_combo.currentIndexChanged.connect(self.inputs_changed.emit)
        table_row.addWidget(QLabel("Position:"))
        table_row.addWidget(self._position_combo)

        self._players_spin = QSpinBox()
        self._players_spin.setRange(MIN_PLAYERS, MAX_PLAYERS)
        self._players_spin.setValue(6)
        self._players_spin.valueChanged.connect(self.inputs_changed.emit)
        table_row.addWidget(QLabel("Players:"))
        table_row.addWidget(self._players_spin)
        table_row.addStretch()

        main_layout.addLayout(table_row)

        # --- Row 3: Amounts ---
        nums_row = QHBoxLayout()
        self._pot_spin = self._make_amount(nums_row, "Pot Size:", 0.0)
        self._bet_spin = self._make_amount(nums_row, "Current Bet:", 0.0)
        self._stack_spin = self._make_amount(nums_row, "Your Stack:", 1000.0)
        main_layout.addLayout(nums_row)

        # --- Row 4: Calculate ---
        self._calc_btn = QPushButton("Calculate Best Move")
        self._calc_btn.setFixedHeight(36)
        self._calc_btn.setStyleSheet(
            "QPushButton { background: #3b82f6; color: white; font-weight: bold;"
            " font-size: 14px; border-radius: 6px; padding: 0 20px; }"
            "QPushButton:hover { background: #2563eb; }"
            "QPushButton:pressed { background: #1e40af; }"
        )
        self._calc_btn.clicked.connect(self.calculate_requested.emit)
        main_layout.addWidget(self._calc_btn)

    def _make_slot(self, slots: list[CardSlotButton]) -> CardSlotButton:
        slot = CardSlotButton()
        slot.clicked.connect(lambda checked=False, s=slot: self._open_picker(s))
        slot.card_changed.connect(self.inputs_changed.emit)
        slots.append(slot)
        return slot

    def _make_amount(self, row: QHBoxLayout, label: str, value: float) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setRange(0.0, _MAX_AMOUNT)
        spin.setDecimals(0)
        spin.setValue(value)
        spin.valueChanged.connect(self.inputs_changed.emit)
        row.addWidget(QLabel(label))
        row.addWidget(spin)
        return spin

    def _get_used_cards(self) -> set[str]:
        """Collect all currently selected cards."""
        return {s.card for s in self._hole_slots + self._board_slots if s.card}

    def _open_picker(self, slot: CardSlotButton) -> None:
        """Open the card picker popup for a given slot."""
        used = self._get_used_cards()
        # Don't count the slot's own card as used
        used.discard(slot.card)
        popup = CardPickerPopup(used_cards=used, parent=self)
        popup.card_selected.connect(lambda c: setattr(slot, "card", c))
        popup.exec()

    # --- Public accessors for the presenter ---

    def get_hole_cards(self) -> list[str]:
        return [s.card for s in self._hole_slots]

    def get_community_cards(self) -> list[str]:
        return [s.card for s in self._board_slots]

    def get_position(self) -> str:
        return self._position_combo.currentData()

    def get_num_players(self) -> int:
        return self._players_spin.value()

    def get_pot_size(self) -> float:
        return self._pot_spin.value()

    def get_current_bet(self) -> float:
        return self._bet_spin.value()

    def get_stack_size(self) -> float:
        return self._stack_spin.value()
