"""Main window assembling both panels, implementing the DecisionView protocol."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QFrame,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from poker_helper.core.hand_evaluator import HandEvaluation
from poker_helper.gui.widgets.decision_output import DecisionOutputPanel
from poker_helper.gui.widgets.input_panel import InputPanel
from poker_helper.strategy.decision_maker import Decision


class MainWindow(QMainWindow):
    """Top-level window implementing the DecisionView protocol.

    Layout:
      - InputPanel (top)
      - DecisionOutputPanel (bottom)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Poker Decision Helper")
        self.setMinimumSize(640, 420)
        self.resize(720, 480)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self._input_panel = InputPanel()
        layout.addWidget(self._input_panel)

        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setStyleSheet("color: #e5e7eb;")
        layout.addWidget(line)

        self._output_panel = DecisionOutputPanel()
        layout.addWidget(self._output_panel, stretch=1)

    # --- DecisionView protocol implementation ---

    def get_hole_cards(self) -> list[str]:
        return self._input_panel.get_hole_cards()

    def get_community_cards(self) -> list[str]:
        return self._input_panel.get_community_cards()

    def get_position(self) -> str:
        return self._input_panel.get_position()

    def get_num_players(self) -> int:
        return self._input_panel.get_num_players()

    def get_pot_size(self) -> float:
        return self._input_panel.get_pot_size()

    def get_current_bet(self) -> float:
        return self._input_panel.get_current_bet()

    def get_stack_size(self) -> float:
        return self._input_panel.get_stack_size()

    def show_decision(self, decision: Decision, evaluation: HandEvaluation | None) -> None:
        self._output_panel.show_decision(decision, evaluation)

    def show_error(self, message: str) -> None:
        self._output_panel.show_error(message)

    def clear_result(self) -> None:
        self._output_panel.clear()

    # --- Signal accessors for wiring ---

    @property
    def input_panel(self) -> InputPanel:
        return self._input_panel
