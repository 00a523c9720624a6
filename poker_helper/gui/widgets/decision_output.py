"""Decision output panel: action banner plus a short analysis."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from poker_helper.core.hand_evaluator import HandEvaluation
from poker_helper.strategy.decision_maker import ActionType, Decision

# Action → (background color, text color)
_ACTION_COLORS = {
    ActionType.RAISE: ("#22c55e", "#fff"),
    ActionType.CALL: ("#3b82f6", "#fff"),
    ActionType.FOLD: ("#ef4444", "#fff"),
}

_IDLE_TEXT = "Click Calculate Best Move to get a recommendation"


def _banner_style(fg: str, bg: str) -> str:
    return (
        f"QLabel {{ font-size: 18px; font-weight: bold; color: {fg};"
        f" background: {bg}; border-radius: 8px; }}"
    )


class DecisionOutputPanel(QWidget):
    """Shows the recommended action and why."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)

        self._title = QLabel("Recommended Action")
        self._title.setStyleSheet("QLabel { font-size: 14px; font-weight: bold; }")
        layout.addWidget(self._title)

        self._banner = QLabel()
        self._banner.setAlignment(Qt.AlignCenter)
        self._banner.setFixedHeight(44)
        layout.addWidget(self._banner)

        self._analysis = QLabel()
        self._analysis.setWordWrap(True)
        self._analysis.setStyleSheet(
            "QLabel { color: #374151; font-size: 12px; padding: 4px; }"
        )
        layout.addWidget(self._analysis)

        layout.addStretch()
        self.clear()

    def show_decision(self, decision: Decision, evaluation: HandEvaluation | None) -> None:
        bg, fg = _ACTION_COLORS.get(decision.action, ("#6b7280", "#fff"))
        self._banner.setText(decision.describe())
        self._banner.setStyleSheet(_banner_style(fg, bg))

        lines = []
        if evaluation is not None:
            lines.append(f"Hand: {evaluation.category.label} (strength {evaluation.strength:.2f})")
            lines.append(f"Adjusted strength: {decision.strength:.2f}")
            lines.append(f"Pot odds: {decision.pot_odds:.1%}")
        lines.append(f"\nReasoning: {decision.reasoning}")
        self._analysis.setText("\n".join(lines))

    def show_error(self, message: str) -> None:
        self._banner.setText("Error")
        self._banner.setStyleSheet(_banner_style("#fff", "#ef4444"))
        self._analysis.setText(message)

    def clear(self) -> None:
        self._banner.setText(_IDLE_TEXT)
        self._banner.setStyleSheet(_banner_style("#6b7280", "#f3f4f6"))
        self._analysis.clear()
