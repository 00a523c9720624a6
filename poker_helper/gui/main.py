"""Entry point for the decision helper GUI.

Usage:
    python -m poker_helper.gui.main
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from poker_helper.core.config import load_position_weights
from poker_helper.gui.main_window import MainWindow
from poker_helper.gui.presenter import DecisionPresenter
from poker_helper.gui.styles import APP_STYLESHEET
from poker_helper.strategy.decision_maker import DecisionMaker


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("Poker Decision Helper")
    app.setStyleSheet(APP_STYLESHEET)

    window = MainWindow()
    maker = DecisionMaker(weights=load_position_weights())
    presenter = DecisionPresenter(view=window, maker=maker)

    # Wire UI signals to presenter
    window.input_panel.calculate_requested.connect(presenter.on_calculate_clicked)
    window.input_panel.inputs_changed.connect(presenter.on_inputs_changed)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
