"""QSS stylesheet constants for the decision helper GUI."""

APP_STYLESHEET = """
QMainWindow {
    background: #f3f4f6;
}

QGroupBox {
    font-weight: bold;
    font-size: 13px;
    color: #374151;
    border: 1px solid #e5e7eb;
    border-radius: 8px;
    margin-top: 12px;
    padding-top: 14px;
    background: white;
}

QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 6px;
    color: #1f2937;
}

QLabel {
    font-size: 12px;
    color: #374151;
}

QDoubleSpinBox, QSpinBox, QComboBox {
    padding: 4px 6px;
    border: 1px solid #d1d5db;
    border-radius: 4px;
    background: white;
    min-width: 80px;
}

QDoubleSpinBox:focus, QSpinBox:focus, QComboBox:focus {
    border-color: #3b82f6;
}

QComboBox::drop-down {
    border: none;
    width: 20px;
}
"""
