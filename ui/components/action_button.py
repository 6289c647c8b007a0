# -*- coding: utf-8 -*-
"""
Action Button Component - button with the shared wizard styling.

Variants:
- primary: solid brand color (Next, Submit)
- secondary: neutral gray (Cancel, Back, Save draft)
- link: text-only (review "Edit" links)
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from app.config import Config

_STYLES = {
    "primary": f"""
        QPushButton {{
            background-color: {Config.PRIMARY_COLOR};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #1D4ED8;
        }}
        QPushButton:disabled {{
            background-color: #93C5FD;
        }}
    """,
    "secondary": """
        QPushButton {
            background-color: #6B7280;
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #4B5563;
        }
        QPushButton:disabled {
            background-color: #D1D5DB;
        }
    """,
    "link": f"""
        QPushButton {{
            background: transparent;
            color: {Config.PRIMARY_COLOR};
            border: none;
            font-size: 13px;
            text-decoration: underline;
        }}
        QPushButton:disabled {{
            color: #9CA3AF;
        }}
    """,
}


class ActionButton(QPushButton):
    """
    Button with fixed size and variant styling.

    Usage:
        btn = ActionButton(tr("wizard.button.next"), variant="primary")
        btn = ActionButton(tr("wizard.button.edit"), variant="link", width=70, height=28)
    """

    def __init__(self, text: str, variant: str = "primary",
                 width: int = 114, height: int = 44, parent=None):
        super().__init__(text, parent)
        if variant not in _STYLES:
            raise ValueError(f"Unknown button variant: {variant}")
        self.variant = variant
        self.setFixedSize(width, height)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(_STYLES[variant])
