# -*- coding: utf-8 -*-
"""
PropertyHub UI Components
"""

from .action_button import ActionButton

__all__ = [
    "ActionButton",
]
