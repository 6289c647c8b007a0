# -*- coding: utf-8 -*-
"""
PropertyHub Data Models
"""

from .submission import CompositeSubmission, to_json_value

__all__ = [
    "CompositeSubmission",
    "to_json_value",
]
