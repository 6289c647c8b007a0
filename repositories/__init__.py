# -*- coding: utf-8 -*-
"""
PropertyHub Repository Layer
"""

from .database import Database
from .draft_repository import DraftRepository

__all__ = [
    "Database",
    "DraftRepository",
]
