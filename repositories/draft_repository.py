# -*- coding: utf-8 -*-
"""
Draft repository - saved, resumable wizard sessions.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional
import uuid

from .database import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftRepository:
    """Repository for wizard draft CRUD operations."""

    def __init__(self, db: Database):
        self.db = db
        self.db.initialize()

    def save(self, wizard_type: str, state_data: Dict[str, Any],
             draft_id: Optional[str] = None) -> str:
        """
        Insert or replace a draft.

        Args:
            wizard_type: WizardTypes value
            state_data: Serialized wizard state (WizardState.to_dict())
            draft_id: Existing draft to overwrite; a new id is generated if None

        Returns:
            draft_id of the stored record
        """
        draft_id = draft_id or state_data.get("wizard_id") or str(uuid.uuid4())
        now = datetime.now().isoformat()
        existing = self.db.fetch_one(
            "SELECT created_at FROM wizard_drafts WHERE draft_id = ?", (draft_id,)
        )
        created_at = existing["created_at"] if existing else now

        self.db.execute(
            """
            INSERT OR REPLACE INTO wizard_drafts (
                draft_id, wizard_type, reference_number, current_step,
                state_data, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                draft_id,
                wizard_type,
                state_data.get("reference_number"),
                state_data.get("current_key"),
                json.dumps(state_data, ensure_ascii=False, default=str),
                created_at,
                now,
            )
        )
        logger.debug(f"Saved draft {draft_id} ({wizard_type}) at step {state_data.get('current_key')}")
        return draft_id

    def load(self, draft_id: str) -> Optional[Dict[str, Any]]:
        """Return the stored state dictionary, or None if the draft does not exist."""
        row = self.db.fetch_one(
            "SELECT state_data FROM wizard_drafts WHERE draft_id = ?", (draft_id,)
        )
        if row is None:
            return None
        return json.loads(row["state_data"])

    def get_wizard_type(self, draft_id: str) -> Optional[str]:
        row = self.db.fetch_one(
            "SELECT wizard_type FROM wizard_drafts WHERE draft_id = ?", (draft_id,)
        )
        return row["wizard_type"] if row else None

    def list_drafts(self, wizard_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List drafts, most recently updated first.

        Returns:
            Rows without the state payload
        """
        query = """
            SELECT draft_id, wizard_type, reference_number, current_step, created_at, updated_at
            FROM wizard_drafts
        """
        params: tuple = ()
        if wizard_type:
            query += " WHERE wizard_type = ?"
            params = (wizard_type,)
        query += " ORDER BY updated_at DESC"
        return self.db.fetch_all(query, params)

    def delete(self, draft_id: str) -> bool:
        """Delete a draft; returns True if a row was removed."""
        deleted = self.db.execute("DELETE FROM wizard_drafts WHERE draft_id = ?", (draft_id,)) > 0
        if deleted:
            logger.debug(f"Deleted draft {draft_id}")
        return deleted
