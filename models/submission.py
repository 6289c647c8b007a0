# -*- coding: utf-8 -*-
"""
Composite submission model - the single record a wizard sends on completion.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional


def to_json_value(value: Any) -> Any:
    """Convert dates and decimals (recursively) into JSON-friendly values."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value


@dataclass
class CompositeSubmission:
    """
    Union of all step results plus the context fixed at wizard start.

    `sections` maps step key -> validated step result, in step order.
    `context` holds values such as the target property id.
    """

    sections: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)
    wizard_id: Optional[str] = None

    @property
    def step_keys(self) -> List[str]:
        return list(self.sections.keys())

    def to_payload(self, flatten: bool = False) -> Dict[str, Any]:
        """
        JSON body for the submission endpoint.

        Args:
            flatten: Merge every section's fields into one object instead of
                     nesting them under their step key. Later steps win on
                     duplicate field names.
        """
        payload: Dict[str, Any] = {}
        if flatten:
            for section in self.sections.values():
                payload.update(section)
        else:
            payload.update({key: dict(section) for key, section in self.sections.items()})
        payload.update(self.context)
        return to_json_value(payload)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wizard_id": self.wizard_id,
            "sections": to_json_value(self.sections),
            "context": to_json_value(self.context),
        }
