# -*- coding: utf-8 -*-
"""
Step Schema Set - registry of validation strategies keyed by wizard step.

Provides a central point for validating the raw input of any step.
"""

from typing import Any, Dict, List, Mapping, Optional

from services.exceptions import UnknownStepError
from utils.logger import get_logger
from .validation_strategy import StepValidationResult, ValidationStrategy

logger = get_logger(__name__)


class StepSchemaSet:
    """
    Registry and entry point for per-step validation.

    Steps registered with `None` have nothing to validate (information-only
    pages) and always succeed with an empty result.
    """

    def __init__(self, schemas: Optional[Mapping[str, Optional[ValidationStrategy]]] = None):
        self._schemas: Dict[str, Optional[ValidationStrategy]] = {}
        for step_key, schema in (schemas or {}).items():
            self.register_schema(step_key, schema)

    def register_schema(self, step_key: str, schema: Optional[ValidationStrategy]):
        """
        Register the validation strategy of a step.

        Args:
            step_key: Wizard step identifier (e.g., 'personal', 'lease')
            schema: ValidationStrategy instance, or None for no validation
        """
        self._schemas[step_key] = schema

    def get_schema(self, step_key: str) -> Optional[ValidationStrategy]:
        if step_key not in self._schemas:
            raise UnknownStepError(step_key)
        return self._schemas[step_key]

    def has_step(self, step_key: str) -> bool:
        return step_key in self._schemas

    def validate(self, step_key: str, raw_input: Mapping[str, Any]) -> StepValidationResult:
        """
        Validate the raw input of one step.

        Returns:
            StepValidationResult with cleaned data or field errors

        Raises:
            UnknownStepError: if the step was never registered
        """
        schema = self.get_schema(step_key)
        if schema is None:
            return StepValidationResult.success({})

        result = schema.validate(raw_input or {})
        if result.is_valid:
            logger.debug(f"Step '{step_key}' input is valid")
        else:
            logger.debug(f"Step '{step_key}' field errors: {result.field_errors}")
        return result

    def is_valid(self, step_key: str, raw_input: Mapping[str, Any]) -> bool:
        return self.validate(step_key, raw_input).is_valid

    def get_registered_steps(self) -> List[str]:
        """Step keys in registration order."""
        return list(self._schemas.keys())
