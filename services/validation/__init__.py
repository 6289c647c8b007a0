# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    StepValidationResult,
    ValidationStrategy,
    StepSchema,
    FieldRule,
    TextField,
    EmailField,
    ChoiceField,
    MultiChoiceField,
    NumberField,
    DateField,
    BooleanField,
    CrossFieldRule,
    RequiredWhen,
    NotBefore,
)
from .validation_factory import StepSchemaSet

__all__ = [
    'StepValidationResult',
    'ValidationStrategy',
    'StepSchema',
    'FieldRule',
    'TextField',
    'EmailField',
    'ChoiceField',
    'MultiChoiceField',
    'NumberField',
    'DateField',
    'BooleanField',
    'CrossFieldRule',
    'RequiredWhen',
    'NotBefore',
    'StepSchemaSet',
]
