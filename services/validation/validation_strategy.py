# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - schemas for wizard step input.

A StepSchema is a ValidationStrategy made of field rules (each one cleans and
checks a single raw value) and cross-field rules (checked on the cleaned
record). Expected failures are reported through StepValidationResult and never
raised to the caller.
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from services.exceptions import ValidationException
from services.translation_manager import tr

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class StepValidationResult:
    """Result of validating one step's raw input."""
    is_valid: bool
    data: Dict[str, Any] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, data: Dict[str, Any]) -> "StepValidationResult":
        return cls(is_valid=True, data=dict(data))

    @classmethod
    def rejected(cls, message: str) -> "StepValidationResult":
        """A request the wizard refused without looking at the input."""
        return cls(is_valid=False, errors=[message])

    def add_field_error(self, field_name: str, message: str):
        """Add an error for one field; the first message per field wins."""
        self.field_errors.setdefault(field_name, message)
        self.is_valid = False

    def all_messages(self) -> List[str]:
        """Field errors (as 'field: message') followed by general errors."""
        return [f"{name}: {message}" for name, message in self.field_errors.items()] + list(self.errors)


# =============================================================================
# Field rules
# =============================================================================

def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set)):
        return len(value) == 0
    return False


class FieldRule(ABC):
    """
    Clean and check one field.

    Messages are translation keys (or plain text, which tr() returns
    unchanged when no translation exists).
    """

    def __init__(self, name: str, required: bool = True,
                 message: Optional[str] = None,
                 required_message: Optional[str] = None):
        self.name = name
        self.required = required
        self.message = message or "validation.invalid_value"
        self.required_message = required_message or message or "validation.required"

    def clean(self, raw: Any) -> Any:
        """
        Return the cleaned value.

        Raises:
            ValidationException: when the value breaks the rule
        """
        if _is_blank(raw):
            if self.required:
                raise ValidationException(tr(self.required_message), field=self.name)
            return self.empty_value()
        return self.convert(raw)

    def empty_value(self) -> Any:
        return None

    def fail(self, message_key: Optional[str] = None, **kwargs):
        raise ValidationException(tr(message_key or self.message, **kwargs), field=self.name)

    @abstractmethod
    def convert(self, raw: Any) -> Any:
        """Convert a non-blank raw value, raising through fail() if invalid."""


class TextField(FieldRule):
    """Free text with optional length bounds and format pattern."""

    def __init__(self, name: str, min_length: Optional[int] = None,
                 max_length: Optional[int] = None, pattern: Optional[str] = None,
                 **kwargs):
        super().__init__(name, **kwargs)
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = re.compile(pattern) if pattern else None

    def convert(self, raw: Any) -> str:
        value = str(raw).strip()
        if self.min_length is not None and len(value) < self.min_length:
            self.fail(min_length=self.min_length)
        if self.max_length is not None and len(value) > self.max_length:
            self.fail("validation.too_long", max_length=self.max_length)
        if self.pattern is not None and not self.pattern.match(value):
            self.fail()
        return value


class EmailField(TextField):
    """E-mail address."""

    def __init__(self, name: str, **kwargs):
        kwargs.setdefault("message", "validation.email_invalid")
        super().__init__(name, **kwargs)

    def convert(self, raw: Any) -> str:
        value = super().convert(raw)
        if not EMAIL_PATTERN.match(value):
            self.fail()
        return value


class ChoiceField(FieldRule):
    """Value must be one of an enumerated set."""

    def __init__(self, name: str, choices: Iterable[str], **kwargs):
        kwargs.setdefault("message", "validation.invalid_choice")
        super().__init__(name, **kwargs)
        self.choices = tuple(choices)

    def convert(self, raw: Any) -> str:
        value = str(raw).strip()
        if value not in self.choices:
            self.fail()
        return value


class MultiChoiceField(FieldRule):
    """List of values, each from an enumerated set; `required_choices` must all be present."""

    def __init__(self, name: str, choices: Iterable[str], min_items: int = 1,
                 required_choices: Iterable[str] = (), **kwargs):
        kwargs.setdefault("message", "validation.invalid_choice")
        super().__init__(name, **kwargs)
        self.choices = tuple(choices)
        self.min_items = min_items
        self.required_choices = tuple(required_choices)

    def empty_value(self) -> List[str]:
        return []

    def convert(self, raw: Any) -> List[str]:
        if isinstance(raw, str):
            values = [raw]
        elif isinstance(raw, Iterable) and not isinstance(raw, Mapping):
            values = list(raw)
        else:
            self.fail()
        unknown = [value for value in values if value not in self.choices]
        if unknown:
            self.fail()
        if len(values) < self.min_items:
            self.fail(self.required_message)
        if any(choice not in values for choice in self.required_choices):
            self.fail(self.required_message)
        # Keep declaration order, drop duplicates
        return [choice for choice in self.choices if choice in values]


class NumberField(FieldRule):
    """Number (accepts text input), with optional range."""

    def __init__(self, name: str, min_value: Optional[float] = None,
                 max_value: Optional[float] = None, integer: bool = False, **kwargs):
        kwargs.setdefault("message", "validation.invalid_number")
        super().__init__(name, **kwargs)
        self.min_value = min_value
        self.max_value = max_value
        self.integer = integer

    def convert(self, raw: Any):
        if isinstance(raw, bool):
            self.fail()
        try:
            number = float(str(raw).strip().replace(",", "."))
        except ValueError:
            self.fail()
        if not math.isfinite(number):
            self.fail()
        if self.integer:
            if not number.is_integer():
                self.fail()
            number = int(number)
        if self.min_value is not None and number < self.min_value:
            self.fail("validation.number_too_small", min_value=self.min_value)
        if self.max_value is not None and number > self.max_value:
            self.fail("validation.number_too_large", max_value=self.max_value)
        return number


class DateField(FieldRule):
    """Calendar date given as a date object or ISO 'YYYY-MM-DD' text."""

    def __init__(self, name: str, **kwargs):
        kwargs.setdefault("message", "validation.invalid_date")
        super().__init__(name, **kwargs)

    def convert(self, raw: Any) -> date:
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        try:
            return date.fromisoformat(str(raw).strip())
        except ValueError:
            self.fail()


class BooleanField(FieldRule):
    """Checkbox value; `must_be_true` for consent boxes."""

    def __init__(self, name: str, must_be_true: bool = False, **kwargs):
        kwargs.setdefault("required", False)
        super().__init__(name, **kwargs)
        self.must_be_true = must_be_true

    def clean(self, raw: Any) -> bool:
        value = self.convert(raw)
        if self.must_be_true and not value:
            self.fail()
        return value

    def convert(self, raw: Any) -> bool:
        if isinstance(raw, str):
            return raw.strip().lower() in ("true", "1", "yes", "on")
        return bool(raw)


# =============================================================================
# Cross-field rules
# =============================================================================

class CrossFieldRule(ABC):
    """Rule checked against the whole cleaned record."""

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        self.message = message

    @abstractmethod
    def is_satisfied(self, values: Mapping[str, Any]) -> bool:
        pass


class RequiredWhen(CrossFieldRule):
    """
    `field_name` is required when `condition(values)` holds.

    Example: RequiredWhen("petDetails", lambda v: v.get("hasPets"), ...)
    """

    def __init__(self, field_name: str, condition: Callable[[Mapping[str, Any]], bool],
                 message: str = "validation.required"):
        super().__init__(field_name, message)
        self.condition = condition

    def is_satisfied(self, values: Mapping[str, Any]) -> bool:
        if not self.condition(values):
            return True
        return not _is_blank(values.get(self.field_name))


class NotBefore(CrossFieldRule):
    """Date `field_name` must not be earlier than date `other_field`."""

    def __init__(self, field_name: str, other_field: str,
                 message: str = "validation.date_order"):
        super().__init__(field_name, message)
        self.other_field = other_field

    def is_satisfied(self, values: Mapping[str, Any]) -> bool:
        first, second = values.get(self.other_field), values.get(self.field_name)
        if first is None or second is None:
            return True
        return second >= first


# =============================================================================
# Strategies
# =============================================================================

class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements the validation rules of one wizard step.
    """

    @abstractmethod
    def validate(self, record: Mapping[str, Any]) -> StepValidationResult:
        """
        Validate a raw record.

        Args:
            record: Raw field values as collected from the form

        Returns:
            StepValidationResult carrying cleaned data or field errors
        """

    def is_valid(self, record: Mapping[str, Any]) -> bool:
        return self.validate(record).is_valid


class StepSchema(ValidationStrategy):
    """Field rules plus cross-field rules for one step."""

    def __init__(self, fields: Sequence[FieldRule],
                 cross_field_rules: Sequence[CrossFieldRule] = ()):
        self.fields = list(fields)
        self.cross_field_rules = list(cross_field_rules)

    @property
    def field_names(self) -> List[str]:
        return [rule.name for rule in self.fields]

    def validate(self, record: Mapping[str, Any]) -> StepValidationResult:
        record = record or {}
        result = StepValidationResult(is_valid=True)
        cleaned: Dict[str, Any] = {}

        for rule in self.fields:
            try:
                cleaned[rule.name] = rule.clean(record.get(rule.name))
            except ValidationException as e:
                result.add_field_error(rule.name, e.message)

        for rule in self.cross_field_rules:
            if rule.field_name in result.field_errors:
                continue
            if not rule.is_satisfied(cleaned):
                result.add_field_error(rule.field_name, tr(rule.message))

        if result.is_valid:
            result.data = cleaned
        return result
