"""
Binding Result
==============

Collects field-level errors raised while binding and validating a form.
"""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class FieldError:
    """A single rejected field value."""
    field: str
    code: str
    message: str


@dataclass
class BindingResult:
    """
    Ordered collection of field errors for one submitted form.

    Errors keep the order in which they were rejected so the view can
    render them consistently.
    """
    errors: List[FieldError] = field(default_factory=list)

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        """Record an error against a form field."""
        self.errors.append(FieldError(field=field_name, code=code, message=message))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_field_errors(self, field_name: str) -> bool:
        return any(error.field == field_name for error in self.errors)

    def get_field_errors(self, field_name: str) -> List[FieldError]:
        return [error for error in self.errors if error.field == field_name]

    def messages_by_field(self) -> Dict[str, List[str]]:
        """Map of field name to its error messages, used by the templates."""
        messages: Dict[str, List[str]] = {}
        for error in self.errors:
            messages.setdefault(error.field, []).append(error.message)
        return messages
