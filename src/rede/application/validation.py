"""Validation gateway for untrusted input.

``validate`` checks a payload against one of the input contracts and
returns a ``ValidationResult``. It never raises for malformed input,
performs no I/O and knows nothing about business rules such as uniqueness.

Each failure is reported per field with the rule that was broken, so a
client can fix its request without guessing:

    >>> result = validate({"ign": "ab"}, CreateUserInput)
    >>> result.is_valid
    False
    >>> [(e.field, e.rule) for e in result.errors][:2]
    [('name', 'missing'), ('surname', 'missing')]
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rede.domain.shared.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_FIELD = "body"

# pydantic error type -> rule name reported to clients
_RULES: dict[str, str] = {
    "missing": "missing",
    "string_type": "wrong_type",
    "bool_type": "wrong_type",
    "int_type": "wrong_type",
    "int_parsing": "wrong_type",
    "int_from_float": "wrong_type",
    "model_type": "wrong_type",
    "model_attributes_type": "wrong_type",
    "dict_type": "wrong_type",
    "url_type": "wrong_type",
    "string_too_short": "too_short",
    "string_too_long": "too_long",
    "greater_than_equal": "too_small",
    "greater_than": "too_small",
    "less_than_equal": "too_large",
    "less_than": "too_large",
    "value_error": "bad_format",
    "url_parsing": "bad_format",
    "url_scheme": "bad_format",
    "url_syntax_violation": "bad_format",
    "enum": "not_in_enum",
    "literal_error": "not_in_enum",
    "json_invalid": "bad_format",
}


@dataclass(frozen=True)
class FieldError:
    """One broken rule on one field."""

    field: str
    rule: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "rule": self.rule, "message": self.message}


class InvalidInputError(ValidationError):
    """Raised when a payload does not satisfy its input contract."""

    def __init__(self, errors: tuple[FieldError, ...] | list[FieldError]) -> None:
        self.errors = tuple(errors)
        fields = ", ".join(sorted({e.field for e in self.errors}))
        super().__init__(
            f"Invalid input: {fields}",
            details={"errors": [e.to_dict() for e in self.errors]},
        )


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Outcome of ``validate``: either a typed value or field errors."""

    value: ModelT | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def unwrap(self) -> ModelT:
        """Return the typed value, raising ``InvalidInputError`` on failure."""
        if self.errors or self.value is None:
            raise InvalidInputError(self.errors)
        return self.value


def validate(payload: Any, contract: type[ModelT]) -> ValidationResult[ModelT]:
    """Validate ``payload`` against ``contract``."""
    if payload is None:
        payload = {}

    try:
        value = contract.model_validate(payload)
    except PydanticValidationError as e:
        return ValidationResult(errors=field_errors_from(e.errors(include_url=False)))

    return ValidationResult(value=value)


def field_errors_from(raw_errors: Sequence[Mapping[str, Any]]) -> tuple[FieldError, ...]:
    """Convert pydantic error dicts into field errors."""
    errors = []
    for error in raw_errors:
        loc = [str(part) for part in error["loc"]]
        errors.append(
            FieldError(
                field=".".join(loc) if loc else BODY_FIELD,
                rule=_RULES.get(error["type"], "invalid"),
                message=error["msg"],
            )
        )
    return tuple(errors)
