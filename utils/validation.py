import json
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

import pydantic
from fastapi import Request

from utils.exceptions import ValidationError
from utils.store import MAX_STORE_INT

T = TypeVar('T')
Schema = TypeVar('Schema', bound=pydantic.BaseModel)


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Outcome of validating a candidate: either ``value`` or ``error`` is set."""
    value: Optional[T] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value


def accept(value: T) -> Validated[T]:
    return Validated(value=value)


def reject(*problems: str) -> Validated:
    return Validated(error=ValidationError('; '.join(problems)))


def _min_length(schema: Type[pydantic.BaseModel], field: str) -> int:
    info = schema.model_fields.get(field)
    for constraint in getattr(info, 'metadata', ()):
        if getattr(constraint, 'min_length', None) is not None:
            return constraint.min_length
    return 0


def describe_error(schema: Type[pydantic.BaseModel], error: dict) -> str:
    """Render one pydantic error as the message clients see.

    Input values are never echoed, they may be passwords.
    """
    field = '.'.join(str(part) for part in error['loc']) or 'body'
    kind = error['type']
    ctx = error.get('ctx') or {}

    if kind in ('missing', 'string_too_short'):
        minimum = _min_length(schema, field)
        if minimum > 1:
            return f'{field} must be at least {minimum} characters long'
        return f'{field} is required'
    if kind == 'string_too_long':
        return f'{field} must be at most {ctx["max_length"]} characters long'
    if kind == 'string_type':
        return f'{field} must be a string'
    if kind in ('int_type', 'int_parsing', 'int_from_float'):
        return f'{field} must be an integer'
    if kind == 'greater_than_equal':
        return f'{field} must be at least {ctx["ge"]}'
    if kind == 'less_than_equal':
        return f'{field} must be at most {ctx["le"]}'
    return f'{field} is invalid'


def validate_schema(schema: Type[Schema], candidate: dict) -> Validated[Schema]:
    try:
        return accept(schema.model_validate(candidate, strict=True))
    except pydantic.ValidationError as e:
        return reject(*(describe_error(schema, error) for error in e.errors()))


def parse_record_id(raw: str) -> int:
    try:
        record_id = int(raw)
    except (TypeError, ValueError):
        raise ValidationError('malformatted id')
    if not 1 <= record_id <= MAX_STORE_INT:
        raise ValidationError('malformatted id')
    return record_id


async def read_json_object(request: Request) -> dict:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError('request body must be valid JSON')
    if not isinstance(payload, dict):
        raise ValidationError('request body must be a JSON object')
    return payload
