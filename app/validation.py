"""
Declarative payload rules compiled into pydantic models.

A schema is a plain mapping of field name to ``FieldRules``. ``build_schema``
turns the mapping into a pydantic model with ``create_model``; a derived
schema (for example an update payload without ``user_id``) is built from
the same mapping by leaving keys out, so no model is ever mutated.

Unlike stock pydantic constraints, every check of a field runs even when an
earlier one failed, so ``name=""`` reports both "required" and "full name".
The failing messages travel in ``ctx["messages"]`` of a single pydantic
error and are expanded by ``flatten_validation_errors``.
"""
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Annotated, Any, Callable, Collection, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, create_model
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.constants import messages
from app.errors import PayloadValidationError, flatten_validation_errors

# Largest id a BIGINT column can hold
MAX_INTEGER = 2**63 - 1

Check = Tuple[Callable[[Any], bool], str]


class FieldKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    INTEGER = "integer"

    @property
    def python_type(self) -> type:
        return {FieldKind.TEXT: str, FieldKind.NUMBER: float, FieldKind.INTEGER: int}[self]


@dataclass(frozen=True)
class FieldRules:
    kind: FieldKind
    invalid: str
    required: Optional[str]
    checks: Tuple[Check, ...] = ()

    def as_optional(self) -> "FieldRules":
        return replace(self, required=None)

    def coerce(self, value: Any) -> Any:
        # bool is an int subclass but never a valid number here
        if self.kind is FieldKind.TEXT and isinstance(value, str):
            return value
        if self.kind is not FieldKind.TEXT and not isinstance(value, bool):
            if isinstance(value, int):
                if self.kind is FieldKind.INTEGER and abs(value) <= MAX_INTEGER:
                    return value
                if self.kind is FieldKind.NUMBER and _fits_float(value):
                    return value
            elif isinstance(value, float) and math.isfinite(value):
                if self.kind is FieldKind.NUMBER:
                    return value
                if value.is_integer() and abs(value) <= MAX_INTEGER:
                    return int(value)
        raise _rule_error([self.invalid])

    def __call__(self, value: Any) -> Any:
        if value is None:
            if self.required is None:
                return None
            raise _rule_error([self.required])
        value = self.coerce(value)
        failed = [message for check, message in self.checks if not check(value)]
        if failed:
            raise _rule_error(failed)
        return value


def _fits_float(value: int) -> bool:
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _rule_error(failed):
    return PydanticCustomError("payload_rule", "; ".join(failed), {"messages": failed})


def text(invalid: str, required: str, *checks: Check) -> FieldRules:
    return FieldRules(FieldKind.TEXT, invalid, required, checks)


def number(invalid: str, required: str, *checks: Check) -> FieldRules:
    return FieldRules(FieldKind.NUMBER, invalid, required, checks)


def integer(invalid: str, required: str, *checks: Check) -> FieldRules:
    return FieldRules(FieldKind.INTEGER, invalid, required, checks)


def nonempty(message: str) -> Check:
    return (lambda value: len(value) > 0, message)


def min_length(size: int, message: str) -> Check:
    return (lambda value: len(value) >= size, message)


def positive(message: str) -> Check:
    return (lambda value: value > 0, message)


def refine(predicate: Callable[[Any], bool], message: str) -> Check:
    return (predicate, message)


def build_schema(
    name: str,
    fields: Mapping[str, FieldRules],
    omit: Collection[str] = (),
    optional: Collection[str] = (),
) -> Type[BaseModel]:
    """Compile a rule mapping into a pydantic model.

    Field names are snake_case; the wire names are their camelCase aliases.
    """
    definitions = {}
    for field_name, rules in fields.items():
        if field_name in omit:
            continue
        if field_name in optional:
            rules = rules.as_optional()
        annotation = Annotated[Optional[rules.kind.python_type], BeforeValidator(rules.__call__)]
        definitions[field_name] = (annotation, Field(default=None, validate_default=True))

    config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")
    return create_model(name, __config__=config, **definitions)


def validate(schema: Type[BaseModel], payload: Any) -> BaseModel:
    """Parse ``payload`` with ``schema`` or raise ``PayloadValidationError``.

    An absent body counts as an empty object; any other non-object body is
    rejected with a single message.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise PayloadValidationError([messages.BODY_NOT_OBJECT])
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(flatten_validation_errors(exc.errors())) from exc
