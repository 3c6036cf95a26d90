"""Shared Pydantic configuration for request and response bodies."""

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import ValidationError as SchemaError
from pydantic.alias_generators import to_camel

from ..core.exceptions import ValidationError


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Summarise the first Pydantic error as ``"<field>: <reason>"``."""
    first = next(iter(errors), None)
    if first is None:
        return "Invalid request"
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


class CamelModel(BaseModel):
    """Base for response models.

    Built from store records by attribute name, serialised with
    camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(BaseModel):
    """Base for request bodies.

    Only the camelCase keys are recognised; snake_case keys are
    unknown and therefore ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)


class PartialUpdate(RequestModel):
    """Base for PATCH bodies.

    Only keys present in the request are applied, so an empty string
    overwrites the stored value.  Explicit ``null`` is rejected.
    """

    @model_validator(mode="after")
    def reject_explicit_null(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"{', '.join(to_camel(n) for n in nulls)} must not be null")
        return self

    @classmethod
    def from_payload(cls, payload: Any):
        """Validate a raw JSON body, raising the API's ``ValidationError``.

        A missing body counts as an empty update.
        """
        try:
            return cls.model_validate({} if payload is None else payload)
        except SchemaError as e:
            raise ValidationError(describe_errors(e.errors())) from e

    def provided_fields(self) -> dict:
        """Return the fields supplied by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
