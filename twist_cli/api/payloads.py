"""Helpers for building request payloads and query strings."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from twist_cli.api.errors import ValidationError

E = TypeVar("E", bound=Enum)

OptionsInput = BaseModel | Mapping[str, Any] | None


def dump_options(options: OptionsInput, model: type[BaseModel]) -> dict[str, Any]:
    """Serialize only the option fields the caller actually set.

    ``options`` may be an instance of ``model`` or a plain mapping, which is
    validated against ``model`` first.
    """
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        if not isinstance(options, model):
            raise ValidationError(
                f"expected {model.__name__}, got {type(options).__name__}"
            )
        instance = options
    else:
        try:
            instance = model.model_validate(dict(options))
        except PydanticValidationError as e:
            raise ValidationError(f"invalid {model.__name__}: {e}") from e
    return instance.model_dump(exclude_unset=True, exclude_none=True)


def build_payload(
    required: dict[str, Any],
    options: OptionsInput = None,
    model: type[BaseModel] | None = None,
) -> dict[str, Any]:
    """Merge caller options under the operation's required fields."""
    payload: dict[str, Any] = {}
    if model is not None:
        payload.update(dump_options(options, model))
    payload.update(required)
    return payload


def require_changes(changes: OptionsInput, model: type[BaseModel]) -> dict[str, Any]:
    """Serialize an update and reject it when nothing would change."""
    fields = dump_options(changes, model)
    if not fields:
        names = ", ".join(model.model_fields)
        raise ValidationError(f"no updates specified; set at least one of: {names}")
    return fields


def coerce_target(value: "str | E", target_cls: type[E]) -> E:
    """Resolve a discriminator string, failing before any request is made."""
    try:
        return target_cls(value)
    except ValueError:
        allowed = ", ".join(f"'{member.value}'" for member in target_cls)
        raise ValidationError(
            f"invalid target type {value!r}: must be one of {allowed}"
        ) from None

