# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import InvalidRequestError

_DTO = TypeVar("_DTO", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_invalid_request(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise InvalidRequestError(context=context) from exc


def parse_payload(dto: type[_DTO], payload: Any) -> _DTO:
    """Validate a decoded JSON payload into ``dto`` or raise a 400 error.

    ``payload`` is ``None`` when the body was not JSON at all.
    """
    if payload is None:
        raise InvalidRequestError(context={"reason": "body is not valid JSON"})
    try:
        return dto.model_validate(payload)
    except PydanticValidationError as exc:
        raise_invalid_request(exc)


__all__ = [
    "format_pydantic_errors",
    "parse_payload",
    "raise_invalid_request",
]
