# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, cast

GENERIC_ERROR_MESSAGE = "Something went wrong"


class AppError(Exception):
    """Error carrying the HTTP status and client-facing message it maps to.

    ``context`` is diagnostic detail for the server log only; it never reaches
    the response body.
    """

    def __init__(
        self,
        code: str,
        status: HTTPStatus,
        message: str = GENERIC_ERROR_MESSAGE,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code)
        self.code = code
        self.status = status
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class DomainError(AppError):
    code: str
    status: HTTPStatus
    message: str

    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(type(self), "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(type(self), "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(
            str, getattr(type(self), "message", GENERIC_ERROR_MESSAGE)
        )
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(
            code=code,
            status=resolved_status,
            message=GENERIC_ERROR_MESSAGE,
            context=context,
        )


class InvalidRequestError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="invalid_request",
            status=HTTPStatus.BAD_REQUEST,
            message="Invalid request",
            context=context,
        )


class StoreError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__(code="store_error", context={"operation": operation})
