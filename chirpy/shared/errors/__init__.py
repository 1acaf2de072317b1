# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    GENERIC_ERROR_MESSAGE,
    AppError,
    DomainError,
    InfrastructureError,
    InvalidRequestError,
    StoreError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "AppError",
    "DomainError",
    "InfrastructureError",
    "InvalidRequestError",
    "StoreError",
    "handle_app_error",
    "register_error_handler",
]
