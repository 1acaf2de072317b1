# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from chirpy.shared.errors.base import DomainError


class EmailAlreadyExistsError(DomainError):
    code = "email_already_exists"
    status = HTTPStatus.CONFLICT
    message = "Email already exists"
