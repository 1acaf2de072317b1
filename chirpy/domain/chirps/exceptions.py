# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from chirpy.shared.errors.base import DomainError


class ChirpValidationError(DomainError):
    code = "chirp_invalid"
    status = HTTPStatus.BAD_REQUEST


class ChirpTooLongError(ChirpValidationError):
    code = "chirp_too_long"
    message = "Chirp is too long"


class ChirpEmptyError(ChirpValidationError):
    code = "chirp_empty"
    message = "Chirp cannot be empty"


class ChirpNotFoundError(DomainError):
    code = "chirp_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Chirp not found"
