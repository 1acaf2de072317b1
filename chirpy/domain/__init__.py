# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .chirps.entities import Chirp
from .chirps.exceptions import (
    ChirpEmptyError,
    ChirpNotFoundError,
    ChirpTooLongError,
    ChirpValidationError,
)
from .users.entities import User
from .users.exceptions import EmailAlreadyExistsError

__all__ = [
    "Chirp",
    "ChirpEmptyError",
    "ChirpNotFoundError",
    "ChirpTooLongError",
    "ChirpValidationError",
    "EmailAlreadyExistsError",
    "User",
]
