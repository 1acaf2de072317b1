# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from chirpy.application.services.visit_counter import VisitCounter


def count_visits(counter: VisitCounter):
    """Count every request that reaches the wrapped view."""

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            counter.increment()
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["count_visits"]
