# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Chirpy: a minimal social-posting HTTP service."""

__version__ = "0.1.0"
