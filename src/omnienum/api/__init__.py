# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Structured error translation for FastAPI services."""

from omnienum.api.app import create_app
from omnienum.api.exception_handlers import register_exception_handlers
from omnienum.api.handler_error_translation import (
    translate_invalid_enum_values,
    translate_type_resolution_error,
)

__all__ = [
    "create_app",
    "register_exception_handlers",
    "translate_invalid_enum_values",
    "translate_type_resolution_error",
]
