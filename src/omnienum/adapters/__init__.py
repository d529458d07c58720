# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Serialization framework adapters."""

from omnienum.adapters.adapter_pydantic import (
    EnumWire,
    ModelWireBase,
    collect_invalid_enum_errors,
    model_call_sites,
    preload_model,
)

__all__ = [
    "EnumWire",
    "ModelWireBase",
    "collect_invalid_enum_errors",
    "model_call_sites",
    "preload_model",
]
