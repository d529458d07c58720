# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime configuration and process-wide registration."""

from omnienum.runtime.model_deserializer_settings import (
    ModelEnumDeserializerSettings,
)
from omnienum.runtime.registration import (
    configure_enum_deserializer,
    get_enum_deserializer,
    reset_enum_deserializer,
)

__all__ = [
    "ModelEnumDeserializerSettings",
    "configure_enum_deserializer",
    "get_enum_deserializer",
    "reset_enum_deserializer",
]
