# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Enums Package.

    from omnienum.enums import EnumDeserializationErrorCode, EnumWireFormat
"""

from omnienum.enums.enum_error_code import EnumDeserializationErrorCode
from omnienum.enums.enum_wire_format import EnumWireFormat

__all__ = [
    "EnumDeserializationErrorCode",
    "EnumWireFormat",
]
