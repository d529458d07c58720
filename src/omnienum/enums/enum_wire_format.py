# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Wire format enum selecting how canonical strings are derived."""

from enum import Enum


class EnumWireFormat(str, Enum):
    """Default rule for a constant's canonical wire string.

    Only applies when the enum class does not define its own
    ``wire_string()`` method.

    Attributes:
        NAME: The constant's own name (``Color.RED`` -> ``"RED"``).
        VALUE: The constant's value, which must be a ``str``.
    """

    NAME = "name"
    VALUE = "value"


__all__ = ["EnumWireFormat"]
