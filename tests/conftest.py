"""
Pytest configuration and fixtures for omnienum tests.

Shared fixtures for resolver, matcher, deserializer and API tests.
"""

from collections.abc import Iterator

import pytest

from omnienum.handlers import EnumValueDeserializer, TypeContextResolver
from omnienum.models import DeserializationCallSite
from omnienum.runtime import reset_enum_deserializer
from tests.fixtures.fixture_enums import EnumColor

# =========================================================================
# Process-wide state
# =========================================================================


@pytest.fixture(autouse=True)
def _isolated_enum_deserializer(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh process-wide deserializer and clean env."""
    for var in ("OMNIENUM_WIRE_FORMAT", "OMNIENUM_CACHE_ENABLED", "OMNIENUM_LOG_REJECTIONS"):
        monkeypatch.delenv(var, raising=False)
    reset_enum_deserializer()
    yield
    reset_enum_deserializer()


# =========================================================================
# Core fixtures
# =========================================================================


@pytest.fixture
def resolver() -> TypeContextResolver:
    """Unbound resolver with default settings."""
    return TypeContextResolver()


@pytest.fixture
def deserializer(resolver: TypeContextResolver) -> EnumValueDeserializer:
    """Deserializer sharing the ``resolver`` fixture."""
    return EnumValueDeserializer(resolver)


@pytest.fixture
def color_call_site() -> DeserializationCallSite:
    """Call site for a ``favoriteColor`` field declared as EnumColor."""
    return DeserializationCallSite(
        owner="ModelProfile",
        field_name="favoriteColor",
        declared_type=EnumColor,
    )
