# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the pydantic integration.

Covers the ModelWireBase opt-in, the EnumWire marker, and extraction of
structured errors back out of pydantic ValidationError.
"""

# NOTE: no `from __future__ import annotations` here; models are declared
# inside test functions and pydantic must see their annotations at runtime.

from typing import Annotated

import pytest
from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

from omnienum.adapters import (
    EnumWire,
    ModelWireBase,
    collect_invalid_enum_errors,
    model_call_sites,
    preload_model,
)
from omnienum.enums import EnumWireFormat
from omnienum.errors import InvalidEnumValueError, TypeResolutionError
from omnienum.handlers import EnumValueDeserializer, TypeContextResolver
from omnienum.runtime import (
    ModelEnumDeserializerSettings,
    configure_enum_deserializer,
    get_enum_deserializer,
)
from tests.fixtures.fixture_enums import (
    EnumClashing,
    EnumColor,
    EnumOrderStatus,
    EnumPriority,
)

_NAME_DESERIALIZER = EnumValueDeserializer()


class ModelProfile(ModelWireBase):
    """Request model opting into wire-string enum deserialization."""

    favorite_color: EnumColor
    backup_color: EnumColor | None = None
    nickname: str = ""


class ModelBrokenKind(ModelWireBase):
    kind: EnumClashing


class ModelAliasedProfile(ModelWireBase):
    favorite_color: EnumColor = Field(alias="favoriteColor")
    backup_color: EnumColor | None = Field(
        default=None, validation_alias=AliasChoices("backupColor", "backup")
    )


class ModelTask(BaseModel):
    """Plain pydantic model using the per-field marker."""

    priority: Annotated[EnumPriority, EnumWire(_NAME_DESERIALIZER)]
    status: Annotated[EnumOrderStatus | None, EnumWire(_NAME_DESERIALIZER)] = None


@pytest.mark.unit
class TestModelWireBase:
    def test_wire_name_deserializes(self) -> None:
        profile = ModelProfile.model_validate({"favorite_color": "RED"})

        assert profile.favorite_color is EnumColor.RED
        assert profile.backup_color is None

    def test_json_input_deserializes(self) -> None:
        profile = ModelProfile.model_validate_json(
            '{"favorite_color": "BLUE", "backup_color": "GREEN"}'
        )

        assert profile.favorite_color is EnumColor.BLUE
        assert profile.backup_color is EnumColor.GREEN

    def test_enum_instance_passes_through(self) -> None:
        profile = ModelProfile(favorite_color=EnumColor.GREEN)

        assert profile.favorite_color is EnumColor.GREEN

    def test_invalid_value_is_reported_inside_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelProfile.model_validate({"favorite_color": "red"})

        details = exc_info.value.errors()
        assert len(details) == 1
        assert details[0]["type"] == "value_error"
        assert details[0]["loc"] == ("favorite_color",)

        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.field_name == "favorite_color"
        assert error.invalid_value == "red"
        assert error.message == "Invalid value 'red' for field 'favorite_color'"

    def test_one_error_per_failed_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelProfile.model_validate({"favorite_color": "PINK", "backup_color": "Blue"})

        errors = collect_invalid_enum_errors(exc_info.value)
        assert [(e.field_name, e.invalid_value) for e in errors] == [
            ("favorite_color", "PINK"),
            ("backup_color", "Blue"),
        ]

    def test_non_enum_fields_are_left_to_pydantic(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelProfile.model_validate({"favorite_color": "RED", "nickname": 5})

        assert exc_info.value.errors()[0]["type"] == "string_type"
        assert collect_invalid_enum_errors(exc_info.value) == []

    def test_missing_required_enum_is_pydantic_missing(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelProfile.model_validate({})

        assert exc_info.value.errors()[0]["type"] == "missing"

    def test_configured_wire_format_applies(self) -> None:
        configure_enum_deserializer(
            ModelEnumDeserializerSettings(wire_format=EnumWireFormat.VALUE)
        )

        profile = ModelProfile.model_validate({"favorite_color": "red"})

        assert profile.favorite_color is EnumColor.RED
        with pytest.raises(ValidationError):
            ModelProfile.model_validate({"favorite_color": "RED"})

    def test_resolution_error_escapes_validation(self) -> None:
        with pytest.raises(TypeResolutionError, match="shared by FIRST and SECOND"):
            ModelBrokenKind.model_validate({"kind": "same"})

    def test_json_round_trip_with_name_format(self) -> None:
        profile = ModelProfile.model_validate(
            {"favorite_color": "RED", "backup_color": "BLUE"}
        )

        payload = profile.model_dump_json()

        assert payload == '{"favorite_color":"RED","backup_color":"BLUE","nickname":""}'
        assert ModelProfile.model_validate_json(payload) == profile

    def test_json_round_trip_with_value_format(self) -> None:
        configure_enum_deserializer(
            ModelEnumDeserializerSettings(wire_format=EnumWireFormat.VALUE)
        )
        profile = ModelProfile.model_validate({"favorite_color": "red"})

        payload = profile.model_dump_json()

        assert payload == '{"favorite_color":"red","backup_color":null,"nickname":""}'
        assert ModelProfile.model_validate_json(payload) == profile

    def test_python_dump_keeps_members(self) -> None:
        profile = ModelProfile.model_validate({"favorite_color": "GREEN"})

        assert profile.model_dump()["favorite_color"] is EnumColor.GREEN
        assert profile.model_dump(mode="json")["favorite_color"] == "GREEN"

    def test_call_sites_are_cached_per_field(self) -> None:
        ModelProfile.model_validate({"favorite_color": "RED", "backup_color": "RED"})
        ModelProfile.model_validate({"favorite_color": "BLUE"})

        resolver = get_enum_deserializer().resolver
        assert isinstance(resolver, TypeContextResolver)
        assert resolver.cached_call_sites == 2


@pytest.mark.unit
class TestFieldAliases:
    def test_errors_name_the_aliased_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelAliasedProfile.model_validate({"favoriteColor": "red"})

        assert exc_info.value.errors()[0]["loc"] == ("favoriteColor",)
        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.field_name == "favoriteColor"
        assert error.message == "Invalid value 'red' for field 'favoriteColor'"

    def test_alias_choices_fall_back_to_attribute_name(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelAliasedProfile.model_validate({"favoriteColor": "RED", "backup": "x"})

        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.field_name == "backup_color"

    def test_aliased_json_round_trip(self) -> None:
        profile = ModelAliasedProfile.model_validate(
            {"favoriteColor": "BLUE", "backupColor": "GREEN"}
        )

        payload = profile.model_dump_json(by_alias=True)

        assert '"favoriteColor":"BLUE"' in payload
        restored = ModelAliasedProfile.model_validate_json(payload)
        assert restored.favorite_color is EnumColor.BLUE

    def test_call_sites_use_wire_names(self) -> None:
        sites = model_call_sites(ModelAliasedProfile)

        assert [s.field_name for s in sites] == ["favoriteColor", "backup_color"]


@pytest.mark.unit
class TestPreloadModel:
    def test_model_call_sites_lists_enum_fields_only(self) -> None:
        sites = model_call_sites(ModelProfile)

        assert [(s.owner, s.field_name) for s in sites] == [
            ("ModelProfile", "favorite_color"),
            ("ModelProfile", "backup_color"),
        ]

    def test_preload_resolves_enum_fields(self) -> None:
        descriptors = preload_model(ModelProfile)

        assert [d.enum_type for d in descriptors] == [EnumColor, EnumColor]

    def test_preload_surfaces_integration_defects(self) -> None:
        with pytest.raises(TypeResolutionError):
            preload_model(ModelBrokenKind, EnumValueDeserializer())


@pytest.mark.unit
class TestEnumWire:
    def test_marker_deserializes_and_accepts_aliases(self) -> None:
        task = ModelTask.model_validate({"priority": "P_HIGH", "status": "SHIPPED"})

        assert task.priority is EnumPriority.HIGH
        assert task.status is EnumOrderStatus.SHIPPED

    def test_marker_serializes_canonical_wire_strings(self) -> None:
        task = ModelTask.model_validate({"priority": "P_LOW", "status": "PENDING"})

        assert task.model_dump(mode="json") == {"priority": "low", "status": "PENDING"}
        assert task.model_dump_json() == '{"priority":"low","status":"PENDING"}'

    def test_marker_serializes_none(self) -> None:
        task = ModelTask.model_validate({"priority": "high"})

        assert task.model_dump(mode="json") == {"priority": "high", "status": None}

    def test_marker_python_dump_keeps_members(self) -> None:
        task = ModelTask.model_validate({"priority": "P_HIGH", "status": "SHIPPED"})

        assert task.model_dump() == {
            "priority": EnumPriority.HIGH,
            "status": EnumOrderStatus.SHIPPED,
        }

    def test_marker_json_round_trip(self) -> None:
        task = ModelTask.model_validate({"priority": "P_HIGH", "status": "CANCELLED"})

        assert ModelTask.model_validate_json(task.model_dump_json()) == task

    def test_marker_reports_configured_field_name(self) -> None:
        class ModelAliasedTask(BaseModel):
            priority: Annotated[
                EnumPriority, EnumWire(_NAME_DESERIALIZER, field_name="taskPriority")
            ] = Field(alias="taskPriority")

        with pytest.raises(ValidationError) as exc_info:
            ModelAliasedTask.model_validate({"taskPriority": "HIGH"})

        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.field_name == "taskPriority"

    def test_marker_rejects_with_field_name(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelTask.model_validate({"priority": "HIGH"})

        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.field_name == "priority"
        assert error.invalid_value == "HIGH"
        assert error.allowed_values == ("low", "high")

    def test_marker_on_non_enum_fails_when_model_is_defined(self) -> None:
        with pytest.raises(TypeResolutionError, match="not an enumerated type"):

            class ModelMisconfigured(BaseModel):
                count: Annotated[int, EnumWire(_NAME_DESERIALIZER)]

    def test_marker_with_type_adapter(self) -> None:
        adapter = TypeAdapter(Annotated[EnumColor, EnumWire(EnumValueDeserializer())])

        assert adapter.validate_python("GREEN") is EnumColor.GREEN
        with pytest.raises(ValidationError) as exc_info:
            adapter.validate_python("green")

        [error] = collect_invalid_enum_errors(exc_info.value)
        assert error.invalid_value == "green"


@pytest.mark.unit
class TestCollectInvalidEnumErrors:
    def test_accepts_error_dicts(self) -> None:
        enum_error = InvalidEnumValueError(field_name="status", invalid_value="FOO")
        errors = [
            {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
            {"type": "value_error", "loc": ("body", "status"), "ctx": {"error": enum_error}},
            {"type": "value_error", "loc": ("body", "other"), "ctx": {"error": ValueError("x")}},
        ]

        assert collect_invalid_enum_errors(errors) == [enum_error]

    def test_empty_input(self) -> None:
        assert collect_invalid_enum_errors([]) == []
