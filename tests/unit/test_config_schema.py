"""Unit tests for the project file schema models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledwall.application.config import (
    CatalogConfig,
    LedWallConfiguration,
    ModuleConfig,
    MultiCableConfig,
    RiggingConfig,
    RoutesConfig,
    ScreenConfig,
)
from ledwall.application.config.schemas.power_schema import RouteConfigSchema
from ledwall.domain import (
    InstallationType,
    MultiCableType,
    RouteAxis,
    RoutePattern,
    StartCorner,
    TrussConnection,
    TrussModel,
)


class TestLedWallConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = LedWallConfiguration.model_validate(
            {"schema_version": "1.0", "screen": {"width": 4, "height": 2.5}}
        )

        assert config.screen.module_id == 3
        assert config.rigging.installation == InstallationType.FLOWN
        assert config.power.voltage == 230.0
        assert config.catalog is None
        assert config.infrastructure is None

    def test_screen_required(self) -> None:
        with pytest.raises(ValidationError):
            LedWallConfiguration.model_validate({"schema_version": "1.0"})

    def test_unknown_top_level_field(self) -> None:
        with pytest.raises(ValidationError):
            LedWallConfiguration.model_validate(
                {
                    "schema_version": "1.0",
                    "screen": {"width": 4, "height": 2.5},
                    "lighting": {},
                }
            )

    def test_newer_minor_version_accepted(self) -> None:
        config = LedWallConfiguration(
            schema_version="1.7", screen=ScreenConfig(width=4.0, height=2.5)
        )
        assert config.schema_version == "1.7"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            LedWallConfiguration(
                schema_version="2.0", screen=ScreenConfig(width=4.0, height=2.5)
            )

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            LedWallConfiguration(
                schema_version="one", screen=ScreenConfig(width=4.0, height=2.5)
            )


class TestScreenConfig:
    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScreenConfig(width=-1.0, height=2.5)

    def test_zero_size_accepted(self) -> None:
        assert ScreenConfig(width=0.0, height=0.0).width == 0.0

    def test_width_limit(self) -> None:
        with pytest.raises(ValidationError):
            ScreenConfig(width=250.0, height=2.5)

    def test_non_positive_overrides_accepted(self) -> None:
        screen = ScreenConfig.model_validate(
            {"width": 4, "height": 2.5, "overrides": {"weight": 0, "pixels_h": -1}}
        )
        assert screen.overrides.weight == 0


class TestRiggingConfig:
    def test_enum_strings(self) -> None:
        rigging = RiggingConfig.model_validate(
            {"installation": "stacked", "truss_model": "52x52"}
        )

        assert rigging.installation == InstallationType.STACKED
        assert rigging.truss_model == TrussModel.T52

    def test_truss_segment_keys_are_lengths(self) -> None:
        rigging = RiggingConfig.model_validate({"truss_segments": {"2": 3, "0.5": 1}})
        assert rigging.truss_segments == {2.0: 3, 0.5: 1}

    def test_negative_segment_quantity(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            RiggingConfig.model_validate({"truss_segments": {"2": -1}})

    def test_zero_segment_length(self) -> None:
        with pytest.raises(ValidationError, match="positive"):
            RiggingConfig.model_validate({"truss_segments": {"0": 1}})

    @pytest.mark.parametrize("count", [0, 33])
    def test_motor_count_range(self, count: int) -> None:
        with pytest.raises(ValidationError):
            RiggingConfig(motor_count=count)

    def test_safety_factor_minimum(self) -> None:
        with pytest.raises(ValidationError):
            RiggingConfig(safety_factor=0.9)

    def test_invalid_installation(self) -> None:
        with pytest.raises(ValidationError):
            RiggingConfig.model_validate({"installation": "hovering"})


class TestRoutesConfig:
    def test_defaults(self) -> None:
        routes = RoutesConfig()

        assert routes.data.pattern == RoutePattern.SNAKE
        assert routes.power.pattern == RoutePattern.STRAIGHT
        assert routes.power.start == StartCorner.TOP_LEFT

    def test_start_corner_string(self) -> None:
        routes = RoutesConfig.model_validate({"data": {"start": "bottom-right"}})
        assert routes.data.start == StartCorner.BOTTOM_RIGHT


class TestMultiCableConfig:
    def test_circuits_range(self) -> None:
        with pytest.raises(ValidationError):
            MultiCableConfig(circuits_per_cable=0)

    def test_cable_type(self) -> None:
        assert MultiCableConfig.model_validate({"type": "Cetac"}).type.value == "Cetac"


class TestEnumFields:
    """Enum fields are typed with the domain value objects."""

    @pytest.mark.parametrize(
        ("model", "field_name", "enum_type"),
        [
            (RiggingConfig, "installation", InstallationType),
            (RiggingConfig, "truss_model", TrussModel),
            (RiggingConfig, "truss_connection", TrussConnection),
            (RouteConfigSchema, "pattern", RoutePattern),
            (RouteConfigSchema, "axis", RouteAxis),
            (RouteConfigSchema, "start", StartCorner),
            (MultiCableConfig, "type", MultiCableType),
        ],
    )
    def test_annotation(self, model, field_name: str, enum_type: type) -> None:
        assert model.model_fields[field_name].annotation is enum_type

    def test_values_are_domain_enums(self) -> None:
        rigging = RiggingConfig.model_validate({"installation": "stacked"})
        cable = MultiCableConfig.model_validate({"type": "Cetac"})

        assert type(rigging.installation) is InstallationType
        assert type(cable.type) is MultiCableType


class TestCatalogConfig:
    def test_module_defaults(self) -> None:
        module = ModuleConfig(brand="Acme", model="X1")

        assert module.id is None
        assert module.width_mm == 500.0

    def test_module_zero_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModuleConfig(brand="Acme", model="X1", width_mm=0)

    def test_duplicate_custom_ids(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate custom module ids"):
            CatalogConfig(
                modules=[
                    ModuleConfig(id=20, brand="Acme", model="A"),
                    ModuleConfig(id=20, brand="Acme", model="B"),
                ]
            )
