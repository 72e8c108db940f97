"""Adapters from configuration schemas to domain objects."""

from __future__ import annotations

from ledwall.application.catalog import DEFAULT_MODULES, ModuleCatalog
from ledwall.application.config.schemas import LedWallConfiguration, ModuleConfig
from ledwall.domain import (
    LedModule,
    PduSpec,
    ProjectConfig,
    ProjectMetadata,
    RouteConfig,
    VideoSpec,
)


def config_to_project(config: LedWallConfiguration) -> ProjectConfig:
    """Convert a validated project file into a frozen ProjectConfig.

    Args:
        config: Validated configuration.

    Returns:
        ProjectConfig snapshot for the calculation engine.
    """
    screen = config.screen
    rigging = config.rigging
    weights = rigging.hardware_weights
    stacking = config.stacking
    power = config.power
    routes = config.routes
    multicable = config.multicable

    pdu = PduSpec()
    video = VideoSpec()
    if config.infrastructure is not None:
        pdu_cfg = config.infrastructure.pdu
        video_cfg = config.infrastructure.video
        pdu = PduSpec(
            name=pdu_cfg.name,
            count=pdu_cfg.count,
            connector=pdu_cfg.connector,
            cable_length_m=pdu_cfg.cable_length,
        )
        video = VideoSpec(
            processor=video_cfg.processor,
            processor_qty=video_cfg.processor_qty,
            server=video_cfg.server,
            server_qty=video_cfg.server_qty,
            interconnect_type=video_cfg.interconnect_type,
            interconnect_length_m=video_cfg.interconnect_length,
            interconnect_qty=video_cfg.interconnect_qty,
            distribution_type=video_cfg.distribution_type,
            distribution_length_m=video_cfg.distribution_length,
            distribution_qty=video_cfg.distribution_qty,
            accessories=video_cfg.accessories,
        )

    return ProjectConfig(
        target_width_m=screen.width,
        target_height_m=screen.height,
        module_id=screen.module_id,
        override_weight=screen.overrides.weight,
        override_pixels_h=screen.overrides.pixels_h,
        override_pixels_v=screen.overrides.pixels_v,
        corner_left=config.special_modules.corner_left,
        corner_right=config.special_modules.corner_right,
        flex=config.special_modules.flex,
        installation=rigging.installation,
        truss_model=rigging.truss_model,
        truss_connection=rigging.truss_connection,
        truss_segments=dict(rigging.truss_segments),
        motor_count=rigging.motor_count,
        motor_capacity_kg=rigging.motor_capacity,
        motor_weight_kg=rigging.motor_weight,
        sling_length_m=rigging.sling_length,
        safety_factor=rigging.safety_factor,
        bumper_1m_kg=weights.bumper_1m,
        bumper_05m_kg=weights.bumper_05m,
        sling_kg=weights.sling,
        shackle_kg=weights.shackle,
        stack_base_plates=stacking.base_plates,
        stack_bilite_bases=stacking.bilite_bases,
        stack_bilite_1m=stacking.bilite_1m,
        stack_bilite_05m=stacking.bilite_05m,
        voltage=power.voltage,
        feed_cable_interval=power.feed_cable_interval,
        signal_reel_interval=power.signal_reel_interval,
        fly_case_interval=power.fly_case_interval,
        fly_case_interval_small=power.fly_case_interval_small,
        data_route=RouteConfig(routes.data.pattern, routes.data.axis, routes.data.start),
        power_route=RouteConfig(
            routes.power.pattern, routes.power.axis, routes.power.start
        ),
        multicable_type=multicable.type,
        circuits_per_cable=multicable.circuits_per_cable,
        extra_breakouts=multicable.extra_breakouts,
        multicables=dict(multicable.lengths),
        metadata=ProjectMetadata(
            event_name=config.project.event_name,
            client_name=config.project.client_name,
            date=config.project.date,
            logo=config.project.logo,
        ),
        pdu=pdu,
        video=video,
    )


def module_config_to_module(module: ModuleConfig, module_id: int) -> LedModule:
    """Convert a custom module entry into a catalog LedModule."""
    return LedModule(
        id=module_id,
        brand=module.brand,
        model=module.model,
        width_mm=module.width_mm,
        height_mm=module.height_mm,
        weight_kg=module.weight_kg,
        power_w=module.power_w,
        pixels_h=module.pixels_h,
        pixels_v=module.pixels_v,
    )


def config_to_catalog(config: LedWallConfiguration) -> ModuleCatalog:
    """Build the module catalog for a project file.

    Custom modules without an id get the next free id.

    Raises:
        ValueError: If a custom module id collides with an existing entry.
    """
    include_defaults = config.catalog is None or config.catalog.include_defaults
    catalog = ModuleCatalog(DEFAULT_MODULES if include_defaults else ())
    if config.catalog is None:
        return catalog

    # Explicit ids first so automatic ids never take a requested one
    for entry in config.catalog.modules:
        if entry.id is not None:
            catalog.add_module(module_config_to_module(entry, entry.id))
    for entry in config.catalog.modules:
        if entry.id is None:
            catalog.add_module(module_config_to_module(entry, catalog.next_id()))
    return catalog
