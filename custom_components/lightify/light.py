"""Light platform for the Lightify integration."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.light import (
    ATTR_BRIGHTNESS,
    ATTR_COLOR_TEMP_KELVIN,
    ATTR_HS_COLOR,
    ColorMode,
    LightEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .commands import Command, DecimalType, HSBType, OnOffType, PercentType
from .const import (
    CHANNEL_ID_COLOR,
    CHANNEL_ID_DIMMER,
    CHANNEL_ID_POWER,
    CHANNEL_ID_TEMPERATURE,
    CONF_BULBS,
    CONF_ZONES,
    DOMAIN,
    MANUFACTURER,
    MAX_KELVIN,
    MIN_KELVIN,
    THING_TYPE_BULB,
)
from .gateway import LightifyGateway
from .handler import DeviceIdentity, GatewayLookup, LightifyDeviceHandler

_LOGGER = logging.getLogger(__name__)


def _gateway_lookup(hass: HomeAssistant, entry_id: str) -> GatewayLookup:
    def lookup() -> LightifyGateway | None:
        return hass.data.get(DOMAIN, {}).get(entry_id)

    return lookup


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up a light for every configured bulb and zone."""
    identities = [DeviceIdentity.bulb(address) for address in entry.options.get(CONF_BULBS, [])]
    identities += [DeviceIdentity.zone(zone_id) for zone_id in entry.options.get(CONF_ZONES, [])]

    _LOGGER.debug("Adding %d Lightify lights for %s", len(identities), entry.title)

    async_add_entities(
        LightifyLight(hass, entry, identity, _gateway_lookup(hass, entry.entry_id))
        for identity in identities
    )


def percent_to_brightness(percent: int) -> int:
    return round(percent * 255 / 100)


def brightness_to_percent(brightness: int) -> int:
    return round(brightness * 100 / 255)


class LightifyLight(LightEntity):
    """A Lightify bulb or zone."""

    _attr_has_entity_name = True
    _attr_name = None  # Use device name
    _attr_should_poll = False
    _attr_supported_color_modes = {ColorMode.COLOR_TEMP, ColorMode.HS}
    _attr_min_color_temp_kelvin = MIN_KELVIN
    _attr_max_color_temp_kelvin = MAX_KELVIN

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        identity: DeviceIdentity,
        gateway_lookup: GatewayLookup,
    ) -> None:
        """Initialize the light."""
        self._identity = identity
        self._channel_states: dict[str, Command] = {}
        self._attr_color_mode = ColorMode.COLOR_TEMP

        if identity.thing_type == THING_TYPE_BULB:
            self._attr_unique_id = identity.address
            name = identity.address
            model = "Lightify bulb"
        else:
            self._attr_unique_id = f"{entry.entry_id}_zone_{identity.zone_id}"
            name = f"Zone {identity.zone_id}"
            model = "Lightify zone"

        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, self._attr_unique_id)},
            name=name,
            manufacturer=MANUFACTURER,
            model=model,
            via_device=(DOMAIN, entry.entry_id),
        )

        self._handler = LightifyDeviceHandler(
            hass, identity, gateway_lookup, self._async_update_channel_states
        )

    async def async_added_to_hass(self) -> None:
        """Start polling once the entity is registered."""
        self._handler.async_initialize()
        self.async_on_remove(self._handler.async_dispose)

    @callback
    def _async_update_channel_states(self, states: dict[str, Command]) -> None:
        changed = {
            channel_id: state
            for channel_id, state in states.items()
            if self._channel_states.get(channel_id) != state
        }
        if not changed:
            return
        self._channel_states.update(changed)
        if self.hass is not None:
            self.async_write_ha_state()

    @property
    def is_on(self) -> bool | None:
        power = self._channel_states.get(CHANNEL_ID_POWER)
        if power is None:
            return None
        return power is OnOffType.ON

    @property
    def brightness(self) -> int | None:
        dimmer = self._channel_states.get(CHANNEL_ID_DIMMER)
        if dimmer is None:
            return None
        return percent_to_brightness(dimmer.value)

    @property
    def hs_color(self) -> tuple[float, float] | None:
        color = self._channel_states.get(CHANNEL_ID_COLOR)
        if color is None:
            return None
        return color.hue, color.saturation

    @property
    def color_temp_kelvin(self) -> int | None:
        temperature = self._channel_states.get(CHANNEL_ID_TEMPERATURE)
        if temperature is None:
            return None
        return temperature.value

    async def async_turn_on(self, **kwargs: Any) -> None:
        _LOGGER.debug("turn_on called for %s with kwargs: %s", self._identity, kwargs)

        commands: list[tuple[str, Command, ColorMode | None]] = []
        if not self.is_on or not kwargs:
            commands.append((CHANNEL_ID_POWER, OnOffType.ON, None))
        if ATTR_BRIGHTNESS in kwargs:
            commands.append(
                (
                    CHANNEL_ID_DIMMER,
                    PercentType(brightness_to_percent(kwargs[ATTR_BRIGHTNESS])),
                    None,
                )
            )
        if ATTR_HS_COLOR in kwargs:
            hue, saturation = kwargs[ATTR_HS_COLOR]
            commands.append((CHANNEL_ID_COLOR, HSBType(hue, saturation, 100), ColorMode.HS))
        elif ATTR_COLOR_TEMP_KELVIN in kwargs:
            commands.append(
                (
                    CHANNEL_ID_TEMPERATURE,
                    DecimalType(int(kwargs[ATTR_COLOR_TEMP_KELVIN])),
                    ColorMode.COLOR_TEMP,
                )
            )

        for channel_id, command, color_mode in commands:
            acknowledged = await self._handler.async_handle_command(channel_id, command)
            # Only switch modes once the luminary took the command
            if acknowledged and color_mode is not None:
                self._attr_color_mode = color_mode

        self.async_write_ha_state()

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self._handler.async_handle_command(CHANNEL_ID_POWER, OnOffType.OFF)

    async def async_update(self) -> None:
        """Poll the gateway right away (homeassistant.update_entity)."""
        await self._handler.async_poll()
