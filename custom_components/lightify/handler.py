"""Command handling for a Lightify bulb or zone.

Commands and status requests go through the link of the gateway the bulb or
zone is paired to. The gateway and its link are looked up again on every
command and every poll tick, as the connection layer may rebind the link at
any time.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_call_later, async_track_time_interval

from .commands import (
    Command,
    DecimalType,
    HSBType,
    OnOffType,
    PercentType,
    clamp,
    to_wire_luminance,
    to_wire_rgb,
    to_wire_switch,
    to_wire_temperature,
)
from .const import (
    CHANNEL_ID_COLOR,
    CHANNEL_ID_DIMMER,
    CHANNEL_ID_POWER,
    CHANNEL_ID_TEMPERATURE,
    POLL_INITIAL_DELAY,
    POLL_INTERVAL,
    SUPPORTED_THING_TYPES,
    THING_TYPE_BULB,
    THING_TYPE_ZONE,
    TRANSITION_IMMEDIATE,
    ZONE_KEY_PREFIX,
)
from .gateway import LightifyGateway
from .link import LightifyLink, LightifyLinkError, LightifyLuminary

_LOGGER = logging.getLogger(__name__)

GatewayLookup = Callable[[], LightifyGateway | None]
StateUpdater = Callable[[dict[str, Command]], None]


@dataclass(frozen=True)
class DeviceIdentity:
    """What a handler talks to: a bulb by address or a zone by id."""

    thing_type: str
    address: str | None = None
    zone_id: str | None = None

    def __post_init__(self) -> None:
        if self.thing_type not in SUPPORTED_THING_TYPES:
            raise ValueError(f"Unsupported thing type: {self.thing_type}")
        if self.thing_type == THING_TYPE_BULB and not self.address:
            raise ValueError("A bulb needs an address")
        if self.thing_type == THING_TYPE_ZONE and not self.zone_id:
            raise ValueError("A zone needs a zone id")

    @classmethod
    def bulb(cls, address: str) -> DeviceIdentity:
        return cls(THING_TYPE_BULB, address=address)

    @classmethod
    def zone(cls, zone_id: str) -> DeviceIdentity:
        return cls(THING_TYPE_ZONE, zone_id=zone_id)

    @property
    def zone_key(self) -> str:
        return f"{ZONE_KEY_PREFIX}{self.zone_id}"

    def __str__(self) -> str:
        if self.thing_type == THING_TYPE_BULB:
            return f"bulb {self.address}"
        return f"zone {self.zone_id}"


def luminary_channel_states(luminary: LightifyLuminary) -> dict[str, Command]:
    """Map the full luminary state onto the four channels."""
    red, green, blue = luminary.rgb
    return {
        CHANNEL_ID_POWER: OnOffType.from_bool(luminary.is_powered),
        CHANNEL_ID_DIMMER: PercentType(clamp(luminary.luminance, 0, 100)),
        CHANNEL_ID_TEMPERATURE: DecimalType(int(luminary.temperature)),
        CHANNEL_ID_COLOR: HSBType.from_rgb(red, green, blue),
    }


class LightifyDeviceHandler:
    """Translates channel commands for one bulb or zone into link operations."""

    def __init__(
        self,
        hass: HomeAssistant,
        identity: DeviceIdentity,
        gateway_lookup: GatewayLookup,
        update_state: StateUpdater,
    ) -> None:
        """Initialize the handler.

        Args:
            hass: Home Assistant instance, used for scheduling the poll
            identity: The bulb or zone this handler operates on
            gateway_lookup: Returns the parent gateway, or None if it is not set up
            update_state: Publishes the states of all four channels at once
        """
        self._hass = hass
        self._identity = identity
        self._gateway_lookup = gateway_lookup
        self._update_state = update_state

        self._command_handlers: dict[str, Callable[[Command], Awaitable[bool]]] = {
            CHANNEL_ID_POWER: self._async_handle_power,
            CHANNEL_ID_DIMMER: self._async_handle_dimmer,
            CHANNEL_ID_TEMPERATURE: self._async_handle_temperature,
            CHANNEL_ID_COLOR: self._async_handle_color,
        }

        self._cancel_initial_poll: CALLBACK_TYPE | None = None
        self._cancel_poll_interval: CALLBACK_TYPE | None = None
        self._poll_task: asyncio.Task | None = None

    @property
    def identity(self) -> DeviceIdentity:
        return self._identity

    # Lifecycle

    @callback
    def async_initialize(self) -> None:
        """Start the periodic status poll."""
        self._cancel_initial_poll = async_call_later(
            self._hass, POLL_INITIAL_DELAY, self._async_start_polling
        )

    @callback
    def async_dispose(self) -> None:
        """Stop polling. Called when the owning entity goes away."""
        if self._cancel_initial_poll:
            self._cancel_initial_poll()
            self._cancel_initial_poll = None
        if self._cancel_poll_interval:
            self._cancel_poll_interval()
            self._cancel_poll_interval = None
        if self._poll_task and not self._poll_task.done():
            self._poll_task.cancel()
        self._poll_task = None

    @callback
    def _async_start_polling(self, now: datetime) -> None:
        self._cancel_initial_poll = None
        self._cancel_poll_interval = async_track_time_interval(
            self._hass, self._async_poll_tick, POLL_INTERVAL
        )
        self._async_poll_tick(now)

    @callback
    def _async_poll_tick(self, now: datetime) -> None:
        if self._poll_task and not self._poll_task.done():
            _LOGGER.debug("Status update for %s still running, skipping tick", self._identity)
            return
        self._poll_task = self._hass.async_create_background_task(
            self.async_poll(), f"lightify status update {self._identity}"
        )

    # Resolution

    def _get_link(self) -> LightifyLink | None:
        gateway = self._gateway_lookup()
        if gateway is None:
            return None
        return gateway.link

    def _find_luminary(self, link: LightifyLink) -> LightifyLuminary | None:
        if self._identity.thing_type == THING_TYPE_BULB:
            return link.find_device(self._identity.address)
        return link.find_zone(self._identity.zone_key)

    def get_luminary(self) -> LightifyLuminary | None:
        """Resolve the luminary through the gateway's current link."""
        link = self._get_link()
        if link is None:
            return None
        return self._find_luminary(link)

    # Polling

    async def async_poll(self) -> None:
        """Request a status update and republish the result."""
        link = self._get_link()
        if link is None:
            _LOGGER.debug("No gateway link for %s yet", self._identity)
            return
        luminary = self._find_luminary(link)
        if luminary is None:
            _LOGGER.debug("Gateway does not know %s", self._identity)
            return
        try:
            luminary = await link.async_perform_status_update(luminary)
        except LightifyLinkError as ex:
            _LOGGER.debug("Status update for %s failed: %s", self._identity, ex)
            return
        self.async_luminary_updated(luminary)

    # Commands

    async def async_handle_command(self, channel_id: str, command: Command) -> bool:
        """Forward a command; return True once the luminary acknowledged it."""
        _LOGGER.debug("Command for %s on %s: %s", self._identity, channel_id, command)
        handler = self._command_handlers.get(channel_id)
        if handler is None:
            return False
        return await handler(command)

    async def _async_handle_power(self, command: Command) -> bool:
        if not isinstance(command, OnOffType):
            return False
        luminary = self.get_luminary()
        if luminary is None:
            return False
        return await self._async_forward(luminary.async_set_switch(to_wire_switch(command)))

    async def _async_handle_dimmer(self, command: Command) -> bool:
        if not isinstance(command, PercentType):
            return False
        luminary = self.get_luminary()
        if luminary is None:
            return False
        return await self._async_forward(
            luminary.async_set_luminance(to_wire_luminance(command), TRANSITION_IMMEDIATE)
        )

    async def _async_handle_temperature(self, command: Command) -> bool:
        if not isinstance(command, DecimalType):
            return False
        luminary = self.get_luminary()
        if luminary is None:
            return False
        return await self._async_forward(
            luminary.async_set_temperature(to_wire_temperature(command), TRANSITION_IMMEDIATE)
        )

    async def _async_handle_color(self, command: Command) -> bool:
        if not isinstance(command, HSBType):
            return False
        luminary = self.get_luminary()
        if luminary is None:
            return False
        red, green, blue = to_wire_rgb(command)
        return await self._async_forward(
            luminary.async_set_rgb(red, green, blue, TRANSITION_IMMEDIATE)
        )

    async def _async_forward(self, operation: Awaitable[LightifyLuminary]) -> bool:
        try:
            luminary = await operation
        except LightifyLinkError as ex:
            _LOGGER.debug("Command for %s failed: %s", self._identity, ex)
            return False
        self.async_luminary_updated(luminary)
        return True

    @callback
    def async_luminary_updated(self, luminary: LightifyLuminary) -> None:
        """Republish every channel from the luminary's current state."""
        self._update_state(luminary_channel_states(luminary))
