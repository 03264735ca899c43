"""Interfaces to the Lightify gateway link.

The byte protocol and the TCP connection to the gateway live outside this
integration. A connection layer binds an implementation of LightifyLink to
the gateway (see gateway.LightifyGateway.async_set_link); everything in this
package talks to the gateway only through the methods below.
"""

from __future__ import annotations


class LightifyError(Exception):
    """Base error for the Lightify integration."""


class LightifyLinkError(LightifyError):
    """Raised by a link when the gateway or a device does not complete a request."""


class LightifyLuminary:
    # A single bulb/strip or a zone (group) known to the gateway.
    # Setters resolve to the luminary as it is after the gateway acknowledged.

    @property
    def is_powered(self) -> bool:
        raise NotImplementedError("This method should be implemented by the subclass")

    @property
    def luminance(self) -> int:
        # 0-100
        raise NotImplementedError("This method should be implemented by the subclass")

    @property
    def temperature(self) -> int:
        # Kelvin, signed 16 bit on the wire
        raise NotImplementedError("This method should be implemented by the subclass")

    @property
    def rgb(self) -> tuple[int, int, int]:
        raise NotImplementedError("This method should be implemented by the subclass")

    async def async_set_switch(self, on: bool) -> LightifyLuminary:
        raise NotImplementedError("This method should be implemented by the subclass")

    async def async_set_luminance(self, luminance: int, transition: int) -> LightifyLuminary:
        raise NotImplementedError("This method should be implemented by the subclass")

    async def async_set_temperature(self, temperature: int, transition: int) -> LightifyLuminary:
        raise NotImplementedError("This method should be implemented by the subclass")

    async def async_set_rgb(
        self, red: int, green: int, blue: int, transition: int
    ) -> LightifyLuminary:
        raise NotImplementedError("This method should be implemented by the subclass")


class LightifyLink:
    # Shared by every bulb and zone paired to one gateway.

    def find_device(self, address: str) -> LightifyLuminary | None:
        raise NotImplementedError("This method should be implemented by the subclass")

    def find_zone(self, key: str) -> LightifyLuminary | None:
        raise NotImplementedError("This method should be implemented by the subclass")

    async def async_perform_status_update(self, luminary: LightifyLuminary) -> LightifyLuminary:
        raise NotImplementedError("This method should be implemented by the subclass")
