from __future__ import annotations

from custom_components.lightify.link import (
    LightifyLink,
    LightifyLinkError,
    LightifyLuminary,
)

BULB_ADDRESS = "84:18:26:00:00:01"


class FakeLuminary(LightifyLuminary):
    def __init__(
        self,
        is_powered: bool = False,
        luminance: int = 0,
        temperature: int = 2700,
        rgb: tuple[int, int, int] = (255, 255, 255),
    ) -> None:
        self._is_powered = is_powered
        self._luminance = luminance
        self._temperature = temperature
        self._rgb = rgb
        self.calls: list[tuple] = []
        self.fail = False

    @property
    def is_powered(self) -> bool:
        return self._is_powered

    @property
    def luminance(self) -> int:
        return self._luminance

    @property
    def temperature(self) -> int:
        return self._temperature

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self._rgb

    def _check(self) -> None:
        if self.fail:
            raise LightifyLinkError("device offline")

    async def async_set_switch(self, on: bool) -> FakeLuminary:
        self.calls.append(("switch", on))
        self._check()
        self._is_powered = on
        return self

    async def async_set_luminance(self, luminance: int, transition: int) -> FakeLuminary:
        self.calls.append(("luminance", luminance, transition))
        self._check()
        self._luminance = luminance
        return self

    async def async_set_temperature(self, temperature: int, transition: int) -> FakeLuminary:
        self.calls.append(("temperature", temperature, transition))
        self._check()
        self._temperature = temperature
        return self

    async def async_set_rgb(
        self, red: int, green: int, blue: int, transition: int
    ) -> FakeLuminary:
        self.calls.append(("rgb", red, green, blue, transition))
        self._check()
        self._rgb = (red, green, blue)
        return self


class FakeLink(LightifyLink):
    def __init__(self) -> None:
        self.devices: dict[str, FakeLuminary] = {}
        self.zones: dict[str, FakeLuminary] = {}
        self.lookups: list[str] = []
        self.status_updates: list[LightifyLuminary] = []
        self.fail = False

    def find_device(self, address: str) -> FakeLuminary | None:
        self.lookups.append(address)
        return self.devices.get(address)

    def find_zone(self, key: str) -> FakeLuminary | None:
        self.lookups.append(key)
        return self.zones.get(key)

    async def async_perform_status_update(self, luminary: LightifyLuminary) -> LightifyLuminary:
        self.status_updates.append(luminary)
        if self.fail:
            raise LightifyLinkError("gateway did not answer")
        return luminary
