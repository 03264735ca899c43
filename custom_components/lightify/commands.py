"""Command and state types exchanged on the light's channels.

A channel receives commands and publishes states of the same types:

    power        OnOffType
    dimmer       PercentType
    temperature  DecimalType
    color        HSBType

RefreshType may arrive on any channel and never matches a channel's kind.
The module also holds the conversions from these types into the values the
gateway accepts on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from homeassistant.util.color import color_hsv_to_RGB, color_RGB_to_hsv

BYTE_MIN  = 0
BYTE_MAX  = 255
INT16_MIN = -32768
INT16_MAX = 32767


class OnOffType(Enum):
    ON  = "ON"
    OFF = "OFF"

    @classmethod
    def from_bool(cls, value: bool) -> OnOffType:
        return cls.ON if value else cls.OFF


class RefreshType(Enum):
    REFRESH = "REFRESH"


@dataclass(frozen=True)
class PercentType:
    """Integer percentage, 0-100."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError(f"Percent value {self.value} is outside 0-100")


@dataclass(frozen=True)
class DecimalType:
    """Plain integer value in a device-defined unit."""

    value: int


@dataclass(frozen=True)
class HSBType:
    """Hue (0-360), saturation (0-100) and brightness (0-100)."""

    hue: float
    saturation: float
    brightness: float

    def __post_init__(self) -> None:
        if not 0 <= self.hue <= 360:
            raise ValueError(f"Hue {self.hue} is outside 0-360")
        if not 0 <= self.saturation <= 100:
            raise ValueError(f"Saturation {self.saturation} is outside 0-100")
        if not 0 <= self.brightness <= 100:
            raise ValueError(f"Brightness {self.brightness} is outside 0-100")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> HSBType:
        hue, saturation, brightness = color_RGB_to_hsv(
            clamp_byte(red), clamp_byte(green), clamp_byte(blue)
        )
        return cls(hue, saturation, brightness)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return color_hsv_to_RGB(self.hue, self.saturation, self.brightness)


Command = Union[OnOffType, PercentType, DecimalType, HSBType, RefreshType]


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, int(value)))


def clamp_byte(value: int) -> int:
    return clamp(value, BYTE_MIN, BYTE_MAX)


def clamp_int16(value: int) -> int:
    return clamp(value, INT16_MIN, INT16_MAX)


def to_wire_switch(command: OnOffType) -> bool:
    return command is OnOffType.ON


def to_wire_luminance(command: PercentType) -> int:
    return clamp(command.value, 0, 100)


def to_wire_temperature(command: DecimalType) -> int:
    return clamp_int16(command.value)


def to_wire_rgb(command: HSBType) -> tuple[int, int, int]:
    red, green, blue = command.rgb
    return clamp_byte(red), clamp_byte(green), clamp_byte(blue)
