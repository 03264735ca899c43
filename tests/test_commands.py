from __future__ import annotations

import pytest

from custom_components.lightify.commands import (
    DecimalType,
    HSBType,
    OnOffType,
    PercentType,
    clamp_byte,
    clamp_int16,
    to_wire_luminance,
    to_wire_rgb,
    to_wire_switch,
    to_wire_temperature,
)


def test_switch_is_true_only_for_on() -> None:
    assert to_wire_switch(OnOffType.ON) is True
    assert to_wire_switch(OnOffType.OFF) is False


def test_on_off_from_bool() -> None:
    assert OnOffType.from_bool(True) is OnOffType.ON
    assert OnOffType.from_bool(False) is OnOffType.OFF


@pytest.mark.parametrize("value", [0, 57, 100])
def test_luminance_passes_percent_through(value: int) -> None:
    assert to_wire_luminance(PercentType(value)) == value


@pytest.mark.parametrize("value", [-1, 101])
def test_percent_rejects_out_of_range(value: int) -> None:
    with pytest.raises(ValueError):
        PercentType(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-5, -5), (2700, 2700), (40000, 32767), (-40000, -32768)],
)
def test_temperature_is_clamped_to_int16(value: int, expected: int) -> None:
    assert to_wire_temperature(DecimalType(value)) == expected


def test_clamping_never_wraps() -> None:
    assert clamp_byte(300) == 255
    assert clamp_byte(-3) == 0
    assert clamp_byte(128) == 128
    assert clamp_int16(32768) == 32767


def test_rgb_from_full_red() -> None:
    assert to_wire_rgb(HSBType(0, 100, 100)) == (255, 0, 0)


def test_rgb_black_at_zero_brightness() -> None:
    assert to_wire_rgb(HSBType(120, 100, 0)) == (0, 0, 0)


def test_hsb_from_rgb() -> None:
    hsb = HSBType.from_rgb(10, 20, 30)

    assert hsb.hue == pytest.approx(210.0)
    assert hsb.saturation == pytest.approx(66.667, abs=0.01)
    assert hsb.brightness == pytest.approx(11.765, abs=0.01)


def test_hsb_from_rgb_clamps_out_of_range_channels() -> None:
    assert HSBType.from_rgb(300, 0, -10) == HSBType.from_rgb(255, 0, 0)


@pytest.mark.parametrize(
    ("hue", "saturation", "brightness"),
    [(361, 0, 0), (-1, 0, 0), (0, 101, 0), (0, 0, 101)],
)
def test_hsb_rejects_out_of_range(hue: float, saturation: float, brightness: float) -> None:
    with pytest.raises(ValueError):
        HSBType(hue, saturation, brightness)


def test_states_compare_by_value() -> None:
    assert PercentType(40) == PercentType(40)
    assert DecimalType(2700) != DecimalType(2701)
