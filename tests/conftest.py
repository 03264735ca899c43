from __future__ import annotations

import pytest

from .common import BULB_ADDRESS, FakeLink, FakeLuminary


@pytest.fixture()
def luminary() -> FakeLuminary:
    return FakeLuminary(is_powered=True, luminance=40, temperature=2700, rgb=(10, 20, 30))


@pytest.fixture()
def link(luminary: FakeLuminary) -> FakeLink:
    link = FakeLink()
    link.devices[BULB_ADDRESS] = luminary
    return link
