from __future__ import annotations

import pytest
from homeassistant.core import HomeAssistant
from homeassistant.loader import async_get_integration

from custom_components.lightify.const import DOMAIN

pytestmark = pytest.mark.usefixtures("enable_custom_integrations")


async def test_manifest(hass: HomeAssistant) -> None:
    integration = await async_get_integration(hass, DOMAIN)

    assert integration.domain == DOMAIN
    assert integration.config_flow
    assert integration.manifest["iot_class"] == "local_polling"
    assert integration.requirements == []
    # No documentation link until the project has one of its own
    assert "documentation" not in integration.manifest
