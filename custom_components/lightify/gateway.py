"""Gateway connection shared by every bulb and zone of one config entry."""
from __future__ import annotations

import logging

from homeassistant.core import HomeAssistant, callback

from .link import LightifyLink

_LOGGER = logging.getLogger(__name__)


class LightifyGateway:
    """Represents a Lightify gateway and its currently active link."""

    def __init__(self, hass: HomeAssistant, host: str, name: str) -> None:
        self._hass = hass
        self._host = host
        self._name = name
        self._link: LightifyLink | None = None

    @property
    def host(self) -> str:
        return self._host

    @property
    def name(self) -> str:
        return self._name

    @property
    def link(self) -> LightifyLink | None:
        """Return the active link, or None while the gateway is not connected."""
        return self._link

    @callback
    def async_set_link(self, link: LightifyLink) -> None:
        """Bind a (re)established link."""
        _LOGGER.info("Link to Lightify gateway %s (%s) is up", self._name, self._host)
        self._link = link

    @callback
    def async_clear_link(self) -> None:
        """Drop the link, e.g. when the connection is lost or the entry unloads."""
        if self._link is not None:
            _LOGGER.info("Link to Lightify gateway %s (%s) is down", self._name, self._host)
        self._link = None
