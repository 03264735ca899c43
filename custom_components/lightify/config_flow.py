"""Config flow for the Lightify integration."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_HOST, CONF_NAME
from homeassistant.core import callback
from homeassistant.data_entry_flow import FlowResult

from .const import CONF_BULBS, CONF_ZONES, DOMAIN

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME = "Lightify"


def parse_id_list(value: str) -> list[str]:
    """Split a comma separated list of bulb addresses or zone ids."""
    return [item.strip() for item in value.split(",") if item.strip()]


class LightifyConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for a Lightify gateway."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Ask for the gateway host."""
        errors: dict[str, str] = {}

        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            if not host:
                errors[CONF_HOST] = "invalid_host"
            else:
                await self.async_set_unique_id(host)
                self._abort_if_unique_id_configured()

                name = user_input.get(CONF_NAME) or DEFAULT_NAME
                _LOGGER.debug("Creating Lightify gateway entry %s (%s)", name, host)
                return self.async_create_entry(
                    title=name,
                    data={CONF_HOST: host, CONF_NAME: name},
                    options={CONF_BULBS: [], CONF_ZONES: []},
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_HOST): str,
                    vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
                }
            ),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> OptionsFlowHandler:
        """Get the options flow handler."""
        return OptionsFlowHandler(config_entry)


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Edit the bulbs and zones paired to the gateway."""

    def __init__(self, config_entry: config_entries.ConfigEntry) -> None:
        """Initialize options flow."""
        self._config_entry = config_entry

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle options."""
        if user_input is not None:
            return self.async_create_entry(
                title="",
                data={
                    CONF_BULBS: parse_id_list(user_input.get(CONF_BULBS, "")),
                    CONF_ZONES: parse_id_list(user_input.get(CONF_ZONES, "")),
                },
            )

        options = self._config_entry.options
        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Optional(
                        CONF_BULBS, default=", ".join(options.get(CONF_BULBS, []))
                    ): str,
                    vol.Optional(
                        CONF_ZONES, default=", ".join(options.get(CONF_ZONES, []))
                    ): str,
                }
            ),
        )
