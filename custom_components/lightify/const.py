from datetime import timedelta

DOMAIN                 = "lightify"
MANUFACTURER           = "OSRAM"

CONF_BULBS             = "bulbs"
CONF_ZONES             = "zones"

# Thing types
THING_TYPE_BULB        = "bulb"
THING_TYPE_ZONE        = "zone"
SUPPORTED_THING_TYPES  = frozenset({THING_TYPE_BULB, THING_TYPE_ZONE})

PROPERTY_ZONE_ID       = "zone_id"
ZONE_KEY_PREFIX        = "zone::"

# Channels
CHANNEL_ID_POWER       = "power"
CHANNEL_ID_DIMMER      = "dimmer"
CHANNEL_ID_TEMPERATURE = "temperature"
CHANNEL_ID_COLOR       = "color"

# Status polling
POLL_INITIAL_DELAY     = timedelta(seconds=1)
POLL_INTERVAL          = timedelta(seconds=10)

# Every command is applied without a fade
TRANSITION_IMMEDIATE   = 0

MIN_KELVIN             = 2000
MAX_KELVIN             = 6500
