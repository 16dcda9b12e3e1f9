"""
Remote Control Constants and Layouts.

Contains device kinds, macro undo policies, slot defaults and the
default remote wiring.
"""

from enum import Enum
from typing import Any, Dict


# ==============================================================================
# 1) DEVICE KINDS - What the remote can be wired to
# ==============================================================================

class DeviceKind(Enum):
    LIGHT = "light"
    CEILING_FAN = "ceiling_fan"
    STEREO = "stereo"
    GARAGE_DOOR = "garage_door"


# Human-readable device names (for log lines)
DEVICE_NAMES: Dict[DeviceKind, str] = {
    DeviceKind.LIGHT: "light",
    DeviceKind.CEILING_FAN: "ceiling fan",
    DeviceKind.STEREO: "stereo",
    DeviceKind.GARAGE_DOOR: "garage door",
}


# ==============================================================================
# 2) MACRO UNDO POLICY
# ==============================================================================

class UndoOrder(Enum):
    SAME = "same"        # Undo children in the order they were supplied
    REVERSE = "reverse"  # Undo children last-to-first


# ==============================================================================
# 3) REMOTE DEFAULTS
# ==============================================================================

SLOT_COUNT = 7          # Slots on the stock remote
MAX_SLOT_COUNT = 16     # Upper bound accepted from the CLI
NO_COMMAND_NAME = "no command"
STEREO_MAX_VOLUME = 11
STEREO_CD_VOLUME = 11


# ==============================================================================
# 4) DEFAULT LAYOUT - Devices, macros and slot bindings (configurable)
# ==============================================================================

DEFAULT_LAYOUT: Dict[str, Any] = {
    "slot_count": SLOT_COUNT,
    "devices": {
        "living_room_light": {"kind": "light", "label": "Living Room"},
        "kitchen_light": {"kind": "light", "label": "Kitchen"},
        "living_room_fan": {"kind": "ceiling_fan", "label": "Living Room"},
        "stereo": {"kind": "stereo", "label": "Living Room"},
        "garage_door": {"kind": "garage_door", "label": "Garage"},
    },
    "macros": {
        "party_on": {
            "commands": ["living_room_light.on", "living_room_fan.high", "stereo.on"],
        },
        "party_off": {
            "commands": ["living_room_light.off", "living_room_fan.off", "stereo.off"],
        },
    },
    "slots": [
        {"slot": 0, "on": "living_room_light.on", "off": "living_room_light.off"},
        {"slot": 1, "on": "kitchen_light.on", "off": "kitchen_light.off"},
        {"slot": 2, "on": "living_room_fan.high", "off": "living_room_fan.off"},
        {"slot": 3, "on": "living_room_fan.medium", "off": "living_room_fan.off"},
        {"slot": 4, "on": "stereo.on", "off": "stereo.off"},
        {"slot": 5, "on": "garage_door.up", "off": "garage_door.down"},
        {"slot": 6, "on": "party_on", "off": "party_off"},
    ],
}
