"""
Simulated devices that a remote control can drive.

Devices know nothing about commands. Each one exposes named transition
operations that move it to a specific state and report the change as a log
line plus a callback notification.
"""
import logging
from enum import IntEnum
from typing import Callable, Dict, List

from remote_constants import DeviceKind, DEVICE_NAMES, STEREO_MAX_VOLUME

logger = logging.getLogger(__name__)


class FanSpeed(IntEnum):
    """Ceiling fan speed levels, ordered OFF < LOW < MEDIUM < HIGH."""
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class Device:
    """
    Base class for a controllable device.

    Subclasses set `kind` and implement `_state_fields()`. Every transition
    must end with `_report()`, which logs the change and calls all registered
    state callbacks with the device's state dict.
    """

    kind: DeviceKind = None

    def __init__(self, label: str):
        self._label = label
        self._state_callbacks: List[Callable[[dict], None]] = []

    @property
    def label(self) -> str:
        return self._label

    @property
    def display_name(self) -> str:
        """Label plus device name, e.g. 'Living Room ceiling fan'."""
        return f"{self._label} {DEVICE_NAMES[self.kind]}"

    def add_state_callback(self, callback: Callable[[dict], None]):
        """Register a callback to be called after every transition."""
        self._state_callbacks.append(callback)

    def remove_state_callback(self, callback: Callable[[dict], None]):
        """Unregister a state callback."""
        if callback in self._state_callbacks:
            self._state_callbacks.remove(callback)

    def get_state(self) -> dict:
        """Get current state as a dictionary."""
        state = {"device": self.kind.value, "label": self._label}
        state.update(self._state_fields())
        return state

    def _state_fields(self) -> dict:
        raise NotImplementedError

    def _report(self, message: str):
        """Log a transition and notify callbacks."""
        logger.info(message)
        report = self.get_state()
        report["message"] = message
        for callback in self._state_callbacks:
            try:
                callback(report)
            except Exception as e:
                logger.error(f"State callback error on {self.display_name}: {e}")

    def __repr__(self):
        return f"{type(self).__name__}({self._label!r})"


class Light(Device):
    """Binary light."""

    kind = DeviceKind.LIGHT

    def __init__(self, label: str):
        super().__init__(label)
        self.is_on = False

    def on(self):
        self.is_on = True
        self._report(f"{self.display_name} is on")

    def off(self):
        self.is_on = False
        self._report(f"{self.display_name} is off")

    def _state_fields(self) -> dict:
        return {"on": self.is_on}


class CeilingFan(Device):
    """
    Ceiling fan with four discrete speeds.

    Starts at FanSpeed.OFF. `transition_for()` maps every FanSpeed to the
    operation that reaches it, so callers restoring a remembered speed never
    need their own dispatch table.
    """

    kind = DeviceKind.CEILING_FAN

    def __init__(self, label: str):
        super().__init__(label)
        self._speed = FanSpeed.OFF
        self._transitions: Dict[FanSpeed, Callable[[], None]] = {
            FanSpeed.OFF: self.off,
            FanSpeed.LOW: self.low,
            FanSpeed.MEDIUM: self.medium,
            FanSpeed.HIGH: self.high,
        }

    def high(self):
        self._set_speed(FanSpeed.HIGH)

    def medium(self):
        self._set_speed(FanSpeed.MEDIUM)

    def low(self):
        self._set_speed(FanSpeed.LOW)

    def off(self):
        self._set_speed(FanSpeed.OFF)

    def get_speed(self) -> FanSpeed:
        return self._speed

    def transition_for(self, speed: FanSpeed) -> Callable[[], None]:
        """Return the transition operation that moves the fan to `speed`."""
        return self._transitions[FanSpeed(speed)]

    def _set_speed(self, speed: FanSpeed):
        self._speed = speed
        if speed == FanSpeed.OFF:
            self._report(f"{self.display_name} is off")
        else:
            self._report(f"{self.display_name} is on {speed.name.lower()}")

    def _state_fields(self) -> dict:
        return {"speed": self._speed.name.lower()}


class Stereo(Device):
    """Stereo with power, input source and volume (0-11)."""

    kind = DeviceKind.STEREO

    def __init__(self, label: str):
        super().__init__(label)
        self.is_on = False
        self.source = None
        self.volume = 0

    def on(self):
        self.is_on = True
        self._report(f"{self.display_name} is on")

    def off(self):
        self.is_on = False
        self._report(f"{self.display_name} is off")

    def set_cd(self):
        self._set_source("cd")

    def set_dvd(self):
        self._set_source("dvd")

    def set_radio(self):
        self._set_source("radio")

    def set_volume(self, volume: int):
        """Set volume, clamped to 0-STEREO_MAX_VOLUME."""
        self.volume = max(0, min(STEREO_MAX_VOLUME, volume))
        self._report(f"{self.display_name} volume set to {self.volume}")

    def _set_source(self, source: str):
        self.source = source
        self._report(f"{self.display_name} is set for {source} input")

    def _state_fields(self) -> dict:
        return {"on": self.is_on, "source": self.source, "volume": self.volume}


class GarageDoor(Device):
    """Garage door with its own light. Starts closed."""

    kind = DeviceKind.GARAGE_DOOR

    def __init__(self, label: str):
        super().__init__(label)
        self.is_open = False
        self.light_is_on = False

    def up(self):
        self.is_open = True
        self._report(f"{self.display_name} is open")

    def down(self):
        self.is_open = False
        self._report(f"{self.display_name} is closed")

    def stop(self):
        self._report(f"{self.display_name} is stopped")

    def light_on(self):
        self.light_is_on = True
        self._report(f"{self.display_name} light is on")

    def light_off(self):
        self.light_is_on = False
        self._report(f"{self.display_name} light is off")

    def _state_fields(self) -> dict:
        return {"open": self.is_open, "light": self.light_is_on}
