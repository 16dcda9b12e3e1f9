"""Remote Core - devices, commands and the remote control invoker."""
from .devices import (
    Device,
    Light,
    CeilingFan,
    FanSpeed,
    Stereo,
    GarageDoor,
)
from .commands import (
    Command,
    NoCommand,
    LightOnCommand,
    LightOffCommand,
    StereoOnWithCDCommand,
    StereoOffCommand,
    GarageDoorUpCommand,
    GarageDoorDownCommand,
    CeilingFanCommand,
    CeilingFanHighCommand,
    CeilingFanMediumCommand,
    CeilingFanLowCommand,
    CeilingFanOffCommand,
    MacroCommand,
)
from .remote import RemoteControl
from .exceptions import (
    RemoteControlError,
    SlotOutOfRangeError,
    UnknownDeviceKindError,
    UnknownCommandError,
    LayoutError,
)
from .factory import (
    RemoteSetup,
    LayoutSpec,
    build_device,
    build_command,
    build_remote,
)

__all__ = [
    # Devices
    'Device',
    'Light',
    'CeilingFan',
    'FanSpeed',
    'Stereo',
    'GarageDoor',
    # Commands
    'Command',
    'NoCommand',
    'LightOnCommand',
    'LightOffCommand',
    'StereoOnWithCDCommand',
    'StereoOffCommand',
    'GarageDoorUpCommand',
    'GarageDoorDownCommand',
    'CeilingFanCommand',
    'CeilingFanHighCommand',
    'CeilingFanMediumCommand',
    'CeilingFanLowCommand',
    'CeilingFanOffCommand',
    'MacroCommand',
    # Invoker
    'RemoteControl',
    # Exceptions
    'RemoteControlError',
    'SlotOutOfRangeError',
    'UnknownDeviceKindError',
    'UnknownCommandError',
    'LayoutError',
    # Factory
    'RemoteSetup',
    'LayoutSpec',
    'build_device',
    'build_command',
    'build_remote',
]
