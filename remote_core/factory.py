"""
Device and command factory, plus layout loading.

A layout describes devices, macros and slot bindings as plain data. It is
validated with pydantic, then turned into a wired RemoteControl.

Command references in a layout are either "<device_id>.<action>"
(e.g. "living_room_fan.high") or the id of a macro.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from remote_constants import DeviceKind, SLOT_COUNT, UndoOrder
from .commands import (
    CeilingFanHighCommand,
    CeilingFanLowCommand,
    CeilingFanMediumCommand,
    CeilingFanOffCommand,
    Command,
    GarageDoorDownCommand,
    GarageDoorUpCommand,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    StereoOffCommand,
    StereoOnWithCDCommand,
)
from .devices import CeilingFan, Device, GarageDoor, Light, Stereo
from .exceptions import LayoutError, UnknownCommandError, UnknownDeviceKindError
from .remote import RemoteControl

logger = logging.getLogger(__name__)


DEVICE_CLASSES: Dict[DeviceKind, Type[Device]] = {
    DeviceKind.LIGHT: Light,
    DeviceKind.CEILING_FAN: CeilingFan,
    DeviceKind.STEREO: Stereo,
    DeviceKind.GARAGE_DOOR: GarageDoor,
}

# Action name -> command class, per device kind
DEVICE_COMMANDS: Dict[DeviceKind, Dict[str, Type[Command]]] = {
    DeviceKind.LIGHT: {
        "on": LightOnCommand,
        "off": LightOffCommand,
    },
    DeviceKind.CEILING_FAN: {
        "high": CeilingFanHighCommand,
        "medium": CeilingFanMediumCommand,
        "low": CeilingFanLowCommand,
        "off": CeilingFanOffCommand,
    },
    DeviceKind.STEREO: {
        "on": StereoOnWithCDCommand,
        "off": StereoOffCommand,
    },
    DeviceKind.GARAGE_DOOR: {
        "up": GarageDoorUpCommand,
        "down": GarageDoorDownCommand,
    },
}


# Pydantic models for layout validation
class DeviceSpec(BaseModel):
    kind: str
    label: str


class MacroSpec(BaseModel):
    commands: List[str]
    undo_order: Optional[UndoOrder] = None  # None = use the loader's default
    name: Optional[str] = None              # None = use the macro id


class SlotSpec(BaseModel):
    slot: int
    on: str
    off: str


class LayoutSpec(BaseModel):
    slot_count: int = SLOT_COUNT
    devices: Dict[str, DeviceSpec] = {}
    macros: Dict[str, MacroSpec] = {}
    slots: List[SlotSpec] = []


@dataclass
class RemoteSetup:
    """A wired remote together with the devices and macros it was built from."""
    remote: RemoteControl
    devices: Dict[str, Device] = field(default_factory=dict)
    macros: Dict[str, MacroCommand] = field(default_factory=dict)


def build_device(kind: Union[str, DeviceKind], label: str) -> Device:
    """
    Create a device by kind.

    Raises:
        UnknownDeviceKindError: If kind is not a known DeviceKind
    """
    try:
        device_kind = DeviceKind(kind)
    except ValueError:
        raise UnknownDeviceKindError(kind) from None
    return DEVICE_CLASSES[device_kind](label)


def build_command(device: Device, action: str) -> Command:
    """
    Create a new command for a named action on a device.

    Raises:
        UnknownCommandError: If the device kind has no such action
    """
    actions = DEVICE_COMMANDS[device.kind]
    command_class = actions.get(action)
    if command_class is None:
        supported = ", ".join(sorted(actions))
        raise UnknownCommandError(f"{device.kind.value}.{action}",
                                  reason=f"{device.kind.value} supports: {supported}")
    return command_class(device)


def _resolve(reference: str, devices: Dict[str, Device], macros: Dict[str, MacroCommand]) -> Command:
    """Resolve a layout command reference. Device references get a fresh command each time."""
    if reference in macros:
        return macros[reference]
    device_id, sep, action = reference.partition(".")
    if not sep:
        raise UnknownCommandError(reference, reason="not a macro id or <device>.<action>")
    device = devices.get(device_id)
    if device is None:
        raise UnknownCommandError(reference, reason=f"no device '{device_id}'")
    return build_command(device, action)


def build_remote(layout: Union[Mapping, LayoutSpec],
                 macro_undo_order: UndoOrder = UndoOrder.SAME,
                 slot_count: Optional[int] = None) -> RemoteSetup:
    """
    Build a wired remote from a layout.

    Args:
        layout: Layout mapping (see remote_constants.DEFAULT_LAYOUT) or LayoutSpec
        macro_undo_order: Undo order for macros that don't set their own
        slot_count: Overrides the layout's slot count if given

    Returns:
        RemoteSetup with the remote, devices by id and macros by id

    Raises:
        LayoutError: If the layout fails validation
        UnknownDeviceKindError: If a device has an unknown kind
        UnknownCommandError: If a command reference cannot be resolved
        SlotOutOfRangeError: If a binding targets a slot the remote doesn't have
    """
    if isinstance(layout, LayoutSpec):
        spec = layout
    else:
        try:
            spec = LayoutSpec.model_validate(layout)
        except ValidationError as e:
            raise LayoutError(f"Invalid remote layout: {e}") from e

    try:
        remote = RemoteControl(slot_count if slot_count is not None else spec.slot_count)
    except ValueError as e:
        raise LayoutError(str(e)) from e

    devices = {
        device_id: build_device(device_spec.kind, device_spec.label)
        for device_id, device_spec in spec.devices.items()
    }

    # Macros are built in definition order, so a macro may use earlier macros
    macros: Dict[str, MacroCommand] = {}
    for macro_id, macro_spec in spec.macros.items():
        children = [_resolve(ref, devices, macros) for ref in macro_spec.commands]
        macros[macro_id] = MacroCommand(
            children,
            name=macro_spec.name or macro_id,
            undo_order=macro_spec.undo_order or macro_undo_order,
        )

    for slot_spec in spec.slots:
        remote.bind(
            slot_spec.slot,
            _resolve(slot_spec.on, devices, macros),
            _resolve(slot_spec.off, devices, macros),
        )

    logger.info(f"Remote built: {len(devices)} devices, {len(macros)} macros, "
                f"{len(spec.slots)}/{remote.slot_count} slots bound")
    return RemoteSetup(remote=remote, devices=devices, macros=macros)
