"""
Commands - reversible instructions bound to devices.

A command wraps one device transition behind a uniform execute/undo
contract. Binary devices undo with the complementary transition; the
ceiling fan undoes by restoring the speed captured at execute time.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from remote_constants import NO_COMMAND_NAME, STEREO_CD_VOLUME, UndoOrder
from .devices import CeilingFan, FanSpeed, GarageDoor, Light, Stereo

logger = logging.getLogger(__name__)


class Command(ABC):
    """Base command. `name` labels the command in remote listings."""

    name: str = ""

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"


class NoCommand(Command):
    """Placeholder for unbound slots and the initial undo target."""

    name = NO_COMMAND_NAME

    def execute(self) -> None:
        pass

    def undo(self) -> None:
        pass


# ==============================================================================
# Binary device commands - undo is the static complement
# ==============================================================================

class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light
        self.name = f"{light.display_name} on"

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light
        self.name = f"{light.display_name} off"

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class StereoOnWithCDCommand(Command):
    """Power on, select CD and set the CD volume. Undo powers off."""

    def __init__(self, stereo: Stereo):
        self.stereo = stereo
        self.name = f"{stereo.display_name} on with CD"

    def execute(self) -> None:
        self.stereo.on()
        self.stereo.set_cd()
        self.stereo.set_volume(STEREO_CD_VOLUME)

    def undo(self) -> None:
        self.stereo.off()


class StereoOffCommand(Command):
    def __init__(self, stereo: Stereo):
        self.stereo = stereo
        self.name = f"{stereo.display_name} off"

    def execute(self) -> None:
        self.stereo.off()

    def undo(self) -> None:
        self.stereo.on()


class GarageDoorUpCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door
        self.name = f"{door.display_name} up"

    def execute(self) -> None:
        self.door.up()

    def undo(self) -> None:
        self.door.down()


class GarageDoorDownCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door
        self.name = f"{door.display_name} down"

    def execute(self) -> None:
        self.door.down()

    def undo(self) -> None:
        self.door.up()


# ==============================================================================
# Ceiling fan commands - undo restores the captured speed
# ==============================================================================

class CeilingFanCommand(Command):
    """
    Moves a ceiling fan to `target_speed`.

    The fan's speed is captured into `prev_speed` each time execute() runs,
    not at construction, since other commands may move the fan in between.
    """

    target_speed: FanSpeed = None

    def __init__(self, fan: CeilingFan):
        self.fan = fan
        self.prev_speed: Optional[FanSpeed] = None
        self.name = f"{fan.display_name} {self.target_speed.name.lower()}"

    def execute(self) -> None:
        self.prev_speed = self.fan.get_speed()
        self.fan.transition_for(self.target_speed)()

    def undo(self) -> None:
        if self.prev_speed is None:
            logger.debug(f"Undo of '{self.name}' ignored: never executed")
            return
        self.fan.transition_for(self.prev_speed)()


class CeilingFanHighCommand(CeilingFanCommand):
    target_speed = FanSpeed.HIGH


class CeilingFanMediumCommand(CeilingFanCommand):
    target_speed = FanSpeed.MEDIUM


class CeilingFanLowCommand(CeilingFanCommand):
    target_speed = FanSpeed.LOW


class CeilingFanOffCommand(CeilingFanCommand):
    target_speed = FanSpeed.OFF


# ==============================================================================
# Macro command
# ==============================================================================

class MacroCommand(Command):
    """
    Runs an ordered list of child commands as one unit.

    execute() runs the children in the order supplied. undo() runs each
    child's undo() in the same order unless undo_order is UndoOrder.REVERSE.
    There is no rollback: if a child raises, the children before it stay
    executed and the exception propagates.
    """

    def __init__(self, commands: Iterable[Command], name: str = "macro",
                 undo_order: UndoOrder = UndoOrder.SAME):
        self.commands: List[Command] = list(commands)
        self.name = name
        self.undo_order = UndoOrder(undo_order)

    def execute(self) -> None:
        logger.debug(f"Macro '{self.name}': executing {len(self.commands)} commands")
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        if self.undo_order == UndoOrder.REVERSE:
            children = reversed(self.commands)
        else:
            children = self.commands
        logger.debug(f"Macro '{self.name}': undoing {len(self.commands)} commands ({self.undo_order.value} order)")
        for command in children:
            command.undo()
