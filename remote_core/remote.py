"""
RemoteControl - the invoker.

Holds a fixed number of slots, each with an ON and an OFF command, plus the
single command that the undo button reverses.
"""
import logging
from typing import List, Tuple

from remote_constants import SLOT_COUNT
from .commands import Command, NoCommand
from .exceptions import SlotOutOfRangeError

logger = logging.getLogger(__name__)


class RemoteControl:
    """
    Slot-based remote control with single-level undo.

    Every slot always holds a command: unbound slots and the initial undo
    target share one NoCommand. Pressing ON or OFF executes the slot's
    command and makes it the undo target; pressing undo does not change the
    undo target, so a second undo repeats the same undo().

    Not thread-safe. A command's execute() reads then writes device state,
    so concurrent triggers would need one lock around each trigger.
    """

    def __init__(self, slot_count: int = SLOT_COUNT):
        if slot_count < 1:
            raise ValueError(f"Remote needs at least one slot, got {slot_count}")
        no_command = NoCommand()
        self._slot_count = slot_count
        self._on_commands: List[Command] = [no_command] * slot_count
        self._off_commands: List[Command] = [no_command] * slot_count
        self._undo_command: Command = no_command

    @property
    def slot_count(self) -> int:
        return self._slot_count

    @property
    def undo_command(self) -> Command:
        """The command the undo button will reverse."""
        return self._undo_command

    def _check_slot(self, slot: int):
        if not 0 <= slot < self._slot_count:
            raise SlotOutOfRangeError(slot, self._slot_count)

    def bind(self, slot: int, on_command: Command, off_command: Command):
        """
        Bind ON and OFF commands to a slot, replacing whatever was there.

        Raises:
            SlotOutOfRangeError: If slot is outside 0..slot_count-1
            TypeError: If either command is not a Command
        """
        self._check_slot(slot)
        for command in (on_command, off_command):
            if not isinstance(command, Command):
                raise TypeError(f"Slot {slot} needs Command instances, got {type(command).__name__}")
        self._on_commands[slot] = on_command
        self._off_commands[slot] = off_command
        logger.debug(f"Slot {slot} bound: ON={on_command.name}, OFF={off_command.name}")

    def get_commands(self, slot: int) -> Tuple[Command, Command]:
        """Return the (ON, OFF) commands bound to a slot."""
        self._check_slot(slot)
        return self._on_commands[slot], self._off_commands[slot]

    def trigger_on(self, slot: int):
        """Press the ON button of a slot."""
        self._check_slot(slot)
        self._trigger(slot, "ON", self._on_commands[slot])

    def trigger_off(self, slot: int):
        """Press the OFF button of a slot."""
        self._check_slot(slot)
        self._trigger(slot, "OFF", self._off_commands[slot])

    def _trigger(self, slot: int, button: str, command: Command):
        logger.debug(f"Slot {slot} {button} -> {command.name}")
        command.execute()
        self._undo_command = command

    def trigger_undo(self):
        """Press the undo button: reverse the last executed command."""
        logger.debug(f"Undo -> {self._undo_command.name}")
        self._undo_command.undo()

    def get_state(self) -> dict:
        """Get slot bindings and undo target as a dictionary (for diagnostics)."""
        return {
            "slots": [
                {"slot": i, "on": on.name, "off": off.name}
                for i, (on, off) in enumerate(zip(self._on_commands, self._off_commands))
            ],
            "undo": self._undo_command.name,
        }

    def describe(self) -> str:
        """Human-readable listing of every slot and the undo target."""
        lines = ["", "------ Remote Control -------"]
        for i, (on, off) in enumerate(zip(self._on_commands, self._off_commands)):
            lines.append(f"[slot {i}] {on.name}    {off.name}")
        lines.append(f"[undo] {self._undo_command.name}")
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.describe()
