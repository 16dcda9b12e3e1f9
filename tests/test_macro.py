"""Tests for MacroCommand ordering and failure behavior."""
import pytest

from remote_constants import UndoOrder
from remote_core import (
    CeilingFanHighCommand,
    Command,
    FanSpeed,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    StereoOffCommand,
    StereoOnWithCDCommand,
)


@pytest.fixture
def party(light, fan, stereo):
    return [LightOnCommand(light), CeilingFanHighCommand(fan), StereoOnWithCDCommand(stereo)]


def test_execute_runs_children_in_order(party, fan, reports):
    fan.low()
    reports.clear()
    MacroCommand(party, name="party on").execute()
    assert reports.messages == [
        "Living Room light is on",
        "Living Room ceiling fan is on high",
        "Living Room stereo is on",
        "Living Room stereo is set for cd input",
        "Living Room stereo volume set to 11",
    ]


def test_undo_runs_children_in_same_order_by_default(party, fan, reports):
    fan.low()
    macro = MacroCommand(party, name="party on")
    macro.execute()
    reports.clear()

    macro.undo()

    assert macro.undo_order == UndoOrder.SAME
    assert reports.messages == [
        "Living Room light is off",
        "Living Room ceiling fan is on low",
        "Living Room stereo is off",
    ]
    assert fan.get_speed() == FanSpeed.LOW


def test_undo_in_reverse_order(party, fan, reports):
    macro = MacroCommand(party, name="party on", undo_order=UndoOrder.REVERSE)
    macro.execute()
    reports.clear()

    macro.undo()

    assert reports.messages == [
        "Living Room stereo is off",
        "Living Room ceiling fan is off",
        "Living Room light is off",
    ]


def test_undo_order_accepts_value_string(party):
    assert MacroCommand(party, undo_order="reverse").undo_order == UndoOrder.REVERSE


def test_children_list_is_copied(light):
    children = [LightOnCommand(light)]
    macro = MacroCommand(children)
    children.append(LightOffCommand(light))
    assert len(macro.commands) == 1


def test_empty_macro_is_noop():
    macro = MacroCommand([], name="nothing")
    macro.execute()
    macro.undo()


def test_nested_macro(light, stereo, reports):
    inner = MacroCommand([LightOnCommand(light)], name="lights")
    outer = MacroCommand([inner, StereoOffCommand(stereo)], name="evening")
    outer.execute()
    assert reports.messages == ["Living Room light is on", "Living Room stereo is off"]


class _Exploding(Command):
    name = "exploding"

    def execute(self):
        raise RuntimeError("device fault")

    def undo(self):
        pass


def test_failure_propagates_without_rollback(light, stereo):
    macro = MacroCommand([LightOnCommand(light), _Exploding(), StereoOnWithCDCommand(stereo)])
    with pytest.raises(RuntimeError, match="device fault"):
        macro.execute()
    assert light.is_on        # earlier child stays executed
    assert not stereo.is_on   # later child never ran
