"""Tests for the device state model."""
import logging

import pytest

from remote_core import CeilingFan, FanSpeed, GarageDoor, Light, Stereo


class TestLight:
    def test_starts_off(self, light):
        assert light.is_on is False
        assert light.get_state() == {"device": "light", "label": "Living Room", "on": False}

    def test_on_off(self, light, reports):
        light.on()
        assert light.is_on
        light.off()
        assert not light.is_on
        assert reports.messages == ["Living Room light is on", "Living Room light is off"]

    def test_repeated_transition_still_reports(self, light, reports):
        light.off()
        light.off()
        assert not light.is_on
        assert reports.messages == ["Living Room light is off", "Living Room light is off"]

    def test_transition_is_logged(self, light, caplog):
        caplog.set_level(logging.INFO, logger="remote_core.devices")
        light.on()
        assert "Living Room light is on" in caplog.messages

    def test_label_is_read_only(self, light):
        with pytest.raises(AttributeError):
            light.label = "Kitchen"


class TestCeilingFan:
    def test_starts_off(self, fan):
        assert fan.get_speed() == FanSpeed.OFF
        assert fan.get_state()["speed"] == "off"

    def test_speeds_are_ordered(self):
        assert FanSpeed.OFF < FanSpeed.LOW < FanSpeed.MEDIUM < FanSpeed.HIGH

    def test_transitions_report(self, fan, reports):
        fan.high()
        fan.medium()
        fan.low()
        fan.off()
        assert reports.messages == [
            "Living Room ceiling fan is on high",
            "Living Room ceiling fan is on medium",
            "Living Room ceiling fan is on low",
            "Living Room ceiling fan is off",
        ]

    @pytest.mark.parametrize("speed", list(FanSpeed))
    def test_transition_for_every_speed(self, fan, speed):
        fan.transition_for(speed)()
        assert fan.get_speed() == speed

    def test_transition_for_accepts_plain_int(self, fan):
        fan.transition_for(2)()
        assert fan.get_speed() == FanSpeed.MEDIUM


class TestStereo:
    def test_settings(self, stereo, reports):
        stereo.on()
        stereo.set_dvd()
        stereo.set_volume(7)
        assert stereo.get_state() == {
            "device": "stereo", "label": "Living Room", "on": True, "source": "dvd", "volume": 7,
        }
        assert reports.messages == [
            "Living Room stereo is on",
            "Living Room stereo is set for dvd input",
            "Living Room stereo volume set to 7",
        ]

    @pytest.mark.parametrize("requested, expected", [(-3, 0), (0, 0), (11, 11), (25, 11)])
    def test_volume_is_clamped(self, stereo, requested, expected):
        stereo.set_volume(requested)
        assert stereo.volume == expected


class TestGarageDoor:
    def test_up_down_and_light(self, garage_door, reports):
        garage_door.up()
        garage_door.light_on()
        garage_door.stop()
        garage_door.down()
        garage_door.light_off()
        assert garage_door.get_state() == {"device": "garage_door", "label": "Garage", "open": False, "light": False}
        assert reports.messages == [
            "Garage garage door is open",
            "Garage garage door light is on",
            "Garage garage door is stopped",
            "Garage garage door is closed",
            "Garage garage door light is off",
        ]


class TestStateCallbacks:
    def test_report_carries_state(self):
        light = Light("Kitchen")
        received = []
        light.add_state_callback(received.append)
        light.on()
        assert received == [{"device": "light", "label": "Kitchen", "on": True, "message": "Kitchen light is on"}]

    def test_remove_callback(self):
        light = Light("Kitchen")
        received = []
        light.add_state_callback(received.append)
        light.remove_state_callback(received.append)
        light.on()
        assert received == []

    def test_failing_callback_does_not_abort_transition(self, caplog):
        fan = CeilingFan("Bedroom")
        received = []

        def broken(report):
            raise RuntimeError("boom")

        fan.add_state_callback(broken)
        fan.add_state_callback(received.append)
        fan.high()

        assert fan.get_speed() == FanSpeed.HIGH
        assert len(received) == 1
        assert any("State callback error" in m for m in caplog.messages)
