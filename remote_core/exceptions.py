"""
Custom exceptions for remote control wiring and dispatch.
"""


class RemoteControlError(Exception):
    """Base exception for remote control errors."""
    pass


class SlotOutOfRangeError(RemoteControlError, IndexError):
    """Raised when a slot index falls outside the remote's fixed slot range."""

    def __init__(self, slot: int, slot_count: int):
        super().__init__(f"Slot {slot} out of range (remote has {slot_count} slots: 0-{slot_count - 1})")
        self.slot = slot
        self.slot_count = slot_count


class UnknownDeviceKindError(RemoteControlError, ValueError):
    """Raised when the factory is asked for a device kind it does not know."""

    def __init__(self, kind):
        super().__init__(f"Unknown device kind: {kind!r}")
        self.kind = kind


class UnknownCommandError(RemoteControlError, ValueError):
    """Raised when a command reference cannot be resolved."""

    def __init__(self, reference: str, reason: str = None):
        message = f"Unknown command: {reference!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reference = reference


class LayoutError(RemoteControlError):
    """Raised when a remote layout fails validation."""
    pass
