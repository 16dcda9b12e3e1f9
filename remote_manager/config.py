"""
Configuration and Argument Parsing for the Remote Loader.

Handles CLI argument parsing and validation.
"""

import argparse
import os
from typing import List, Optional, Sequence, Tuple

from logging_setup import LOG_LEVELS
from remote_constants import MAX_SLOT_COUNT, SLOT_COUNT, UndoOrder

# Button press kinds accepted by --press
PRESS_ON = "on"
PRESS_OFF = "off"
PRESS_UNDO = "undo"


def validate_press(value: str) -> Tuple[str, Optional[int]]:
    """
    Validate and parse a button press.

    Args:
        value: "on:<slot>", "off:<slot>" or "undo"

    Returns:
        Tuple of (button, slot). slot is None for undo.

    Raises:
        argparse.ArgumentTypeError: If validation fails
    """
    value = value.strip().lower()
    if value == PRESS_UNDO:
        return PRESS_UNDO, None

    button, sep, slot_text = value.partition(":")
    if not sep or button not in (PRESS_ON, PRESS_OFF):
        raise argparse.ArgumentTypeError(f"Invalid press '{value}': use on:<slot>, off:<slot> or undo.")
    try:
        slot = int(slot_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid slot in press '{value}': slot must be an integer.")
    if slot < 0:
        raise argparse.ArgumentTypeError(f"Invalid slot in press '{value}': slot must be >= 0.")
    return button, slot


def validate_slot_count(value: str) -> int:
    """
    Validate the number of remote slots.

    Raises:
        argparse.ArgumentTypeError: If not an integer between 1 and MAX_SLOT_COUNT
    """
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Slot count must be an integer, got '{value}'.")
    if not 1 <= count <= MAX_SLOT_COUNT:
        raise argparse.ArgumentTypeError(f"Slot count must be between 1 and {MAX_SLOT_COUNT}.")
    return count


def parse_arguments(argv: Optional[Sequence[str]] = None, script_file: str = None):
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        script_file: Path to the main script file (for default log file name)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="remote_manager",
        description="Remote Loader - wire the default remote layout and press its buttons.")

    if script_file:
        default_log_file = os.path.splitext(os.path.basename(script_file))[0] + ".log"
    else:
        default_log_file = "remote_manager.log"

    parser.add_argument("--log_level", choices=LOG_LEVELS, default="INFO",
                        help="Set logging level. Default is INFO.")

    parser.add_argument("--log_file_name", type=str, default=default_log_file,
                        help=f"Name of the log file. Default is '{default_log_file}'.")

    parser.add_argument("--log_dir", type=str, default=os.getcwd(),
                        help="Directory for the log file. Default is the current directory.")

    parser.add_argument("--slots", type=validate_slot_count, default=SLOT_COUNT,
                        help=f"Number of remote slots (1-{MAX_SLOT_COUNT}). Default is {SLOT_COUNT}. "
                             "Default layout bindings beyond this count are rejected.")

    parser.add_argument("--macro_undo_order", choices=[o.value for o in UndoOrder], default=UndoOrder.SAME.value,
                        help="Order in which macro undo reverses its commands. Default is 'same'.")

    parser.add_argument("--press", type=validate_press, action="append", default=[], dest="presses",
                        metavar="ACTION",
                        help="Button press: on:<slot>, off:<slot> or undo. Repeat to press several buttons in order.")

    args = parser.parse_args(argv)

    args.macro_undo_order = UndoOrder(args.macro_undo_order)
    return args


def format_presses(presses: List[Tuple[str, Optional[int]]]) -> str:
    """Format parsed presses for the startup banner."""
    if not presses:
        return "(none)"
    return ", ".join(button if slot is None else f"{button}:{slot}" for button, slot in presses)
