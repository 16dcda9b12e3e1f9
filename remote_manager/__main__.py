#!/usr/bin/env python3
"""
Remote Loader - wires the default remote layout and presses buttons.

Usage:
    python -m remote_manager --press on:2 --press off:2 --press undo
"""

import logging
import sys

from logging_setup import setup_logging
from remote_constants import DEFAULT_LAYOUT
from remote_core import RemoteControlError, build_remote

from . import __version__
from .config import PRESS_ON, PRESS_OFF, format_presses, parse_arguments

logger = logging.getLogger(__name__)


def run_presses(remote, presses):
    """Press each (button, slot) on the remote in order."""
    for button, slot in presses:
        if button == PRESS_ON:
            remote.trigger_on(slot)
        elif button == PRESS_OFF:
            remote.trigger_off(slot)
        else:
            remote.trigger_undo()


def main(argv=None) -> int:
    args = parse_arguments(argv, script_file=__file__)
    _, stop_logging = setup_logging(args.log_level, args.log_file_name, args.log_dir,
                                    version=__version__, script_name="Remote Loader")
    try:
        logger.info(f"---> Configuration")
        logger.info(f"     Slots: {args.slots}")
        logger.info(f"     Macro undo order: {args.macro_undo_order.value}")
        logger.info(f"     Presses: {format_presses(args.presses)}")
        logger.info(f"<--- End configuration")

        try:
            setup = build_remote(DEFAULT_LAYOUT, macro_undo_order=args.macro_undo_order,
                                 slot_count=args.slots)
            logger.info(setup.remote.describe())
            run_presses(setup.remote, args.presses)
        except RemoteControlError as e:
            logger.error(f"Remote error: {e}")
            return 1

        logger.info(setup.remote.describe())
        for device_id, device in setup.devices.items():
            logger.info(f"{device_id}: {device.get_state()}")
        return 0
    finally:
        stop_logging()


if __name__ == "__main__":
    sys.exit(main())
