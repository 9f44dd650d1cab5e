# msm/exporters/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import os
from typing import Union

from msm.core.errors import FileExportError
from msm.core.messages import ANY, EMPTY, NULL, Message
from msm.core.state_machine import StateMachine

logger = logging.getLogger(__name__)

DEFAULT_FINAL_COLOR = "#C2B3FF"
DEFAULT_CURRENT_COLOR = "#1122DD"


class Exporter:
    """
    Renders a state machine as text. Exporters only read the machine: the
    transition map, the current state and the states' final flags and
    properties.
    """

    def __init__(self, show_current: bool = False) -> None:
        """
        :param show_current: Whether to mark the machine's current state.
        """
        self.show_current = show_current

    def export(self, machine: StateMachine) -> str:
        raise NotImplementedError()

    def export_to_file(self, machine: StateMachine, output_file: Union[str, os.PathLike]) -> None:
        """
        Export the machine and write the result to a file as UTF-8.

        :raises FileExportError: If the file cannot be written.
        """
        content = self.export(machine)
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.exception("Error exporting state machine to %s", output_file)
            raise FileExportError(f"Error exporting output file [{output_file}]") from e

    def is_current(self, machine: StateMachine, state) -> bool:
        return self.show_current and machine.current_state is not None and state == machine.current_state


def format_message(message: Message) -> str:
    """Text label of a message, empty for EMPTY and NULL."""
    if message == ANY:
        return "*"
    if message == EMPTY or message == NULL:
        return ""
    payload = message.get_payload()
    return str(payload) if payload is not None else str(message)
