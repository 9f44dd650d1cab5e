# msm/importers/yaml_importer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import os
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from msm.builder import StateMachineBuilder
from msm.core.errors import FileImportError, YAMLParseError
from msm.core.messages import ANY, EMPTY, Message, StringMessage
from msm.core.state_machine import StateMachine
from msm.core.states import State
from msm.core.transitions import Transition

logger = logging.getLogger(__name__)


def _is_true(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


class YAMLImporter:
    """
    Builds state machines from the YAML documents written by YAMLExporter.

    The document must hold a `transitions` list; the optional `states` list
    declares final flags, properties and the current state, which are merged
    into the states referenced by the transitions. Every transition is added
    through a StateMachineBuilder, so the usual validation applies.
    """

    def __init__(self, builder: Optional[StateMachineBuilder] = None) -> None:
        """
        :param builder: Builder receiving the parsed transitions. An injected
            builder is shared by every parse, so each document is added to the
            graph it already holds. A fresh builder is used for every parse when
            omitted.
        """
        self._builder = builder

    def parse(self, content: str) -> StateMachine:
        """
        Parse a YAML document.

        :param content: The YAML text.
        :return: The initialized machine.
        :raises YAMLParseError: If the document is not valid YAML or does not
            describe a state machine.
        """
        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise YAMLParseError(f"Error parsing YAML document: {e}") from e
        if not isinstance(document, dict):
            raise YAMLParseError("The YAML document must be a mapping")

        states, current = self._parse_states(document.get("states"))
        transitions = document.get("transitions")
        if not transitions:
            raise YAMLParseError("No transitions found")
        if not isinstance(transitions, list):
            raise YAMLParseError("The transitions section must be a list")

        builder = self._builder if self._builder is not None else StateMachineBuilder()
        for block in transitions:
            source, message, target = self._parse_transition(block)
            builder.add(Transition(self._state(states, source), message, self._state(states, target)))

        machine = builder.build()
        if current is not None:
            if machine.find(current) is None:
                raise YAMLParseError(f"Current state [{current}] is not part of any transition")
            machine.set_current(current)
        logger.debug("Imported state machine with %d states", machine.size())
        return machine

    def parse_file(self, path: Union[str, os.PathLike]) -> StateMachine:
        """
        Parse a YAML file.

        :raises FileImportError: If the file cannot be read.
        :raises YAMLParseError: If its content cannot be parsed.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            logger.error("Error reading state machine file %s: %s", path, e)
            raise FileImportError(f"Error importing file [{path}]") from e
        return self.parse(content)

    @staticmethod
    def _state(states: Dict[str, State], name: str) -> State:
        if name not in states:
            states[name] = State(name)
        return states[name]

    @staticmethod
    def _parse_states(section: Any) -> Tuple[Dict[str, State], Optional[str]]:
        states: Dict[str, State] = {}
        current = None
        if section is None:
            return states, current
        if not isinstance(section, list):
            raise YAMLParseError("The states section must be a list")

        for block in section:
            entry = block.get("state") if isinstance(block, dict) else None
            if not isinstance(entry, dict) or entry.get("name") is None:
                raise YAMLParseError(f"Error processing state block [{block}]")
            name = str(entry["name"])
            state = State(name, final=_is_true(entry.get("final", False)))
            properties = entry.get("properties") or {}
            if not isinstance(properties, dict):
                raise YAMLParseError(f"Properties of state [{name}] must be a mapping")
            for key, value in properties.items():
                state.set_property(str(key), str(value))
            states[name] = states[name].merge(state) if name in states else state
            if _is_true(entry.get("current", False)):
                current = name
        return states, current

    @staticmethod
    def _parse_transition(block: Any) -> Tuple[str, Message, str]:
        entry = block.get("transition") if isinstance(block, dict) else None
        if not isinstance(entry, dict):
            raise YAMLParseError(f"Error processing transition block [{block}]")
        source, target = entry.get("source"), entry.get("target")
        if source is None or target is None:
            raise YAMLParseError(f"Transition [{entry}] requires a source and a target")

        if _is_true(entry.get("any", False)):
            message: Message = ANY
        elif entry.get("message") is not None:
            message = StringMessage(str(entry["message"]))
        else:
            message = EMPTY
        return str(source), message, str(target)
