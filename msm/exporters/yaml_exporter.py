# msm/exporters/yaml_exporter.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import re
from typing import Any, Dict, List

import yaml

from msm.core.messages import ANY, EMPTY, NULL
from msm.core.state_machine import StateMachine
from msm.exporters.base import Exporter


class YAMLExporter(Exporter):
    """
    Exports a state machine as a YAML document with a `states` section (name,
    current and final flags, properties) and a `transitions` section (source,
    target and either a message or `any: true`). EMPTY transitions carry no
    message entry. The document can be read back with YAMLImporter.
    """

    def __init__(self, show_current: bool = False, indent: int = 4) -> None:
        super().__init__(show_current=show_current)
        if indent not in (2, 4):
            raise ValueError("YAML indent must be 2 or 4 spaces")
        self.indent = indent

    def export(self, machine: StateMachine) -> str:
        return yaml.safe_dump(
            self.to_document(machine),
            default_flow_style=False,
            sort_keys=False,
            indent=self.indent,
            allow_unicode=True,
        )

    def to_document(self, machine: StateMachine) -> Dict[str, Any]:
        """Build the plain data structure dumped by `export`."""
        transitions_map = machine.transition_index.get_transitions_as_map()
        document: Dict[str, Any] = {"states": self._states(machine, transitions_map)}
        transitions = self._transitions(transitions_map)
        if transitions:
            document["transitions"] = transitions
        return document

    def _states(self, machine: StateMachine, transitions_map) -> List[Dict[str, Any]]:
        states = []
        for state in transitions_map:
            entry: Dict[str, Any] = {"name": state.name}
            if self.is_current(machine, state):
                entry["current"] = True
            if state.final:
                entry["final"] = True
            if state.has_properties():
                entry["properties"] = {re.sub(r"\s", "_", k): v for k, v in state.properties.items()}
            states.append({"state": entry})
        return states

    def _transitions(self, transitions_map) -> List[Dict[str, Any]]:
        transitions = []
        for source, mapping in transitions_map.items():
            for message, target in mapping.items():
                entry: Dict[str, Any] = {"source": source.name, "target": target.name}
                if message == ANY:
                    entry["any"] = True
                elif message != EMPTY and message != NULL:
                    entry["message"] = str(message)
                transitions.append({"transition": entry})
        return transitions
