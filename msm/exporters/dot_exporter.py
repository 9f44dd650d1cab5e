# msm/exporters/dot_exporter.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import re
from enum import Enum
from typing import List

from msm.core.state_machine import StateMachine
from msm.core.states import State
from msm.exporters.base import DEFAULT_CURRENT_COLOR, DEFAULT_FINAL_COLOR, Exporter, format_message

_DOT_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)")


class RankDir(Enum):
    """Layout direction of the rendered graph."""

    LR = "LR"
    TB = "TB"


def _quote(value: str) -> str:
    if _DOT_ID.fullmatch(value):
        return value
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DOTExporter(Exporter):
    """
    Exports a state machine in Graphviz DOT format. Final states are filled,
    the current state is outlined when `show_current` is set, and state
    properties become node attributes. A state defining its own `color`
    property keeps it instead of the default colours.
    """

    def __init__(
        self,
        graph_name: str = "G",
        rank_dir: RankDir = RankDir.LR,
        final_state_color: str = DEFAULT_FINAL_COLOR,
        current_state_color: str = DEFAULT_CURRENT_COLOR,
        show_current: bool = False,
    ) -> None:
        super().__init__(show_current=show_current)
        self.graph_name = graph_name
        self.rank_dir = rank_dir
        self.final_state_color = final_state_color
        self.current_state_color = current_state_color

    def export(self, machine: StateMachine) -> str:
        lines = [f"digraph {_quote(self.graph_name)} {{", f'\trankdir="{self.rank_dir.value}";']
        for state in machine.transition_index.get_transitions_as_map():
            attributes = self._node_attributes(machine, state)
            if attributes:
                lines.append(f"\t{_quote(state.name)} [{', '.join(attributes)}];")
        for transition in machine.get_all_transitions():
            edge = f"\t{_quote(transition.origin.name)} -> {_quote(transition.target.name)}"
            label = format_message(transition.message)
            if label:
                edge += f' [label="{label}"]'
            lines.append(edge + ";")
        lines.append("}")
        return "\n".join(lines)

    def _node_attributes(self, machine: StateMachine, state: State) -> List[str]:
        attributes = []
        current = self.is_current(machine, state)
        custom_color = state.has_property("color")
        if state.final and not custom_color:
            attributes.append(f'style="filled", fillcolor="{self.final_state_color}"')
        if current and not custom_color:
            attributes.append(f'color="{self.current_state_color}"')
        if state.final:
            attributes.append('final="true"')
        if current:
            attributes.append('current="true"')
        for key, value in state.properties.items():
            attributes.append(f'{_quote(key)}="{value}"')
        return attributes
