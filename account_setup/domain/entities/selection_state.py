from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionState:
    # Ids in selection order, no duplicates.
    selected_actions: tuple[str, ...] = ()
    selected_options: tuple[str, ...] = ()

    def is_action_selected(self, action_id: str) -> bool:
        return action_id in self.selected_actions

    def is_option_selected(self, option_id: str) -> bool:
        return option_id in self.selected_options
