from __future__ import annotations

from account_setup.application.use_cases.selection import SelectionUseCase
from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.action_tree import ActionTree
from account_setup.domain.entities.selection_state import SelectionState


class SelectionTree:
    """
    Selection state for one wizard session, owned together with its tree.

    Toggles are the only way to change the state; each returns whether
    anything changed. A `state` passed in is trusted as-is: it is meant for
    rehydrating a session from a state previously produced by the toggles.
    """

    def __init__(self, tree: ActionTree, state: SelectionState | None = None) -> None:
        self._selection = SelectionUseCase(tree)
        self._state = state or SelectionState()

    @property
    def tree(self) -> ActionTree:
        return self._selection.tree

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_actions(self) -> tuple[str, ...]:
        return self._state.selected_actions

    @property
    def selected_options(self) -> tuple[str, ...]:
        """Snapshot handed to the next wizard step."""
        return self._state.selected_options

    def toggle_action(self, action_id: str) -> bool:
        result = self._selection.toggle_action(self._state, action_id)
        self._state = result.updated_state
        return result.changed

    def toggle_option(self, option_id: str, parent_id: str) -> bool:
        result = self._selection.toggle_option(self._state, option_id, parent_id)
        self._state = result.updated_state
        return result.changed

    def is_action_indeterminate(self, action_id: str) -> bool:
        return self._selection.is_action_indeterminate(self._state, action_id)

    def action_status(self, action_id: str) -> ActionStatus:
        return self._selection.action_status(self._state, action_id)

    def selection_count(self) -> int:
        return self._selection.selection_count(self._state)
