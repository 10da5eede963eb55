from __future__ import annotations

import logging
from dataclasses import dataclass

from account_setup.application.exceptions import ReferenceNotFound
from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.action_tree import Action, ActionTree
from account_setup.domain.entities.selection_state import SelectionState


@dataclass(frozen=True)
class SelectionResult:
    """Result of a toggle."""

    updated_state: SelectionState
    changed: bool  # False when the toggle named an unknown action/option


class SelectionUseCase:
    """
    Toggle actions and options over an explicit SelectionState.

    Every toggle keeps an action in selected_actions exactly when all of its
    options are selected (and it has at least one). Unknown ids are ignored.
    """

    def __init__(self, tree: ActionTree) -> None:
        self._tree = tree
        self._logger = logging.getLogger(__name__)

    @property
    def tree(self) -> ActionTree:
        return self._tree

    def toggle_action(self, state: SelectionState, action_id: str) -> SelectionResult:
        try:
            action = self._require_action(action_id)
        except ReferenceNotFound as e:
            self._logger.debug("Ignoring action toggle", extra={"action_id": action_id, "reason": str(e)})
            return SelectionResult(updated_state=state, changed=False)

        if not action.options:
            # An empty action can never be fully selected
            return SelectionResult(updated_state=state, changed=False)

        option_ids = set(action.option_ids)
        if state.is_action_selected(action_id):
            updated = SelectionState(
                selected_actions=_without(state.selected_actions, {action_id}),
                selected_options=_without(state.selected_options, option_ids),
            )
        else:
            updated = SelectionState(
                selected_actions=_with(state.selected_actions, [action_id]),
                selected_options=_with(state.selected_options, action.option_ids),
            )
        return SelectionResult(updated_state=updated, changed=True)

    def toggle_option(self, state: SelectionState, option_id: str, parent_id: str) -> SelectionResult:
        try:
            action = self._require_option_parent(option_id, parent_id)
        except ReferenceNotFound as e:
            self._logger.debug(
                "Ignoring option toggle",
                extra={"option_id": option_id, "action_id": parent_id, "reason": str(e)},
            )
            return SelectionResult(updated_state=state, changed=False)

        if state.is_option_selected(option_id):
            # Removing any option clears the parent flag, siblings are not consulted
            updated = SelectionState(
                selected_actions=_without(state.selected_actions, {parent_id}),
                selected_options=_without(state.selected_options, {option_id}),
            )
            return SelectionResult(updated_state=updated, changed=True)

        selected_options = _with(state.selected_options, [option_id])
        selected_actions = state.selected_actions
        if all(sibling_id in selected_options for sibling_id in action.option_ids):
            selected_actions = _with(selected_actions, [parent_id])
        updated = SelectionState(selected_actions=selected_actions, selected_options=selected_options)
        return SelectionResult(updated_state=updated, changed=True)

    def is_action_indeterminate(self, state: SelectionState, action_id: str) -> bool:
        return self.action_status(state, action_id) == ActionStatus.partial

    def action_status(self, state: SelectionState, action_id: str) -> ActionStatus:
        action = self._tree.get_action(action_id)
        if action is None or not action.options:
            return ActionStatus.unselected

        selected_count = sum(1 for option_id in action.option_ids if state.is_option_selected(option_id))
        if selected_count == 0:
            return ActionStatus.unselected
        if selected_count == len(action.options):
            return ActionStatus.selected
        return ActionStatus.partial

    def selection_count(self, state: SelectionState) -> int:
        return len(state.selected_options)

    def _require_action(self, action_id: str) -> Action:
        action = self._tree.get_action(action_id)
        if action is None:
            raise ReferenceNotFound(f"Unknown action: {action_id}")
        return action

    def _require_option_parent(self, option_id: str, parent_id: str) -> Action:
        option = self._tree.get_option(option_id)
        if option is None:
            raise ReferenceNotFound(f"Unknown option: {option_id}")
        if option.parent_id != parent_id:
            raise ReferenceNotFound(f"Option {option_id} does not belong to {parent_id}")
        return self._require_action(parent_id)


def _with(ids: tuple[str, ...], additions: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Append ids not already present, keeping order."""
    result = list(ids)
    for item_id in additions:
        if item_id not in result:
            result.append(item_id)
    return tuple(result)


def _without(ids: tuple[str, ...], removals: set[str]) -> tuple[str, ...]:
    return tuple(item_id for item_id in ids if item_id not in removals)
