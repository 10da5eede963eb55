from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

from account_setup.application.ports.action_catalog import ActionCatalogPort
from account_setup.application.ports.session_store import WizardSessionStorePort
from account_setup.application.use_cases.selection_tree import SelectionTree
from account_setup.application.use_cases.wizard_navigation import WizardNavigationUseCase
from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.wizard_state import WizardState, WizardStep


@dataclass(frozen=True)
class WizardView:
    """Read model of a wizard session for the presentation layer."""

    state: WizardState
    action_statuses: dict[str, ActionStatus]
    selection_count: int
    can_go_next: bool
    can_go_back: bool
    changed: bool = False


class WizardSessionUseCase:
    """Run selection and navigation operations against stored wizard sessions."""

    def __init__(
        self,
        store: WizardSessionStorePort,
        catalog: ActionCatalogPort,
        navigation: WizardNavigationUseCase | None = None,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._navigation = navigation or WizardNavigationUseCase()
        self._logger = logging.getLogger(__name__)

    def create(self) -> WizardView:
        return self.describe(self._store.create())

    def get(self, session_id: str) -> WizardView:
        return self.describe(self._store.get(session_id))

    def toggle_action(self, session_id: str, action_id: str) -> WizardView:
        with self._store.get_lock(session_id):
            state = self._store.get(session_id)
            tree = self._selection_tree(state)
            changed = tree.toggle_action(action_id)
            return self._save_selection(state, tree, changed)

    def toggle_option(self, session_id: str, option_id: str, parent_id: str) -> WizardView:
        with self._store.get_lock(session_id):
            state = self._store.get(session_id)
            tree = self._selection_tree(state)
            changed = tree.toggle_option(option_id, parent_id)
            return self._save_selection(state, tree, changed)

    def next(self, session_id: str) -> WizardView:
        with self._store.get_lock(session_id):
            updated = self._navigation.next(self._store.get(session_id), now_ts=time.time())
            self._store.set(updated)
        return self.describe(updated, changed=True)

    def back(self, session_id: str) -> WizardView:
        with self._store.get_lock(session_id):
            updated = self._navigation.back(self._store.get(session_id), now_ts=time.time())
            self._store.set(updated)
        return self.describe(updated, changed=True)

    def go_to(self, session_id: str, step: WizardStep) -> WizardView:
        with self._store.get_lock(session_id):
            state = self._store.get(session_id)
            if state.current_step == step:
                return self.describe(state)
            updated = self._navigation.go_to(state, step, now_ts=time.time())
            self._store.set(updated)
        return self.describe(updated, changed=True)

    def describe(self, state: WizardState, changed: bool = False) -> WizardView:
        tree = self._selection_tree(state)
        return WizardView(
            state=state,
            action_statuses={action_id: tree.action_status(action_id) for action_id in tree.tree.action_ids},
            selection_count=tree.selection_count(),
            can_go_next=self._navigation.can_go_next(state),
            can_go_back=self._navigation.can_go_back(state),
            changed=changed,
        )

    def _selection_tree(self, state: WizardState) -> SelectionTree:
        return SelectionTree(self._catalog.get_tree(), state.selection)

    def _save_selection(self, state: WizardState, tree: SelectionTree, changed: bool) -> WizardView:
        if not changed:
            return self.describe(state)
        updated = replace(state, selection=tree.state, updated_at=time.time())
        self._store.set(updated)
        self._logger.debug(
            "Selection updated",
            extra={"session_id": state.session_id, "reason": f"{tree.selection_count()} options selected"},
        )
        return self.describe(updated, changed=True)
