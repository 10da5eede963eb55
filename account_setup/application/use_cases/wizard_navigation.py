from __future__ import annotations

import logging
from dataclasses import replace

from account_setup.application.exceptions import NavigationBlocked
from account_setup.domain.entities.wizard_state import WIZARD_STEPS, WizardState, WizardStep


class WizardNavigationUseCase:
    """Move a wizard session between steps. Selection is never touched here."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def can_go_next(self, state: WizardState) -> bool:
        if state.current_step == WIZARD_STEPS[-1]:
            return False
        if state.current_step == WizardStep.select_actions and not state.selection.selected_options:
            return False
        return True

    def can_go_back(self, state: WizardState) -> bool:
        return state.current_step != WIZARD_STEPS[0]

    def next(self, state: WizardState, now_ts: float | None = None) -> WizardState:
        if not self.can_go_next(state):
            reason = (
                "no options selected"
                if state.current_step == WizardStep.select_actions
                else "already at last step"
            )
            raise NavigationBlocked(f"Cannot advance from {state.current_step.value}: {reason}")
        return self._move(state, 1, now_ts)

    def back(self, state: WizardState, now_ts: float | None = None) -> WizardState:
        if not self.can_go_back(state):
            raise NavigationBlocked(f"Cannot go back from {state.current_step.value}: already at first step")
        return self._move(state, -1, now_ts)

    def go_to(self, state: WizardState, step: WizardStep, now_ts: float | None = None) -> WizardState:
        """Jump straight to a step, as a tab click does. Not gated by the selection."""
        if step == state.current_step:
            return state
        return self._move(state, WIZARD_STEPS.index(step) - WIZARD_STEPS.index(state.current_step), now_ts)

    def _move(self, state: WizardState, offset: int, now_ts: float | None) -> WizardState:
        index = WIZARD_STEPS.index(state.current_step)
        step = WIZARD_STEPS[index + offset]
        self._logger.info(
            "Wizard step changed",
            extra={"session_id": state.session_id, "step": step.value},
        )
        return replace(state, current_step=step, updated_at=now_ts)
