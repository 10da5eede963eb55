from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from account_setup.domain.entities.selection_state import SelectionState


class WizardStep(str, Enum):
    start = "start"
    select_actions = "select-actions"
    link_aws_api = "link-aws-api"
    fetch = "fetch"


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep.start,
    WizardStep.select_actions,
    WizardStep.link_aws_api,
    WizardStep.fetch,
)


@dataclass(frozen=True)
class WizardState:
    session_id: str
    current_step: WizardStep = WizardStep.select_actions
    selection: SelectionState = SelectionState()
    created_at: float | None = None
    updated_at: float | None = None
