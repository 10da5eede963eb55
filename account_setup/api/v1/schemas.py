from pydantic import BaseModel, Field

from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.wizard_state import WizardStep


class ActionOptionSchema(BaseModel):
    id: str
    name: str
    parent_id: str


class ActionSchema(BaseModel):
    id: str
    name: str
    options: list[ActionOptionSchema] = Field(default_factory=list)


class ActionTreeResponseSchema(BaseModel):
    actions: list[ActionSchema]


class PolicyResponseSchema(BaseModel):
    policy: str


class ToggleOptionRequestSchema(BaseModel):
    parent_id: str


class WizardSessionSchema(BaseModel):
    session_id: str
    current_step: WizardStep
    selected_actions: list[str] = Field(default_factory=list)
    selected_options: list[str] = Field(default_factory=list)
    selection_count: int = 0
    action_statuses: dict[str, ActionStatus] = Field(default_factory=dict)
    can_go_next: bool
    can_go_back: bool
    changed: bool = False


class GoToStepRequestSchema(BaseModel):
    step: WizardStep
