from fastapi import APIRouter, Depends, HTTPException

from account_setup.api.v1.schemas import (
    ActionOptionSchema, ActionSchema, ActionTreeResponseSchema,
    GoToStepRequestSchema, PolicyResponseSchema, ToggleOptionRequestSchema, WizardSessionSchema,
)
from account_setup.wiring.dependencies import get_action_catalog, get_policy_store, get_wizard_session_use_case
from account_setup.application.exceptions import NavigationBlocked, SessionNotFound
from account_setup.application.ports.action_catalog import ActionCatalogPort
from account_setup.application.ports.policy import PolicyPort
from account_setup.application.use_cases.wizard_session import WizardSessionUseCase, WizardView

router = APIRouter()


def _to_schema(view: WizardView) -> WizardSessionSchema:
    selection = view.state.selection
    return WizardSessionSchema(
        session_id=view.state.session_id,
        current_step=view.state.current_step,
        selected_actions=list(selection.selected_actions),
        selected_options=list(selection.selected_options),
        selection_count=view.selection_count,
        action_statuses=view.action_statuses,
        can_go_next=view.can_go_next,
        can_go_back=view.can_go_back,
        changed=view.changed,
    )


@router.get("/actions", response_model=ActionTreeResponseSchema)
def list_actions(catalog: ActionCatalogPort = Depends(get_action_catalog)):
    tree = catalog.get_tree()
    return ActionTreeResponseSchema(
        actions=[
            ActionSchema(
                id=a.id,
                name=a.name,
                options=[ActionOptionSchema(id=o.id, name=o.name, parent_id=o.parent_id) for o in a.options],
            )
            for a in tree.actions
        ]
    )


@router.get("/policy", response_model=PolicyResponseSchema)
def get_policy(policy: PolicyPort = Depends(get_policy_store)):
    return PolicyResponseSchema(policy=policy.get_policy_text())


@router.post("/wizard/sessions", response_model=WizardSessionSchema, status_code=201)
def create_session(uc: WizardSessionUseCase = Depends(get_wizard_session_use_case)):
    return _to_schema(uc.create())


@router.get("/wizard/sessions/{session_id}", response_model=WizardSessionSchema)
def get_session(session_id: str, uc: WizardSessionUseCase = Depends(get_wizard_session_use_case)):
    try:
        return _to_schema(uc.get(session_id))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/wizard/sessions/{session_id}/actions/{action_id}/toggle", response_model=WizardSessionSchema)
def toggle_action(
    session_id: str,
    action_id: str,
    uc: WizardSessionUseCase = Depends(get_wizard_session_use_case),
):
    try:
        return _to_schema(uc.toggle_action(session_id, action_id))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/wizard/sessions/{session_id}/options/{option_id}/toggle", response_model=WizardSessionSchema)
def toggle_option(
    session_id: str,
    option_id: str,
    req: ToggleOptionRequestSchema,
    uc: WizardSessionUseCase = Depends(get_wizard_session_use_case),
):
    try:
        return _to_schema(uc.toggle_option(session_id, option_id, req.parent_id))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/wizard/sessions/{session_id}/next", response_model=WizardSessionSchema)
def next_step(session_id: str, uc: WizardSessionUseCase = Depends(get_wizard_session_use_case)):
    try:
        return _to_schema(uc.next(session_id))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NavigationBlocked as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/wizard/sessions/{session_id}/back", response_model=WizardSessionSchema)
def previous_step(session_id: str, uc: WizardSessionUseCase = Depends(get_wizard_session_use_case)):
    try:
        return _to_schema(uc.back(session_id))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NavigationBlocked as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/wizard/sessions/{session_id}/step", response_model=WizardSessionSchema)
def go_to_step(
    session_id: str,
    req: GoToStepRequestSchema,
    uc: WizardSessionUseCase = Depends(get_wizard_session_use_case),
):
    try:
        return _to_schema(uc.go_to(session_id, req.step))
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
