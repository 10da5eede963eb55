"""
Tests for action/option selection: cascades, tri-state and no-op handling.
"""

from __future__ import annotations

from account_setup.application.use_cases.selection import SelectionUseCase
from account_setup.application.use_cases.selection_tree import SelectionTree
from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.action_tree import Action, ActionOption, ActionTree
from account_setup.domain.entities.selection_state import SelectionState
from account_setup.infrastructure.catalog.action_catalog_data import ACTION_TREE


START_STOP = "start-stop-resources"
START_STOP_OPTIONS = ("ec2", "rds", "light-sail", "amazon-neptune")


def _assert_consistent(tree: SelectionTree) -> None:
    """An action is selected exactly when all of its (non-empty) options are."""
    for action in tree.tree.actions:
        fully_selected = bool(action.options) and all(o in tree.selected_options for o in action.option_ids)
        assert (action.id in tree.selected_actions) == fully_selected, action.id
        assert not (tree.is_action_indeterminate(action.id) and action.id in tree.selected_actions)


def _tree_with_empty_action() -> ActionTree:
    return ActionTree(
        actions=(
            Action(id="empty", name="Empty"),
            Action(id="single", name="Single", options=(ActionOption(id="only", name="Only", parent_id="single"),)),
        )
    )


def test_select_options_one_by_one_selects_parent():
    """Selecting every option of an action individually selects the action on the last one."""
    tree = SelectionTree(ACTION_TREE)

    assert tree.toggle_option("ec2", START_STOP) is True
    assert tree.selected_options == ("ec2",)
    assert tree.selected_actions == ()

    for option_id in ("rds", "light-sail"):
        tree.toggle_option(option_id, START_STOP)
        assert START_STOP not in tree.selected_actions
        _assert_consistent(tree)

    tree.toggle_option("amazon-neptune", START_STOP)
    assert tree.selected_actions == (START_STOP,)
    assert set(tree.selected_options) == set(START_STOP_OPTIONS)

    # Deselecting one option leaves the action partial
    tree.toggle_option("ec2", START_STOP)
    assert tree.selected_actions == ()
    assert set(tree.selected_options) == {"rds", "light-sail", "amazon-neptune"}
    assert tree.is_action_indeterminate(START_STOP) is True
    assert tree.action_status(START_STOP) == ActionStatus.partial
    _assert_consistent(tree)


def test_toggle_action_cascades_deselect_from_fully_selected():
    """Deselecting a fully selected action clears all of its options."""
    tree = SelectionTree(ACTION_TREE)
    for option_id in START_STOP_OPTIONS:
        tree.toggle_option(option_id, START_STOP)
    assert tree.selected_actions == (START_STOP,)

    assert tree.toggle_action(START_STOP) is True
    assert tree.selected_actions == ()
    assert tree.selected_options == ()


def test_toggle_action_cascades_select_without_duplicates():
    """Selecting an action adds every option once, keeping options already selected."""
    tree = SelectionTree(ACTION_TREE)
    tree.toggle_option("rds", START_STOP)
    tree.toggle_option("terminate-ec2", "resource-cleanup")

    tree.toggle_action(START_STOP)

    assert START_STOP in tree.selected_actions
    assert set(START_STOP_OPTIONS) <= set(tree.selected_options)
    assert len(tree.selected_options) == len(set(tree.selected_options)) == 5
    assert "terminate-ec2" in tree.selected_options
    _assert_consistent(tree)


def test_toggle_action_on_partial_action_selects_all():
    """A partial action is not in selected_actions, so toggling it selects everything."""
    tree = SelectionTree(ACTION_TREE)
    tree.toggle_option("redshift-clusters", "pause-resume-resource")
    assert tree.is_action_indeterminate("pause-resume-resource")

    tree.toggle_action("pause-resume-resource")

    assert tree.action_status("pause-resume-resource") == ActionStatus.selected
    assert tree.is_action_indeterminate("pause-resume-resource") is False


def test_double_toggle_action_restores_state():
    """Toggling the same action twice returns its options to where they started."""
    tree = SelectionTree(ACTION_TREE)
    tree.toggle_option("delete-rds", "resource-cleanup")
    before = tree.state

    tree.toggle_action(START_STOP)
    tree.toggle_action(START_STOP)

    assert tree.state == before


def test_deselect_only_selected_option_is_not_indeterminate():
    """Removing the last selected option leaves the action unselected, not partial."""
    tree = SelectionTree(ACTION_TREE)
    tree.toggle_option("aurora-serverless-v2", "pause-resume-resource")
    tree.toggle_option("aurora-serverless-v2", "pause-resume-resource")

    assert tree.is_action_indeterminate("pause-resume-resource") is False
    assert tree.action_status("pause-resume-resource") == ActionStatus.unselected
    assert tree.selection_count() == 0


def test_deselect_option_always_clears_parent():
    """Deselecting one option of a selected action clears the action while siblings stay selected."""
    selection = SelectionUseCase(ACTION_TREE)
    state = selection.toggle_action(SelectionState(), "pause-resume-resource").updated_state

    result = selection.toggle_option(state, "redshift-clusters", "pause-resume-resource")

    assert result.changed is True
    assert result.updated_state.selected_actions == ()
    assert result.updated_state.selected_options == ("aurora-serverless-v2",)
    assert selection.is_action_indeterminate(result.updated_state, "pause-resume-resource") is True


def test_unknown_option_is_ignored():
    tree = SelectionTree(ACTION_TREE)

    assert tree.toggle_option("nonexistent", START_STOP) is False
    assert tree.state == SelectionState()


def test_option_with_wrong_parent_is_ignored():
    """An option toggled under an action that does not own it changes nothing."""
    tree = SelectionTree(ACTION_TREE)

    assert tree.toggle_option("ec2", "resource-cleanup") is False
    assert tree.toggle_option("ec2", "no-such-action") is False
    assert tree.state == SelectionState()


def test_unknown_action_is_ignored():
    tree = SelectionTree(ACTION_TREE)
    tree.toggle_option("ec2", START_STOP)
    before = tree.state

    assert tree.toggle_action("no-such-action") is False
    assert tree.state == before
    assert tree.is_action_indeterminate("no-such-action") is False
    assert tree.action_status("no-such-action") == ActionStatus.unselected


def test_empty_action_never_selects():
    """An action without options is never selected or indeterminate."""
    tree = SelectionTree(_tree_with_empty_action())

    assert tree.toggle_action("empty") is False
    assert tree.selected_actions == ()
    assert tree.is_action_indeterminate("empty") is False


def test_single_option_action_tracks_its_option():
    tree = SelectionTree(_tree_with_empty_action())

    tree.toggle_option("only", "single")
    assert tree.selected_actions == ("single",)

    tree.toggle_option("only", "single")
    assert tree.selected_actions == ()
    assert tree.is_action_indeterminate("single") is False


def test_reducer_does_not_mutate_input_state():
    selection = SelectionUseCase(ACTION_TREE)
    state = SelectionState()

    result = selection.toggle_action(state, START_STOP)

    assert state == SelectionState()
    assert result.updated_state.selected_actions == (START_STOP,)
    assert selection.selection_count(result.updated_state) == 4


def test_consistency_holds_across_mixed_toggles():
    """Interleaved action and option toggles keep actions in step with their options."""
    tree = SelectionTree(ACTION_TREE)
    operations = [
        ("action", "resource-cleanup", None),
        ("option", "delete-ebs-volume", "resource-cleanup"),
        ("option", "ec2", START_STOP),
        ("action", START_STOP, None),
        ("option", "delete-ebs-volume", "resource-cleanup"),
        ("option", "rds", START_STOP),
        ("action", "pause-resume-resource", None),
        ("option", "aurora-serverless-v2", "pause-resume-resource"),
        ("action", "resource-cleanup", None),
        ("action", START_STOP, None),
    ]
    for kind, target, parent in operations:
        if kind == "action":
            tree.toggle_action(target)
        else:
            tree.toggle_option(target, parent)
        _assert_consistent(tree)
