#!/usr/bin/env python3
"""
Interactive local selection harness (no HTTP).

Usage:
  python3 scripts/select_local.py

What it does:
- Creates one wizard session through the same WizardSessionUseCase the API uses
- Lets you toggle actions/options and move between steps
- Prints the tree with tri-state markers after every command
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from account_setup.application.exceptions import NavigationBlocked
from account_setup.application.use_cases.wizard_session import WizardView
from account_setup.domain.entities.action_status import ActionStatus
from account_setup.domain.entities.wizard_state import WizardStep
from account_setup.wiring.dependencies import get_action_catalog, get_policy_store, get_wizard_session_use_case


MARKERS = {
    ActionStatus.unselected: "[ ]",
    ActionStatus.partial: "[-]",
    ActionStatus.selected: "[x]",
}


def _print_help() -> None:
    print("Commands:")
    print("  a <action_id>              -> toggle action")
    print("  o <option_id> <action_id>  -> toggle option")
    print("  next | back                -> move between steps")
    print("  step <step>                -> jump to a step (start, select-actions, link-aws-api, fetch)")
    print("  policy                     -> show IAM policy")
    print("  /new                       -> start a new session")
    print("  /quit                      -> exit")


def _print_view(view: WizardView) -> None:
    tree = get_action_catalog().get_tree()
    selected = set(view.state.selection.selected_options)
    print(f"\nstep: {view.state.current_step.value}  ({view.selection_count} options selected)")
    for action in tree.actions:
        print(f"{MARKERS[view.action_statuses[action.id]]} {action.id}  {action.name}")
        for option in action.options:
            mark = "[x]" if option.id in selected else "[ ]"
            print(f"    {mark} {option.id}  {option.name}")
    print(f"next={'enabled' if view.can_go_next else 'disabled'} back={'enabled' if view.can_go_back else 'disabled'}")


def main() -> None:
    use_case = get_wizard_session_use_case()
    view = use_case.create()
    print("\nLocal Selection Harness")
    print("-" * 60)
    print(f"session_id: {view.state.session_id}")
    _print_help()
    _print_view(view)

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue

        parts = line.split()
        cmd = parts[0].lower()
        session_id = view.state.session_id

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_help()
            continue
        if cmd == "/new":
            view = use_case.create()
            print(f"New session_id: {view.state.session_id}")
        elif cmd == "policy":
            print(get_policy_store().get_policy_text())
            continue
        elif cmd == "a" and len(parts) == 2:
            view = use_case.toggle_action(session_id, parts[1])
        elif cmd == "o" and len(parts) == 3:
            view = use_case.toggle_option(session_id, parts[1], parts[2])
        elif cmd == "step" and len(parts) == 2:
            try:
                view = use_case.go_to(session_id, WizardStep(parts[1]))
            except ValueError:
                print(f"Unknown step: {parts[1]}")
                continue
        elif cmd in ("next", "back"):
            try:
                view = use_case.next(session_id) if cmd == "next" else use_case.back(session_id)
            except NavigationBlocked as e:
                print(f"blocked: {e}")
                continue
        else:
            print("Unknown command, try /help")
            continue

        if not view.changed and cmd in ("a", "o"):
            print("(no change: unknown id)")
        _print_view(view)


if __name__ == "__main__":
    main()
