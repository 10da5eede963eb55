from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ActionOption:
    id: str
    name: str
    parent_id: str


@dataclass(frozen=True)
class Action:
    id: str
    name: str
    options: tuple[ActionOption, ...] = ()

    @property
    def option_ids(self) -> tuple[str, ...]:
        return tuple(option.id for option in self.options)


@dataclass(frozen=True)
class ActionTree:
    """Immutable two-level tree of actions and their options."""

    actions: tuple[Action, ...] = ()
    _actions_by_id: dict[str, Action] = field(init=False, repr=False, compare=False)
    _options_by_id: dict[str, ActionOption] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        actions_by_id: dict[str, Action] = {}
        options_by_id: dict[str, ActionOption] = {}
        for action in self.actions:
            if action.id in actions_by_id:
                raise ValueError(f"Duplicate action id: {action.id}")
            actions_by_id[action.id] = action
            for option in action.options:
                if option.parent_id != action.id:
                    raise ValueError(
                        f"Option {option.id} declares parent {option.parent_id} but belongs to {action.id}"
                    )
                if option.id in options_by_id:
                    raise ValueError(f"Duplicate option id: {option.id}")
                options_by_id[option.id] = option
        # frozen dataclass: lookups are derived once at construction
        object.__setattr__(self, "_actions_by_id", actions_by_id)
        object.__setattr__(self, "_options_by_id", options_by_id)

    def get_action(self, action_id: str) -> Action | None:
        return self._actions_by_id.get(action_id)

    def get_option(self, option_id: str) -> ActionOption | None:
        return self._options_by_id.get(option_id)

    @property
    def action_ids(self) -> tuple[str, ...]:
        return tuple(action.id for action in self.actions)
