from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from account_setup.domain.entities.action_tree import Action, ActionOption


class ActionOptionDTO(BaseModel):
    id: str = Field(min_length=1)
    name: str
    parent_id: str | None = None


class ActionDTO(BaseModel):
    id: str = Field(min_length=1)
    name: str
    options: list[ActionOptionDTO] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_parents(self) -> "ActionDTO":
        for option in self.options:
            if option.parent_id is not None and option.parent_id != self.id:
                raise ValueError(f"option {option.id} declares parent {option.parent_id}, expected {self.id}")
        return self

    def to_entity(self) -> Action:
        return Action(
            id=self.id,
            name=self.name,
            options=tuple(ActionOption(id=o.id, name=o.name, parent_id=self.id) for o in self.options),
        )


class ActionCatalogDTO(BaseModel):
    actions: list[ActionDTO] = Field(default_factory=list)
