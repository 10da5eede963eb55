from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from account_setup.application.dto.action_catalog import ActionCatalogDTO
from account_setup.application.exceptions import ActionCatalogError
from account_setup.application.ports.action_catalog import ActionCatalogPort
from account_setup.domain.entities.action_tree import ActionTree
from account_setup.infrastructure.catalog.action_catalog_data import ACTION_TREE


logger = logging.getLogger(__name__)


class ActionCatalogStore(ActionCatalogPort):
    def __init__(self, tree: ActionTree | None = None) -> None:
        self._tree = tree or ACTION_TREE

    @classmethod
    def from_file(cls, path: str | Path) -> "ActionCatalogStore":
        """
        Load a catalog from a JSON file.
        Accepts either a list of actions or {"actions": [...]}.
        """
        file_path = Path(path)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ActionCatalogError(f"Cannot read action catalog {file_path}: {e}") from e

        if isinstance(payload, list):
            payload = {"actions": payload}

        try:
            dto = ActionCatalogDTO.model_validate(payload)
            tree = ActionTree(actions=tuple(action.to_entity() for action in dto.actions))
        except (ValidationError, ValueError) as e:
            raise ActionCatalogError(f"Invalid action catalog {file_path}: {e}") from e

        logger.info("Loaded action catalog from %s (%d actions)", file_path, len(tree.actions))
        return cls(tree=tree)

    def get_tree(self) -> ActionTree:
        return self._tree
