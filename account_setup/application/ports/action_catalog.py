from __future__ import annotations

from abc import ABC, abstractmethod

from account_setup.domain.entities.action_tree import ActionTree


class ActionCatalogPort(ABC):
    @abstractmethod
    def get_tree(self) -> ActionTree:
        """Get the action tree. Loaded once; the same tree is returned on every call."""
        raise NotImplementedError
