import threading
from abc import ABC, abstractmethod

from account_setup.domain.entities.wizard_state import WizardState


class WizardSessionStorePort(ABC):
    @abstractmethod
    def create(self) -> WizardState:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> WizardState:
        """
        Get the wizard state for a session.
        Raises SessionNotFound if the session does not exist (or was evicted).
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, state: WizardState) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_lock(self, session_id: str) -> threading.Lock:
        """
        Get the lock guarding one session.
        Hold it across get/set so concurrent updates to a session are not lost.
        Raises SessionNotFound if the session does not exist (or was evicted).
        """
        raise NotImplementedError
