from __future__ import annotations

import logging
import threading
import time
import uuid
from collections import OrderedDict

from account_setup.application.exceptions import SessionNotFound
from account_setup.application.ports.session_store import WizardSessionStorePort
from account_setup.domain.entities.wizard_state import WizardState


class MemoryWizardSessionStore(WizardSessionStorePort):
    def __init__(self, session_limit: int = 1000) -> None:
        self._states: OrderedDict[str, WizardState] = OrderedDict()
        self._session_limit = session_limit
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Guards _states and _locks
        self._logger = logging.getLogger(__name__)

    def get_lock(self, session_id: str) -> threading.Lock:
        with self._lock_lock:
            lock = self._locks.get(session_id)
        if lock is None:
            raise SessionNotFound(f"Unknown wizard session: {session_id}")
        return lock

    def create(self) -> WizardState:
        now = time.time()
        state = WizardState(session_id=uuid.uuid4().hex, created_at=now, updated_at=now)
        with self._lock_lock:
            self._states[state.session_id] = state
            self._locks[state.session_id] = threading.Lock()
            while len(self._states) > self._session_limit:
                evicted_id, _ = self._states.popitem(last=False)
                self._locks.pop(evicted_id, None)
                self._logger.info("Evicted wizard session", extra={"session_id": evicted_id, "reason": "session_limit"})
        self._logger.info("Wizard session created", extra={"session_id": state.session_id})
        return state

    def get(self, session_id: str) -> WizardState:
        state = self._states.get(session_id)
        if state is None:
            raise SessionNotFound(f"Unknown wizard session: {session_id}")
        return state

    def set(self, state: WizardState) -> None:
        with self._lock_lock:
            if state.session_id not in self._states:
                raise SessionNotFound(f"Unknown wizard session: {state.session_id}")
            self._states[state.session_id] = state

    def __len__(self) -> int:
        return len(self._states)
