from functools import lru_cache

from account_setup.core.config import settings
from account_setup.application.ports.action_catalog import ActionCatalogPort
from account_setup.application.ports.policy import PolicyPort
from account_setup.application.use_cases.wizard_session import WizardSessionUseCase
from account_setup.infrastructure.catalog.action_catalog_store import ActionCatalogStore
from account_setup.infrastructure.catalog.policy_store import StaticPolicyStore
from account_setup.infrastructure.store.memory_store import MemoryWizardSessionStore


_session_store: MemoryWizardSessionStore | None = None


@lru_cache
def get_action_catalog() -> ActionCatalogPort:
    if settings.ACTION_CATALOG_PATH:
        return ActionCatalogStore.from_file(settings.ACTION_CATALOG_PATH)
    return ActionCatalogStore()


def get_policy_store() -> PolicyPort:
    return StaticPolicyStore()


def get_session_store() -> MemoryWizardSessionStore:
    global _session_store
    if _session_store is None:
        _session_store = MemoryWizardSessionStore(session_limit=settings.SESSION_LIMIT)
    return _session_store


def get_wizard_session_use_case() -> WizardSessionUseCase:
    return WizardSessionUseCase(
        store=get_session_store(),
        catalog=get_action_catalog(),
    )
