class ReferenceNotFound(LookupError):
    """Raised when an operation names an action or option absent from the tree."""
    pass


class ActionCatalogError(RuntimeError):
    """Raised when the action catalog cannot be loaded (missing file, bad JSON or bad shape)."""
    pass


class SessionNotFound(LookupError):
    """Raised when a wizard session id is unknown to the store."""
    pass


class NavigationBlocked(RuntimeError):
    """Raised when the wizard cannot move in the requested direction from its current step."""
    pass
