"""Authentication: remote auth helpers and the session manager."""

from hostelhub.auth.session import Hydration, SessionManager, SessionState

__all__ = ["Hydration", "SessionManager", "SessionState"]
