"""HostelHub: session and data-access core of the student hostel marketplace."""

from hostelhub.main import AppContext, create_app_context

__version__ = "0.1.0"

__all__ = ["AppContext", "create_app_context"]
