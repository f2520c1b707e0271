"""
Database infrastructure for the gig marketplace.
"""

from .database import (
    Base,
    create_db_engine,
    create_session_factory,
    create_all_tables,
    drop_all_tables,
    session_scope,
)
from .models import *

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "create_all_tables",
    "drop_all_tables",
    "session_scope",
    "UserModel",
    "BandModel",
    "GigProviderModel",
    "SharedProfileModel",
    "PROFILE_MODELS",
]
