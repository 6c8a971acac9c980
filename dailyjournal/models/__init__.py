"""
Imports every model so they are registered with SQLAlchemy when the
application context is created. Flask-Migrate relies on this to see all
tables.
"""
from .user import User
from .competency import Competency
from .entry import Entry, EntryCompetency

__all__ = ["User", "Competency", "Entry", "EntryCompetency"]
