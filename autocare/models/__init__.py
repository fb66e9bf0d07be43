"""
SQLAlchemy database models.
"""
from autocare.models.record import StoredRecord

__all__ = ["StoredRecord"]
