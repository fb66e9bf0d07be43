"""
Stored record model for database.
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from autocare.database import Base


class StoredRecord(Base):
    """
    One JSON document keyed by record kind and owner id.

    Payloads are kept as raw text so that a corrupt document can be
    detected and skipped at read time instead of failing the query.
    """

    __tablename__ = "records"

    kind = Column(String, primary_key=True)
    owner_id = Column(String, primary_key=True, index=True)
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
