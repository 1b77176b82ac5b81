"""SQLAlchemy ORM models."""
from sqlalchemy import Column, Integer, Text

from fieldday.infrastructure.database.base import Base


class LogEntry(Base):
    __tablename__ = "logs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    callsign = Column(Text)
    time = Column(Text)
    frequency = Column(Text)
    mode = Column(Text)
    notes = Column(Text)
