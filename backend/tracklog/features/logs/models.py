"""
Log entry model.

One row per GPS + elevation sample reported by a client.
Sessions are not stored; they are the rows sharing a session_id.
"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String

from tracklog.models.base import Base


def utcnow() -> datetime:
    """Naive UTC now, microsecond precision on every backend."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class LogEntry(Base):
    """
    Single location sample.

    id and timestamp are assigned at insert time; timestamp is the
    ordering key for every read within a session.
    """

    __tablename__ = "logs"

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True
    )

    # Grouping
    session_id = Column(String(255), nullable=False, index=True)
    user_id = Column(String(255), nullable=False)

    # Sample
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    elevation = Column(Float, nullable=False)  # meters

    # Timestamps
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self) -> str:
        return (
            f"<LogEntry id={self.id} session={self.session_id!r} "
            f"user={self.user_id!r} at={self.timestamp}>"
        )
