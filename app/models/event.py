# ============================================================================
# Event Model
# ============================================================================
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum, Uuid
import uuid
import enum

from app.core.database import Base
from app.core.timeutils import utc_now


class EventType(str, enum.Enum):
    ALUMNI = "alumni"
    COLLEGE = "college"
    CLUB = "club"
    OTHERS = "others"


class Event(Base):
    __tablename__ = "events"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    date_time = Column(DateTime, nullable=False, index=True)  # start
    end_date_time = Column(DateTime, nullable=True)
    venue = Column(String(300), nullable=False, default="")
    description = Column(Text, default="")
    type = Column(Enum(EventType), nullable=False)
    posted_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    def __repr__(self):
        return f"<Event {self.name} @ {self.date_time}>"
