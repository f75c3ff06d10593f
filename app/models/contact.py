# ============================================================================
# Contact Us Model
# ============================================================================
from sqlalchemy import Column, String, Text, Boolean, DateTime, Uuid
import uuid

from app.core.database import Base
from app.core.timeutils import utc_now


class ContactUs(Base):
    __tablename__ = "contact_us"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(300), default="")
    message = Column(Text, default="")
    resolved = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
