from sqlalchemy import Column, String, Integer, Text, DateTime
from mainstreet_admin.db.session import Base
from datetime import datetime, timezone

EVENT_STATUSES = ("upcoming", "ongoing", "completed")

class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    date = Column(DateTime, nullable=False)
    time = Column(String, nullable=False)
    location = Column(String, nullable=False)
    image_url = Column(String)
    organizer_id = Column(String)
    rsvp_count = Column(Integer, default=0, nullable=False)
    status = Column(String, default="upcoming", nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
