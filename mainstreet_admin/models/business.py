from sqlalchemy import Column, String, Integer, Text, Float, Boolean, DateTime
from mainstreet_admin.db.session import Base
from datetime import datetime, timezone

class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    category = Column(String)
    address = Column(String)
    phone = Column(String)
    website = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)
    image_url = Column(String)
    wait_time = Column(Integer)
    hours = Column(String)
    is_open = Column(Boolean, default=True)
    featured = Column(Boolean, default=False)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
