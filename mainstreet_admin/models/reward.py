from sqlalchemy import Column, String, Integer, Text, Boolean, DateTime, ForeignKey
from mainstreet_admin.db.session import Base
from datetime import datetime, timezone

class RewardItem(Base):
    __tablename__ = "reward_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    point_threshold = Column(Integer, nullable=False)
    expiration_date = Column(DateTime)
    redeemed_count = Column(Integer, default=0, nullable=False)
    active = Column(Boolean, default=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))


class RewardRedemption(Base):
    __tablename__ = "reward_redemptions"

    id = Column(Integer, primary_key=True, index=True)
    reward_id = Column(Integer, ForeignKey("reward_items.id", ondelete="CASCADE"))
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
