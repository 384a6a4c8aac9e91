from sqlalchemy import Column, String, Integer, Text, Boolean, DateTime, JSON, ForeignKey
from mainstreet_admin.db.session import Base
from datetime import datetime, timezone

QUESTION_TYPES = ("text", "textarea", "rating", "multiple_choice", "checkbox", "yes_no")

class Survey(Base):
    __tablename__ = "surveys"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    type = Column(String)  # satisfaction, feedback, rating
    # Ordered list of {"id", "text", "type", "options"}; "id" is the 1-based position
    questions = Column(JSON, nullable=False, default=list)
    reward_points = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="SET NULL"), nullable=True)
    response_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))


class SurveyResponse(Base):
    __tablename__ = "survey_responses"

    id = Column(Integer, primary_key=True, index=True)
    survey_id = Column(Integer, ForeignKey("surveys.id", ondelete="CASCADE"), index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    # Keyed by stringified 1-based question position at the time of response
    answers = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
