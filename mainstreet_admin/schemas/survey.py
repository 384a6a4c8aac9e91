# mainstreet_admin/schemas/survey.py

from pydantic import Field, field_validator
from typing import Any, Optional, List, Dict, Literal, Union
from datetime import datetime
from mainstreet_admin.schemas.base import CamelModel, reject_null

QuestionType = Literal["text", "textarea", "rating", "multiple_choice", "checkbox", "yes_no"]

class Question(CamelModel):
    id: Optional[int] = None
    text: str = Field(..., min_length=1)
    type: QuestionType
    options: Optional[List[str]] = None

class SurveyBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: Optional[str] = None
    reward_points: int = Field(0, ge=0)
    is_active: bool = True
    business_id: Optional[int] = None

class SurveyCreate(SurveyBase):
    questions: List[Question] = Field(..., min_length=1)

class SurveyUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    type: Optional[str] = None
    reward_points: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    business_id: Optional[int] = None
    questions: Optional[List[Question]] = Field(None, min_length=1)

    @field_validator("title", "reward_points", "is_active", "questions", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class Survey(SurveyBase):
    id: int
    questions: List[Question]
    response_count: int = 0
    created_at: Optional[datetime] = None

class SurveyResponseCreate(CamelModel):
    # Checkbox answers may be sent as a list; they are stored comma-joined.
    # Numeric answers (ratings) are stored as their string form.
    answers: Dict[str, Union[str, int, float, List[str]]]
    user_id: Optional[int] = None

class SurveyResponse(CamelModel):
    id: int
    survey_id: int
    user_id: Optional[int] = None
    answers: Dict[str, Any]
    created_at: Optional[datetime] = None

class AnswerCount(CamelModel):
    answer: str
    count: int

class QuestionAnalytics(CamelModel):
    question_id: int
    question_text: str
    question_type: str
    options: List[str] = []
    responses: List[AnswerCount] = []
    text_responses: Optional[List[str]] = None

class SurveyAnalytics(CamelModel):
    survey: Survey
    total_responses: int
    question_analytics: List[QuestionAnalytics]
