# mainstreet_admin/api/v1/endpoints/surveys.py

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from datetime import datetime
from mainstreet_admin.db.session import get_db
from mainstreet_admin.models.survey import Survey as SurveyModel, SurveyResponse as SurveyResponseModel
from mainstreet_admin.schemas.survey import (
    Question,
    Survey,
    SurveyAnalytics,
    SurveyCreate,
    SurveyResponse,
    SurveyResponseCreate,
    SurveyUpdate,
)
from mainstreet_admin.services import crud
from mainstreet_admin.services.crud import NotFoundError
from mainstreet_admin.services.survey_analytics import get_survey_analytics, render_analytics_csv
import logging

router = APIRouter()

def _number_questions(questions: List[Question]) -> List[Dict[str, Any]]:
    # Question ids are their 1-based position; responses are keyed the same way
    return [
        {**question.model_dump(exclude={"id"}), "id": position}
        for position, question in enumerate(questions, start=1)
    ]

@router.get("/", response_model=List[Survey])
def get_surveys(db: Session = Depends(get_db)):
    return crud.list_rows(db, SurveyModel, SurveyModel.created_at.desc(), SurveyModel.id.desc())

@router.get("/{survey_id}", response_model=Survey)
def get_survey(survey_id: int, db: Session = Depends(get_db)):
    try:
        return crud.get_row(db, SurveyModel, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

@router.post("/", response_model=Survey, status_code=status.HTTP_201_CREATED)
def create_survey(survey: SurveyCreate, db: Session = Depends(get_db)):
    survey_data = survey.model_dump(exclude={"questions"})
    survey_data["questions"] = _number_questions(survey.questions)
    logging.info(f"Creating survey '{survey.title}' with {len(survey.questions)} questions")
    return crud.create_row(db, SurveyModel, survey_data)

@router.put("/{survey_id}", response_model=Survey)
def update_survey(survey_id: int, survey: SurveyUpdate, db: Session = Depends(get_db)):
    survey_data = survey.model_dump(exclude_unset=True, exclude={"questions"})
    if survey.questions is not None:
        # Existing responses keep their positional keys
        survey_data["questions"] = _number_questions(survey.questions)
    try:
        return crud.update_row(db, SurveyModel, survey_id, survey_data)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

@router.delete("/{survey_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_survey(survey_id: int, db: Session = Depends(get_db)):
    try:
        crud.delete_row(db, SurveyModel, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

@router.get("/{survey_id}/responses", response_model=List[SurveyResponse])
def get_survey_responses(survey_id: int, db: Session = Depends(get_db)):
    try:
        crud.get_row(db, SurveyModel, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

    return db.query(SurveyResponseModel).\
        filter(SurveyResponseModel.survey_id == survey_id).\
        order_by(SurveyResponseModel.created_at.desc(), SurveyResponseModel.id.desc()).\
        all()

@router.post("/{survey_id}/responses", response_model=SurveyResponse, status_code=status.HTTP_201_CREATED)
def submit_survey_response(survey_id: int, survey_response: SurveyResponseCreate, db: Session = Depends(get_db)):
    try:
        survey = crud.get_row(db, SurveyModel, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

    answers = {
        question_id: ", ".join(answer) if isinstance(answer, list) else str(answer)
        for question_id, answer in survey_response.answers.items()
    }
    response = SurveyResponseModel(survey_id=survey.id, user_id=survey_response.user_id, answers=answers)
    db.add(response)
    survey.response_count = (survey.response_count or 0) + 1
    db.commit()
    db.refresh(response)
    logging.info(f"Stored response {response.id} for survey {survey_id}")
    return response

@router.get("/{survey_id}/analytics", response_model=SurveyAnalytics)
def get_analytics(survey_id: int, db: Session = Depends(get_db)):
    try:
        return get_survey_analytics(db, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

@router.get("/{survey_id}/analytics/export")
def export_analytics(survey_id: int, db: Session = Depends(get_db)):
    try:
        analytics = get_survey_analytics(db, survey_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Survey not found")

    filename = f"survey-analytics-{survey_id}-{datetime.now().strftime('%Y%m%d%H%M%S')}.csv"
    return Response(
        content=render_analytics_csv(analytics),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
