# mainstreet_admin/services/survey_analytics.py

import csv
import io
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from mainstreet_admin.models.survey import Survey, SurveyResponse
from mainstreet_admin.schemas.survey import (
    AnswerCount,
    QuestionAnalytics,
    Survey as SurveySchema,
    SurveyAnalytics,
)
from mainstreet_admin.services.crud import get_row

logger = logging.getLogger(__name__)

TEXT_QUESTION_TYPES = ("text", "textarea")
MAX_TEXT_RESPONSES = 10
CSV_SAMPLE_TEXT_RESPONSES = 5

QUESTION_TYPE_LABELS = {
    "multiple_choice": "Multiple Choice",
    "checkbox": "Checkbox (Multi-select)",
    "rating": "Rating",
    "yes_no": "Yes/No",
    "text": "Text",
    "textarea": "Long Text",
}


def question_type_label(question_type: str) -> str:
    return QUESTION_TYPE_LABELS.get(question_type, question_type.capitalize())


def _split_checkbox(value: Any) -> List[str]:
    """
    Split a stored checkbox answer into its selected options.

    Args:
        value: Either a comma-joined string ("A, B") or a list of options.

    Returns:
        List[str]: Trimmed, non-empty option tokens.
    """
    tokens = value if isinstance(value, list) else str(value).split(",")
    return [str(token).strip() for token in tokens if str(token).strip()]


def aggregate_answers(question_type: str, answers: Iterable[Any]) -> Tuple[List[AnswerCount], Optional[List[str]]]:
    """
    Tally the answers given to a single question.

    Missing or empty answers are skipped. Free-text questions are not counted;
    their first raw answers are collected instead.

    Args:
        question_type (str): The question's type.
        answers (Iterable[Any]): One stored answer per response, None when absent.

    Returns:
        Tuple[List[AnswerCount], Optional[List[str]]]: Counts sorted by count
        descending (ties keep first-seen order) and, for text questions, up to
        MAX_TEXT_RESPONSES raw answers.
    """
    if question_type in TEXT_QUESTION_TYPES:
        text_responses = []
        for answer in answers:
            if answer is None or str(answer).strip() == "":
                continue
            text_responses.append(str(answer))
            if len(text_responses) >= MAX_TEXT_RESPONSES:
                break
        return [], text_responses

    tally: Dict[str, int] = {}
    for answer in answers:
        if answer is None or answer == "" or answer == []:
            continue
        if question_type == "checkbox":
            tokens = _split_checkbox(answer)
        elif isinstance(answer, list):
            tokens = [", ".join(str(item) for item in answer)]
        else:
            tokens = [str(answer)]
        for token in tokens:
            tally[token] = tally.get(token, 0) + 1

    # sorted() is stable, so equal counts stay in insertion order
    counts = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return [AnswerCount(answer=answer, count=count) for answer, count in counts], None


def build_survey_analytics(survey: Survey, responses: List[SurveyResponse]) -> SurveyAnalytics:
    """
    Build per-question analytics for a survey from its stored responses.

    Answers are looked up by the question's 1-based position in the survey,
    which is how they were keyed when the response was recorded.

    Args:
        survey (Survey): The survey row.
        responses (List[SurveyResponse]): Every response row for the survey.

    Returns:
        SurveyAnalytics: The survey, its response total and one entry per question.
    """
    question_analytics = []
    for position, question in enumerate(survey.questions or [], start=1):
        key = str(position)
        question_type = question.get("type", "text")
        counts, text_responses = aggregate_answers(
            question_type,
            ((response.answers or {}).get(key) for response in responses),
        )
        question_analytics.append(QuestionAnalytics(
            question_id=position,
            question_text=question.get("text", ""),
            question_type=question_type,
            options=question.get("options") or [],
            responses=counts,
            text_responses=text_responses,
        ))

    return SurveyAnalytics(
        survey=SurveySchema.model_validate(survey),
        total_responses=len(responses),
        question_analytics=question_analytics,
    )


def get_survey_analytics(db: Session, survey_id: int) -> SurveyAnalytics:
    """
    Load a survey and its responses and aggregate them.

    Raises:
        NotFoundError: If no survey has the given id.
    """
    survey = get_row(db, Survey, survey_id)
    responses = db.query(SurveyResponse).\
        filter(SurveyResponse.survey_id == survey_id).\
        order_by(SurveyResponse.created_at, SurveyResponse.id).\
        all()
    logger.info(f"Aggregating {len(responses)} responses for survey {survey_id}")
    return build_survey_analytics(survey, responses)


def render_analytics_csv(analytics: SurveyAnalytics) -> str:
    survey = analytics.survey
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(["Survey Analytics Report"])
    writer.writerow(["Survey", survey.title])
    writer.writerow(["Description", survey.description or "N/A"])
    writer.writerow(["Total Responses", analytics.total_responses])
    writer.writerow(["Questions", len(analytics.question_analytics)])
    writer.writerow(["Points Reward", survey.reward_points])
    writer.writerow(["Status", "Active" if survey.is_active else "Inactive"])

    for question in analytics.question_analytics:
        writer.writerow([])
        writer.writerow([f"Question {question.question_id}", question.question_text])
        writer.writerow(["Type", question_type_label(question.question_type)])

        if question.question_type in TEXT_QUESTION_TYPES:
            text_responses = question.text_responses or []
            writer.writerow(["Total Text Responses", len(text_responses)])
            if text_responses:
                writer.writerow(["Sample Responses"])
                for index, text in enumerate(text_responses[:CSV_SAMPLE_TEXT_RESPONSES], start=1):
                    writer.writerow([index, text])
        elif question.responses:
            total = sum(item.count for item in question.responses)
            writer.writerow(["Answer", "Count", "Percentage"])
            for item in question.responses:
                writer.writerow([item.answer, item.count, f"{item.count / total * 100:.1f}%"])

    return buffer.getvalue()
