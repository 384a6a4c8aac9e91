# tests/test_dashboard.py

from datetime import datetime, timedelta
import pytest
from mainstreet_admin.models.business import Business
from mainstreet_admin.models.checkin import Checkin
from mainstreet_admin.models.event import Event
from mainstreet_admin.models.reward import RewardItem, RewardRedemption
from mainstreet_admin.models.survey import Survey, SurveyResponse


@pytest.fixture
def activity(db):
    now = datetime(2025, 3, 10, 12, 0, 0)
    cafe = Business(name="Cafe")
    books = Business(name="Bookshop")
    market = Event(name="Farmers Market", date=datetime(2025, 3, 1, 9), time="9 AM", location="Flagler Park",
                   rsvp_count=12, status="upcoming", created_at=now - timedelta(days=3))
    concert = Event(name="Concert", date=datetime(2025, 3, 1, 19), time="7 PM", location="Riverwalk",
                    rsvp_count=30, status="completed", created_at=now - timedelta(days=2))
    parade = Event(name="Parade", date=datetime(2025, 4, 5, 10), time="10 AM", location="Main St",
                   rsvp_count=5, status="upcoming", created_at=now - timedelta(days=1))
    db.add_all([cafe, books, market, concert, parade])
    db.commit()

    reward = RewardItem(name="Free Latte", description="Any size", point_threshold=50, created_at=now)
    survey = Survey(title="Visitor Survey", questions=[{"id": 1, "text": "Rate us", "type": "rating"}],
                    created_at=now - timedelta(hours=5))
    db.add_all([reward, survey])
    db.commit()

    db.add_all([
        Checkin(business_id=cafe.id, event_id=market.id),
        Checkin(business_id=cafe.id, event_id=market.id),
        Checkin(business_id=cafe.id, event_id=concert.id),
        Checkin(business_id=books.id),
        RewardRedemption(reward_id=reward.id, created_at=datetime(2025, 3, 2, 8)),
        RewardRedemption(reward_id=reward.id, created_at=datetime(2025, 3, 2, 18)),
        RewardRedemption(reward_id=reward.id, created_at=datetime(2025, 3, 4, 12)),
        SurveyResponse(survey_id=survey.id, answers={"1": "5"}),
        SurveyResponse(survey_id=survey.id, answers={"1": "4"}),
    ])
    db.commit()


def test_dashboard_stats(client, admin_headers, activity):
    response = client.get("/api/v1/dashboard/stats", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {
        "totalCheckins": 4,
        "activeEvents": 2,
        "surveyResponses": 2,
        "rewardsRedeemed": 3,
    }


def test_dashboard_stats_empty(client, admin_headers):
    response = client.get("/api/v1/dashboard/stats", headers=admin_headers)
    assert response.json() == {"totalCheckins": 0, "activeEvents": 0, "surveyResponses": 0, "rewardsRedeemed": 0}


def test_recent_activity(client, admin_headers, activity):
    response = client.get("/api/v1/dashboard/recent-activity", headers=admin_headers)
    assert response.status_code == 200
    items = response.json()
    assert [item["type"] for item in items] == ["reward", "survey", "event", "event", "event"]
    assert items[0]["description"] == "New reward added: Free Latte - 50 points"
    assert items[0]["icon"] == "gift"
    assert items[1]["description"] == "New survey created: Visitor Survey"
    assert items[2]["description"] == "New event created: Parade"


def test_checkins_by_business(client, admin_headers, activity):
    response = client.get("/api/v1/analytics/checkins-by-business", headers=admin_headers)
    assert response.json() == [
        {"businessName": "Cafe", "checkins": 3},
        {"businessName": "Bookshop", "checkins": 1},
    ]


def test_checkins_by_event(client, admin_headers, activity):
    response = client.get("/api/v1/analytics/checkins-by-event", headers=admin_headers)
    assert response.json() == [
        {"eventName": "Farmers Market", "checkins": 2},
        {"eventName": "Concert", "checkins": 1},
    ]


def test_event_rsvp_trends(client, admin_headers, activity):
    response = client.get("/api/v1/analytics/event-rsvp-trends", headers=admin_headers)
    assert response.json() == [
        {"date": "2025-03-01", "rsvps": 42},
        {"date": "2025-04-05", "rsvps": 5},
    ]


def test_reward_redemption_trends(client, admin_headers, activity):
    response = client.get("/api/v1/analytics/reward-redemption-trends", headers=admin_headers)
    assert response.json() == [
        {"date": "2025-03-02", "redemptions": 2},
        {"date": "2025-03-04", "redemptions": 1},
    ]


def test_survey_response_distribution(client, admin_headers, activity):
    response = client.get("/api/v1/analytics/survey-response-distribution", headers=admin_headers)
    assert response.json() == [{"surveyTitle": "Visitor Survey", "responses": 2}]
