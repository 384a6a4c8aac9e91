from mainstreet_admin.models.user import User
from mainstreet_admin.models.business import Business
from mainstreet_admin.models.event import Event
from mainstreet_admin.models.reward import RewardItem, RewardRedemption
from mainstreet_admin.models.survey import Survey, SurveyResponse
from mainstreet_admin.models.checkin import Checkin

# This allows importing all models from mainstreet_admin.models
