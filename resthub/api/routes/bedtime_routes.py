# resthub/api/routes/bedtime_routes.py
from datetime import datetime, date
from functools import partial
from fastapi import APIRouter, Depends

from resthub.config import get_config
from resthub.core.models.data_models import BedtimeRequest, BedtimeAlert, FormDefaults
from resthub.core.models.sleep_calculator import load_sleep_calculator
from resthub.core.services.bedtime_service import BedtimePredictor
from resthub.core.state.bedtime_form import BedtimeForm
from resthub.utils.constants import DEFAULT_TIME_FORMAT

# Dependency
def get_bedtime_predictor():
   config = get_config()
   model_path = config.get('model.path', 'models/sleep_calculator')
   time_format = config.get('display.time_format', DEFAULT_TIME_FORMAT)
   return BedtimePredictor(partial(load_sleep_calculator, model_path), time_format=time_format)

router = APIRouter(
   prefix="/bedtime",
   tags=["Bedtime"],
   responses={404: {"description": "Not found"}}
)

@router.get("/defaults", response_model=FormDefaults)
def get_defaults():
   """Default form values and stepper ranges"""
   form = BedtimeForm()
   return FormDefaults(
      wake_time=form.wake_up.time(),
      sleep_amount=form.sleep_amount,
      coffee_amount=form.coffee_amount,
      ranges=form.ranges,
      time_format=get_config().get('display.time_format', DEFAULT_TIME_FORMAT),
   )

@router.post("/calculate", response_model=BedtimeAlert)
def calculate_bedtime(request: BedtimeRequest, predictor: BedtimePredictor = Depends(get_bedtime_predictor)):
   """Calculate the ideal bedtime for a wake time, desired sleep and coffee intake"""
   form = BedtimeForm(
      wake_up=datetime.combine(date.today(), request.wake_time),
      sleep_amount=request.sleep_amount,
      coffee_amount=request.coffee_amount,
   )
   return predictor.calculate_bedtime(form)
