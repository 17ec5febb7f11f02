# resthub/core/models/data_models.py

from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional, Union
from datetime import time
import math

from resthub.utils.constants import sleep_amount_range, coffee_amount_range, default_values


class ModelInput(BaseModel):
    """Validates input data for the sleep calculator model"""
    wake: float = Field(..., ge=0.0, lt=86400.0, allow_inf_nan=False)
    estimated_sleep: float = Field(..., gt=0.0, le=24.0, allow_inf_nan=False)
    coffee: float = Field(..., ge=0.0, allow_inf_nan=False)


class ModelOutput(BaseModel):
    """Validates the sleep calculator model output"""
    actual_sleep: float = Field(..., description="Predicted actual sleep in seconds")

    @field_validator('actual_sleep')
    @classmethod
    def validate_actual_sleep(cls, v):
        if not math.isfinite(v):
            raise ValueError('actual_sleep must be a finite number')
        return v


class BedtimeRequest(BaseModel):
    """Inputs submitted from the bedtime form"""
    wake_time: time
    sleep_amount: float = Field(
        default_values['sleep_amount'],
        ge=sleep_amount_range['min'],
        le=sleep_amount_range['max'],
        multiple_of=sleep_amount_range['step'],
    )
    coffee_amount: int = Field(
        default_values['coffee_amount'],
        ge=coffee_amount_range['min'],
        le=coffee_amount_range['max'],
    )


class BedtimeAlert(BaseModel):
    """Notification shown after a bedtime calculation"""
    title: str
    message: str
    is_showing: bool = True


class FormDefaults(BaseModel):
    """Default form values and the ranges of the steppers"""
    wake_time: time
    sleep_amount: float
    coffee_amount: int
    ranges: Dict[str, Dict[str, Union[int, float]]]
    time_format: Optional[str] = None
