"""
FitPlan — Pydantic Schemas
Input records consumed by the validation engine.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


# ══════════════════════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════════════════════

class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"
    prefer_not_to_say = "prefer_not_to_say"


class OccupationType(str, Enum):
    desk_job = "desk_job"                  # sitting most of the day
    light_active = "light_active"          # standing, light movement
    moderate_active = "moderate_active"    # on feet often
    heavy_labor = "heavy_labor"            # physical work all day
    very_active = "very_active"            # constant intense activity


class DietType(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    non_veg = "non-veg"
    pescatarian = "pescatarian"


class StressLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Intensity(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    extreme = "extreme"


class WorkoutLocation(str, Enum):
    home = "home"
    gym = "gym"
    both = "both"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)


# ══════════════════════════════════════════════════════════════════════════════
# PERSONAL INFO
# ══════════════════════════════════════════════════════════════════════════════

class PersonalInfo(_Record):
    age: int = Field(..., ge=13, le=120)
    gender: Gender
    country: str = ""
    state: str = ""
    wake_time: str = Field(..., description="HH:MM, 24h clock")
    sleep_time: str = Field(..., description="HH:MM, 24h clock")
    occupation_type: OccupationType

    @field_validator("wake_time", "sleep_time")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        if not _TIME_RE.match(v):
            raise ValueError(f"Expected HH:MM time, got '{v}'.")
        return v


# ══════════════════════════════════════════════════════════════════════════════
# DIET PREFERENCES
# ══════════════════════════════════════════════════════════════════════════════

class DietPreferences(_Record):
    diet_type: DietType = DietType.non_veg
    allergies: List[str] = []
    restrictions: List[str] = []

    keto_ready: bool = False
    intermittent_fasting_ready: bool = False
    paleo_ready: bool = False
    mediterranean_ready: bool = False
    low_carb_ready: bool = False
    high_protein_ready: bool = False

    breakfast_enabled: bool = True
    lunch_enabled: bool = True
    dinner_enabled: bool = True
    snacks_enabled: bool = True

    # Health habits — feed the diet readiness score
    drinks_enough_water: bool = False
    limits_sugary_drinks: bool = False
    eats_regular_meals: bool = False
    avoids_late_night_eating: bool = False
    controls_portion_sizes: bool = False
    reads_nutrition_labels: bool = False
    eats_processed_foods: bool = False
    eats_5_servings_fruits_veggies: bool = False
    limits_refined_sugar: bool = False
    includes_healthy_fats: bool = False
    drinks_alcohol: bool = False
    smokes_tobacco: bool = False
    drinks_coffee: bool = False
    takes_supplements: bool = False


# ══════════════════════════════════════════════════════════════════════════════
# BODY ANALYSIS
# ══════════════════════════════════════════════════════════════════════════════

class BodyAnalysis(_Record):
    height_cm: float = Field(..., ge=100, le=250)
    current_weight_kg: float = Field(..., ge=30, le=300)
    target_weight_kg: float = Field(..., ge=30, le=300)
    target_timeline_weeks: int = Field(..., ge=1, le=104)

    body_fat_percentage: Optional[float] = Field(None, ge=3, le=60)
    ai_estimated_body_fat: Optional[float] = Field(None, ge=3, le=60)
    ai_confidence_score: Optional[int] = Field(None, ge=0, le=100)
    bmi: Optional[float] = None

    medical_conditions: List[str] = []
    medications: List[str] = []
    physical_limitations: List[str] = []

    pregnancy_status: bool = False
    pregnancy_trimester: Optional[int] = Field(None, ge=1, le=3)
    breastfeeding_status: bool = False
    stress_level: StressLevel = StressLevel.moderate


# ══════════════════════════════════════════════════════════════════════════════
# WORKOUT PREFERENCES
# ══════════════════════════════════════════════════════════════════════════════

class WorkoutPreferences(_Record):
    location: WorkoutLocation = WorkoutLocation.gym
    equipment: List[str] = []
    time_preference: int = Field(..., ge=0, le=300, description="Minutes per session")
    intensity: Intensity
    workout_types: List[str] = []
    primary_goals: List[str] = []
    activity_level: ActivityLevel = ActivityLevel.moderate
    workout_experience_years: int = Field(0, ge=0, le=50)
    workout_frequency_per_week: int = Field(..., ge=0, le=7)
    can_do_pushups: int = Field(0, ge=0, le=200)
    can_run_minutes: int = Field(0, ge=0, le=300)
