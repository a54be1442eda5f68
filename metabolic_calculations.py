"""
FitPlan — Metabolic Calculations
Mifflin-St Jeor BMR → occupation TDEE → MET exercise burn → age/hormonal modifiers.
Pure arithmetic; no state between calls.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)


class MissingProfileDataError(ValueError):
    """A value the formulas cannot work without was not supplied."""


# ══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ══════════════════════════════════════════════════════════════════════════════

# Legacy activity factors (pre-occupation model)
ACTIVITY_FACTORS = {
    "sedentary": 1.2,
    "light":     1.375,
    "moderate":  1.55,
    "active":    1.725,
    "extreme":   1.9,
}

# Daily NEAT from occupation, exercise excluded
OCCUPATION_MULTIPLIERS = {
    "desk_job":        1.25,
    "light_active":    1.35,
    "moderate_active": 1.45,
    "heavy_labor":     1.60,
    "very_active":     1.70,
}

MET_VALUES: dict[str, dict[str, float]] = {
    "beginner": {
        "strength": 3.5, "cardio": 5.0, "sports": 4.5, "yoga": 2.5, "hiit": 6.0,
        "pilates": 3.0, "flexibility": 2.5, "functional": 4.0, "mixed": 4.0,
    },
    "intermediate": {
        "strength": 5.0, "cardio": 7.0, "sports": 6.5, "yoga": 3.5, "hiit": 8.0,
        "pilates": 4.5, "flexibility": 3.0, "functional": 6.0, "mixed": 6.0,
    },
    "advanced": {
        "strength": 6.5, "cardio": 9.0, "sports": 8.5, "yoga": 4.5, "hiit": 10.0,
        "pilates": 6.0, "flexibility": 4.0, "functional": 7.5, "mixed": 7.5,
    },
}

# (lower age bound, multiplier), checked oldest first
AGE_MODIFIERS = [
    (60, 0.85),
    (50, 0.90),
    (40, 0.95),
    (30, 0.98),
]
MENOPAUSE_AGE_RANGE = (45, 55)
MENOPAUSE_MODIFIER = 0.95

PREGNANCY_TRIMESTER_KCAL = {1: 0, 2: 340, 3: 450}
BREASTFEEDING_KCAL = 500

AI_CONFIDENCE_THRESHOLD = 70

# (flag, points) — good habits add, bad habits subtract
READINESS_WEIGHTS = [
    ("drinks_enough_water",            10),
    ("limits_sugary_drinks",           15),
    ("eats_regular_meals",             25),
    ("avoids_late_night_eating",       10),
    ("controls_portion_sizes",         30),
    ("reads_nutrition_labels",         20),
    ("eats_5_servings_fruits_veggies", 20),
    ("limits_refined_sugar",           15),
    ("includes_healthy_fats",          10),
    ("eats_processed_foods",          -20),
    ("drinks_alcohol",                -10),
    ("smokes_tobacco",                -15),
]
READINESS_MIN_RAW = -45
READINESS_RANGE = 200

ACTIVITY_ORDER = ["sedentary", "light", "moderate", "active", "extreme"]
# Occupations not listed accept any activity level
OCCUPATION_MIN_ACTIVITY = {
    "heavy_labor": "active",
}

# Reference BMR by age band: 70 kg male / 60 kg female
EXPECTED_BMR = {
    "male": [
        ((18, 24), 1750), ((25, 34), 1700), ((35, 44), 1650),
        ((45, 54), 1580), ((55, 64), 1500), ((65, 120), 1400),
    ],
    "female": [
        ((18, 24), 1400), ((25, 34), 1350), ((35, 44), 1300),
        ((45, 54), 1250), ((55, 64), 1200), ((65, 120), 1150),
    ],
}


# ══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURES
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BodyFatEstimate:
    value: float
    source: str          # user_input / ai_analysis / bmi_estimation / default_estimate
    confidence: str      # high / medium / low
    show_warning: bool


@dataclass(frozen=True)
class ActivityCheck:
    is_valid: bool
    minimum_required: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class IntensityRecommendation:
    intensity: str
    reasoning: str


# ══════════════════════════════════════════════════════════════════════════════
# METABOLIC CALCULATOR
# ══════════════════════════════════════════════════════════════════════════════

class MetabolicCalculations:
    """
    BMR, BMI and TDEE building blocks consumed by the validation engine.
    Missing critical inputs raise MissingProfileDataError instead of
    falling back to a guessed value.
    """

    KCAL_PER_KG = 7700
    WATER_ML_PER_KG = 35
    FIBER_G_PER_1000_KCAL = 14

    # ── Energy expenditure ──────────────────────────────────────────────────

    def calculate_bmi(self, weight_kg: float, height_cm: float) -> float:
        """BMI = weight(kg) / height(m)²"""
        _require(weight_kg, "Weight", "BMI")
        _require(height_cm, "Height", "BMI")
        height_m = height_cm / 100.0
        return weight_kg / (height_m * height_m)

    def calculate_bmr(self, weight_kg: float, height_cm: float, age: int, gender: str) -> float:
        """
        Mifflin-St Jeor:
            male:   10w + 6.25h − 5a + 5
            female: 10w + 6.25h − 5a − 161
            other:  midpoint of the two sex constants (−78)
        """
        _require(weight_kg, "Weight", "BMR")
        _require(height_cm, "Height", "BMR")
        _require(age, "Age", "BMR")
        _require(gender, "Gender", "BMR")

        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if gender == "male":
            return base + 5
        if gender == "female":
            return base - 161
        return base - 78

    def calculate_tdee(self, bmr: float, activity_level: str) -> float:
        """Legacy activity-factor TDEE. The engine uses calculate_base_tdee."""
        return bmr * ACTIVITY_FACTORS.get(activity_level, ACTIVITY_FACTORS["sedentary"])

    def calculate_base_tdee(self, bmr: float, occupation: str) -> float:
        return bmr * OCCUPATION_MULTIPLIERS[occupation]

    def estimate_session_calorie_burn(
        self,
        duration_minutes: float,
        intensity: str,
        weight_kg: float,
        workout_types: list[str],
    ) -> int:
        """Calories = MET × weight(kg) × hours. First listed type is the primary one."""
        table = MET_VALUES[intensity]
        primary = workout_types[0].lower() if workout_types else "mixed"
        met = table.get(primary, table["mixed"])
        return round(met * weight_kg * (duration_minutes / 60.0))

    def calculate_weekly_exercise_burn(
        self,
        frequency: int,
        duration_minutes: float,
        intensity: str,
        weight_kg: float,
        workout_types: list[str],
    ) -> int:
        per_session = self.estimate_session_calorie_burn(
            duration_minutes, intensity, weight_kg, workout_types
        )
        return per_session * frequency

    def calculate_daily_exercise_burn(
        self,
        frequency: int,
        duration_minutes: float,
        intensity: str,
        weight_kg: float,
        workout_types: list[str],
    ) -> int:
        weekly = self.calculate_weekly_exercise_burn(
            frequency, duration_minutes, intensity, weight_kg, workout_types
        )
        return round(weekly / 7)

    def apply_age_modifier(self, tdee: float, age: int, gender: str) -> float:
        modifier = 1.0
        for lower_bound, factor in AGE_MODIFIERS:
            if age >= lower_bound:
                modifier = factor
                break

        low, high = MENOPAUSE_AGE_RANGE
        if gender == "female" and low <= age <= high:
            modifier *= MENOPAUSE_MODIFIER

        return tdee * modifier

    def calculate_pregnancy_calories(
        self,
        tdee: float,
        pregnant: bool,
        trimester: Optional[int] = None,
        breastfeeding: bool = False,
    ) -> float:
        extra = 0
        if pregnant and trimester:
            extra += PREGNANCY_TRIMESTER_KCAL[trimester]
        if breastfeeding:
            extra += BREASTFEEDING_KCAL
        return tdee + extra

    # ── Timeline & sleep ────────────────────────────────────────────────────

    def calculate_sleep_duration(self, wake_time: str, sleep_time: str) -> float:
        """Hours from sleep_time to wake_time, wrapping past midnight."""
        wake = _minutes(wake_time)
        sleep = _minutes(sleep_time)
        duration = wake - sleep
        if duration < 0:
            duration += 24 * 60
        return duration / 60.0

    def apply_sleep_penalty(self, timeline_weeks: int, sleep_hours: float) -> int:
        """Each hour of sleep under 7 stretches the timeline by 20%."""
        if sleep_hours >= 7:
            return timeline_weeks
        return math.ceil(timeline_weeks * (1 + 0.20 * (7 - sleep_hours)))

    # ── Body composition ────────────────────────────────────────────────────

    def estimate_body_fat_from_bmi(self, bmi: float, gender: str, age: int) -> int:
        """Deurenberg: 1.20×BMI + 0.23×age − 16.2 (male) / − 5.4 (female)."""
        male = 1.2 * bmi + 0.23 * age - 16.2
        female = 1.2 * bmi + 0.23 * age - 5.4
        if gender == "male":
            return round(male)
        if gender == "female":
            return round(female)
        return round((male + female) / 2)

    def get_final_body_fat_percentage(
        self,
        user_input: Optional[float],
        ai_estimate: Optional[float],
        ai_confidence: Optional[float],
        bmi: Optional[float],
        gender: Optional[str],
        age: Optional[int],
    ) -> BodyFatEstimate:
        """Priority: user input > confident AI estimate > BMI estimate > default."""
        if user_input is not None and user_input > 0:
            return BodyFatEstimate(user_input, "user_input", "high", False)

        if ai_estimate and ai_confidence and ai_confidence > AI_CONFIDENCE_THRESHOLD:
            return BodyFatEstimate(ai_estimate, "ai_analysis", "medium", True)

        if bmi and gender and age:
            estimate = self.estimate_body_fat_from_bmi(bmi, gender, age)
            return BodyFatEstimate(estimate, "bmi_estimation", "low", True)

        return BodyFatEstimate(20 if gender == "male" else 28, "default_estimate", "low", True)

    def calculate_metabolic_age(self, bmr: float, age: int, gender: str) -> int:
        """
        Metabolic age from the gap between actual and age-expected BMR.
        BMR above the reference reads younger; below reads older.
        """
        expected = _expected_bmr(age, gender)
        kcal_per_year = 10 if gender == "male" else 8
        metabolic_age = age + (expected - bmr) / kcal_per_year
        return max(18, min(85, round(metabolic_age)))

    # ── Habits & recommendations ────────────────────────────────────────────

    def calculate_diet_readiness_score(self, habits) -> int:
        """
        0–100 adherence predictor from boolean habit flags.
        Raw range is −45..155; normalised linearly and clamped.
        """
        raw = sum(points for flag, points in READINESS_WEIGHTS if getattr(habits, flag, False))
        normalised = round((raw - READINESS_MIN_RAW) / READINESS_RANGE * 100)
        return max(0, min(100, normalised))

    def calculate_water_intake(self, weight_kg: float) -> int:
        return round(weight_kg * self.WATER_ML_PER_KG)

    def calculate_fiber(self, daily_calories: float) -> int:
        return round(daily_calories / 1000 * self.FIBER_G_PER_1000_KCAL)

    def validate_activity_for_occupation(self, occupation: str, activity_level: str) -> ActivityCheck:
        minimum = OCCUPATION_MIN_ACTIVITY.get(occupation)
        if not minimum:
            return ActivityCheck(is_valid=True)

        if ACTIVITY_ORDER.index(activity_level) < ACTIVITY_ORDER.index(minimum):
            return ActivityCheck(
                is_valid=False,
                minimum_required=minimum,
                message=(
                    f'Your occupation ({occupation.replace("_", " ")}) requires at least '
                    f'"{minimum}" activity level. Please adjust.'
                ),
            )
        return ActivityCheck(is_valid=True)

    def calculate_recommended_intensity(
        self,
        experience_years: float,
        pushups: int,
        run_minutes: int,
        age: int,
        gender: str,
    ) -> IntensityRecommendation:
        if experience_years >= 3:
            return IntensityRecommendation(
                "advanced", "3+ years training experience indicates advanced level"
            )
        if experience_years < 1:
            return IntensityRecommendation(
                "beginner",
                "Less than 1 year experience - starting with beginner intensity for safety",
            )

        # 1–3 years: fitness test decides
        if gender == "male":
            pushup_threshold = 25 if age < 40 else 20
        else:
            pushup_threshold = 15 if age < 40 else 10
        strong = pushups >= pushup_threshold
        fit = run_minutes >= 15

        if strong and fit:
            return IntensityRecommendation(
                "advanced", "Strong fitness test results indicate advanced level capability"
            )
        if strong or fit:
            return IntensityRecommendation(
                "intermediate", "1-3 years experience with solid fitness test results"
            )
        return IntensityRecommendation(
            "beginner", "Building foundation strength and cardio base recommended"
        )


# ══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ══════════════════════════════════════════════════════════════════════════════

def _require(value, label: str, formula: str) -> None:
    if not value:
        raise MissingProfileDataError(
            f"{label} is required for {formula} calculation. Please complete your profile."
        )


def _minutes(clock: str) -> int:
    try:
        hours, minutes = (int(part) for part in clock.split(":"))
    except ValueError as e:
        raise ValueError(f"Invalid HH:MM time '{clock}'") from e
    return hours * 60 + minutes


def _expected_bmr(age: int, gender: str) -> int:
    references = EXPECTED_BMR["male" if gender == "male" else "female"]
    for (low, high), bmr in references:
        if low <= age <= high:
            return bmr
    return 1650 if gender == "male" else 1300


# Module-level singleton
metabolic_calculations = MetabolicCalculations()
