"""
FitPlan — Plan Context
Derived metrics for one evaluation, shared read-only by every rule.
"""

from dataclasses import dataclass

from metabolic_calculations import BodyFatEstimate
from schemas import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences

# Weekly rate thresholds as a fraction of current body weight
OPTIMAL_RATE_FRACTION = 0.0075
SAFE_MAX_RATE_FRACTION = 0.01
EXTREME_RATE_FRACTION = 0.015


@dataclass(frozen=True)
class PlanContext:
    personal: PersonalInfo
    diet: DietPreferences
    body: BodyAnalysis
    workout: WorkoutPreferences

    bmr: float
    bmi: float
    body_fat: BodyFatEstimate
    sleep_hours: float
    tdee: float
    is_weight_loss: bool
    is_weight_gain: bool
    required_weekly_rate: float
    target_calories: float

    @property
    def weight(self) -> float:
        return self.body.current_weight_kg

    @property
    def is_aggressive(self) -> bool:
        """Required rate above 0.75% of body weight per week."""
        return self.required_weekly_rate > self.weight * OPTIMAL_RATE_FRACTION

    @property
    def weekly_training_hours(self) -> float:
        return self.workout.workout_frequency_per_week * self.workout.time_preference / 60.0

    @property
    def goal_type(self) -> str:
        if self.is_weight_loss:
            return "weight-loss"
        if self.is_weight_gain:
            return "weight-gain"
        return "maintenance"

    @property
    def protein_goal(self) -> str:
        if self.is_weight_loss:
            return "cutting"
        if self.is_weight_gain:
            return "bulking"
        return "maintenance"
