"""
FitPlan — Blocking Safety Checks
Each rule returns a BLOCKED finding or None. Every applicable rule runs;
failures are collected rather than stopping at the first one.
"""

import math
from typing import Callable, Optional

from findings import Alternative, ValidationFinding, blocked
from plan_context import EXTREME_RATE_FRACTION, OPTIMAL_RATE_FRACTION, PlanContext

Rule = Callable[[PlanContext], Optional[ValidationFinding]]

ESSENTIAL_FAT_PCT = {"female": 12}
ESSENTIAL_FAT_PCT_DEFAULT = 5
UNDERWEIGHT_BMI = 17.5
MIN_SAFE_BMI = 18.5
ABSOLUTE_MIN_KCAL = {"female": 1200}
ABSOLUTE_MIN_KCAL_DEFAULT = 1500
SEVERE_SLEEP_HOURS = 5
MAX_WEEKLY_TRAINING_HOURS = 15
MAX_WEEKLY_TRAINING_HOURS_ATHLETE = 20


# ══════════════════════════════════════════════════════════════════════════════
# WEIGHT-LOSS RULES
# ══════════════════════════════════════════════════════════════════════════════

def essential_body_fat(ctx: PlanContext) -> Optional[ValidationFinding]:
    # Only a measured value can block; estimates are too rough
    body_fat = ctx.body.body_fat_percentage
    if not body_fat:
        return None

    gender = ctx.personal.gender
    minimum = ESSENTIAL_FAT_PCT.get(gender, ESSENTIAL_FAT_PCT_DEFAULT)
    if body_fat > minimum:
        return None

    return blocked(
        "AT_ESSENTIAL_BODY_FAT",
        f"Body fat ({body_fat:g}%) is at essential minimum for {gender}",
        recommendations=[
            "Essential fat required for organ function",
            "Hormone production needs minimum fat",
            "Immune system requires fat stores",
            "Switch to maintenance or lean bulk instead",
        ],
    )


def target_bmi_underweight(ctx: PlanContext) -> Optional[ValidationFinding]:
    height_m = ctx.body.height_cm / 100.0
    target_bmi = ctx.body.target_weight_kg / (height_m * height_m)
    if target_bmi >= UNDERWEIGHT_BMI:
        return None

    min_safe_weight = MIN_SAFE_BMI * height_m * height_m
    return blocked(
        "TARGET_BMI_UNDERWEIGHT",
        f"Target BMI ({target_bmi:.1f}) is clinically underweight",
        recommendations=[
            f"Minimum safe BMI: {MIN_SAFE_BMI}",
            f"Minimum safe weight: {round(min_safe_weight)}kg",
            "Adjust target weight to healthy range",
        ],
    )


def below_bmr(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.target_calories >= ctx.bmr:
        return None
    return blocked(
        "BELOW_BMR",
        f"Target calories ({round(ctx.target_calories)}) is below your BMR ({round(ctx.bmr)})",
        recommendations=[
            "Extend timeline to increase daily calories",
            "Increase workout frequency to burn more calories",
            "Accept slower, healthier weight loss rate",
        ],
    )


def below_absolute_minimum(ctx: PlanContext) -> Optional[ValidationFinding]:
    minimum = ABSOLUTE_MIN_KCAL.get(ctx.personal.gender, ABSOLUTE_MIN_KCAL_DEFAULT)
    if ctx.target_calories >= minimum:
        return None
    return blocked(
        "BELOW_ABSOLUTE_MINIMUM",
        f"Target ({round(ctx.target_calories)}) is below safe minimum ({minimum} cal)",
        recommendations=["Extend timeline or reduce deficit"],
    )


def extremely_unrealistic(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.required_weekly_rate <= ctx.weight * EXTREME_RATE_FRACTION:
        return None

    difference = abs(ctx.body.target_weight_kg - ctx.weight)
    safe_weeks = math.ceil(difference / (ctx.weight * OPTIMAL_RATE_FRACTION))
    return blocked(
        "EXTREMELY_UNREALISTIC",
        f"Rate {ctx.required_weekly_rate:.2f}kg/week is dangerous",
        recommendations=[f"Extend to {safe_weeks} weeks (safe rate)"],
        alternatives=[
            Alternative(
                option="extend_timeline",
                new_weeks=safe_weeks,
                description=f"Extend to {safe_weeks} weeks (safe rate)",
            )
        ],
    )


def insufficient_exercise(ctx: PlanContext) -> Optional[ValidationFinding]:
    """
    Fewer than 2 sessions + aggressive rate + diet-only target below BMR.
    Uses the uncapped target: the question is whether diet alone could get there.
    """
    frequency = ctx.workout.workout_frequency_per_week
    diet_only_target = ctx.tdee - ctx.required_weekly_rate * 7700 / 7
    if frequency >= 2 or not ctx.is_aggressive or diet_only_target >= ctx.bmr:
        return None

    return blocked(
        "INSUFFICIENT_EXERCISE",
        f"Your aggressive goal with only {frequency} workout(s)/week requires unsafe calorie restriction",
        recommendations=[
            f"📊 Current plan: {round(diet_only_target)} cal/day (below your BMR of {round(ctx.bmr)})",
            "🏋️ Increase to at least 3 workouts/week to create deficit via exercise",
            "⏰ OR: Extend timeline to reduce required daily deficit",
            "🚶 OR: Add daily walking (10,000 steps = ~300-400 cal/day)",
            "⚠️ Without more activity, this goal requires starvation-level calories",
        ],
        risks=[
            "Calories below BMR will cause muscle loss",
            "Extreme fatigue and low energy",
            "Hormonal disruption",
            "Unsustainable long-term",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# UNCONDITIONAL RULES
# ══════════════════════════════════════════════════════════════════════════════

def unsafe_pregnancy_breastfeeding(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not (ctx.body.pregnancy_status or ctx.body.breastfeeding_status):
        return None
    if ctx.target_calories >= ctx.tdee:
        return None
    return blocked(
        "UNSAFE_PREGNANCY_BREASTFEEDING",
        "Weight loss during pregnancy/breastfeeding is not safe",
        recommendations=[
            "Switch to maintenance or surplus calories",
            "Focus on nutrient-dense foods",
            "Consult doctor before any dietary changes",
        ],
    )


def conflicting_goals(ctx: PlanContext) -> Optional[ValidationFinding]:
    goals = ctx.workout.primary_goals
    if not ("weight-loss" in goals and "weight-gain" in goals):
        return None
    return blocked(
        "CONFLICTING_GOALS",
        "Cannot lose weight and gain weight simultaneously",
        recommendations=["Choose your primary goal: weight loss OR weight gain"],
    )


def no_meals_enabled(ctx: PlanContext) -> Optional[ValidationFinding]:
    diet = ctx.diet
    if diet.breakfast_enabled or diet.lunch_enabled or diet.dinner_enabled or diet.snacks_enabled:
        return None
    return blocked(
        "NO_MEALS_ENABLED",
        "At least one meal must be enabled to create a meal plan",
        recommendations=[
            "Enable at least breakfast, lunch, or dinner",
            "Meal plans require at least one meal slot",
        ],
    )


def severe_sleep_deprivation(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.sleep_hours >= SEVERE_SLEEP_HOURS or not ctx.is_aggressive:
        return None
    return blocked(
        "SEVERE_SLEEP_DEPRIVATION",
        f"Sleep ({ctx.sleep_hours:.1f}hrs) + aggressive goal is dangerous",
        recommendations=[
            "Severe sleep deprivation impairs fat loss by 55%",
            "Dramatically increases muscle loss",
            "Impossible to recover from workouts",
            "Either improve sleep to 6+ hours OR reduce goal aggressiveness",
        ],
    )


def excessive_training_volume(ctx: PlanContext) -> Optional[ValidationFinding]:
    hours = ctx.weekly_training_hours
    if ctx.personal.occupation_type == "very_active":
        limit = MAX_WEEKLY_TRAINING_HOURS_ATHLETE
    else:
        limit = MAX_WEEKLY_TRAINING_HOURS
    if hours <= limit:
        return None
    return blocked(
        "EXCESSIVE_TRAINING_VOLUME",
        f"Training volume ({hours:.1f} hrs/week) exceeds safe limits",
        recommendations=[
            f"Maximum safe: {limit} hours/week for non-athletes",
            "Risk: Overtraining syndrome, chronic fatigue",
            "Risk: Suppressed immune function, injury",
            "Reduce frequency or session duration",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# RULE TABLES — evaluated in list order
# ══════════════════════════════════════════════════════════════════════════════

WEIGHT_LOSS_RULES: list[Rule] = [
    essential_body_fat,
    target_bmi_underweight,
    below_bmr,
    below_absolute_minimum,
    extremely_unrealistic,
    insufficient_exercise,
]

UNCONDITIONAL_RULES: list[Rule] = [
    unsafe_pregnancy_breastfeeding,
    conflicting_goals,
    no_meals_enabled,
    severe_sleep_deprivation,
    excessive_training_volume,
]


def run_blocking_checks(ctx: PlanContext) -> list[ValidationFinding]:
    rules = (WEIGHT_LOSS_RULES if ctx.is_weight_loss else []) + UNCONDITIONAL_RULES
    return [finding for finding in (rule(ctx) for rule in rules) if finding is not None]
