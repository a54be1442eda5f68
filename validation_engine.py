"""
FitPlan — Plan Validation Engine
BMR → TDEE → goal direction → capped calorie target → blocking checks →
advisory checks → macros → medical overrides → refeed schedule.
Deterministic: identical inputs always give equal results.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from blocking_checks import run_blocking_checks
from findings import (
    CalculatedMetrics,
    PlanAdjustments,
    ValidationFinding,
    ValidationResults,
    warning,
)
from macros import macro_calculator
from metabolic_calculations import MetabolicCalculations, metabolic_calculations
from plan_adjustments import apply_medical_adjustments, calculate_refeed_schedule
from plan_context import PlanContext
from schemas import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences
from warning_checks import run_warning_checks

log = logging.getLogger(__name__)

KCAL_PER_KG = MetabolicCalculations.KCAL_PER_KG

RECOMMENDED_MAX_DEFICIT = 0.20
CONSERVATIVE_MAX_DEFICIT = 0.15

REASON_DEFAULT = "recommended safety limits"
REASON_STRESS = "high stress level"
REASON_MEDICAL = "medical conditions"


# ══════════════════════════════════════════════════════════════════════════════
# DEFICIT LIMITING
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DeficitLimit:
    adjusted_calories: float
    was_limited: bool
    original_deficit_percent: float
    adjusted_deficit_percent: float
    limit_reason: Optional[str] = None


def apply_deficit_limit(
    target_calories: float,
    tdee: float,
    bmr: float,
    stress_level: str,
    has_medical_conditions: bool,
) -> DeficitLimit:
    """
    Cap the deficit at 20% of TDEE, or 15% under high stress or any medical
    condition (stress is named first when both apply). A capped target is
    rounded and never drops below BMR.
    """
    deficit_percent = (tdee - target_calories) / tdee

    max_deficit, reason = RECOMMENDED_MAX_DEFICIT, REASON_DEFAULT
    if stress_level == "high":
        max_deficit, reason = CONSERVATIVE_MAX_DEFICIT, REASON_STRESS
    elif has_medical_conditions:
        max_deficit, reason = CONSERVATIVE_MAX_DEFICIT, REASON_MEDICAL

    if deficit_percent <= max_deficit:
        return DeficitLimit(
            adjusted_calories=target_calories,
            was_limited=False,
            original_deficit_percent=deficit_percent,
            adjusted_deficit_percent=deficit_percent,
        )

    capped = max(round(tdee * (1 - max_deficit)), bmr)
    return DeficitLimit(
        adjusted_calories=capped,
        was_limited=True,
        original_deficit_percent=deficit_percent,
        adjusted_deficit_percent=max_deficit,
        limit_reason=reason,
    )


def _deficit_limited_warning(limit: DeficitLimit, initial_target: float) -> ValidationFinding:
    original_pct = round(limit.original_deficit_percent * 100)
    capped_pct = round(limit.adjusted_deficit_percent * 100)

    if limit.limit_reason == REASON_STRESS:
        why = "😰 High stress increases cortisol, making aggressive deficits counterproductive"
        action = "✅ Consider stress management techniques (meditation, sleep, etc.)"
    elif limit.limit_reason == REASON_MEDICAL:
        why = "🩺 Medical conditions require conservative approach"
        action = "✅ Consult your doctor before starting"
    else:
        why = "📊 Deficits over 20% are generally unsafe and unsustainable"
        action = "✅ Focus on consistency over aggressive timelines"

    return warning(
        "DEFICIT_LIMITED_FOR_SAFETY",
        f"Calorie deficit reduced from {original_pct}% to {capped_pct}% due to {limit.limit_reason}",
        recommendations=[
            f"🛡️ Your deficit was capped at {capped_pct}% for your safety",
            f"Original target: {round(initial_target)} cal/day",
            f"Adjusted target: {round(limit.adjusted_calories)} cal/day",
            why,
            "💡 This will extend your timeline but protect your health and hormones",
            action,
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# VALIDATION ENGINE
# ══════════════════════════════════════════════════════════════════════════════

class ValidationEngine:
    """
    Stateless orchestrator. Warnings are only evaluated once every blocking
    check has passed, so a blocked plan never carries advisory findings.
    """

    def __init__(self, calculator: MetabolicCalculations = metabolic_calculations):
        self._calc = calculator

    def validate_user_plan(
        self,
        personal_info: PersonalInfo,
        diet_preferences: DietPreferences,
        body_analysis: BodyAnalysis,
        workout_preferences: WorkoutPreferences,
    ) -> ValidationResults:
        calc = self._calc
        body, workout = body_analysis, workout_preferences
        weight = body.current_weight_kg
        timeline = body.target_timeline_weeks
        if timeline <= 0:
            raise ValueError(f"target_timeline_weeks must be positive, got {timeline}")

        # Base metrics
        bmr = calc.calculate_bmr(weight, body.height_cm, personal_info.age, personal_info.gender)
        bmi = calc.calculate_bmi(weight, body.height_cm)
        body_fat = calc.get_final_body_fat_percentage(
            body.body_fat_percentage,
            body.ai_estimated_body_fat,
            body.ai_confidence_score,
            bmi,
            personal_info.gender,
            personal_info.age,
        )
        sleep_hours = calc.calculate_sleep_duration(personal_info.wake_time, personal_info.sleep_time)

        # TDEE: occupation NEAT + exercise, then age/menopause
        base_tdee = calc.calculate_base_tdee(bmr, personal_info.occupation_type)
        exercise_burn = calc.calculate_daily_exercise_burn(
            workout.workout_frequency_per_week,
            workout.time_preference,
            workout.intensity,
            weight,
            workout.workout_types,
        )
        tdee = calc.apply_age_modifier(base_tdee + exercise_burn, personal_info.age, personal_info.gender)
        log.debug("bmr=%.1f bmi=%.1f base_tdee=%.1f exercise=%d tdee=%.1f sleep=%.2fh",
                  bmr, bmi, base_tdee, exercise_burn, tdee, sleep_hours)

        # Direction and calorie target
        is_weight_loss = weight > body.target_weight_kg
        is_weight_gain = weight < body.target_weight_kg
        required_rate = abs(body.target_weight_kg - weight) / timeline

        pending: list[ValidationFinding] = []
        deficit_percent = 0.0
        if is_weight_loss:
            initial_target = tdee - required_rate * KCAL_PER_KG / 7
            limit = apply_deficit_limit(
                initial_target, tdee, bmr,
                body.stress_level or "moderate",
                len(body.medical_conditions) > 0,
            )
            target_calories = limit.adjusted_calories
            # Realized deficit, never above the cap; a BMR floor leaves it well under
            deficit_percent = min(limit.adjusted_deficit_percent, (tdee - target_calories) / tdee)
            if limit.was_limited:
                weekly_rate = (tdee - target_calories) * 7 / KCAL_PER_KG
                pending.append(_deficit_limited_warning(limit, initial_target))
                log.info("Deficit capped at %.0f%% (%s): %.0f → %.0f kcal",
                         limit.adjusted_deficit_percent * 100, limit.limit_reason,
                         initial_target, target_calories)
            else:
                weekly_rate = required_rate
        elif is_weight_gain:
            target_calories = tdee + required_rate * KCAL_PER_KG / 7
            weekly_rate = required_rate
        else:
            target_calories = tdee
            weekly_rate = 0.0

        ctx = PlanContext(
            personal=personal_info,
            diet=diet_preferences,
            body=body,
            workout=workout,
            bmr=bmr,
            bmi=bmi,
            body_fat=body_fat,
            sleep_hours=sleep_hours,
            tdee=tdee,
            is_weight_loss=is_weight_loss,
            is_weight_gain=is_weight_gain,
            required_weekly_rate=required_rate,
            target_calories=target_calories,
        )

        errors = run_blocking_checks(ctx)
        warnings: list[ValidationFinding] = []
        if not errors:
            warnings = pending + run_warning_checks(ctx)

        # Macros, then medical overrides on top
        protein = macro_calculator.protein(weight, ctx.protein_goal)
        macros = macro_calculator.macros(
            target_calories, protein, workout.workout_frequency_per_week, workout.intensity
        )
        medical = apply_medical_adjustments(tdee, macros, body.medical_conditions)

        refeed = calculate_refeed_schedule(timeline, deficit_percent, ctx.goal_type)

        results = ValidationResults(
            errors=tuple(errors),
            warnings=tuple(warnings),
            calculated_metrics=CalculatedMetrics(
                bmr=round(bmr),
                tdee=round(medical.tdee),
                target_calories=round(target_calories),
                weekly_rate=round(weekly_rate, 2),
                protein=medical.macros.protein,
                carbs=medical.macros.carbs,
                fat=medical.macros.fat,
                timeline=timeline,
            ),
            adjustments=PlanAdjustments(
                refeed_schedule=refeed if refeed.needs_refeeds or refeed.needs_diet_break else None,
                medical_notes=medical.notes or None,
            ),
        )

        log.info("Plan validated: goal=%s target=%d kcal tdee=%d errors=%d warnings=%d",
                 ctx.goal_type, results.calculated_metrics.target_calories,
                 results.calculated_metrics.tdee, len(results.errors), len(results.warnings))
        return results


# Module-level singleton
validation_engine = ValidationEngine()


def validate_user_plan(
    personal_info: PersonalInfo,
    diet_preferences: DietPreferences,
    body_analysis: BodyAnalysis,
    workout_preferences: WorkoutPreferences,
) -> ValidationResults:
    return validation_engine.validate_user_plan(
        personal_info, diet_preferences, body_analysis, workout_preferences
    )
