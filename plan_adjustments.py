"""
FitPlan — Plan Adjustments
Medical condition overrides on TDEE/macros and refeed / diet-break scheduling.
At most one adjustment per category; categories never stack on each other.
"""

import logging
from dataclasses import dataclass

from findings import RefeedSchedule
from macros import KCAL_PER_G_CARB, KCAL_PER_G_FAT, MacroTarget

log = logging.getLogger(__name__)

HYPOTHYROID_CONDITIONS = ("hypothyroid", "thyroid")
HYPERTHYROID_CONDITIONS = ("hyperthyroid", "graves-disease")
INSULIN_RESISTANCE_CONDITIONS = ("pcos", "diabetes-type1", "diabetes-type2")
DIABETES_CONDITIONS = ("diabetes-type1", "diabetes-type2")
CARDIOVASCULAR_CONDITIONS = ("hypertension", "heart-disease")

HYPOTHYROID_FACTOR = 0.90
HYPERTHYROID_FACTOR = 1.15
INSULIN_RESISTANCE_CARB_FACTOR = 0.75

# Bounds relative to the unadjusted baseline
MAX_TDEE_SHIFT = 0.15
MIN_CARB_FRACTION = 0.70

REFEED_MIN_WEEKS = 12
REFEED_MIN_DEFICIT = 0.20
DIET_BREAK_MIN_WEEKS = 16


@dataclass(frozen=True)
class MedicalAdjustment:
    tdee: float
    macros: MacroTarget
    notes: tuple[str, ...]


def _has_any(conditions, names) -> bool:
    return any(name in conditions for name in names)


# ══════════════════════════════════════════════════════════════════════════════
# MEDICAL OVERRIDES
# ══════════════════════════════════════════════════════════════════════════════

def apply_medical_adjustments(
    tdee: float,
    macros: MacroTarget,
    medical_conditions: list[str],
) -> MedicalAdjustment:
    adjusted_tdee = tdee
    carbs, fat = macros.carbs, macros.fat
    notes: list[str] = []

    # Metabolic: hypothyroid wins when both are listed
    if _has_any(medical_conditions, HYPOTHYROID_CONDITIONS):
        adjusted_tdee = tdee * HYPOTHYROID_FACTOR
        notes.append("⚠️ TDEE reduced 10% due to hypothyroidism")
        notes.append("💊 Consider thyroid medication optimization with doctor")
    elif _has_any(medical_conditions, HYPERTHYROID_CONDITIONS):
        adjusted_tdee = tdee * HYPERTHYROID_FACTOR
        notes.append("⚠️ TDEE increased 15% due to hyperthyroidism")
        notes.append("💊 Monitor thyroid levels regularly - may change with treatment")
        notes.append("🩺 Consult doctor before starting - metabolism may be unstable")

    # Insulin resistance: trade carbs for fat at equal calories
    if _has_any(medical_conditions, INSULIN_RESISTANCE_CONDITIONS):
        reduced = round(carbs * INSULIN_RESISTANCE_CARB_FACTOR)
        fat = round(fat + (carbs - reduced) * KCAL_PER_G_CARB / KCAL_PER_G_FAT)
        carbs = reduced
        if "pcos" in medical_conditions:
            notes.append("⚠️ Lower carb (75%) for PCOS insulin resistance")
        if _has_any(medical_conditions, DIABETES_CONDITIONS):
            notes.append("⚠️ Lower carb (75%) for blood sugar management")
            notes.append("🩺 Monitor glucose regularly, adjust insulin with doctor")

    # Cardiovascular: advisory only
    if _has_any(medical_conditions, CARDIOVASCULAR_CONDITIONS):
        notes.append("⚠️ Limit high-intensity exercise without medical clearance")
        notes.append("🩺 Monitor blood pressure regularly")

    low, high = tdee * (1 - MAX_TDEE_SHIFT), tdee * (1 + MAX_TDEE_SHIFT)
    adjusted_tdee = min(max(adjusted_tdee, low), high)
    carbs = max(carbs, round(macros.carbs * MIN_CARB_FRACTION))

    if notes:
        log.info("Medical adjustments applied: tdee %.0f → %.0f, carbs %d → %d",
                 tdee, adjusted_tdee, macros.carbs, carbs)

    return MedicalAdjustment(
        tdee=adjusted_tdee,
        macros=MacroTarget(protein=macros.protein, carbs=carbs, fat=fat),
        notes=tuple(notes),
    )


# ══════════════════════════════════════════════════════════════════════════════
# REFEEDS & DIET BREAKS
# ══════════════════════════════════════════════════════════════════════════════

def calculate_refeed_schedule(
    timeline_weeks: int,
    deficit_percent: float,
    goal_type: str,
) -> RefeedSchedule:
    """
    Weekly refeeds for long, deep deficits; one maintenance week halfway
    through very long diets.
    """
    is_loss = goal_type == "weight-loss"
    needs_refeeds = is_loss and timeline_weeks >= REFEED_MIN_WEEKS and deficit_percent >= REFEED_MIN_DEFICIT
    needs_diet_break = is_loss and timeline_weeks >= DIET_BREAK_MIN_WEEKS

    explanation: list[str] = []
    if needs_refeeds:
        explanation += [
            "📅 WEEKLY REFEED DAYS PLANNED",
            "• One day per week: Eat at maintenance calories",
            "• Increase carbs by 100-150g on refeed days",
            "• Keep protein same, reduce fat slightly",
            "• Benefits: Prevents metabolic adaptation, restores leptin",
        ]

    break_week = timeline_weeks // 2 if needs_diet_break else None
    if needs_diet_break:
        explanation += [
            "",
            "🔄 DIET BREAK SCHEDULED",
            f"• Week {break_week}: Full week at maintenance calories",
            "• Benefits: Metabolic reset, prevents plateaus",
        ]

    return RefeedSchedule(
        needs_refeeds=needs_refeeds,
        needs_diet_break=needs_diet_break,
        refeed_frequency="weekly" if needs_refeeds else None,
        diet_break_week=break_week,
        explanation=tuple(explanation),
    )
