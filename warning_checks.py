"""
FitPlan — Advisory Checks
Run only after every blocking check has passed. Each rule is independent
and returns a WARNING finding or None.
"""

from typing import Callable, Optional

from findings import ValidationFinding, warning
from macros import macro_calculator
from metabolic_calculations import metabolic_calculations
from plan_context import (
    EXTREME_RATE_FRACTION,
    OPTIMAL_RATE_FRACTION,
    SAFE_MAX_RATE_FRACTION,
    PlanContext,
)

Rule = Callable[[PlanContext], Optional[ValidationFinding]]

HIGH_RISK_CONDITIONS = ("diabetes-type1", "diabetes-type2", "heart-disease", "hypertension")
HIGH_IMPACT_LIMITATIONS = ("knee-issues", "back-pain", "arthritis", "joint-problems")
VEGAN_PROTEIN_SOURCES = ("soy", "tofu", "legumes", "beans", "nuts", "peanuts", "seeds")
METABOLISM_MEDICATIONS = (
    "levothyroxine", "synthroid", "antidepressant", "beta-blocker", "prednisone", "insulin",
)

OPTIMAL_SLEEP_HOURS = 7
LOW_SLEEP_HABIT_HOURS = 6
ELDERLY_AGE = 75
HIGH_VOLUME_HOURS = 12
OBESITY_CLASS_II_BMI = 35
LOW_READINESS_SCORE = 40
VEGAN_PROTEIN_CEILING_G = 150
LEAN_GAIN_FRACTION = 0.005


def _contains_any(items, needles) -> bool:
    return any(needle in item.lower() for item in items for needle in needles)


# ══════════════════════════════════════════════════════════════════════════════
# RATE & TIMELINE
# ══════════════════════════════════════════════════════════════════════════════

def aggressive_timeline(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not (ctx.is_weight_loss or ctx.is_weight_gain):
        return None
    rate = ctx.required_weekly_rate
    optimal = ctx.weight * OPTIMAL_RATE_FRACTION
    if not (optimal < rate <= ctx.weight * SAFE_MAX_RATE_FRACTION):
        return None
    return warning(
        "AGGRESSIVE_TIMELINE",
        f"Rate ({rate:.2f}kg/week) is aggressive",
        impact=f"Recommended: {optimal:.2f}kg/week for optimal results",
        risks=[
            "Increased muscle loss",
            "Metabolic adaptation",
            "Harder to maintain long-term",
        ],
    )


def obesity_adjusted_rates(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.bmi < OBESITY_CLASS_II_BMI:
        return None
    adjusted_max = ctx.weight * EXTREME_RATE_FRACTION
    return warning(
        "OBESITY_ADJUSTED_RATES",
        "Higher BMI allows for faster initial weight loss",
        recommendations=[
            "Class II obesity (BMI ≥ 35) can tolerate larger deficits safely",
            f"Up to {adjusted_max:.2f}kg/week is safe for you",
            "Rate will naturally slow as you lose weight",
            "Initial rapid loss is mostly water - expect slower after 2-4 weeks",
            "Consider medical supervision for best results",
        ],
    )


def excessive_gain_rate(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not ctx.is_weight_gain:
        return None
    rate = ctx.required_weekly_rate
    if rate <= ctx.weight * SAFE_MAX_RATE_FRACTION:
        return None
    return warning(
        "EXCESSIVE_GAIN_RATE",
        f"Gain rate ({rate:.2f}kg/week) will be mostly fat, not muscle",
        impact="Anything above these rates is primarily fat gain",
        recommendations=[
            "Novice: Max ~0.5-1kg muscle per MONTH",
            "Intermediate: Max ~0.25-0.5kg muscle per MONTH",
            "Advanced: Max ~0.125-0.25kg muscle per MONTH",
            f"Optimal rate: {ctx.weight * LEAN_GAIN_FRACTION:.2f}kg/week for lean gain",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# LIFESTYLE
# ══════════════════════════════════════════════════════════════════════════════

def insufficient_sleep(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.sleep_hours >= OPTIMAL_SLEEP_HOURS:
        return None
    impact_pct = round((OPTIMAL_SLEEP_HOURS - ctx.sleep_hours) * 10)
    return warning(
        "INSUFFICIENT_SLEEP",
        f"Sleep {ctx.sleep_hours:g}hrs/night. Optimal: 7-9hrs",
        impact=f"Fat loss ~{impact_pct}% slower",
        risks=[
            "Increased hunger hormones",
            "Decreased satiety hormones",
            "Elevated cortisol",
            "Poor recovery",
        ],
    )


def alcohol_impact(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not (ctx.diet.drinks_alcohol and ctx.is_aggressive):
        return None
    return warning(
        "ALCOHOL_IMPACT",
        "Alcohol will slow progress 10-15%",
        recommendations=["Limit to 1-2 drinks/week maximum"],
    )


def tobacco_impact(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not ctx.diet.smokes_tobacco:
        return None
    return warning(
        "TOBACCO_IMPACT",
        "Smoking reduces cardio capacity ~20-30%",
        recommendations=["Consider quitting", "Start with lower-intensity cardio"],
    )


def low_diet_readiness(ctx: PlanContext) -> Optional[ValidationFinding]:
    score = metabolic_calculations.calculate_diet_readiness_score(ctx.diet)
    if score >= LOW_READINESS_SCORE or not ctx.is_aggressive:
        return None
    return warning(
        "LOW_DIET_READINESS",
        f"Low diet readiness score ({score}/100) with aggressive goal",
        recommendations=[
            "Current habits indicate low adherence likelihood",
            "Option 1: Habit Building Phase First (4 weeks)",
            "Option 2: Reduce goal aggressiveness",
            "Option 3: Get accountability support (nutritionist/group)",
            f"Success prediction: {score}% adherence probability",
        ],
    )


def multiple_lifestyle_factors(ctx: PlanContext) -> Optional[ValidationFinding]:
    habits = []
    if ctx.sleep_hours < LOW_SLEEP_HABIT_HOURS:
        habits.append("Low sleep")
    if ctx.diet.smokes_tobacco:
        habits.append("Tobacco use")
    if ctx.diet.drinks_alcohol:
        habits.append("Alcohol consumption")
    if len(habits) < 2:
        return None
    return warning(
        "MULTIPLE_LIFESTYLE_FACTORS",
        f"{len(habits)} lifestyle factors will significantly impact results",
        recommendations=[
            f"Factors detected: {', '.join(habits)}",
            "Timeline may extend by 40-60%",
            "🎯 Fix ONE habit at a time",
            "😴 Sleep has biggest impact - start there",
            "Success still possible but requires commitment",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# DEMOGRAPHICS
# ══════════════════════════════════════════════════════════════════════════════

def elderly_user(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.personal.age < ELDERLY_AGE:
        return None
    return warning(
        "ELDERLY_USER",
        "Age 75+ requires special considerations for safe exercise",
        recommendations=[
            "🩺 Consult doctor before starting exercise program",
            "💪 Resistance training critical for bone density",
            "⚖️ Balance exercises prevent falls",
            "🧘 Flexibility work for mobility",
            "Protein: 2.0g/kg minimum (sarcopenia prevention)",
            "Intensity: Start beginner, progress slowly",
        ],
    )


def teen_athlete(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not (13 <= ctx.personal.age <= 17):
        return None
    if ctx.workout.activity_level != "extreme" or not ctx.is_weight_loss:
        return None
    return warning(
        "TEEN_ATHLETE_RESTRICTION",
        "Teen athletes should NEVER restrict calories during growth",
        recommendations=[
            "Still growing (growth plates open until ~18)",
            "High energy needs for development",
            "Hormonal development critical",
            "Athletic performance needs fuel",
            "Recommended: Maintenance or surplus calories only",
        ],
    )


def menopause_age_range(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.personal.gender != "female" or not (45 <= ctx.personal.age <= 55):
        return None
    return warning(
        "MENOPAUSE_AGE_RANGE",
        "Potential perimenopause/menopause - special considerations apply",
        recommendations=[
            "Metabolism may slow by additional 5-10%",
            "💪 Resistance training 3-4×/week (bone density)",
            "🥩 Higher protein (2.0g/kg for muscle preservation)",
            "🧘 Include balance and flexibility work",
            "😴 Prioritize sleep (hormonal changes affect it)",
            "Timeline may need 10-15% longer than younger women",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# MEDICAL
# ══════════════════════════════════════════════════════════════════════════════

def medical_supervision(ctx: PlanContext) -> Optional[ValidationFinding]:
    high_risk = [c for c in ctx.body.medical_conditions if c in HIGH_RISK_CONDITIONS]
    if not high_risk or not ctx.is_aggressive:
        return None
    return warning(
        "MEDICAL_SUPERVISION",
        f"Medical condition detected: {', '.join(high_risk)}",
        recommendations=[
            "🩺 Consult doctor before starting",
            "Using conservative deficit (15% max)",
            "Monitor health markers regularly",
        ],
    )


def heart_disease_clearance(ctx: PlanContext) -> Optional[ValidationFinding]:
    if "heart-disease" not in ctx.body.medical_conditions:
        return None
    return warning(
        "HEART_DISEASE_CLEARANCE",
        "Heart disease detected - medical clearance REQUIRED before starting",
        recommendations=[
            "🩺 Get doctor approval before beginning exercise",
            "May need cardiac stress test",
            "Start with cardiac rehabilitation if available",
            "Monitor heart rate during all sessions",
            "Stop immediately if chest pain, dizziness, or shortness of breath",
            "Focus on moderate-intensity continuous exercise",
            "Intensity capped at: intermediate (max)",
        ],
    )


def medication_effects(ctx: PlanContext) -> Optional[ValidationFinding]:
    if not _contains_any(ctx.body.medications, METABOLISM_MEDICATIONS):
        return None
    return warning(
        "MEDICATION_EFFECTS",
        "Medications may affect metabolism and weight management",
        recommendations=[
            "💊 Discuss plans with prescribing doctor",
            "📊 Dosages may need adjustment as weight changes",
            "⚖️ Some weight changes may be water weight",
            "Using conservative TDEE estimates to account for variability",
        ],
    )


def physical_limitation_intensity(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.workout.intensity != "advanced":
        return None
    if not _contains_any(ctx.body.physical_limitations, HIGH_IMPACT_LIMITATIONS):
        return None
    return warning(
        "PHYSICAL_LIMITATION_INTENSITY",
        "Physical limitations detected with high intensity selected",
        recommendations=[
            "Auto-reducing to intermediate intensity for safety",
            "Focus on low-impact exercises",
            "Emphasize proper form over weight/speed",
            "Include mobility and flexibility work",
            "Consider physical therapy assessment",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# TRAINING & GOALS
# ══════════════════════════════════════════════════════════════════════════════

def body_recomp(ctx: PlanContext) -> Optional[ValidationFinding]:
    goals = ctx.workout.primary_goals
    if not ("muscle-gain" in goals and "weight-loss" in goals):
        return None

    is_novice = ctx.workout.workout_experience_years < 2
    is_overweight = bool(ctx.body_fat.value) and ctx.body_fat.value > 20
    if is_novice or is_overweight:
        return warning(
            "BODY_RECOMP_POSSIBLE",
            "Body recomposition is possible!",
            recommendations=[
                "Eat at maintenance calories",
                "Very high protein (2.4g/kg)",
                "Progressive strength training 4-5x/week",
                "Expect: Slow fat loss + muscle gains",
            ],
        )
    return warning(
        "BODY_RECOMP_SLOW",
        "Body recomposition will be very slow",
        recommendations=[
            "Recommend: Cut to goal weight first, then bulk",
            "Or: Accept very slow progress with recomp",
        ],
    )


def concurrent_training_interference(ctx: PlanContext) -> Optional[ValidationFinding]:
    goals = ctx.workout.primary_goals
    if not ("muscle-gain" in goals and "endurance" in goals):
        return None
    return warning(
        "CONCURRENT_TRAINING_INTERFERENCE",
        "Cardio + muscle building: Interference effect may slow progress",
        impact="Optimal: Focus muscle gain first (12 weeks), then endurance (8 weeks)",
        recommendations=[
            "✅ Prioritize ONE goal as primary for faster results",
            "✅ If both: Do strength first, cardio after (same session)",
            "✅ Limit cardio to 2-3 moderate sessions/week (20-30 min)",
            "✅ Ensure calorie surplus if bulking",
            "✅ Consider separating sessions by 6+ hours",
        ],
    )


def no_exercise_planned(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.workout.workout_frequency_per_week != 0 or not ctx.is_weight_loss:
        return None
    return warning(
        "NO_EXERCISE_PLANNED",
        "No exercise planned - weight loss relies entirely on diet",
        impact="Slower progress, increased muscle loss",
        recommendations=[
            "Add at least 2 resistance sessions/week",
            "Benefits: Preserves muscle mass",
            "Benefits: Improves health beyond weight",
            "Benefits: Creates larger calorie deficit",
            "Benefits: Increases metabolism long-term",
        ],
    )


def high_training_volume(ctx: PlanContext) -> Optional[ValidationFinding]:
    hours = ctx.weekly_training_hours
    if hours <= HIGH_VOLUME_HOURS or ctx.workout.intensity != "advanced":
        return None
    return warning(
        "HIGH_TRAINING_VOLUME",
        f"High volume ({hours:.1f} hrs/week) increases overtraining risk",
        risks=[
            "Overtraining syndrome",
            "Elevated resting heart rate",
            "Mood disturbances",
            "Performance decline",
            "Injury risk",
            "Immune suppression",
        ],
        recommendations=[
            "😴 Ensure 8-9 hours sleep (critical)",
            "📅 Include 1-2 full rest days",
            "📊 Monitor fatigue and performance",
            "🔄 Consider periodization",
        ],
    )


def limited_equipment_muscle_gain(ctx: PlanContext) -> Optional[ValidationFinding]:
    workout = ctx.workout
    if "muscle-gain" not in workout.primary_goals:
        return None
    if workout.location != "home" or workout.equipment:
        return None
    return warning(
        "LIMITED_EQUIPMENT_MUSCLE_GAIN",
        "Building muscle at home with no equipment is challenging",
        impact="Bodyweight exercises have progression limits",
        recommendations=[
            "Add basic equipment: Adjustable dumbbells, resistance bands, pull-up bar",
            "OR: Focus on calisthenics progression (slower but effective)",
            "OR: Join gym for optimal muscle building equipment",
        ],
    )


def limited_vegan_protein(ctx: PlanContext) -> Optional[ValidationFinding]:
    if ctx.diet.diet_type != "vegan":
        return None
    if not _contains_any(ctx.diet.allergies, VEGAN_PROTEIN_SOURCES):
        return None
    protein = macro_calculator.protein(ctx.weight, ctx.protein_goal)
    if protein <= VEGAN_PROTEIN_CEILING_G:
        return None
    return warning(
        "LIMITED_VEGAN_PROTEIN",
        "Limited vegan protein sources due to allergies",
        recommendations=[
            f"Target protein ({protein}g) may be difficult - adjusted to {round(protein * 0.9)}g",
            "💊 Consider pea/rice protein powder",
            "🌾 Focus on quinoa, hemp, chia",
            "🥦 Combine incomplete proteins",
            "🩺 May need B12, iron, omega-3 supplements",
        ],
    )


# ══════════════════════════════════════════════════════════════════════════════
# RULE TABLE — evaluated in list order
# ══════════════════════════════════════════════════════════════════════════════

WARNING_RULES: list[Rule] = [
    aggressive_timeline,
    insufficient_sleep,
    medical_supervision,
    body_recomp,
    alcohol_impact,
    tobacco_impact,
    elderly_user,
    teen_athlete,
    heart_disease_clearance,
    concurrent_training_interference,
    obesity_adjusted_rates,
    no_exercise_planned,
    high_training_volume,
    menopause_age_range,
    limited_equipment_muscle_gain,
    physical_limitation_intensity,
    low_diet_readiness,
    limited_vegan_protein,
    medication_effects,
    excessive_gain_rate,
    multiple_lifestyle_factors,
]


def run_warning_checks(ctx: PlanContext) -> list[ValidationFinding]:
    return [finding for finding in (rule(ctx) for rule in WARNING_RULES) if finding is not None]
