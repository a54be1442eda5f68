"""
FitPlan — Validation Engine Tests
Run with: pytest test_validation_engine.py -v

Baseline profile: 30 y/o male desk worker, 175 cm, 80 kg → 70 kg over
16 weeks, 4 × 60 min intermediate strength sessions, 8 h sleep.
"""

import pytest
from pydantic import ValidationError

from schemas import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences


def make_personal(**overrides) -> PersonalInfo:
    data = dict(age=30, gender="male", country="US", wake_time="07:00",
                sleep_time="23:00", occupation_type="desk_job")
    data.update(overrides)
    return PersonalInfo(**data)


def make_diet(**overrides) -> DietPreferences:
    data = dict(
        diet_type="non-veg",
        drinks_enough_water=True, limits_sugary_drinks=True, eats_regular_meals=True,
        avoids_late_night_eating=True, controls_portion_sizes=True,
        eats_5_servings_fruits_veggies=True, limits_refined_sugar=True,
        includes_healthy_fats=True,
    )
    data.update(overrides)
    return DietPreferences(**data)


def make_body(**overrides) -> BodyAnalysis:
    data = dict(height_cm=175, current_weight_kg=80, target_weight_kg=70,
                target_timeline_weeks=16, stress_level="moderate")
    data.update(overrides)
    return BodyAnalysis(**data)


def make_workout(**overrides) -> WorkoutPreferences:
    data = dict(location="gym", equipment=["dumbbells", "barbell"], time_preference=60,
                intensity="intermediate", workout_types=["strength"],
                primary_goals=["weight-loss"], activity_level="moderate",
                workout_experience_years=2, workout_frequency_per_week=4)
    data.update(overrides)
    return WorkoutPreferences(**data)


def run(personal=None, diet=None, body=None, workout=None):
    from validation_engine import validate_user_plan
    return validate_user_plan(
        personal or make_personal(),
        diet or make_diet(),
        body or make_body(),
        workout or make_workout(),
    )


def codes(findings):
    return [f.code for f in findings]


# Modest 0.25 kg/week cut used wherever a rule should fire without tripping the rate checks
def conservative_body(**overrides) -> BodyAnalysis:
    return make_body(target_weight_kg=76, **overrides)


# ══════════════════════════════════════════════════════════════════════════════
# BASELINE PLAN
# ══════════════════════════════════════════════════════════════════════════════

class TestBaselinePlan:

    def setup_method(self):
        self.result = run()

    def test_can_proceed(self):
        assert self.result.can_proceed is True
        assert self.result.has_errors is False

    def test_metrics(self):
        m = self.result.calculated_metrics
        assert m.bmr == 1749
        assert m.tdee == 2367
        assert m.timeline == 16

    def test_deficit_capped_at_20_percent(self):
        m = self.result.calculated_metrics
        assert m.target_calories == 1893
        assert m.weekly_rate == pytest.approx(0.43)

    def test_target_below_tdee_and_above_bmr(self):
        m = self.result.calculated_metrics
        assert m.bmr <= m.target_calories < m.tdee

    def test_macros(self):
        m = self.result.calculated_metrics
        assert (m.protein, m.carbs, m.fat) == (176, 134, 73)

    def test_warnings_in_order(self):
        assert codes(self.result.warnings) == ["DEFICIT_LIMITED_FOR_SAFETY", "AGGRESSIVE_TIMELINE"]

    def test_deficit_limited_message(self):
        finding = self.result.warnings[0]
        assert finding.message == "Calorie deficit reduced from 29% to 20% due to recommended safety limits"
        assert finding.can_proceed is True

    def test_refeed_and_diet_break(self):
        schedule = self.result.adjustments.refeed_schedule
        assert schedule is not None
        assert schedule.needs_refeeds is True
        assert schedule.refeed_frequency == "weekly"
        assert schedule.needs_diet_break is True
        assert schedule.diet_break_week == 8

    def test_no_medical_notes(self):
        assert self.result.adjustments.medical_notes is None

    def test_deterministic(self):
        assert run() == self.result


class TestGoalDirection:

    def test_weight_gain_surplus(self):
        result = run(body=make_body(current_weight_kg=70, target_weight_kg=75, target_timeline_weeks=20),
                     workout=make_workout(primary_goals=["muscle-gain"]))
        m = result.calculated_metrics
        assert m.target_calories > m.tdee
        assert m.weekly_rate == pytest.approx(0.25)
        assert result.adjustments.refeed_schedule is None

    def test_maintenance(self):
        result = run(body=make_body(target_weight_kg=80), workout=make_workout(primary_goals=["general-fitness"]))
        m = result.calculated_metrics
        assert m.target_calories == m.tdee
        assert m.weekly_rate == 0
        assert m.protein == 128
        assert result.warnings == ()

    def test_short_cut_has_no_refeeds(self):
        result = run(body=make_body(target_weight_kg=76, target_timeline_weeks=8))
        assert result.adjustments.refeed_schedule is None

    def test_bmr_floor_skips_refeeds(self):
        # 20% cap lands below BMR, so the realized deficit is about 16%
        result = run(personal=make_personal(age=50), workout=make_workout(workout_frequency_per_week=2))
        m = result.calculated_metrics
        assert result.can_proceed
        assert m.target_calories == m.bmr
        assert (m.tdee - m.target_calories) / m.tdee < 0.20
        schedule = result.adjustments.refeed_schedule
        assert schedule.needs_refeeds is False
        assert schedule.needs_diet_break is True


# ══════════════════════════════════════════════════════════════════════════════
# DEFICIT LIMITING
# ══════════════════════════════════════════════════════════════════════════════

class TestDeficitLimit:

    def setup_method(self):
        from validation_engine import apply_deficit_limit
        self.limit = apply_deficit_limit

    def test_within_cap_untouched(self):
        limit = self.limit(2100, 2500, 1600, "moderate", False)
        assert limit.was_limited is False
        assert limit.adjusted_calories == 2100
        assert limit.limit_reason is None

    def test_default_cap(self):
        limit = self.limit(1500, 2500, 1600, "moderate", False)
        assert limit.was_limited is True
        assert limit.adjusted_calories == 2000
        assert limit.original_deficit_percent == pytest.approx(0.4)
        assert limit.limit_reason == "recommended safety limits"

    def test_capped_target_floored_at_bmr(self):
        assert self.limit(1500, 2500, 2100, "moderate", False).adjusted_calories == 2100

    def test_high_stress_cap(self):
        limit = self.limit(1500, 2500, 1600, "high", False)
        assert limit.adjusted_calories == 2125
        assert limit.limit_reason == "high stress level"

    def test_medical_cap(self):
        limit = self.limit(1500, 2500, 1600, "low", True)
        assert limit.adjusted_deficit_percent == pytest.approx(0.15)
        assert limit.limit_reason == "medical conditions"

    def test_stress_named_before_medical(self):
        assert self.limit(1500, 2500, 1600, "high", True).limit_reason == "high stress level"


class TestDeficitLimitInPlan:

    def _heavy_cut(self, **body):
        return run(body=make_body(current_weight_kg=100, target_weight_kg=90, target_timeline_weeks=12, **body))

    def test_high_stress_caps_at_15_percent(self):
        result = self._heavy_cut(stress_level="high")
        m = result.calculated_metrics
        assert result.can_proceed
        assert (m.tdee - m.target_calories) / m.tdee <= 0.16
        assert m.target_calories >= m.bmr
        limited = result.warnings[0]
        assert limited.code == "DEFICIT_LIMITED_FOR_SAFETY"
        assert "high stress level" in limited.message

    def test_medical_condition_caps_at_15_percent(self):
        result = self._heavy_cut(stress_level="low", medical_conditions=["diabetes-type2"])
        assert "medical conditions" in result.warnings[0].message
        assert "MEDICAL_SUPERVISION" in codes(result.warnings)

    def test_stress_reason_wins(self):
        result = self._heavy_cut(stress_level="high", medical_conditions=["hypertension"])
        assert "high stress level" in result.warnings[0].message

    def test_blocked_plan_still_capped(self):
        result = run(body=make_body(current_weight_kg=100, target_weight_kg=80,
                                    target_timeline_weeks=8, stress_level="high"))
        m = result.calculated_metrics
        assert "EXTREMELY_UNREALISTIC" in codes(result.errors)
        assert (m.tdee - m.target_calories) / m.tdee <= 0.16
        assert result.warnings == ()

    def test_small_deficit_not_limited(self):
        result = run(body=conservative_body())
        assert "DEFICIT_LIMITED_FOR_SAFETY" not in codes(result.warnings)


# ══════════════════════════════════════════════════════════════════════════════
# BLOCKING CHECKS
# ══════════════════════════════════════════════════════════════════════════════

class TestBlockingChecks:

    def test_pregnancy_blocks_deficit(self):
        result = run(personal=make_personal(gender="female"),
                     body=make_body(height_cm=165, current_weight_kg=70, target_weight_kg=60,
                                    pregnancy_status=True, pregnancy_trimester=2))
        assert "UNSAFE_PREGNANCY_BREASTFEEDING" in codes(result.errors)
        assert result.can_proceed is False
        assert result.warnings == ()

    def test_breastfeeding_maintenance_allowed(self):
        result = run(personal=make_personal(gender="female"),
                     body=make_body(height_cm=165, current_weight_kg=70, target_weight_kg=70,
                                    breastfeeding_status=True),
                     workout=make_workout(primary_goals=["general-fitness"]))
        assert result.errors == ()

    def test_extremely_unrealistic_offers_longer_timeline(self):
        result = run(body=make_body(current_weight_kg=100, target_weight_kg=72, target_timeline_weeks=10))
        finding = next(f for f in result.errors if f.code == "EXTREMELY_UNREALISTIC")
        assert finding.can_proceed is False
        assert finding.alternatives[0].option == "extend_timeline"
        assert finding.alternatives[0].new_weeks == 38

    def test_target_bmi_underweight(self):
        result = run(body=make_body(target_weight_kg=50, target_timeline_weeks=60))
        assert codes(result.errors) == ["TARGET_BMI_UNDERWEIGHT"]
        assert "Minimum safe weight: 57kg" in result.errors[0].recommendations

    def test_essential_body_fat_male(self):
        result = run(body=make_body(body_fat_percentage=5))
        assert "AT_ESSENTIAL_BODY_FAT" in codes(result.errors)

    def test_essential_body_fat_female(self):
        result = run(personal=make_personal(gender="female"), body=make_body(body_fat_percentage=12))
        assert "AT_ESSENTIAL_BODY_FAT" in codes(result.errors)

    def test_body_fat_above_essential(self):
        result = run(body=make_body(body_fat_percentage=15))
        assert "AT_ESSENTIAL_BODY_FAT" not in codes(result.errors)

    def test_below_bmr_and_absolute_minimum_female(self):
        # Sedentary 60 y/o: TDEE barely clears BMR, so any deficit drops below it
        result = run(personal=make_personal(age=60, gender="female"),
                     body=make_body(height_cm=160, current_weight_kg=60, target_weight_kg=58,
                                    target_timeline_weeks=20),
                     workout=make_workout(workout_frequency_per_week=0))
        assert codes(result.errors) == ["BELOW_BMR", "BELOW_ABSOLUTE_MINIMUM"]
        assert "1200 cal" in result.errors[1].message

    def test_absolute_minimum_male(self):
        result = run(personal=make_personal(age=60),
                     body=make_body(height_cm=160, current_weight_kg=55, target_weight_kg=53,
                                    target_timeline_weeks=20),
                     workout=make_workout(workout_frequency_per_week=0))
        assert "BELOW_ABSOLUTE_MINIMUM" in codes(result.errors)
        assert "1500 cal" in result.errors[-1].message

    def test_insufficient_exercise(self):
        result = run(body=make_body(target_timeline_weeks=12),
                     workout=make_workout(workout_frequency_per_week=1))
        assert codes(result.errors) == ["INSUFFICIENT_EXERCISE"]
        finding = result.errors[0]
        assert "1 workout(s)/week" in finding.message
        assert finding.risks

    def test_conflicting_goals(self):
        result = run(workout=make_workout(primary_goals=["weight-loss", "weight-gain"]))
        assert codes(result.errors) == ["CONFLICTING_GOALS"]
        assert result.warnings == ()

    def test_no_meals_enabled(self):
        diet = make_diet(breakfast_enabled=False, lunch_enabled=False,
                         dinner_enabled=False, snacks_enabled=False)
        assert "NO_MEALS_ENABLED" in codes(run(diet=diet).errors)

    def test_single_meal_is_enough(self):
        diet = make_diet(breakfast_enabled=False, lunch_enabled=False, snacks_enabled=False)
        assert "NO_MEALS_ENABLED" not in codes(run(diet=diet).errors)

    def test_severe_sleep_with_aggressive_goal(self):
        result = run(personal=make_personal(wake_time="04:30", sleep_time="00:00"))
        assert "SEVERE_SLEEP_DEPRIVATION" in codes(result.errors)

    def test_severe_sleep_with_gentle_goal_only_warns(self):
        result = run(personal=make_personal(wake_time="04:30", sleep_time="00:00"), body=conservative_body())
        assert result.errors == ()
        sleep = next(f for f in result.warnings if f.code == "INSUFFICIENT_SLEEP")
        assert sleep.impact == "Fat loss ~25% slower"

    def test_excessive_training_volume(self):
        result = run(body=make_body(target_weight_kg=80),
                     workout=make_workout(workout_frequency_per_week=7, time_preference=150))
        assert "EXCESSIVE_TRAINING_VOLUME" in codes(result.errors)

    def test_very_active_occupation_allows_more_volume(self):
        result = run(personal=make_personal(occupation_type="very_active"),
                     body=make_body(target_weight_kg=80),
                     workout=make_workout(workout_frequency_per_week=7, time_preference=150,
                                          intensity="advanced", primary_goals=["endurance"]))
        assert result.errors == ()
        assert "HIGH_TRAINING_VOLUME" in codes(result.warnings)

    def test_errors_suppress_warnings(self):
        # Would also raise NO_EXERCISE_PLANNED if warnings ran
        result = run(personal=make_personal(age=60, gender="female"),
                     body=make_body(height_cm=160, current_weight_kg=60, target_weight_kg=58,
                                    target_timeline_weeks=20),
                     workout=make_workout(workout_frequency_per_week=0))
        assert result.has_errors
        assert result.has_warnings is False

    def test_all_errors_are_blocked(self):
        result = run(workout=make_workout(primary_goals=["weight-loss", "weight-gain"]),
                     diet=make_diet(breakfast_enabled=False, lunch_enabled=False,
                                    dinner_enabled=False, snacks_enabled=False))
        assert len(result.errors) == 2
        assert all(f.status == "BLOCKED" and not f.can_proceed for f in result.errors)


# ══════════════════════════════════════════════════════════════════════════════
# WARNING CHECKS
# ══════════════════════════════════════════════════════════════════════════════

class TestWarningChecks:

    def test_insufficient_sleep_impact(self):
        result = run(personal=make_personal(wake_time="06:00", sleep_time="00:00"), body=conservative_body())
        sleep = next(f for f in result.warnings if f.code == "INSUFFICIENT_SLEEP")
        assert sleep.impact == "Fat loss ~10% slower"
        assert sleep.status == "WARNING"

    def test_body_recomp_possible_for_novice(self):
        result = run(body=conservative_body(),
                     workout=make_workout(primary_goals=["weight-loss", "muscle-gain"],
                                          workout_experience_years=1))
        assert "BODY_RECOMP_POSSIBLE" in codes(result.warnings)

    def test_body_recomp_slow_for_lean_veteran(self):
        result = run(body=conservative_body(body_fat_percentage=15),
                     workout=make_workout(primary_goals=["weight-loss", "muscle-gain"],
                                          workout_experience_years=5))
        assert "BODY_RECOMP_SLOW" in codes(result.warnings)

    def test_alcohol_and_low_readiness_with_aggressive_goal(self):
        diet = DietPreferences(drinks_alcohol=True)
        found = codes(run(diet=diet).warnings)
        assert "ALCOHOL_IMPACT" in found
        assert "LOW_DIET_READINESS" in found

    def test_tobacco_and_multiple_factors(self):
        found = codes(run(diet=make_diet(smokes_tobacco=True, drinks_alcohol=True)).warnings)
        assert "TOBACCO_IMPACT" in found
        assert "MULTIPLE_LIFESTYLE_FACTORS" in found

    def test_single_lifestyle_factor_not_flagged(self):
        found = codes(run(diet=make_diet(smokes_tobacco=True)).warnings)
        assert "MULTIPLE_LIFESTYLE_FACTORS" not in found

    def test_elderly_user(self):
        result = run(personal=make_personal(age=76),
                     body=make_body(target_weight_kg=78))
        assert result.errors == ()
        assert "ELDERLY_USER" in codes(result.warnings)

    def test_teen_athlete_restriction(self):
        result = run(personal=make_personal(age=16),
                     body=make_body(current_weight_kg=70, target_weight_kg=68),
                     workout=make_workout(activity_level="extreme"))
        assert result.errors == ()
        assert "TEEN_ATHLETE_RESTRICTION" in codes(result.warnings)

    def test_menopause_age_range(self):
        result = run(personal=make_personal(age=50, gender="female"),
                     body=make_body(height_cm=165, current_weight_kg=70, target_weight_kg=68))
        assert result.errors == ()
        assert "MENOPAUSE_AGE_RANGE" in codes(result.warnings)

    def test_heart_disease_clearance(self):
        result = run(body=conservative_body(medical_conditions=["heart-disease"]))
        assert "HEART_DISEASE_CLEARANCE" in codes(result.warnings)
        assert "🩺 Monitor blood pressure regularly" in result.adjustments.medical_notes

    def test_concurrent_training_interference(self):
        result = run(body=make_body(target_weight_kg=80),
                     workout=make_workout(primary_goals=["muscle-gain", "endurance"]))
        assert codes(result.warnings) == ["CONCURRENT_TRAINING_INTERFERENCE"]

    def test_obesity_adjusted_rates(self):
        result = run(body=make_body(current_weight_kg=110, target_weight_kg=100, target_timeline_weeks=20))
        assert result.errors == ()
        assert "OBESITY_ADJUSTED_RATES" in codes(result.warnings)

    def test_no_exercise_planned(self):
        result = run(body=conservative_body(), workout=make_workout(workout_frequency_per_week=0))
        assert result.errors == ()
        assert "NO_EXERCISE_PLANNED" in codes(result.warnings)

    def test_limited_equipment_muscle_gain(self):
        result = run(body=make_body(target_weight_kg=80),
                     workout=make_workout(location="home", equipment=[], primary_goals=["muscle-gain"]))
        assert "LIMITED_EQUIPMENT_MUSCLE_GAIN" in codes(result.warnings)

    def test_physical_limitation_with_advanced_intensity(self):
        result = run(body=make_body(physical_limitations=["Knee-issues from running"]),
                     workout=make_workout(intensity="advanced"))
        assert "PHYSICAL_LIMITATION_INTENSITY" in codes(result.warnings)

    def test_limited_vegan_protein(self):
        result = run(diet=make_diet(diet_type="vegan", allergies=["Soy"]))
        assert "LIMITED_VEGAN_PROTEIN" in codes(result.warnings)

    def test_medication_effects(self):
        result = run(body=make_body(medications=["Levothyroxine 50mcg"]))
        assert "MEDICATION_EFFECTS" in codes(result.warnings)

    def test_excessive_gain_rate(self):
        result = run(body=make_body(current_weight_kg=60, target_weight_kg=70, target_timeline_weeks=10),
                     workout=make_workout(primary_goals=["muscle-gain"]))
        found = codes(result.warnings)
        assert "EXCESSIVE_GAIN_RATE" in found
        assert "AGGRESSIVE_TIMELINE" not in found


# ══════════════════════════════════════════════════════════════════════════════
# MEDICAL ADJUSTMENTS & REFEEDS
# ══════════════════════════════════════════════════════════════════════════════

class TestMedicalAdjustments:

    def setup_method(self):
        from macros import MacroTarget
        from plan_adjustments import apply_medical_adjustments
        self.apply = apply_medical_adjustments
        self.macros = MacroTarget(protein=150, carbs=200, fat=60)

    def test_no_conditions(self):
        adj = self.apply(2000, self.macros, [])
        assert adj.tdee == 2000
        assert adj.macros == self.macros
        assert adj.notes == ()

    def test_hypothyroid(self):
        adj = self.apply(2000, self.macros, ["hypothyroid"])
        assert adj.tdee == pytest.approx(1800)
        assert "⚠️ TDEE reduced 10% due to hypothyroidism" in adj.notes

    def test_hyperthyroid(self):
        adj = self.apply(2000, self.macros, ["graves-disease"])
        assert adj.tdee == pytest.approx(2300)

    def test_hypothyroid_wins_over_hyperthyroid(self):
        adj = self.apply(2000, self.macros, ["hypothyroid", "hyperthyroid"])
        assert adj.tdee == pytest.approx(1800)
        assert not any("increased 15%" in note for note in adj.notes)

    def test_pcos_trades_carbs_for_fat(self):
        adj = self.apply(2000, self.macros, ["pcos"])
        assert adj.macros.carbs == 150
        assert adj.macros.fat == 82
        assert adj.macros.protein == 150

    def test_cardiovascular_notes_only(self):
        adj = self.apply(2000, self.macros, ["hypertension"])
        assert adj.tdee == 2000
        assert adj.macros == self.macros
        assert len(adj.notes) == 2


class TestMedicalAdjustmentsInPlan:

    def _cut(self, conditions):
        return run(body=make_body(target_weight_kg=75, target_timeline_weeks=12, medical_conditions=conditions))

    def test_hyperthyroid_raises_tdee(self):
        baseline = self._cut([])
        hyper = self._cut(["hyperthyroid"])
        assert hyper.calculated_metrics.tdee == pytest.approx(baseline.calculated_metrics.tdee * 1.15, abs=1)
        assert "⚠️ TDEE increased 15% due to hyperthyroidism" in hyper.adjustments.medical_notes

    def test_hypothyroid_wins(self):
        baseline = self._cut([])
        both = self._cut(["hypothyroid", "hyperthyroid"])
        assert both.calculated_metrics.tdee == pytest.approx(baseline.calculated_metrics.tdee * 0.90, abs=1)
        assert "⚠️ TDEE reduced 10% due to hypothyroidism" in both.adjustments.medical_notes

    def test_diabetes_notes(self):
        result = self._cut(["diabetes-type1"])
        assert "⚠️ Lower carb (75%) for blood sugar management" in result.adjustments.medical_notes


class TestRefeedSchedule:

    def setup_method(self):
        from plan_adjustments import calculate_refeed_schedule
        self.schedule = calculate_refeed_schedule

    def test_long_deep_cut(self):
        s = self.schedule(24, 0.25, "weight-loss")
        assert s.needs_refeeds and s.needs_diet_break
        assert s.diet_break_week == 12
        assert s.explanation

    def test_shallow_deficit_no_refeeds(self):
        s = self.schedule(12, 0.19, "weight-loss")
        assert s.needs_refeeds is False
        assert s.needs_diet_break is False
        assert s.explanation == ()

    def test_diet_break_without_refeeds(self):
        s = self.schedule(20, 0.10, "weight-loss")
        assert s.needs_refeeds is False
        assert s.needs_diet_break is True
        assert s.diet_break_week == 10

    def test_gain_never_scheduled(self):
        s = self.schedule(20, 0.30, "weight-gain")
        assert not (s.needs_refeeds or s.needs_diet_break)


class TestMacroCalculator:

    def setup_method(self):
        from macros import MacroCalculator
        self.calc = MacroCalculator()

    def test_protein_by_goal(self):
        assert self.calc.protein(80, "cutting") == 176
        assert self.calc.protein(80, "bulking") == 144
        assert self.calc.protein(80, "unknown") == 128

    def test_carb_share(self):
        assert self.calc.carb_share(4, "advanced") == 0.50
        assert self.calc.carb_share(3, "beginner") == 0.45
        assert self.calc.carb_share(2, "advanced") == 0.40


# ══════════════════════════════════════════════════════════════════════════════
# INPUT SCHEMAS
# ══════════════════════════════════════════════════════════════════════════════

class TestSchemas:

    def test_age_lower_bound(self):
        with pytest.raises(ValidationError):
            make_personal(age=12)

    def test_clock_format(self):
        with pytest.raises(ValidationError):
            make_personal(wake_time="25:00")

    def test_timeline_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_body(target_timeline_weeks=0)

    def test_unknown_occupation_rejected(self):
        with pytest.raises(ValidationError):
            make_personal(occupation_type="astronaut")

    def test_records_are_frozen(self):
        body = make_body()
        with pytest.raises(ValidationError):
            body.current_weight_kg = 90

    def test_record_config(self):
        assert BodyAnalysis.model_config["frozen"] is True
        assert WorkoutPreferences.model_config["use_enum_values"] is True

    def test_enum_values_stored_as_strings(self):
        assert make_workout().intensity == "intermediate"
        assert make_diet(diet_type="vegan").diet_type == "vegan"


class TestSettings:

    def test_defaults(self):
        from config import Settings
        s = Settings()
        assert s.APP_NAME == "FitPlan"
        assert s.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch):
        from config import Settings
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"
