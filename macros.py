"""
FitPlan — Macro Calculator
Protein by goal, carbs by training volume, fat fills the remainder.
"""

from dataclasses import dataclass

PROTEIN_G_PER_KG = {
    "cutting":     2.2,   # muscle preservation in a deficit
    "recomp":      2.4,
    "maintenance": 1.6,
    "bulking":     1.8,
    "weight_gain": 1.6,
}
DEFAULT_PROTEIN_G_PER_KG = 1.6

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9


@dataclass(frozen=True)
class MacroTarget:
    protein: int
    carbs: int
    fat: int


class MacroCalculator:

    def protein(self, weight_kg: float, goal: str) -> int:
        return round(weight_kg * PROTEIN_G_PER_KG.get(goal, DEFAULT_PROTEIN_G_PER_KG))

    def carb_share(self, workout_frequency: int, intensity: str) -> float:
        """Share of post-protein calories given to carbs."""
        if intensity == "advanced" and workout_frequency >= 4:
            return 0.50
        if workout_frequency >= 3:
            return 0.45
        return 0.40

    def macros(
        self,
        calories: float,
        protein_g: int,
        workout_frequency: int,
        intensity: str,
    ) -> MacroTarget:
        remaining = calories - protein_g * KCAL_PER_G_PROTEIN
        carb_cals = remaining * self.carb_share(workout_frequency, intensity)
        fat_cals = remaining - carb_cals
        return MacroTarget(
            protein=protein_g,
            carbs=round(carb_cals / KCAL_PER_G_CARB),
            fat=round(fat_cals / KCAL_PER_G_FAT),
        )


macro_calculator = MacroCalculator()
