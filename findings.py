"""
FitPlan — Validation Findings
Result structures returned by the validation engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FindingStatus(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    BLOCKED = "BLOCKED"


# ══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURES
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Alternative:
    option: str
    description: str
    new_weeks: Optional[int] = None


@dataclass(frozen=True)
class ValidationFinding:
    status: FindingStatus
    code: str
    message: str
    impact: Optional[str] = None
    recommendations: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()
    alternatives: tuple[Alternative, ...] = ()
    can_proceed: bool = True


@dataclass(frozen=True)
class CalculatedMetrics:
    bmr: int
    tdee: int
    target_calories: int
    weekly_rate: float      # kg/week, 2dp
    protein: int            # g
    carbs: int              # g
    fat: int                # g
    timeline: int           # weeks


@dataclass(frozen=True)
class RefeedSchedule:
    needs_refeeds: bool
    needs_diet_break: bool
    refeed_frequency: Optional[str] = None
    diet_break_week: Optional[int] = None
    explanation: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlanAdjustments:
    refeed_schedule: Optional[RefeedSchedule] = None
    medical_notes: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class ValidationResults:
    errors: tuple[ValidationFinding, ...]
    warnings: tuple[ValidationFinding, ...]
    calculated_metrics: CalculatedMetrics
    adjustments: PlanAdjustments = field(default_factory=PlanAdjustments)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def can_proceed(self) -> bool:
        return not self.errors


# ══════════════════════════════════════════════════════════════════════════════
# CONSTRUCTORS
# ══════════════════════════════════════════════════════════════════════════════

def blocked(code: str, message: str, **details) -> ValidationFinding:
    return ValidationFinding(
        status=FindingStatus.BLOCKED, code=code, message=message,
        can_proceed=False, **_freeze(details),
    )


def warning(code: str, message: str, **details) -> ValidationFinding:
    return ValidationFinding(
        status=FindingStatus.WARNING, code=code, message=message,
        can_proceed=True, **_freeze(details),
    )


def _freeze(details: dict) -> dict:
    return {
        k: tuple(v) if isinstance(v, list) else v
        for k, v in details.items()
    }
