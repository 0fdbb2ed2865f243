"""Cross-signal synthesis stages"""

from .pattern_recognizer import Pattern, PatternType, recognize_patterns
from .stakeholder_impact import StakeholderImpact, StakeholderMatrix, assess_stakeholder_impact
from .strategic_implications import StrategicImplications, derive_strategic_implications
from .response_strategy import ActionPlan, ResponseStrategy, plan_response
from .elite_insights import EliteInsights, generate_elite_insights

__all__ = [
    "Pattern",
    "PatternType",
    "recognize_patterns",
    "StakeholderImpact",
    "StakeholderMatrix",
    "assess_stakeholder_impact",
    "StrategicImplications",
    "derive_strategic_implications",
    "ActionPlan",
    "ResponseStrategy",
    "plan_response",
    "EliteInsights",
    "generate_elite_insights",
]
