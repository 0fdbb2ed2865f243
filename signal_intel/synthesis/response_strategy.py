"""Response Strategy Planner - four time-horizon action plans"""

from typing import Dict, List

from pydantic import BaseModel, Field
from loguru import logger

from ..core.signal import Priority
from .strategic_implications import StrategicImplications, Intervention


class ActionPlan(BaseModel):
    priority: Priority
    actions: List[str] = Field(default_factory=list)
    messaging: List[str] = Field(default_factory=list)
    channels: List[str] = Field(default_factory=list)
    success_metrics: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ResponseStrategy(BaseModel):
    immediate_24h: ActionPlan
    short_term_7d: ActionPlan
    medium_term_30d: ActionPlan
    long_term_90d: ActionPlan

    class Config:
        frozen = True


INTERVENTION_PRIORITY: Dict[Intervention, Priority] = {
    Intervention.URGENT: Priority.CRITICAL,
    Intervention.RESPOND: Priority.HIGH,
    Intervention.MONITOR: Priority.MEDIUM,
    Intervention.NONE: Priority.LOW,
}

# Horizon templates: everything except priority is fixed
PLAN_TEMPLATES: Dict[str, Dict[str, List[str]]] = {
    "immediate_24h": {
        "actions": [
            "Executive team briefing",
            "Prepare holding statement",
            "Monitor social media",
            "Alert PR team",
        ],
        "messaging": [
            "We are aware and monitoring",
            "Customer success remains our priority",
            "More information coming soon",
        ],
        "channels": ["Internal comms", "Social media monitoring", "Customer service"],
        "success_metrics": [
            "Response time < 2 hours",
            "No negative viral spread",
            "Customer inquiries addressed",
        ],
    },
    "short_term_7d": {
        "actions": [
            "Develop comprehensive response",
            "Media outreach",
            "Customer communication",
            "Employee town hall",
        ],
        "messaging": [
            "Our position and differentiation",
            "Customer value proposition",
            "Future vision and roadmap",
        ],
        "channels": ["Press release", "Blog post", "Customer email", "All hands meeting"],
        "success_metrics": ["Media coverage tone", "Customer retention", "Employee sentiment"],
    },
    "medium_term_30d": {
        "actions": [
            "Thought leadership campaign",
            "Customer success showcase",
            "Analyst briefings",
            "Partnership announcements",
        ],
        "messaging": [
            "Industry leadership position",
            "Innovation and vision",
            "Customer outcomes",
        ],
        "channels": ["Tier 1 media", "Industry events", "Analyst relations", "Content marketing"],
        "success_metrics": ["Share of voice", "Message penetration", "Lead generation"],
    },
    "long_term_90d": {
        "actions": [
            "Strategic narrative development",
            "Executive visibility program",
            "Industry positioning",
            "Awards and recognition",
        ],
        "messaging": [
            "Category definition",
            "Vision for industry",
            "Transformational outcomes",
        ],
        "channels": ["Speaking engagements", "Op-eds", "Podcasts", "Industry reports"],
        "success_metrics": ["Brand perception", "Market position", "Thought leadership score"],
    },
}


def base_priority(implications: StrategicImplications) -> Priority:
    return INTERVENTION_PRIORITY[implications.reputation.intervention_required]


def build_action_plan(horizon: str, priority: Priority) -> ActionPlan:
    template = PLAN_TEMPLATES[horizon]

    return ActionPlan(
        priority=priority,
        actions=list(template["actions"]),
        messaging=list(template["messaging"]),
        channels=list(template["channels"]),
        success_metrics=list(template["success_metrics"]),
    )


def plan_response(implications: StrategicImplications) -> ResponseStrategy:
    """
    Build the four horizon plans.

    Priority comes from the required intervention. The 7-day plan steps down
    one level when the base priority is critical, so the war-room effort stays
    concentrated in the first 24 hours.
    """
    priority = base_priority(implications)
    short_priority = priority.downgrade() if priority == Priority.CRITICAL else priority

    strategy = ResponseStrategy(
        immediate_24h=build_action_plan("immediate_24h", priority),
        short_term_7d=build_action_plan("short_term_7d", short_priority),
        medium_term_30d=build_action_plan("medium_term_30d", priority),
        long_term_90d=build_action_plan("long_term_90d", priority),
    )

    logger.info(f"Response strategy planned at {priority.value} priority")

    return strategy
