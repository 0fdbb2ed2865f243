"""Signal model - raw observations and their per-signal assessments"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime, timezone
from enum import Enum


class RankedEnum(str, Enum):
    """String enum whose members are ordered by declaration"""

    @property
    def rank(self) -> int:
        """Position in the severity ordering (0 = least severe)"""
        return list(type(self)).index(self)


class Magnitude(RankedEnum):
    """Severity of the event a signal describes"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Velocity(RankedEnum):
    """How fast a signal is spreading (fastest last)"""
    SLOW = "slow"
    MODERATE = "moderate"
    FAST = "fast"
    VIRAL = "viral"


class ConcernLevel(RankedEnum):
    """Stakeholder concern"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Priority(RankedEnum):
    """Action plan priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def downgrade(self) -> "Priority":
        """One level less urgent, floored at LOW"""
        members = list(Priority)
        return members[max(self.rank - 1, 0)]


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Fallbacks for text fields sent as explicit nulls
_TEXT_DEFAULTS = {"type": "general", "title": "", "source": "unknown"}


class Signal(BaseModel):
    """
    Raw external observation about the monitored organization.

    Everything except the title/source text is optional - scorers fall back
    to neutral defaults when fields are missing.
    """

    type: str = Field(default="general", description="Signal type (news, competitor, regulatory, ...)")
    title: str = Field(default="", description="Headline")
    content: Optional[str] = Field(None, description="Body text")
    source: str = Field(default="unknown", description="Publisher or platform name")

    entity: Optional[str] = Field(None, description="Entity the signal is about")
    entity_type: Optional[str] = Field(None, description="Kind of entity, e.g. 'competitor'")

    url: Optional[str] = Field(None, description="Link to the original item")
    published: Optional[datetime] = Field(None, description="Publication time")
    raw: Optional[Any] = Field(None, description="Untouched upstream payload")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "type": "competitor",
                "title": "Globex announces AI-powered analytics suite",
                "content": "Globex unveiled a new analytics platform targeting enterprise customers",
                "source": "TechCrunch",
                "entity": "Globex",
                "entity_type": "competitor",
                "url": "https://techcrunch.com/...",
                "published": "2026-10-19T09:30:00Z",
            }
        }

    @field_validator("type", "title", "source", mode="before")
    @classmethod
    def _none_to_default(cls, value, info):
        if value is None:
            return _TEXT_DEFAULTS[info.field_name]
        return value

    @property
    def text(self) -> str:
        """Lowercased title + content used by keyword rules"""
        return f"{self.title} {self.content or ''}".lower()

    @property
    def is_competitor(self) -> bool:
        return self.entity_type == "competitor"

    @property
    def published_utc(self) -> Optional[datetime]:
        if self.published is None:
            return None
        return as_utc(self.published)


class Organization(BaseModel):
    """The organization being monitored"""

    name: str = Field(..., min_length=1, description="Organization name")
    industry: Optional[str] = Field(None, description="Industry term matched against titles")
    keywords: List[str] = Field(default_factory=list, description="Extra relevance keywords")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Acme",
                "industry": "logistics",
                "keywords": ["freight", "warehouse"],
            }
        }

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("organization name must not be blank")
        return value

    @field_validator("keywords", mode="before")
    @classmethod
    def _keywords_default(cls, value):
        return value or []


class SignalAnalysis(BaseModel):
    """Assessment of a single signal"""

    signal: str = Field(..., description="Title of the analyzed signal")
    what_happened: str
    so_what: str
    now_what: str
    magnitude: Magnitude
    velocity: Velocity
    credibility: int = Field(..., ge=0, le=100)
    relevance: int = Field(..., ge=0, le=100)

    class Config:
        frozen = True

    @property
    def is_high_impact(self) -> bool:
        """High or critical magnitude"""
        return self.magnitude.rank >= Magnitude.HIGH.rank

    def mentions(self, term: str) -> bool:
        return term.lower() in self.signal.lower()
