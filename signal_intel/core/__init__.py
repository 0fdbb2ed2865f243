"""Core abstractions for the analysis engine"""

from .signal import (
    Signal,
    Organization,
    SignalAnalysis,
    Magnitude,
    Velocity,
    ConcernLevel,
    Priority,
)
from .orchestrator import SignalAnalysisOrchestrator, AnalysisResult, analyze_signals

__all__ = [
    "Signal",
    "Organization",
    "SignalAnalysis",
    "Magnitude",
    "Velocity",
    "ConcernLevel",
    "Priority",
    "SignalAnalysisOrchestrator",
    "AnalysisResult",
    "analyze_signals",
]
