"""Signal intelligence analysis engine"""

from .core import (
    Signal,
    Organization,
    SignalAnalysis,
    AnalysisResult,
    SignalAnalysisOrchestrator,
    analyze_signals,
)

__version__ = "0.1.0"

__all__ = [
    "Signal",
    "Organization",
    "SignalAnalysis",
    "AnalysisResult",
    "SignalAnalysisOrchestrator",
    "analyze_signals",
]
