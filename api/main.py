"""
FastAPI Backend for the Signal Intelligence engine

Thin HTTP wrapper: validates the request, runs the pipeline, returns the report.
"""

from typing import List, Optional
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from loguru import logger

from signal_intel import Signal, Organization, AnalysisResult, analyze_signals, __version__
from signal_intel.config import CORS_ORIGINS, API_HOST, API_PORT, configure_logging
from signal_intel.samples import SAMPLE_ORGANIZATION, sample_signals

configure_logging()

app = FastAPI(
    title="Signal Intelligence API",
    description="Strategic intelligence from batches of external signals",
    version=__version__,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class AnalyzeRequest(BaseModel):
    organization: Organization
    signals: List[Signal] = Field(default_factory=list)
    reference_time: Optional[datetime] = Field(
        None,
        description="Instant recency is measured from (defaults to now)",
    )


@app.get("/")
def root():
    """API root"""
    return {
        "name": "Signal Intelligence API",
        "version": __version__,
        "description": "Signal analysis, pattern recognition and response planning",
        "endpoints": {
            "analyze": "POST /api/analyze",
            "sample": "/api/sample",
        }
    }


@app.post("/api/analyze", response_model=AnalysisResult)
def analyze(request: AnalyzeRequest):
    """Run the full pipeline over a signal batch"""
    logger.info(f"Analysis requested for {request.organization.name} ({len(request.signals)} signals)")
    return analyze_signals(request.signals, request.organization, now=request.reference_time)


@app.get("/api/sample", response_model=AnalysisResult)
def sample():
    """Run the pipeline over the bundled sample batch"""
    return analyze_signals(sample_signals(), SAMPLE_ORGANIZATION)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
