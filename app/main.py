"""
FastAPI application for the Tangle Ledger Statistics engine.

Endpoints:
    POST /upload  — Accept a ledger database file, return statistics as JSON
    GET  /health  — System health check
    GET  /metrics — Statistics from the most recent run
"""

import logging

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from core.errors import LedgerError
from services.processing_pipeline import LedgerStatsService
from utils.metrics import MetricsTracker

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tangle Ledger Statistics",
    description="Derives depth, density and rate statistics from a two-parent transaction DAG.",
    version="1.0.0",
)

metrics_tracker = MetricsTracker()


@app.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/metrics")
async def metrics():
    """Return processing statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@app.post("/upload")
async def upload_database(file: UploadFile = File(...), render: bool = False):
    """
    Accept a ledger database upload, rebuild the transaction graph and
    return its statistics. With render=true the text listing is included.
    """
    try:
        contents = await file.read()
        text = contents.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Failed to decode file: {str(e)}")

    try:
        result = LedgerStatsService().process_text(text, render=render)
    except LedgerError as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        metrics_tracker.record_failure(str(e))
        raise HTTPException(status_code=400, detail=str(e))

    metrics_tracker.record(result["summary"])
    return JSONResponse(content=result)
