"""
Health Risk Inference Engine - Main FastAPI Application
Symptom triage, anonymous disease surveillance and occupational risk prediction
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
import uvicorn

from healthrisk.catalog.lookup import (
    get_condition,
    get_symptom,
    related_symptoms,
    search_symptoms,
    symptoms_by_category,
)
from healthrisk.catalog.symptoms import SYMPTOMS
from healthrisk.config import settings
from healthrisk.errors import CatalogLookupError, HotspotNotFoundError, ReportValidationError
from healthrisk.models import AnonymousReport, AnonymousReportRequest, HotspotStatus, SelectedSymptom
from healthrisk.nlp.extractor import extract_district, extract_symptoms
from healthrisk.occupational.models import Industry, OccupationalProfile
from healthrisk.occupational.predictor import occupational_risk_predictor
from healthrisk.surveillance.detector import OutbreakDetector
from healthrisk.surveillance.notifications import (
    HEALTH_ALERT,
    LoggingNotifier,
    NotificationEvent,
    dispatch,
    drain_pending,
)
from healthrisk.surveillance.reports import build_report, report_statistics, timeframe_start
from healthrisk.surveillance.store import InMemorySurveillanceStore
from healthrisk.triage.session import run_symptom_check

# Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(title="Health Risk Inference Engine", version="1.0.0")

# In-memory storage
STORE = InMemorySurveillanceStore()
NOTIFIER = LoggingNotifier()
DETECTOR = OutbreakDetector(STORE, NOTIFIER)

RUNNING_TASKS: Dict[str, asyncio.Task] = {}
SURVEILLANCE_WORKERS: Dict[str, asyncio.Task] = {}
SURVEILLANCE_QUEUES: Dict[str, asyncio.Queue] = {}


class ExtractRequest(BaseModel):
    text: str
    language: str = "en"
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class SymptomCheckRequest(BaseModel):
    symptoms: List[SelectedSymptom] = Field(default_factory=list)
    transcript: Optional[str] = None
    language: str = "en"
    transcript_confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class OccupationalRequest(BaseModel):
    profile: OccupationalProfile
    language: str = "en"


@app.exception_handler(ReportValidationError)
async def report_validation_handler(request: Request, exc: ReportValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc), "field": exc.field})


@app.exception_handler(CatalogLookupError)
@app.exception_handler(HotspotNotFoundError)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.get("/healthz")
async def health_check():
    """Service health"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "stored_reports": len(STORE.reports),
        "active_hotspots": len(await STORE.list_hotspots(HotspotStatus.ACTIVE)),
        "surveillance_workers": len(SURVEILLANCE_WORKERS),
    }


@app.post("/symptoms/extract")
async def extract_endpoint(body: ExtractRequest):
    """Symptom candidates and district found in a voice transcript"""
    return {
        "symptoms": [s.model_dump() for s in extract_symptoms(body.text, body.language, body.confidence)],
        "district": extract_district(body.text),
    }


@app.get("/symptoms")
async def list_symptoms(category: Optional[str] = None):
    symptoms = symptoms_by_category(category) if category else SYMPTOMS
    return {"symptoms": [s.model_dump() for s in symptoms]}


@app.get("/symptoms/search")
async def search_endpoint(q: str, language: str = "en"):
    return {"symptoms": [s.model_dump() for s in search_symptoms(q, language)]}


@app.get("/symptoms/{symptom_id}")
async def symptom_detail(symptom_id: str):
    return {
        "symptom": get_symptom(symptom_id).model_dump(),
        "related": [s.id for s in related_symptoms(symptom_id)],
    }


@app.get("/conditions/{condition_id}")
async def condition_detail(condition_id: str):
    return {"condition": get_condition(condition_id).model_dump()}


@app.post("/symptoms/check")
async def symptom_check(body: SymptomCheckRequest):
    """Triage session: merged symptoms, ranked conditions and urgency"""
    result = run_symptom_check(
        selected=body.symptoms,
        transcript=body.transcript,
        language=body.language,
        transcript_confidence=body.transcript_confidence,
    )
    return result.model_dump()


def cleanup_surveillance(district: str, queue: asyncio.Queue):
    """Drop a district's worker and queue entries if they still belong to this worker"""
    if SURVEILLANCE_QUEUES.get(district) is queue:
        SURVEILLANCE_QUEUES.pop(district)
    worker = SURVEILLANCE_WORKERS.get(district)
    if worker is not None and worker is asyncio.current_task():
        SURVEILLANCE_WORKERS.pop(district)


async def process_surveillance_queue(district: str, idle_seconds: Optional[float] = None):
    """
    Single writer for a district's aggregate and hotspots, in arrival order.
    Exits and frees its entries once the queue stays empty for idle_seconds.
    """
    queue = SURVEILLANCE_QUEUES.get(district)
    if queue is None:
        logger.warning(f"Surveillance queue missing for district {district}")
        return

    if idle_seconds is None:
        idle_seconds = settings.SURVEILLANCE_IDLE_SECONDS

    logger.info(f"Starting surveillance worker for district {district}")

    try:
        while True:
            try:
                report = await asyncio.wait_for(queue.get(), timeout=idle_seconds)
            except asyncio.TimeoutError:
                if queue.empty():
                    logger.info(f"Surveillance worker idle for district {district}, stopping")
                    cleanup_surveillance(district, queue)
                    return
                continue
            except asyncio.CancelledError:
                logger.info(f"Surveillance worker cancelled for district {district}")
                raise

            try:
                await DETECTOR.process_report(report)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Surveillance worker error for report {report.id}: {e}")
            finally:
                queue.task_done()
    except asyncio.CancelledError:
        logger.debug(f"Stopping surveillance worker for district {district}")
        raise


async def enqueue_surveillance(report: AnonymousReport):
    """Hand a stored report to its district worker, (re)starting the worker when none is running"""
    if report.district not in SURVEILLANCE_QUEUES:
        SURVEILLANCE_QUEUES[report.district] = asyncio.Queue()

    # No await between the worker check and the put
    worker = SURVEILLANCE_WORKERS.get(report.district)
    if worker is None or worker.done():
        worker = asyncio.create_task(process_surveillance_queue(report.district))
        SURVEILLANCE_WORKERS[report.district] = worker

    SURVEILLANCE_QUEUES[report.district].put_nowait(report)


@app.post("/reports/anonymous")
async def submit_anonymous_report(body: AnonymousReportRequest):
    """
    Validate, score and store a report; surveillance runs after the write
    """
    report = build_report(body)
    await STORE.insert_report(report)

    try:
        await enqueue_surveillance(report)
    except Exception as e:
        logger.error(f"Could not queue surveillance for report {report.id}: {e}")

    logger.info(f"Anonymous report {report.id} stored for district {report.district}")
    return {
        "success": True,
        "report_id": report.id,
        "risk_score": report.risk_score,
        "timestamp": report.created_at.isoformat(),
        "message": "Anonymous report submitted successfully",
    }


@app.get("/reports/anonymous")
async def anonymous_statistics(district: Optional[str] = None, timeframe: str = "7d"):
    """Anonymized statistics, never individual reports"""
    now = datetime.now(timezone.utc)
    district = district.strip().lower() if district else None
    reports = await STORE.reports_since(timeframe_start(timeframe, now), district)
    return {"success": True, "data": report_statistics(reports, timeframe, now)}


@app.get("/hotspots")
async def list_hotspots(status: Optional[HotspotStatus] = None):
    hotspots = await STORE.list_hotspots(status)
    return {"hotspots": [h.model_dump(mode="json") for h in hotspots]}


@app.post("/hotspots/{district}/{area}/resolve")
async def resolve_hotspot(district: str, area: str):
    hotspot = await DETECTOR.resolve_hotspot(district, area)
    return {"hotspot": hotspot.model_dump(mode="json")}


@app.get("/occupational/risk-factors/{industry}")
async def industry_risk_factors(industry: Industry):
    factors = occupational_risk_predictor.industry_risk_factors(industry)
    return {"risk_factors": [f.model_dump() for f in factors]}


@app.post("/occupational/predict")
async def occupational_predict(body: OccupationalRequest):
    """Risk predictions and health alerts for a worker profile"""
    assessment = occupational_risk_predictor.assess(body.profile, body.language)

    for alert in assessment.alerts:
        dispatch(NOTIFIER, NotificationEvent(
            kind=HEALTH_ALERT,
            payload={"worker_id": assessment.worker_id, **alert.model_dump(mode="json")},
        ))

    return assessment.model_dump(mode="json")


async def hotspot_expiry_sweeper():
    """Periodically expires hotspots with no recent activating report"""
    logger.info(f"Starting hotspot sweeper (expiry {settings.HOTSPOT_EXPIRY_HOURS}h)")

    while True:
        try:
            await DETECTOR.expire_stale_hotspots()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Hotspot sweeper error: {e}")
        await asyncio.sleep(settings.HOTSPOT_SWEEP_SECONDS)


@app.on_event("startup")
async def startup_event():
    if settings.HOTSPOT_EXPIRY_HOURS > 0 and "hotspot_sweeper" not in RUNNING_TASKS:
        RUNNING_TASKS["hotspot_sweeper"] = asyncio.create_task(hotspot_expiry_sweeper())


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on application shutdown"""
    logger.info("Shutting down...")

    tasks = list(RUNNING_TASKS.values()) + list(SURVEILLANCE_WORKERS.values())
    for task in tasks:
        task.cancel()
    if tasks:
        await asyncio.gather(*tasks, return_exceptions=True)

    RUNNING_TASKS.clear()
    SURVEILLANCE_WORKERS.clear()
    SURVEILLANCE_QUEUES.clear()

    await drain_pending()


if __name__ == "__main__":
    host = "0.0.0.0"

    logger.info(f"Starting server on {host}:{settings.PORT}")
    uvicorn.run(
        "main:app",
        host=host,
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
