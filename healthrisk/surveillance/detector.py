"""
Outbreak detection over anonymous reports
Daily aggregates per district and hotspot activation over a trailing window
"""

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from healthrisk.config import settings
from healthrisk.errors import HotspotNotFoundError
from healthrisk.models import (
    AlertLevel,
    AnonymousReport,
    Hotspot,
    HotspotEvaluation,
    HotspotStatus,
    Severity,
    SurveillanceAggregate,
)
from healthrisk.surveillance.notifications import (
    HOTSPOT_DETECTED,
    LoggingNotifier,
    NotificationEvent,
    Notifier,
    dispatch,
)
from healthrisk.surveillance.scoring import round_half_up
from healthrisk.surveillance.store import SurveillanceStore

logger = logging.getLogger(__name__)

# Activation thresholds
MIN_REPORTS = 5
MIN_SEVERE_WITH_REPORTS = 2
SEVERE_CRITICAL_THRESHOLD = 3
SCORE_THRESHOLD = 10.0

TOP_SYMPTOMS = 10

SEVERE_LEVELS = (Severity.SEVERE, Severity.CRITICAL)


def merge_aggregate(aggregate: Optional[SurveillanceAggregate], report: AnonymousReport,
                    now: Optional[datetime] = None) -> SurveillanceAggregate:
    """
    Fold one report into its (date, district) aggregate, returning a new aggregate
    """
    if aggregate is None:
        aggregate = SurveillanceAggregate(report_date=report.created_at.date(), district=report.district)

    total = aggregate.total_reports + 1
    average = (aggregate.average_risk_score * aggregate.total_reports + report.risk_score) / total

    severity_breakdown = dict(aggregate.severity_breakdown)
    severity_breakdown[report.severity] = severity_breakdown.get(report.severity, 0) + 1

    symptom_counts = Counter(aggregate.symptom_counts)
    symptom_counts.update(report.symptoms)

    return aggregate.model_copy(update={
        "total_reports": total,
        "severity_breakdown": severity_breakdown,
        "symptom_counts": dict(symptom_counts),
        "top_symptoms": [symptom for symptom, _ in symptom_counts.most_common(TOP_SYMPTOMS)],
        "average_risk_score": average,
        "updated_at": now or datetime.now(timezone.utc),
    })


def evaluate_window(district: str, reports: List[AnonymousReport]) -> HotspotEvaluation:
    """
    Hotspot metrics for a district's reports in the trailing window
    Depends only on the reports passed in
    """
    total = len(reports)
    severe_critical = sum(1 for r in reports if r.severity in SEVERE_LEVELS)
    score = sum(r.hotspot_contribution for r in reports)

    is_hotspot = (
        (total >= MIN_REPORTS and severe_critical >= MIN_SEVERE_WITH_REPORTS)
        or score >= SCORE_THRESHOLD
        or severe_critical >= SEVERE_CRITICAL_THRESHOLD
    )

    alert_level = None
    if is_hotspot:
        alert_level = AlertLevel.CRITICAL if severe_critical >= SEVERE_CRITICAL_THRESHOLD else AlertLevel.HIGH

    return HotspotEvaluation(
        district=district,
        total_reports=total,
        severe_critical_count=severe_critical,
        hotspot_score=round_half_up(score, 2),
        is_hotspot=is_hotspot,
        alert_level=alert_level,
    )


def apply_evaluation(current: Optional[Hotspot], evaluation: HotspotEvaluation,
                     area: str, reported_at: datetime) -> Hotspot:
    """Create or refresh a hotspot from an activating evaluation"""
    if current is None or current.status != HotspotStatus.ACTIVE:
        detected_at = reported_at
    else:
        detected_at = current.detected_at

    return Hotspot(
        district=evaluation.district,
        area=area,
        alert_level=evaluation.alert_level,
        total_reports=evaluation.total_reports,
        severe_critical_count=evaluation.severe_critical_count,
        hotspot_score=evaluation.hotspot_score,
        detected_at=detected_at,
        status=HotspotStatus.ACTIVE,
        last_report_at=reported_at,
        updated_at=datetime.now(timezone.utc),
    )


class OutbreakDetector:
    """
    Surveillance side of report submission
    Callers must serialize process_report per district
    """

    def __init__(self, store: SurveillanceStore, notifier: Optional[Notifier] = None,
                 window_hours: Optional[int] = None, expiry_hours: Optional[int] = None):
        self.store = store
        self.notifier = notifier or LoggingNotifier()
        self.window = timedelta(hours=window_hours or settings.HOTSPOT_WINDOW_HOURS)
        self.expiry_hours = settings.HOTSPOT_EXPIRY_HOURS if expiry_hours is None else expiry_hours

    async def process_report(self, report: AnonymousReport) -> Optional[Hotspot]:
        """
        Update the district aggregate and re-evaluate the hotspot rule

        Returns:
            Optional[Hotspot]: The activated or refreshed hotspot, None otherwise.
            Errors are logged and never raised.
        """
        try:
            await self.store.upsert_aggregate(
                report.created_at.date(), report.district,
                lambda current: merge_aggregate(current, report),
            )

            window_reports = await self.store.reports_since(
                report.created_at - self.window, report.district, until=report.created_at,
            )
            evaluation = evaluate_window(report.district, window_reports)
            if not evaluation.is_hotspot:
                return None

            hotspot = await self.store.upsert_hotspot(
                report.district, report.area,
                lambda current: apply_evaluation(current, evaluation, report.area, report.created_at),
            )

            logger.info(f"Hotspot {hotspot.alert_level.value} in {hotspot.district}/{hotspot.area}: "
                        f"{hotspot.total_reports} reports, score {hotspot.hotspot_score}")
            dispatch(self.notifier, NotificationEvent(kind=HOTSPOT_DETECTED, payload=hotspot.model_dump(mode="json")))
            return hotspot

        except Exception as e:
            logger.error(f"Surveillance processing failed for report {report.id}: {e}")
            return None

    async def expire_stale_hotspots(self, now: Optional[datetime] = None) -> List[Hotspot]:
        """Mark active hotspots with no recent activating report as expired"""
        if self.expiry_hours <= 0:
            return []

        now = now or datetime.now(timezone.utc)
        cutoff = now - timedelta(hours=self.expiry_hours)
        expired = []

        def expire(current: Optional[Hotspot]) -> Hotspot:
            if current.status != HotspotStatus.ACTIVE or (current.last_report_at or current.detected_at) >= cutoff:
                return current
            return current.model_copy(update={"status": HotspotStatus.EXPIRED, "updated_at": now})

        for hotspot in await self.store.list_hotspots(HotspotStatus.ACTIVE):
            updated = await self.store.upsert_hotspot(hotspot.district, hotspot.area, expire)
            if updated.status == HotspotStatus.EXPIRED:
                expired.append(updated)

        if expired:
            logger.info(f"Expired {len(expired)} hotspots older than {self.expiry_hours}h")
        return expired

    async def resolve_hotspot(self, district: str, area: str) -> Hotspot:
        """
        Deactivate a hotspot after field follow-up

        Raises:
            HotspotNotFoundError: no hotspot for this key
        """
        district = district.strip().lower()
        area = area.strip()
        if await self.store.get_hotspot(district, area) is None:
            raise HotspotNotFoundError(district, area)

        hotspot = await self.store.upsert_hotspot(
            district, area,
            lambda current: current.model_copy(update={
                "status": HotspotStatus.RESOLVED,
                "updated_at": datetime.now(timezone.utc),
            }),
        )
        logger.info(f"Hotspot resolved for {district}/{area}")
        return hotspot
