"""
Anonymous report intake and anonymized statistics
"""

import secrets
import string
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from healthrisk.errors import ReportValidationError
from healthrisk.models import AnonymousReport, AnonymousReportRequest, Severity
from healthrisk.surveillance.scoring import calculate_hotspot_contribution, calculate_risk_score

TIMEFRAMES: Dict[str, timedelta] = {
    "1d": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_TIMEFRAME = "7d"

_ID_ALPHABET = string.ascii_uppercase + string.digits


def validate_report(request: AnonymousReportRequest) -> None:
    """
    Reject a report missing any field needed for scoring

    Raises:
        ReportValidationError: naming the first missing field
    """
    if not request.symptoms:
        raise ReportValidationError("symptoms")
    if request.severity is None:
        raise ReportValidationError("severity")
    if not request.duration:
        raise ReportValidationError("duration")
    if request.location is None or not request.location.district or not request.location.area:
        raise ReportValidationError("location", "Location information is required")


def generate_report_id(now: datetime) -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(8))
    return f"ANM-{int(now.timestamp() * 1000)}-{suffix}"


def build_report(request: AnonymousReportRequest, now: Optional[datetime] = None) -> AnonymousReport:
    """
    Validate and score a submitted report, dropping anything identifying
    """
    validate_report(request)
    now = now or datetime.now(timezone.utc)

    return AnonymousReport(
        id=generate_report_id(now),
        symptoms=list(request.symptoms),
        severity=request.severity,
        duration=request.duration,
        district=request.location.district.strip().lower(),
        area=request.location.area.strip(),
        occupation=request.occupation,
        age_group=request.age_group,
        gender=request.gender,
        additional_info=request.additional_info,
        report_source=request.report_source,
        risk_score=calculate_risk_score(request.severity, request.symptoms, request.duration),
        hotspot_contribution=calculate_hotspot_contribution(request.severity, request.symptoms),
        created_at=now,
    )


def timeframe_start(timeframe: Optional[str], now: datetime) -> datetime:
    """Start of a statistics timeframe; unknown values fall back to 7 days"""
    return now - TIMEFRAMES.get(timeframe or DEFAULT_TIMEFRAME, TIMEFRAMES[DEFAULT_TIMEFRAME])


def report_statistics(reports: List[AnonymousReport], timeframe: str = DEFAULT_TIMEFRAME,
                      now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Aggregate counts over already-filtered reports, never individual records
    """
    now = now or datetime.now(timezone.utc)

    symptom_counts = Counter(symptom for report in reports for symptom in report.symptoms)
    district_counts = Counter(report.district for report in reports)

    return {
        "total_reports": len(reports),
        "severity_breakdown": {
            severity.value: sum(1 for r in reports if r.severity == severity) for severity in Severity
        },
        "top_symptoms": [
            {"symptom": symptom, "count": count} for symptom, count in symptom_counts.most_common(10)
        ],
        "district_breakdown": [
            {"district": district, "count": count} for district, count in district_counts.most_common()
        ],
        "timeframe": timeframe if timeframe in TIMEFRAMES else DEFAULT_TIMEFRAME,
        "last_updated": now.isoformat(),
    }
