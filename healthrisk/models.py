"""
Data models for symptom triage and anonymous disease surveillance
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


SUPPORTED_LANGUAGES = ("en", "hi", "ml", "bn", "or", "ta", "ne")


class Severity(str, Enum):
    """Severity reported by the user for a symptom or a report"""
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def level(self) -> int:
        return _SEVERITY_LEVELS[self]


_SEVERITY_LEVELS = {
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
    Severity.CRITICAL: 4,
}


class ConditionSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"

    @property
    def level(self) -> int:
        return _CONDITION_SEVERITY_LEVELS[self]


_CONDITION_SEVERITY_LEVELS = {
    ConditionSeverity.MINOR: 1,
    ConditionSeverity.MODERATE: 2,
    ConditionSeverity.SERIOUS: 3,
    ConditionSeverity.CRITICAL: 4,
}


class UrgencyLevel(str, Enum):
    """Triage signal shown to the user, ordered low < medium < high < emergency"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return list(UrgencyLevel).index(self)


class Prevalence(str, Enum):
    """Prevalence of a condition among migrant workers"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SymptomDuration(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    CHRONIC = "chronic"


class SymptomOnset(str, Enum):
    SUDDEN = "sudden"
    GRADUAL = "gradual"
    INTERMITTENT = "intermittent"
    CONSTANT = "constant"


# ---------------------------------------------------------------------------
# Reference catalogs
# ---------------------------------------------------------------------------

class Symptom(BaseModel):
    """Catalog entry for a symptom"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: Dict[str, str]
    description: Dict[str, str]
    category: str
    severity: Severity
    body_part: Optional[str] = None
    voice_keywords: Dict[str, List[str]] = Field(default_factory=dict)
    related_symptoms: List[str] = Field(default_factory=list)


class Condition(BaseModel):
    """Catalog entry for a condition the matcher can suggest"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: Dict[str, str]
    description: Dict[str, str]
    category: str
    severity: ConditionSeverity
    common_symptoms: List[str]
    rare_symptoms: List[str] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)
    recommendations: Dict[str, List[str]] = Field(default_factory=dict)
    urgency: UrgencyLevel
    prevalence_in_migrants: Prevalence


# ---------------------------------------------------------------------------
# Symptom checker
# ---------------------------------------------------------------------------

class SelectedSymptom(BaseModel):
    """Symptom chosen (or confirmed) by the user in a session"""
    symptom_id: str
    severity: Severity
    duration: SymptomDuration = SymptomDuration.DAYS
    onset: SymptomOnset = SymptomOnset.GRADUAL
    notes: Optional[str] = None


class ExtractedSymptom(BaseModel):
    """Symptom candidate found in free text"""
    symptom: str
    confidence: float = Field(ge=0.0, le=1.0)
    context: str
    severity: Severity = Severity.MILD
    body_part: Optional[str] = None


class ConditionMatch(BaseModel):
    """Condition suggested for a set of selected symptoms"""
    condition_id: str
    confidence: float = Field(ge=0.0, le=1.0)
    matching_symptoms: List[str] = Field(default_factory=list)
    missing_symptoms: List[str] = Field(default_factory=list)
    reasoning: str


class TriageResult(BaseModel):
    """Outcome of a symptom-check session"""
    language: str
    symptoms: List[SelectedSymptom] = Field(default_factory=list)
    extracted_symptoms: List[ExtractedSymptom] = Field(default_factory=list)
    matches: List[ConditionMatch] = Field(default_factory=list)
    urgency: UrgencyLevel = UrgencyLevel.LOW
    recommendations: List[str] = Field(default_factory=list)
    follow_up_questions: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Anonymous surveillance
# ---------------------------------------------------------------------------

class DurationBucket(str, Enum):
    """Duration choices offered on the anonymous report form"""
    LESS_THAN_DAY = "Less than 1 day"
    ONE_TO_THREE_DAYS = "1-3 days"
    FOUR_TO_SEVEN_DAYS = "4-7 days"
    ONE_TO_TWO_WEEKS = "1-2 weeks"
    MORE_THAN_TWO_WEEKS = "More than 2 weeks"

    @classmethod
    def parse(cls, label: Optional[str]) -> Optional["DurationBucket"]:
        """Bucket for a form label, None when the label is not recognised"""
        for bucket in cls:
            if bucket.value == label:
                return bucket
        return None


class ReportSource(str, Enum):
    WEB = "web"
    VOICE = "voice"
    KIOSK = "kiosk"


class ReportLocation(BaseModel):
    district: str = ""
    area: str = ""
    # Accepted from clients but never stored
    coordinates: Optional[Dict[str, float]] = None


class AnonymousReportRequest(BaseModel):
    """Anonymous report as submitted; required fields are checked by the engine"""
    symptoms: List[str] = Field(default_factory=list)
    severity: Optional[Severity] = None
    duration: Optional[str] = None
    location: Optional[ReportLocation] = None
    occupation: Optional[str] = None
    age_group: Optional[str] = None
    gender: Optional[str] = None
    additional_info: Optional[str] = None
    report_source: ReportSource = ReportSource.WEB


class AnonymousReport(BaseModel):
    """Stored anonymous report, immutable once created"""
    model_config = ConfigDict(frozen=True)

    id: str
    symptoms: List[str]
    severity: Severity
    duration: str
    district: str
    area: str
    occupation: Optional[str] = None
    age_group: Optional[str] = None
    gender: Optional[str] = None
    additional_info: Optional[str] = None
    report_source: ReportSource = ReportSource.WEB
    risk_score: int = Field(ge=0, le=30)
    hotspot_contribution: float = Field(ge=0.0)
    created_at: datetime


class SurveillanceAggregate(BaseModel):
    """Daily per-district roll-up of anonymous reports"""
    report_date: date
    district: str
    total_reports: int = 0
    severity_breakdown: Dict[Severity, int] = Field(
        default_factory=lambda: {severity: 0 for severity in Severity}
    )
    symptom_counts: Dict[str, int] = Field(default_factory=dict)
    top_symptoms: List[str] = Field(default_factory=list)
    average_risk_score: float = 0.0
    updated_at: Optional[datetime] = None


class AlertLevel(str, Enum):
    HIGH = "high"
    CRITICAL = "critical"


class HotspotStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    RESOLVED = "resolved"


class Hotspot(BaseModel):
    """Outbreak detection for a (district, area) key"""
    district: str
    area: str
    alert_level: AlertLevel
    total_reports: int
    severe_critical_count: int
    hotspot_score: float
    detected_at: datetime
    status: HotspotStatus = HotspotStatus.ACTIVE
    last_report_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HotspotEvaluation(BaseModel):
    """Window metrics computed for one district"""
    district: str
    total_reports: int
    severe_critical_count: int
    hotspot_score: float
    is_hotspot: bool
    alert_level: Optional[AlertLevel] = None
