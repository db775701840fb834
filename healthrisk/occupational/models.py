"""
Data models for occupational health risk prediction
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Industry(str, Enum):
    CONSTRUCTION = "construction"
    FISHING = "fishing"
    AGRICULTURE = "agriculture"
    MANUFACTURING = "manufacturing"
    TEXTILES = "textiles"
    HOSPITALITY = "hospitality"
    DOMESTIC_WORK = "domestic_work"
    TRANSPORTATION = "transportation"
    FOOD_PROCESSING = "food_processing"
    MINING = "mining"
    OIL_GAS = "oil_gas"


class RiskFactorType(str, Enum):
    CHEMICAL = "chemical"
    PHYSICAL = "physical"
    BIOLOGICAL = "biological"
    ERGONOMIC = "ergonomic"
    PSYCHOSOCIAL = "psychosocial"
    ENVIRONMENTAL = "environmental"


class RiskSeverity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class ExposureLevel(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


class ExposureFrequency(str, Enum):
    RARE = "rare"
    OCCASIONAL = "occasional"
    FREQUENT = "frequent"
    CONTINUOUS = "continuous"


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class PredictionTimeframe(str, Enum):
    ONE_MONTH = "1_month"
    THREE_MONTHS = "3_months"
    SIX_MONTHS = "6_months"
    ONE_YEAR = "1_year"
    TWO_YEARS = "2_years"
    FIVE_YEARS = "5_years"


class AlertType(str, Enum):
    PREVENTIVE = "preventive"
    EARLY_WARNING = "early_warning"
    IMMEDIATE_ACTION = "immediate_action"
    HEALTH_SCREENING = "health_screening"


class AlertSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    URGENT = "urgent"
    CRITICAL = "critical"


class ConditionCategory(str, Enum):
    RESPIRATORY = "respiratory"
    MUSCULOSKELETAL = "musculoskeletal"
    DERMATOLOGICAL = "dermatological"
    NEUROLOGICAL = "neurological"
    CARDIOVASCULAR = "cardiovascular"
    REPRODUCTIVE = "reproductive"
    CANCER = "cancer"
    INJURY = "injury"
    MENTAL_HEALTH = "mental_health"


class PrognosisLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    GRAVE = "grave"


class TemperatureRange(str, Enum):
    VERY_COLD = "very_cold"
    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"
    EXTREME_HEAT = "extreme_heat"


class VentilationQuality(str, Enum):
    POOR = "poor"
    ADEQUATE = "adequate"
    GOOD = "good"
    EXCELLENT = "excellent"


class ShiftType(str, Enum):
    DAY = "day"
    NIGHT = "night"
    ROTATING = "rotating"
    SPLIT = "split"


# ---------------------------------------------------------------------------
# Worker profile
# ---------------------------------------------------------------------------

class PhysicalDemands(BaseModel):
    heavy_lifting: bool = False
    repetitive_motions: bool = False
    prolonged_standing: bool = False
    prolonged_sitting: bool = False
    climbing: bool = False
    crawling: bool = False
    reaching_overhead: bool = False


class WorkSchedule(BaseModel):
    hours_per_day: float = Field(default=8, ge=0, le=24)
    days_per_week: int = Field(default=6, ge=0, le=7)
    shift_type: ShiftType = ShiftType.DAY
    rest_breaks: int = Field(default=30, ge=0, description="Minutes per shift")


class WorkEnvironment(BaseModel):
    temperature: TemperatureRange = TemperatureRange.MODERATE
    humidity: str = "moderate"
    noise_level: str = "moderate"
    lighting: str = "adequate"
    ventilation: VentilationQuality = VentilationQuality.ADEQUATE
    work_schedule: WorkSchedule = Field(default_factory=WorkSchedule)
    physical_demands: PhysicalDemands = Field(default_factory=PhysicalDemands)


class RiskFactor(BaseModel):
    id: str
    type: RiskFactorType
    name: str
    severity: RiskSeverity
    exposure_level: ExposureLevel
    frequency: ExposureFrequency = ExposureFrequency.FREQUENT


class WorkHistory(BaseModel):
    id: str
    job_title: str
    industry: Industry
    duration: int = Field(ge=0, description="Months")
    location: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class OccupationalSymptom(BaseModel):
    symptom_id: str
    severity: int = Field(ge=1, le=10)
    work_related: bool = True
    onset_date: Optional[datetime] = None


class HealthAssessment(BaseModel):
    id: str
    assessment_date: datetime
    symptoms: List[OccupationalSymptom] = Field(default_factory=list)
    overall_score: Optional[float] = None
    recommendations: List[str] = Field(default_factory=list)


class OccupationalProfile(BaseModel):
    """Worker's occupational record, owned by the worker store"""
    worker_id: str
    job_title: str
    industry: Industry
    work_environment: WorkEnvironment = Field(default_factory=WorkEnvironment)
    risk_factors: List[RiskFactor] = Field(default_factory=list)
    work_history: List[WorkHistory] = Field(default_factory=list)
    health_assessments: List[HealthAssessment] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Catalog and derived results
# ---------------------------------------------------------------------------

class OccupationalCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: Dict[str, str]
    description: Dict[str, str]
    category: ConditionCategory
    common_industries: List[Industry]
    risk_factors: List[RiskFactorType]
    symptoms: List[str]
    prevention: Dict[str, List[str]]
    treatment: Dict[str, List[str]] = Field(default_factory=dict)
    prognosis: PrognosisLevel
    prevalence_rate: float = Field(ge=0.0, le=1.0)
    acute: bool = False


class RiskPrediction(BaseModel):
    id: str
    condition: OccupationalCondition
    risk_score: float = Field(ge=0.0, le=1.0)
    risk_level: RiskLevel
    timeframe: PredictionTimeframe
    contributing_factors: List[str] = Field(default_factory=list)
    prevention_recommendations: List[str] = Field(default_factory=list)
    monitoring_advice: List[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    created_at: datetime


class HealthAlert(BaseModel):
    id: str
    type: AlertType
    severity: AlertSeverity
    condition_id: str
    message: Dict[str, str]
    recommendations: Dict[str, List[str]]
    is_active: bool = True
    trigger_date: datetime
    acknowledged_at: Optional[datetime] = None


class OccupationalAssessment(BaseModel):
    """Predictions and alerts computed for one profile"""
    worker_id: str
    predictions: List[RiskPrediction] = Field(default_factory=list)
    alerts: List[HealthAlert] = Field(default_factory=list)
