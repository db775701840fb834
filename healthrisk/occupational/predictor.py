"""
Occupational health risk prediction
Composite multiplicative risk per catalog condition, derived from a worker profile
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from healthrisk.catalog.occupational import (
    ALERT_MESSAGES,
    INDUSTRY_RISK_FACTORS,
    KERALA_ENVIRONMENTAL_FACTORS,
    KERALA_FACTOR_INDUSTRIES,
    OCCUPATIONAL_CONDITIONS,
)
from healthrisk.models import SUPPORTED_LANGUAGES
from healthrisk.nlp.language import localized
from healthrisk.occupational.models import (
    AlertSeverity,
    AlertType,
    ConditionCategory,
    ExposureFrequency,
    ExposureLevel,
    HealthAlert,
    HealthAssessment,
    Industry,
    OccupationalAssessment,
    OccupationalCondition,
    OccupationalProfile,
    PredictionTimeframe,
    RiskFactor,
    RiskLevel,
    RiskPrediction,
    RiskSeverity,
    TemperatureRange,
    VentilationQuality,
    WorkEnvironment,
    WorkHistory,
)
from healthrisk.surveillance.scoring import round_half_up

logger = logging.getLogger(__name__)

SEVERITY_WEIGHTS: Dict[RiskSeverity, float] = {
    RiskSeverity.LOW: 0.5,
    RiskSeverity.MODERATE: 1.0,
    RiskSeverity.HIGH: 1.5,
    RiskSeverity.CRITICAL: 2.0,
}

EXPOSURE_WEIGHTS: Dict[ExposureLevel, float] = {
    ExposureLevel.MINIMAL: 0.3,
    ExposureLevel.MODERATE: 0.7,
    ExposureLevel.HIGH: 1.0,
    ExposureLevel.EXTREME: 1.3,
}

COMMON_INDUSTRY_MULTIPLIER = 2.0
NO_ALIGNMENT_MULTIPLIER = 0.5
MAX_ALIGNMENT = 2.0

# (minimum cumulative months, multiplier), longest first
WORK_HISTORY_MULTIPLIERS = [
    (60, 1.8),
    (36, 1.5),
    (12, 1.2),
]

MIN_RISK_SCORE = 0.1
LONG_SHIFT_HOURS = 10

MONITORING_ADVICE: Dict[ConditionCategory, List[str]] = {
    ConditionCategory.RESPIRATORY: [
        "Annual spirometry testing",
        "Monitor for persistent cough or shortness of breath",
    ],
    ConditionCategory.MUSCULOSKELETAL: [
        "Regular ergonomic assessments",
        "Monitor for pain, stiffness, or limited range of motion",
    ],
    ConditionCategory.CARDIOVASCULAR: [
        "Regular blood pressure and heart rate monitoring",
        "Monitor for heat-related symptoms",
    ],
}
DEFAULT_MONITORING_ADVICE = [
    "Regular health checkups",
    "Report any work-related symptoms immediately",
]


def determine_risk_level(risk_score: float) -> RiskLevel:
    if risk_score >= 0.8:
        return RiskLevel.CRITICAL
    if risk_score >= 0.6:
        return RiskLevel.HIGH
    if risk_score >= 0.3:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def predict_timeframe(risk_score: float, condition: OccupationalCondition) -> PredictionTimeframe:
    """Acute conditions manifest within months, chronic ones sooner the higher the score"""
    if condition.acute:
        return PredictionTimeframe.ONE_MONTH if risk_score > 0.7 else PredictionTimeframe.THREE_MONTHS

    if risk_score >= 0.8:
        return PredictionTimeframe.SIX_MONTHS
    if risk_score >= 0.6:
        return PredictionTimeframe.ONE_YEAR
    if risk_score >= 0.4:
        return PredictionTimeframe.TWO_YEARS
    return PredictionTimeframe.FIVE_YEARS


class OccupationalRiskPredictor:
    """
    Predicts occupational conditions for a worker profile

    The profile is read, never modified. All multipliers are computed from
    the profile and the condition catalog only.
    """

    def __init__(self, conditions: Optional[List[OccupationalCondition]] = None):
        self.conditions = conditions if conditions is not None else OCCUPATIONAL_CONDITIONS

    def predict_risks(self, profile: OccupationalProfile, language: str = "en",
                      now: Optional[datetime] = None) -> List[RiskPrediction]:
        """
        Risk predictions for every condition above the reporting threshold

        Args:
            profile: Worker's occupational record
            language: Language for the condition's prevention list
            now: Timestamp stamped on the predictions

        Returns:
            List[RiskPrediction]: Highest risk first
        """
        now = now or datetime.now(timezone.utc)
        predictions = []

        for condition in self.conditions:
            prediction = self.calculate_risk_for_condition(profile, condition, language, now)
            if prediction.risk_score > MIN_RISK_SCORE:
                predictions.append(prediction)

        predictions.sort(key=lambda p: p.risk_score, reverse=True)

        logger.info(f"Occupational prediction for {profile.worker_id}: {len(predictions)} conditions above threshold")
        return predictions

    def calculate_risk_for_condition(self, profile: OccupationalProfile, condition: OccupationalCondition,
                                     language: str = "en", now: Optional[datetime] = None) -> RiskPrediction:
        risk_score = self.calculate_risk_score(profile, condition)

        return RiskPrediction(
            id=f"prediction_{uuid.uuid4().hex}",
            condition=condition,
            risk_score=risk_score,
            risk_level=determine_risk_level(risk_score),
            timeframe=predict_timeframe(risk_score, condition),
            contributing_factors=self.identify_contributing_factors(profile, condition),
            prevention_recommendations=self.generate_prevention_recommendations(profile, condition, language),
            monitoring_advice=list(MONITORING_ADVICE.get(condition.category, DEFAULT_MONITORING_ADVICE)),
            confidence=self.calculate_confidence(profile, risk_score),
            created_at=now or datetime.now(timezone.utc),
        )

    def calculate_risk_score(self, profile: OccupationalProfile, condition: OccupationalCondition) -> float:
        risk_score = condition.prevalence_rate

        if profile.industry in condition.common_industries:
            risk_score *= COMMON_INDUSTRY_MULTIPLIER

        risk_score *= self.calculate_environmental_risk(profile.work_environment, condition)
        risk_score *= self.calculate_risk_factor_alignment(profile.risk_factors, condition)
        risk_score *= self.calculate_work_history_impact(profile.work_history, condition)
        risk_score *= self.calculate_health_history_impact(profile.health_assessments, condition)
        risk_score *= self.kerala_environmental_multiplier(profile.industry)

        return max(0.0, min(risk_score, 1.0))

    @staticmethod
    def calculate_environmental_risk(environment: WorkEnvironment, condition: OccupationalCondition) -> float:
        multiplier = 1.0

        if condition.category == ConditionCategory.CARDIOVASCULAR and \
                environment.temperature == TemperatureRange.EXTREME_HEAT:
            multiplier *= 2.5

        if condition.category == ConditionCategory.RESPIRATORY and \
                environment.ventilation == VentilationQuality.POOR:
            multiplier *= 2.0

        if condition.category == ConditionCategory.MUSCULOSKELETAL:
            demands = environment.physical_demands
            if demands.heavy_lifting:
                multiplier *= 1.5
            if demands.repetitive_motions:
                multiplier *= 1.3
            if demands.prolonged_standing:
                multiplier *= 1.2

        return multiplier

    @staticmethod
    def calculate_risk_factor_alignment(risk_factors: List[RiskFactor], condition: OccupationalCondition) -> float:
        """
        Average severity x exposure weight of the factors the condition is sensitive to
        """
        aligned = [rf for rf in risk_factors if rf.type in condition.risk_factors]
        if not aligned:
            return NO_ALIGNMENT_MULTIPLIER

        total_weight = sum(SEVERITY_WEIGHTS[rf.severity] * EXPOSURE_WEIGHTS[rf.exposure_level] for rf in aligned)
        return min(total_weight / len(aligned), MAX_ALIGNMENT)

    @staticmethod
    def calculate_work_history_impact(work_history: List[WorkHistory], condition: OccupationalCondition) -> float:
        months_exposed = sum(wh.duration for wh in work_history if wh.industry in condition.common_industries)

        for min_months, multiplier in WORK_HISTORY_MULTIPLIERS:
            if months_exposed >= min_months:
                return multiplier
        return 1.0

    @staticmethod
    def calculate_health_history_impact(assessments: List[HealthAssessment],
                                        condition: OccupationalCondition) -> float:
        """1.0 plus a tenth of the average severity of related symptoms in the latest assessment"""
        if not assessments:
            return 1.0

        latest = max(assessments, key=lambda a: a.assessment_date)
        related = [s for s in latest.symptoms if s.work_related and s.symptom_id in condition.symptoms]
        if not related:
            return 1.0

        avg_severity = sum(s.severity for s in related) / len(related)
        return 1.0 + avg_severity / 10

    @staticmethod
    def kerala_environmental_multiplier(industry: Industry) -> float:
        multiplier = 1.0
        for factor, industries in KERALA_FACTOR_INDUSTRIES.items():
            if industry in industries:
                multiplier *= KERALA_ENVIRONMENTAL_FACTORS[factor]
        return multiplier

    @staticmethod
    def identify_contributing_factors(profile: OccupationalProfile, condition: OccupationalCondition) -> List[str]:
        factors = []

        if profile.industry in condition.common_industries:
            factors.append(f"Working in {profile.industry.value} industry")

        for rf in profile.risk_factors:
            if rf.type in condition.risk_factors and rf.severity != RiskSeverity.LOW:
                factors.append(f"{rf.type.value} exposure: {rf.name}")

        if profile.work_environment.temperature == TemperatureRange.EXTREME_HEAT:
            factors.append("Extreme heat exposure")

        if profile.work_environment.work_schedule.hours_per_day > LONG_SHIFT_HOURS:
            factors.append("Long working hours")

        return factors

    @staticmethod
    def generate_prevention_recommendations(profile: OccupationalProfile, condition: OccupationalCondition,
                                            language: str = "en") -> List[str]:
        recommendations = list(localized(condition.prevention, language, default=[]))
        environment = profile.work_environment

        if condition.category == ConditionCategory.MUSCULOSKELETAL and environment.physical_demands.heavy_lifting:
            recommendations += ["Use mechanical lifting aids", "Implement job rotation schedules"]

        if condition.category == ConditionCategory.RESPIRATORY:
            recommendations += ["Ensure proper respiratory protection", "Regular lung function testing"]

        if condition.category == ConditionCategory.CARDIOVASCULAR and \
                environment.temperature == TemperatureRange.EXTREME_HEAT:
            recommendations += ["Implement heat stress prevention program",
                                "Provide cooling stations and adequate hydration"]

        return list(dict.fromkeys(recommendations))

    @staticmethod
    def calculate_confidence(profile: OccupationalProfile, risk_score: float) -> float:
        confidence = 0.7

        # More data, more confidence
        if profile.work_history:
            confidence += 0.1
        if profile.health_assessments:
            confidence += 0.1
        if profile.risk_factors:
            confidence += 0.1

        if risk_score > 0.9 or risk_score < 0.1:
            confidence -= 0.1

        return max(0.0, min(confidence, 1.0))

    def generate_alerts(self, predictions: List[RiskPrediction], now: Optional[datetime] = None) -> List[HealthAlert]:
        """
        One alert per high or critical prediction
        """
        now = now or datetime.now(timezone.utc)
        alerts = []

        for prediction in predictions:
            if prediction.risk_level not in (RiskLevel.HIGH, RiskLevel.CRITICAL):
                continue
            alerts.append(self.create_health_alert(prediction, now))

        return alerts

    @staticmethod
    def create_health_alert(prediction: RiskPrediction, now: datetime) -> HealthAlert:
        critical = prediction.risk_level == RiskLevel.CRITICAL
        condition = prediction.condition
        score = int(round_half_up(prediction.risk_score * 100))

        message = {}
        for language in SUPPORTED_LANGUAGES:
            name = localized(condition.name, language, default=condition.id)
            message[language] = ALERT_MESSAGES[language].format(name=name, score=score)

        return HealthAlert(
            id=f"alert_{uuid.uuid4().hex}",
            type=AlertType.IMMEDIATE_ACTION if critical else AlertType.EARLY_WARNING,
            severity=AlertSeverity.CRITICAL if critical else AlertSeverity.WARNING,
            condition_id=condition.id,
            message=message,
            recommendations={language: list(prediction.prevention_recommendations)
                             for language in SUPPORTED_LANGUAGES},
            is_active=True,
            trigger_date=now,
        )

    @staticmethod
    def industry_risk_factors(industry: Industry) -> List[RiskFactor]:
        """Typical hazards of an industry, as risk factors ready for a profile"""
        return [
            RiskFactor(
                id=f"{industry.value}_{index}",
                type=factor_type,
                name=name,
                severity=severity,
                exposure_level=exposure,
                frequency=ExposureFrequency.FREQUENT,
            )
            for index, (factor_type, name, severity, exposure) in enumerate(INDUSTRY_RISK_FACTORS[industry])
        ]

    def assess(self, profile: OccupationalProfile, language: str = "en") -> OccupationalAssessment:
        now = datetime.now(timezone.utc)
        predictions = self.predict_risks(profile, language, now)
        alerts = self.generate_alerts(predictions, now)

        if alerts:
            logger.info(f"{len(alerts)} health alerts raised for worker {profile.worker_id}")

        return OccupationalAssessment(worker_id=profile.worker_id, predictions=predictions, alerts=alerts)


occupational_risk_predictor = OccupationalRiskPredictor()
