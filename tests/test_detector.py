import asyncio
import unittest
from datetime import datetime, timedelta, timezone

from healthrisk.errors import HotspotNotFoundError
from healthrisk.models import AlertLevel, AnonymousReportRequest, HotspotStatus, ReportLocation, Severity
from healthrisk.surveillance.detector import OutbreakDetector, evaluate_window, merge_aggregate
from healthrisk.surveillance.notifications import HOTSPOT_DETECTED, MemoryNotifier, drain_pending
from healthrisk.surveillance.reports import build_report
from healthrisk.surveillance.store import InMemorySurveillanceStore

T0 = datetime(2024, 7, 1, 8, 0, tzinfo=timezone.utc)


def make_report(severity=Severity.MILD, symptoms=("cough",), minutes=0, district="Ernakulam", area="Kakkanad"):
    body = AnonymousReportRequest(
        symptoms=list(symptoms),
        severity=severity,
        duration="1-3 days",
        location=ReportLocation(district=district, area=area),
    )
    return build_report(body, T0 + timedelta(minutes=minutes))


class FailingStore(InMemorySurveillanceStore):
    async def upsert_aggregate(self, report_date, district, merge):
        raise RuntimeError("database unavailable")


class EvaluateWindowTests(unittest.TestCase):
    def test_below_thresholds(self):
        reports = [make_report(minutes=i) for i in range(4)]

        evaluation = evaluate_window("ernakulam", reports)

        self.assertFalse(evaluation.is_hotspot)
        self.assertIsNone(evaluation.alert_level)
        self.assertEqual(evaluation.total_reports, 4)

    def test_five_reports_two_severe_is_high(self):
        reports = [make_report(minutes=i) for i in range(3)]
        reports += [make_report(Severity.SEVERE, minutes=3), make_report(Severity.CRITICAL, minutes=4)]

        evaluation = evaluate_window("ernakulam", reports)

        self.assertTrue(evaluation.is_hotspot)
        self.assertEqual(evaluation.alert_level, AlertLevel.HIGH)
        self.assertEqual(evaluation.severe_critical_count, 2)

    def test_three_severe_is_critical(self):
        reports = [make_report(Severity.SEVERE, minutes=i) for i in range(3)]

        evaluation = evaluate_window("ernakulam", reports)

        self.assertTrue(evaluation.is_hotspot)
        self.assertEqual(evaluation.alert_level, AlertLevel.CRITICAL)

    def test_score_threshold(self):
        symptoms = ("cough", "headache", "fatigue", "nausea", "dizziness", "chills")
        # 0.5 + 0.6 per report
        reports = [make_report(Severity.MODERATE, symptoms, minutes=i) for i in range(10)]

        evaluation = evaluate_window("ernakulam", reports)

        self.assertTrue(evaluation.is_hotspot)
        self.assertEqual(evaluation.hotspot_score, 11.0)
        self.assertEqual(evaluation.alert_level, AlertLevel.HIGH)

    def test_evaluation_depends_only_on_window(self):
        reports = [make_report(Severity.SEVERE, minutes=i) for i in range(2)] + [make_report(minutes=5)]

        self.assertEqual(evaluate_window("ernakulam", reports), evaluate_window("ernakulam", list(reports)))


class MergeAggregateTests(unittest.TestCase):
    def test_running_totals(self):
        first = make_report(Severity.MILD, ("cough",))
        second = make_report(Severity.CRITICAL, ("fever", "cough"), minutes=1)

        aggregate = merge_aggregate(merge_aggregate(None, first), second)

        self.assertEqual(aggregate.report_date, T0.date())
        self.assertEqual(aggregate.total_reports, 2)
        self.assertEqual(aggregate.severity_breakdown[Severity.MILD], 1)
        self.assertEqual(aggregate.severity_breakdown[Severity.CRITICAL], 1)
        self.assertEqual(aggregate.severity_breakdown[Severity.SEVERE], 0)
        self.assertEqual(aggregate.symptom_counts, {"cough": 2, "fever": 1})
        self.assertEqual(aggregate.top_symptoms, ["cough", "fever"])
        self.assertAlmostEqual(aggregate.average_risk_score, (first.risk_score + second.risk_score) / 2)


class OutbreakDetectorTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemorySurveillanceStore()
        self.notifier = MemoryNotifier()
        self.detector = OutbreakDetector(self.store, self.notifier, window_hours=24, expiry_hours=6)

    async def submit(self, report):
        await self.store.insert_report(report)
        return await self.detector.process_report(report)

    async def test_hotspot_activates_then_escalates(self):
        for i in range(3):
            self.assertIsNone(await self.submit(make_report(minutes=i)))
        self.assertIsNone(await self.submit(make_report(Severity.SEVERE, minutes=3)))

        hotspot = await self.submit(make_report(Severity.SEVERE, minutes=4))
        self.assertEqual(hotspot.alert_level, AlertLevel.HIGH)
        self.assertEqual(hotspot.total_reports, 5)
        self.assertEqual(hotspot.status, HotspotStatus.ACTIVE)

        hotspot = await self.submit(make_report(Severity.CRITICAL, minutes=5))
        self.assertEqual(hotspot.alert_level, AlertLevel.CRITICAL)
        self.assertEqual(hotspot.severe_critical_count, 3)
        self.assertEqual(hotspot.detected_at, T0 + timedelta(minutes=4))
        self.assertEqual(hotspot.last_report_at, T0 + timedelta(minutes=5))

        aggregate = await self.store.get_aggregate(T0.date(), "ernakulam")
        self.assertEqual(aggregate.total_reports, 6)

        await drain_pending()
        self.assertEqual([e.kind for e in self.notifier.events], [HOTSPOT_DETECTED, HOTSPOT_DETECTED])

    async def test_reports_outside_window_are_ignored(self):
        for i in range(2):
            await self.submit(make_report(Severity.SEVERE, minutes=i))

        hotspot = await self.submit(make_report(Severity.SEVERE, minutes=25 * 60))

        self.assertIsNone(hotspot)

    async def test_failures_are_logged_not_raised(self):
        detector = OutbreakDetector(FailingStore(), self.notifier)

        with self.assertLogs("healthrisk.surveillance.detector", level="ERROR"):
            result = await detector.process_report(make_report())

        self.assertIsNone(result)

    async def test_concurrent_reports_are_all_counted(self):
        reports = [make_report(minutes=i) for i in range(20)]
        for report in reports:
            await self.store.insert_report(report)

        await asyncio.gather(*(self.detector.process_report(r) for r in reports))

        aggregate = await self.store.get_aggregate(T0.date(), "ernakulam")
        self.assertEqual(aggregate.total_reports, 20)
        self.assertEqual(aggregate.symptom_counts["cough"], 20)
        self.assertEqual(self.store._locks, {})

    async def test_window_ends_at_triggering_report(self):
        first = make_report(district="Kollam", area="Chavara")
        await self.store.insert_report(first)
        for i in range(1, 4):
            await self.store.insert_report(make_report(Severity.SEVERE, district="Kollam", area="Neendakara", minutes=i))

        self.assertIsNone(await self.detector.process_report(first))
        self.assertIsNone(await self.store.get_hotspot("kollam", "Chavara"))

        window = await self.store.reports_since(T0 - timedelta(hours=24), "kollam", until=first.created_at)
        self.assertEqual([r.id for r in window], [first.id])

    async def test_stale_hotspots_expire_and_reactivate(self):
        for i in range(3):
            await self.submit(make_report(Severity.CRITICAL, minutes=i))

        self.assertEqual(await self.detector.expire_stale_hotspots(T0 + timedelta(hours=5)), [])

        expired = await self.detector.expire_stale_hotspots(T0 + timedelta(hours=7))
        self.assertEqual(len(expired), 1)
        self.assertEqual(expired[0].status, HotspotStatus.EXPIRED)

        hotspot = await self.submit(make_report(Severity.SEVERE, minutes=8 * 60))
        self.assertEqual(hotspot.status, HotspotStatus.ACTIVE)
        self.assertEqual(hotspot.detected_at, T0 + timedelta(hours=8))

    async def test_expiry_disabled(self):
        detector = OutbreakDetector(self.store, self.notifier, expiry_hours=0)
        for i in range(3):
            await self.submit(make_report(Severity.CRITICAL, minutes=i))

        self.assertEqual(await detector.expire_stale_hotspots(T0 + timedelta(days=30)), [])

    async def test_resolve_hotspot(self):
        for i in range(3):
            await self.submit(make_report(Severity.CRITICAL, minutes=i))

        hotspot = await self.detector.resolve_hotspot(" Ernakulam ", " Kakkanad ")

        self.assertEqual(hotspot.status, HotspotStatus.RESOLVED)
        self.assertEqual(await self.store.list_hotspots(HotspotStatus.ACTIVE), [])

        with self.assertRaises(HotspotNotFoundError):
            await self.detector.resolve_hotspot("kollam", "Chavara")


if __name__ == "__main__":
    unittest.main()
