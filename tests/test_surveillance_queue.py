import asyncio
import unittest

import main
from healthrisk.models import AnonymousReportRequest, ReportLocation, Severity
from healthrisk.surveillance.reports import build_report


def make_report(area):
    return build_report(AnonymousReportRequest(
        symptoms=["fever"],
        severity=Severity.MILD,
        duration="1-3 days",
        location=ReportLocation(district="Kollam", area=area),
    ))


class FakeDetector:
    def __init__(self):
        self.processed = []

    async def process_report(self, report):
        await asyncio.sleep(0)
        if report.area == "boom":
            raise RuntimeError("detector failure")
        self.processed.append(report.area)


class ProcessSurveillanceQueueTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.district = "kollam"
        self.detector = FakeDetector()

        main.SURVEILLANCE_QUEUES[self.district] = asyncio.Queue()

        # Patch the detector used by the worker
        self._original_detector = main.DETECTOR
        main.DETECTOR = self.detector

    async def asyncTearDown(self):
        main.DETECTOR = self._original_detector

        worker = main.SURVEILLANCE_WORKERS.pop(self.district, None)
        if worker is not None and not worker.done():
            worker.cancel()
            await asyncio.gather(worker, return_exceptions=True)

        queue = main.SURVEILLANCE_QUEUES.pop(self.district, None)
        if queue is not None:
            while not queue.empty():
                queue.get_nowait()
                queue.task_done()

    async def test_process_surveillance_queue_in_order(self):
        worker = asyncio.create_task(main.process_surveillance_queue(self.district))

        try:
            for area in ("Chavara", "boom", "Karunagappally"):
                await main.SURVEILLANCE_QUEUES[self.district].put(make_report(area))

            await asyncio.wait_for(main.SURVEILLANCE_QUEUES[self.district].join(), timeout=1)

            self.assertEqual(self.detector.processed, ["Chavara", "Karunagappally"])
        finally:
            worker.cancel()
            with self.assertRaises(asyncio.CancelledError):
                await worker

    async def test_idle_worker_exits_and_frees_entries(self):
        worker = asyncio.create_task(main.process_surveillance_queue(self.district, idle_seconds=0.05))
        main.SURVEILLANCE_WORKERS[self.district] = worker

        await main.SURVEILLANCE_QUEUES[self.district].put(make_report("Chavara"))
        await asyncio.wait_for(worker, timeout=1)

        self.assertEqual(self.detector.processed, ["Chavara"])
        self.assertNotIn(self.district, main.SURVEILLANCE_QUEUES)
        self.assertNotIn(self.district, main.SURVEILLANCE_WORKERS)

    async def test_enqueue_restarts_finished_worker(self):
        finished = asyncio.create_task(asyncio.sleep(0))
        await finished
        main.SURVEILLANCE_WORKERS[self.district] = finished

        await main.enqueue_surveillance(make_report("Chavara"))
        await asyncio.wait_for(main.SURVEILLANCE_QUEUES[self.district].join(), timeout=1)

        self.assertIsNot(main.SURVEILLANCE_WORKERS[self.district], finished)
        self.assertEqual(self.detector.processed, ["Chavara"])

    async def test_missing_queue_returns(self):
        main.SURVEILLANCE_QUEUES.pop(self.district)

        await main.process_surveillance_queue(self.district)

        self.assertEqual(self.detector.processed, [])


if __name__ == "__main__":
    unittest.main()
