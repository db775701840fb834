"""
Keyed persistence for anonymous reports, daily aggregates and hotspots
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple

from healthrisk.models import AnonymousReport, Hotspot, HotspotStatus, SurveillanceAggregate

logger = logging.getLogger(__name__)

AggregateKey = Tuple[date, str]
HotspotKey = Tuple[str, str]


class SurveillanceStore:
    """
    Persistence interface used by the surveillance path
    Upserts take a merge function and must apply it atomically per key
    """

    async def insert_report(self, report: AnonymousReport) -> None:
        raise NotImplementedError

    async def reports_since(self, since: datetime, district: Optional[str] = None,
                            until: Optional[datetime] = None) -> List[AnonymousReport]:
        raise NotImplementedError

    async def get_aggregate(self, report_date: date, district: str) -> Optional[SurveillanceAggregate]:
        raise NotImplementedError

    async def upsert_aggregate(self, report_date: date, district: str,
                               merge: Callable[[Optional[SurveillanceAggregate]], SurveillanceAggregate]
                               ) -> SurveillanceAggregate:
        raise NotImplementedError

    async def get_hotspot(self, district: str, area: str) -> Optional[Hotspot]:
        raise NotImplementedError

    async def upsert_hotspot(self, district: str, area: str,
                             merge: Callable[[Optional[Hotspot]], Hotspot]) -> Hotspot:
        raise NotImplementedError

    async def list_hotspots(self, status: Optional[HotspotStatus] = None) -> List[Hotspot]:
        raise NotImplementedError


class InMemorySurveillanceStore(SurveillanceStore):
    """Process-local store, one lock per aggregate or hotspot key"""

    def __init__(self):
        self.reports: List[AnonymousReport] = []
        self.aggregates: Dict[AggregateKey, SurveillanceAggregate] = {}
        self.hotspots: Dict[HotspotKey, Hotspot] = {}
        # key -> [lock, holders and waiters]; entries are dropped once unused
        self._locks: Dict[tuple, list] = {}

    async def insert_report(self, report: AnonymousReport) -> None:
        self.reports.append(report)

    async def reports_since(self, since: datetime, district: Optional[str] = None,
                            until: Optional[datetime] = None) -> List[AnonymousReport]:
        return [
            r for r in self.reports
            if r.created_at >= since
            and (until is None or r.created_at <= until)
            and (district is None or r.district == district)
        ]

    @asynccontextmanager
    async def _key_lock(self, key: tuple):
        entry = self._locks.get(key)
        if entry is None:
            entry = self._locks[key] = [asyncio.Lock(), 0]
        entry[1] += 1
        try:
            async with entry[0]:
                yield
        finally:
            entry[1] -= 1
            if entry[1] == 0 and self._locks.get(key) is entry:
                del self._locks[key]

    async def get_aggregate(self, report_date: date, district: str) -> Optional[SurveillanceAggregate]:
        return self.aggregates.get((report_date, district))

    async def upsert_aggregate(self, report_date, district, merge):
        key = (report_date, district)
        async with self._key_lock(("aggregate",) + key):
            updated = merge(self.aggregates.get(key))
            self.aggregates[key] = updated
            return updated

    async def get_hotspot(self, district: str, area: str) -> Optional[Hotspot]:
        return self.hotspots.get((district, area))

    async def upsert_hotspot(self, district, area, merge):
        key = (district, area)
        async with self._key_lock(("hotspot",) + key):
            updated = merge(self.hotspots.get(key))
            self.hotspots[key] = updated
            return updated

    async def list_hotspots(self, status: Optional[HotspotStatus] = None) -> List[Hotspot]:
        hotspots = [h for h in self.hotspots.values() if status is None or h.status == status]
        return sorted(hotspots, key=lambda h: h.detected_at, reverse=True)

    def clear(self):
        self.reports.clear()
        self.aggregates.clear()
        self.hotspots.clear()
        self._locks.clear()
        logger.info("Surveillance store cleared")
