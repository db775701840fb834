"""
Engine error types
"""

from typing import Optional


class EngineError(Exception):
    """Base class for errors raised by the engine"""


class ReportValidationError(EngineError):
    """A submitted report is missing a required field"""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"{field.capitalize()} is required")


class CatalogLookupError(EngineError):
    """Requested id does not exist in a reference catalog"""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"Unknown {kind}: {item_id}")


class HotspotNotFoundError(EngineError):
    """No hotspot has been recorded for a (district, area) key"""

    def __init__(self, district: str, area: str):
        self.district = district
        self.area = area
        super().__init__(f"No hotspot for {district}/{area}")
