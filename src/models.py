"""Shared dataclasses for wasteboard G-code generation."""
from dataclasses import dataclass, asdict, replace as dataclass_replace
from typing import Any, Dict, Mapping

from .errors import ParameterError

# Wire names used by shareable links and the JSON API
CAMEL_CASE_KEYS = {
    'columns': 'columns',
    'column_spacing': 'columnSpacing',
    'rows': 'rows',
    'row_spacing': 'rowSpacing',
    'feed': 'feed',
    'fast_feed': 'fastFeed',
    'tool_diameter': 'toolDiameter',
    'hole_depth': 'holeDepth',
    'hole_diameter': 'holeDiameter',
    'plate_depth': 'plateDepth',
    'plate_diameter': 'plateDiameter',
    'safe_z': 'safeZ',
}

INTEGER_FIELDS = ('columns', 'rows')


@dataclass(frozen=True)
class PlanParameters:
    """Geometry and feed parameters for one hole grid (millimeters)."""
    columns: int = 10
    column_spacing: float = 50
    rows: int = 10
    row_spacing: float = 50

    feed: float = 100        # mm/min, cutting
    fast_feed: float = 1000  # mm/min, rapid

    tool_diameter: float = 6

    hole_depth: float = 22.5  # from plate top surface, includes plate_depth
    hole_diameter: float = 7

    plate_depth: float = 2
    plate_diameter: float = 22

    safe_z: float = 5

    @property
    def hole_count(self) -> int:
        return max(self.columns, 0) * max(self.rows, 0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PlanParameters":
        """
        Build parameters from a mapping.

        Accepts snake_case field names or their camelCase wire names. Missing
        keys keep their defaults.

        Raises:
            ParameterError: If a value cannot be converted to a number
        """
        values = {}
        for name, camel in CAMEL_CASE_KEYS.items():
            if name in data:
                raw = data[name]
            elif camel in data:
                raw = data[camel]
            else:
                continue
            values[name] = _coerce(name, raw)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Parameters keyed by their camelCase wire names."""
        return {CAMEL_CASE_KEYS[name]: value for name, value in asdict(self).items()}

    def replace(self, **changes) -> "PlanParameters":
        """Return a copy with the given fields changed."""
        return dataclass_replace(self, **changes)


def _coerce(name: str, raw: Any):
    if isinstance(raw, bool):
        raise ParameterError(f"{name} must be a number, got {raw!r}")
    try:
        if name in INTEGER_FIELDS:
            return int(raw)
        return float(raw)
    except (TypeError, ValueError, OverflowError):
        raise ParameterError(f"{name} must be a number, got {raw!r}")
