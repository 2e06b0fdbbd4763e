"""Tests for src/models.py module."""
import dataclasses

import pytest

from src.errors import ParameterError
from src.models import PlanParameters


class TestPlanParameters:
    """Tests for PlanParameters."""

    def test_defaults(self):
        params = PlanParameters()
        assert params.columns == 10
        assert params.rows == 10
        assert params.column_spacing == 50
        assert params.row_spacing == 50
        assert params.feed == 100
        assert params.fast_feed == 1000
        assert params.tool_diameter == 6
        assert params.hole_depth == 22.5
        assert params.hole_diameter == 7
        assert params.plate_depth == 2
        assert params.plate_diameter == 22
        assert params.safe_z == 5

    def test_frozen(self):
        params = PlanParameters()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.columns = 3

    def test_hole_count(self):
        assert PlanParameters(columns=3, rows=4).hole_count == 12
        assert PlanParameters(columns=0, rows=4).hole_count == 0
        assert PlanParameters(columns=-2, rows=4).hole_count == 0

    def test_replace(self):
        params = PlanParameters()
        changed = params.replace(columns=2, safe_z=10)
        assert changed.columns == 2
        assert changed.safe_z == 10
        assert params.columns == 10


class TestFromDict:
    """Tests for PlanParameters.from_dict."""

    def test_camel_case_keys(self):
        params = PlanParameters.from_dict({
            'columns': 2,
            'columnSpacing': 30,
            'fastFeed': 2000,
            'toolDiameter': 3.175,
            'safeZ': 8,
        })
        assert params.columns == 2
        assert params.column_spacing == 30
        assert params.fast_feed == 2000
        assert params.tool_diameter == 3.175
        assert params.safe_z == 8

    def test_snake_case_keys(self):
        params = PlanParameters.from_dict({'plate_diameter': 25, 'hole_depth': 19})
        assert params.plate_diameter == 25
        assert params.hole_depth == 19

    def test_missing_keys_use_defaults(self):
        assert PlanParameters.from_dict({}) == PlanParameters()

    def test_unknown_keys_ignored(self):
        assert PlanParameters.from_dict({'spindle': 12000}) == PlanParameters()

    def test_string_numbers_coerced(self):
        params = PlanParameters.from_dict({'rows': '4', 'holeDiameter': '7.5'})
        assert params.rows == 4
        assert isinstance(params.rows, int)
        assert params.hole_diameter == 7.5

    def test_integer_fields_truncate_floats(self):
        assert PlanParameters.from_dict({'columns': 3.0}).columns == 3

    @pytest.mark.parametrize("data", [
        {'columns': 'ten'},
        {'feed': None},
        {'safeZ': [5]},
        {'rows': True},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ParameterError):
            PlanParameters.from_dict(data)


class TestToDict:
    """Tests for PlanParameters.to_dict."""

    def test_camel_case_wire_names(self):
        data = PlanParameters().to_dict()
        assert list(data) == [
            'columns', 'columnSpacing', 'rows', 'rowSpacing', 'feed', 'fastFeed',
            'toolDiameter', 'holeDepth', 'holeDiameter', 'plateDepth', 'plateDiameter', 'safeZ',
        ]
        assert data['holeDepth'] == 22.5

    def test_round_trip(self):
        params = PlanParameters(columns=4, plate_depth=3.5)
        assert PlanParameters.from_dict(params.to_dict()) == params
