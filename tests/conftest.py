"""Test configuration and fixtures."""
import matplotlib
import pytest

matplotlib.use('Agg')

from app import create_app  # noqa: E402
from src.models import PlanParameters  # noqa: E402


class TestConfig:
    """Test configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    LOG_LEVEL = 'DEBUG'
    OUTPUT_DIR = 'output'
    OUTPUT_FILENAME = 'wasteboard.nc'
    MAX_HOLES = 100


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def single_hole_params():
    """One hole at the origin with the default tool, hole and plate."""
    return PlanParameters(
        columns=1,
        rows=1,
        column_spacing=0,
        row_spacing=0,
        tool_diameter=6,
        hole_diameter=7,
        plate_diameter=22,
        plate_depth=2,
        hole_depth=22.5,
        safe_z=5,
        feed=100,
        fast_feed=1000
    )


@pytest.fixture
def grid_params():
    """A small 3 x 2 grid with spacing wider than the plate."""
    return PlanParameters(columns=3, rows=2, column_spacing=30, row_spacing=40)
