import os
import sys
import pytest
from dotenv import load_dotenv

# Add the project root directory to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


@pytest.fixture(autouse=True)
def setup_test_env():
    """Fixture to set up test environment variables.
    The autouse=True means this will run automatically for every test.
    """
    # Store original environment
    original_env = dict(os.environ)

    # Load .env file if it exists
    load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))

    # Converter defaults must not leak in from the developer shell
    for name in ("UULE_ROLE", "UULE_PRODUCER", "UULE_PROVENANCE", "UULE_RADIUS"):
        os.environ.pop(name, None)

    yield  # This is where the test runs

    # Restore original environment after test
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def queens_uule():
    return "w+CAIQICIkUXVlZW5zIENvdW50eSxOZXcgWW9yayxVbml0ZWQgU3RhdGVz"


@pytest.fixture
def mountain_view_uule():
    return ("a+cm9sZToxCnByb2R1Y2VyOjEyCnByb3ZlbmFuY2U6Ngp0aW1lc3RhbXA6MTU5MTUyMTI0OTAzNDAwMApsYXRsbmd7"
            "CmxhdGl0dWRlX2U3OjM3NDIxMDAwMApsb25naXR1ZGVfZTc6LTEyMjA4NDAwMAp9CnJhZGl1czotMQ")


@pytest.fixture
def mountain_view():
    from uule_converter import Uulev2Data

    return Uulev2Data(role=1, producer=12, provenance=6, timestamp=1591521249034000,
                      lat=37.4210000, long=-12.2084000, radius=-1)


@pytest.fixture
def places():
    return [
        "Queens County,New York,United States",
        "Dallas,Texas,United States",
        "",
        "München,Bavaria,Germany",
        "東京都,Japan",
        "x" * 255,
    ]
