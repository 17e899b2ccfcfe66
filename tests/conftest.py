# tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make the repo root importable without installing
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Fixed endpoint so respx mocks match regardless of a developer .env
os.environ["VALHALLA_BASE_URL"] = "https://valhalla.test/route"
os.environ.pop("VALHALLA_API_KEY", None)
os.environ["OFFLINE_MODE"] = "0"

# Import app only after setting env
from navroute.main import app  # noqa: E402
from navroute.core.preferences import ApiConfiguration, AppPreferences  # noqa: E402

VALHALLA_URL = "https://valhalla.test/route"


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def preferences():
    return AppPreferences(
        offline_mode=False,
        valhalla_api_config=ApiConfiguration(base_url=VALHALLA_URL),
    )


@pytest.fixture(autouse=True)
def _reset_shared_state():
    from navroute.core.preferences import app_preferences
    from navroute.core.route_cache import route_cache

    app_preferences.set_offline_mode(False)
    app_preferences.set_valhalla_base_url(VALHALLA_URL)
    app_preferences.set_valhalla_api_key(None)
    route_cache.clear()
    yield
    route_cache.clear()
