"""Pytest fixtures for testing"""

import pytest
from pathlib import Path
from fastapi.testclient import TestClient
from revolving_sim.api.main import create_app
from revolving_sim.domain.models import SimulationParams


INDEX_HTML = "<!doctype html><html><body><div id=\"root\"></div></body></html>"
APP_JS = "console.log('revolving simulator');"


@pytest.fixture
def static_bundle(tmp_path: Path) -> Path:
    """Minimal compiled frontend: index document plus one asset"""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (dist / "assets" / "app.js").write_text(APP_JS, encoding="utf-8")
    return dist


@pytest.fixture
def client(static_bundle: Path) -> TestClient:
    """Create FastAPI test client serving the temporary bundle"""
    app = create_app(static_dir=static_bundle)
    return TestClient(app)


@pytest.fixture
def default_params() -> SimulationParams:
    """Scenario the calculator starts with: ¥300,000 at 18%, ¥5,000/month"""
    return SimulationParams(
        initial_balance=300_000,
        monthly_new_charge=0,
        monthly_repayment=5_000,
        annual_interest_rate=18.0,
    )
