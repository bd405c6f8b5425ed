"""Pytest fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient

from initiative_scoring.config import get_settings
from initiative_scoring.logging_config import configure_logging
from initiative_scoring.models import Initiative
from initiative_scoring.scoring.snapshot import PortfolioSnapshot

# Keep per-dimension debug events out of the captured output
configure_logging("WARNING")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    """Create test client for the API."""
    from initiative_scoring.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def strong_criteria():
    """A well-evidenced, quick-win initiative (D1=97, D2=94, D3=80, D4=75, D5=85)."""
    return {
        "financial_projections": {
            "wacc": 0.12,
            "years": {"0": -5_000_000, "1": 60_000_000, "2": 60_000_000, "3": 60_000_000},
        },
        "problem_statement": "Distributor churn costs SAR 40 million a year and is urgent",
        "stakeholder_impact": "CEO sponsorship; customer experience improves",
        "strategic_rationale": "Core to the Vision 2030 strategy",
        "trl_level": 9,
        "resource_availability": ["team", "budget", "sponsor", "skills"],
        "timeline": {"start_date": "2025-01-01", "end_date": "2025-04-15", "confidence": "high"},
        "prerequisites": [
            {"name": "Oracle upgrade", "criticality": "High"},
            {"name": "Data contract", "criticality": "Medium"},
        ],
        "bcg_i2i_dimensions": [{"id": f"d{n}", "gain": 4} for n in range(1, 6)],
        "aramco_response": "Protect share and retain key accounts; build loyalty",
        "competitive_analysis": "First-mover advantage; competitors would need 36 months to replicate",
        "mira_integration": {"layer": 3, "depth": "high", "multiple_layers": True},
        "engine_contribution_strength": "strong",
        "three_engines_alignment": "e2_expand_inorganically",
        "strategic_coherence": {
            "ceo_priority": True,
            "aramco_address": True,
            "bcg_i2i": True,
            "vision_fit": True,
        },
        "priority": "high",
        "portfolio_category": "core_disruptive",
    }


@pytest.fixture
def strong_initiative(strong_criteria):
    """Sample strong initiative."""
    return Initiative(id="PET-006", name="Distributor loyalty platform", criteria_values=strong_criteria)


@pytest.fixture
def empty_initiative():
    """Initiative with no criteria captured yet."""
    return Initiative(id="NEW-001", name="Blank dossier")


@pytest.fixture
def make_initiative():
    """Factory for initiatives with just a category and engine."""
    counter = {"n": 0}

    def _make(category=None, engine=None, **criteria):
        counter["n"] += 1
        values = dict(criteria)
        if category is not None:
            values["portfolio_category"] = category
        if engine is not None:
            values["three_engines_alignment"] = engine
        return Initiative(id=f"PET-{counter['n']:03d}", criteria_values=values)

    return _make


@pytest.fixture
def balanced_portfolio(make_initiative):
    """100 initiatives exactly on the 60/15/15/10 and 60/25/15 targets."""
    categories = (
        ["core_incremental"] * 60
        + ["core_disruptive"] * 15
        + ["non_core_incremental"] * 15
        + ["non_core_disruptive"] * 10
    )
    engines = (
        ["e1_sustain_grow"] * 60
        + ["e2_expand_inorganically"] * 25
        + ["e3_base_oil_integration"] * 15
    )
    return [make_initiative(c, e) for c, e in zip(categories, engines)]


@pytest.fixture
def single_snapshot(empty_initiative):
    """Snapshot of a one-initiative portfolio."""
    return PortfolioSnapshot.from_initiatives([empty_initiative])
