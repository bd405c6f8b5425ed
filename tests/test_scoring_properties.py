"""Property-based tests for the dimension scorers, composite and classifier.

Uses Hypothesis to verify:
  Dimension tests:
    1. test_dimensions_always_bounded   – 0 ≤ D1..D6 ≤ 100 for arbitrary criteria
    2. test_d3_monotone_in_selections   – adding a dimension never lowers D3
    3. test_d5_zero_without_layer       – no MiRA layer ⇒ D5 = 0
    4. test_deterministic               – same inputs ⇒ identical output

  Composite / classifier tests:
    5. test_composite_is_weighted_sum   – composite = round(Σ D_i × w_i, 1)
    6. test_final_never_exceeds_composite
    7. test_quadrant_matches_thresholds
    8. test_catastrophic_dependency_is_1a
"""
from decimal import ROUND_HALF_UP, Decimal

from hypothesis import HealthCheck, given, settings as h_settings
from hypothesis import strategies as st

from initiative_scoring.models import SCENARIO_WEIGHTS, Dimension, Initiative, Quadrant, Scenario, Tier
from initiative_scoring.scoring.bcg_advancement import BcgAdvancementCalculator
from initiative_scoring.scoring.classifier import assign_quadrant, assign_tier
from initiative_scoring.scoring.competitive_response import CompetitiveResponseCalculator
from initiative_scoring.scoring.composite import CompositeCalculator
from initiative_scoring.scoring.engines_alignment import EnginesAlignmentCalculator
from initiative_scoring.scoring.execution_feasibility import ExecutionFeasibilityCalculator
from initiative_scoring.scoring.mira_integration import MiraIntegrationCalculator
from initiative_scoring.scoring.pipeline import InitiativeScoringService
from initiative_scoring.scoring.snapshot import PortfolioSnapshot
from initiative_scoring.scoring.strategic_impact import StrategicImpactCalculator

# ── Hypothesis configuration ──────────────────────────────────────────────────
h_settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
h_settings.load_profile("ci")


# ── Strategy helpers ──────────────────────────────────────────────────────────

_KEYWORDS = [
    "sar", "million", "critical", "urgent", "ceo", "executive", "customer",
    "vision", "strategy", "protect", "retain", "defend", "prevent", "loyalty",
    "switching cost", "lead", "first-mover", "unique", "advantage", "mira",
    "data", "36 months", "2 years", "lubricants", "margin",
]
_text = st.one_of(
    st.none(),
    st.text(max_size=40),
    st.lists(st.sampled_from(_KEYWORDS), max_size=8).map(" ".join),
)
_cash = st.one_of(
    st.integers(min_value=-10**9, max_value=10**9),
    st.floats(min_value=-1e9, max_value=1e9, allow_nan=False),
    st.none(),
    st.just("n/a"),
)
_projection = st.one_of(
    st.none(),
    st.text(max_size=10),
    st.integers(),
    st.lists(_cash, max_size=4),
    st.fixed_dictionaries({"years": st.one_of(st.lists(_cash, max_size=4), st.text(max_size=10))}),
    st.fixed_dictionaries(
        {"years": st.dictionaries(st.integers(min_value=0, max_value=10).map(str), _cash, max_size=6)},
        optional={"wacc": st.one_of(st.floats(min_value=-0.5, max_value=1.0, allow_nan=False), st.none())},
    ),
)
_date = st.one_of(
    st.none(),
    st.dates().map(lambda d: d.isoformat()),
    st.just("soon"),
)
_selection = st.one_of(
    st.fixed_dictionaries({}, optional={"gain": st.integers(min_value=0, max_value=6)}),
    st.sampled_from(["d1", "d5", "d9"]),
)
_criteria = st.fixed_dictionaries(
    {},
    optional={
        "financial_projections": _projection,
        "problem_statement": _text,
        "stakeholder_impact": _text,
        "strategic_rationale": _text,
        "trl_level": st.one_of(st.integers(min_value=-5, max_value=15), st.none(), st.just("x")),
        "resource_availability": st.lists(
            st.sampled_from(["team", "budget", "sponsor", "skills", "other"]), max_size=6
        ),
        "timeline": st.fixed_dictionaries(
            {"start_date": _date, "end_date": _date},
            optional={"confidence": st.sampled_from(["high", "medium", "low", None])},
        ),
        "prerequisites": st.lists(
            st.fixed_dictionaries({"criticality": st.sampled_from(["Critical", "High", "Medium", "Low"])}),
            max_size=7,
        ),
        "bcg_i2i_dimensions": st.lists(_selection, max_size=10),
        "aramco_response": _text,
        "competitive_analysis": _text,
        "mira_integration": st.fixed_dictionaries(
            {},
            optional={
                "layer": st.one_of(st.integers(min_value=-1, max_value=6), st.none()),
                "depth": st.sampled_from(["low", "medium", "high", "deep"]),
                "multiple_layers": st.booleans(),
                "monetization_clarity": st.sampled_from(["yes", "partial", "no"]),
            },
        ),
        "engine_contribution_strength": st.sampled_from(["critical", "strong", "solid", "moderate", "weak", "?"]),
        "three_engines_alignment": st.sampled_from(
            ["e1_sustain_grow", "e2_expand_inorganically", "e3_base_oil_integration", "none"]
        ),
        "strategic_coherence": st.dictionaries(
            st.sampled_from(["ceo_priority", "aramco_address", "bcg_i2i", "vision_fit"]),
            st.booleans(),
        ),
        "priority": st.sampled_from(["critical", "high", "medium", "low"]),
        "portfolio_category": st.sampled_from(
            ["core_incremental", "core_disruptive", "non_core_incremental", "non_core_disruptive"]
        ),
    },
)
_score = st.integers(min_value=0, max_value=100)
_dim_scores = st.fixed_dictionaries({d.value: _score for d in Dimension})


def _snapshot(criteria_list):
    return PortfolioSnapshot.from_initiatives(
        [Initiative(id=f"T-{n}", criteria_values=c) for n, c in enumerate(criteria_list)]
    )


# ── Dimension property tests ──────────────────────────────────────────────────

class TestDimensionProperties:
    """Property-based tests for the six dimension calculators."""

    d1 = StrategicImpactCalculator()
    d2 = ExecutionFeasibilityCalculator()
    d3 = BcgAdvancementCalculator()
    d4 = CompetitiveResponseCalculator()
    d5 = MiraIntegrationCalculator()
    d6 = EnginesAlignmentCalculator()

    @given(criteria=_criteria, others=st.lists(_criteria, max_size=4))
    def test_dimensions_always_bounded(self, criteria, others):
        """Every dimension score is an integer in [0, 100] for any criteria."""
        snapshot = _snapshot([criteria, *others])
        scores = [
            self.d1.calculate(criteria).score,
            self.d2.calculate(criteria).score,
            self.d3.calculate(criteria).score,
            self.d4.calculate(criteria).score,
            self.d5.calculate(criteria).score,
            self.d6.calculate(criteria, snapshot).score,
        ]
        for score in scores:
            assert isinstance(score, int)
            assert 0 <= score <= 100, f"score {score} out of range for {criteria}"

    @given(
        selections=st.lists(_selection, max_size=9),
        extra=st.integers(min_value=1, max_value=6),
    )
    def test_d3_monotone_in_selections(self, selections, extra):
        """Adding a dimension with at least the current average gain never lowers D3."""
        before = self.d3.calculate({"bcg_i2i_dimensions": selections})
        gain = max(extra, int(before.average_gain.to_integral_value(rounding="ROUND_CEILING")))
        after = self.d3.calculate({"bcg_i2i_dimensions": [*selections, {"gain": gain}]})
        assert after.score >= before.score

    @given(config=st.fixed_dictionaries(
        {"layer": st.sampled_from([None, 0, "0", "none"])},
        optional={
            "depth": st.sampled_from(["low", "medium", "high"]),
            "multiple_layers": st.booleans(),
            "monetization_clarity": st.sampled_from(["yes", "partial", "no"]),
        },
    ))
    def test_d5_zero_without_layer(self, config):
        """No MiRA layer ⇒ D5 = 0 regardless of the other modifiers."""
        assert self.d5.calculate({"mira_integration": config}).score == 0

    @given(criteria=_criteria)
    @h_settings(max_examples=100)
    def test_deterministic(self, criteria):
        """Identical inputs must always produce identical output."""
        first = InitiativeScoringService("A").score_portfolio(
            [Initiative(id="T-1", criteria_values=criteria)]
        ).results[0]
        second = InitiativeScoringService("A").score_portfolio(
            [Initiative(id="T-1", criteria_values=criteria)]
        ).results[0]
        assert first.to_dict() == second.to_dict()


# ── Composite / classifier property tests ─────────────────────────────────────

class TestCompositeProperties:
    """Property-based tests for composite scoring and classification."""

    @given(scores=_dim_scores, scenario=st.sampled_from(list(Scenario)))
    def test_composite_is_weighted_sum(self, scores, scenario):
        """Composite equals the scenario-weighted sum rounded half-up to 0.1."""
        expected = sum(
            (Decimal(scores[d.value]) * w for d, w in SCENARIO_WEIGHTS[scenario].items()),
            Decimal(0),
        ).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        result = CompositeCalculator(scenario).composite(scores)
        assert result.composite_score == expected
        assert Decimal(0) <= result.composite_score <= Decimal(100)

    @given(scores=_dim_scores, scenario=st.sampled_from(list(Scenario)))
    def test_final_never_exceeds_composite(self, scores, scenario):
        """Quadrant modifiers are at most 1."""
        calc = CompositeCalculator(scenario)
        composite = calc.composite(scores).composite_score
        quadrant = assign_quadrant(scores["d1"], scores["d2"])
        final = calc.final(composite, quadrant)
        assert Decimal(0) <= final <= composite

    @given(d1=_score, d2=_score)
    def test_quadrant_matches_thresholds(self, d1, d2):
        """Quadrant is fully determined by D1 ≥ 75 and D2 ≥ 80."""
        expected = {
            (True, True): Quadrant.QUICK_WIN,
            (False, True): Quadrant.PUSH_HARDER,
            (True, False): Quadrant.TRANSFORMATIONAL,
            (False, False): Quadrant.MOONSHOT,
        }[(d1 >= 75, d2 >= 80)]
        assert assign_quadrant(d1, d2) is expected

    @given(
        critical=st.integers(min_value=3, max_value=8),
        final=st.decimals(min_value=0, max_value=100, places=1),
        priority=st.sampled_from(["critical", "high", "medium", "low", None]),
    )
    def test_catastrophic_dependency_is_1a(self, critical, final, priority):
        """Three or more critical prerequisites always yield tier 1a."""
        criteria = {
            "prerequisites": [{"criticality": "Critical"}] * critical,
            "priority": priority,
        }
        assert assign_tier(criteria, final) is Tier.TIER_1A
