"""Tests for the dossier field catalogue."""
from collections import Counter
from decimal import Decimal

import pytest
from pydantic import ValidationError

from initiative_scoring.catalogue import (
    ENGINE_INPUT_KEYS,
    DossierCatalogue,
    DropdownField,
    FinancialTableField,
    MiraConfigField,
    NumberField,
    StructuredField,
    get_catalogue,
)
from initiative_scoring.models import (
    QUADRANT_MODIFIERS,
    SCENARIO_WEIGHTS,
    Dimension,
    FieldCategory,
    Quadrant,
    Scenario,
)
from initiative_scoring.scoring.execution_feasibility import TRL_SCORES
from initiative_scoring.scoring.mira_integration import LAYER_SCORES


@pytest.fixture(scope="module")
def catalogue():
    return get_catalogue()


class TestCatalogueShape:
    """Structural tests for the catalogue."""

    def test_thirty_seven_fields(self, catalogue):
        """The framework has 37 numbered criteria."""
        assert len(catalogue.fields) == 37
        assert [f.id for f in catalogue.fields] == [str(n) for n in range(1, 38)]

    def test_keys_unique(self, catalogue):
        """Every field key is unique."""
        counts = Counter(f.key for f in catalogue.fields)
        assert [k for k, n in counts.items() if n > 1] == []

    def test_category_sizes(self, catalogue):
        """Fields are grouped into the eight dossier sections."""
        sizes = {c: len(catalogue.fields_in(c)) for c in FieldCategory}
        assert sizes == {
            FieldCategory.METADATA: 5,
            FieldCategory.STRATEGIC: 5,
            FieldCategory.SCORING: 6,
            FieldCategory.BUSINESS_CASE: 7,
            FieldCategory.IMPLEMENTATION: 4,
            FieldCategory.DEPENDENCIES: 3,
            FieldCategory.RAID: 4,
            FieldCategory.METRICS: 3,
        }

    def test_fields_in_accepts_string(self, catalogue):
        """Category may be given by value."""
        assert catalogue.fields_in("raid") == catalogue.fields_in(FieldCategory.RAID)

    def test_cached(self):
        """The catalogue is validated once per process."""
        assert get_catalogue() is get_catalogue()


class TestFieldDescriptors:
    """Tests for the discriminated field descriptor types."""

    def test_discriminated_types(self, catalogue):
        """Each descriptor is parsed into the model for its type tag."""
        assert isinstance(catalogue.field("trl_level"), DropdownField)
        assert isinstance(catalogue.field("financial_projections"), FinancialTableField)
        assert isinstance(catalogue.field("mira_integration"), MiraConfigField)
        assert isinstance(catalogue.field("risks"), StructuredField)
        assert catalogue.field("risks").type == "risk_matrix"

    def test_score_fields(self, catalogue):
        """D1–D6 are read-only number fields, except D4 which is AI-suggested."""
        scoring = catalogue.scoring_fields()
        assert [f.key for f in scoring] == [f"{d.value}_score" for d in Dimension]
        for descriptor in scoring:
            assert isinstance(descriptor, NumberField)
            assert (descriptor.min, descriptor.max) == (0, 100)
        d4 = catalogue.field("d4_score")
        assert d4.ai_suggested and not d4.readonly
        assert catalogue.field("d1_score").readonly

    def test_score_field_weights(self, catalogue):
        """Dossier weights for D1–D6 total 105 points, as published."""
        assert [f.weight for f in catalogue.scoring_fields()] == [25, 25, 20, 15, 10, 10]

    def test_trl_option_scores_match_engine(self, catalogue):
        """TRL option scores are the ones D2 uses."""
        options = catalogue.field("trl_level").options
        assert {o.value: o.score for o in options} == TRL_SCORES

    def test_mira_layer_scores_match_engine(self, catalogue):
        """MiRA layer option scores are the ones D5 uses."""
        layers = catalogue.field("mira_integration").layers
        assert {o.value: o.score for o in layers} == LAYER_SCORES

    def test_financial_table_defaults(self, catalogue):
        """Financial projections default to a 12% WACC over years 0–5."""
        table = catalogue.field("financial_projections")
        assert table.wacc == Decimal("0.12")
        assert table.years == (0, 1, 2, 3, 4, 5)

    def test_unknown_key(self, catalogue):
        """Looking up a missing field raises KeyError."""
        with pytest.raises(KeyError):
            catalogue.field("favourite_colour")

    def test_unknown_type_rejected(self):
        """A descriptor with an unknown type tag fails validation."""
        payload = get_catalogue().model_dump()
        payload["fields"] = [{**payload["fields"][0], "type": "hologram"}]
        with pytest.raises(ValidationError):
            DossierCatalogue.model_validate(payload)

    def test_descriptors_frozen(self, catalogue):
        """Descriptors are immutable."""
        with pytest.raises(ValidationError):
            catalogue.field("trl_level").label = "changed"


class TestScoringConfig:
    """The catalogue's scoring config mirrors the engine constants."""

    @pytest.mark.parametrize("scenario", list(Scenario))
    def test_scenario_weights(self, catalogue, scenario):
        """Published weights equal the weights the engine applies."""
        published = catalogue.scoring_config.scenarios[scenario.value]
        assert {Dimension(k): v for k, v in published.items()} == SCENARIO_WEIGHTS[scenario]

    def test_quadrant_modifiers(self, catalogue):
        """Published modifiers equal the modifiers the engine applies."""
        published = catalogue.scoring_config.quadrant_modifiers
        assert {Quadrant(k): v for k, v in published.items()} == QUADRANT_MODIFIERS

    def test_engine_inputs_catalogued(self, catalogue):
        """Engine inputs outside the 37 fields are the three D6 inputs."""
        catalogued = {f.key for f in catalogue.engine_input_fields()}
        assert set(ENGINE_INPUT_KEYS) - catalogued == {
            "engine_contribution_strength",
            "three_engines_alignment",
            "strategic_coherence",
        }
