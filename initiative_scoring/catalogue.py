"""Initiative dossier field catalogue (37-criteria framework).

A static, versioned description of every criterion an initiative dossier can
carry. Field descriptors are tagged by ``type`` and validated as a
discriminated union, so each field type carries only the settings that apply
to it. The scoring engine reads only a subset of these keys
(``ENGINE_INPUT_KEYS``); the catalogue itself contains no scoring logic.
"""
from decimal import Decimal
from functools import lru_cache
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from initiative_scoring.models.enums import FieldCategory

# Criteria keys read by the scoring engine
ENGINE_INPUT_KEYS: tuple[str, ...] = (
    "financial_projections",
    "problem_statement",
    "stakeholder_impact",
    "strategic_rationale",
    "trl_level",
    "resource_availability",
    "timeline",
    "prerequisites",
    "bcg_i2i_dimensions",
    "aramco_response",
    "competitive_analysis",
    "mira_integration",
    "engine_contribution_strength",
    "three_engines_alignment",
    "strategic_coherence",
    "priority",
    "portfolio_category",
)


class FieldOption(BaseModel):
    """One selectable value of a dropdown, multiselect or checklist."""
    model_config = ConfigDict(frozen=True)

    value: Union[int, str]
    label: str
    score: Optional[int] = None


class FieldBase(BaseModel):
    """Attributes shared by every field descriptor."""
    model_config = ConfigDict(frozen=True)

    id: str
    key: str
    label: str
    description: str = ""
    required: bool = True
    is_scoring: bool = False
    weight: int = Field(default=0, ge=0, le=100)
    category: FieldCategory
    auto_calculated: bool = False
    ai_suggested: bool = False


class TextField(FieldBase):
    type: Literal["text"]
    max_length: Optional[int] = None
    placeholder: Optional[str] = None
    pattern: Optional[str] = None


class TextAreaField(FieldBase):
    type: Literal["textarea"]
    max_length: Optional[int] = None
    placeholder: Optional[str] = None


class NumberField(FieldBase):
    type: Literal["number"]
    min: Optional[int] = None
    max: Optional[int] = None
    step: Optional[int] = None
    unit: Optional[str] = None
    readonly: bool = False


class DropdownField(FieldBase):
    type: Literal["dropdown"]
    options: tuple[FieldOption, ...]


class MultiSelectField(FieldBase):
    type: Literal["multiselect"]
    options: tuple[FieldOption, ...]
    gains: tuple[int, ...] = ()


class ChecklistField(FieldBase):
    type: Literal["checklist"]
    options: tuple[FieldOption, ...]


class FinancialTableField(FieldBase):
    type: Literal["financial_table"]
    years: tuple[int, ...]
    calculate_npv: bool = True
    wacc: Decimal = Decimal("0.12")


class TimelineField(FieldBase):
    type: Literal["timeline"]
    fields: tuple[str, ...]


class MiraConfigField(FieldBase):
    type: Literal["mira_config"]
    layers: tuple[FieldOption, ...]
    depth: tuple[str, ...]


class StructuredField(FieldBase):
    """Tables and lists whose rows are free-form records."""
    type: Literal[
        "benefit_table",
        "dependency_list",
        "enabler_list",
        "integration_list",
        "risk_matrix",
        "assumption_list",
        "issue_list",
        "criteria_list",
        "kpi_list",
        "governance_config",
    ]
    config: dict[str, Any] = Field(default_factory=dict)


FieldDescriptor = Annotated[
    Union[
        TextField,
        TextAreaField,
        NumberField,
        DropdownField,
        MultiSelectField,
        ChecklistField,
        FinancialTableField,
        TimelineField,
        MiraConfigField,
        StructuredField,
    ],
    Field(discriminator="type"),
]


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimensions: tuple[str, ...]
    scenarios: dict[str, dict[str, Decimal]]
    quadrant_modifiers: dict[str, Decimal]


class DossierCatalogue(BaseModel):
    """Versioned dossier template: scoring configuration plus field descriptors."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    version: str
    description: str = ""
    scoring_config: ScoringConfig
    fields: tuple[FieldDescriptor, ...]

    def field(self, key: str) -> FieldDescriptor:
        """Descriptor for ``key``.

        Raises:
            KeyError: If the catalogue has no such field.
        """
        for descriptor in self.fields:
            if descriptor.key == key:
                return descriptor
        raise KeyError(key)

    def fields_in(self, category: Union[FieldCategory, str]) -> list[FieldDescriptor]:
        category = FieldCategory(category)
        return [f for f in self.fields if f.category == category]

    def scoring_fields(self) -> list[FieldDescriptor]:
        """The D1–D6 score fields, in dossier order."""
        return [f for f in self.fields if f.is_scoring]

    def engine_input_fields(self) -> list[FieldDescriptor]:
        """Catalogued fields the scoring engine reads."""
        return [f for f in self.fields if f.key in ENGINE_INPUT_KEYS]


def _options(*pairs: tuple) -> list[dict]:
    return [
        {"value": p[0], "label": p[1], **({"score": p[2]} if len(p) > 2 else {})}
        for p in pairs
    ]


def _score_field(id_: str, key: str, label: str, description: str, weight: int, **extra) -> dict:
    readonly = not extra.get("ai_suggested", False)
    return {
        "id": id_,
        "key": key,
        "label": label,
        "description": description,
        "type": "number",
        "required": False,
        "is_scoring": True,
        "weight": weight,
        "category": "scoring",
        "auto_calculated": readonly,
        "min": 0,
        "max": 100,
        "step": 1,
        "unit": "points",
        "readonly": readonly,
        **extra,
    }


_TEMPLATE: dict[str, Any] = {
    "id": "template-petrolube-35-v14",
    "name": "Petrolube Initiative Dossier - 35 Criteria Framework V14",
    "version": "1.0",
    "description": "Complete flow: criteria → 6 dimensions → composite score → tier → rank",
    "scoring_config": {
        "dimensions": ("D1", "D2", "D3", "D4", "D5", "D6"),
        "scenarios": {
            "A": {"d1": "0.25", "d2": "0.25", "d3": "0.15", "d4": "0.15", "d5": "0.10", "d6": "0.10"},
            "B": {"d1": "0.30", "d2": "0.20", "d3": "0.15", "d4": "0.15", "d5": "0.10", "d6": "0.10"},
            "C": {"d1": "0.20", "d2": "0.30", "d3": "0.15", "d4": "0.15", "d5": "0.10", "d6": "0.10"},
        },
        "quadrant_modifiers": {
            "quick_win": "0.95",
            "push_harder": "0.90",
            "transformational": "1.00",
            "moonshot": "0.85",
        },
    },
    "fields": [
        # ── Metadata (1–5) ───────────────────────────────────────────────────
        {
            "id": "1", "key": "initiative_id", "label": "1. Initiative ID",
            "description": "Unique identifier: PET (core), NEW (new), REB (rebranding), ECO (ecosystem), HCM (HR)",
            "type": "text", "category": "metadata",
            "max_length": 10, "placeholder": "PET-006", "pattern": r"^[A-Z]{3}-[A-Z0-9]{1,6}$",
        },
        {
            "id": "2", "key": "initiative_name", "label": "2. Initiative Name",
            "description": "Descriptive title (max 200 chars)",
            "type": "text", "category": "metadata", "max_length": 200,
        },
        {
            "id": "3", "key": "owner_name", "label": "3. Owner",
            "description": "Initiative owner responsible for delivery",
            "type": "dropdown", "category": "metadata",
            "options": _options(
                ("ceo", "CEO"), ("cfo", "CFO"), ("cito", "CITO"),
                ("cmo", "Marketing Director"), ("chro", "CHRO"), ("pmo", "PMO Director"),
            ),
        },
        {
            "id": "4", "key": "strategic_domain", "label": "4. Strategic Domain",
            "description": "Primary strategic area aligned with Vision 2030",
            "type": "dropdown", "category": "metadata",
            "options": _options(
                ("core_operations", "Core Operations"),
                ("business_model", "Business Model Innovation"),
                ("customer_experience", "Customer Experience"),
                ("technology_data", "Technology & Data"),
                ("ecosystem", "Ecosystem & Partnerships"),
                ("organizational", "Organizational Transformation"),
            ),
        },
        {
            "id": "5", "key": "portfolio_category", "label": "5. Portfolio Category",
            "description": "60-15-15-10 allocation framework",
            "type": "dropdown", "category": "metadata",
            "options": _options(
                ("core_incremental", "Core Incremental (60%)"),
                ("core_disruptive", "Core Disruptive (15%)"),
                ("non_core_incremental", "Non-Core Incremental (15%)"),
                ("non_core_disruptive", "Non-Core Disruptive (10%)"),
            ),
        },
        # ── Strategic positioning (6–10) ─────────────────────────────────────
        {
            "id": "6", "key": "quadrant", "label": "6. Quadrant (Auto-calculated from D1/D2)",
            "description": "Impact vs Feasibility Matrix position",
            "type": "dropdown", "category": "strategic", "required": False, "auto_calculated": True,
            "options": _options(
                ("quick_win", "Quick-Win (D1≥75, D2≥80)"),
                ("push_harder", "Push-Harder (D1<75, D2≥80)"),
                ("transformational", "Transformational (D1≥75, D2<80)"),
                ("moonshot", "Moonshot (D1<75, D2<80)"),
            ),
        },
        {
            "id": "7", "key": "priority", "label": "7. Priority",
            "description": "Executive priority classification",
            "type": "dropdown", "category": "strategic",
            "options": _options(
                ("critical", "Critical (CEO mandate)"), ("high", "High"),
                ("medium", "Medium"), ("low", "Low"),
            ),
        },
        {
            "id": "8", "key": "tier", "label": "8. Year 1 Tier",
            "description": "Tier assignment (system suggests based on scores)",
            "type": "dropdown", "category": "strategic",
            "options": _options(
                ("1a", "Tier 1A: Catastrophic Dependency"),
                ("1b", "Tier 1B: Quick-Win"),
                ("1c", "Tier 1C: Foundation"),
                ("1d", "Tier 1D: Strategic"),
                ("2", "Tier 2: Positioning"),
                ("contingent", "Contingent"),
            ),
        },
        {
            "id": "9", "key": "aramco_response", "label": "9. Aramco Competitive Response",
            "description": "How does this respond to the Aramco-Valvoline threat? (feeds D4)",
            "type": "textarea", "category": "strategic", "max_length": 500,
            "placeholder": "Describe defensive and offensive competitive value...",
        },
        {
            "id": "10", "key": "bcg_i2i_dimensions", "label": "10. BCG i2i Impact",
            "description": "Select dimensions and expected gain (+points)",
            "type": "multiselect", "category": "strategic",
            "options": _options(
                ("d1", "D1: Innovation Strategy"),
                ("d2", "D2: Organization & Decision Making"),
                ("d3", "D3: Governance & Metrics"),
                ("d4", "D4: Customer & Market Intelligence"),
                ("d5", "D5: Portfolio & Performance Mgmt"),
                ("d6", "D6: Talent & Culture"),
                ("d7", "D7: Analytics & Insights"),
                ("d8", "D8: Digital Technology"),
                ("d9", "D9: Ecosystems & Partnerships"),
                ("d10", "D10: Results Measurement"),
            ),
            "gains": (1, 2, 3, 4, 5, 6),
        },
        # ── Dimension scores (11–16) ─────────────────────────────────────────
        _score_field("11", "d1_score", "11. D1: Strategic Impact (Auto-calc)",
                     "Calculated from NPV (60%) + Qualitative assessment (40%)", 25),
        _score_field("12", "d2_score", "12. D2: Execution Feasibility (Auto-calc)",
                     "Calculated from TRL (30%) + Resources (25%) + Timeline (25%) + Dependencies (20%)", 25),
        _score_field("13", "d3_score", "13. D3: BCG i2i Advancement (Auto-calc)",
                     "Calculated from selected dimensions × expected gains", 20),
        _score_field("14", "d4_score", "14. D4: Aramco Response (AI-suggested)",
                     "Suggested from the competitive response text, human validates", 15,
                     ai_suggested=True),
        _score_field("15", "d5_score", "15. D5: MiRA Integration (Auto-calc)",
                     "Calculated from MiRA layer + integration depth", 10),
        _score_field("16", "d6_score", "16. D6: Three Engines Alignment (Auto-calc)",
                     "Calculated from engine contribution + portfolio balance + coherence", 10),
        # ── Business case (17–23) ────────────────────────────────────────────
        {
            "id": "17", "key": "problem_statement", "label": "17. Problem Statement",
            "description": "Clear description of current state pain (feeds D1)",
            "type": "textarea", "category": "business_case", "max_length": 1000,
            "placeholder": "Describe the problem, quantify the pain...",
        },
        {
            "id": "18", "key": "solution_description", "label": "18. Solution Description",
            "description": "How the solution works (feeds D2)",
            "type": "textarea", "category": "business_case", "max_length": 1500,
            "placeholder": "Explain the solution approach and methodology...",
        },
        {
            "id": "19", "key": "financial_projections", "label": "19. Financial Projections",
            "description": "Year-by-year cash flows (feeds D1 quantitative)",
            "type": "financial_table", "category": "business_case",
            "years": (0, 1, 2, 3, 4, 5), "calculate_npv": True, "wacc": "0.12",
        },
        {
            "id": "20", "key": "roi_analysis", "label": "20. ROI Analysis",
            "description": "Benefit breakdown by category",
            "type": "benefit_table", "category": "business_case",
            "config": {"max_categories": 5},
        },
        {
            "id": "21", "key": "stakeholder_impact", "label": "21. Stakeholder Impact",
            "description": "Impact by stakeholder group (feeds D1 qualitative)",
            "type": "text", "category": "business_case", "max_length": 600,
            "placeholder": "CEO impact, CFO impact, Customer impact, Employee impact...",
        },
        {
            "id": "22", "key": "competitive_analysis", "label": "22. Competitive Analysis",
            "description": "Competitive positioning (feeds D4)",
            "type": "textarea", "category": "business_case", "max_length": 800,
            "placeholder": "What competitors lack, our advantage, time to replicate...",
        },
        {
            "id": "23", "key": "strategic_rationale", "label": "23. Strategic Rationale",
            "description": "Why now, why important (feeds D1 qualitative)",
            "type": "textarea", "category": "business_case", "max_length": 600,
            "placeholder": "Why strategically important, why now, what if we don't...",
        },
        # ── Implementation (24–27) ───────────────────────────────────────────
        {
            "id": "24", "key": "trl_level", "label": "24. Technology Readiness Level (TRL)",
            "description": "TRL 1-9 (feeds D2 - 30% weight)",
            "type": "dropdown", "category": "implementation",
            "options": _options(
                (9, "TRL 9: Proven in operational environment", 95),
                (8, "TRL 8: System complete and qualified", 90),
                (7, "TRL 7: System prototype in operation", 85),
                (6, "TRL 6: System model in relevant environment", 80),
                (5, "TRL 5: Component validation", 75),
                (4, "TRL 4: Component validation in lab", 65),
                (3, "TRL 3: Proof of concept", 60),
                (2, "TRL 2: Technology concept formulated", 55),
                (1, "TRL 1: Basic principles observed", 50),
            ),
        },
        {
            "id": "25", "key": "resource_availability", "label": "25. Resource Availability",
            "description": "Team, budget, sponsor, skills (feeds D2 - 25% weight)",
            "type": "checklist", "category": "implementation",
            "options": _options(
                ("team", "Team assigned"),
                ("budget", "Budget confirmed"),
                ("sponsor", "Executive sponsor identified"),
                ("skills", "Required skills available"),
            ),
        },
        {
            "id": "26", "key": "timeline", "label": "26. Timeline",
            "description": "Start date, end date, confidence (feeds D2 - 25% weight)",
            "type": "timeline", "category": "implementation",
            "fields": ("start_date", "end_date", "confidence"),
        },
        {
            "id": "27", "key": "mira_integration", "label": "27. MiRA Integration",
            "description": "MiRA layer and integration depth (feeds D5)",
            "type": "mira_config", "category": "implementation",
            "layers": _options(
                (0, "No MiRA use", 0),
                (1, "Layer 1: Basic reporting", 30),
                (2, "Layer 2: Data lake/analytics", 50),
                (3, "Layer 3: ML/AI models", 70),
                (4, "Layer 4: API/ecosystem monetization", 90),
            ),
            "depth": ("low", "medium", "high"),
        },
        # ── Dependencies (28–30) ─────────────────────────────────────────────
        {
            "id": "28", "key": "prerequisites", "label": "28. Prerequisites",
            "description": "Critical dependencies that must complete first (feeds D2 - 20% weight)",
            "type": "dependency_list", "category": "dependencies",
            "config": {"fields": ["type", "name", "criticality", "due_date", "status"]},
        },
        {
            "id": "29", "key": "enablers", "label": "29. Enablers",
            "description": "Capabilities that enable this initiative",
            "type": "enabler_list", "category": "dependencies",
            "config": {"types": ["Technology", "Data", "Process", "Capability"]},
        },
        {
            "id": "30", "key": "integration_points", "label": "30. Integration Points",
            "description": "Systems/platforms requiring integration",
            "type": "integration_list", "category": "dependencies",
            "config": {"systems": ["Oracle", "MiRA", "SAP", "Custom"]},
        },
        # ── RAID (31–34) ─────────────────────────────────────────────────────
        {
            "id": "31", "key": "risks", "label": "31. Risks",
            "description": "Risk register with 5×5 matrix (impacts D2)",
            "type": "risk_matrix", "category": "raid",
            "config": {
                "min_risks": 3,
                "probability": ["Very Low", "Low", "Medium", "High", "Very High"],
                "impact": ["Negligible", "Low", "Medium", "High", "Catastrophic"],
            },
        },
        {
            "id": "32", "key": "assumptions", "label": "32. Assumptions",
            "description": "Key assumptions requiring validation (impacts D2)",
            "type": "assumption_list", "category": "raid",
            "config": {
                "min_assumptions": 3,
                "categories": ["Market", "Technology", "Resource", "Financial", "Regulatory"],
            },
        },
        {
            "id": "33", "key": "issues", "label": "33. Issues",
            "description": "Current blockers requiring resolution",
            "type": "issue_list", "category": "raid", "required": False,
            "config": {"severity": ["Critical", "High", "Medium", "Low"]},
        },
        {
            "id": "34", "key": "dependency_count", "label": "34. Total Critical Dependencies",
            "description": "Count of critical dependencies (auto-calc from #28)",
            "type": "number", "category": "raid", "required": False,
            "auto_calculated": True, "readonly": True,
        },
        # ── Metrics (35–37) ──────────────────────────────────────────────────
        {
            "id": "35", "key": "success_criteria", "label": "35. Success Criteria",
            "description": "SMART measurable success definitions (min 3)",
            "type": "criteria_list", "category": "metrics",
            "config": {"min_criteria": 3, "fields": ["metric", "baseline", "target", "timeframe", "method"]},
        },
        {
            "id": "36", "key": "kpis", "label": "36. KPIs",
            "description": "Key Performance Indicators with thresholds (min 3)",
            "type": "kpi_list", "category": "metrics",
            "config": {
                "min_kpis": 3,
                "categories": ["Financial", "Operational", "Customer", "Employee", "Strategic"],
                "frequency": ["Daily", "Weekly", "Monthly", "Quarterly"],
            },
        },
        {
            "id": "37", "key": "governance", "label": "37. Governance",
            "description": "Reporting structure and review cadence",
            "type": "governance_config", "category": "metrics",
            "config": {
                "sponsors": ["CEO", "CFO", "CITO", "Other"],
                "reporting": ["Daily", "Weekly", "Bi-weekly", "Monthly", "Quarterly"],
                "gates": ["Gate 0", "Gate 1", "Gate 2", "Gate 3", "Gate 4", "Gate 5"],
            },
        },
    ],
}


@lru_cache
def get_catalogue() -> DossierCatalogue:
    """Validated catalogue, built once per process."""
    return DossierCatalogue.model_validate(_TEMPLATE)
