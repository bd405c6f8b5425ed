"""Enumeration types for the initiative prioritization engine."""
from decimal import Decimal
from enum import Enum


class Dimension(str, Enum):
    """The six scoring dimensions of an initiative."""
    STRATEGIC_IMPACT = "d1"
    EXECUTION_FEASIBILITY = "d2"
    BCG_I2I_ADVANCEMENT = "d3"
    COMPETITIVE_RESPONSE = "d4"
    MIRA_INTEGRATION = "d5"
    ENGINES_ALIGNMENT = "d6"


class Scenario(str, Enum):
    """Named weighting scenarios trading off impact (D1) against feasibility (D2)."""
    A = "A"  # Balanced
    B = "B"  # Impact-led
    C = "C"  # Feasibility-led


class Quadrant(str, Enum):
    """Impact vs feasibility matrix position (D1 × D2)."""
    QUICK_WIN = "quick_win"
    PUSH_HARDER = "push_harder"
    TRANSFORMATIONAL = "transformational"
    MOONSHOT = "moonshot"


class Tier(str, Enum):
    """Year-1 tier assignment."""
    TIER_1A = "1a"  # Catastrophic dependency / critical mandate
    TIER_1B = "1b"  # Quick-win
    TIER_1C = "1c"  # Foundation
    TIER_1D = "1d"  # Strategic
    TIER_2 = "2"    # Positioning
    CONTINGENT = "contingent"


class Priority(str, Enum):
    """Executive priority classification."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PortfolioCategory(str, Enum):
    """60-15-15-10 portfolio allocation categories."""
    CORE_INCREMENTAL = "core_incremental"
    CORE_DISRUPTIVE = "core_disruptive"
    NON_CORE_INCREMENTAL = "non_core_incremental"
    NON_CORE_DISRUPTIVE = "non_core_disruptive"


class Engine(str, Enum):
    """The three growth engines an initiative can align with."""
    E1_SUSTAIN_GROW = "e1_sustain_grow"
    E2_EXPAND_INORGANICALLY = "e2_expand_inorganically"
    E3_BASE_OIL_INTEGRATION = "e3_base_oil_integration"


class FieldCategory(str, Enum):
    """Sections of the initiative dossier."""
    METADATA = "metadata"
    STRATEGIC = "strategic"
    SCORING = "scoring"
    BUSINESS_CASE = "business_case"
    IMPLEMENTATION = "implementation"
    DEPENDENCIES = "dependencies"
    RAID = "raid"
    METRICS = "metrics"


# Weight vectors per scenario (each must sum to 1.0)
SCENARIO_WEIGHTS: dict[Scenario, dict[Dimension, Decimal]] = {
    Scenario.A: {
        Dimension.STRATEGIC_IMPACT: Decimal("0.25"),
        Dimension.EXECUTION_FEASIBILITY: Decimal("0.25"),
        Dimension.BCG_I2I_ADVANCEMENT: Decimal("0.15"),
        Dimension.COMPETITIVE_RESPONSE: Decimal("0.15"),
        Dimension.MIRA_INTEGRATION: Decimal("0.10"),
        Dimension.ENGINES_ALIGNMENT: Decimal("0.10"),
    },
    Scenario.B: {
        Dimension.STRATEGIC_IMPACT: Decimal("0.30"),
        Dimension.EXECUTION_FEASIBILITY: Decimal("0.20"),
        Dimension.BCG_I2I_ADVANCEMENT: Decimal("0.15"),
        Dimension.COMPETITIVE_RESPONSE: Decimal("0.15"),
        Dimension.MIRA_INTEGRATION: Decimal("0.10"),
        Dimension.ENGINES_ALIGNMENT: Decimal("0.10"),
    },
    Scenario.C: {
        Dimension.STRATEGIC_IMPACT: Decimal("0.20"),
        Dimension.EXECUTION_FEASIBILITY: Decimal("0.30"),
        Dimension.BCG_I2I_ADVANCEMENT: Decimal("0.15"),
        Dimension.COMPETITIVE_RESPONSE: Decimal("0.15"),
        Dimension.MIRA_INTEGRATION: Decimal("0.10"),
        Dimension.ENGINES_ALIGNMENT: Decimal("0.10"),
    },
}


# Multiplier applied to the composite score per quadrant
QUADRANT_MODIFIERS: dict[Quadrant, Decimal] = {
    Quadrant.QUICK_WIN: Decimal("0.95"),
    Quadrant.PUSH_HARDER: Decimal("0.90"),
    Quadrant.TRANSFORMATIONAL: Decimal("1.00"),
    Quadrant.MOONSHOT: Decimal("0.85"),
}


# Target allocation percentages
CATEGORY_TARGETS: dict[PortfolioCategory, Decimal] = {
    PortfolioCategory.CORE_INCREMENTAL: Decimal(60),
    PortfolioCategory.CORE_DISRUPTIVE: Decimal(15),
    PortfolioCategory.NON_CORE_INCREMENTAL: Decimal(15),
    PortfolioCategory.NON_CORE_DISRUPTIVE: Decimal(10),
}

ENGINE_TARGETS: dict[Engine, Decimal] = {
    Engine.E1_SUSTAIN_GROW: Decimal(60),
    Engine.E2_EXPAND_INORGANICALLY: Decimal(25),
    Engine.E3_BASE_OIL_INTEGRATION: Decimal(15),
}

# ± percentage points around each target
BALANCE_TOLERANCE: Decimal = Decimal(2)
