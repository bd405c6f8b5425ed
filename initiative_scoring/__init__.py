"""Initiative Prioritization Engine.

Scores a portfolio of initiatives on six dimensions, combines them into a
composite and final score, classifies each initiative into a quadrant and
tier, and checks the portfolio's category and engine balance.
"""

__version__ = "1.0.0"
