"""Scoring module for the Initiative Prioritization Engine.

Implements the complete prioritization pipeline:
  Criteria → D1–D6 dimension scores → Composite (scenario weights)
  → Quadrant (D1 × D2) → Final (quadrant modifier) → Tier
  and, once per batch, the portfolio balance report.
"""
