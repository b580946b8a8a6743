"""
QUIVER - Quantified Understanding of Impact Via Embedding Relevance

A resume targeting system that ranks a personal bank of resume lines against a
job description and renders a tailored resume from the best lines.

Architecture:
- Intake Context: Job description and content bank ingestion
- Targeting Context: Multi-signal relevance scoring and line selection
- Templating Context: Typst resume rendering
"""

__version__ = "0.1.0"
