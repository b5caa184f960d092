"""
Policy Fund Matching Engine

Matches a company profile against a catalog of government policy funds and
produces an explainable matched / conditional / excluded classification.
"""

__version__ = "1.0.0"
__author__ = "Policy Fund Team"
__description__ = "Rule-based policy fund matching and classification engine"
