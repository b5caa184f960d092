"""
Centralised business rule tables: thresholds, fund categories and labels
"""

from . import thresholds, categories, labels

__all__ = ["thresholds", "categories", "labels"]
