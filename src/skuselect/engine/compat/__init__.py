"""Compatibility rules deciding which option values stay enabled."""

from .base import BaseCompatibilityRule, CompatibilityDecision
from .checker import COMPATIBILITY_RULES, CompatibilityChecker, make_rule
from .joint import JointRule
from .pairwise import PairwiseRule

__all__ = [
    "COMPATIBILITY_RULES",
    "BaseCompatibilityRule",
    "CompatibilityChecker",
    "CompatibilityDecision",
    "JointRule",
    "PairwiseRule",
    "make_rule",
]
