from realcolors.extractors.rules import CSSRule, RuleKind, parse_rules
from realcolors.extractors.stylesheet import VARIANT_PREFIXES, StyleExtractor, classify_selector

__all__ = [
    "CSSRule",
    "RuleKind",
    "StyleExtractor",
    "VARIANT_PREFIXES",
    "classify_selector",
    "parse_rules",
]
