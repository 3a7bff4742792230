"""
Indonesian word stemmer based on Nazief and Adriani, CS and ECS rules.
"""

from katadasar.dictionary import ArrayDictionary, Dictionary
from katadasar.rules import (
    AffixRule,
    RuleCatalog,
    contains_invalid_affix_pair,
    get_removed_affix,
    replay,
)
from katadasar.stemming import Removal, StemResult, Stemmer

__all__ = [
    "AffixRule",
    "ArrayDictionary",
    "Dictionary",
    "Removal",
    "RuleCatalog",
    "StemResult",
    "Stemmer",
    "contains_invalid_affix_pair",
    "get_removed_affix",
    "replay",
]
