"""
This module contains classes for stemming purpose.
"""

import logging
from collections import namedtuple
from typing import Optional

from katadasar import rules
from katadasar.dictionary import ArrayDictionary, Dictionary
from katadasar.rules import AffixRule, RuleCatalog

logger = logging.getLogger(__name__)

Removal = namedtuple("Removal", "subject result removed_part affix_type rule")

FALLBACK_STRIPPED = "stripped"
FALLBACK_ORIGINAL = "original"

SUFFIX_TYPES = (rules.PARTICLE, rules.POSSESSIVE_PRONOUN, rules.DERIVATIONAL_SUFFIX)


def choose_prefix_rule(
    word: str, dictionary: Dictionary
) -> Optional[tuple[AffixRule, str]]:
    """
    Find the first disambiguate prefix rule matching word.

    Variants of the same rule (1a, 1b, ...) are alternatives: the first
    one giving a dictionary word is taken, otherwise the first match.
    """
    for group in RuleCatalog.complex_prefixes:
        chosen = None

        for rule in group:
            result = rule.apply(word)
            if result is None:
                continue
            if chosen is None:
                chosen = (rule, result)
            if dictionary.contains(result):
                return rule, result

        if chosen is not None:
            return chosen
    return None


class StemResult(namedtuple("StemResult", "word root removals")):
    """
    Root of a word together with the removals that produced it.
    """

    __slots__ = ()

    @property
    def trace(self) -> list[str]:
        """
        Names of the applied rules, in application order.
        """
        return [removal.rule for removal in self.removals]


class Context:
    """
    Stemming Context using Nazief and Adriani, CS, ECS.

    Holds the working word and the removals of a single stemming call.
    """

    def __init__(
        self,
        original_word: str,
        dictionary: Dictionary,
        max_prefix_iterations: int = 3,
        fallback: str = FALLBACK_STRIPPED,
    ):

        self.process_is_stopped = False
        self.original_word = original_word
        self.current_word = original_word
        self.result = ""
        self.dictionary = dictionary
        self.max_prefix_iterations = max_prefix_iterations
        self.removals: list[Removal] = []

        # step 1 - 8
        self._start_stemming_process()

        # step 9
        if self.process_is_stopped or fallback == FALLBACK_STRIPPED:
            self.result = self.current_word
        else:
            logger.debug(f"No root found for {original_word!r}, keeping it as is")
            self.result = self.original_word
            self.removals = []

    def stop_process(self) -> None:
        """
        Stop stemming process.
        """
        self.process_is_stopped = True

    def add_removal(self, removal: Removal) -> None:
        """
        Add Removal information to removals.
        """
        logger.debug(
            f"{removal.rule}: {removal.subject!r} -> {removal.result!r} "
            f"(removed {removal.removed_part!r})"
        )
        self.removals.append(removal)

    def is_root(self, word: str) -> bool:
        return self.dictionary.contains(word)

    def _start_stemming_process(self) -> None:

        # step 1
        if len(self.current_word) <= 3:
            self.stop_process()
            return

        # step 2
        if self.is_root(self.current_word):
            self.stop_process()
            return

        # step 3, 4, 5
        self.accept_visitors(RuleCatalog.suffixes)
        if self.process_is_stopped:
            return

        # step 6, 7, 8
        self.remove_prefixes()
        if self.process_is_stopped:
            return

        self.restore_suffixes()

    def remove_prefixes(self) -> None:
        """
        Remove up to max_prefix_iterations layers of prefix.

        The whole prefix branch is rolled back when the prefix pairs up
        with the removed derivational suffix into an invalid affix pair.
        """
        word_before = self.current_word
        removals_before = list(self.removals)

        for repeat in range(self.max_prefix_iterations):
            removal_count = len(self.removals)

            # {di|ke|se}
            self.accept(RuleCatalog.plain_prefix)
            if not self.process_is_stopped:
                self.disambiguate_prefix()

            if self.process_is_stopped or len(self.removals) == removal_count:
                break

        if len(self.removals) == len(removals_before):
            return

        derivational = [
            r for r in removals_before if r.affix_type == rules.DERIVATIONAL_SUFFIX
        ]
        if derivational and rules.contains_invalid_affix_pair(
            word_before + derivational[-1].removed_part
        ):
            logger.debug(
                f"{word_before + derivational[-1].removed_part!r} has an invalid "
                f"affix pair, discarding prefix removal of {self.current_word!r}"
            )
            self.current_word = word_before
            self.removals = removals_before
            self.process_is_stopped = False

    def restore_suffixes(self) -> None:
        """
        Give the removed suffixes back one at a time, last removed first,
        and retry prefix removal on each restored word. A removed "kan"
        is first tried as "an" with the k left on the root.

        Keeps the current state when no retry reaches the dictionary.
        """
        word_after = self.current_word
        removals_after = self.removals
        suffix_removals = [r for r in removals_after if r.affix_type in SUFFIX_TYPES]

        for index in reversed(range(len(suffix_removals))):
            removal = suffix_removals[index]

            if removal.removed_part == "kan":
                self.current_word = removal.subject
                self.removals = suffix_removals[:index]
                self.accept(RuleCatalog.derivational_suffix_an)
                if not self.process_is_stopped:
                    self.remove_prefixes()
                if self.process_is_stopped:
                    return

            self.current_word = removal.subject
            self.removals = suffix_removals[:index]
            logger.debug(f"Restoring {removal.removed_part!r}: {removal.subject!r}")
            self.remove_prefixes()
            if self.process_is_stopped:
                return

        self.current_word = word_after
        self.removals = removals_after

    def disambiguate_prefix(self) -> None:
        """
        Accept the first disambiguate prefix rule matching current_word.
        """
        chosen = choose_prefix_rule(self.current_word, self.dictionary)
        if chosen is not None:
            self._remove(*chosen)

    def accept_visitors(self, visitors: list[AffixRule]) -> None:
        """
        Accept visitors rules.

        Immediately stop stemming process if current_word processed by a visitor
        is in dictionary.
        """
        for visitor in visitors:
            self.accept(visitor)
            if self.process_is_stopped:
                return

    def accept(self, visitor: AffixRule) -> None:
        """
        Accept visitor rule.

        Stop stemming process if current_word processed by visitor is in
        dictionary.
        """
        result = visitor.apply(self.current_word)
        if result is not None:
            self._remove(visitor, result)

    def _remove(self, rule: AffixRule, result: str) -> None:
        removed_part = rules.get_removed_affix(self.current_word, result, rule.category)
        self.add_removal(
            Removal(self.current_word, result, removed_part, rule.category, rule.name)
        )
        self.current_word = result
        if self.is_root(self.current_word):
            self.stop_process()


class Stemmer:
    """
    Indonesian word stemmer.

    Nazief & Adriani, CS Stemmer, ECS Stemmer.
    @link https://github.com/sastrawi/sastrawi/wiki/Resources
    """

    def __init__(
        self,
        dictionary: Optional[Dictionary] = None,
        max_prefix_iterations: int = 3,
        fallback: str = FALLBACK_STRIPPED,
    ):

        if fallback not in (FALLBACK_STRIPPED, FALLBACK_ORIGINAL):
            raise ValueError(
                f"fallback must be {FALLBACK_STRIPPED!r} or {FALLBACK_ORIGINAL!r}, "
                f"got {fallback!r}"
            )
        if not isinstance(max_prefix_iterations, int) or max_prefix_iterations < 0:
            raise ValueError("max_prefix_iterations must be a non-negative integer")

        if dictionary is None:
            dictionary = ArrayDictionary()

        self.dictionary = dictionary
        self.max_prefix_iterations = max_prefix_iterations
        self.fallback = fallback

    def stem(self, word: str) -> str:
        """
        Stem a word to its root form.
        """
        return self.analyze(word).root

    def analyze(self, word: str) -> StemResult:
        """
        Stem a word, keeping the removals made along the way.
        """

        if type(word) != str:
            raise TypeError("word must be a string!")

        t = Context(word, self.dictionary, self.max_prefix_iterations, self.fallback)
        return StemResult(word, t.result, tuple(t.removals))

    def remove_inflectional_particle(self, word: str) -> str:
        return _or_unchanged(rules.remove_inflectional_particle(word), word)

    def remove_inflectional_possessive_pronoun(self, word: str) -> str:
        return _or_unchanged(rules.remove_inflectional_possessive_pronoun(word), word)

    def remove_derivational_suffix(self, word: str) -> str:
        return _or_unchanged(rules.remove_derivational_suffix(word), word)

    def remove_plain_prefix(self, word: str) -> str:
        return _or_unchanged(rules.remove_plain_prefix(word), word)

    def disambiguate_prefix(self, word: str) -> str:
        """
        Apply the first matching disambiguate prefix rule to word.
        """
        chosen = choose_prefix_rule(word, self.dictionary)
        if chosen is None:
            return word
        return chosen[1]

    def get_removed_affix(
        self, before: str, after: str, affix_type: Optional[str] = None
    ) -> str:
        return rules.get_removed_affix(before, after, affix_type)

    def contains_invalid_affix_pair(self, word: str) -> bool:
        return rules.contains_invalid_affix_pair(word)


def _or_unchanged(result: Optional[str], word: str) -> str:
    if result is None:
        return word
    return result
