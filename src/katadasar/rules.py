"""
This module contains all stemming rules.

Every rule is a pure function taking a word and returning the rewritten
word, or None when the rule does not apply to it.
"""

import re
from collections import namedtuple
from typing import Iterable, Optional

AffixRule = namedtuple("AffixRule", "name category apply")

# Affix categories
PARTICLE = "P"
POSSESSIVE_PRONOUN = "PP"
DERIVATIONAL_SUFFIX = "DS"
PLAIN_PREFIX = "DP"
COMPLEX_PREFIX = "CP"


def remove_inflectional_particle(word: str) -> Optional[str]:
    """
    Remove Inflectional particle (lah|kah|tah|pun).

    Asian J. (2007) "Effective Techniques for Indonesian Text Retrieval". page 60
    @link http://researchbank.rmit.edu.au/eserv/rmit:6312/Asian.pdf
    """

    result = re.sub(r"-*(lah|kah|tah|pun)$", "", word, count=1)
    if result != word:
        return result
    return None


def remove_inflectional_possessive_pronoun(word: str) -> Optional[str]:
    """
    Remove inflectional possessive pronoun (ku|mu|nya|-ku|-mu|-nya).

    Asian J. (2007) "Effective Techniques for Indonesian Text Retrieval". page 60
    @link http://researchbank.rmit.edu.au/eserv/rmit:6312/Asian.pdf
    """

    result = re.sub(r"-*(ku|mu|nya)$", "", word, count=1)
    if result != word:
        return result
    return None


def remove_derivational_suffix(word: str) -> Optional[str]:
    """
    Remove one derivational suffix (i|kan|an).

    Only a single suffix goes per call, so "kanan" endings lose "an" and
    keep "kan" for the dictionary check that follows.

    Asian J. (2007) "Effective Techniques for Indonesian Text Retrieval". page 61
    @link http://researchbank.rmit.edu.au/eserv/rmit:6312/Asian.pdf
    """

    result = re.sub(r"(i|kan|an)$", "", word, count=1)
    if result != word:
        return result
    return None


def remove_derivational_suffix_an(word: str) -> Optional[str]:
    """
    Remove suffix an only, leaving the k of a "kan" ending to the root
    (dimasakan -> dimasak).
    """

    if len(word) > 2 and word.endswith("an"):
        return word[:-2]
    return None


def remove_plain_prefix(word: str) -> Optional[str]:
    """
    Remove plain prefix (di|ke|se).

    Asian J. (2007) "Effective Techniques for Indonesian Text Retrieval". page 61
    @link http://researchbank.rmit.edu.au/eserv/rmit:6312/Asian.pdf
    """

    result = re.sub(r"^(di|ke|se)", "", word, count=1)
    if result != word:
        return result
    return None


def disambiguate_prefix_rule1a(word: str) -> Optional[str]:
    """
    Rule 1a : berV -> ber-V
    """
    matches = re.match(r"^ber([aiueo].*)$", word)
    if matches:
        return matches.group(1)
    return None


def disambiguate_prefix_rule1b(word: str) -> Optional[str]:
    """
    Rule 1b : berV -> be-rV
    """
    matches = re.match(r"^ber([aiueo].*)$", word)
    if matches:
        return "r" + matches.group(1)
    return None


def disambiguate_prefix_rule2(word: str) -> Optional[str]:
    """
    Rule 2 : berCAP -> ber-CAP where C != 'r' AND P != 'er'
    """
    matches = re.match(r"^ber([bcdfghjklmnpqstvwxyz])([a-z])(.*)$", word)
    if matches:
        if matches.group(3).startswith("er"):
            return None
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule3(word: str) -> Optional[str]:
    """
    Rule 3 : berCAerV -> ber-CAerV where C != 'r'
    """
    matches = re.match(r"^ber([bcdfghjklmnpqstvwxyz])([a-z])er([aiueo])(.*)$", word)
    if matches:
        return (
            matches.group(1) + matches.group(2) + "er" + matches.group(3) + matches.group(4)
        )
    return None


def disambiguate_prefix_rule4(word: str) -> Optional[str]:
    """
    Rule 4 : belajar  -> bel-ajar
             belunjur -> bel-unjur
    """
    if word == "belajar":
        return "ajar"
    if word == "belunjur":
        return "unjur"
    return None


def disambiguate_prefix_rule5(word: str) -> Optional[str]:
    """
    Rule 5 : beC1erC2 -> be-C1erC2 where C1 != 'r'
    """
    matches = re.match(r"^be([bcdfghjklmnpqstvwxyz])(er[bcdfghjklmnpqrstvwxyz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule6a(word: str) -> Optional[str]:
    """
    Rule 6a : terV -> ter-V
    """
    matches = re.match(r"^ter([aiueo].*)$", word)
    if matches:
        return matches.group(1)
    return None


def disambiguate_prefix_rule6b(word: str) -> Optional[str]:
    """
    Rule 6b : terV -> te-rV
    """
    matches = re.match(r"^ter([aiueo].*)$", word)
    if matches:
        return "r" + matches.group(1)
    return None


def disambiguate_prefix_rule7(word: str) -> Optional[str]:
    """
    Rule 7 : terCerV -> ter-CerV where C != 'r'
    """
    matches = re.match(r"^ter([bcdfghjklmnpqstvwxyz])er([aiueo].*)$", word)
    if matches:
        return matches.group(1) + "er" + matches.group(2)
    return None


def disambiguate_prefix_rule8(word: str) -> Optional[str]:
    """
    Rule 8 : terCP -> ter-CP where C != 'r' and P != 'er'
    """
    matches = re.match(r"^ter([bcdfghjklmnpqstvwxyz])(.*)$", word)
    if matches and not matches.group(2).startswith("er"):
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule9(word: str) -> Optional[str]:
    """
    Rule 9 : teC1erC2 -> te-C1erC2 where C1 != 'r'
    """
    matches = re.match(r"^te([bcdfghjklmnpqstvwxyz])er([bcdfghjklmnpqrstvwxyz])(.*)$", word)
    if matches:
        return matches.group(1) + "er" + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule10(word: str) -> Optional[str]:
    """
    Rule 10 : me{l|r|w|y}V -> me-{l|r|w|y}V
    """
    matches = re.match(r"^me([lrwy])([aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule11(word: str) -> Optional[str]:
    """
    Rule 11 : mem{b|f|v} -> mem-{b|f|v}
    """
    matches = re.match(r"^mem([bfv])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule12(word: str) -> Optional[str]:
    """
    Nazief and Adriani Rule 12 : mempe{r|l} -> mem-pe{r|l}
    Modified by Jelita Asian's CS Rule 12 : mempe -> mem-pe to stem mempengaruhi
    """
    matches = re.match(r"^mempe(.*)$", word)
    if matches:
        return "pe" + matches.group(1)
    return None


def disambiguate_prefix_rule13a(word: str) -> Optional[str]:
    """
    Rule 13a : mem{rV|V} -> me-m{rV|V}
    """
    matches = re.match(r"^mem(r?[aiueo])(.*)$", word)
    if matches:
        return "m" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule13b(word: str) -> Optional[str]:
    """
    Rule 13b : mem{rV|V} -> me-p{rV|V}
    """
    matches = re.match(r"^mem(r?[aiueo])(.*)$", word)
    if matches:
        return "p" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule14(word: str) -> Optional[str]:
    """
    Rule 14 : men{c|d|j|z} -> men-{c|d|j|z}
    """
    matches = re.match(r"^men([cdjz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule15a(word: str) -> Optional[str]:
    """
    Rule 15a : men{V} -> me-n{V}
    """
    matches = re.match(r"^men([aiueo])(.*)$", word)
    if matches:
        return "n" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule15b(word: str) -> Optional[str]:
    """
    Rule 15b : men{V} -> me-t{V}
    """
    matches = re.match(r"^men([aiueo])(.*)$", word)
    if matches:
        return "t" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule16(word: str) -> Optional[str]:
    """
    Original Nazief and Adriani's Rule 16 : meng{g|h|q} -> meng-{g|h|q}
    Modified Jelita Asian's CS Rule 16 : meng{g|h|q|k} -> meng-{g|h|q|k} to stem mengkritik
    """
    matches = re.match(r"^meng([ghqk])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule17a(word: str) -> Optional[str]:
    """
    Rule 17a : mengV -> meng-V
    """
    matches = re.match(r"^meng([aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule17b(word: str) -> Optional[str]:
    """
    Rule 17b : mengV -> meng-kV
    """
    matches = re.match(r"^meng([aiueo])(.*)$", word)
    if matches:
        return "k" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule17c(word: str) -> Optional[str]:
    """
    Rule 17c : mengV -> meng-V- where V = 'e'
    """
    matches = re.match(r"^menge(.*)$", word)
    if matches:
        return matches.group(1)
    return None


def disambiguate_prefix_rule17d(word: str) -> Optional[str]:
    """
    Rule 17d : mengV -> me-ngV
    """
    matches = re.match(r"^meng([aiueo])(.*)$", word)
    if matches:
        return "ng" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule18a(word: str) -> Optional[str]:
    """
    Rule 18a : menyV -> me-nyV to stem menyala -> nyala
    """
    matches = re.match(r"^meny([aiueo])(.*)$", word)
    if matches:
        return "ny" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule18b(word: str) -> Optional[str]:
    """
    Original Rule 18 : menyV -> meny-sV
    Modified by CC (shifted into 18b, see also 18a)
    """
    matches = re.match(r"^meny([aiueo])(.*)$", word)
    if matches:
        return "s" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule19(word: str) -> Optional[str]:
    """
    Original Rule 19 : mempV -> mem-pV where V != 'e'
    Modified Rule 19 by ECS : mempA -> mem-pA where A != 'e' in order to stem memproteksi
    """
    matches = re.match(r"^memp([abcdfghijklmnopqrstuvwxyz])(.*)$", word)
    if matches:
        return "p" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule20(word: str) -> Optional[str]:
    """
    Rule 20 : pe{w|y}V -> pe-{w|y}V
    """
    matches = re.match(r"^pe([wy])([aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule21a(word: str) -> Optional[str]:
    """
    Rule 21a : perV -> per-V
    """
    matches = re.match(r"^per([aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule21b(word: str) -> Optional[str]:
    """
    Rule 21b : perV -> pe-rV
    """
    matches = re.match(r"^pe(r[aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule23(word: str) -> Optional[str]:
    """
    Rule 23 : perCAP -> per-CAP where C != 'r' AND P != 'er'
    """
    matches = re.match(r"^per([bcdfghjklmnpqstvwxyz])([a-z])(.*)$", word)
    if matches:
        if matches.group(3).startswith("er"):
            return None
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule24(word: str) -> Optional[str]:
    """
    Rule 24 : perCAerV -> per-CAerV where C != 'r'
    """
    matches = re.match(r"^per([bcdfghjklmnpqstvwxyz])([a-z])er([aiueo])(.*)$", word)
    if matches:
        return (
            matches.group(1) + matches.group(2) + "er" + matches.group(3) + matches.group(4)
        )
    return None


def disambiguate_prefix_rule25(word: str) -> Optional[str]:
    """
    Rule 25 : pem{b|f|v} -> pem-{b|f|v}
    """
    matches = re.match(r"^pem([bfv])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule26a(word: str) -> Optional[str]:
    """
    Rule 26a : pem{rV|V} -> pe-m{rV|V}
    """
    matches = re.match(r"^pem(r?[aiueo])(.*)$", word)
    if matches:
        return "m" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule26b(word: str) -> Optional[str]:
    """
    Rule 26b : pem{rV|V} -> pe-p{rV|V}
    """
    matches = re.match(r"^pem(r?[aiueo])(.*)$", word)
    if matches:
        return "p" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule27(word: str) -> Optional[str]:
    """
    Rule 27 modified by Prasasto Adi : pen{c|d|j|s|t|z} -> pen-{c|d|j|s|t|z}
    in order to stem penstabilan, pentranskripsi

    Original CS Rule 27 was : pen{c|d|j|z} -> pen-{c|d|j|z}
    """
    matches = re.match(r"^pen([cdjstz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule28a(word: str) -> Optional[str]:
    """
    Rule 28a : pen{V} -> pe-n{V}
    """
    matches = re.match(r"^pen([aiueo])(.*)$", word)
    if matches:
        return "n" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule28b(word: str) -> Optional[str]:
    """
    Rule 28b : pen{V} -> pe-t{V}
    """
    matches = re.match(r"^pen([aiueo])(.*)$", word)
    if matches:
        return "t" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule29(word: str) -> Optional[str]:
    """
    Original Rule 29 : peng{g|h|q} -> peng-{g|h|q}
    Modified Rule 29 by ECS : pengC -> peng-C
    """
    matches = re.match(r"^peng([bcdfghjklmnpqrstvwxyz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule30a(word: str) -> Optional[str]:
    """
    Rule 30a : pengV -> peng-V
    """
    matches = re.match(r"^peng([aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule30b(word: str) -> Optional[str]:
    """
    Rule 30b : pengV -> peng-kV
    """
    matches = re.match(r"^peng([aiueo])(.*)$", word)
    if matches:
        return "k" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule30c(word: str) -> Optional[str]:
    """
    Rule 30c : pengV -> pengV- where V = 'e'
    """
    matches = re.match(r"^penge(.*)$", word)
    if matches:
        return matches.group(1)
    return None


def disambiguate_prefix_rule31a(word: str) -> Optional[str]:
    """
    Rule 31a : penyV -> pe-nyV
    """
    matches = re.match(r"^peny([aiueo])(.*)$", word)
    if matches:
        return "ny" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule31b(word: str) -> Optional[str]:
    """
    Original Rule 31 : penyV -> peny-sV
    Modified by CC, shifted to 31b
    """
    matches = re.match(r"^peny([aiueo])(.*)$", word)
    if matches:
        return "s" + matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule32(word: str) -> Optional[str]:
    """
    Rule 32 : pelV -> pe-lV except pelajar -> ajar
    """
    if word == "pelajar":
        return "ajar"
    matches = re.match(r"^pe(l[aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule33(word: str) -> Optional[str]:
    """
    Rule 33 : peCerV -> pe-CerV where C != {r|w|y|l|m|n}
    """
    matches = re.match(r"^pe([bcdfghjkpqstvxz]er[aiueo])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule34(word: str) -> Optional[str]:
    """
    Rule 34 : peCP -> pe-CP where C != {r|w|y|l|m|n} and P != 'er'
    """
    matches = re.match(r"^pe([bcdfghjkpqstvxz])(.*)$", word)
    if matches:
        if matches.group(2).startswith("er"):
            return None
        return matches.group(1) + matches.group(2)
    return None


def disambiguate_prefix_rule35(word: str) -> Optional[str]:
    """
    Rule 35 : terC1erC2 -> ter-C1erC2 where C1 != 'r'
    """
    matches = re.match(r"^ter([bcdfghjkpqstvxz])(er[bcdfghjklmnpqrstvwxyz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


def disambiguate_prefix_rule36(word: str) -> Optional[str]:
    """
    Rule 36 : peC1erC2 -> pe-C1erC2 where C1 != {r|w|y|l|m|n}
    """
    matches = re.match(r"^pe([bcdfghjkpqstvxz])(er[bcdfghjklmnpqrstvwxyz])(.*)$", word)
    if matches:
        return matches.group(1) + matches.group(2) + matches.group(3)
    return None


# (prefix, derivational suffix)
INVALID_AFFIX_PAIRS = [
    ("ber", "i"),
    ("di", "an"),
    ("ke", "i"),
    ("ke", "kan"),
    ("me", "an"),
    ("ter", "an"),
    ("per", "an"),
]


def _derivational_suffix_of(word: str) -> Optional[str]:
    for suffix in ("kan", "an", "i"):
        if word.endswith(suffix):
            return suffix
    return None


def contains_invalid_affix_pair(word: str) -> bool:
    """
    Check if word carries an invalid prefix and suffix pair.

    A word ending in "kan" carries the suffix kan, never an, so di-kan,
    me-kan, ter-kan and per-kan are all valid.

    Asian J. (2007) "Effective Techniques for Indonesian Text Retrieval". page 26
    @link https://researchrepository.rmit.edu.au/primaws/permalink?vid=eserv/rmit&docid=6312/Asian.pdf
    """

    if word == "ketahui":
        return False

    suffix = _derivational_suffix_of(word)
    for invalid_prefix, invalid_suffix in INVALID_AFFIX_PAIRS:
        if suffix == invalid_suffix and re.match(rf"^{invalid_prefix}(.*){suffix}$", word):
            return True
    return False


def get_removed_affix(before: str, after: str, affix_type: Optional[str] = None) -> str:
    """
    Return the part of `before` that a rule dropped to produce `after`.

    affix_type tells on which side the affix sat when `after` is both a
    prefix and a suffix of `before` (kekek -> kek).
    """

    if affix_type in (PLAIN_PREFIX, COMPLEX_PREFIX) and before.endswith(after):
        return before[: len(before) - len(after)]
    if before.startswith(after):
        return before[len(after):]
    if before.endswith(after):
        return before[: len(before) - len(after)]

    # rewritten prefix, e.g. menulis -> tulis
    start = 0
    while start < min(len(before), len(after)) and before[start] == after[start]:
        start += 1
    end = 0
    while (
        end < min(len(before), len(after)) - start
        and before[-1 - end] == after[-1 - end]
    ):
        end += 1
    return before[start : len(before) - end]


def _disambiguate_prefix_rules() -> list[list[AffixRule]]:
    # group rule function(s) by its number, ascending
    groups: dict[int, list[AffixRule]] = {}
    for name, function in sorted(globals().items()):
        matches = re.match(r"^disambiguate_prefix_rule(\d+)([a-z]?)$", name)
        if not matches:
            continue
        rule_name = "DisambiguatePrefixRule" + matches.group(1) + matches.group(2)
        rule = AffixRule(rule_name, COMPLEX_PREFIX, function)
        groups.setdefault(int(matches.group(1)), []).append(rule)
    return [groups[number] for number in sorted(groups)]


class RuleCatalog:
    """
    Ordered table of affix rules, grouped by category.
    """

    particle = AffixRule("RemoveInflectionalParticle", PARTICLE, remove_inflectional_particle)
    possessive_pronoun = AffixRule(
        "RemoveInflectionalPossessivePronoun",
        POSSESSIVE_PRONOUN,
        remove_inflectional_possessive_pronoun,
    )
    derivational_suffix = AffixRule(
        "RemoveDerivationalSuffix", DERIVATIONAL_SUFFIX, remove_derivational_suffix
    )
    plain_prefix = AffixRule("RemovePlainPrefix", PLAIN_PREFIX, remove_plain_prefix)
    complex_prefixes = _disambiguate_prefix_rules()
    # used when a removed "kan" is given back
    derivational_suffix_an = AffixRule(
        "RemoveDerivationalSuffixAn", DERIVATIONAL_SUFFIX, remove_derivational_suffix_an
    )

    suffixes = [particle, possessive_pronoun, derivational_suffix]

    @classmethod
    def rules(cls) -> list[AffixRule]:
        """
        All rules in application order, suffix restoration last.
        """
        flattened = cls.suffixes + [cls.plain_prefix]
        for group in cls.complex_prefixes:
            flattened.extend(group)
        flattened.append(cls.derivational_suffix_an)
        return flattened

    @classmethod
    def get(cls, name: str) -> AffixRule:
        for rule in cls.rules():
            if rule.name == name:
                return rule
        raise KeyError(name)


def replay(word: str, trace: Iterable[str]) -> str:
    """
    Apply the named rules to word, in order.
    """

    for name in trace:
        result = RuleCatalog.get(name).apply(word)
        if result is None:
            raise ValueError(f"{name} does not apply to {word!r}")
        word = result
    return word
