import pytest

from katadasar import rules
from katadasar.rules import (
    RuleCatalog,
    contains_invalid_affix_pair,
    get_removed_affix,
    replay,
)


def test_remove_inflectional_particle() -> None:
    assert rules.remove_inflectional_particle("dialah") == "dia"
    assert rules.remove_inflectional_particle("benarkah") == "benar"
    assert rules.remove_inflectional_particle("apatah") == "apa"
    assert rules.remove_inflectional_particle("siapapun") == "siapa"
    assert rules.remove_inflectional_particle("siapa-pun") == "siapa"

    assert rules.remove_inflectional_particle("buku") is None


def test_remove_inflectional_possessive_pronoun() -> None:
    assert rules.remove_inflectional_possessive_pronoun("kemejaku") == "kemeja"
    assert rules.remove_inflectional_possessive_pronoun("bajumu") == "baju"
    assert rules.remove_inflectional_possessive_pronoun("celananya") == "celana"

    assert rules.remove_inflectional_possessive_pronoun("celana") is None


def test_remove_derivational_suffix() -> None:
    assert rules.remove_derivational_suffix("menghantui") == "menghantu"
    assert rules.remove_derivational_suffix("membelikan") == "membeli"
    assert rules.remove_derivational_suffix("penjualan") == "penjual"

    # one suffix per call
    assert rules.remove_derivational_suffix("pertahankan") == "pertahan"

    assert rules.remove_derivational_suffix("buang") is None


def test_remove_derivational_suffix_an() -> None:
    assert rules.remove_derivational_suffix_an("dimasakan") == "dimasak"
    assert rules.remove_derivational_suffix_an("penjualan") == "penjual"

    assert rules.remove_derivational_suffix_an("an") is None
    assert rules.remove_derivational_suffix_an("menghantui") is None


def test_remove_plain_prefix() -> None:
    assert rules.remove_plain_prefix("dibuang") == "buang"
    assert rules.remove_plain_prefix("kesakitan") == "sakitan"
    assert rules.remove_plain_prefix("sekuat") == "kuat"

    assert rules.remove_plain_prefix("buang") is None


def test_get_removed_affix() -> None:
    assert get_removed_affix("menghantui", "menghantu") == "i"
    assert get_removed_affix("membelikan", "membeli") == "kan"
    assert get_removed_affix("penjualan", "penjual") == "an"
    assert get_removed_affix("dibuang", "buang") == "di"
    assert get_removed_affix("mempertinggi", "pertinggi") == "mem"
    assert get_removed_affix("meminum", "minum") == "me"
    assert get_removed_affix("menulis", "tulis") == "men"


def test_get_removed_affix_side_follows_affix_type() -> None:
    # kek is both a prefix and a suffix of kekek
    assert get_removed_affix("kekek", "kek", rules.PLAIN_PREFIX) == "ke"
    assert get_removed_affix("kekek", "kek", rules.COMPLEX_PREFIX) == "ke"
    assert get_removed_affix("kekek", "kek", rules.DERIVATIONAL_SUFFIX) == "ek"
    assert get_removed_affix("kekek", "kek") == "ek"


def test_contains_invalid_affix_pair() -> None:
    assert contains_invalid_affix_pair("berjatuhi") == True
    assert contains_invalid_affix_pair("dipukulan") == True
    assert contains_invalid_affix_pair("ketiduri") == True
    assert contains_invalid_affix_pair("ketidurkan") == True
    assert contains_invalid_affix_pair("menduaan") == True
    assert contains_invalid_affix_pair("terduaan") == True
    assert contains_invalid_affix_pair("perkataan") == True

    assert contains_invalid_affix_pair("memberikan") == False
    assert contains_invalid_affix_pair("ketahui") == False
    assert contains_invalid_affix_pair("kesakitan") == False
    assert contains_invalid_affix_pair("mempelajari") == False
    assert contains_invalid_affix_pair("buku") == False


def test_contains_invalid_affix_pair_reads_kan_as_kan() -> None:
    assert contains_invalid_affix_pair("dimainkan") == False
    assert contains_invalid_affix_pair("diberikan") == False
    assert contains_invalid_affix_pair("terlupakan") == False
    assert contains_invalid_affix_pair("menduakan") == False
    assert contains_invalid_affix_pair("perbaikan") == False

    assert contains_invalid_affix_pair("dimainan") == True
    assert contains_invalid_affix_pair("kebesarkan") == True


def test_disambiguate_prefix_rules_ber_be() -> None:
    assert rules.disambiguate_prefix_rule1a("beradu") == "adu"
    assert rules.disambiguate_prefix_rule1b("berambut") == "rambut"
    assert rules.disambiguate_prefix_rule2("bersuara") == "suara"
    assert rules.disambiguate_prefix_rule3("berdaerah") == "daerah"
    assert rules.disambiguate_prefix_rule4("belajar") == "ajar"
    assert rules.disambiguate_prefix_rule5("bekerja") == "kerja"
    assert rules.disambiguate_prefix_rule5("beternak") == "ternak"

    # P == 'er' is left to rule 3
    assert rules.disambiguate_prefix_rule2("berdaerah") is None


def test_disambiguate_prefix_rules_ter_te() -> None:
    assert rules.disambiguate_prefix_rule6a("terasing") == "asing"
    assert rules.disambiguate_prefix_rule6b("teraup") == "raup"
    assert rules.disambiguate_prefix_rule7("tergerak") == "gerak"
    assert rules.disambiguate_prefix_rule8("terpuruk") == "puruk"
    assert rules.disambiguate_prefix_rule9("teterbang") == "terbang"

    assert rules.disambiguate_prefix_rule8("tergerak") is None


def test_disambiguate_prefix_rules_me() -> None:
    assert rules.disambiguate_prefix_rule10("melipat") == "lipat"
    assert rules.disambiguate_prefix_rule10("merumput") == "rumput"
    assert rules.disambiguate_prefix_rule10("mewarna") == "warna"
    assert rules.disambiguate_prefix_rule10("meyakin") == "yakin"

    assert rules.disambiguate_prefix_rule11("membangun") == "bangun"
    assert rules.disambiguate_prefix_rule11("memfitnah") == "fitnah"
    assert rules.disambiguate_prefix_rule11("memvonis") == "vonis"

    assert rules.disambiguate_prefix_rule13a("meminum") == "minum"
    assert rules.disambiguate_prefix_rule13b("memukul") == "pukul"

    assert rules.disambiguate_prefix_rule14("mencinta") == "cinta"
    assert rules.disambiguate_prefix_rule14("mendua") == "dua"
    assert rules.disambiguate_prefix_rule14("menjauh") == "jauh"
    assert rules.disambiguate_prefix_rule14("menziarah") == "ziarah"

    assert rules.disambiguate_prefix_rule15a("menikah") == "nikah"
    assert rules.disambiguate_prefix_rule15b("menulis") == "tulis"
    assert rules.disambiguate_prefix_rule16("mengkritik") == "kritik"
    assert rules.disambiguate_prefix_rule17a("mengambil") == "ambil"
    assert rules.disambiguate_prefix_rule17b("mengupas") == "kupas"
    assert rules.disambiguate_prefix_rule17c("mengebom") == "bom"
    assert rules.disambiguate_prefix_rule18a("menyala") == "nyala"
    assert rules.disambiguate_prefix_rule18b("menyapu") == "sapu"
    assert rules.disambiguate_prefix_rule19("memproteksi") == "proteksi"

    assert rules.disambiguate_prefix_rule13a("memrakit") == "mrakit"
    assert rules.disambiguate_prefix_rule13b("memrakit") == "prakit"
    assert rules.disambiguate_prefix_rule17d("mengaji") == "ngaji"

    assert rules.disambiguate_prefix_rule13a("membaca") is None
    assert rules.disambiguate_prefix_rule17d("mengkritik") is None


def test_disambiguate_prefix_rule12() -> None:
    assert rules.disambiguate_prefix_rule12("mempertinggi") == "pertinggi"
    assert rules.disambiguate_prefix_rule12("mempelajari") == "pelajari"
    # collapsed form, any mempe
    assert rules.disambiguate_prefix_rule12("mempengaruhi") == "pengaruhi"

    assert rules.disambiguate_prefix_rule12("membangun") is None


def test_disambiguate_prefix_rules_pe() -> None:
    assert rules.disambiguate_prefix_rule20("pewarna") == "warna"
    assert rules.disambiguate_prefix_rule21a("perintis") == "intis"
    assert rules.disambiguate_prefix_rule21b("perintis") == "rintis"
    assert rules.disambiguate_prefix_rule23("perbaik") == "baik"
    assert rules.disambiguate_prefix_rule25("pembangun") == "bangun"
    assert rules.disambiguate_prefix_rule26b("pemukul") == "pukul"
    assert rules.disambiguate_prefix_rule27("pencinta") == "cinta"
    assert rules.disambiguate_prefix_rule28b("penulis") == "tulis"
    assert rules.disambiguate_prefix_rule29("pengkritik") == "kritik"
    assert rules.disambiguate_prefix_rule30a("pengamat") == "amat"
    assert rules.disambiguate_prefix_rule31b("penyapu") == "sapu"
    assert rules.disambiguate_prefix_rule32("pelajar") == "ajar"
    assert rules.disambiguate_prefix_rule32("pelatih") == "latih"
    assert rules.disambiguate_prefix_rule34("petani") == "tani"

    assert rules.disambiguate_prefix_rule24("perdaerah") == "daerah"
    assert rules.disambiguate_prefix_rule26a("pemakan") == "makan"
    assert rules.disambiguate_prefix_rule26a("pemrakit") == "mrakit"
    assert rules.disambiguate_prefix_rule26b("pemrakit") == "prakit"
    assert rules.disambiguate_prefix_rule28a("penanti") == "nanti"
    assert rules.disambiguate_prefix_rule30b("pengirim") == "kirim"
    assert rules.disambiguate_prefix_rule30c("pengebom") == "bom"
    assert rules.disambiguate_prefix_rule31a("penyanyi") == "nyanyi"
    assert rules.disambiguate_prefix_rule33("pegerak") == "gerak"
    assert rules.disambiguate_prefix_rule35("terpercaya") == "percaya"
    assert rules.disambiguate_prefix_rule36("pekerja") == "kerja"

    assert rules.disambiguate_prefix_rule24("perbaik") is None
    assert rules.disambiguate_prefix_rule26a("pembangun") is None
    assert rules.disambiguate_prefix_rule28a("pencinta") is None
    assert rules.disambiguate_prefix_rule30b("pengkritik") is None
    assert rules.disambiguate_prefix_rule30c("pengamat") is None
    assert rules.disambiguate_prefix_rule31a("pencinta") is None
    assert rules.disambiguate_prefix_rule33("pekerja") is None
    assert rules.disambiguate_prefix_rule35("tergerak") is None
    assert rules.disambiguate_prefix_rule36("pegerak") is None


@pytest.mark.parametrize("rule", RuleCatalog.rules(), ids=lambda rule: rule.name)
def test_rules_are_total_and_deterministic(rule) -> None:
    words = ["", "a", "-", "ber", "mempe", "perkataan", "x" * 200, "ÿeñ", "123lah"]
    for word in words:
        first = rule.apply(word)
        assert first == rule.apply(word)
        assert first is None or isinstance(first, str)


def test_rule_catalog_order() -> None:
    names = [rule.name for rule in RuleCatalog.rules()]

    assert names[:4] == [
        "RemoveInflectionalParticle",
        "RemoveInflectionalPossessivePronoun",
        "RemoveDerivationalSuffix",
        "RemovePlainPrefix",
    ]
    assert len(names) == len(set(names))
    assert names[-1] == "RemoveDerivationalSuffixAn"

    groups = [[rule.name for rule in group] for group in RuleCatalog.complex_prefixes]
    assert groups[0] == ["DisambiguatePrefixRule1a", "DisambiguatePrefixRule1b"]
    assert groups[11] == ["DisambiguatePrefixRule12"]
    assert groups[16] == [
        "DisambiguatePrefixRule17a",
        "DisambiguatePrefixRule17b",
        "DisambiguatePrefixRule17c",
        "DisambiguatePrefixRule17d",
    ]
    assert groups[-1] == ["DisambiguatePrefixRule36"]

    for group in RuleCatalog.complex_prefixes:
        assert all(rule.category == rules.COMPLEX_PREFIX for rule in group)


def test_rule_catalog_get() -> None:
    rule = RuleCatalog.get("DisambiguatePrefixRule12")
    assert rule.apply("mempertinggi") == "pertinggi"

    with pytest.raises(KeyError):
        RuleCatalog.get("DisambiguatePrefixRule22")


def test_replay() -> None:
    trace = [
        "RemoveDerivationalSuffix",
        "DisambiguatePrefixRule12",
        "DisambiguatePrefixRule32",
    ]
    assert replay("mempelajari", trace) == "ajar"
    assert replay("mempelajari", []) == "mempelajari"
    assert replay("dimasakan", ["RemoveDerivationalSuffixAn", "RemovePlainPrefix"]) == "masak"

    with pytest.raises(ValueError):
        replay("buku", ["RemovePlainPrefix"])
