"""Tests for text utilities."""

import pytest

from legal_form.utils.text import clean, compact, fold_diacritics, tokenize


@pytest.mark.parametrize(
    "token, expected",
    [
        ("GmbH", "gmbh"),
        ("L.L.C.", "llc"),
        ("e.V.", "ev"),
        ("V.,", "v"),
        ("(Foobar)", "foobar"),
        ("&", ""),
        ("S/A", "sa"),
        ("O’Neil's", "oneils"),
        ('"Quoted":', "quoted"),
        ("Co-op", "coop"),
    ],
)
def test_clean(token, expected):
    assert clean(token) == expected


def test_clean_keeps_other_scripts():
    assert clean("ООО") == "ооо"
    assert clean("Ε.Π.Ε.") == "επε"
    assert clean("株式会社") == "株式会社"
    assert clean("Beschränkter") == "beschränkter"


def test_clean_removes_inner_spaces():
    assert clean("Private Limited") == "privatelimited"


def test_tokenize_splits_on_whitespace_runs():
    assert tokenize("Example   GmbH\t& Co.\nKG") == ["Example", "GmbH", "&", "Co.", "KG"]


def test_tokenize_unicode_whitespace():
    assert tokenize("Example\u00a0LLC\u2003Inc") == ["Example", "LLC", "Inc"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_compact():
    assert compact(" a b\tc\n") == "abc"


def test_fold_diacritics_latin():
    assert fold_diacritics("beschränkter") == "beschrankter"
    assert fold_diacritics("société") == "societe"
    assert fold_diacritics("spółka") == "spolka"
    assert fold_diacritics("økonomisk") == "okonomisk"


def test_fold_diacritics_keeps_script():
    assert fold_diacritics("ограниченной") == "ограниченнои"
    assert fold_diacritics("株式会社") == "株式会社"


def test_fold_diacritics_keeps_ligature_letters():
    assert fold_diacritics("iværksætterselskab") == "iværksætterselskab"
