# tests/test_database.py
"""Tests for the sign dictionary and its SQLite store."""

import json

import pytest

from signbsl.database import (
    SignDictionary,
    SignEntry,
    add_sign,
    get_all_signs,
    get_sign_by_gloss,
    init_db,
    load_entries_from_json,
    seed_from_json,
)
from signbsl.seed import main as seed_main
from signbsl.shared.config import PATHS


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "signs.db")
    init_db(path)
    return path


# === SQLite store ===

def test_add_and_get_sign(db_path):
    sign_id = add_sign(db_path, "coffee", category="Food & Drink", aliases=["espresso"])

    assert sign_id is not None
    sign = get_sign_by_gloss(db_path, "Coffee")
    assert sign["gloss"] == "COFFEE"
    assert sign["category"] == "Food & Drink"
    assert json.loads(sign["aliases"]) == ["espresso"]


def test_add_duplicate_sign_returns_none(db_path):
    assert add_sign(db_path, "TEA") is not None
    assert add_sign(db_path, "tea") is None
    assert len(get_all_signs(db_path)) == 1


def test_get_missing_sign(db_path):
    assert get_sign_by_gloss(db_path, "NOTHING") is None


def test_seed_from_json(tmp_path):
    path = str(tmp_path / "seeded.db")
    expected = len(load_entries_from_json(PATHS["signs_json"]))

    assert seed_from_json(path) == expected
    # Second run inserts nothing new
    assert seed_from_json(path) == 0
    assert len(get_all_signs(path)) == expected


def test_dictionary_from_missing_db(tmp_path):
    missing = tmp_path / "missing.db"

    with pytest.raises(FileNotFoundError):
        SignDictionary.from_db(str(missing))
    assert not missing.exists()


def test_dictionary_from_db_matches_json(tmp_path, dictionary):
    path = str(tmp_path / "seeded.db")
    seed_from_json(path)
    from_db = SignDictionary.from_db(path)

    assert from_db.count() == dictionary.count()
    assert from_db.lookup("MOTHER") == dictionary.lookup("MOTHER")
    assert from_db.resolve_alias("mum") == "MOTHER"


# === In-memory dictionary ===

def test_lookup_is_case_insensitive(dictionary):
    assert dictionary.lookup("coffee").gloss == "COFFEE"
    assert dictionary.lookup("COFFEE") is dictionary.lookup("Coffee")
    assert dictionary.lookup("ZORBLAX") is None


def test_entries_get_signbsl_url(dictionary):
    assert dictionary.lookup("TEA").signbsl_url == "https://www.signbsl.com/sign/tea"


def test_search_url_for(dictionary):
    assert dictionary.search_url_for("Zorblax") == "https://www.signbsl.com/sign/zorblax"


def test_custom_search_template():
    dictionary = SignDictionary([SignEntry("TEA")], search_url_template="https://example.test/?q={word}")
    assert dictionary.search_url_for("TEA") == "https://example.test/?q=tea"


def test_resolve_alias(dictionary):
    assert dictionary.resolve_alias("Mum") == "MOTHER"
    assert dictionary.resolve_alias("bathroom") == "TOILET"
    assert dictionary.resolve_alias("coffee") is None


def test_glosses_by_category(dictionary):
    categories = dictionary.glosses_by_category()

    assert "COFFEE" in categories["Food & Drink"]
    assert "WHAT" in categories["Questions"]
    assert sum(len(g) for g in categories.values()) == dictionary.count()


def test_count_and_contains(dictionary):
    assert dictionary.count() == len(dictionary) > 100
    assert "coffee" in dictionary
    assert "zorblax" not in dictionary


def test_duplicate_entries_keep_first():
    dictionary = SignDictionary([
        SignEntry("TEA", category="Food & Drink"),
        SignEntry("TEA", category="Other"),
    ])

    assert dictionary.count() == 1
    assert dictionary.lookup("TEA").category == "Food & Drink"


def test_random_sample(dictionary):
    sample = dictionary.random_sample(5)

    assert len(sample) == 5
    assert len(set(sample)) == 5
    assert all(gloss in dictionary for gloss in sample)


def test_random_sample_is_seedable(dictionary):
    assert dictionary.random_sample(4, seed=7) == dictionary.random_sample(4, seed=7)


def test_random_sample_bounds(dictionary):
    assert dictionary.random_sample(0) == []
    assert len(dictionary.random_sample(10_000)) == dictionary.count()
    assert SignDictionary([]).random_sample(3) == []


def test_entry_to_dict():
    data = SignEntry("TEA", category="Food & Drink", aliases=("cuppa",)).to_dict()

    assert data == {
        "gloss": "TEA",
        "category": "Food & Drink",
        "video_path": None,
        "signbsl_url": None,
        "difficulty": 1,
        "aliases": ["cuppa"],
    }


def test_load_entries_accepts_plain_list(tmp_path):
    path = tmp_path / "signs.json"
    path.write_text(json.dumps([{"gloss": "hello", "aliases": ["HI"]}]), encoding="utf-8")

    entries = load_entries_from_json(str(path))
    assert entries == [SignEntry("HELLO", category="General", aliases=("hi",))]


# === Seed CLI ===

def test_seed_cli(tmp_path, capsys):
    path = str(tmp_path / "cli.db")

    assert seed_main(["--db", path, "--list"]) == 0

    out = capsys.readouterr().out
    assert f"into {path}" in out
    assert "Food & Drink:" in out


def test_seed_cli_requires_db(capsys):
    assert seed_main(["--db", ""]) == 2
    assert "Missing --db" in capsys.readouterr().err


def test_seed_cli_bad_json(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    assert seed_main(["--db", str(tmp_path / "x.db"), "--json", str(bad)]) == 1
    assert "Could not read vocabulary" in capsys.readouterr().err
