# tests/conftest.py
import pytest

from signbsl.database import SignDictionary, SignEntry
from signbsl.translator import BSLTranslator


@pytest.fixture(scope="session")
def dictionary():
    return SignDictionary.from_json()


@pytest.fixture
def translator(dictionary):
    return BSLTranslator(dictionary)


@pytest.fixture
def small_dictionary():
    return SignDictionary([
        SignEntry("COFFEE", category="Food & Drink", aliases=("espresso",)),
        SignEntry("YOU", category="People"),
        SignEntry("WANT", category="Verbs"),
        SignEntry("NAME", category="People"),
    ])
