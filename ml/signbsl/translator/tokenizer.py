"""
English Tokenizer

Normalisation, stop-word removal and rule-based lemmatisation of
English input before it is glossed.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional

from .word_lists import LEMMA_MAP, PLURAL_MAP, STOP_WORDS, WH_WORDS

# Anything that is not a word character, whitespace or apostrophe
_PUNCTUATION_RE = re.compile(r"[^\w\s']")


class QuestionType(str, Enum):
    NONE = "none"
    YES_NO = "yes-no"
    WH = "wh"


def tokenize(sentence: str) -> List[str]:
    """
    Split a sentence into lowercase word tokens.

    Punctuation is replaced by spaces; apostrophes are kept so that
    contractions such as "don't" survive as a single token.
    """
    cleaned = _PUNCTUATION_RE.sub(' ', sentence.lower())
    return [word for word in cleaned.split() if word]


def remove_stop_words(tokens: Iterable[str]) -> List[str]:
    """Drop articles, copula and auxiliaries, preserving order."""
    return [token for token in tokens if token not in STOP_WORDS]


def _undouble(stem: str) -> str:
    # stopped -> stop, running -> run
    if len(stem) > 2 and stem[-1] == stem[-2]:
        return stem[:-1]
    return stem


def lemmatize(word: str) -> str:
    """
    Reduce a word to its base form.

    Lookup order: irregular forms, irregular plurals, then suffix rules.
    The suffix rules do not restore a dropped silent "e": "baking"
    becomes "bak" because it is not in the irregular table.
    """
    if word in LEMMA_MAP:
        return LEMMA_MAP[word]

    if word in PLURAL_MAP:
        return PLURAL_MAP[word]

    if word.endswith('ies') and len(word) > 4:
        return word[:-3] + 'y'  # carries -> carry

    if word.endswith('es') and len(word) > 3:
        stem = word[:-2]
        if stem.endswith(('sh', 'ch', 'x', 's', 'z')):
            return stem  # watches -> watch

    if word.endswith('ed') and len(word) > 3:
        stem = word[:-2]
        if stem.endswith('e'):
            return stem
        return _undouble(stem)

    if word.endswith('ing') and len(word) > 4:
        return _undouble(word[:-3])

    if word.endswith('s') and len(word) > 2 and not word.endswith('ss'):
        return word[:-1]  # cats -> cat

    return word


def lemmatize_tokens(tokens: Iterable[str]) -> List[str]:
    return [lemmatize(token) for token in tokens]


def is_question(sentence: str) -> bool:
    return sentence.strip().endswith('?')


def detect_question_type(sentence: str) -> QuestionType:
    """Classify a sentence as a wh-question, yes/no question or statement."""
    if not is_question(sentence):
        return QuestionType.NONE

    if extract_wh_word(tokenize(sentence)) is not None:
        return QuestionType.WH
    return QuestionType.YES_NO


def extract_wh_word(tokens: Iterable[str]) -> Optional[str]:
    """Return the first wh-word in the tokens, if any."""
    for token in tokens:
        if token in WH_WORDS:
            return token
    return None
