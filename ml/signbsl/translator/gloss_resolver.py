"""
Gloss Resolver

Matches glosses against the sign dictionary and records which ones
have a known sign. Unknown glosses are a normal outcome: they carry a
search link instead of a dictionary entry.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from signbsl.database import SignDictionary, SignEntry
from signbsl.shared.config import DICTIONARY_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlossResult:
    """A gloss in the final sequence with its dictionary outcome."""
    gloss: str
    original_word: str
    is_unknown: bool
    search_url: str
    sign_entry: Optional[SignEntry] = None

    def to_dict(self) -> Dict:
        return {
            'gloss': self.gloss,
            'originalWord': self.original_word,
            'isUnknown': self.is_unknown,
            'searchUrl': self.search_url,
            'signEntry': self.sign_entry.to_dict() if self.sign_entry else None,
        }


class GlossResolver:
    """
    Handles sign dictionary lookups for the translator.

    Matching strategies for an English lemma:
    1. Exact gloss match
    2. Alias match (mum -> MOTHER)
    3. Gloss with variant suffix removed (name_1 -> NAME)
    """

    def __init__(self, dictionary: SignDictionary):
        self.dictionary = dictionary

    def _safe_lookup(self, gloss: str) -> Optional[SignEntry]:
        # A failing dictionary is treated as "no entry"
        try:
            return self.dictionary.lookup(gloss)
        except Exception as e:
            logger.warning("Sign lookup failed for '%s': %s", gloss, e)
            return None

    def _safe_alias(self, word: str) -> Optional[str]:
        resolve_alias = getattr(self.dictionary, 'resolve_alias', None)
        if resolve_alias is None:
            return None
        try:
            return resolve_alias(word)
        except Exception as e:
            logger.warning("Alias lookup failed for '%s': %s", word, e)
            return None

    def _normalize_gloss(self, word: str) -> str:
        """Remove variant suffixes such as _1 or (2)."""
        word = word.lower()
        for suffix in DICTIONARY_CONFIG['variant_suffixes']:
            if word.endswith(suffix):
                return word[:-len(suffix)]
        return word

    def word_to_gloss(self, lemma: str) -> Optional[str]:
        """Dictionary gloss for a lemma, or None if no sign matches."""
        if not lemma:
            return None

        entry = self._safe_lookup(lemma.upper())
        if entry is not None:
            return entry.gloss

        alias_gloss = self._safe_alias(lemma)
        if alias_gloss:
            return alias_gloss.upper()

        base = self._normalize_gloss(lemma)
        if base and base != lemma.lower():
            entry = self._safe_lookup(base.upper())
            if entry is not None:
                return entry.gloss

        return None

    def search_url_for(self, word: str) -> str:
        try:
            return self.dictionary.search_url_for(word.lower())
        except Exception as e:
            logger.warning("Search URL lookup failed for '%s': %s", word, e)
            return DICTIONARY_CONFIG['search_url_template'].format(word=word.lower())

    def resolve(self, gloss: str, original_word: Optional[str] = None) -> GlossResult:
        """Build the GlossResult for one gloss of the final sequence."""
        entry = self._safe_lookup(gloss)
        if entry is None:
            logger.debug("No sign for gloss %s", gloss)

        return GlossResult(
            gloss=gloss,
            original_word=original_word or gloss.lower(),
            is_unknown=entry is None,
            search_url=self.search_url_for(gloss),
            sign_entry=entry,
        )
