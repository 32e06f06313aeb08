"""
BSL Text-to-Gloss Translator

Main entry point for translating English sentences to BSL gloss sequences.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from signbsl.database import SignDictionary
from signbsl.shared.config import EXAMPLE_SENTENCES

from .gloss_resolver import GlossResolver, GlossResult
from .grammar import BSLGrammar, GrammarContext, WordRole
from .tokenizer import (
    QuestionType,
    detect_question_type,
    is_question,
    lemmatize,
    remove_stop_words,
    tokenize,
)
from .word_lists import STOP_WORDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationResult:
    """Complete output of one translation."""
    original_sentence: str
    gloss_sequence: Tuple[GlossResult, ...]
    gloss_string: str
    question_type: QuestionType
    is_question: bool
    explanation: str
    notes: Tuple[str, ...] = ()

    @property
    def glosses(self) -> List[str]:
        return [g.gloss for g in self.gloss_sequence]

    def to_dict(self) -> Dict:
        return {
            'originalSentence': self.original_sentence,
            'glossSequence': [g.to_dict() for g in self.gloss_sequence],
            'glossString': self.gloss_string,
            'questionType': QuestionType(self.question_type).value,
            'isQuestion': self.is_question,
            'explanation': self.explanation,
            'notes': list(self.notes),
        }


class BSLTranslator:
    """
    Main translator class for English -> BSL gloss.

    Usage:
        translator = BSLTranslator()
        result = translator.translate("Do you want a cup of coffee?")
        result.gloss_string  # "CUP COFFEE YOU WANT"
    """

    def __init__(self, dictionary: Optional[SignDictionary] = None):
        """
        Initialize the translator.

        Args:
            dictionary: Sign dictionary to resolve glosses against. If None,
                the default (configured database or bundled vocabulary) is used.
        """
        if dictionary is None:
            dictionary = SignDictionary.default()

        self.dictionary = dictionary
        self.grammar = BSLGrammar()
        self.resolver = GlossResolver(dictionary)

    def translate(self, sentence: str) -> TranslationResult:
        """
        Translate an English sentence to a BSL gloss sequence.

        Args:
            sentence: English sentence or phrase

        Returns:
            TranslationResult; empty input gives an empty gloss sequence
        """
        # Step 1: Tokenize and normalise
        tokens = tokenize(sentence)

        # Step 2: Question type comes from the raw sentence, not the tokens
        context = GrammarContext(
            is_question=is_question(sentence),
            question_type=detect_question_type(sentence),
            original_sentence=sentence,
        )

        # Step 3: Drop articles/auxiliaries and lemmatize
        content_words = remove_stop_words(tokens)
        lemmas = [lemmatize(word) for word in content_words]

        # Step 4: Map lemmas to glosses, falling back to the lemma itself
        word_gloss_pairs = []
        for word, lemma in zip(content_words, lemmas):
            gloss = self.resolver.word_to_gloss(lemma) or lemma.upper()
            word_gloss_pairs.append((word, gloss))

        # Step 5: Apply BSL word order
        glosses = [gloss for _, gloss in word_gloss_pairs]
        ordered = self.grammar.apply_word_order(glosses, context)

        # Step 6: Resolve final glosses against the dictionary
        gloss_sequence = tuple(
            self.resolver.resolve(gloss, original_word)
            for gloss, original_word in zip(ordered, self._source_words(ordered, word_gloss_pairs))
        )

        logger.debug(
            "Translated %r: tokens=%s lemmas=%s glosses=%s",
            sentence, tokens, lemmas, ordered,
        )

        return TranslationResult(
            original_sentence=sentence,
            gloss_sequence=gloss_sequence,
            gloss_string=' '.join(ordered),
            question_type=context.question_type,
            is_question=context.is_question,
            explanation=self.grammar.explain(context),
            notes=tuple(self._generate_grammar_notes(tokens, glosses, gloss_sequence, context)),
        )

    @staticmethod
    def _source_words(ordered: List[str], word_gloss_pairs: List[Tuple[str, str]]) -> List[str]:
        """English word behind each reordered gloss, matched in input order."""
        remaining = list(word_gloss_pairs)
        words = []
        for gloss in ordered:
            for i, (word, pair_gloss) in enumerate(remaining):
                if pair_gloss.upper() == gloss:
                    words.append(word)
                    del remaining[i]
                    break
            else:
                words.append(gloss.lower())
        return words

    def _generate_grammar_notes(self, tokens: List[str], glosses: List[str],
                                gloss_sequence: Tuple[GlossResult, ...],
                                context: GrammarContext) -> List[str]:
        """Generate notes explaining the translation choices."""
        notes = []

        dropped = [t for t in tokens if t in STOP_WORDS]
        if dropped:
            notes.append(f"Articles/auxiliaries dropped: {', '.join(dropped)}")

        final = [g.gloss for g in gloss_sequence]
        if final != [g.upper() for g in glosses]:
            notes.append("Word order changed from English SVO to BSL topic-comment structure")

        buckets = self.grammar.partition(final)
        if buckets[WordRole.TIME]:
            notes.append(f"Time markers moved to sentence start: {', '.join(buckets[WordRole.TIME])}")

        if context.question_type == QuestionType.WH and buckets[WordRole.WH_WORD]:
            notes.append(f"Question word moved to end: {', '.join(buckets[WordRole.WH_WORD])}")

        unknown = [g.gloss for g in gloss_sequence if g.is_unknown]
        if unknown:
            notes.append(f"No dictionary sign for: {', '.join(unknown)}")

        return notes

    def translate_batch(self, sentences: List[str]) -> List[TranslationResult]:
        """Translate multiple sentences."""
        return [self.translate(sentence) for sentence in sentences]

    def get_available_signs(self) -> List[str]:
        """All glosses the dictionary has a sign for."""
        return sorted(
            gloss
            for glosses in self.dictionary.glosses_by_category().values()
            for gloss in glosses
        )


def get_translation_stats(result: TranslationResult) -> Dict:
    """Coverage statistics for a translation."""
    total = len(result.gloss_sequence)
    known = sum(1 for g in result.gloss_sequence if not g.is_unknown)

    return {
        'total_glosses': total,
        'known_glosses': known,
        'unknown_glosses': total - known,
        # round half up
        'coverage_percent': int(known * 100 / total + 0.5) if total else 100,
    }


_default_translator: Optional[BSLTranslator] = None


def _get_default_translator() -> BSLTranslator:
    global _default_translator
    if _default_translator is None:
        _default_translator = BSLTranslator()
    return _default_translator


# Convenience functions for quick translation
def translate(sentence: str) -> TranslationResult:
    """Translate with the default dictionary."""
    return _get_default_translator().translate(sentence)


def quick_translate(sentence: str) -> str:
    """Translate and return just the gloss string."""
    return translate(sentence).gloss_string


if __name__ == '__main__':
    translator = BSLTranslator()

    for sentence in EXAMPLE_SENTENCES:
        print(f"\n{'='*60}")
        print(f"Input: {sentence}")
        print(f"{'='*60}")

        result = translator.translate(sentence)
        stats = get_translation_stats(result)

        print(f"Gloss: {result.gloss_string}")
        print(f"Signs found: {stats['known_glosses']}/{stats['total_glosses']} "
              f"({stats['coverage_percent']}%)")
        print(f"Rule: {result.explanation}")

        if result.notes:
            print("\nGrammar notes:")
            for note in result.notes:
                print(f"  • {note}")
