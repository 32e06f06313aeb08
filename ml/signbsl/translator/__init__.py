"""
BSL Text-to-Gloss Translator

Converts English text to British Sign Language gloss sequences.

Pipeline:
    English Text → Tokenize → Stop Words → Lemmatize → Gloss → BSL Word Order → Sign Lookup
"""

from .translator import (
    BSLTranslator,
    TranslationResult,
    get_translation_stats,
    quick_translate,
    translate,
)
from .grammar import BSLGrammar, GrammarContext, WordRole
from .gloss_resolver import GlossResolver, GlossResult
from .tokenizer import QuestionType, detect_question_type, lemmatize, remove_stop_words, tokenize

__all__ = [
    'BSLTranslator', 'TranslationResult', 'get_translation_stats', 'quick_translate', 'translate',
    'BSLGrammar', 'GrammarContext', 'WordRole',
    'GlossResolver', 'GlossResult',
    'QuestionType', 'detect_question_type', 'lemmatize', 'remove_stop_words', 'tokenize',
]
