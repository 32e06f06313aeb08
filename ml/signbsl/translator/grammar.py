"""
BSL Grammar Rules

British Sign Language uses a different word order from English:
- Topic-comment structure (topic first, then comment)
- Time markers at the start of the sentence
- Question words (what, where, ...) at the end
- No articles or copula
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from .tokenizer import QuestionType
from .word_lists import PRONOUNS, TIME_WORDS, VERBS, WH_WORDS


class WordRole(Enum):
    TIME = "time"
    WH_WORD = "wh_word"
    SUBJECT = "subject"
    VERB = "verb"
    OBJECT = "object"


@dataclass(frozen=True)
class GrammarContext:
    """Sentence-level facts the word-order rules depend on."""
    is_question: bool
    question_type: QuestionType
    original_sentence: str


# First matching word set wins; anything unmatched is an object/other
ROLE_PRIORITY: Tuple[Tuple[frozenset, WordRole], ...] = (
    (TIME_WORDS, WordRole.TIME),
    (WH_WORDS, WordRole.WH_WORD),
    (PRONOUNS, WordRole.SUBJECT),
    (VERBS, WordRole.VERB),
)

# Emission order per question type. Both branches currently agree: the
# wh-word is signed last, and stray wh-words in statements trail too.
WORD_ORDER: Dict[QuestionType, Tuple[WordRole, ...]] = {
    QuestionType.WH: (
        WordRole.TIME, WordRole.OBJECT, WordRole.SUBJECT, WordRole.VERB, WordRole.WH_WORD,
    ),
    QuestionType.YES_NO: (
        WordRole.TIME, WordRole.OBJECT, WordRole.SUBJECT, WordRole.VERB, WordRole.WH_WORD,
    ),
    QuestionType.NONE: (
        WordRole.TIME, WordRole.OBJECT, WordRole.SUBJECT, WordRole.VERB, WordRole.WH_WORD,
    ),
}

EXPLANATIONS = {
    QuestionType.WH: (
        'In BSL wh-questions, the question word (what, where, etc.) goes at the END.'
    ),
    QuestionType.YES_NO: (
        'In BSL yes/no questions, the word order is similar but facial expressions '
        '(raised eyebrows) indicate it\'s a question.'
    ),
    QuestionType.NONE: (
        'BSL uses topic-comment order: what you\'re talking about (topic) comes first, '
        'then the comment about it.'
    ),
}


class BSLGrammar:
    """
    Implements BSL word-order transformations on gloss sequences.

    Roles are assigned by fixed word-list membership rather than a POS
    tagger, so a word on both the verb list and used as a noun is always
    treated as a verb.
    """

    @staticmethod
    def classify(gloss: str) -> WordRole:
        """Assign a single gloss to its word role."""
        lower = gloss.lower()
        for words, role in ROLE_PRIORITY:
            if lower in words:
                return role
        return WordRole.OBJECT

    def partition(self, glosses: Iterable[str]) -> Dict[WordRole, List[str]]:
        """Bucket glosses by role, keeping input order within each bucket."""
        buckets: Dict[WordRole, List[str]] = {role: [] for role in WordRole}
        for gloss in glosses:
            buckets[self.classify(gloss)].append(gloss)
        return buckets

    def apply_word_order(self, glosses: List[str], context: GrammarContext) -> List[str]:
        """
        Reorder glosses into BSL order.

        Order:
        1. Time markers
        2. Topic (objects and other content)
        3. Subject pronouns
        4. Verbs
        5. Question words
        """
        if not glosses:
            return []

        buckets = self.partition(glosses)
        order = WORD_ORDER.get(QuestionType(context.question_type), WORD_ORDER[QuestionType.NONE])

        result = []
        for role in order:
            result.extend(buckets[role])

        # BSL gloss convention
        return [gloss.upper() for gloss in result]

    def reorder_topic_comment(self, glosses: List[str]) -> List[str]:
        """
        Front the nouns that follow the verb in a pronoun...verb...noun pattern.

        "I LIKE TEA" -> "TEA I LIKE". Not applied by the translator; kept
        as a standalone rule.
        """
        lowered = [gloss.lower() for gloss in glosses]
        pronoun_idx = next((i for i, g in enumerate(lowered) if g in PRONOUNS), -1)
        verb_idx = next((i for i, g in enumerate(lowered) if g in VERBS), -1)

        if pronoun_idx == -1 or verb_idx == -1 or verb_idx <= pronoun_idx:
            return list(glosses)

        nouns = [
            gloss for gloss in glosses[verb_idx + 1:]
            if gloss.lower() not in PRONOUNS
            and gloss.lower() not in VERBS
            and gloss.lower() not in TIME_WORDS
        ]
        if not nouns:
            return list(glosses)

        rest = [gloss for gloss in glosses if gloss not in nouns]
        return nouns + rest

    @staticmethod
    def explain(context: GrammarContext) -> str:
        """Human-readable description of the rule applied."""
        return EXPLANATIONS.get(QuestionType(context.question_type), EXPLANATIONS[QuestionType.NONE])


_grammar = BSLGrammar()


def classify(gloss: str) -> WordRole:
    return _grammar.classify(gloss)


def apply_bsl_word_order(glosses: List[str], context: GrammarContext) -> List[str]:
    return _grammar.apply_word_order(glosses, context)


def reorder_topic_comment(glosses: List[str]) -> List[str]:
    return _grammar.reorder_topic_comment(glosses)


def explain_bsl_order(context: GrammarContext) -> str:
    return _grammar.explain(context)
