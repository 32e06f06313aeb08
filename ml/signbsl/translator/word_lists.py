"""
Fixed English word lists used by the BSL translator.

All tables are read-only and built once at import.
"""

from types import MappingProxyType

# Words with no discrete sign (articles, copula, auxiliaries)
STOP_WORDS = frozenset({
    # Articles
    'a', 'an', 'the',
    # Copula
    'is', 'are', 'am', 'was', 'were', 'be', 'been', 'being',
    # Auxiliaries
    'do', 'does', 'did',
    'have', 'has', 'had',
    'will', 'would', 'shall', 'should',
    'can', 'could', 'may', 'might', 'must',
    # Function words
    'to', 'of',
})


def _verb_forms(base, *forms):
    return {form: base for form in forms}


# Irregular and common verb inflections, plus contractions
LEMMA_MAP = MappingProxyType({
    # be / have / do
    **_verb_forms('be', 'am', 'is', 'are', 'was', 'were', 'been', 'being'),
    **_verb_forms('have', 'has', 'had', 'having'),
    **_verb_forms('do', 'does', 'did', 'doing', 'done'),

    # Common verbs
    **_verb_forms('go', 'goes', 'went', 'gone', 'going'),
    **_verb_forms('want', 'wants', 'wanted', 'wanting'),
    **_verb_forms('like', 'likes', 'liked', 'liking'),
    **_verb_forms('need', 'needs', 'needed', 'needing'),
    **_verb_forms('drink', 'drinks', 'drank', 'drunk', 'drinking'),
    **_verb_forms('eat', 'eats', 'ate', 'eaten', 'eating'),
    **_verb_forms('say', 'says', 'said', 'saying'),
    **_verb_forms('make', 'makes', 'made', 'making'),
    **_verb_forms('get', 'gets', 'got', 'gotten', 'getting'),
    **_verb_forms('take', 'takes', 'took', 'taken', 'taking'),
    **_verb_forms('come', 'comes', 'came', 'coming'),
    **_verb_forms('see', 'sees', 'saw', 'seen', 'seeing'),
    **_verb_forms('know', 'knows', 'knew', 'known', 'knowing'),
    **_verb_forms('think', 'thinks', 'thought', 'thinking'),
    **_verb_forms('give', 'gives', 'gave', 'given', 'giving'),
    **_verb_forms('find', 'finds', 'found', 'finding'),
    **_verb_forms('tell', 'tells', 'told', 'telling'),
    **_verb_forms('ask', 'asks', 'asked', 'asking'),
    **_verb_forms('work', 'works', 'worked', 'working'),
    **_verb_forms('feel', 'feels', 'felt', 'feeling'),
    **_verb_forms('try', 'tries', 'tried', 'trying'),
    **_verb_forms('leave', 'leaves', 'left', 'leaving'),
    **_verb_forms('call', 'calls', 'called', 'calling'),
    **_verb_forms('keep', 'keeps', 'kept', 'keeping'),
    **_verb_forms('let', 'lets', 'letting'),
    **_verb_forms('begin', 'begins', 'began', 'begun', 'beginning'),
    **_verb_forms('seem', 'seems', 'seemed', 'seeming'),
    **_verb_forms('help', 'helps', 'helped', 'helping'),
    **_verb_forms('show', 'shows', 'showed', 'shown', 'showing'),
    **_verb_forms('hear', 'hears', 'heard', 'hearing'),
    **_verb_forms('play', 'plays', 'played', 'playing'),
    **_verb_forms('run', 'runs', 'ran', 'running'),
    **_verb_forms('move', 'moves', 'moved', 'moving'),
    **_verb_forms('live', 'lives', 'lived', 'living'),
    **_verb_forms('believe', 'believes', 'believed', 'believing'),
    **_verb_forms('bring', 'brings', 'brought', 'bringing'),
    **_verb_forms('write', 'writes', 'wrote', 'written', 'writing'),
    **_verb_forms('sit', 'sits', 'sat', 'sitting'),
    **_verb_forms('stand', 'stands', 'stood', 'standing'),
    **_verb_forms('lose', 'loses', 'lost', 'losing'),
    **_verb_forms('pay', 'pays', 'paid', 'paying'),
    **_verb_forms('meet', 'meets', 'met', 'meeting'),
    **_verb_forms('include', 'includes', 'included', 'including'),
    **_verb_forms('continue', 'continues', 'continued', 'continuing'),
    **_verb_forms('set', 'sets', 'setting'),
    **_verb_forms('learn', 'learns', 'learned', 'learnt', 'learning'),
    **_verb_forms('change', 'changes', 'changed', 'changing'),
    **_verb_forms('lead', 'leads', 'led', 'leading'),
    **_verb_forms('understand', 'understands', 'understood', 'understanding'),
    **_verb_forms('watch', 'watches', 'watched', 'watching'),
    **_verb_forms('follow', 'follows', 'followed', 'following'),
    **_verb_forms('stop', 'stops', 'stopped', 'stopping'),
    **_verb_forms('create', 'creates', 'created', 'creating'),
    **_verb_forms('speak', 'speaks', 'spoke', 'spoken', 'speaking'),
    **_verb_forms('read', 'reads', 'reading'),
    **_verb_forms('spend', 'spends', 'spent', 'spending'),
    **_verb_forms('grow', 'grows', 'grew', 'grown', 'growing'),
    **_verb_forms('open', 'opens', 'opened', 'opening'),
    **_verb_forms('walk', 'walks', 'walked', 'walking'),
    **_verb_forms('win', 'wins', 'won', 'winning'),
    **_verb_forms('offer', 'offers', 'offered', 'offering'),
    **_verb_forms('remember', 'remembers', 'remembered', 'remembering'),
    **_verb_forms('love', 'loves', 'loved', 'loving'),
    **_verb_forms('consider', 'considers', 'considered', 'considering'),
    **_verb_forms('appear', 'appears', 'appeared', 'appearing'),
    **_verb_forms('buy', 'buys', 'bought', 'buying'),
    **_verb_forms('wait', 'waits', 'waited', 'waiting'),
    **_verb_forms('serve', 'serves', 'served', 'serving'),
    **_verb_forms('die', 'dies', 'died', 'dying'),
    **_verb_forms('send', 'sends', 'sent', 'sending'),
    **_verb_forms('expect', 'expects', 'expected', 'expecting'),
    **_verb_forms('build', 'builds', 'built', 'building'),
    **_verb_forms('stay', 'stays', 'stayed', 'staying'),
    **_verb_forms('fall', 'falls', 'fell', 'fallen', 'falling'),
    **_verb_forms('cut', 'cuts', 'cutting'),
    **_verb_forms('reach', 'reaches', 'reached', 'reaching'),
    **_verb_forms('kill', 'kills', 'killed', 'killing'),
    **_verb_forms('remain', 'remains', 'remained', 'remaining'),

    # Subject contractions
    "i'm": 'i',
    "you're": 'you',
    "he's": 'he',
    "she's": 'she',
    "it's": 'it',
    "we're": 'we',
    "they're": 'they',

    # Negative contractions
    **_verb_forms(
        'not',
        "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't",
        "shouldn't", "isn't", "aren't", "wasn't", "weren't", "haven't",
        "hasn't", "hadn't",
    ),
})

# Irregular noun plurals
PLURAL_MAP = MappingProxyType({
    'children': 'child',
    'people': 'person',
    'men': 'man',
    'women': 'woman',
    'feet': 'foot',
    'teeth': 'tooth',
    'mice': 'mouse',
    'geese': 'goose',
})

# Time words that move to the start of the sentence
TIME_WORDS = frozenset({
    'yesterday', 'today', 'tomorrow', 'now', 'later', 'soon', 'always', 'never',
    'sometimes', 'often', 'usually', 'morning', 'afternoon', 'evening', 'night',
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday',
    'week', 'month', 'year', 'before', 'after', 'already', 'still', 'yet',
    'last', 'next', 'ago', 'past', 'future', 'recently', 'early', 'late',
})

# Question signs that move to the end
WH_WORDS = frozenset({
    'what', 'where', 'when', 'why', 'who', 'whom', 'whose', 'which', 'how',
})

PRONOUNS = frozenset({
    'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us', 'them',
})

VERBS = frozenset({
    'want', 'need', 'like', 'love', 'hate', 'have', 'go', 'come', 'see', 'know',
    'think', 'feel', 'make', 'take', 'give', 'get', 'find', 'tell', 'ask', 'work',
    'try', 'leave', 'call', 'keep', 'let', 'begin', 'seem', 'help', 'show', 'hear',
    'play', 'run', 'move', 'live', 'believe', 'bring', 'write', 'sit', 'stand',
    'lose', 'pay', 'meet', 'learn', 'change', 'lead', 'understand', 'watch', 'follow',
    'stop', 'create', 'speak', 'read', 'spend', 'grow', 'open', 'walk', 'win',
    'offer', 'remember', 'consider', 'appear', 'buy', 'wait', 'serve', 'die', 'send',
    'expect', 'build', 'stay', 'fall', 'cut', 'reach', 'kill', 'remain', 'eat',
    'drink', 'sleep', 'wake', 'look', 'say', 'talk', 'finish', 'start', 'use',
})
