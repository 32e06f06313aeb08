"""
Shared configuration for the BSL gloss translator.

Centralised settings used by the translator core, the sign dictionary
and the web service. Values are read from the environment once at import.
"""

import os
from pathlib import Path

_package_dir = Path(__file__).parent.parent


def env_flag(name, default=False):
    """Read a boolean switch such as SIGNBSL_DEBUG=1 from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Directory Paths
PATHS = {
    # Bundled vocabulary used when no database is configured
    'signs_json': os.getenv('SIGNBSL_SIGNS_JSON', str(_package_dir / 'data' / 'signs.json')),

    # Optional SQLite sign store (None = use the bundled JSON)
    'signs_db': os.getenv('SIGNBSL_DB_PATH'),
}

# Sign Dictionary Configuration
DICTIONARY_CONFIG = {
    # Fallback lookup for words without a bundled sign
    'search_url_template': os.getenv(
        'SIGNBSL_SEARCH_URL', 'https://www.signbsl.com/sign/{word}'
    ),

    # Number of glosses offered as "try this word" suggestions
    'random_sample_size': 6,

    # Variant suffixes stripped during approximate gloss matching
    'variant_suffixes': ['_1', '_2', '(1)', '(2)', '_v1', '_v2'],
}

# Web Service Configuration
API_CONFIG = {
    'port': int(os.getenv('SIGNBSL_PORT', 8000)),

    'secret_key': os.getenv('SECRET_KEY', 'dev-secret-key'),

    # Presentation-layer limit; the translator core itself has none
    'max_sentence_length': 200,

    'cors_origins': [
        'http://localhost:3000',  # Next.js frontend
        'http://localhost:5173',  # Vite dev (for direct testing)
    ],

    # Werkzeug debugger; only enable on a trusted machine
    'debug': env_flag('SIGNBSL_DEBUG'),
}

# Sentences offered by the UI as starting points
EXAMPLE_SENTENCES = [
    'Do you want a cup of coffee?',
    'What is your name?',
    'I am learning sign language',
    'Where do you live?',
    'Yesterday I went to the shop',
    'My friend is deaf',
]

# Logging Configuration
LOGGING = {
    'level': os.getenv('SIGNBSL_LOG_LEVEL', 'INFO'),  # DEBUG, INFO, WARNING, ERROR
    'format': '[BSL] %(asctime)s [%(levelname)s] %(name)s: %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
}
