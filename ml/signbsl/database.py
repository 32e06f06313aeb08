"""
Sign dictionary storage.

Signs live either in the bundled JSON vocabulary or in an SQLite
database seeded from it. Either way they are loaded once into a
read-only SignDictionary that the translator queries.
"""

import json
import logging
import os
import sqlite3
from dataclasses import asdict, dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from signbsl.shared.config import DICTIONARY_CONFIG, PATHS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignEntry:
    """Metadata for one sign in the dictionary."""
    gloss: str
    category: str = 'General'
    video_path: Optional[str] = None
    signbsl_url: Optional[str] = None
    difficulty: int = 1
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['aliases'] = list(self.aliases)
        return data


# ============================================================================
# SQLITE STORE
# ============================================================================

def get_db_connection(db_path):
    """Get a connection to the SQLite database."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path):
    """Initialize the database with the signs table."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS signs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                gloss TEXT NOT NULL UNIQUE,
                category TEXT,
                video_path TEXT,
                signbsl_url TEXT,
                difficulty INTEGER DEFAULT 1,
                aliases TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')
        conn.commit()
    finally:
        conn.close()
    logger.info("Sign database initialized at %s", db_path)


def add_sign(db_path, gloss, category=None, video_path=None, signbsl_url=None,
             difficulty=1, aliases=None):
    """Add a new sign to the database. Returns the row id, or None if it exists."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute('''
            INSERT INTO signs (gloss, category, video_path, signbsl_url, difficulty, aliases)
            VALUES (?, ?, ?, ?, ?, ?)
        ''', (gloss.upper(), category, video_path, signbsl_url, difficulty,
              json.dumps(list(aliases or []))))
        conn.commit()
        return cursor.lastrowid
    except sqlite3.IntegrityError:
        logger.warning("Sign '%s' already exists", gloss)
        return None
    finally:
        conn.close()


def get_all_signs(db_path):
    """Get all signs from the database."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    try:
        cursor.execute('''
            SELECT gloss, category, video_path, signbsl_url, difficulty, aliases
            FROM signs ORDER BY id
        ''')
        signs = cursor.fetchall()
    finally:
        conn.close()
    return [dict(sign) for sign in signs]


def get_sign_by_gloss(db_path, gloss):
    """Get a sign by its gloss."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    try:
        cursor.execute('''
            SELECT gloss, category, video_path, signbsl_url, difficulty, aliases
            FROM signs WHERE gloss = ?
        ''', (gloss.upper(),))
        sign = cursor.fetchone()
    finally:
        conn.close()
    return dict(sign) if sign else None


def seed_from_json(db_path, json_path=None):
    """
    Load a JSON vocabulary file into the database.

    Returns:
        Number of signs inserted (duplicates are skipped)
    """
    init_db(db_path)

    inserted = 0
    for entry in load_entries_from_json(json_path or PATHS['signs_json']):
        sign_id = add_sign(
            db_path,
            entry.gloss,
            category=entry.category,
            video_path=entry.video_path,
            signbsl_url=entry.signbsl_url,
            difficulty=entry.difficulty,
            aliases=entry.aliases,
        )
        if sign_id is not None:
            inserted += 1

    logger.info("Seeded %d signs into %s", inserted, db_path)
    return inserted


# ============================================================================
# ENTRY PARSING
# ============================================================================

def _entry_from_record(record: Dict) -> SignEntry:
    aliases = record.get('aliases') or ()
    if isinstance(aliases, str):
        aliases = json.loads(aliases)

    return SignEntry(
        gloss=record['gloss'].upper(),
        category=record.get('category') or 'General',
        video_path=record.get('video_path'),
        signbsl_url=record.get('signbsl_url'),
        difficulty=int(record.get('difficulty') or 1),
        aliases=tuple(alias.lower() for alias in aliases),
    )


def load_entries_from_json(json_path) -> List[SignEntry]:
    """Parse a vocabulary file of the form {"signs": [{...}, ...]}."""
    with open(json_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    records = data['signs'] if isinstance(data, dict) else data
    return [_entry_from_record(record) for record in records]


# ============================================================================
# IN-MEMORY DICTIONARY
# ============================================================================

class SignDictionary:
    """
    Read-only gloss -> SignEntry lookup.

    Built once from a list of entries; nothing mutates it afterwards, so
    it can be shared between concurrent translations.
    """

    def __init__(self, entries: Iterable[SignEntry], search_url_template: Optional[str] = None):
        self.search_url_template = search_url_template or DICTIONARY_CONFIG['search_url_template']

        by_gloss = {}
        by_alias = {}
        for entry in entries:
            if entry.signbsl_url is None:
                entry = replace(entry, signbsl_url=self.search_url_for(entry.gloss))
            if entry.gloss in by_gloss:
                logger.warning("Duplicate gloss '%s' ignored", entry.gloss)
                continue
            by_gloss[entry.gloss] = entry
            for alias in entry.aliases:
                by_alias.setdefault(alias, entry.gloss)

        self._entries = MappingProxyType(by_gloss)
        self._aliases = MappingProxyType(by_alias)

    @classmethod
    def from_json(cls, json_path=None, **kwargs) -> 'SignDictionary':
        return cls(load_entries_from_json(json_path or PATHS['signs_json']), **kwargs)

    @classmethod
    def from_db(cls, db_path, **kwargs) -> 'SignDictionary':
        # sqlite3.connect would create an empty file for a missing path
        if not os.path.exists(db_path):
            raise FileNotFoundError(f"Sign database not found: {db_path}")
        return cls((_entry_from_record(row) for row in get_all_signs(db_path)), **kwargs)

    @classmethod
    def default(cls) -> 'SignDictionary':
        """Dictionary from the configured database, or the bundled JSON."""
        if PATHS['signs_db']:
            logger.info("Loading signs from database %s", PATHS['signs_db'])
            return cls.from_db(PATHS['signs_db'])
        return cls.from_json()

    def lookup(self, gloss: str) -> Optional[SignEntry]:
        return self._entries.get(gloss.upper())

    def resolve_alias(self, word: str) -> Optional[str]:
        """Gloss that lists this English word as an alias."""
        return self._aliases.get(word.lower())

    def search_url_for(self, word: str) -> str:
        return self.search_url_template.format(word=word.lower())

    def glosses_by_category(self) -> Dict[str, List[str]]:
        categories: Dict[str, List[str]] = {}
        for gloss, entry in self._entries.items():
            categories.setdefault(entry.category, []).append(gloss)
        return categories

    def count(self) -> int:
        return len(self._entries)

    def random_sample(self, n: int, seed: Optional[int] = None) -> List[str]:
        """Pick up to n distinct glosses at random."""
        glosses = list(self._entries)
        size = max(0, min(n, len(glosses)))
        if size == 0:
            return []

        rng = np.random.default_rng(seed)
        picks = rng.choice(len(glosses), size=size, replace=False)
        return [glosses[i] for i in picks]

    def __contains__(self, gloss: str) -> bool:
        return gloss.upper() in self._entries

    def __len__(self) -> int:
        return self.count()
