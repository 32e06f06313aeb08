"""
Translation API endpoints.

REST endpoints for translating sentences and browsing the sign
dictionary, plus the WebSocket handler for live translation.
"""

import logging

from flask import Blueprint, current_app, jsonify, request
from flask_socketio import emit

from signbsl.shared.config import API_CONFIG, DICTIONARY_CONFIG, EXAMPLE_SENTENCES
from signbsl.translator import get_translation_stats

logger = logging.getLogger(__name__)

translate_api = Blueprint('translate_api', __name__)


def _translator():
    return current_app.config['TRANSLATOR']


def _validate_sentence(data):
    """Return (sentence, error_message)."""
    if not isinstance(data, dict):
        return None, 'request body must be a JSON object'
    sentence = data.get('sentence')
    if sentence is None:
        return None, 'sentence required'
    if not isinstance(sentence, str):
        return None, 'sentence must be a string'
    if len(sentence) > API_CONFIG['max_sentence_length']:
        return None, f"sentence longer than {API_CONFIG['max_sentence_length']} characters"
    return sentence, None


def _translation_payload(sentence):
    result = _translator().translate(sentence)
    return {
        'success': True,
        'result': result.to_dict(),
        'stats': get_translation_stats(result),
    }


# ========== TRANSLATION ==========

@translate_api.route('/translate', methods=['POST'])
def translate_sentence():
    """
    Translate an English sentence to BSL gloss.

    Request body:
        {'sentence': 'Do you want a cup of coffee?'}

    Returns:
        {
            'success': True,
            'result': {...},
            'stats': {'total_glosses': 4, 'known_glosses': 4, ...}
        }
    """
    try:
        data = request.get_json(silent=True) or {}
        sentence, error = _validate_sentence(data)
        if error:
            return jsonify({'success': False, 'error': error}), 400

        return jsonify(_translation_payload(sentence))
    except Exception as e:
        logger.exception("Translation failed")
        return jsonify({'success': False, 'error': str(e)}), 500


@translate_api.route('/examples', methods=['GET'])
def list_examples():
    """Example sentences to try."""
    return jsonify({'success': True, 'examples': EXAMPLE_SENTENCES})


# ========== SIGN DICTIONARY ==========

@translate_api.route('/glossary', methods=['GET'])
def glossary():
    """
    Glosses grouped by category.

    Query parameters:
        - search: Case-insensitive substring filter on glosses

    Returns:
        Categories containing at least one matching gloss
    """
    try:
        dictionary = _translator().dictionary
        search = request.args.get('search', '').strip().lower()

        categories = dictionary.glosses_by_category()
        if search:
            categories = {
                category: [g for g in glosses if search in g.lower()]
                for category, glosses in categories.items()
            }
            categories = {category: glosses for category, glosses in categories.items() if glosses}

        return jsonify({
            'success': True,
            'categories': categories,
            'count': sum(len(glosses) for glosses in categories.values()),
            'total': dictionary.count(),
        })
    except Exception as e:
        logger.exception("Glossary listing failed")
        return jsonify({'success': False, 'error': str(e)}), 500


@translate_api.route('/glossary/random', methods=['GET'])
def random_glosses():
    """Random glosses for "try a word" suggestions."""
    try:
        raw_count = request.args.get('count', str(DICTIONARY_CONFIG['random_sample_size']))
        try:
            count = int(raw_count)
        except ValueError:
            count = -1
        if count < 0:
            return jsonify({'success': False, 'error': 'count must be a non-negative integer'}), 400

        return jsonify({
            'success': True,
            'glosses': _translator().dictionary.random_sample(count),
        })
    except Exception as e:
        logger.exception("Random gloss sampling failed")
        return jsonify({'success': False, 'error': str(e)}), 500


@translate_api.route('/sign/<gloss>', methods=['GET'])
def get_sign(gloss):
    """Dictionary entry for a gloss."""
    try:
        resolved = _translator().resolver.resolve(gloss.upper())
        if resolved.is_unknown:
            return jsonify({
                'success': False,
                'error': 'Sign not found',
                'searchUrl': resolved.search_url,
            }), 404

        return jsonify({'success': True, 'sign': resolved.to_dict()})
    except Exception as e:
        logger.exception("Sign lookup failed")
        return jsonify({'success': False, 'error': str(e)}), 500


# ========== WEBSOCKET ==========

def register_socketio_handlers(socketio):
    """Register live-translation WebSocket events."""

    @socketio.on('translate')
    def handle_translate(data):
        sentence, error = _validate_sentence(data)
        if error:
            emit('translation_error', {'success': False, 'error': error})
            return

        try:
            payload = _translation_payload(sentence)
        except Exception as e:
            logger.exception("Live translation failed")
            emit('translation_error', {'success': False, 'error': str(e)})
            return

        emit('translation', payload)
