"""
BSL Translation Service
Serves the English -> BSL gloss translator to the web frontend.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO

from signbsl import __version__
from signbsl.api import register_socketio_handlers, translate_api
from signbsl.shared.config import API_CONFIG, LOGGING
from signbsl.translator import BSLTranslator

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=LOGGING['level'],
        format=LOGGING['format'],
        datefmt=LOGGING['date_format'],
    )


def create_app(dictionary=None):
    """
    Build the Flask app.

    Args:
        dictionary: Sign dictionary for the translator. If None, the
            default (configured database or bundled vocabulary) is loaded.
    """
    app = Flask(__name__)
    app.config['SECRET_KEY'] = API_CONFIG['secret_key']

    # Dictionary is loaded once here and shared read-only by all requests
    app.config['TRANSLATOR'] = BSLTranslator(dictionary)
    logger.info("✓ Sign dictionary loaded (%d signs)", app.config['TRANSLATOR'].dictionary.count())

    # CORS - allow the frontend to call us
    CORS(app, resources={r"/*": {"origins": API_CONFIG['cors_origins']}})

    app.register_blueprint(translate_api, url_prefix='/bsl')

    # Initialize SocketIO (available as app.extensions["socketio"])
    socketio = SocketIO(app, cors_allowed_origins="*")
    register_socketio_handlers(socketio)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        """Health check for monitoring"""
        return jsonify({
            'status': 'healthy',
            'service': 'bsl-translator',
            'version': __version__
        })

    # Status endpoint
    @app.route('/status', methods=['GET'])
    def status():
        """Detailed status"""
        return jsonify({
            'status': 'operational',
            'service': 'bsl-translator',
            'signs': app.config['TRANSLATOR'].dictionary.count(),
            'endpoints': {
                'translate': '/bsl/translate',
                'glossary': '/bsl/glossary',
                'health': '/health'
            }
        })

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


def main():
    configure_logging()
    app = create_app()
    port = API_CONFIG['port']

    logger.info("=" * 60)
    logger.info("Starting BSL Translation Service")
    logger.info("=" * 60)
    logger.info(f"Port: {port}")
    logger.info("Endpoints:")
    logger.info(f"  Health:    http://localhost:{port}/health")
    logger.info(f"  Translate: http://localhost:{port}/bsl/translate")
    logger.info(f"  Glossary:  http://localhost:{port}/bsl/glossary")
    logger.info("=" * 60)

    app.extensions["socketio"].run(
        app,
        host='0.0.0.0',
        port=port,
        debug=API_CONFIG['debug'],
        allow_unsafe_werkzeug=True
    )


if __name__ == '__main__':
    main()
