import logging
import traceback
from typing import Any, Dict, List

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException

from post_search import __version__
from post_search.config.config import Config
from post_search.core.chat_context import build_posts_context
from post_search.core.keywords import extract_keywords
from post_search.core.search import semantic_search

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
)
logger = logging.getLogger(__name__)


def _json_body() -> Dict[str, Any]:
    """Request JSON object, or a 400 when the body is not one"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest('Request body must be a JSON object')
    return data


def _posts_from(data: Dict[str, Any]) -> List[Any]:
    posts = data.get('posts', [])
    if not isinstance(posts, list):
        raise BadRequest("'posts' must be a list")
    return posts


def _query_from(data: Dict[str, Any], key: str) -> str:
    value = data.get(key) or ''
    if not isinstance(value, str):
        raise BadRequest(f"'{key}' must be a string")
    return value


def _limit_from(data: Dict[str, Any], default: int) -> int:
    limit = data.get('limit', default)
    if limit is None:
        return default
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise BadRequest("'limit' must be a non-negative integer")
    return limit


def create_app() -> Flask:
    """Create the search API app"""
    app = Flask(__name__)
    app.config.update(
        MAX_CONTENT_LENGTH=Config.MAX_CONTENT_LENGTH_MB * 1024 * 1024,
    )

    # Called from the web client on another origin
    CORS(app)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.error(f"❌ Unhandled error: {e}")
        logger.error(traceback.format_exc())
        return jsonify({'error': str(e)}), 500

    @app.route('/api/health')
    def health():
        """Liveness check"""
        return jsonify({'status': 'ok', 'version': __version__})

    @app.route('/api/search', methods=['POST'])
    def search_posts():
        """Rank the posted candidates against a query"""
        data = _json_body()
        query = _query_from(data, 'query')
        posts = _posts_from(data)
        limit = _limit_from(data, Config.SEARCH_DEFAULT_LIMIT)

        categories = data.get('categories') or None
        if categories is not None and (
                not isinstance(categories, list)
                or not all(isinstance(c, str) for c in categories)):
            raise BadRequest("'categories' must be a list of strings")

        logger.info(f"🔍 Searching {len(posts)} posts for: '{query}'")
        results = semantic_search.search(posts, query, categories=categories, limit=limit)

        return jsonify({
            'query': query,
            'patterns': semantic_search.create_search_patterns(query),
            'results': results,
            'total': len(results),
        })

    @app.route('/api/search/patterns')
    def search_patterns():
        """Show how a query is expanded"""
        query = request.args.get('q', '')
        return jsonify({
            'query': query,
            'keywords': extract_keywords(query),
            'patterns': semantic_search.create_search_patterns(query),
        })

    @app.route('/api/search/explain', methods=['POST'])
    def explain_score():
        """Per-field score breakdown for a single post"""
        data = _json_body()
        query = _query_from(data, 'query')
        post = data.get('post')
        if not isinstance(post, dict):
            raise BadRequest("'post' must be a JSON object")

        patterns = semantic_search.create_search_patterns(query)
        breakdown = semantic_search.scorer.explain(post, patterns)
        return jsonify({
            'query': query,
            'patterns': patterns,
            'breakdown': breakdown,
            'score': sum(breakdown.values()),
        })

    @app.route('/api/chat/context', methods=['POST'])
    def chat_context():
        """Select and format the posts the chat model should see"""
        data = _json_body()
        question = _query_from(data, 'question')
        if not question.strip():
            raise BadRequest('Question is required')
        posts = _posts_from(data)
        limit = _limit_from(data, Config.SEARCH_CONTEXT_LIMIT)

        context, sources = build_posts_context(posts, question, limit=limit)
        return jsonify({'context': context, 'sources': sources})

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Starting search API on {Config.HOST}:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
