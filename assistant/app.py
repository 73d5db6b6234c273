"""Flask application relaying student questions to Gemini."""

import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from .config import Settings
from .gemini import build_payload, call_gemini_api, redact
from .prompts import build_system_prompt

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Only POST requests are allowed"
MISSING_KEY_MESSAGE = "API key is not configured on the server."
ASSISTANT_ERROR_MESSAGE = "An error occurred while contacting the AI assistant."

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _json_message(message, status_code):
    return jsonify({"message": message}), status_code


def _is_cors_preflight():
    return (
        request.method == "OPTIONS"
        and "Origin" in request.headers
        and "Access-Control-Request-Method" in request.headers
    )


def create_app(settings=None, post=None):
    """
    Build the proxy app. The API key comes from `settings` rather than
    the process environment, so tests can pass their own key and HTTP
    callable.
    """
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__)
    # Relay the upstream JSON as-is, without reordering keys
    app.json.sort_keys = False

    origins = list(settings.cors_origins)
    CORS(app, resources={r"/api/*": {"origins": origins if origins != ["*"] else "*"}})

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return _json_message(METHOD_NOT_ALLOWED_MESSAGE, 405)

    # --- API Endpoint for the Equation Assistant ---
    @app.route('/api/assistant', methods=ROUTED_METHODS)
    def assistant():
        # flask-cors adds the Access-Control-* headers to this empty reply
        if _is_cors_preflight():
            return ('', 204)

        if request.method != 'POST':
            return _json_message(METHOD_NOT_ALLOWED_MESSAGE, 405)

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        question = data.get('question')
        language = data.get('language')
        logger.debug("Assistant request received (language=%r)", language)

        api_key = settings.api_key
        if not api_key:
            logger.error("GEMINI_API_KEY is not set; refusing to call Gemini")
            return _json_message(MISSING_KEY_MESSAGE, 500)

        payload = build_payload(question, build_system_prompt(language))

        try:
            result = call_gemini_api(api_key, settings.model, payload, post=post)
        except Exception as e:
            logger.error("Error while contacting Gemini: %s", redact(e, api_key))
            return _json_message(ASSISTANT_ERROR_MESSAGE, 500)

        # Return the Google API's response directly to the student's browser
        return jsonify(result), 200

    return app
