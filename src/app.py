"""
Uppercase Function Flask Application

WSGI front for the uppercase function. On AWS Lambda it is wrapped by
apig-wsgi (see lambda_handler.py) behind an API Gateway trigger; locally it
runs on the Flask development server.

Routes:
- POST /api/uppercase   {"input": "..."} -> {"result": "..."}
- POST /                same as above, for gateways mapped to the root
- GET  /api/health      liveness check
"""

import os
import logging
from flask import Flask, request, jsonify
from flask_cors import CORS

from models import InvalidRequestError
from request_handler import handle_payload

# --- Configuration ---
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVEL = os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
# Unknown level names fall back to INFO
LOG_LEVEL_VALID = isinstance(logging.getLevelName(LOG_LEVEL), int)
if not LOG_LEVEL_VALID:
    LOG_LEVEL = DEFAULT_LOG_LEVEL

CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()] or ['*']

app = Flask(__name__)
app.logger.setLevel(LOG_LEVEL)

if not LOG_LEVEL_VALID:
    app.logger.warning(f"Unknown LOG_LEVEL {os.environ.get('LOG_LEVEL')!r}, using {DEFAULT_LOG_LEVEL}")

# CORS (allow browser clients)
CORS(app, origins=CORS_ORIGINS)


# --- Invocation Routes ---

@app.route('/', methods=['POST'])
@app.route('/api/uppercase', methods=['POST'])
def uppercase():
    """
    Convert the request's input field to uppercase.

    Request body:
        {
            "input": "Welcome to happy land!"
        }

    Returns:
        200: {"result": "WELCOME TO HAPPY LAND!"}
        400: {"error": "Missing input field"}
    """
    # silent=True: malformed JSON or a wrong content type comes back as None
    # and is rejected by the request validation below
    data = request.get_json(silent=True)

    try:
        return jsonify(handle_payload(data)), 200
    except InvalidRequestError:
        raise
    except Exception as e:
        app.logger.exception(f"Uppercase invocation failed: {e}")
        return jsonify({"error": "Internal server error"}), 500


@app.route('/api/health', methods=['GET'])
def health():
    """Simple health check for the gateway and smoke tests."""
    return jsonify({"status": "ok"}), 200


# --- Error Handlers ---

@app.errorhandler(InvalidRequestError)
def invalid_request(e):
    app.logger.warning(f"Rejected invocation: {e}")
    return jsonify({"error": str(e)}), 400


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "Endpoint not found"}), 404


@app.errorhandler(405)
def method_not_allowed(e):
    return jsonify({"error": "Method not allowed"}), 405


@app.errorhandler(500)
def internal_error(e):
    app.logger.error(f"Internal error: {e}")
    return jsonify({"error": "Internal server error"}), 500


# --- Local Development ---

if __name__ == '__main__':
    # For local testing only
    print("WARNING: Running Flask development server. NOT for production use.")
    print("Use Lambda for production.")
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', '8000')), debug=True)
