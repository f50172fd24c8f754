"""Thinking Service HTTP handler - sequential thinking tool endpoint.

This module provides the HTTP interface for the Thinking Service.
The coaching assistant calls /tools/sequentialthinking_tools once per
step, resending step number and context each time.

No raw user text is written to logs: thoughts are logged as a hash
and a length only.
"""
import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException

from solace.shared.models import (
    DEFAULT_THOUGHT_NUMBER,
    DEFAULT_TOTAL_THOUGHTS,
    ErrorResponse,
)
from solace.shared.utils import redacted_text_fields
from .config import ServiceConfig
from .dispatcher import StepDispatcher
from .errors import ProcessingFailure

logger = logging.getLogger(__name__)

TOOLS_ENDPOINT = "/tools/sequentialthinking_tools"

# Initialize Flask app
app = Flask(__name__)
CORS(app, send_wildcard=True)

config = ServiceConfig()
dispatcher = StepDispatcher()


@app.route("/", methods=["GET"])
def service_info():
    """Service banner listing the available endpoints."""
    return jsonify({
        "status": config.status_text,
        "version": config.version,
        "service": config.service_label,
        "endpoints": {
            "health": "/",
            "tools": TOOLS_ENDPOINT,
        },
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check endpoint for load balancers.

    Returns:
        200 with service status
    """
    return jsonify({
        "status": "healthy",
        "service": config.service_name,
        "version": config.version,
    }), 200


@app.route(TOOLS_ENDPOINT, methods=["POST"])
def sequential_thinking():
    """Run one step of the sequential thinking protocol.

    Request Body (all fields optional):
        {
            "thought": "Current thought text",
            "next_thought_needed": true,
            "thought_number": 1,
            "total_thoughts": 3,
            "context": {...},
            "user_message": "The user's own words"
        }

    Response:
        {
            "success": true,
            "thought_number": 1,
            "total_thoughts": 3,
            "next_thought_needed": true,
            "analysis": "STEP 1: SAFETY ASSESSMENT ...",
            "reasoning_step": "Step 1: Safety Assessment & Crisis Screening",
            "timestamp": "2026-01-14T10:00:00.000Z"
        }

    Error Handling:
        Generation failures return 500 with
        {"success": false, "error": "...", "thought_number": n}.
        A JSON body that cannot be parsed returns the generic 500 body.
    """
    try:
        data = _decode_body()
    except BadRequest as e:
        logger.error(
            "THINKING_BODY_UNPARSEABLE",
            extra={
                "error": str(e),
                "error_type": type(e).__name__,
                "content_length": request.content_length,
            }
        )
        return _internal_error_response()

    try:
        if isinstance(data, dict):
            logger.info(
                "THINKING_REQUEST_RECEIVED",
                extra={
                    "thought_number": data.get("thought_number", DEFAULT_THOUGHT_NUMBER),
                    "total_thoughts": data.get("total_thoughts", DEFAULT_TOTAL_THOUGHTS),
                    **redacted_text_fields("thought", data.get("thought", "")),
                }
            )

        response = dispatcher.dispatch_payload(data)
        return jsonify(response.to_dict()), 200

    except ProcessingFailure as e:
        logger.error(
            "THINKING_PROCESSING_FAILED",
            extra={
                "error": e.message,
                "error_type": type(e.__cause__ or e).__name__,
                "thought_number": e.thought_number,
            }
        )
        error = ErrorResponse(error=e.message, thought_number=e.thought_number)
        return jsonify(error.to_dict()), 500


def _decode_body():
    """Decode the request body into a JSON value.

    An absent or empty body, or one not sent as JSON, decodes to {}.

    Raises:
        BadRequest: If a JSON body is present but malformed
    """
    if not request.get_data(cache=True) or not request.is_json:
        return {}
    return request.get_json()


def _internal_error_response():
    """Generic 500 body for failures outside analysis generation."""
    return jsonify({
        "success": False,
        "error": "Internal server error",
        "message": "Sequential thinking processing failed",
    }), 500


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    """Convert anything unhandled into a generic 500 body."""
    if isinstance(e, HTTPException):
        return e

    logger.error(
        "UNHANDLED_SERVER_ERROR",
        extra={
            "error": str(e),
            "error_type": type(e).__name__,
        }
    )
    return _internal_error_response()


if __name__ == "__main__":
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    port = int(os.getenv("PORT", "3001"))
    logger.info(
        "THINKING_SERVICE_STARTING",
        extra={
            "port": port,
            "health_url": f"http://localhost:{port}/",
            "tools_url": f"http://localhost:{port}{TOOLS_ENDPOINT}",
        }
    )
    app.run(host="0.0.0.0", port=port, debug=False)
