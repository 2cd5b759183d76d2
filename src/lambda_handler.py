"""
AWS Lambda Handler for the Uppercase Function

Two kinds of events reach this entry point:
- API Gateway (HTTP API v2 or REST API v1) requests, which apig-wsgi turns
  into WSGI calls on the Flask app
- direct invocations (console test events, `aws lambda invoke`, other
  functions), whose event is the payload itself: {"input": "..."}

Configure the function's handler as `lambda_handler.handler`.
"""

import sys
import os
import logging

# Add current directory to path (for imports)
sys.path.insert(0, os.path.dirname(__file__))

# Import Flask app
from app import app, LOG_LEVEL

# Import apig-wsgi (proper WSGI adapter for API Gateway)
from apig_wsgi import make_lambda_handler

from models import InvalidRequestError
from request_handler import handle_payload

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

# Wrap Flask app for API Gateway events
http_handler = make_lambda_handler(app)


def is_http_event(event):
    """
    Return True if event is an API Gateway / ALB request envelope.

    Matches on the nested requestContext shape rather than top-level keys,
    so a direct payload carrying e.g. a 'routeKey' field stays a payload:
    - HTTP API (v2): requestContext.http
    - REST API (v1): httpMethod alongside requestContext
    - ALB: requestContext.elb
    """
    if not isinstance(event, dict):
        return False

    request_context = event.get('requestContext')
    if not isinstance(request_context, dict):
        return False

    return 'http' in request_context or 'elb' in request_context or 'httpMethod' in event


def handler(event, context):
    """
    Lambda entry point.

    Args:
        event: API Gateway event, or a direct payload {"input": "..."}
        context: Lambda context object

    Returns:
        dict: API Gateway response for HTTP events, {"result": "..."}
            for direct invocations

    Raises:
        InvalidRequestError: If a direct invocation payload is invalid.
            The Lambda runtime reports it as a function error.
    """
    if is_http_event(event):
        return http_handler(event, context)

    request_id = getattr(context, 'aws_request_id', 'local')
    logger.debug(f"[{request_id}] Direct invocation")

    try:
        return handle_payload(event)
    except InvalidRequestError as e:
        logger.warning(f"[{request_id}] Rejected direct invocation: {e}")
        raise
