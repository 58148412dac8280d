"""
Security hardening module.

Provides rate limiting, input sanitization, security headers and caller
identification for the JSON API.
"""

import re
from functools import wraps
from typing import Any

from flask import g, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


# Initialize extensions at module level
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"]
)


def add_security_headers(response):
    """
    Add security headers to response.
    This is a standalone function that can be used as an after_request handler.
    """
    # API responses never load scripts, styles or frames
    response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"

    # Prevent MIME type sniffing
    response.headers['X-Content-Type-Options'] = 'nosniff'

    # Prevent clickjacking
    response.headers['X-Frame-Options'] = 'DENY'

    # Referrer policy
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

    # Will data is personal; keep it out of shared caches
    response.headers['Cache-Control'] = 'no-store'

    return response


def init_security(app):
    """Initialize security extensions with the app."""
    limiter.init_app(app)
    app.after_request(add_security_headers)


# Rate limit configurations
RATE_LIMITS = {
    'generate': "10 per hour",
    'validate': "60 per hour",
    'read': "120 per minute",
}


def rate_limit_generate():
    """Decorator for generation endpoint rate limiting."""
    return limiter.limit(RATE_LIMITS['generate'])


def rate_limit_validate():
    """Decorator for validation endpoint rate limiting."""
    return limiter.limit(RATE_LIMITS['validate'])


def rate_limit_read():
    """Decorator for read endpoint rate limiting."""
    return limiter.limit(RATE_LIMITS['read'])


# Input sanitization
HTML_TAG_PATTERN = re.compile(r'<[^>]+>')
SCRIPT_PATTERN = re.compile(r'<script[^>]*>.*?</script>', re.DOTALL | re.IGNORECASE)
EVENT_HANDLER_PATTERN = re.compile(r'on\w+\s*=', re.IGNORECASE)


def sanitize_string(value: str, max_length: int = 10000) -> str:
    """
    Sanitize a string value for safe storage and display.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if value is None:
        return ''

    if not isinstance(value, str):
        value = str(value)

    # Remove script tags
    value = SCRIPT_PATTERN.sub('', value)

    # Remove event handlers
    value = EVENT_HANDLER_PATTERN.sub('', value)

    # Remove all HTML tags
    value = HTML_TAG_PATTERN.sub('', value)

    # Limit length
    value = value[:max_length]

    return value.strip()


def sanitize_payload(payload: Any) -> Any:
    """
    Recursively sanitize all string values in a payload.

    Args:
        payload: Dictionary, list or scalar to sanitize

    Returns:
        Sanitized copy
    """
    if isinstance(payload, dict):
        return {k: sanitize_payload(v) for k, v in payload.items()}
    elif isinstance(payload, list):
        return [sanitize_payload(item) for item in payload]
    elif isinstance(payload, str):
        return sanitize_string(payload)
    else:
        return payload


# Caller identity
USER_ID_HEADER = 'X-User-Id'
USER_ID_PATTERN = re.compile(r'^[A-Za-z0-9_.@:-]{1,100}$')


def get_user_id() -> str:
    """User id of the current request, or '' if absent or malformed."""
    user_id = request.headers.get(USER_ID_HEADER, '').strip()
    if not USER_ID_PATTERN.match(user_id):
        return ''
    return user_id


def user_required(f):
    """Decorator requiring an X-User-Id header; the id is stored on g.user_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user_id = get_user_id()
        if not user_id:
            return jsonify({
                'ok': False,
                'error': f'Missing or invalid {USER_ID_HEADER} header',
                'code': 'unauthorized'
            }), 401
        g.user_id = user_id
        return f(*args, **kwargs)
    return decorated_function


def get_client_ip() -> str:
    """Get the client IP address, handling proxies."""
    # Check for forwarded header (if behind proxy)
    forwarded_for = request.headers.get('X-Forwarded-For')
    if forwarded_for:
        # Get first IP in chain
        return forwarded_for.split(',')[0].strip()

    # Check for real IP header
    real_ip = request.headers.get('X-Real-Ip')
    if real_ip:
        return real_ip

    # Fall back to remote address
    return request.remote_addr or 'unknown'

