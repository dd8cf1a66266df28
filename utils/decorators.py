"""
Decorators Module - Authorization and rate limiting decorators
"""

from functools import wraps
from flask import session, jsonify


def admin_required(f):
    """Decorator to require an admin session on API routes"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get('is_admin'):
            return jsonify({'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function


def rate_limited(endpoint):
    """Decorator answering 429 once the caller exceeds the endpoint's rate limit"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from .security import check_rate_limit

            if not check_rate_limit(endpoint):
                return jsonify({'error': 'Too many requests. Please try again later.'}), 429
            return f(*args, **kwargs)
        return decorated_function
    return decorator
