"""
Security Module - Client IP resolution, rate limiting and admin credentials
"""

import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
RATE_LIMIT_MAX_REQUESTS = 10  # Max 10 requests
RATE_LIMIT_WINDOW = 60  # Per 60 seconds


def get_client_ip():
    """Get real client IP address, preferring proxy headers"""
    return (request.headers.get('X-Forwarded-For')
            or request.headers.get('X-Real-IP')
            or request.remote_addr
            or 'unknown')


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    if not current_app.config.get('RATE_LIMIT_ENABLED', True):
        return True

    max_requests = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', RATE_LIMIT_MAX_REQUESTS)
    window = current_app.config.get('RATE_LIMIT_WINDOW', RATE_LIMIT_WINDOW)
    client_ip = get_client_ip()
    current_time = time.time()

    # Clean old requests outside the window; IPs left with none are dropped
    for ip in list(RATE_LIMIT_REQUESTS):
        recent = [(ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip] if current_time - ts < window]
        if recent:
            RATE_LIMIT_REQUESTS[ip] = recent
        else:
            del RATE_LIMIT_REQUESTS[ip]

    # Check if limit exceeded
    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS.get(client_ip, []) if ep == endpoint
    ]
    if len(endpoint_requests) >= max_requests:
        current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
        return False

    # Add current request
    RATE_LIMIT_REQUESTS.setdefault(client_ip, []).append((current_time, endpoint))
    return True


def reset_rate_limits():
    RATE_LIMIT_REQUESTS.clear()


def get_admin_credentials():
    """Load admin credentials from app configuration safely"""
    username = current_app.config.get('ADMIN_USERNAME')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not username or not password:
        return {'username': None, 'password_hash': None}
    return {
        'username': username,
        'password_hash': generate_password_hash(password)
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',
    'get_admin_credentials',
    'verify_password',
]
