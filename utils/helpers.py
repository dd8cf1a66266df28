"""
Helpers Module - Utility functions shared by the API routes
"""

from flask import request


def load_json_body():
    """
    Parse the request body as a JSON object.

    Returns:
        dict or None: the decoded object, or None when the body is missing,
        malformed, or not a JSON object
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return None
    return body


def is_honeypot_filled(body):
    """Bots fill the hidden 'website' field; people never see it"""
    return bool(body and str(body.get('website') or '').strip())


def blank_to_none(value):
    """Collapse empty optional strings to None before storing them"""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def truncate(text, limit):
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"
