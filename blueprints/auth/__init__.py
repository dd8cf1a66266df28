"""
Auth Blueprint - Site owner authentication
Handles: Admin login and logout
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/admin')

from . import routes
