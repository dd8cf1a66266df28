"""
API Blueprint - JSON form submission endpoints
Handles: Contact messages, newsletter subscriptions, event RSVPs
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
