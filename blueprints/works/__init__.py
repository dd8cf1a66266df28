"""
Works Blueprint - Photography works
Handles: Works index grid and individual work pages
"""

from flask import Blueprint

works_bp = Blueprint('works', __name__, url_prefix='/works')

from . import routes
