"""
Pages Blueprint - Public static pages
Handles: Home, About, Contact, sitemap and robots
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
