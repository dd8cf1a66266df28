"""
UI Helper Functions for Blueprint-Specific Assets and Navigation
================================================================

Each blueprint may ship its own CSS/JS; the active blueprint's assets are
injected into every template by the context processor in app.py, together
with the sidebar navigation state for the current path.
"""

from flask import request
from typing import Dict, List, Optional

from .data import get_sidebar_works


# Height of one submenu row; the expanded submenu is rows * this
SUBMENU_ITEM_HEIGHT = 35


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('works')
        ['css/works.css']
    """
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'pages': [
            'css/pages.css',
        ],
        'works': [
            'css/works.css',
        ],
        'auth': [
            'css/pages.css',
        ],
    }

    return blueprint_css_map.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """JavaScript files for a blueprint"""
    if not blueprint_name:
        return []

    blueprint_js_map = {
        'pages': [
            'js/contact-form.js',
        ],
        'works': [
            # image-dimensions.js publishes the promise dynamic-columns.js waits on
            'js/image-dimensions.js',
            'js/dynamic-columns.js',
        ],
    }

    return blueprint_js_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, List[str]]:
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the body of a page

    Example:
        >>> get_page_specific_class('works', 'detail')
        'page-works page-works-detail'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


def get_navigation_state(path: Optional[str]) -> Dict:
    """
    Sidebar state for the current path.

    The works submenu renders expanded, with no transition, whenever a work
    page is open; the browser only animates it after the visitor toggles it.
    """
    path = path or ''
    items = []
    for work in get_sidebar_works():
        items.append(dict(work, active=(path == work['href'])))

    return {
        'works': items,
        'works_expanded': path.startswith('/works/'),
        'works_active': path.startswith('/works'),
        'about_active': path == '/about',
        'contact_active': path == '/contact',
        'submenu_height': len(items) * SUBMENU_ITEM_HEIGHT,
    }
