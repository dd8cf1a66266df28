"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import admin_required, rate_limited
from .data import (
    get_work,
    get_work_slugs,
    get_sidebar_works,
    get_works_grid,
    get_work_images,
    media_url
)
from .helpers import load_json_body, is_honeypot_filled, blank_to_none, truncate
from .layout import columnize, group_paragraphs, TextMeasurer
from .notifications import send_admin_notification, notify_contact_submission
from .security import (
    get_client_ip,
    check_rate_limit,
    reset_rate_limits,
    get_admin_credentials,
    verify_password
)
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class,
    get_navigation_state
)
from .validation import ContactForm, NewsletterForm, UnsubscribeForm, RSVPForm

__all__ = [
    # Decorators
    'admin_required',
    'rate_limited',

    # Data
    'get_work',
    'get_work_slugs',
    'get_sidebar_works',
    'get_works_grid',
    'get_work_images',
    'media_url',

    # Helpers
    'load_json_body',
    'is_honeypot_filled',
    'blank_to_none',
    'truncate',

    # Layout
    'columnize',
    'group_paragraphs',
    'TextMeasurer',

    # Notifications
    'send_admin_notification',
    'notify_contact_submission',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',
    'get_admin_credentials',
    'verify_password',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class',
    'get_navigation_state',

    # Validation
    'ContactForm',
    'NewsletterForm',
    'UnsubscribeForm',
    'RSVPForm'
]
