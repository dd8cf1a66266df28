import pytest
from pydantic import ValidationError

from models import ContactSubmission
from utils import notifications
from utils.data import get_work, get_work_images, get_sidebar_works
from utils.helpers import blank_to_none, is_honeypot_filled, truncate
from utils.ui_helpers import get_navigation_state, get_page_specific_class
from utils.validation import ContactForm, RSVPForm, is_valid_email


class ImmediateThread:
    """Runs the target inline so tests can observe its effects"""

    def __init__(self, target, args=(), daemon=None):
        self.target = target
        self.args = args

    def start(self):
        self.target(*self.args)


class TestValidation:
    @pytest.mark.parametrize('address', ['jane@example.com', "o'neil+work@mail.example.org"])
    def test_accepts_valid_addresses(self, address):
        assert is_valid_email(address)

    @pytest.mark.parametrize('address', ['', 'jane', 'jane@example', '.jane@example.com', 'ja..ne@example.com'])
    def test_rejects_invalid_addresses(self, address):
        assert not is_valid_email(address)

    def test_contact_email_is_trimmed(self):
        form = ContactForm(name='Jane', email='  jane@example.com ', message='Hello there, friend.')
        assert form.email == 'jane@example.com'

    def test_rsvp_reads_camel_case_fields(self):
        form = RSVPForm.model_validate({
            'eventId': 'opening', 'name': 'Sam', 'email': 'sam@example.com',
            'guestCount': 3, 'attending': 'NO', 'dietaryRestrictions': 'None'
        })
        assert form.event_id == 'opening'
        assert form.guest_count == 3
        assert form.dietary_restrictions == 'None'

    def test_rsvp_rejects_fractional_guest_count(self):
        with pytest.raises(ValidationError):
            RSVPForm.model_validate({
                'eventId': 'opening', 'name': 'Sam', 'email': 'sam@example.com',
                'guestCount': 2.5, 'attending': 'YES'
            })


class TestHelpers:
    def test_blank_to_none(self):
        assert blank_to_none('') is None
        assert blank_to_none('   ') is None
        assert blank_to_none(None) is None
        assert blank_to_none('kept') == 'kept'

    def test_honeypot(self):
        assert is_honeypot_filled({'website': 'http://spam.example'})
        assert not is_honeypot_filled({'website': ''})
        assert not is_honeypot_filled({})

    def test_truncate(self):
        assert truncate('abcdef', 3) == 'abc...'
        assert truncate('abc', 3) == 'abc'


class TestNavigation:
    def test_work_path_expands_submenu(self):
        state = get_navigation_state('/works/project-five')
        assert state['works_expanded'] is True
        assert state['works_active'] is True
        assert state['submenu_height'] == 70
        assert [w['active'] for w in state['works']] == [False, True]

    def test_works_index_is_active_but_collapsed(self):
        state = get_navigation_state('/works')
        assert state['works_active'] is True
        assert state['works_expanded'] is False

    def test_about_path(self):
        state = get_navigation_state('/about')
        assert state['about_active'] is True
        assert state['works_expanded'] is False

    def test_sidebar_only_lists_published_works(self):
        assert [w['slug'] for w in get_sidebar_works()] == ['starry-night-2025', 'project-five']

    def test_page_class(self):
        assert get_page_specific_class('works', 'detail') == 'page-works page-works-detail'
        assert get_page_specific_class(None) == 'page-default'


class TestWorkData:
    def test_unknown_work(self):
        assert get_work('project-one') is None

    def test_work_images_resolve_urls(self, app):
        with app.test_request_context():
            images = get_work_images(get_work('project-five'))
            remote = get_work_images(get_work('starry-night-2025'))

        assert images[0]['url'] == '/static/images/test-image.jpg'
        assert remote[0]['url'].endswith('/starrynight-2025-10-16/DSCF5995-Edit-720w.webp')
        assert remote[0]['alt'] == 'Starry Night DSCF5995-Edit'


class TestNotifications:
    def test_nothing_sent_without_credentials(self, app):
        with app.app_context():
            assert notifications.send_admin_notification('Subject', 'Body') == []

    def test_telegram_notification(self, app, monkeypatch):
        app.config['ADMIN_TELEGRAM_BOT_TOKEN'] = 'token'
        app.config['ADMIN_TELEGRAM_CHAT_ID'] = '42'
        calls = []

        class Response:
            status_code = 200

        def fake_post(url, json=None, timeout=None):
            calls.append((url, json))
            return Response()

        monkeypatch.setattr(notifications.threading, 'Thread', ImmediateThread)
        monkeypatch.setattr(notifications.requests, 'post', fake_post)

        with app.app_context():
            submission = ContactSubmission(name='Jane', email='jane@example.com',
                                           subject=None, message='x' * 400)
            assert notifications.notify_contact_submission(submission) == ['telegram']

        url, payload = calls[0]
        assert url == 'https://api.telegram.org/bottoken/sendMessage'
        assert payload['chat_id'] == '42'
        assert 'New Contact Message' in payload['text']
        assert 'x' * 300 + '...' in payload['text']
