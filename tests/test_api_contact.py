import time
from datetime import datetime, timedelta

from models import ContactSubmission
from utils import security


VALID_CONTACT = {
    'name': 'Jane Doe',
    'email': 'jane@example.com',
    'subject': 'Print sale',
    'message': 'I would love to buy a print of New Comer.',
}


def test_contact_creates_submission(client, db):
    response = client.post('/api/contact', json=VALID_CONTACT,
                           headers={'X-Forwarded-For': '203.0.113.7'})

    assert response.status_code == 201
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Thank you for your message! I will get back to you soon.'

    submission = db.session.get(ContactSubmission, body['id'])
    assert submission.name == 'Jane Doe'
    assert submission.subject == 'Print sale'
    assert submission.status == 'NEW'
    assert submission.ip_address == '203.0.113.7'


def test_contact_ip_falls_back_to_real_ip_header(client, db):
    response = client.post('/api/contact', json=VALID_CONTACT, headers={'X-Real-IP': '198.51.100.2'})
    submission = db.session.get(ContactSubmission, response.get_json()['id'])
    assert submission.ip_address == '198.51.100.2'


def test_contact_blank_subject_is_stored_as_null(client, db):
    response = client.post('/api/contact', json=dict(VALID_CONTACT, subject=''))
    submission = db.session.get(ContactSubmission, response.get_json()['id'])
    assert submission.subject is None


def test_contact_notifies_owner(client, no_notifications):
    client.post('/api/contact', json=VALID_CONTACT)
    assert len(no_notifications) == 1
    assert no_notifications[0].email == 'jane@example.com'


def test_contact_rejects_short_name(client, db):
    response = client.post('/api/contact', json=dict(VALID_CONTACT, name='J'))
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid form data. Please check your inputs.'}
    assert ContactSubmission.query.count() == 0


def test_contact_rejects_bad_email(client):
    response = client.post('/api/contact', json=dict(VALID_CONTACT, email='not-an-email'))
    assert response.status_code == 400


def test_contact_rejects_short_message(client):
    response = client.post('/api/contact', json=dict(VALID_CONTACT, message='Too short'))
    assert response.status_code == 400


def test_contact_rejects_non_json_body(client):
    response = client.post('/api/contact', data='name=Jane', content_type='application/x-www-form-urlencoded')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Invalid form data. Please check your inputs.'


def test_contact_honeypot_is_acknowledged_but_not_stored(client, db, no_notifications):
    response = client.post('/api/contact', json=dict(VALID_CONTACT, website='http://spam.example'))
    assert response.status_code == 201
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Thank you for your message! I will get back to you soon.'
    assert len(body['id']) == 36
    assert ContactSubmission.query.count() == 0
    assert no_notifications == []


def test_contact_rate_limit(app, client):
    app.config['RATE_LIMIT_ENABLED'] = True
    app.config['RATE_LIMIT_MAX_REQUESTS'] = 2

    statuses = [client.post('/api/contact', json=VALID_CONTACT).status_code for _ in range(3)]

    assert statuses == [201, 201, 429]


def test_rate_limit_forgets_idle_clients(app, client):
    app.config['RATE_LIMIT_ENABLED'] = True
    expired = time.time() - app.config['RATE_LIMIT_WINDOW'] - 1
    for i in range(20):
        security.RATE_LIMIT_REQUESTS[f'10.0.0.{i}'] = [(expired, 'contact')]

    response = client.post('/api/contact', json=VALID_CONTACT,
                           headers={'X-Forwarded-For': '10.0.1.1'})

    assert response.status_code == 201
    assert list(security.RATE_LIMIT_REQUESTS) == ['10.0.1.1']


def test_listing_requires_admin(client):
    response = client.get('/api/contact')
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Authentication required'}


def test_listing_returns_newest_first(admin_client, db):
    now = datetime.utcnow()
    for offset, name in enumerate(['Oldest', 'Middle', 'Newest']):
        db.session.add(ContactSubmission(
            name=name, email='a@example.com', message='Hello there, friend.',
            created_at=now + timedelta(minutes=offset)))
    db.session.commit()

    response = admin_client.get('/api/contact')

    assert response.status_code == 200
    assert [s['name'] for s in response.get_json()] == ['Newest', 'Middle', 'Oldest']
    assert response.get_json()[0]['status'] == 'NEW'


def test_listing_is_capped_at_fifty(admin_client, db):
    now = datetime.utcnow()
    for i in range(55):
        db.session.add(ContactSubmission(
            name=f'Person {i}', email='a@example.com', message='Hello there, friend.',
            created_at=now + timedelta(seconds=i)))
    db.session.commit()

    submissions = admin_client.get('/api/contact').get_json()

    assert len(submissions) == 50
    assert submissions[0]['name'] == 'Person 54'
