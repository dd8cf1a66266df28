"""
API Routes - Form submissions stored in the database
Contact messages are created, newsletter subscriptions and RSVPs are upserted.
"""

import uuid
from datetime import datetime
from flask import request, jsonify, current_app
from pydantic import ValidationError
from sqlalchemy import func
from extensions import db
from models import ContactSubmission, NewsletterSubscription, EventRSVP
from utils.decorators import admin_required, rate_limited
from utils.helpers import load_json_body, is_honeypot_filled, blank_to_none
from utils.notifications import notify_contact_submission
from utils.security import get_client_ip
from utils.validation import ContactForm, NewsletterForm, UnsubscribeForm, RSVPForm
from . import api_bp


CONTACT_SUCCESS = 'Thank you for your message! I will get back to you soon.'
CONTACT_INVALID = 'Invalid form data. Please check your inputs.'
NEWSLETTER_SUCCESS = 'Successfully subscribed to newsletter!'
NEWSLETTER_INVALID = 'Invalid email address.'
RSVP_SUCCESS = 'RSVP submitted successfully!'
RSVP_INVALID = 'Invalid form data. Please check your inputs.'


def _validation_failed(form, error, message):
    current_app.logger.info(f"{form} form rejected: {error.error_count()} invalid field(s)")
    return jsonify({'error': message}), 400


# ========== CONTACT ========== #

@api_bp.route('/contact', methods=['POST'])
@rate_limited('contact')
def submit_contact():
    """Store a contact form message and alert the site owner"""
    body = load_json_body()
    if body is None:
        return jsonify({'error': CONTACT_INVALID}), 400

    if is_honeypot_filled(body):
        current_app.logger.info(f"Contact honeypot triggered from {get_client_ip()}")
        return jsonify({'success': True, 'message': CONTACT_SUCCESS, 'id': str(uuid.uuid4())}), 201

    try:
        validated = ContactForm.model_validate(body)
    except ValidationError as e:
        return _validation_failed('Contact', e, CONTACT_INVALID)

    try:
        submission = ContactSubmission(
            name=validated.name,
            email=validated.email,
            subject=blank_to_none(validated.subject),
            message=validated.message,
            ip_address=get_client_ip(),
            status='NEW'
        )
        db.session.add(submission)
        db.session.commit()

        current_app.logger.info(f"Contact submission saved, submission_id: {submission.id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Contact form error: {str(e)}")
        return jsonify({'error': 'Failed to submit contact form. Please try again.'}), 500

    notify_contact_submission(submission)

    return jsonify({
        'success': True,
        'message': CONTACT_SUCCESS,
        'id': submission.id
    }), 201


@api_bp.route('/contact', methods=['GET'])
@admin_required
def list_contact_submissions():
    """Most recent contact submissions, newest first"""
    try:
        limit = current_app.config.get('CONTACT_LIST_LIMIT', 50)
        submissions = (ContactSubmission.query
                       .order_by(ContactSubmission.created_at.desc())
                       .limit(limit)
                       .all())
        return jsonify([s.to_dict() for s in submissions])
    except Exception as e:
        current_app.logger.error(f"Error fetching submissions: {str(e)}")
        return jsonify({'error': 'Failed to fetch submissions'}), 500


# ========== NEWSLETTER ========== #

@api_bp.route('/newsletter', methods=['POST'])
@rate_limited('newsletter')
def subscribe_newsletter():
    """Subscribe an address, re-activating it if it unsubscribed before"""
    body = load_json_body()
    if body is None:
        return jsonify({'error': NEWSLETTER_INVALID}), 400

    if is_honeypot_filled(body):
        return jsonify({'success': True, 'message': NEWSLETTER_SUCCESS, 'id': str(uuid.uuid4())}), 201

    try:
        validated = NewsletterForm.model_validate(body)
    except ValidationError as e:
        return _validation_failed('Newsletter', e, NEWSLETTER_INVALID)

    try:
        subscription = NewsletterSubscription.query.filter_by(email=validated.email).first()
        if subscription:
            subscription.is_active = True
            subscription.preferences = validated.preferences
            subscription.name = blank_to_none(validated.name)
        else:
            subscription = NewsletterSubscription(
                email=validated.email,
                name=blank_to_none(validated.name),
                preferences=validated.preferences,
                is_active=True
            )
            db.session.add(subscription)
        db.session.commit()

        current_app.logger.info(f"Newsletter subscription saved, subscription_id: {subscription.id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Newsletter error: {str(e)}")
        return jsonify({'error': 'Failed to subscribe. Please try again.'}), 500

    return jsonify({
        'success': True,
        'message': NEWSLETTER_SUCCESS,
        'id': subscription.id
    }), 201


@api_bp.route('/newsletter', methods=['DELETE'])
@rate_limited('newsletter')
def unsubscribe_newsletter():
    """Deactivate a subscription, keeping the row and the reason given"""
    body = load_json_body() or {}

    try:
        validated = UnsubscribeForm.model_validate(body)
    except ValidationError:
        validated = None

    if not validated or not (validated.email or '').strip():
        return jsonify({'error': 'Email is required'}), 400

    try:
        subscription = NewsletterSubscription.query.filter_by(email=validated.email.strip()).first()
        if not subscription:
            return jsonify({'error': 'Subscription not found'}), 404

        subscription.is_active = False
        subscription.unsubscribed_at = datetime.utcnow()
        subscription.unsubscribe_reason = blank_to_none(validated.reason)
        db.session.commit()

        current_app.logger.info(f"Newsletter unsubscribe, subscription_id: {subscription.id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Unsubscribe error: {str(e)}")
        return jsonify({'error': 'Failed to unsubscribe'}), 500

    return jsonify({
        'success': True,
        'message': 'Successfully unsubscribed'
    })


# ========== RSVP ========== #

@api_bp.route('/rsvp', methods=['POST'])
@rate_limited('rsvp')
def submit_rsvp():
    """Create or replace the RSVP for an (event, email) pair"""
    body = load_json_body()
    if body is None:
        return jsonify({'error': RSVP_INVALID}), 400

    if is_honeypot_filled(body):
        return jsonify({'success': True, 'message': RSVP_SUCCESS, 'id': str(uuid.uuid4())}), 201

    try:
        validated = RSVPForm.model_validate(body)
    except ValidationError as e:
        return _validation_failed('RSVP', e, RSVP_INVALID)

    fields = {
        'name': validated.name,
        'phone': blank_to_none(validated.phone),
        'guest_count': validated.guest_count,
        'attending': validated.attending,
        'dietary_restrictions': blank_to_none(validated.dietary_restrictions),
        'message': blank_to_none(validated.message),
    }

    try:
        rsvp = EventRSVP.query.filter_by(event_id=validated.event_id, email=validated.email).first()
        if rsvp:
            for key, value in fields.items():
                setattr(rsvp, key, value)
        else:
            rsvp = EventRSVP(event_id=validated.event_id, email=validated.email, **fields)
            db.session.add(rsvp)
        db.session.commit()

        current_app.logger.info(f"RSVP saved for event {validated.event_id}, rsvp_id: {rsvp.id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"RSVP error: {str(e)}")
        return jsonify({'error': 'Failed to submit RSVP. Please try again.'}), 500

    return jsonify({
        'success': True,
        'message': RSVP_SUCCESS,
        'id': rsvp.id
    }), 201


@api_bp.route('/rsvp', methods=['GET'])
def rsvp_summary():
    """Attending RSVP count and total guests for an event"""
    event_id = request.args.get('eventId')
    if not event_id:
        return jsonify({'error': 'eventId parameter is required'}), 400

    try:
        attending_count, total_guests = (
            db.session.query(
                func.count(EventRSVP.id),
                func.coalesce(func.sum(EventRSVP.guest_count), 0)
            )
            .filter(EventRSVP.event_id == event_id, EventRSVP.attending == 'YES')
            .one()
        )
    except Exception as e:
        current_app.logger.error(f"Error fetching RSVP count: {str(e)}")
        return jsonify({'error': 'Failed to fetch RSVP count'}), 500

    return jsonify({
        'attendingCount': int(attending_count),
        'totalGuests': int(total_guests)
    })
