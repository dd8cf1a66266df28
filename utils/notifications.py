"""
Notifications Module - Telegram and email alerts to the site owner
"""

import smtplib
import requests
import threading
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app
from .helpers import truncate


def get_admin_notifications_config():
    """Load admin notification settings from the app configuration"""
    return {
        'telegram': {
            'bot_token': current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN') or '',
            'chat_id': current_app.config.get('ADMIN_TELEGRAM_CHAT_ID') or ''
        },
        'smtp': {
            'host': current_app.config.get('ADMIN_SMTP_HOST') or '',
            'port': current_app.config.get('ADMIN_SMTP_PORT') or '587',
            'email': current_app.config.get('ADMIN_SMTP_EMAIL') or '',
            'password': current_app.config.get('ADMIN_SMTP_PASSWORD') or '',
            'recipient': current_app.config.get('ADMIN_RECIPIENT_EMAIL') or ''
        }
    }


def _post_telegram(url, payload, logger):
    try:
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            logger.info("Admin Telegram notification sent")
        else:
            logger.error(f"Telegram API error: {response.status_code}")
    except requests.RequestException as e:
        logger.error(f"Admin Telegram Error: {str(e)}")


def _send_smtp(smtp_cfg, msg, logger):
    try:
        with smtplib.SMTP(smtp_cfg['host'], int(smtp_cfg.get('port') or 587)) as server:
            server.starttls()
            server.login(smtp_cfg['email'], smtp_cfg['password'])
            server.send_message(msg)
        logger.info("Admin SMTP notification sent")
    except (smtplib.SMTPException, OSError, ValueError) as e:
        logger.error(f"Admin SMTP send error: {str(e)}")


def send_admin_notification(subject, message_text, html_body=None):
    """
    Send notification to the site owner via Telegram and SMTP

    Each channel is used only when its credentials are configured. Delivery
    runs on background threads so a slow provider never delays a response.

    Args:
        subject (str): Notification subject
        message_text (str): Notification message
        html_body (str, optional): HTML version of the message

    Returns:
        list: names of the channels a send was started on
    """
    config = get_admin_notifications_config()
    # Threads outlive the app context, so hand them the concrete logger
    logger = current_app.logger
    started = []

    tg_token = config['telegram']['bot_token']
    tg_chat = config['telegram']['chat_id']
    if tg_token and tg_chat:
        url = f"https://api.telegram.org/bot{tg_token}/sendMessage"
        payload = {
            'chat_id': tg_chat,
            'text': f"📌 <b>{subject}</b>\n\n{message_text}",
            'parse_mode': 'HTML'
        }
        threading.Thread(target=_post_telegram, args=(url, payload, logger), daemon=True).start()
        started.append('telegram')
    else:
        logger.debug("Admin Telegram credentials not configured")

    smtp_cfg = config['smtp']
    if all([smtp_cfg.get('host'), smtp_cfg.get('email'), smtp_cfg.get('password')]):
        msg = MIMEMultipart('alternative')
        msg['Subject'] = f"[Portfolio] {subject}"
        msg['From'] = smtp_cfg['email']
        msg['To'] = smtp_cfg.get('recipient') or smtp_cfg['email']

        msg.attach(MIMEText(message_text, 'plain'))
        if html_body:
            msg.attach(MIMEText(html_body, 'html'))

        threading.Thread(target=_send_smtp, args=(smtp_cfg, msg, logger), daemon=True).start()
        started.append('smtp')
    else:
        logger.debug("Admin SMTP credentials not configured")

    return started


def notify_contact_submission(submission):
    """Alert the site owner about a new contact form message"""
    lines = [
        f"👤 From: {submission.name}",
        f"📧 Email: {submission.email}",
    ]
    if submission.subject:
        lines.append(f"📝 Subject: {submission.subject}")
    lines.append(f"💬 Message:\n{truncate(submission.message, 300)}")
    return send_admin_notification('New Contact Message', '\n'.join(lines))
