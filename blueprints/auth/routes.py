"""
Auth Routes - Site owner login for the admin-only API views
"""

from flask import render_template, session, redirect, url_for, request, flash, current_app
from utils.security import get_admin_credentials, get_client_ip, verify_password
from . import auth_bp


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login against the configured credentials"""
    if request.method == 'POST':
        credentials = get_admin_credentials()
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if (credentials['username'] and username == credentials['username']
                and verify_password(password, credentials['password_hash'])):
            session.permanent = True
            session['is_admin'] = True
            current_app.logger.info(f"Admin login from {get_client_ip()}")
            flash('Admin Login Successful!', 'success')
            return redirect(url_for('pages.index'))

        current_app.logger.warning(f"Failed admin login for '{username}' from {get_client_ip()}")
        flash('Invalid username or password.', 'error')
        return render_template('auth/login.html'), 401

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Clear the admin session"""
    session.clear()
    flash('You have been logged out.', 'info')
    return redirect(url_for('pages.index'))
