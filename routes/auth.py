"""
routes/auth.py — Sign-in gate.

Provides:
- GET  /             — Redirect to Sheet-1 (signed in) or the login page
- GET  /login        — Login page
- POST /login        — Sign in with username + password (any non-blank pair)
- POST /login/guest  — Continue as "Guest"
- POST /logout       — Forget the user; form data stays on the device

There is no account check: signing in only records who is capturing data.
"""

from flask import Blueprint, render_template, request, redirect, url_for, flash

from storage import get_store, is_logged_in, login_user, logout_user

auth_bp = Blueprint('auth', __name__)


def require_login():
    """before_request hook for blueprints behind the sign-in gate."""
    if not is_logged_in(get_store()):
        return redirect(url_for('auth.login'))
    return None


@auth_bp.route('/')
def index():
    if is_logged_in(get_store()):
        return redirect(url_for('sheets.sheet1'))
    return redirect(url_for('auth.login'))


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Login page; already signed-in users go straight to Sheet-1."""
    store = get_store()
    if request.method == 'GET':
        if is_logged_in(store):
            return redirect(url_for('sheets.sheet1'))
        return render_template('login.html')

    username = request.form.get('username', '').strip()
    password = request.form.get('password', '').strip()
    if not username or not password:
        flash("Please enter both username and password", 'error')
        return render_template('login.html', username=username), 400

    login_user(store, username)
    flash("Welcome! Successfully logged in to TGREC Soil Profiles", 'success')
    return redirect(url_for('sheets.sheet1'))


@auth_bp.route('/login/guest', methods=['POST'])
def login_guest():
    login_user(get_store(), 'Guest')
    flash("Guest Access: continuing as guest user", 'success')
    return redirect(url_for('sheets.sheet1'))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user(get_store())
    flash("Logged out. Your form data remains on this device.", 'success')
    return redirect(url_for('auth.login'))
