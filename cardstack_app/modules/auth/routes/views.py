from urllib.parse import urlparse

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import login_user, logout_user

from cardstack_app.core.error_handlers import CardstackError
from cardstack_app.core.extensions import db
from cardstack_app.core.signals import sign_in_failed, user_signed_in, user_signed_out
from .. import blueprint
from ..exceptions import AuthenticationError, INVALID_CREDENTIALS_MESSAGE
from ..forms import LoginForm, RegistrationForm
from ..guard import anonymous_only, with_identity
from ..services.auth_service import AuthService
from ..services.session_guard import SessionGuard


def _safe_next(target):
    """Only follow ``next`` when it points back into this site."""
    if not target:
        return url_for('dashboard.index')
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith('/') or target.startswith('//'):
        return url_for('dashboard.index')
    return target


def _sign_in(user):
    SessionGuard.establish(user)
    login_user(user)
    AuthService.record_sign_in(user)
    user_signed_in.send(current_app._get_current_object(), user=user)


@blueprint.route('/sign_in', methods=['GET', 'POST'])
@anonymous_only('dashboard.index')
def login():
    form = LoginForm()
    if form.validate_on_submit():
        try:
            user = AuthService.verify_credentials(form.email.data, form.password.data)
        except AuthenticationError as exc:
            sign_in_failed.send(current_app._get_current_object(), reason=exc.code)
            flash(INVALID_CREDENTIALS_MESSAGE, 'danger')
            return render_template('auth/login.html', form=form), 422

        _sign_in(user)
        flash('Signed in successfully.', 'success')
        return redirect(_safe_next(request.args.get('next')))

    status = 422 if form.is_submitted() else 200
    return render_template('auth/login.html', form=form), status


@blueprint.route('/sign_up', methods=['GET', 'POST'])
@anonymous_only('dashboard.index')
def register():
    form = RegistrationForm()
    if form.validate_on_submit():
        try:
            user = AuthService.register_user(form.email.data, form.password.data)
        except CardstackError as exc:
            db.session.rollback()
            form.email.errors.append(exc.message)
            return render_template('auth/register.html', form=form), 422

        _sign_in(user)
        flash('Welcome! You have signed up successfully.', 'success')
        return redirect(url_for('dashboard.index'))

    status = 422 if form.is_submitted() else 200
    return render_template('auth/register.html', form=form), status


@blueprint.route('/sign_out', methods=['GET', 'POST', 'DELETE'])
@with_identity
def logout(identity):
    if identity.is_authenticated:
        SessionGuard.destroy(identity.session_token)
        logout_user()
        user_signed_out.send(current_app._get_current_object(), user_id=identity.user_id)
    flash('Signed out successfully.', 'info')
    return redirect(url_for('landing.index'), code=303)
