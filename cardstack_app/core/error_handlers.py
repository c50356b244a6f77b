"""
Error Handlers for Cardstack

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import current_app, jsonify, render_template, request
from typing import Any, Dict, Optional

from .extensions import db, login_manager


class CardstackError(Exception):
    """Base exception class for Cardstack."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class ValidationError(CardstackError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def wants_json() -> bool:
    """True when the client asked for JSON rather than a page."""
    if request.is_json:
        return True
    mimetypes = request.accept_mimetypes
    return mimetypes['application/json'] > mimetypes['text/html']


def register_error_handlers(app):
    """Register error handlers with Flask app."""
    from ..modules.auth.exceptions import UnauthenticatedError

    @app.errorhandler(UnauthenticatedError)
    def handle_unauthenticated(error):
        # A protected resource never answers with an error page, only a redirect.
        if wants_json():
            return jsonify(error.to_dict()), error.status_code
        return login_manager.unauthorized()

    @app.errorhandler(CardstackError)
    def handle_cardstack_error(error):
        current_app.logger.error(f"{error.code}: {error.message}")
        if wants_json():
            return jsonify(error.to_dict()), error.status_code
        return render_template('errors/error.html', error=error), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if wants_json():
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        db.session.rollback()
        if wants_json():
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return render_template('errors/500.html'), 500
