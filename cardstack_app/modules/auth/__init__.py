# File: cardstack_app/modules/auth/__init__.py
from flask import Blueprint

blueprint = Blueprint('auth', __name__)

module_metadata = {
    'name': 'Authentication',
    'icon': 'lock',
    'category': 'System',
    'enabled': True
}

def setup_module(app):
    from .config import AuthModuleDefaultConfig
    from .events import register_events
    from . import routes  # noqa: F401

    AuthModuleDefaultConfig.apply(app)
    register_events()
