# File: cardstack_app/modules/dashboard/__init__.py
from flask import Blueprint

blueprint = Blueprint('dashboard', __name__)

module_metadata = {
    'name': 'Dashboard',
    'icon': 'home',
    'category': 'System',
    'enabled': True
}

def setup_module(app):
    from . import routes  # noqa: F401
