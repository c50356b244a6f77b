from flask import render_template
from cardstack_app.modules.auth.guard import with_identity
from .. import blueprint

@blueprint.route('/')
@with_identity
def index(identity):
    """
    Public home page; shows sign-in links or the dashboard link.
    """
    return render_template('landing/index.html', identity=identity)
