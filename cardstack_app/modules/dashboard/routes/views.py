from flask import render_template
from cardstack_app.modules.auth.guard import require_identity
from .. import blueprint
from ..services.dashboard_service import DashboardService

@blueprint.route('', strict_slashes=False)
@require_identity
def index(identity):
    """The signed-in user's overview page."""
    data = DashboardService.get_dashboard_data(identity.user_id)
    return render_template('dashboard/index.html', identity=identity, **data)
