from portfolio_site.routes.api import api_bp
from portfolio_site.routes.site import site_bp
