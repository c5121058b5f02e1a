from portfolio_site.presentation.client import PortfolioClient, load_state, submit_contact
from portfolio_site.presentation.state import AppState, ContactForm, FormStatus
from portfolio_site.presentation.views import page_view
