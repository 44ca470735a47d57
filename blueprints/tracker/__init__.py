"""Tracker blueprint – login, home map, visited countries and family members."""
from flask import Blueprint

tracker_bp = Blueprint('tracker', __name__, template_folder='../../templates/tracker')

# Session checks are per-route (see utils.session_context.session_required)
# because the start page and login POST are public.

from . import routes  # noqa: E402,F401
