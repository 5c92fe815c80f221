"""
Flask extensions initialization.

Extensions are initialized here and imported by the app factory.
"""

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Rate limiter - initialized without app, will be init_app() in create_app().
# Limits and storage come from the RATELIMIT_* config keys.
limiter = Limiter(key_func=get_remote_address)
