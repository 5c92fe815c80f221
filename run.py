"""
Development server entry point.

Run this file directly to start the Flask development server.
For production deployment, use wsgi.py with a WSGI server like gunicorn.

Usage:
    python run.py

Environment Variables:
    FLASK_CONFIG: Configuration to use ('development', 'production'). Defaults to 'development'.
    PORT: Port to listen on. Defaults to 3000.
"""

import os

from league_api import create_app

config_name = os.environ.get('FLASK_CONFIG', 'development')
app = create_app(config_name)

if __name__ == '__main__':
    debug = config_name == 'development'
    app.run(debug=debug, host='0.0.0.0', port=int(os.environ.get('PORT', 3000)))
