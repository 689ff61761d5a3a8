import os

SECRET_KEY = os.environ.get('FLASK_SECRET_KEY', 'default_secret_key')

PORT = int(os.environ.get('PORT', 5000))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')


# Upper bound on travellers per calculation
MAX_PEOPLE = 1000

# Success and warning banners hide themselves after this delay
MESSAGE_AUTO_HIDE_MS = 5000
