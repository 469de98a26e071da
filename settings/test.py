# mathb-specific configuration options
DOCUMENT_ROOT = '/var/www/html'

CONTENT_DIRECTORY = None
CACHE_DIRECTORY = None

IP_BLACKLIST = [
    r'^10\.',
    r'^192\.168\.',
]

HOME_URL = 'http://localhost:5000/'
