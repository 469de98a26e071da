# mathb-specific configuration options
# document root of the site; the default content directory is
# <parent of DOCUMENT_ROOT>/mathb-content/
DOCUMENT_ROOT = '/var/www/html'

# storage locations (None keeps the default)
CONTENT_DIRECTORY = None
CACHE_DIRECTORY = '/var/cache/mathb'

# regular expressions matched against client IP addresses; any match
# denies the request
IP_BLACKLIST = [
    r'^192\.0\.2\.',
]

# base URL for post links when there is no request to take it from
HOME_URL = 'https://mathb.in/'
