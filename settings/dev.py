# mathb-specific configuration options
# document root of the site; the default content directory is
# <parent of DOCUMENT_ROOT>/mathb-content/
DOCUMENT_ROOT = 'tmp/html'

# storage locations (None keeps the default)
CONTENT_DIRECTORY = 'tmp/mathb-content'
CACHE_DIRECTORY = 'tmp/mathb-cache'

# regular expressions matched against client IP addresses; any match
# denies the request
IP_BLACKLIST = []

# base URL for post links when there is no request to take it from
HOME_URL = 'http://localhost:5000/'
