from flask import current_app
from flask import has_request_context
from flask import request


def get_host_url():
    """Return the base URL that post IDs are appended to.

    Inside a request this is the URL the app is mounted at (scheme, host
    and script root, with a trailing slash). Outside a request we can't
    know that, so fall back to the configured HOME_URL.
    """
    if has_request_context():
        return request.url_root
    else:
        return current_app.config['HOME_URL']
