import logging
import sys

from flask import abort
from flask import Flask
from flask import request

from mathb.configuration import Configuration


app = Flask(__name__)
app.config.from_envvar('MATHB_SETTINGS')
app.logger.addHandler(logging.StreamHandler(sys.stderr))
app.logger.setLevel(logging.DEBUG)


def install_configuration(flask_app, configuration):
    """Make `configuration` the one the app serves requests with.

    Reloading means building a new Configuration and installing it here;
    an installed instance should not be mutated.
    """
    flask_app.extensions['mathb'] = configuration
    return configuration


def get_configuration(flask_app=app):
    return flask_app.extensions['mathb']


def provision_directories(flask_app=app):
    configuration = get_configuration(flask_app)
    configuration.create_directories()
    flask_app.logger.info(
        'Using content directory %s and cache directory %s',
        configuration.content_directory_path,
        configuration.cache_directory_path,
    )


@app.before_request
def deny_blacklisted_clients():
    pattern = get_configuration().blacklist_match(request.remote_addr or '')
    if pattern is not None:
        app.logger.info(
            'Denying blacklisted client %s (matched %r)',
            request.remote_addr,
            pattern,
        )
        abort(403)


install_configuration(app, Configuration.from_settings(app.config))
