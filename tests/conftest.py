import os
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).parent.parent
TESTING_DIR = PROJECT_ROOT / 'testing'

# mathb.app reads its settings at import time.
os.environ.setdefault('MATHB_SETTINGS', str(PROJECT_ROOT / 'settings' / 'test.py'))


@pytest.fixture
def installed_configuration():
    """Swap in a fresh configuration for a test, restoring the app's after."""
    from mathb.app import app
    from mathb.app import get_configuration
    from mathb.app import install_configuration

    original = get_configuration(app)

    def install(configuration):
        return install_configuration(app, configuration)

    yield install

    install_configuration(app, original)
