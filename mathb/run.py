import sys

from mathb.app import app
from mathb.app import provision_directories
from mathb.configuration import DirectoryCreationError


def create_directories_main():
    """Create the content and cache directories, e.g. as a deploy step."""
    try:
        provision_directories(app)
    except DirectoryCreationError as ex:
        print(ex, file=sys.stderr)
        return 1
    return 0


def debug():  # pragma: no cover
    provision_directories(app)
    app.run(debug=True)


if __name__ == '__main__':
    exit(debug())
