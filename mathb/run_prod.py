# This entrypoint is used to get the app ready at start.
print('Importing app...')
from mathb.run import app  # noqa: E402

print('Creating directories...')
from mathb.app import provision_directories  # noqa: E402
provision_directories(app)

print('Startup complete')
