BLACKLIST = (
    r'^10\.',
    r'^192\.168\.',
)

BLACKLISTED_IPS = (
    '10.0.0.5',
    '10.255.255.255',
    '192.168.1.1',
)

ALLOWED_IPS = (
    '8.8.8.8',
    '127.0.0.1',
    '110.0.0.1',
    '192.169.0.1',
    '::1',
)


def fake_host_url(url='https://mathb.example/'):
    """Return a host URL resolver that always returns `url`."""
    return lambda: url
