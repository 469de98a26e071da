"""Runtime configuration for MathB.

A Configuration knows where posts and preview images are stored on disk,
how post URLs are built, and which client IP addresses are denied. It is
built once at startup and treated as read-only afterwards; to reload,
build a new instance and install it in place of the old one.

Nothing in here logs. Errors are raised to the caller, which decides
whether they are fatal (they usually are, at startup).
"""
import os
import re
import typing

from mathb.utils import get_host_url


CONTENT_DIRECTORY_NAME = 'mathb-content'
DEFAULT_CACHE_DIRECTORY = '/tmp/mathb-cache/'
COUNT_FILE_NAME = 'count.dat'
POST_FILE_EXTENSION = '.txt'

# owner-only: rwx------
DIRECTORY_MODE = 0o700


class ConfigurationError(Exception):
    pass


class InvalidArgument(ConfigurationError, ValueError):
    pass


class MissingDocumentRootError(ConfigurationError):
    pass


class DirectoryCreationError(ConfigurationError):

    @property
    def path(self):
        return self.args[0]

    @property
    def error(self):
        return self.args[1]

    def __str__(self):
        return f'Could not create {self.path}: {self.error}'


class ConfigurationPatternError(ConfigurationError):

    @property
    def pattern(self):
        return self.args[0]

    @property
    def error(self):
        return self.args[1]

    def __str__(self):
        return f'Invalid IP blacklist pattern {self.pattern!r}: {self.error}'


def normalize_directory_path(path: str) -> str:
    """Return the path with exactly one trailing separator added if missing."""
    if not isinstance(path, str) or not path:
        raise InvalidArgument(path)
    if path[-1] != '/':
        path += '/'
    return path


def compile_pattern(pattern: str) -> re.Pattern:
    # bytes patterns compile, but then fail on every str IP
    if not isinstance(pattern, str):
        raise ConfigurationPatternError(
            pattern,
            TypeError(f'expected a str pattern, got {type(pattern).__name__}'),
        )
    try:
        return re.compile(pattern)
    except re.error as ex:
        raise ConfigurationPatternError(pattern, ex)


def _make_directory(path: str) -> None:
    # unlike os.makedirs, every directory created here gets DIRECTORY_MODE
    if os.path.isdir(path):
        return
    parent = os.path.dirname(path)
    if parent and parent != path:
        _make_directory(parent)
    try:
        os.mkdir(path, DIRECTORY_MODE)
    except FileExistsError:
        # fine if someone else created it first, not if it's a file
        if not os.path.isdir(path):
            raise


def create_directory(path: str) -> None:
    try:
        _make_directory(path.rstrip('/') or '/')
    except OSError as ex:
        raise DirectoryCreationError(path, ex)


class Configuration:

    def __init__(
        self,
        document_root: typing.Optional[str] = None,
        host_url: typing.Callable[[], str] = get_host_url,
    ):
        if document_root is None:
            document_root = os.environ.get('DOCUMENT_ROOT')
        if not document_root:
            raise MissingDocumentRootError(
                'DOCUMENT_ROOT is not set; cannot derive the default content directory',
            )

        self._host_url = host_url
        parent = os.path.dirname(document_root.rstrip('/') or '/') or '.'
        self.content_directory_path = os.path.join(parent, CONTENT_DIRECTORY_NAME)
        self.cache_directory_path = DEFAULT_CACHE_DIRECTORY
        self._ip_blacklist = ()

    @classmethod
    def from_settings(
        cls,
        settings: typing.Mapping[str, typing.Any],
        host_url: typing.Callable[[], str] = get_host_url,
    ) -> 'Configuration':
        """Build a configuration from a Flask-style settings mapping.

        Missing or None values for CONTENT_DIRECTORY, CACHE_DIRECTORY and
        IP_BLACKLIST keep the defaults.
        """
        config = cls(settings.get('DOCUMENT_ROOT'), host_url=host_url)
        if settings.get('CONTENT_DIRECTORY') is not None:
            config.content_directory_path = settings['CONTENT_DIRECTORY']
        if settings.get('CACHE_DIRECTORY') is not None:
            config.cache_directory_path = settings['CACHE_DIRECTORY']
        if settings.get('IP_BLACKLIST') is not None:
            config.ip_blacklist = settings['IP_BLACKLIST']
        return config

    @property
    def content_directory_path(self) -> str:
        return self._content_directory_path

    @content_directory_path.setter
    def content_directory_path(self, path: str) -> None:
        self._content_directory_path = normalize_directory_path(path)

    @property
    def cache_directory_path(self) -> str:
        """Path to the cache directory, always with a trailing separator."""
        return self._cache_directory_path

    @cache_directory_path.setter
    def cache_directory_path(self, path: str) -> None:
        self._cache_directory_path = normalize_directory_path(path)

    @property
    def ip_blacklist(self) -> typing.Tuple[str, ...]:
        return tuple(compiled.pattern for compiled in self._ip_blacklist)

    @ip_blacklist.setter
    def ip_blacklist(self, patterns: typing.Iterable[str]) -> None:
        if isinstance(patterns, (str, bytes)):
            raise ConfigurationPatternError(
                patterns,
                TypeError('expected a sequence of patterns, not a single string'),
            )
        # compile everything first so a bad pattern leaves the old list alone
        self._ip_blacklist = tuple(compile_pattern(pattern) for pattern in patterns)

    def add_blacklist_pattern(self, pattern: str) -> None:
        self._ip_blacklist += (compile_pattern(pattern),)

    def create_directories(self) -> None:
        """Create the content and cache directories if they do not exist.

        Not transactional: if the cache directory fails, the content
        directory stays created.
        """
        create_directory(self.content_directory_path)
        create_directory(self.cache_directory_path)

    def post_file_path(self, post_id: str) -> str:
        return self.content_directory_path + post_id + POST_FILE_EXTENSION

    @property
    def count_file_path(self) -> str:
        """Path of the file holding the total number of posts."""
        return self.content_directory_path + COUNT_FILE_NAME

    def post_url(self, post_id: str, key: str = '') -> str:
        """Return the URL of a post.

        The 'key' query parameter is only present when a key is given.
        """
        url = self._host_url() + post_id
        if key:
            url += '?key=' + key
        return url

    def blacklist_match(self, ip: str) -> typing.Optional[str]:
        """Return the first blacklist pattern found in `ip`, or None."""
        for compiled in self._ip_blacklist:
            if compiled.search(ip):
                return compiled.pattern
        return None

    def client_is_blacklisted(self, ip: str) -> bool:
        return self.blacklist_match(ip) is not None
