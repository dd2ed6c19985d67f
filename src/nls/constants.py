"""
Client constants and configuration defaults.

This module centralizes the endpoint, environment variable names and
other hardcoded values used across the NLS client.
"""


class ServiceConstants:
    """Constants describing the remote NotLocalStorage service."""

    DEFAULT_ENDPOINT = 'https://stg001.notlocalstorage.io/api/data/'

    # Operation path prefixes (relative to the endpoint base)
    LOAD_PATH = 'get'
    SAVE_PATH = 'store'


class EnvironmentConstants:
    """Names of the environment variables consumed by the client."""

    API_KEY = 'NLS_API_KEY'
    APP_KEY = 'NLS_APP_KEY'
    LOG_LEVEL = 'NLS_LOG_LEVEL'


class ClientDefaults:
    """Defaults for client construction."""

    # Worker threads used to run requests off the caller's thread
    MAX_WORKERS = 32
    THREAD_NAME_PREFIX = 'nls-request'

    # None means no timeout, which is the requests default
    REQUEST_TIMEOUT_SECONDS = None


class StatusText:
    """Failure classifications passed to failure continuations."""

    ERROR = 'error'
    TIMEOUT = 'timeout'
    PARSE_ERROR = 'parsererror'
    ABORT = 'abort'


class LoggingDefaults:
    """Logging defaults."""

    SERVICE_NAME = 'nls'
    LOG_FILE = 'logs/nls.log'
    MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 5
