"""
NotLocalStorage client.

Turns load/save calls into a single HTTP request against the configured
endpoint and reports the outcome asynchronously. Each call returns a
concurrent.futures.Future immediately; the request runs on the client's
worker pool and the optional continuations fire from the worker thread
once it completes.
"""

import asyncio
import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional

import requests

from nls.config import ClientConfig, load_settings
from nls.constants import ClientDefaults, StatusText
from nls.exceptions import (
    InvalidIndexKeyError,
    MissingCredentialsError,
    RequestFailedError,
    ResponseParseError,
    ServiceError,
    TransportError,
)
from nls.exceptions.base import new_correlation_id
from nls.http import HttpClient
from nls.logging import LoggingContext
from nls.security import CredentialSanitizer

from .encoding import encode_payload
from .outcome import Failure, Load, Save, Success
from .urls import NLSURLGenerator

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[Failure], None]


class Client:
    """Client for the NotLocalStorage key-value service.

    Example:
        with Client() as client:
            client.init("api-key", "app-key")
            client.save("user-preferences", {"theme": "dark"})
            client.load(
                "user-preferences",
                lambda body: print("loaded", body),
                lambda failure: print("failed", failure.status_text),
            )
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        endpoint_base: Optional[str] = None,
        http_client: Optional[HttpClient] = None,
        max_workers: int = ClientDefaults.MAX_WORKERS,
    ):
        """Initialize the client.

        Args:
            config: Starting configuration (default: empty credentials)
            endpoint_base: Overrides config.endpoint_base
            http_client: Transport to send requests through
            max_workers: Worker threads available to in-flight requests
        """
        self.logger = logging.getLogger(__name__)
        self._config_lock = threading.Lock()
        self._config = config or ClientConfig()
        if endpoint_base is not None:
            self._replace_config(endpoint_base=endpoint_base)

        self._http = http_client or HttpClient()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=ClientDefaults.THREAD_NAME_PREFIX,
        )

    @property
    def config(self) -> ClientConfig:
        """The current configuration snapshot."""
        return self._config

    @property
    def endpoint_base(self) -> str:
        """URL prefix the get/ and store/ paths are appended to."""
        return self._config.endpoint_base

    @endpoint_base.setter
    def endpoint_base(self, value: str) -> None:
        self._replace_config(endpoint_base=value)

    def _replace_config(self, **changes: Any) -> ClientConfig:
        """Validate and swap in a new config in one assignment."""
        with self._config_lock:
            values = self._config.model_dump()
            values.update(changes)
            self._config = ClientConfig(**values)
            return self._config

    def init(self, api_key: Optional[str] = None, app_key: Optional[str] = None) -> None:
        """Set the credentials used by subsequent requests.

        A key passed as None is read from the environment (NLS_API_KEY,
        NLS_APP_KEY, or a .env file). Both keys are replaced; a key that
        resolves to nothing is stored as None and requests fail fast with
        MissingCredentialsError until init() is called again.

        Args:
            api_key: API key, or None to read NLS_API_KEY
            app_key: Application key, or None to read NLS_APP_KEY
        """
        if api_key is None or app_key is None:
            settings = load_settings()
            if api_key is None:
                api_key = settings.nls_api_key
            if app_key is None:
                app_key = settings.nls_app_key

        config = self._replace_config(api_key=api_key, app_key=app_key)

        if config.missing_credentials:
            self.logger.warning(
                f"Client initialized without {', '.join(config.missing_credentials)}; "
                f"requests will be rejected until init() is called with credentials"
            )
        else:
            self.logger.info(
                f"Client initialized: api_key={CredentialSanitizer.mask_credential(config.api_key)} "
                f"app_key={CredentialSanitizer.mask_credential(config.app_key)}"
            )

    def load(
        self,
        index_key: str,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> "Future[Success]":
        """Retrieve the value stored under index_key.

        Issues GET {endpoint_base}get/{api_key}/{app_key}/{index_key}.

        Returns:
            Future resolving to Success(body) or failing with a
            RequestFailedError subclass

        Raises:
            MissingCredentialsError: If init() has not supplied both keys
            InvalidIndexKeyError: If index_key is empty
        """
        return self._dispatch(Load(index_key), on_success, on_failure)

    def save(
        self,
        index_key: str,
        payload: Any,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> "Future[Success]":
        """Store payload under index_key.

        Issues POST {endpoint_base}store/{api_key}/{app_key}/{index_key}.
        Mappings are form-encoded with bracket notation for nested values
        (``prefs[theme]=dark``, ``tags[]=a``); str and bytes are sent as-is
        and numbers as their string form.

        Raises:
            MissingCredentialsError: If init() has not supplied both keys
            InvalidIndexKeyError: If index_key is empty
            InvalidPayloadError: If payload has no form encoding
        """
        return self._dispatch(Save(index_key, payload), on_success, on_failure)

    async def aload(self, index_key: str) -> Success:
        """Awaitable form of load()."""
        return await asyncio.wrap_future(self.load(index_key))

    async def asave(self, index_key: str, payload: Any) -> Success:
        """Awaitable form of save()."""
        return await asyncio.wrap_future(self.save(index_key, payload))

    def _dispatch(self, operation, on_success, on_failure) -> Future:
        if not isinstance(operation.index_key, str) or not operation.index_key:
            raise InvalidIndexKeyError(operation.index_key)

        # Read once so the whole request uses one credential pair
        config = self._config
        if config.missing_credentials:
            raise MissingCredentialsError(*config.missing_credentials)

        body = encode_payload(operation.payload) if isinstance(operation, Save) else None

        url = NLSURLGenerator(config).url_for(operation)
        future = self._executor.submit(self._perform, operation, url, body, config)
        future.add_done_callback(
            partial(self._deliver, on_success=on_success, on_failure=on_failure)
        )
        return future

    def _perform(self, operation, url: str, body: Any, config: ClientConfig) -> Success:
        masked_url = CredentialSanitizer.mask_url(url, (config.api_key, config.app_key))
        method = "POST" if isinstance(operation, Save) else "GET"
        request_id = new_correlation_id()

        with LoggingContext(
            entry_msg=f"{method} {masked_url}",
            success_msg=f"{operation.name} '{operation.index_key}' succeeded",
            failure_msg=f"{operation.name} '{operation.index_key}' failed [{request_id}]",
            logger=self.logger,
            extra={"correlation_id": request_id, "operation": operation.name},
        ):
            try:
                response = self._send(operation, url, body, config, request_id)
                return self._handle_response(operation, response, request_id)
            except RequestFailedError:
                raise
            except Exception as e:
                self.logger.error(f"Unexpected error during {operation.name}: {e!r}")
                failure = Failure(error=e, status_text=StatusText.ERROR, description=str(e))
                raise TransportError(
                    operation.name, operation.index_key, failure, request_id
                ) from e

    def _send(
        self, operation, url: str, body: Any, config: ClientConfig, request_id: str
    ) -> requests.Response:
        try:
            if isinstance(operation, Save):
                return self._http.post(url, data=body, timeout=config.timeout)
            return self._http.get(url, timeout=config.timeout)
        except requests.exceptions.Timeout as e:
            failure = Failure(error=e, status_text=StatusText.TIMEOUT, description=str(e))
            raise TransportError(operation.name, operation.index_key, failure, request_id) from e
        except requests.exceptions.RequestException as e:
            failure = Failure(error=e, status_text=StatusText.ERROR, description=str(e))
            raise TransportError(operation.name, operation.index_key, failure, request_id) from e

    def _handle_response(self, operation, response: requests.Response, request_id: str) -> Success:
        if not 200 <= response.status_code < 300:
            failure = Failure(
                error=response,
                status_text=StatusText.ERROR,
                description=response.reason or "",
                status_code=response.status_code,
            )
            raise ServiceError(operation.name, operation.index_key, failure, request_id)

        if not response.content:
            return Success(None)

        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            return Success(response.text)

        try:
            return Success(response.json())
        except ValueError as e:
            failure = Failure(
                error=e,
                status_text=StatusText.PARSE_ERROR,
                description=str(e),
                status_code=response.status_code,
            )
            raise ResponseParseError(
                operation.name, operation.index_key, failure, request_id
            ) from e

    def _deliver(
        self,
        future: Future,
        on_success: Optional[SuccessCallback],
        on_failure: Optional[FailureCallback],
    ) -> None:
        """Fire exactly one continuation for a finished future."""
        if future.cancelled():
            failure = Failure(
                error=CancelledError(),
                status_text=StatusText.ABORT,
                description="request cancelled before dispatch",
            )
            if on_failure:
                on_failure(failure)
            return

        # _perform only ever fails with RequestFailedError
        error = future.exception()
        if error is None:
            if on_success:
                on_success(future.result().body)
        elif on_failure:
            on_failure(error.failure)

    def close(self) -> None:
        """Wait for in-flight requests, then release the worker pool and session."""
        self._executor.shutdown(wait=True)
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
