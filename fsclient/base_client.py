"""
State and factories shared by the blocking and asyncio clients.
"""

import logging
from typing import Optional

from .config import ClientConfig
from .endpoints import FsRequest
from .exceptions import ConfigurationError
from .http.adapter import DEFAULT_TIMEOUT, Timeout
from .metrics import metrics_request
from .models import AccessToken, Consumer, HttpResponse, RawResponse, Token, UserAgent, WireRequest
from .oauth import AuthDisabled, Signer, SignerV1, SignerV2
from .pipeline import decode_response, prepare_request


class BaseClient:
    """
    Immutable binding of user agent, authentication mode and transport.

    A client never changes its signer; build a new client to use other
    credentials. No per-call state is kept, so one instance can serve any
    number of concurrent fetches.
    """

    def __init__(
        self,
        user_agent: UserAgent,
        signer: Optional[Signer] = None,
        base_url: Optional[str] = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            user_agent: Application identity sent with every request
            signer: Authentication mode (default: AuthDisabled)
            base_url: Optional base URL for relative descriptor paths
            timeout: (connect, read) timeouts in seconds
            logger: Logging collaborator (default: ``logging.getLogger("fsclient")``)
        """
        if base_url is not None and not base_url.startswith(("http://", "https://")):
            raise ConfigurationError("base_url must start with http:// or https://")

        self._user_agent = user_agent
        self._signer = signer or AuthDisabled()
        self._base_url = base_url.rstrip("/") if base_url else None
        self._timeout = timeout
        self._logger = logger or logging.getLogger("fsclient")

    @property
    def user_agent(self) -> UserAgent:
        return self._user_agent

    @property
    def signer(self) -> Signer:
        return self._signer

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @property
    def timeout(self) -> Timeout:
        return self._timeout

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _prepare(self, descriptor: FsRequest) -> WireRequest:
        return prepare_request(
            descriptor, self._user_agent, self._signer, self._base_url, self._logger
        )

    def _decode(self, descriptor: FsRequest, raw: RawResponse) -> HttpResponse:
        return decode_response(descriptor, raw, self._logger)

    def _record(self, method: str, code: str, started: float, finished: float) -> None:
        metrics_request(method, code, finished - started)

    # ========================================================================
    # Factories
    # ========================================================================

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs):
        """
        Build a client from configuration.

        The consumer pair selects OAuth v1 client credentials, an access
        token selects OAuth v2, otherwise authentication is disabled.
        """
        if config.consumer is not None:
            signer: Signer = SignerV1(config.consumer)
        elif config.bearer_token is not None:
            signer = SignerV2(config.bearer_token)
        else:
            signer = AuthDisabled()

        kwargs.setdefault("base_url", config.base_url)
        kwargs.setdefault("timeout", (config.timeout_connect, config.timeout_read))
        kwargs.setdefault("logger", logging.getLogger(config.logger_name))
        if config.debug:
            kwargs["logger"].setLevel(logging.DEBUG)
        return cls(config.user_agent, signer=signer, **kwargs)

    @classmethod
    def v1_client_credentials(cls, user_agent: UserAgent, consumer: Consumer, **kwargs):
        """OAuth v1 client signing with the consumer only"""
        return cls(user_agent, signer=SignerV1(consumer), **kwargs)

    @classmethod
    def v1(cls, user_agent: UserAgent, consumer: Consumer, token: Token, **kwargs):
        """OAuth v1 client signing with consumer and token"""
        return cls(user_agent, signer=SignerV1(consumer, token), **kwargs)

    @classmethod
    def v2(cls, user_agent: UserAgent, access_token: AccessToken, **kwargs):
        """OAuth v2 bearer client"""
        return cls(user_agent, signer=SignerV2(access_token), **kwargs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(user_agent={self._user_agent.value!r}, "
            f"signer={self._signer!r}, base_url={self._base_url!r})"
        )
