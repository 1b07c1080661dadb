"""Greptile API client for greptile_cli.

This module provides the async HTTP client for the Greptile code
intelligence API: repository existence checks, indexing and queries.
"""

from typing import Any, Self
from urllib.parse import quote

import httpx

from greptile_cli.config import (
    API_TOKEN_ENV,
    DEFAULT_BASE_URL,
    GITHUB_TOKEN_ENV,
    GreptileSettings,
)
from greptile_cli.errors import MissingCredentialError, RemoteRejectedError, TransportError
from greptile_cli.logging import get_logger
from greptile_cli.models.requests import IndexRequest, QueryRequest

__all__ = [
    "GreptileClient",
]

logger = get_logger(__name__)


class GreptileClient:
    """Async client for the Greptile API.

    Every request carries the Greptile API token as a bearer token and the
    GitHub token in the X-Github-Token header. Failures are raised
    immediately; nothing is retried.

    Example:
        async with GreptileClient.from_config(GreptileSettings()) as client:
            await client.submit_for_indexing(build_index_request(identity))
            answer = await client.run_query(request)
    """

    config_class = GreptileSettings

    def __init__(
        self,
        github_token: str | None,
        api_token: str | None,
        *,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            github_token: GitHub access token forwarded to the service
            api_token: Greptile API token
            http_client: Transport to use; the client creates and owns one if omitted
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds, None for no timeout

        Raises:
            MissingCredentialError: If either token is missing or empty
        """
        if not github_token:
            raise MissingCredentialError(GITHUB_TOKEN_ENV)
        if not api_token:
            raise MissingCredentialError(API_TOKEN_ENV)

        self._github_token = github_token
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls,
        config: GreptileSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        """Factory method building the client from settings.

        Args:
            config: Greptile settings (credentials, base URL, timeout)
            http_client: Optional transport to use instead of a fresh one

        Returns:
            GreptileClient instance
        """
        github_token = config.github_token.get_secret_value() if config.github_token else None
        api_token = config.api_token.get_secret_value() if config.api_token else None
        return cls(
            github_token,
            api_token,
            http_client=http_client,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    async def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_token}",
            "X-Github-Token": self._github_token,
        }

    async def _send(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            return await self._http.request(method, url, headers=self._headers(), json=json)
        except httpx.RequestError as e:
            logger.error("greptile_transport_failed", method=method, url=url, error=str(e))
            raise TransportError(f"{method} {url} failed: {e}") from e

    async def repository_exists(self, repo_id: str) -> bool:
        """Check whether the service knows a repository.

        Any non-200 status means "not found" and yields False rather than
        an error. Transport failures are still raised.

        Args:
            repo_id: Composite "remote:branch:owner/name" identifier

        Returns:
            True if the service answered 200
        """
        response = await self._send("GET", f"/repositories/{quote(repo_id, safe='')}")
        if response.status_code != httpx.codes.OK:
            logger.info(
                "repository_missing",
                repo_id=repo_id,
                status_code=response.status_code,
            )
            return False
        return True

    async def submit_for_indexing(self, request: IndexRequest) -> None:
        """Submit a repository for (re-)indexing.

        Raises:
            RemoteRejectedError: If the service answers with a non-200 status
            TransportError: If the request failed without a usable response
        """
        response = await self._send("POST", "/repositories", json=request.to_payload())
        if response.status_code != httpx.codes.OK:
            logger.error(
                "index_rejected",
                repository=request.repository,
                status_code=response.status_code,
            )
            raise RemoteRejectedError(response.status_code, response.text)
        logger.info("index_submitted", repository=request.repository, branch=request.branch)

    async def run_query(self, request: QueryRequest) -> str:
        """Ask a question about the indexed repositories.

        Returns:
            The response body text, unparsed

        Raises:
            RemoteRejectedError: If the service answers with a non-200 status
            TransportError: If the request failed without a usable response
        """
        payload = request.to_payload()
        logger.debug("query_request", payload=payload)
        response = await self._send("POST", "/query", json=payload)
        if response.status_code != httpx.codes.OK:
            logger.error("query_rejected", status_code=response.status_code)
            raise RemoteRejectedError(response.status_code, response.text)
        logger.info("query_completed", answer_length=len(response.text))
        return response.text
