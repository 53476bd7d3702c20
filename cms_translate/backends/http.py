"""
Shared plumbing for backends that talk to a JSON HTTP API.

Transient failures (transport errors, 429, 5xx) are retried with
exponential backoff; everything else fails on the first attempt.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from cms_translate.backends.base import TranslationBackend
from cms_translate.core.errors import BackendError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class TransientBackendError(BackendError):
    """A failure worth retrying."""
    pass


class HttpBackend(TranslationBackend):
    """
    Base for HTTP translation backends.

    Subclasses build the request and read the translation out of the
    response; this class handles the client, retries and error mapping.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        retry_attempts: int = 3,
        wait: wait_base | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.retry_attempts = max(1, retry_attempts)
        self.wait = wait or wait_exponential(multiplier=1, min=1, max=10)
        self._transport = transport

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> Any:
        """POST a JSON payload and return the decoded JSON response."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=self.wait,
            retry=retry_if_exception_type(TransientBackendError),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._post_once(url, payload, headers)

    async def _post_once(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> Any:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
            except httpx.TransportError as e:
                logger.warning(f"{self.service_id} request failed: {e}")
                raise TransientBackendError(
                    f"{self.service_id} request failed: {e}",
                    service=self.service_id,
                ) from e

        if response.status_code in RETRY_STATUS_CODES:
            logger.warning(
                f"{self.service_id} returned {response.status_code}, may retry"
            )
            raise TransientBackendError(
                f"{self.service_id} returned {response.status_code}",
                service=self.service_id,
                status_code=response.status_code,
            )

        if response.status_code != 200:
            logger.debug(f"{self.service_id} request rejected: {response.text}")
            raise BackendError(
                f"{self.service_id} returned {response.status_code}",
                service=self.service_id,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"{self.service_id} returned a malformed response",
                service=self.service_id,
                status_code=response.status_code,
            ) from e
