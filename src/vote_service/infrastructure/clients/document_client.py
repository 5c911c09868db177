"""HTTP client for the remote document eligibility service."""

from __future__ import annotations

import asyncio
import logging
import random
import urllib.parse
from typing import Any

import httpx
from pydantic import BaseModel

from vote_service.application.interfaces.document_validator import DocumentValidator
from vote_service.config.settings import DocumentValidatorSettings
from vote_service.domain.shared.constants import DocumentStatus
from vote_service.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

BACKOFF_BASE: float = 0.35


class DocumentStatusResponse(BaseModel):
    """Body of ``GET /users/{document}``."""

    status: str

    @property
    def is_able_to_vote(self) -> bool:
        return self.status == DocumentStatus.ABLE_TO_VOTE


def _jitter(n: int) -> float:
    return BACKOFF_BASE * (2 ** (n - 1)) + random.random() * 0.2


class HttpDocumentValidator(DocumentValidator):
    """Asks the remote user-info service whether a document may vote.

    - 200 with status ABLE_TO_VOTE: eligible.
    - 200 with any other status, or 404 (unknown document): not eligible.
    - Other HTTP statuses raise ``httpx.HTTPStatusError``.
    - Timeouts and connection errors are retried up to ``max_attempts``
      times and then re-raised.
    """

    def __init__(
        self,
        settings: DocumentValidatorSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or DocumentValidatorSettings()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client

        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=self._settings.timeout_s,
        )
        logger.info(
            LogTemplates.VALIDATOR_CLIENT_INITIALIZED,
            self._settings.base_url,
            self._settings.timeout_s,
        )
        return self._client

    async def validate(self, document: str) -> bool:
        response = await self._get_with_retry(f"/users/{urllib.parse.quote(document, safe='')}")

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(LogTemplates.VALIDATOR_DOCUMENT_UNKNOWN)
            return False
        response.raise_for_status()

        payload: Any = response.json()
        if not isinstance(payload, dict) or "status" not in payload:
            raise ValueError(ErrorMessages.UNEXPECTED_VALIDATOR_RESPONSE.format(payload=payload))
        return DocumentStatusResponse.model_validate(payload).is_able_to_vote

    async def _get_with_retry(self, path: str) -> httpx.Response:
        client = self._get_client()
        max_attempts = self._settings.max_attempts
        last_exc: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            try:
                return await client.get(path)
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                logger.warning(
                    LogTemplates.VALIDATOR_ERROR_RETRY,
                    attempt,
                    max_attempts,
                    e.__class__.__name__,
                )
                last_exc = e
                if attempt < max_attempts:
                    await asyncio.sleep(_jitter(attempt))

        raise last_exc or RuntimeError("Unknown document validator failure")

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info(LogTemplates.VALIDATOR_CLOSED)
