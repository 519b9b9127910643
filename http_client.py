"""
Player Data Manager - Outbound HTTP Client

Handles all communication with the Roblox REST APIs (Open Cloud Data Stores
and the users service). Wraps each call with a timeout, JSON decoding and a
bounded exponential-backoff retry on transient failures.
"""

import json
import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from exceptions import HttpError

# Configure logging
logger = logging.getLogger(__name__)


# Retry configuration
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_BASE_SECONDS = 0.25


def IsRetryableStatus(status_code: int) -> bool:
    """Rate limiting and server errors are worth another attempt"""
    return status_code == 429 or status_code >= 500


def DecodeBody(text: str) -> Any:
    """
    Decode a response body as JSON

    Args:
        text: Raw response text

    Returns:
        Parsed JSON, or {"raw": text} if the body is not valid JSON
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return {"raw": text}


class OpenCloudHttpClient:
    """
    HTTP client for the Roblox REST APIs.

    Responsibilities:
    - Attach the Open Cloud API key to every request
    - Decode JSON responses
    - Retry timeouts, connection failures, 429 and 5xx with exponential backoff
    - Raise HttpError for everything else
    """

    def __init__(self, api_key: Optional[str] = None,
                 timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
                 max_retries: int = DEFAULT_MAX_RETRIES,
                 backoff_base_seconds: float = DEFAULT_BACKOFF_BASE_SECONDS,
                 session: Optional[requests.Session] = None,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize HTTP client.

        Args:
            api_key: Open Cloud API key sent as x-api-key (omitted if None)
            timeout_seconds: Per-attempt timeout
            max_retries: Additional attempts after the first one
            backoff_base_seconds: Delay before the first retry; doubles per attempt
            session: requests session (a new one is created if None)
            sleep: Sleep function used between attempts
        """
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.backoff_base_seconds = backoff_base_seconds
        # Use session for connection pooling to avoid TCP handshake overhead on each request
        self.session = session if session is not None else requests.Session()
        self.sleep = sleep

    def Close(self):
        """Close the session and release pooled connections."""
        if self.session:
            self.session.close()
            logger.debug("HTTP client session closed")

    def BackoffDelay(self, attempt: int) -> float:
        """
        Delay before the retry that follows the given 0-indexed attempt

        Returns:
            base * 2 ** attempt seconds
        """
        return self.backoff_base_seconds * (2 ** attempt)

    def FetchJson(self, url: str, method: str = "GET",
                  headers: Optional[Dict[str, str]] = None,
                  json_body: Any = None) -> Any:
        """
        Perform a request and return the decoded JSON body.

        Args:
            url: Absolute request URL
            method: HTTP method (GET, POST, PATCH, ...)
            headers: Extra request headers
            json_body: Body to serialize as JSON (no body if None)

        Returns:
            Decoded JSON response body

        Raises:
            HttpError: On a non-retryable status or once the retry budget is spent
        """
        request_headers = {}
        if self.api_key:
            request_headers["x-api-key"] = self.api_key

        data = None
        if json_body is not None:
            data = json.dumps(json_body)
            request_headers["Content-Type"] = "application/json"

        if headers:
            request_headers.update(headers)

        attempt = 0
        while True:
            logger.debug(f"HTTP {method} {url} (attempt {attempt + 1}/{self.max_retries + 1})")

            try:
                response = self.session.request(
                    method,
                    url,
                    headers=request_headers,
                    data=data,
                    timeout=self.timeout_seconds
                )
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                error = HttpError(None, {"raw": str(e)}, message=f"Request to remote service failed: {e.__class__.__name__}")
            except requests.exceptions.RequestException as e:
                logger.error(f"HTTP {method} {url} request error: {e}")
                raise HttpError(None, {"raw": str(e)}, message=f"Request error: {e}") from e
            else:
                body = DecodeBody(response.text)
                if 200 <= response.status_code < 300:
                    return body

                error = HttpError(response.status_code, body)
                if not IsRetryableStatus(response.status_code):
                    logger.error(f"HTTP {method} {url} failed with status {response.status_code}")
                    raise error

            if attempt >= self.max_retries:
                logger.error(f"HTTP {method} {url} failed after {attempt + 1} attempts: {error}")
                raise error

            delay = self.BackoffDelay(attempt)
            logger.warning(f"HTTP {method} {url} transient failure ({error}), retrying in {delay:.2f}s")
            self.sleep(delay)
            attempt += 1
