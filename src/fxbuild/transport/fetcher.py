#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Remote fetch capability used for digest lookups and cache warming."""

from __future__ import annotations

import http.client
import socket
import ssl
from typing import Protocol, runtime_checkable
import urllib.error
import urllib.request
from urllib.parse import urlparse

from provide.foundation import logger

from fxbuild.config.defaults import DEFAULT_FETCH_TIMEOUT, DEFAULT_USER_AGENT, SUPPORTED_URL_SCHEMES
from fxbuild.exceptions import FetchError


@runtime_checkable
class RemoteFetcher(Protocol):
    """Anything that can retrieve the body of a URL."""

    def fetch_text(self, url: str) -> str: ...

    def fetch_bytes(self, url: str) -> bytes: ...


class UrllibFetcher:
    """Blocking HTTP fetcher built on ``urllib.request``.

    Each call performs exactly one request. Failures of any kind are raised
    as ``FetchError``; there is no retry and no caching.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._opener = urllib.request.build_opener(
            urllib.request.HTTPSHandler(context=ssl.create_default_context())
        )

    def fetch_bytes(self, url: str) -> bytes:
        """Download ``url`` and return the raw body.

        Raises:
            FetchError: On any failure to obtain the complete body
        """
        logger.debug("Fetching remote resource", url=url, timeout=self.timeout)
        try:
            scheme = urlparse(url).scheme.lower()
            if scheme not in SUPPORTED_URL_SCHEMES:
                raise FetchError(url, f"unsupported scheme '{scheme}'")
            request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
            with self._opener.open(request, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as e:
            raise FetchError(url, f"HTTP {e.code} {e.reason}") from e
        except urllib.error.URLError as e:
            raise FetchError(url, str(e.reason)) from e
        except (socket.timeout, TimeoutError) as e:
            raise FetchError(url, "timed out") from e
        except OSError as e:
            raise FetchError(url, str(e)) from e
        except http.client.HTTPException as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise FetchError(url, f"invalid request: {e}") from e

    def fetch_text(self, url: str) -> str:
        """Download ``url`` and decode it as UTF-8."""
        body = self.fetch_bytes(url)
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(url, f"response is not valid UTF-8: {e}") from e


# 🌶️📦🔚
