"""
HTTP transport adapter backed by requests
"""

import logging
from dataclasses import replace
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from tiki_sdk.client.middleware import Env
from tiki_sdk.exceptions import NetworkError

logger = logging.getLogger(__name__)


class RequestsAdapter:
    """
    Send an ``Env`` over the wire with requests

    A fresh session is used for each call so the adapter holds no state and
    can be shared by any number of clients and threads. Retries are
    disabled.

    Example:
        >>> adapter = RequestsAdapter(pool_maxsize=4)
        >>> result = create_client(options, settings, adapter=adapter)
    """

    def __init__(self, pool_maxsize: int = 10) -> None:
        self.pool_maxsize = pool_maxsize

    def _create_session(self) -> requests.Session:
        """Create requests session with retries disabled"""
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})

        adapter = HTTPAdapter(
            pool_connections=1,
            pool_maxsize=self.pool_maxsize,
            max_retries=0,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _proxies(self, env: Env) -> Optional[Dict[str, str]]:
        proxy = (env.opts.get("adapter") or {}).get("proxy")
        if not proxy:
            return None
        return {"http": proxy, "https": proxy}

    def __call__(self, env: Env) -> Env:
        with self._create_session() as session:
            try:
                response = session.request(
                    method=env.method,
                    url=env.url,
                    params=env.query or None,
                    headers=env.headers or None,
                    data=env.body,
                    timeout=env.timeout,
                    proxies=self._proxies(env),
                )
            except requests.exceptions.Timeout as e:
                raise NetworkError.timeout(cause=e) from e
            except requests.exceptions.ConnectionError as e:
                raise NetworkError.connection_refused(
                    f"Connection error: {e}", cause=e
                ) from e

        logger.debug(
            f"{env.method} {env.url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )

        return replace(
            env,
            status=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, RequestsAdapter)
            and other.pool_maxsize == self.pool_maxsize
        )

    def __hash__(self) -> int:
        return hash((RequestsAdapter, self.pool_maxsize))
