# src/patternbook/facade.py
"""
Facade: one simple entry point in front of tightly coupled subsystems.

``CachedNetworking`` hides three collaborators behind ``run``:

- a ``requests`` session that fetches resources,
- a ``Cache`` that stores responses,
- a ``CacheCleaner`` that periodically evicts stale entries in the background.
"""

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

import requests
from requests.adapters import BaseAdapter

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

Completion = Callable[[Optional[bytes], Optional[requests.Response], Optional[Exception], bool], None]


@dataclass
class CacheEntry:
    response: requests.Response
    data: bytes
    stored_at: float


class Cache:
    """Thread-safe response cache keyed by URL."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, CacheEntry] = {}
        self._clock = clock
        self._lock = threading.Lock()

    def set(self, response: requests.Response, data: bytes, url: str) -> None:
        with self._lock:
            self._entries[url] = CacheEntry(response, data, self._clock())

    def get(self, url: str) -> Optional[Tuple[requests.Response, bytes]]:
        with self._lock:
            entry = self._entries.get(url)
        return (entry.response, entry.data) if entry else None

    def remove(self, url: str) -> None:
        with self._lock:
            self._entries.pop(url, None)

    def all_data(self) -> Dict[str, CacheEntry]:
        with self._lock:
            return dict(self._entries)

    def now(self) -> float:
        return self._clock()

    def __len__(self):
        with self._lock:
            return len(self._entries)


class CacheCleaner:
    """Sweeps stale entries out of a ``Cache`` every ``interval`` seconds."""

    def __init__(self, cache: Cache, interval: float = 10.0, max_age: float = 300.0):
        self.cache = cache
        self.interval = interval
        self.max_age = max_age
        self.sweep_count = 0
        self._thread = None
        self._stop_event = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def start_if_needed(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="cache-cleaner")
        self._thread.daemon = True
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.sweep()

    def sweep(self) -> int:
        """Remove entries older than ``max_age``; returns how many were removed."""
        now = self.cache.now()
        stale = [url for url, entry in self.cache.all_data().items()
                 if now - entry.stored_at > self.max_age]
        for url in stale:
            self.cache.remove(url)
        self.sweep_count += 1
        if stale:
            logger.info("Cache cleaner evicted %d stale entries", len(stale))
        return len(stale)


class CachedNetworking:
    def __init__(self, session: Optional[requests.Session] = None,
                 config: Optional[PlaygroundConfig] = None, cache: Optional[Cache] = None):
        self.config = config or PlaygroundConfig()
        self.session = session or requests.Session()
        self.cache = cache or Cache()
        self._cleaner = None

    @property
    def cleaner(self) -> CacheCleaner:
        # Created on first use
        if self._cleaner is None:
            self._cleaner = CacheCleaner(self.cache,
                                         interval=self.config.cache_cleaner_interval,
                                         max_age=self.config.cache_max_age)
        return self._cleaner

    def run(self, url: str, completion: Completion) -> None:
        """Serve ``url`` from the cache, or fetch it and cache a successful response."""
        cached = self.cache.get(url)
        if cached is not None:
            response, data = cached
            completion(data, response, None, True)
            return

        self.cleaner.start_if_needed()
        try:
            response = self.session.get(url, timeout=self.config.request_timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            completion(None, None, e, False)
            return

        if response.ok:
            self.cache.set(response, response.content, url)
        completion(response.content, response, None, False)

    def close(self) -> None:
        if self._cleaner is not None:
            self._cleaner.stop()
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def get(url: str, decode: Callable[[Any], T],
        callback: Callable[[Optional[T], Optional[Exception]], None],
        session: Optional[requests.Session] = None, timeout: float = 30.0) -> None:
    """
    Fetch ``url`` as JSON and hand ``decode(payload)`` to ``callback``.

    ``callback(result, None)`` on success and ``callback(None, error)`` on a
    transport, HTTP status, JSON or decoding error.
    """
    if session is None:
        with requests.Session() as owned:
            get(url, decode, callback, session=owned, timeout=timeout)
        return

    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        result = decode(response.json())
    except (requests.RequestException, ValueError, TypeError, KeyError) as e:
        callback(None, e)
        return
    callback(result, None)


class StaticAdapter(BaseAdapter):
    """Transport adapter serving canned bodies, for offline demos and tests."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.routes: Dict[str, Any] = dict(routes or {})
        self.hits: Dict[str, int] = {}

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.hits[request.url] = self.hits.get(request.url, 0) + 1
        response = requests.Response()
        response.url = request.url
        response.request = request
        if request.url in self.routes:
            body = self.routes[request.url]
            if not isinstance(body, (bytes, str)):
                body = json.dumps(body)
                response.headers["Content-Type"] = "application/json"
            response.status_code = 200
            response._content = body.encode("utf-8") if isinstance(body, str) else body
        else:
            response.status_code = 404
            response._content = b""
        response.encoding = "utf-8"
        return response

    def close(self):
        pass


@dataclass(frozen=True)
class Greeting:
    message: str

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Greeting":
        return cls(message=payload["message"])


def demo(config: PlaygroundConfig) -> None:
    adapter = StaticAdapter({"memory://api/hello": {"message": "hello"}})
    session = requests.Session()
    session.mount("memory://", adapter)

    def report(data, response, error, from_cache):
        print(f"status={response.status_code if response is not None else None} "
              f"cached={from_cache} bytes={len(data or b'')}")

    with CachedNetworking(session=session, config=config) as networking:
        networking.run("memory://api/hello", report)
        networking.run("memory://api/hello", report)
        networking.run("memory://api/missing", report)

        get("memory://api/hello", Greeting.from_json,
            lambda result, error: print(f"decoded={result} error={error}"), session=session)
