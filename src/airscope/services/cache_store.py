"""Namespaced TTL cache with fresh and stale reads.

Entries are serialized with orjson as ``{"data", "timestamp", "ttl"}``
(timestamp in epoch milliseconds) and kept in an injected key-value store.
Expired entries are never returned by ``get`` but remain available to
``get_stale`` until overwritten or purged, so the gateway can fall back to
the last known value when the upstream is unavailable.
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel, Field, ValidationError

from airscope.config.models import CacheSettings
from airscope.shared.constants import MS_PER_SECOND, CacheConfig, FileSystem
from airscope.shared.errors import (
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
)
from airscope.shared.logging import log_operation_error
from airscope.shared.protocols import KeyValueStore

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    """Schema for stored entries.

    Attributes:
        data: The cached payload (JSON-compatible).
        timestamp: Write time in epoch milliseconds.
        ttl: Lifetime in seconds.
    """

    data: Any = Field(..., description="The cached data payload")
    timestamp: int = Field(..., ge=0, description="Write time (epoch ms)")
    ttl: int = Field(default=CacheConfig.DEFAULT_TTL, ge=0, description="Lifetime in seconds")

    def is_fresh(self, now_ms: int) -> bool:
        return now_ms - self.timestamp < self.ttl * MS_PER_SECOND


class InMemoryKeyValueStore:
    """Dict-backed store; the default for tests and one-shot CLI runs."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))


class JSONFileKeyValueStore:
    """One JSON file per key under a directory.

    File names are SHA-256 hashes of the key; the key itself is stored in
    the file so ``keys()`` can enumerate the store.

    Args:
        directory: Cache directory, created if missing.

    Raises:
        InfrastructureError: If the directory cannot be created.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = InfrastructureError(
                code=ErrorCode.CACHE_WRITE_FAILED,
                message=f"Cannot create cache directory: {self.directory}",
                context=ErrorContext(
                    operation="initialize_cache",
                    file_path=str(self.directory),
                ),
                original_error=e,
            )
            log_operation_error(logger, error)
            raise error from e

    def _path_for(self, key: str) -> Path:
        key_hash = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{key_hash}{CacheConfig.FILE_SUFFIX}"

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            wrapper = orjson.loads(path.read_bytes())
        except OSError as e:
            raise InfrastructureError(
                code=ErrorCode.CACHE_READ_FAILED,
                message=f"Failed to read cache file for key '{key}'",
                context=ErrorContext(operation="cache_get", file_path=str(path)),
                original_error=e,
            ) from e
        except orjson.JSONDecodeError as e:
            backup = path.with_suffix(CacheConfig.CORRUPTED_SUFFIX)
            path.replace(backup)
            error = DomainError(
                code=ErrorCode.CACHE_CORRUPTED,
                message=f"Corrupted cache file moved to {backup.name}",
                context=ErrorContext(
                    operation="cache_get",
                    file_path=str(path),
                    additional_data={"key": key},
                ),
                original_error=e,
            )
            log_operation_error(logger, error, level=logging.WARNING)
            return None
        if not isinstance(wrapper, dict) or "value" not in wrapper:
            return None
        return wrapper["value"]

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            path.write_bytes(orjson.dumps({"key": key, "value": value}))
        except OSError as e:
            raise InfrastructureError(
                code=ErrorCode.CACHE_WRITE_FAILED,
                message=f"Failed to write cache file for key '{key}'",
                context=ErrorContext(operation="cache_set", file_path=str(path)),
                original_error=e,
            ) from e

    def remove_item(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    def keys(self) -> Iterator[str]:
        for path in sorted(self.directory.glob(f"*{CacheConfig.FILE_SUFFIX}")):
            try:
                wrapper = orjson.loads(path.read_bytes())
            except (OSError, orjson.JSONDecodeError):
                logger.warning("Skipping unreadable cache file %s", path)
                continue
            if isinstance(wrapper, dict) and isinstance(wrapper.get("key"), str):
                yield wrapper["key"]


class CacheStore:
    """TTL cache over a key-value store with logical namespaces.

    Args:
        store: Backing store; defaults to an in-memory dict.
        default_ttl: Lifetime in seconds used when ``set`` gets no ttl.
        clock: Returns the current time in seconds; injectable for tests.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        default_ttl: int = CacheConfig.DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store: KeyValueStore = store if store is not None else InMemoryKeyValueStore()
        self.default_ttl = default_ttl
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * MS_PER_SECOND)

    @staticmethod
    def storage_key(namespace: str, key: str) -> str:
        """Key under which an entry is stored: ``<namespace>_<key>``.

        Raises:
            DomainError: If the namespace is unknown
        """
        if namespace not in CacheConfig.NAMESPACES:
            raise DomainError(
                code=ErrorCode.VALIDATION_ERROR,
                message=f"Invalid cache namespace: {namespace}",
                context=ErrorContext(
                    operation="storage_key",
                    additional_data={"namespace": namespace},
                ),
            )
        return f"{namespace}{CacheConfig.KEY_SEPARATOR}{key}"

    def _read_entry(self, storage_key: str) -> CacheEntry | None:
        try:
            raw = self.store.get_item(storage_key)
        except InfrastructureError as e:
            log_operation_error(logger, e, level=logging.WARNING)
            return None
        if raw is None:
            return None
        try:
            return CacheEntry.model_validate_json(raw)
        except ValidationError as e:
            error = DomainError(
                code=ErrorCode.CACHE_CORRUPTED,
                message=f"Discarding corrupted cache entry '{storage_key}'",
                context=ErrorContext(
                    operation="cache_get",
                    additional_data={"key": storage_key},
                ),
                original_error=e,
            )
            log_operation_error(logger, error, level=logging.WARNING)
            self.store.remove_item(storage_key)
            return None

    def get(self, namespace: str, key: str) -> Any | None:
        """Return the payload if the entry exists and is fresh."""
        entry = self._read_entry(self.storage_key(namespace, key))
        if entry is None or not entry.is_fresh(self._now_ms()):
            return None
        logger.debug("Cache hit for %s/%s", namespace, key)
        return entry.data

    def get_stale(self, namespace: str, key: str) -> Any | None:
        """Return the payload regardless of age (last-resort fallback)."""
        entry = self._read_entry(self.storage_key(namespace, key))
        return None if entry is None else entry.data

    def set(self, namespace: str, key: str, payload: Any, ttl: int | None = None) -> None:
        """Store a payload, replacing any existing entry.

        Write failures are logged and swallowed: a cache that cannot persist
        must not turn a successful fetch into a failure.

        Raises:
            DomainError: If the payload cannot be serialized to JSON
        """
        storage_key = self.storage_key(namespace, key)
        entry = CacheEntry(
            data=payload,
            timestamp=self._now_ms(),
            ttl=self.default_ttl if ttl is None else ttl,
        )
        try:
            serialized = orjson.dumps(entry.model_dump()).decode("utf-8")
        except TypeError as e:
            raise DomainError(
                code=ErrorCode.CACHE_SERIALIZATION_ERROR,
                message=f"Failed to serialize cache data for key '{storage_key}': {e!s}",
                context=ErrorContext(
                    operation="cache_set",
                    additional_data={"key": storage_key},
                ),
                original_error=e,
            ) from e

        try:
            self.store.set_item(storage_key, serialized)
        except InfrastructureError as e:
            log_operation_error(logger, e, level=logging.WARNING)

    def delete(self, namespace: str, key: str) -> None:
        self.store.remove_item(self.storage_key(namespace, key))

    def _keys_in(self, namespace: str | None) -> list[str]:
        namespaces: Iterable[str] = CacheConfig.NAMESPACES if namespace is None else (namespace,)
        prefixes = tuple(
            self.storage_key(name, "") for name in namespaces
        )
        return [key for key in self.store.keys() if key.startswith(prefixes)]

    def clear(self, namespace: str | None = None) -> int:
        """Remove every entry, or every entry of one namespace.

        Returns:
            Number of entries removed
        """
        keys = self._keys_in(namespace)
        for key in keys:
            self.store.remove_item(key)
        logger.info("Cleared %d cache entries", len(keys))
        return len(keys)

    def purge_expired(self) -> int:
        """Remove entries past their TTL.

        Purging gives up the stale fallback for those keys.

        Returns:
            Number of entries removed
        """
        now_ms = self._now_ms()
        removed = 0
        for key in self._keys_in(None):
            entry = self._read_entry(key)
            if entry is not None and not entry.is_fresh(now_ms):
                self.store.remove_item(key)
                removed += 1
        logger.info("Purged %d expired cache entries", removed)
        return removed


def create_cache_store(
    settings: CacheSettings,
    clock: Callable[[], float] = time.time,
) -> CacheStore:
    """Build a CacheStore for the configured backend."""
    store: KeyValueStore
    if settings.backend == FileSystem.CACHE_BACKEND_FILE:
        store = JSONFileKeyValueStore(settings.directory)
    else:
        store = InMemoryKeyValueStore()
    return CacheStore(store, default_ttl=settings.ttl, clock=clock)
