"""JSON-file backed configuration store with dot-path access."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Awaitable, Dict, Iterator, Mapping, Optional, Tuple

from confstore.dotpath import delete_value, get_value, has_value, set_value
from confstore.models import StoreOptions
from confstore.paths import resolve_config_path
from confstore.storage.json_store import JSONStoreFile

logger = logging.getLogger(__name__)

_UNSET = object()


class ConfigStore:
    """Persistent key-value settings kept in one JSON file.

    Nothing is cached between calls: every read loads the file as it is on
    disk, and every mutation rewrites the whole file before returning. There
    is no locking, so two writers racing on the same file lose updates (last
    write wins).

    Unreadable JSON is treated as an empty store rather than an error. This
    keeps a damaged settings file from breaking the application, at the price
    of silently dropping its content on the next write.

    ``key in store`` tests a dot-path like :meth:`has`, while iterating yields
    top-level ``(key, value)`` pairs, so ``("a", 1) in store`` is always
    false. A handle is truthy even when its store is empty.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        project_name: Optional[str] = None,
        config_name: str = "config",
        defaults: Optional[Mapping[str, Any]] = None,
        use_async: bool = False,
        search_from: Path | str | None = None,
    ) -> None:
        options = StoreOptions(
            cwd=cwd,
            project_name=project_name,
            config_name=config_name,
            defaults=dict(defaults) if defaults is not None else None,
            use_async=use_async,
            search_from=search_from,
        )
        self._file = JSONStoreFile(
            resolve_config_path(
                cwd=options.cwd,
                project_name=options.project_name,
                config_name=options.config_name,
                search_from=options.search_from,
            )
        )
        self._defaults: Dict[str, Any] = dict(options.defaults or {})
        self._use_async = options.use_async
        if not self._use_async:
            self.merge_defaults()

    @classmethod
    def from_options(cls, options: StoreOptions | Mapping[str, Any]) -> "ConfigStore":
        if not isinstance(options, StoreOptions):
            options = StoreOptions.model_validate(options)
        return cls(**options.model_dump(exclude={"use_async"}), use_async=options.use_async)

    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def defaults(self) -> Dict[str, Any]:
        return dict(self._defaults)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r})"

    # Whole-store I/O

    def load_store(self) -> Any:
        return self._file.load()

    def save_store(self, store: Mapping[str, Any]) -> None:
        self._file.save(dict(store))

    async def load_store_async(self) -> Any:
        return await self._file.load_async()

    async def save_store_async(self, store: Mapping[str, Any]) -> None:
        await self._file.save_async(dict(store))

    def merge_defaults(self) -> None:
        """Persist defaults beneath whatever the file already holds."""
        self.save_store(self._with_defaults(self.load_store()))

    async def merge_defaults_async(self) -> None:
        await self.save_store_async(self._with_defaults(await self.load_store_async()))

    # Synchronous API

    def get(self, key: str, default: Any = None) -> Any:
        return get_value(self.load_store(), key, default)

    def set(self, key: str | Mapping[str, Any], value: Any = _UNSET) -> None:
        updates = self._updates(key, value)
        store = self._mutable(self.load_store())
        for path, item in updates.items():
            set_value(store, path, item)
        self.save_store(store)

    def has(self, key: str) -> bool:
        return has_value(self.load_store(), key)

    def delete(self, key: str) -> None:
        store = self._mutable(self.load_store())
        delete_value(store, key)
        self.save_store(store)

    def clear(self) -> None:
        self.save_store({})

    @property
    def size(self) -> int:
        store = self.load_store()
        return len(store) if isinstance(store, dict) else 0

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return True

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        store = self.load_store()
        snapshot = list(store.items()) if isinstance(store, dict) else []
        return iter(snapshot)

    # Asynchronous API

    async def get_async(self, key: str, default: Any = None) -> Any:
        return get_value(await self.load_store_async(), key, default)

    def set_async(self, key: str | Mapping[str, Any], value: Any = _UNSET) -> Awaitable[None]:
        # Validate eagerly so a bad call shape raises at the call site, not on await.
        return self._apply_async(self._updates(key, value))

    async def has_async(self, key: str) -> bool:
        return has_value(await self.load_store_async(), key)

    async def delete_async(self, key: str) -> None:
        store = self._mutable(await self.load_store_async())
        delete_value(store, key)
        await self.save_store_async(store)

    async def clear_async(self) -> None:
        await self.save_store_async({})

    async def _apply_async(self, updates: Dict[str, Any]) -> None:
        store = self._mutable(await self.load_store_async())
        for path, item in updates.items():
            set_value(store, path, item)
        await self.save_store_async(store)

    # Helpers

    def _with_defaults(self, store: Any) -> Dict[str, Any]:
        merged = dict(self._defaults)
        merged.update(self._mutable(store))
        return merged

    def _mutable(self, store: Any) -> Dict[str, Any]:
        if isinstance(store, dict):
            return store
        logger.warning(
            "Store at %s holds a %s, not an object; replacing it on write",
            self.path,
            type(store).__name__,
        )
        return {}

    @staticmethod
    def _updates(key: str | Mapping[str, Any], value: Any) -> Dict[str, Any]:
        if isinstance(key, str):
            if value is _UNSET:
                raise TypeError(f"set() for key {key!r} requires a value")
            return {key: value}
        if isinstance(key, Mapping):
            if value is not _UNSET:
                raise TypeError("set() takes no value when given a mapping of updates")
            for path in key:
                if not isinstance(path, str):
                    raise TypeError(
                        f"Expected mapping keys to be of type str, got {type(path).__name__}"
                    )
            return dict(key)
        raise TypeError(
            f"Expected `key` to be of type `str` or a mapping, got {type(key).__name__}"
        )
