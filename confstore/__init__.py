"""JSON-file backed configuration store with dot-path access."""
from .models import StoreOptions
from .paths import ConfigurationError, resolve_config_path
from .storage.json_store import JSONStoreFile
from .store import ConfigStore

__all__ = [
    "ConfigStore",
    "ConfigurationError",
    "JSONStoreFile",
    "StoreOptions",
    "resolve_config_path",
]
