from __future__ import annotations

from pathlib import Path

from flask import Flask, current_app

from surveillance.common.data_access import DataLoader, DocumentCache

EXTENSION_KEY = "unified_document"


def init_document_cache(app: Flask, loader: DataLoader | None = None) -> DocumentCache:
    """Attach a per-app cache for the unified document."""
    if loader is None:
        loader = DataLoader(
            base_url=app.config["ASSET_BASE_URL"],
            config_path=Path(app.config["DATASETS_CONFIG_PATH"]),
            timeout=app.config["FETCH_TIMEOUT_SECONDS"],
        )
    cache = DocumentCache(loader.fetch_unified_document)
    app.extensions["data_loader"] = loader
    app.extensions[EXTENSION_KEY] = cache
    return cache


def get_data_loader() -> DataLoader:
    return current_app.extensions["data_loader"]


def get_document_cache() -> DocumentCache:
    return current_app.extensions[EXTENSION_KEY]
