import json
import threading
import time
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from surveillance.common.data_access import (
    STATE_READY,
    STATE_UNFETCHED,
    DataLoader,
    DocumentCache,
    FetchError,
    ParseError,
)


def _write_asset(root: Path, relative_path: str, text: str) -> None:
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _http_response(text: str = "", error: Exception | None = None) -> Mock:
    response = Mock()
    response.text = text
    response.raise_for_status = Mock(side_effect=error)
    return response


class TestDocumentCache:

    def test_second_get_reuses_first_fetch(self, document):
        fetch = Mock(return_value=document)
        cache = DocumentCache(fetch)

        first = cache.get()
        second = cache.get()

        assert fetch.call_count == 1
        assert first is second
        assert cache.state == STATE_READY

    def test_reset_forces_refetch(self, document):
        fetch = Mock(return_value=document)
        cache = DocumentCache(fetch)

        cache.get()
        cache.reset()

        assert cache.state == STATE_UNFETCHED
        cache.get()
        assert fetch.call_count == 2

    def test_failed_fetch_is_not_cached(self, document):
        fetch = Mock(side_effect=[FetchError("offline"), document])
        cache = DocumentCache(fetch)

        with pytest.raises(FetchError):
            cache.get()
        assert cache.state == STATE_UNFETCHED

        assert cache.get() is document
        assert fetch.call_count == 2

    def test_concurrent_first_calls_fetch_once(self, document):
        def slow_fetch():
            time.sleep(0.05)
            return document

        fetch = Mock(side_effect=slow_fetch)
        cache = DocumentCache(fetch)
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(cache.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert fetch.call_count == 1
        assert len(results) == 8
        assert all(result is document for result in results)

    def test_get_never_returns_none_during_reset(self, document):
        cache = DocumentCache(Mock(return_value=document))
        cache.get()
        results = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                results.append(cache.get())

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for thread in readers:
            thread.start()
        for _ in range(200):
            cache.reset()
        stop.set()
        for thread in readers:
            thread.join()

        assert results
        assert all(result is document for result in results)


class TestLocalDataLoader:

    def test_fetch_unified_document(self, loader):
        document = loader.fetch_unified_document()

        assert document["metadata"]["version"] == "2.0"
        assert set(document["data"]) == {"jakarta", "cirebon", "bogor", "jatim"}

    def test_missing_asset_raises_fetch_error(self, tmp_path):
        loader = DataLoader(base_url=str(tmp_path))

        with pytest.raises(FetchError):
            loader.fetch_unified_document()

    def test_invalid_json_raises_parse_error(self, tmp_path):
        _write_asset(tmp_path, "data/unified-data.json", "{not json")
        loader = DataLoader(base_url=str(tmp_path))

        with pytest.raises(ParseError):
            loader.fetch_unified_document()

    def test_wrong_shape_raises_parse_error(self, tmp_path):
        _write_asset(tmp_path, "data/unified-data.json", json.dumps({"metadata": {}, "data": {}}))
        loader = DataLoader(base_url=str(tmp_path))

        with pytest.raises(ParseError, match="missing sections"):
            loader.fetch_unified_document()

    def test_non_utf8_asset_raises_parse_error(self, tmp_path):
        path = tmp_path / "data" / "unified-data.json"
        path.parent.mkdir(parents=True)
        path.write_bytes(b'{"metadata": "\xff\xfe"}')
        loader = DataLoader(base_url=str(tmp_path))

        with pytest.raises(ParseError, match="UTF-8"):
            loader.fetch_unified_document()

    def test_top_level_array_raises_parse_error(self, tmp_path):
        _write_asset(tmp_path, "data/unified-data.json", "[]")
        loader = DataLoader(base_url=str(tmp_path))

        with pytest.raises(ParseError):
            loader.fetch_unified_document()

    def test_legacy_json_by_year(self, loader):
        payload = loader.fetch_legacy_json_by_year("2022")

        assert payload["total_file"] == 1
        assert len(payload["data"]) == 4

    def test_legacy_json_unknown_year(self, loader):
        with pytest.raises(FetchError):
            loader.fetch_legacy_json_by_year("2019")

    def test_delimited_text_keeps_strings_and_skips_blank_lines(self, loader):
        rows = loader.fetch_delimited_text("cirebon")

        assert len(rows) == 5
        assert rows[0]["bps_nama_kecamatan"] == "SUMBER"
        assert rows[0]["jumlah_kasus"] == "3"
        assert rows[-1]["jumlah_kasus"] == "-"

    def test_delimited_text_by_file_name(self, loader):
        rows = loader.fetch_delimited_text("bogor-wabah-lainnya.csv")

        assert [row["tahun"] for row in rows] == ["2021", "2020", "2020"]

    def test_empty_delimited_file(self, tmp_path):
        _write_asset(tmp_path, "data/empty.csv", "")
        loader = DataLoader(base_url=str(tmp_path))

        assert loader.fetch_delimited_text("empty.csv") == []

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DataLoader(config_path=tmp_path / "missing.yaml")


class TestRemoteDataLoader:

    def test_resolve_joins_base_url(self):
        loader = DataLoader(base_url="https://dashboard.example.org/app")

        assert loader.resolve("data/unified-data.json") == "https://dashboard.example.org/app/data/unified-data.json"

    def test_fetch_uses_session_with_timeout(self, unified_source):
        session = Mock()
        session.get.return_value = _http_response(json.dumps(unified_source))
        loader = DataLoader(base_url="https://dashboard.example.org/", timeout=3, session=session)

        document = loader.fetch_unified_document()

        assert document["metadata"]["title"] == unified_source["metadata"]["title"]
        session.get.assert_called_once_with("https://dashboard.example.org/data/unified-data.json", timeout=3)

    def test_http_error_status_raises_fetch_error(self):
        session = Mock()
        session.get.return_value = _http_response(error=requests.HTTPError("404 Client Error"))
        loader = DataLoader(base_url="https://dashboard.example.org/", session=session)

        with pytest.raises(FetchError, match="404"):
            loader.fetch_unified_document()

    def test_connection_error_raises_fetch_error(self):
        session = Mock()
        session.get.side_effect = requests.ConnectionError("connection refused")
        loader = DataLoader(base_url="https://dashboard.example.org/", session=session)

        with pytest.raises(FetchError):
            loader.fetch_unified_document()

    def test_html_fallback_page_raises_parse_error(self):
        session = Mock()
        session.get.return_value = _http_response("<!doctype html><html></html>")
        loader = DataLoader(base_url="https://dashboard.example.org/", session=session)

        with pytest.raises(ParseError):
            loader.fetch_unified_document()

    def test_cache_over_remote_loader_fetches_once(self, unified_source):
        session = Mock()
        session.get.return_value = _http_response(json.dumps(unified_source))
        loader = DataLoader(base_url="https://dashboard.example.org/", session=session)
        cache = DocumentCache(loader.fetch_unified_document)

        assert cache.get() is cache.get()
        assert session.get.call_count == 1
