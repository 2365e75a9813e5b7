"""Catalogue source tests: file and HTTP sources, payload shapes, failures."""

import json

import pytest

from bookshop.catalog import store
from bookshop.catalog.backend_service import extract_records
from bookshop.catalog.errors import FetchError
from bookshop.config import Settings


def test_bundled_sample_catalogue_loads():
    result = store.FileCatalogSource(Settings().catalog_file).fetch_catalog()
    assert result.ok
    assert result.error is None
    assert len(result.items) == 14
    assert result.items[0].owner_id == "1"


def test_file_source_unwraps_page_objects(tmp_path):
    path = tmp_path / "books.json"
    path.write_text(json.dumps({"content": [{"id": 1, "title": "A", "price": 5}]}), encoding="utf-8")
    result = store.FileCatalogSource(path).fetch_catalog()
    assert result.ok
    assert [i.title for i in result.items] == ["A"]


def test_file_source_skips_invalid_records(tmp_path):
    path = tmp_path / "books.json"
    records = [{"id": 1, "title": "A", "price": 5}, {"id": 2, "title": "B", "price": -3}, "junk"]
    path.write_text(json.dumps(records), encoding="utf-8")
    result = store.FileCatalogSource(path).fetch_catalog()
    assert [i.id for i in result.items] == ["1"]


def test_missing_file_is_a_failed_result(tmp_path):
    result = store.FileCatalogSource(tmp_path / "nope.json").fetch_catalog()
    assert not result.ok
    assert result.items == []
    assert "could not read" in result.error


def test_malformed_file_is_a_failed_result(tmp_path):
    path = tmp_path / "books.json"
    path.write_text("{not json", encoding="utf-8")
    result = store.FileCatalogSource(path).fetch_catalog()
    assert not result.ok


def test_extract_records_rejects_unknown_payload():
    with pytest.raises(FetchError):
        extract_records({"books": []})
    with pytest.raises(FetchError):
        extract_records("nope")


def test_http_source_converts_records(monkeypatch):
    def fake_fetch(url, timeout):
        assert url == "http://backend/api/books"
        return [{"id": 9, "title": "Sapiens", "price": 650, "user": {"id": 3}}]

    monkeypatch.setattr(store, "fetch_book_records", fake_fetch)
    result = store.HttpCatalogSource("http://backend/api/books").fetch_catalog()
    assert result.ok
    assert result.items[0].owner_id == "3"


def test_http_source_reports_failures(monkeypatch):
    def fake_fetch(url, timeout):
        raise FetchError("could not reach backend")

    monkeypatch.setattr(store, "fetch_book_records", fake_fetch)
    result = store.HttpCatalogSource("http://backend/api/books").fetch_catalog()
    assert not result.ok
    assert result.error == "could not reach backend"


def test_source_from_settings_prefers_url(tmp_path):
    http = store.source_from_settings(Settings(catalog_url="http://backend/api/books"))
    local = store.source_from_settings(Settings(catalog_url=None, catalog_file=tmp_path / "b.json"))
    assert isinstance(http, store.HttpCatalogSource)
    assert isinstance(local, store.FileCatalogSource)


def test_records_with_non_numeric_price_are_skipped(tmp_path):
    path = tmp_path / "books.json"
    path.write_text(json.dumps([{"id": 1, "price": [1]}, {"id": 2, "price": 3}]), encoding="utf-8")
    result = store.FileCatalogSource(path).fetch_catalog()
    assert result.ok
    assert [i.id for i in result.items] == ["2"]
