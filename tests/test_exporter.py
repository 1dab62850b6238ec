"""
Tests for FeedExporter and write_feed_file.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from feedgen.core.feed import (
    ExportRequest,
    FeedExporter,
    FeedFormat,
    FileSink,
    write_feed_file,
)


@pytest.fixture
def exporter(tmp_path):
    return FeedExporter(root_path=tmp_path)


@pytest.fixture
def close_calls(monkeypatch):
    """Record every FileSink.close() call."""
    calls = []
    original_close = FileSink.close

    def tracking_close(self):
        calls.append(self.path)
        original_close(self)

    monkeypatch.setattr(FileSink, "close", tracking_close)
    return calls


@pytest.mark.parametrize("feed_format, filename", [
    (FeedFormat.CSV, "feed.csv"),
    (FeedFormat.XML, "feed.xml"),
    (FeedFormat.HEUREKA, "feed.xmlh"),
])
def test_export_writes_file_per_format(exporter, tmp_path, products, feed_format, filename):
    result = exporter.export(ExportRequest(directory="var/feeds", format=feed_format, products=products))

    assert result.success
    assert result.message is None
    assert result.path == str(tmp_path / "var" / "feeds" / filename)
    assert (tmp_path / "var" / "feeds" / filename).is_file()


def test_export_csv_content(exporter, products, read_feed):
    exporter.export(ExportRequest(directory="feeds", format=FeedFormat.CSV, products=products))
    assert read_feed("feeds", "feed.csv") == "A-1|Lamp|19.99\nB-2|Chair|45.5\n"


def test_unknown_format_falls_back_to_csv(exporter, tmp_path, products, read_feed):
    result = exporter.export(ExportRequest(directory="feeds", format="pdf", products=products))

    assert result.success
    assert read_feed("feeds", "feed.csv") == "A-1|Lamp|19.99\nB-2|Chair|45.5\n"
    assert not (tmp_path / "feeds" / "feed.pdf").exists()


def test_export_is_idempotent(exporter, make_product, read_feed):
    items = [make_product(sku="A", price="10", color="Red"), make_product(sku="B", price="0")]
    request = ExportRequest(directory="feeds", format=FeedFormat.HEUREKA, products=items)

    exporter.export(request)
    first = read_feed("feeds", "feed.xmlh")
    exporter.export(request)

    assert read_feed("feeds", "feed.xmlh") == first


def test_export_overwrites_previous_run(exporter, make_product, read_feed):
    exporter.export(ExportRequest("feeds", FeedFormat.CSV, [make_product(sku="A"), make_product(sku="B")]))
    exporter.export(ExportRequest("feeds", FeedFormat.CSV, [make_product(sku="C", name="Rug", price="3")]))
    assert read_feed("feeds", "feed.csv") == "C|Rug|3\n"


def test_directory_creation_failure(tmp_path, products):
    blocker = tmp_path / "root_is_a_file"
    blocker.write_text("")

    result = FeedExporter(root_path=blocker).export(
        ExportRequest(directory="feeds", format=FeedFormat.CSV, products=products)
    )

    assert not result.success
    assert result.message.startswith("Directory ")
    assert "creation error: " in result.message
    assert not (blocker / "feeds").exists()


def test_file_open_failure(exporter, tmp_path, products):
    (tmp_path / "feeds" / "feed.xml").mkdir(parents=True)

    result = exporter.export(ExportRequest(directory="feeds", format=FeedFormat.XML, products=products))

    assert not result.success
    assert result.message.startswith("Opening file ")


def test_write_failure_closes_sink_and_keeps_partial_file(exporter, close_calls, read_feed):
    items = [SimpleNamespace(sku="A", name="Lamp", price=Decimal("1")), SimpleNamespace(sku="B")]

    result = exporter.export(ExportRequest(directory="feeds", format=FeedFormat.CSV, products=items))

    assert not result.success
    assert result.message.startswith("CSV Feed File creation error: ")
    assert len(close_calls) == 1
    assert read_feed("feeds", "feed.csv") == "A|Lamp|1\nB|"


def test_successful_export_closes_sink_once(exporter, close_calls, products):
    exporter.export(ExportRequest(directory="feeds", format=FeedFormat.XML, products=products))
    assert len(close_calls) == 1


def test_unexpected_error_is_reported(exporter, monkeypatch, products, close_calls):
    def broken_writer(*args, **kwargs):
        raise RuntimeError("writer registry exploded")

    monkeypatch.setattr("feedgen.core.feed.exporter.get_writer", broken_writer)

    result = exporter.export(ExportRequest(directory="feeds", format=FeedFormat.CSV, products=products))

    assert not result.success
    assert result.message == "Unexpected error: writer registry exploded"
    assert len(close_calls) == 1


def test_heureka_base_url_from_exporter(tmp_path, make_product, read_feed):
    exporter = FeedExporter(root_path=tmp_path, base_url="https://shop.test")
    exporter.export(ExportRequest("feeds", FeedFormat.HEUREKA, [make_product(product_url="/a.html")]))
    assert "<URL>https://shop.test/a.html</URL>" in read_feed("feeds", "feed.xmlh")


def test_write_feed_file(tmp_path, products, read_feed):
    result = write_feed_file("out", "xml", iter(products), root_path=tmp_path)

    assert result.to_dict() == {"success": True, "path": str(tmp_path / "out" / "feed.xml")}
    assert read_feed("out", "feed.xml").count("<Product>") == 2


def test_exporter_defaults_to_cwd(tmp_path, monkeypatch, products):
    monkeypatch.chdir(tmp_path)
    result = FeedExporter().export(ExportRequest("feeds", FeedFormat.CSV, products))
    assert result.success
    assert (tmp_path / "feeds" / "feed.csv").is_file()


def test_export_accepts_generator(exporter, make_product, read_feed):
    items = (make_product(sku=sku, name="Lamp", price="1") for sku in "AB")

    result = exporter.export(ExportRequest("feeds", FeedFormat.CSV, items))

    assert result.success
    assert read_feed("feeds", "feed.csv") == "A|Lamp|1\nB|Lamp|1\n"


def test_invalid_directory_is_reported(exporter):
    result = exporter.export(ExportRequest(None, FeedFormat.CSV, []))

    assert not result.success
    assert result.message.startswith("Unexpected error: ")
