from .base import CollectingSink
from inidoc import Document, DiagLevel, LoggingSink, NullSink
import logging
import pytest


class TestLoggingSink:

    @pytest.mark.parametrize(
        "level,logging_level",
        [
            (DiagLevel.DEBUG, logging.DEBUG),
            (DiagLevel.INFO, logging.INFO),
            (DiagLevel.WARN, logging.WARNING),
            (DiagLevel.ERROR, logging.ERROR),
            (DiagLevel.CRITICAL, logging.CRITICAL),
            (DiagLevel.FATAL, logging.CRITICAL),
        ],
    )
    def test_level_mapping(self, caplog, level, logging_level):
        caplog.set_level(logging.DEBUG, logger="inidoc")
        LoggingSink()(level, "message")
        assert [(r.name, r.levelno, r.message) for r in caplog.records] == [
            ("inidoc", logging_level, "message")
        ]

    def test_levels_are_distinct(self):
        assert len(DiagLevel) == 6
        assert DiagLevel.FATAL is not DiagLevel.CRITICAL
        assert DiagLevel["FATAL"].name == "FATAL"

    def test_custom_logger(self, caplog):
        caplog.set_level(logging.DEBUG, logger="app.config")
        LoggingSink(logging.getLogger("app.config"))(DiagLevel.INFO, "hello")
        assert caplog.records[0].name == "app.config"

    def test_document_messages(self, caplog, tmp_path):
        caplog.set_level(logging.DEBUG, logger="inidoc")
        doc = Document(tmp_path / "missing.ini", sink=LoggingSink())
        doc.create_section("S")
        doc.create_section("s")
        assert [r.levelno for r in caplog.records] == [logging.INFO, logging.INFO]


class TestSinks:

    def test_null_sink_is_default(self):
        assert isinstance(Document().sink, NullSink)
        assert NullSink()(DiagLevel.FATAL, "ignored") is None

    def test_sink_is_shared_with_parser(self):
        sink = CollectingSink()
        doc = Document(sink=sink)
        doc.loads("[A]\n[a]\n")
        assert sink.messages[0][0] is DiagLevel.INFO
        assert "Merging" in sink.messages[0][1]
