import json
import logging

from recyclepro.logging_utils import JsonLogFormatter, log_event, truncate_text


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("recyclepro.test", logging.INFO, __file__, 1, "zone_matched", None, None)
    record.zone_id = "oradell-zone-1"
    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["event"] == "zone_matched"
    assert payload["level"] == "info"
    assert payload["module"] == "recyclepro.test"
    assert payload["data"] == {"zone_id": "oradell-zone-1"}


def test_log_event_passes_structured_data(caplog):
    logger = logging.getLogger("recyclepro.test")
    with caplog.at_level(logging.DEBUG, logger="recyclepro.test"):
        log_event(logger, "disposal_rule_applied", level=logging.DEBUG, rule_id="r1")
    assert caplog.records[-1].rule_id == "r1"
    assert caplog.records[-1].levelno == logging.DEBUG


def test_truncate_text():
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 100, max_len=10) == "x" * 10 + "..."
    assert truncate_text(None) == ""
