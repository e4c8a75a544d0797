import json
import logging

from app.logging import JsonFormatter, MaskingFilter


def test_request_id_header_and_propagation(client):
    resp = client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"


def test_request_id_generated_when_missing(client):
    resp = client.get("/__ok")
    assert len(resp.headers.get("X-Request-ID")) == 32


def test_logs_include_request_id_attribute(client, caplog):
    caplog.set_level("INFO")
    resp = client.get("/__log", headers={"X-Request-ID": "rid-abc"})
    assert resp.status_code == 200
    assert any(getattr(r, "request_id", "") == "rid-abc" for r in caplog.records)


def test_request_completion_is_logged_with_timing(client, caplog):
    caplog.set_level("INFO")
    client.get("/api/products")
    done = [
        r.msg for r in caplog.records
        if isinstance(r.msg, dict) and r.msg.get("event") == "request.completed"
    ]
    assert done
    entry = done[-1]
    assert entry["method"] == "GET"
    assert entry["path"] == "/api/products"
    assert entry["status"] == 200
    assert isinstance(entry["duration_ms"], float)


def test_rejected_request_is_logged(client, caplog):
    caplog.set_level("INFO")
    client.get("/api/cart/unknown")
    rejected = [
        r.msg for r in caplog.records
        if isinstance(r.msg, dict) and r.msg.get("event") == "request.rejected"
    ]
    assert rejected and rejected[-1]["error"] == "NotFound"


def test_shipping_address_masked_in_info(monkeypatch, caplog):
    monkeypatch.setenv("APP_ENV", "testing")
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test")
    logger.info({"shippingAddress": {"street": "1 Loop Rd"}, "orderId": 7})
    record = next(r for r in caplog.records if r.name == "mask_test")
    assert record.msg["shippingAddress"] == "[REDACTED]"
    assert record.msg["orderId"] == 7


def test_sensitive_fields_visible_in_debug(monkeypatch, caplog):
    monkeypatch.setenv("APP_ENV", "development")
    caplog.set_level("DEBUG")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test_debug")
    logger.debug({"shipping_address": "1 Loop Rd"})
    record = next(r for r in caplog.records if r.name == "mask_test_debug")
    assert record.msg["shipping_address"] == "1 Loop Rd"


def test_json_formatter_merges_dict_messages():
    record = logging.LogRecord("shop", logging.INFO, __file__, 1, {"event": "x", "count": 2}, None, None)
    record.request_id = "rid"
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "x"
    assert line["count"] == 2
    assert line["request_id"] == "rid"
    assert line["level"] == "INFO"
    assert "message" not in line
