import json
import xml.etree.ElementTree as ET

import pytest
import yaml
from fastapi.testclient import TestClient

from api.router import api_router
from utils.tests import create_test_app


@pytest.fixture
def client(app_env):
    return TestClient(create_test_app(api_router))


def test_list_languages(client):
    response = client.get("/api/v1/languages")
    assert response.status_code == 200
    assert response.json()["data"] == {
        "languages": ["en-US", "zh-CN"],
        "default": "en-US",
        "count": 2,
    }


def test_list_languages_with_configured_default(client, monkeypatch):
    monkeypatch.setenv("I18N_DEFAULT_LANG", "zh-CN")
    response = client.get("/api/v1/languages")
    assert response.json()["data"]["default"] == "zh-CN"


def test_message_default_language(client):
    response = client.get("/api/v1/messages/0")
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 0
    assert body["msg"] == "ok"
    assert body["data"] is None


def test_message_with_params_from_user_agent_language(client):
    response = client.get(
        "/api/v1/messages/1000",
        params=[("params", "Seakee"), ("params", "18888888888")],
        headers={"User-Agent": "MyApp/2.1;lang=zh-CN"},
    )
    assert response.json()["msg"] == "你好,Seakee!你的账号是:18888888888"


def test_lang_header_beats_user_agent(client):
    response = client.get(
        "/api/v1/messages/-1",
        headers={"lang": "en-US", "User-Agent": "MyApp/2.1;lang=zh-CN"},
    )
    assert response.json()["msg"] == "System busy"


def test_unknown_language_falls_back_to_default(client):
    response = client.get("/api/v1/messages/-1", headers={"lang": "fr-FR"})
    assert response.json()["msg"] == "System busy"


def test_unknown_code_echoes_code(client):
    response = client.get("/api/v1/messages/9999")
    assert response.status_code == 200
    assert response.json()["msg"] == "9999"


def test_trace_id_from_request_header(client):
    response = client.get("/api/v1/messages/0", headers={"X-Request-ID": "trace-1"})
    assert response.headers["X-Request-ID"] == "trace-1"
    assert response.json()["trace"]["id"] == "trace-1"


def test_trace_id_generated(client):
    response = client.get("/api/v1/messages/0")
    trace_id = response.json()["trace"]["id"]
    assert trace_id
    assert response.headers["X-Request-ID"] == trace_id


def test_format_xml(client):
    response = client.get("/api/v1/messages/0", params={"format": "xml"})
    assert response.headers["content-type"] == "application/xml"
    root = ET.fromstring(response.content)
    assert root.findtext("code") == "0"
    assert root.findtext("msg") == "ok"


def test_format_yaml(client):
    response = client.get(
        "/api/v1/messages/-1", params={"format": "yaml"}, headers={"lang": "zh-CN"}
    )
    assert response.headers["content-type"] == "application/yaml"
    assert yaml.safe_load(response.content)["msg"] == "系统繁忙"


def test_format_ascii_json(client):
    response = client.get(
        "/api/v1/messages/-1", params={"format": "ascii_json"}, headers={"lang": "zh-CN"}
    )
    assert response.content.isascii()
    assert response.json()["msg"] == "系统繁忙"


def test_format_jsonp(client):
    response = client.get(
        "/api/v1/messages/0", params={"format": "jsonp", "callback": "cb"}
    )
    assert response.headers["content-type"] == "application/javascript"
    text = response.text
    assert text.startswith("cb(") and text.endswith(");")
    assert json.loads(text[3:-2])["msg"] == "ok"


def test_unknown_format_rejected(client):
    response = client.get("/api/v1/messages/0", params={"format": "csv"})
    assert response.status_code == 422


def test_non_integer_code_rejected(client):
    response = client.get("/api/v1/messages/abc")
    assert response.status_code == 422


def test_format_xml_with_control_characters_in_params(client):
    response = client.get(
        "/api/v1/messages/1000",
        params=[("format", "xml"), ("params", "a\x01b"), ("params", "c")],
    )
    assert response.status_code == 200
    root = ET.fromstring(response.content)
    assert root.findtext("msg") == "Hello,a\ufffdb! Your id is:c"
