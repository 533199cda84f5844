"""Response classes that serialize an envelope into each output format.

All classes take already JSON-compatible content (see
``fastapi.encoders.jsonable_encoder``) and only differ in how they write it.
"""

import json
import re
import xml.etree.ElementTree as ET
from typing import Any, Mapping, Optional

import yaml
from starlette.background import BackgroundTask
from starlette.responses import JSONResponse, Response

_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_JSONP_CALLBACK_PATTERN = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*")
_XML_TAG_PATTERN = re.compile(r"[A-Za-z_][\w.-]*")
# complement of the XML 1.0 Char production
_XML_INVALID_CHARS = re.compile(
    r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _dumps(content: Any, ensure_ascii: bool = False) -> str:
    return json.dumps(
        content,
        ensure_ascii=ensure_ascii,
        allow_nan=False,
        indent=None,
        separators=(",", ":"),
    )


class HTMLSafeJSONResponse(JSONResponse):
    """JSON with ``<``, ``>`` and ``&`` written as unicode escapes.

    Safe to embed in an HTML page; the default JSON output format.
    """

    def render(self, content: Any) -> bytes:
        return _dumps(content).translate(_HTML_ESCAPES).encode("utf-8")


class PureJSONResponse(JSONResponse):
    """JSON with HTML characters written literally."""

    def render(self, content: Any) -> bytes:
        return _dumps(content).encode("utf-8")


class AsciiJSONResponse(JSONResponse):
    """JSON with every non-ASCII character written as a unicode escape."""

    def render(self, content: Any) -> bytes:
        return _dumps(content, ensure_ascii=True).encode("utf-8")


class JSONPResponse(Response):
    """JSON wrapped in a JavaScript callback invocation.

    Without a callback, or with one that is not a plain (dotted) JavaScript
    identifier, the body is plain JSON.
    """

    def __init__(
        self,
        content: Any,
        callback: Optional[str] = None,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        background: Optional[BackgroundTask] = None,
    ) -> None:
        self.callback = (
            callback
            if callback and _JSONP_CALLBACK_PATTERN.fullmatch(callback)
            else None
        )
        media_type = "application/javascript" if self.callback else "application/json"
        super().__init__(content, status_code, headers, media_type, background)

    def render(self, content: Any) -> bytes:
        body = _dumps(content).translate(_HTML_ESCAPES)
        if self.callback:
            body = f"{self.callback}({body});"
        return body.encode("utf-8")


def _xml_tag(key: Any) -> str:
    tag = re.sub(r"[^\w.-]", "_", str(key))
    if not _XML_TAG_PATTERN.fullmatch(tag):
        tag = f"_{tag}"
    return tag


def _append_xml(element: ET.Element, value: Any) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _append_xml(ET.SubElement(element, _xml_tag(key)), item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _append_xml(ET.SubElement(element, "item"), item)
    elif value is None:
        return
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    else:
        element.text = _xml_text(str(value))


def _xml_text(text: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return _XML_INVALID_CHARS.sub("\ufffd", text)


class XMLResponse(Response):
    """XML document whose root element holds one child per envelope field.

    Mappings become nested elements, sequences become repeated ``<item>``
    elements and None becomes an empty element.
    """

    media_type = "application/xml"

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        background: Optional[BackgroundTask] = None,
        root_tag: str = "result",
    ) -> None:
        self.root_tag = root_tag
        super().__init__(content, status_code, headers, None, background)

    def render(self, content: Any) -> bytes:
        root = ET.Element(self.root_tag)
        _append_xml(root, content)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)


class YAMLResponse(Response):
    """YAML document, keys in envelope order."""

    media_type = "application/yaml"

    def render(self, content: Any) -> bytes:
        return yaml.safe_dump(
            content,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        ).encode("utf-8")
