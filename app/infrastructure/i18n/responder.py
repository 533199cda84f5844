"""Response envelope assembly.

The Responder combines language selection, message translation and debug
gating into a single envelope per response, and hands the envelope to one
of the renderers in ``infrastructure.i18n.rendering``.

Usage:
    @router.get("/ok")
    def ok(request: Request, responder: ResponderDep):
        return responder.json(request, 0, "success")

    @router.get("/greeting")
    def greeting(request: Request, responder: ResponderDep):
        return responder.json(
            request, 1000, WithParams(params=("Seakee", "18888888888"), data="test")
        )
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.i18n.models import (
    Envelope,
    Plain,
    RequestSignals,
    Trace,
    WithParams,
)
from infrastructure.i18n.rendering import (
    AsciiJSONResponse,
    HTMLSafeJSONResponse,
    JSONPResponse,
    PureJSONResponse,
    XMLResponse,
    YAMLResponse,
)
from infrastructure.i18n.resolvers import DebugResolver, LanguageResolver
from infrastructure.i18n.translator import Translator


class OutputFormat(str, Enum):
    """Serialization formats supported by Responder.render."""

    JSON = "json"
    JSONP = "jsonp"
    ASCII_JSON = "ascii_json"
    PURE_JSON = "pure_json"
    XML = "xml"
    YAML = "yaml"


class Responder:
    """Builds standardized response envelopes and renders them.

    Attributes:
        translator: Translator resolving message codes.
        language_resolver: Selects the language of a request.
        debug_resolver: Decides whether error descriptions are exposed.
    """

    def __init__(
        self,
        translator: Translator,
        language_resolver: Optional[LanguageResolver] = None,
        debug_resolver: Optional[DebugResolver] = None,
    ):
        self.translator = translator
        self.language_resolver = language_resolver or LanguageResolver(translator.config)
        self.debug_resolver = debug_resolver or DebugResolver(translator.config)

    def build_envelope(
        self,
        code: int,
        payload: Any = None,
        error: Any = None,
        signals: Optional[RequestSignals] = None,
    ) -> Envelope:
        """Assemble the envelope for a response.

        Args:
            code: Response code; also the message lookup key.
            payload: ``WithParams`` to substitute parameters into the message,
                ``Plain`` or any other value to echo as data unchanged.
            error: Error described in ``trace.desc`` when debug output is allowed.
            signals: Request signals for language and debug detection.

        Returns:
            A new Envelope. Every input has a defined fallback, so this
            never raises.
        """
        match payload:
            case WithParams(params=params, data=data):
                pass
            case Plain(data=data):
                params = ()
            case _:
                data, params = payload, ()

        signals = signals or RequestSignals()
        language = self.language_resolver.resolve(signals)
        msg = self.translator.translate(language, code, *params)

        desc = ""
        if error is not None and self.debug_resolver.is_allowed(signals):
            desc = str(error)

        return Envelope(
            code=code,
            msg=msg,
            trace=Trace(id=signals.trace_id or "", desc=desc),
            data=data,
        )

    def envelope_for(
        self, request: Request, code: int, payload: Any = None, error: Any = None
    ) -> Envelope:
        """Build the envelope for ``request`` and record the response code on it."""
        request.state.response_code = code
        return self.build_envelope(code, payload, error, RequestSignals.from_request(request))

    def _content(
        self, request: Request, code: int, payload: Any, error: Any
    ) -> Dict[str, Any]:
        return jsonable_encoder(self.envelope_for(request, code, payload, error).to_dict())

    def json(self, request: Request, code: int, payload: Any = None, error: Any = None) -> Response:
        """HTML-safe JSON response."""
        return HTMLSafeJSONResponse(self._content(request, code, payload, error))

    def jsonp(self, request: Request, code: int, payload: Any = None, error: Any = None) -> Response:
        """JSONP response using the ``callback`` query parameter."""
        return JSONPResponse(
            self._content(request, code, payload, error),
            callback=request.query_params.get("callback"),
        )

    def ascii_json(
        self, request: Request, code: int, payload: Any = None, error: Any = None
    ) -> Response:
        return AsciiJSONResponse(self._content(request, code, payload, error))

    def pure_json(
        self, request: Request, code: int, payload: Any = None, error: Any = None
    ) -> Response:
        return PureJSONResponse(self._content(request, code, payload, error))

    def xml(self, request: Request, code: int, payload: Any = None, error: Any = None) -> Response:
        return XMLResponse(self._content(request, code, payload, error))

    def yaml(self, request: Request, code: int, payload: Any = None, error: Any = None) -> Response:
        return YAMLResponse(self._content(request, code, payload, error))

    def render(
        self,
        request: Request,
        output_format: str,
        code: int,
        payload: Any = None,
        error: Any = None,
    ) -> Response:
        """Render the envelope in ``output_format``.

        Raises:
            ValueError: If ``output_format`` is not an OutputFormat value.
        """
        match OutputFormat(output_format):
            case OutputFormat.JSON:
                return self.json(request, code, payload, error)
            case OutputFormat.JSONP:
                return self.jsonp(request, code, payload, error)
            case OutputFormat.ASCII_JSON:
                return self.ascii_json(request, code, payload, error)
            case OutputFormat.PURE_JSON:
                return self.pure_json(request, code, payload, error)
            case OutputFormat.XML:
                return self.xml(request, code, payload, error)
            case OutputFormat.YAML:
                return self.yaml(request, code, payload, error)
