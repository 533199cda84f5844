"""Data structures for the i18n system.

Defines message catalogs, the resolver configuration, the per-request
signals used for language and debug detection, and the response envelope.
"""

import json
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import yaml

from infrastructure.i18n.errors import EmptyCatalogError, LoadError
from infrastructure.logging import get_correlation_id

if TYPE_CHECKING:
    from starlette.requests import Request

DEFAULT_LANGUAGE = "en-US"

LANG_HEADER = "lang"
DEBUG_HEADER = "debug"
USER_AGENT_HEADER = "user-agent"

YAML_SUFFIXES = (".yml", ".yaml")


class LanguageSource(str, Enum):
    """Places on a request a language can be read from."""

    HEADER = "header"
    USER_AGENT = "user_agent"


@dataclass(frozen=True)
class CatalogSource:
    """One language's messages, either inline or backed by a file.

    The language identifier is the source name without its extension
    (e.g., "zh-CN.json" -> "zh-CN").

    Attributes:
        name: Source name, usually the file name.
        content: Body text, when the source is not file-backed.
        path: File to read the body from when ``content`` is None.
    """

    name: str
    content: Optional[str] = None
    path: Optional[Path] = None

    @property
    def language(self) -> str:
        return Path(self.name).stem

    @property
    def is_yaml(self) -> bool:
        return Path(self.name).suffix.lower() in YAML_SUFFIXES

    def read(self) -> str:
        """Return the body text.

        Raises:
            LoadError: If the backing file cannot be read.
        """
        if self.content is not None:
            return self.content
        if self.path is None:
            raise LoadError(self.name, "source has neither content nor path")
        try:
            return Path(self.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(self.name, str(e)) from e

    def parse(self) -> Dict[str, str]:
        """Parse the body into a flat message code to template mapping.

        YAML is used for ``.yml``/``.yaml`` sources, JSON for everything else.

        Raises:
            LoadError: If the body is unreadable, malformed, not an object,
                or holds a non-string template.
        """
        body = self.read()
        try:
            data = yaml.safe_load(body) if self.is_yaml else json.loads(body)
        except (ValueError, yaml.YAMLError) as e:
            raise LoadError(self.name, f"invalid content: {e}") from e

        if data is None and self.is_yaml:
            data = {}
        if not isinstance(data, dict):
            raise LoadError(self.name, "expected an object of message codes to templates")

        messages: Dict[str, str] = {}
        for key, value in data.items():
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise LoadError(self.name, f"message code {key!r} is not a string")
            if not isinstance(value, str):
                raise LoadError(self.name, f"template for '{key}' is not a string")
            messages[str(key)] = value
        return messages


class Catalog:
    """Read-only store of message templates for every loaded language.

    Built once and never mutated afterwards, so it can be shared between
    concurrent requests without locking.
    """

    def __init__(self, messages: Mapping[str, Mapping[str, str]]):
        if not messages:
            raise EmptyCatalogError()
        self._messages: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                language: MappingProxyType(dict(templates))
                for language, templates in messages.items()
            }
        )

    @classmethod
    def build(
        cls, sources: Iterable[CatalogSource], location: Optional[str] = None
    ) -> "Catalog":
        """Build a catalog from one source per language.

        A later source for the same language replaces an earlier one.

        Args:
            sources: Catalog sources to parse.
            location: Where the sources came from, for error messages.

        Raises:
            LoadError: If any source cannot be read or parsed.
            EmptyCatalogError: If ``sources`` is empty.
        """
        messages: Dict[str, Dict[str, str]] = {}
        for source in sources:
            messages[source.language] = source.parse()

        if not messages:
            raise EmptyCatalogError(location)

        return cls(messages)

    def get(self, language: str) -> Optional[Mapping[str, str]]:
        """Return the templates for ``language``, or None if not loaded."""
        return self._messages.get(language)

    def languages(self) -> List[str]:
        return [language for language in self._messages if language]

    def __contains__(self, language: object) -> bool:
        return language in self._messages

    def __len__(self) -> int:
        return len(self._messages)


class ResolverConfig:
    """Language resolution and debug output configuration.

    ``default_language`` is the only field that changes after construction.
    Writes are serialized; readers see either the previous or the new value.

    Attributes:
        debug_mode: Attach error descriptions to every envelope.
        run_env: Run mode read from the environment; "prod" disables debug output.
        detection_order: Request language sources, in order of precedence.
    """

    def __init__(
        self,
        default_language: str = DEFAULT_LANGUAGE,
        debug_mode: bool = False,
        run_env: str = "",
        detection_order: Sequence[Union[str, LanguageSource]] = (
            LanguageSource.HEADER,
            LanguageSource.USER_AGENT,
        ),
    ):
        self._default_language = default_language
        self._lock = threading.Lock()
        self.debug_mode = debug_mode
        self.run_env = run_env
        self.detection_order: Tuple[LanguageSource, ...] = tuple(
            LanguageSource(source) for source in detection_order
        )

    @property
    def default_language(self) -> str:
        return self._default_language

    def set_default_language(self, language: str) -> bool:
        """Replace the default language. Empty values are ignored.

        Returns:
            True if the default language was replaced.
        """
        if not language:
            return False
        with self._lock:
            self._default_language = language
        return True


@dataclass(frozen=True)
class RequestSignals:
    """Request values consulted for language selection and debug output.

    Attributes:
        language: Explicit language header value.
        user_agent: Client identification string, scanned for ``lang=``.
        debug: Debug header value; any non-empty value requests debug output.
        trace_id: Identifier attached earlier in the request's processing.
    """

    language: str = ""
    user_agent: str = ""
    debug: str = ""
    trace_id: Optional[str] = None

    @classmethod
    def from_request(cls, request: "Request") -> "RequestSignals":
        """Extract signals from a Starlette/FastAPI request.

        The trace ID is taken from ``request.state.trace_id`` and falls back
        to the correlation ID bound in the logging context.
        """
        headers = request.headers
        trace_id = getattr(request.state, "trace_id", None) or get_correlation_id()
        return cls(
            language=headers.get(LANG_HEADER, ""),
            user_agent=headers.get(USER_AGENT_HEADER, ""),
            debug=headers.get(DEBUG_HEADER, ""),
            trace_id=trace_id,
        )


@dataclass(frozen=True)
class Plain:
    """Response data echoed as-is, with no message parameters."""

    data: Any = None


@dataclass(frozen=True)
class WithParams:
    """Response data plus positional parameters for the message template.

    Only ``data`` is echoed in the envelope; ``params`` are substituted
    into the resolved template.
    """

    params: Tuple[str, ...] = ()
    data: Any = None

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(str(p) for p in self.params))


Payload = Union[Plain, WithParams]


@dataclass(frozen=True)
class Trace:
    """Diagnostic information attached to an envelope."""

    id: str = ""
    desc: str = ""


@dataclass(frozen=True)
class Envelope:
    """Standardized response body.

    Attributes:
        code: Response code, also the message lookup key.
        msg: Resolved, formatted message.
        trace: Trace ID and, when debug output is permitted, the error description.
        data: Response payload.
    """

    code: int
    msg: str
    trace: Trace = field(default_factory=Trace)
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape shared by every output format."""
        return {
            "code": self.code,
            "msg": self.msg,
            "trace": {"id": self.trace.id, "desc": self.trace.desc},
            "data": self.data,
        }
