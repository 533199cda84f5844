"""Request-level resolution: which language to answer in, and whether
diagnostic detail may be attached to the response.
"""

from typing import Optional

import structlog
from infrastructure.i18n.models import LanguageSource, RequestSignals, ResolverConfig

logger = structlog.get_logger().bind(component="i18n.resolver")

PRODUCTION_RUN_ENV = "prod"


def parse_user_agent_language(user_agent: Optional[str]) -> Optional[str]:
    """Extract a ``lang=`` token from a ``;``-delimited client string.

    Each ``;`` separated part is split on its first ``=``. The key is
    matched case-insensitively, surrounding whitespace is ignored.

    Args:
        user_agent: User-Agent header value, e.g. "MyApp/1.0; lang=zh-CN".

    Returns:
        The language value, or None if there is no non-empty ``lang`` token.
    """
    if not user_agent:
        return None

    for part in user_agent.split(";"):
        key, sep, value = part.partition("=")
        if not sep:
            continue
        if key.strip().lower() == "lang" and value.strip():
            return value.strip()

    return None


class LanguageResolver:
    """Selects the language for a request.

    Sources are consulted in ``config.detection_order``; the first
    non-empty one wins:
    1. Explicit ``lang`` header, used verbatim
    2. ``lang=`` token in the User-Agent string
    3. The configured default language
    """

    def __init__(self, config: ResolverConfig):
        self.config = config
        self.log = logger.bind(
            detection_order=[source.value for source in config.detection_order]
        )

    def resolve(self, signals: Optional[RequestSignals] = None) -> str:
        """Resolve the language for ``signals``.

        The result is not checked against the catalog; unknown languages
        fall back to the default language at lookup time.
        """
        if signals is not None:
            for source in self.config.detection_order:
                language = self._from_source(source, signals)
                if language:
                    self.log.debug(
                        "language_resolved", source=source.value, language=language
                    )
                    return language

        default = self.config.default_language
        self.log.debug("language_defaulted", language=default)
        return default

    @staticmethod
    def _from_source(source: LanguageSource, signals: RequestSignals) -> Optional[str]:
        match source:
            case LanguageSource.HEADER:
                return signals.language or None
            case LanguageSource.USER_AGENT:
                return parse_user_agent_language(signals.user_agent)
            case _:
                return None


class DebugResolver:
    """Decides whether error descriptions may be attached to responses.

    Precedence:
    1. A "prod" run environment never allows debug output
    2. Static debug mode allows it
    3. A non-empty ``debug`` request header allows it
    """

    def __init__(self, config: ResolverConfig):
        self.config = config

    def is_allowed(self, signals: Optional[RequestSignals] = None) -> bool:
        if self.config.run_env == PRODUCTION_RUN_ENV:
            return False

        if self.config.debug_mode:
            return True

        return bool(signals and signals.debug)
