"""Translation service for resolving message codes to formatted messages.

Core component of the i18n system: looks a code up in the catalog with a
fallback to the default language, and substitutes positional parameters
into the template printf-style.
"""

import re
from typing import List, Sequence, Union

from infrastructure.i18n.models import Catalog, ResolverConfig
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# printf conversion: flags, width, precision, verb
_PLACEHOLDER_PATTERN = re.compile(r"%[-+ #0]*\d*(?:\.\d+)?([a-zA-Z%])")


class Translator:
    """Service for translating message codes with parameter substitution.

    Lookups never fail: an unknown language falls back to the default
    language, and an unknown code (or a default language missing from the
    catalog) yields the code itself.

    Attributes:
        catalog: Read-only message catalog.
        config: Resolver configuration owning the default language.
    """

    def __init__(self, catalog: Catalog, config: ResolverConfig | None = None):
        """Initialize Translator.

        Args:
            catalog: Catalog built at startup.
            config: Resolver configuration (default: en-US, debug off).
        """
        self.catalog = catalog
        self.config = config or ResolverConfig()
        logger.info(
            "initialized_translator",
            default_language=self.config.default_language,
            languages=catalog.languages(),
        )

    @property
    def default_language(self) -> str:
        return self.config.default_language

    def set_language(self, language: str) -> None:
        """Change the default language for all subsequent lookups.

        An empty value leaves the current default unchanged.

        Args:
            language: New default language (e.g., "zh-CN").
        """
        if self.config.set_default_language(language):
            logger.info("default_language_changed", language=language)

    def translate(self, language: str, code: Union[int, str], *params: str) -> str:
        """Resolve a message code to a message in ``language``.

        Args:
            language: Language to translate to.
            code: Message code (usually a response code).
            *params: Positional parameters for the template.

        Returns:
            The formatted message, or ``str(code)`` if no template exists.

        Example:
            # "1000" maps to "Hello,%s! Your id is:%s"
            translator.translate("en-US", 1000, "Seakee", "18888888888")
            # -> "Hello,Seakee! Your id is:18888888888"
        """
        code = str(code)

        messages = self.catalog.get(language)
        if messages is None:
            messages = self.catalog.get(self.config.default_language) or {}

        template = messages.get(code)
        if template is None:
            return code

        if params:
            return self._interpolate(template, [str(p) for p in params], code=code)

        return template

    def count(self) -> int:
        """Number of loaded languages."""
        return len(self.catalog)

    def languages(self) -> List[str]:
        return self.catalog.languages()

    def has_language(self, language: str) -> bool:
        return language in self.catalog

    def _interpolate(self, template: str, params: Sequence[str], code: str) -> str:
        """Substitute ``params`` into ``template`` printf-style.

        When the placeholders do not line up with the parameters, each
        placeholder takes the next parameter as a string, placeholders left
        without one become ``%!<verb>(MISSING)`` and extra parameters are
        dropped.
        """
        try:
            return template % tuple(params)
        except (TypeError, ValueError) as e:
            logger.warning(
                "translation_format_mismatch",
                code=code,
                param_count=len(params),
                error=str(e),
            )

        remaining = iter(params)

        def _replace(match: re.Match) -> str:
            verb = match.group(1)
            if verb == "%":
                return "%"
            value = next(remaining, None)
            if value is None:
                return f"%!{verb}(MISSING)"
            return value

        return _PLACEHOLDER_PATTERN.sub(_replace, template)
