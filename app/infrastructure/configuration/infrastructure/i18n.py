"""Message catalog and response envelope settings."""

from typing import Any, List

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

SUPPORTED_DETECTION_SOURCES = ("header", "user_agent")


class I18nSettings(InfrastructureSettings):
    """Message catalog, language detection and debug output configuration.

    Environment Variables:
        I18N_LANG_DIR: Directory holding one catalog file per language (default: ./lang)
        I18N_DEFAULT_LANG: Language used when a request names none (default: en-US)
        I18N_ENV_KEY: Name of the environment variable holding the run mode (default: RUN_MODE)
        I18N_DEBUG_MODE: Always attach error descriptions to responses (default: false)
        I18N_DETECTION_ORDER: JSON list of request language sources, in order
            of precedence (default: ["header", "user_agent"])

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        lang_dir = settings.i18n.LANG_DIR
        if settings.i18n.DEBUG_MODE:
            ...
        ```
    """

    LANG_DIR: str = Field(default="./lang", alias="I18N_LANG_DIR")
    DEFAULT_LANG: str = Field(default="en-US", alias="I18N_DEFAULT_LANG")
    ENV_KEY: str = Field(default="RUN_MODE", alias="I18N_ENV_KEY")
    DEBUG_MODE: bool = Field(default=False, alias="I18N_DEBUG_MODE")
    DETECTION_ORDER: List[str] = Field(
        default_factory=lambda: list(SUPPORTED_DETECTION_SOURCES),
        alias="I18N_DETECTION_ORDER",
    )

    @field_validator("DETECTION_ORDER", mode="before")
    @classmethod
    def validate_detection_order(cls, v: Any) -> Any:
        """Accept a comma separated string and reject unknown sources."""
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",") if part.strip()]
        if isinstance(v, (list, tuple)):
            unknown = [s for s in v if s not in SUPPORTED_DETECTION_SOURCES]
            if unknown:
                raise ValueError(
                    f"Unsupported language detection sources: {', '.join(map(str, unknown))}"
                )
        return v
