"""Infrastructure modules for the i18n responder application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging setup and request context binding
- i18n: Message catalogs, language resolution and response envelopes
- services: Dependency injection providers (SettingsDep, ResponderDep)
"""
