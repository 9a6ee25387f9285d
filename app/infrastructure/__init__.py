"""Infrastructure modules for the dictionary service.

Centralized infrastructure components:
- configuration: Settings management (Settings, DictionarySettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale dictionary resolution (DictionaryResolver and collaborators)
- services: Dependency injection providers (SettingsDep, DictionaryResolverDep)
"""
