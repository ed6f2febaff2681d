"""Infrastructure modules for the Stores API.

Centralized infrastructure components:
- i18n: .lang file parsing and translation lookup (Translate, TranslationFactory)
- operations: Operation results (OperationResult, OperationStatus)
- services: Dependency injection providers (SettingsDep, CatalogDep, TranslationFactoryDep)
"""
