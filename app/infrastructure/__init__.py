"""Infrastructure modules for the translation resolver.

Centralized infrastructure components:
- i18n: Locale resolution, translation file discovery and lookup
"""
