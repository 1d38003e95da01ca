"""Core services and cross-cutting concerns.

Import from the subpackages directly; ``dpi_admin.config`` imports
``core.constants``, so this package must stay free of imports.
"""
