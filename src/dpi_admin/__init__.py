"""DPI admin portal: permission core, admin sessions and audit log."""

__version__ = "0.1.0"
