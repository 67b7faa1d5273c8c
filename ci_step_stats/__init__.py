"""Per-OS duration statistics for a GitHub Actions job step."""

__version__ = "1.0.0"
