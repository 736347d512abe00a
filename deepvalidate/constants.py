"""Constants for deepvalidate."""

# Field metadata keys consulted for external field names, highest priority first
TAG_CONVENTIONS = ("json", "yaml", "form")

# Tag value that excludes a field from validation
SKIP_MARKER = "-"

# Separator used by the default path join
PATH_SEPARATOR = "."

# Environment variables
LOG_LEVEL_ENV = "DEEPVALIDATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
