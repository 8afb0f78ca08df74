"""Configuration defaults for vaultlinks.

Every CLI option falls back to the environment variable named here, then to
the default below.
"""

# Notes are discovered by this suffix
NOTE_EXTENSION = ".md"

VAULT_ENV = "VAULTLINKS_VAULT"
JOBS_ENV = "VAULTLINKS_JOBS"
LOG_LEVEL_ENV = "VAULTLINKS_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"
