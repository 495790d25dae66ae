# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed event payload)
EXIT_CONFIG = 78  # Invalid configuration (e.g., rejected threshold inputs with --strict)
