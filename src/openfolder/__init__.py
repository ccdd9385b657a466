"""openfolder - open IDE selections in a file browser or shell.

By default, openfolder's internal logging is disabled when used as a library.
Library users can enable logging by calling openfolder.enable_logging().
"""

from openfolder.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
