# topmark:header:start
#
#   project      : oneconf
#   file         : exit_codes.py
#   file_relpath : src/oneconf/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used when configuration loading is fatal.

Both the library-level fatal sink (`oneconf.core.errors.fatal`) and the
``oneconf`` CLI map their failures onto these codes, so scripts can tell a
malformed value apart from a missing configuration file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for oneconf.

    Attributes:
        SUCCESS (int): Configuration loaded without errors.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line invocation of the ``oneconf`` tool.
        CONFIG_ERROR (int): A resolved value could not be converted to its field type.
        SOURCE_ERROR (int): The structured configuration file could not be read.

    Usage:
        ```python
        import subprocess
        from oneconf.core.exit_codes import ExitCode

        result = subprocess.run(["myapp", "--port", "x"])
        if result.returncode == ExitCode.CONFIG_ERROR:
            print("Bad configuration value.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    SOURCE_ERROR = 4
