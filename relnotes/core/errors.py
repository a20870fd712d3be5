"""Exit codes for the CLI.

Every fatal condition of the notes command exits with ``USER_ERROR``; the
enum exists so the mapping from error kind to exit status stays in one place.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the command-line contract and must stay stable:
    - 0: Success, markdown written
    - 1: Any fatal condition (bad input, unknown version, network failure)
    """

    OK = 0
    USER_ERROR = 1
