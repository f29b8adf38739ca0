# src/linekit/utils/report.py
import sys

def describe_os_error(e: OSError) -> str:
    """Short human reason for an OSError, without the errno prefix."""
    return e.strerror or str(e)

def report_error(source: str, reason) -> None:
    """Writes '<source>: <reason>' to stderr."""
    if isinstance(reason, OSError):
        reason = describe_os_error(reason)
    print(f"{source}: {reason}", file=sys.stderr)

def report(message: str) -> None:
    print(message, file=sys.stderr)
