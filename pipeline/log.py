# pipeline/log.py
#
# Shared pipeline logger with elapsed time.
#
# Design decisions:
#   - Plain stdout with flush: the pipeline is a batch job, not a service.
#   - Warnings go to stderr with the same prefix so they survive stdout
#     redirection.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def _prefixo() -> str:
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    return f"[pipeline {minutes:02d}:{seconds:02d}]"


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    sys.stdout.write(f"{_prefixo()} {message}\n")
    sys.stdout.flush()


def warn(message: str) -> None:
    """Write a timestamped WARNING line to stderr."""
    sys.stderr.write(f"{_prefixo()} WARNING: {message}\n")
    sys.stderr.flush()
