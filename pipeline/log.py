# pipeline/log.py
#
# Batch logger for the patrimonio CLI: one line per event, elapsed time since
# process start, optional level.
#
# Design decisions:
#   - Plain stdout with flush, no logging framework: this is a short batch run,
#     not a long-running service.
#   - Level is a free-form tag ("INFO", "ERROR"); INFO is omitted from the line
#     to keep the common case short.
#   - Callers must never pass a full CPF; mask with
#     api.domain.documento.value_objects.mascarar first.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str, *, nivel: str = "INFO") -> None:
    """Write `[patrimonio MM:SS] LEVEL: message` to stdout.

    INFO lines carry no level tag: `[patrimonio MM:SS] message`.
    """
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    prefixo = f"[patrimonio {minutes:02d}:{seconds:02d}]"
    if nivel != "INFO":
        prefixo += f" {nivel}:"
    sys.stdout.write(f"{prefixo} {message}\n")
    sys.stdout.flush()
