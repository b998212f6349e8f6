# pipeline/config.py
#
# Pipeline configuration loaded from environment variables.
#
# Design decisions:
#   - Uses a frozen dataclass (not pydantic Settings) because the pipeline is a
#     standalone offline process and pydantic is reserved for the API layer.
#   - arquivo_socios is optional: without it the CLI computes the built-in
#     sample group (pipeline.amostra).
#   - Relative paths are resolved against the current working directory.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration.

    Invariants:
      - arquivo_socios is None or an absolute Path.
      - csv_separator is a single character.
    """

    arquivo_socios: Path | None = None
    csv_separator: str = ";"


def load_config() -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if PATRIMONIO_CSV_SEPARATOR is not exactly one character.
    """
    arquivo_raw = os.environ.get("PATRIMONIO_ARQUIVO_SOCIOS", "").strip()
    arquivo = Path(arquivo_raw).resolve() if arquivo_raw else None

    separator = os.environ.get("PATRIMONIO_CSV_SEPARATOR", ";")
    if len(separator) != 1:
        raise ValueError(
            "PATRIMONIO_CSV_SEPARATOR must be a single character, "
            f"got {separator!r}."
        )

    return PipelineConfig(arquivo_socios=arquivo, csv_separator=separator)
