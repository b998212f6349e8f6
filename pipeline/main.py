# pipeline/main.py
#
# Command-line entry point: computes the total asset value of a partner group.
#
# Design decisions:
#   - run_pipeline is the single computation entry point. It accepts a
#     PipelineConfig; when config.arquivo_socios is set the tree is loaded from
#     CSV (parse -> validate -> construir_arvore), otherwise the built-in
#     sample group from pipeline.amostra is used.
#   - Each step logs progress to stdout. No structured logging framework is used
#     because this is a batch job, not a long-running service.
#   - main() maps the expected failures (invalid document, malformed CSV row,
#     malformed tree) to exit status 1 after logging them. Anything else propagates.
#   - Documents are always masked in log lines and in the printed result.
#
# Invariant: a total is only printed when every document in the tree is valid.
from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

from api.domain.documento.errors import DocumentoInvalidoError
from api.domain.documento.value_objects import mascarar
from api.domain.patrimonio.entities import Socio
from api.domain.patrimonio.services import calcular_patrimonio_total, documentos_distintos
from pipeline.amostra import gerar_grupo
from pipeline.config import PipelineConfig, load_config
from pipeline.log import log
from pipeline.sources.socios.parse import parse_socios
from pipeline.sources.socios.validate import ParticipacaoInvalidaError, validate_socios
from pipeline.transform.arvore_societaria import ArvoreSocietariaError, construir_arvore


def carregar_arvore(arquivo: Path, separator: str = ";") -> Socio:
    """Load and build the ownership tree from a participations CSV."""
    log(f"Reading {arquivo.name}...")
    df = parse_socios(arquivo, separator=separator)
    log(f"  Parsed: {len(df):,} participacoes")

    df = validate_socios(df)
    log(f"  Validated: {len(df):,} participacoes")

    return construir_arvore(df)


def run_pipeline(config: PipelineConfig) -> tuple[Socio, Decimal]:
    """Build the partner tree and compute its total asset value.

    Args:
        config: Pipeline configuration.

    Returns:
        Tuple of (root partner, total rounded to 2 decimal places).

    Raises:
        DocumentoInvalidoError: if any document in the tree is invalid.
        ParticipacaoInvalidaError: if a CSV row has a bad TIPO or VALOR_TOTAL.
        ArvoreSocietariaError: if the CSV does not describe a single-rooted tree.
    """
    if config.arquivo_socios is not None:
        raiz = carregar_arvore(config.arquivo_socios, config.csv_separator)
    else:
        log("No PATRIMONIO_ARQUIVO_SOCIOS set, using sample group")
        raiz = gerar_grupo()

    log(f"Computing patrimonio of {mascarar(raiz.documento)}...")
    total = calcular_patrimonio_total(raiz)
    log(f"  {len(documentos_distintos(raiz)):,} distinct documents counted")
    return raiz, total


def main(config: PipelineConfig) -> int:
    """Run the pipeline and print the result. Returns the process exit status."""
    try:
        raiz, total = run_pipeline(config)
    except DocumentoInvalidoError as err:
        log(f"documento invalido {mascarar(err.documento)}", nivel="ERROR")
        return 1
    except (ParticipacaoInvalidaError, ArvoreSocietariaError) as err:
        log(str(err), nivel="ERROR")
        return 1

    sys.stdout.write(f"Valor total dos bens de {mascarar(raiz.documento)}: {total}\n")
    return 0


if __name__ == "__main__":
    cfg = load_config()
    sys.exit(main(cfg))
