# pipeline/sources/firestore/validate.py
#
# Validate and clean the staging DataFrames parsed from the document store.
#
# Design decisions:
#   - Derived columns are NEVER trusted from the export. valor_repassado,
#     margem_lucro and data_termino are recomputed here from the inputs so no
#     stale derived value reaches DuckDB.
#   - The formulas and the CNPJ mask duplicate api/domain/ponto. Source of
#     truth: api/domain/ponto/derivacao.py and formatacao.py.
#   - Month arithmetic uses Polars offset_by("<n>mo"), which clamps to the
#     last day of the target month (31/01 + 1mo -> 28/02 or 29/02), the same
#     calendar semantics as relativedelta in the API.
#   - Missing inputs fall back to the form defaults (0 values, 12 months).
#     A point without data_inicio has no meaningful term and is dropped.
#   - Unknown status values are coerced to "ativo" (the form default) and
#     counted in the log.
#
# Invariants:
#   - id is non-null and unique; nome_ponto is non-blank.
#   - margem_lucro == valor_fechado - valor_repassado on every row.
#   - status is in {"ativo", "encerrado"}.
from __future__ import annotations

import polars as pl

from pipeline.log import log, warn

STATUS_VALIDOS: tuple[str, ...] = ("ativo", "encerrado")
TEMPO_CONTRATO_PADRAO = 12


def validate_empreendimentos(df: pl.DataFrame) -> pl.DataFrame:
    """Drop rows without id or name, trim names and dedup by id (first wins)."""
    antes = len(df)
    df = df.with_columns(pl.col("nome").str.strip_chars().alias("nome"))
    df = df.filter(pl.col("id").is_not_null() & pl.col("nome").is_not_null() & (pl.col("nome") != ""))
    df = df.unique(subset=["id"], keep="first", maintain_order=True)
    if len(df) < antes:
        warn(f"empreendimentos: {antes - len(df)} invalid or duplicated rows dropped")
    return df


def validate_pontos(df: pl.DataFrame) -> pl.DataFrame:
    """Clean pontos_captacao and recompute the derived columns.

    Steps applied:
        1. Trim nome_ponto; drop rows without id, nome_ponto or data_inicio.
        2. Deduplicate by id, keeping first occurrence.
        3. Fill missing inputs with the form defaults.
        4. Re-mask cnpj (digits only, max 14, progressive mask).
        5. Coerce status to {"ativo", "encerrado"}.
        6. Recompute valor_repassado, margem_lucro and data_termino.

    Args:
        df: DataFrame returned by parse_pontos().

    Returns:
        Cleaned DataFrame with the SCHEMA_PONTOS columns.
    """
    antes = len(df)

    # Step 1
    df = df.with_columns(pl.col("nome_ponto").str.strip_chars().alias("nome_ponto"))
    df = df.filter(
        pl.col("id").is_not_null()
        & pl.col("nome_ponto").is_not_null()
        & (pl.col("nome_ponto") != "")
        & pl.col("data_inicio").is_not_null()
    )

    # Step 2
    df = df.unique(subset=["id"], keep="first", maintain_order=True)
    if len(df) < antes:
        warn(f"pontos_captacao: {antes - len(df)} invalid or duplicated rows dropped")

    # Step 3
    df = df.with_columns(
        pl.col("valor_fechado").fill_null(0.0),
        pl.col("percentual").fill_null(0.0),
        pl.col("valor_real").fill_null(0.0),
        pl.col("tempo_contrato").fill_null(TEMPO_CONTRATO_PADRAO),
    )

    # Step 4
    df = df.with_columns(mascarar_cnpj(pl.col("cnpj")).alias("cnpj"))

    # Step 5
    status = pl.col("status").str.strip_chars().str.to_lowercase()
    invalidos = df.filter(~status.is_in(STATUS_VALIDOS) | status.is_null()).height
    if invalidos:
        warn(f"pontos_captacao: {invalidos} rows with unknown status coerced to 'ativo'")
    df = df.with_columns(
        pl.when(status.is_in(STATUS_VALIDOS)).then(status).otherwise(pl.lit("ativo")).alias("status")
    )

    # Step 6
    df = recalcular_derivados(df)
    log(f"  pontos_captacao: {len(df):,} rows validated")
    return df


def recalcular_derivados(df: pl.DataFrame) -> pl.DataFrame:
    """Overwrite the derived columns from valor_fechado, percentual, data_inicio, tempo_contrato."""
    repassado = pl.col("valor_fechado") * pl.col("percentual") / 100.0
    return df.with_columns(
        repassado.alias("valor_repassado"),
        (pl.col("valor_fechado") - repassado).alias("margem_lucro"),
        pl.col("data_inicio")
        .dt.offset_by(pl.format("{}mo", pl.col("tempo_contrato")))
        .alias("data_termino"),
    )


def mascarar_cnpj(col: pl.Expr) -> pl.Expr:
    """XX.XXX.XXX/XXXX-XX applied only up to the digits present."""
    digitos = col.fill_null("").str.replace_all(r"\D", "").str.slice(0, 14)
    n = digitos.str.len_chars()

    def _grupo(separador: str, inicio: int, tamanho: int) -> pl.Expr:
        return (
            pl.when(n > inicio)
            .then(pl.lit(separador) + digitos.str.slice(inicio, tamanho))
            .otherwise(pl.lit(""))
        )

    return pl.concat_str(
        [
            digitos.str.slice(0, 2),
            _grupo(".", 2, 3),
            _grupo(".", 5, 3),
            _grupo("/", 8, 4),
            _grupo("-", 12, 2),
        ]
    )
