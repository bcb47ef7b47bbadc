# pipeline/sources/firestore/parse.py
#
# Parse a document-store export (JSON) into staging DataFrames for
# dim_empreendimento and fato_ponto_captacao.
#
# Design decisions:
#   - Two input shapes are accepted:
#       * REST shape: {"documents": [{"name": ".../<id>", "fields": {...}}]}
#         where every field is a typed wrapper (stringValue, integerValue...).
#       * Plain shape: a bare array (or {"documents": [...]}) of flat dicts
#         carrying an "id" key, as produced by client-side exports.
#   - Field names are mapped from the store's camelCase to the snake_case
#     columns of schema.sql here, so validate never sees source naming.
#   - Timestamps become naive UTC datetimes (DuckDB TIMESTAMP); date-only
#     columns keep the UTC calendar date (the store saves form dates as UTC
#     midnight).
#   - Money columns are Float64; DECIMAL precision is enforced at DuckDB
#     load via schema.sql.
#   - Derived columns (valor_repassado, margem_lucro, data_termino) are
#     parsed as-is. validate recomputes them; parse stays structural.
from __future__ import annotations

import json
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import polars as pl

_FRACAO = re.compile(r"\.(\d{6})\d+")

SCHEMA_EMPREENDIMENTOS: dict[str, Any] = {
    "id": pl.Utf8,
    "nome": pl.Utf8,
    "responsavel": pl.Utf8,
    "observacoes": pl.Utf8,
    "criado_em": pl.Datetime("us"),
}

SCHEMA_PONTOS: dict[str, Any] = {
    "id": pl.Utf8,
    "nome_ponto": pl.Utf8,
    "cnpj": pl.Utf8,
    "endereco": pl.Utf8,
    "empreendimento_id": pl.Utf8,
    "responsavel": pl.Utf8,
    "valor_real": pl.Float64,
    "valor_fechado": pl.Float64,
    "percentual": pl.Float64,
    "valor_repassado": pl.Float64,
    "margem_lucro": pl.Float64,
    "data_inicio": pl.Date,
    "tempo_contrato": pl.Int64,
    "data_termino": pl.Date,
    "status": pl.Utf8,
    "criado_em": pl.Datetime("us"),
}


def parse_empreendimentos(raw_path: Path) -> pl.DataFrame:
    """Parse the ``empreendimentos`` export into a typed DataFrame."""
    rows = [
        {
            "id": doc_id,
            "nome": _texto(campos.get("nome")),
            "responsavel": _texto(campos.get("responsavel")),
            "observacoes": _texto(campos.get("observacoes")),
            "criado_em": _como_datetime(campos.get("criadoEm")),
        }
        for doc_id, campos in _documentos(raw_path)
    ]
    return pl.DataFrame(rows, schema=SCHEMA_EMPREENDIMENTOS)


def parse_pontos(raw_path: Path) -> pl.DataFrame:
    """Parse the ``pontos_captacao`` export into a typed DataFrame."""
    rows = [
        {
            "id": doc_id,
            "nome_ponto": _texto(campos.get("nomePonto")),
            "cnpj": _texto(campos.get("cnpj")),
            "endereco": _texto(campos.get("endereco")),
            "empreendimento_id": _texto(campos.get("empreendimentoId")),
            "responsavel": _texto(campos.get("responsavel")),
            "valor_real": _numero(campos.get("valorReal")),
            "valor_fechado": _numero(campos.get("valorFechado")),
            "percentual": _numero(campos.get("percentual")),
            "valor_repassado": _numero(campos.get("valorRepassado")),
            "margem_lucro": _numero(campos.get("margemLucro")),
            "data_inicio": _como_data(campos.get("dataInicio")),
            "tempo_contrato": _inteiro(campos.get("tempoContrato")),
            "data_termino": _como_data(campos.get("dataTermino")),
            "status": _texto(campos.get("status")),
            "criado_em": _como_datetime(campos.get("criadoEm")),
        }
        for doc_id, campos in _documentos(raw_path)
    ]
    return pl.DataFrame(rows, schema=SCHEMA_PONTOS)


def _documentos(raw_path: Path) -> list[tuple[str | None, dict[str, Any]]]:
    """Return (id, decoded fields) for every document in the export."""
    payload: Any = json.loads(raw_path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        records: list[dict[str, Any]] = payload.get("documents", [])
    else:
        records = list(payload)

    documentos: list[tuple[str | None, dict[str, Any]]] = []
    for record in records:
        if "fields" in record or "name" in record:
            nome = str(record.get("name", ""))
            doc_id = nome.rsplit("/", 1)[-1] or None
            campos = {k: decode_valor(v) for k, v in (record.get("fields") or {}).items()}
        else:
            doc_id = str(record["id"]) if record.get("id") else None
            campos = dict(record)
        documentos.append((doc_id, campos))
    return documentos


def decode_valor(valor: dict[str, Any]) -> Any:
    """Unwrap one typed REST value (stringValue, integerValue, ...)."""
    if "stringValue" in valor:
        return valor["stringValue"]
    if "integerValue" in valor:
        return int(valor["integerValue"])
    if "doubleValue" in valor:
        return float(valor["doubleValue"])
    if "booleanValue" in valor:
        return bool(valor["booleanValue"])
    if "timestampValue" in valor:
        return _parse_iso_datetime(valor["timestampValue"])
    if "mapValue" in valor:
        return {k: decode_valor(v) for k, v in (valor["mapValue"].get("fields") or {}).items()}
    if "arrayValue" in valor:
        return [decode_valor(v) for v in valor["arrayValue"].get("values", [])]
    if "referenceValue" in valor:
        return str(valor["referenceValue"]).rsplit("/", 1)[-1]
    return None


def _parse_iso_datetime(texto: str) -> datetime:
    # fromisoformat aceita no maximo 6 casas de fracao; o store manda ate 9.
    normalizado = _FRACAO.sub(r".\1", texto.strip().replace("Z", "+00:00"))
    dt = datetime.fromisoformat(normalizado)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _como_datetime(valor: Any) -> datetime | None:
    """Naive datetime in UTC, or None."""
    dt = _como_datetime_utc(valor)
    return dt.replace(tzinfo=None) if dt else None


def _como_datetime_utc(valor: Any) -> datetime | None:
    if valor is None or valor == "":
        return None
    if isinstance(valor, datetime):
        return valor.astimezone(timezone.utc) if valor.tzinfo else valor.replace(tzinfo=timezone.utc)
    if isinstance(valor, dict) and "seconds" in valor:
        # Timestamp serializado pelo SDK web: {"seconds": ..., "nanoseconds": ...}
        return datetime.fromtimestamp(int(valor["seconds"]), tz=timezone.utc)
    if isinstance(valor, str):
        # Texto fora de ISO-8601 vira null; validate descarta a linha.
        try:
            if len(valor.strip()) == 10:
                return datetime.combine(date.fromisoformat(valor.strip()), datetime.min.time(), tzinfo=timezone.utc)
            return _parse_iso_datetime(valor)
        except ValueError:
            return None
    return None


def _como_data(valor: Any) -> date | None:
    dt = _como_datetime(valor)
    return dt.date() if dt else None


def _texto(valor: Any) -> str | None:
    if valor is None:
        return None
    return str(valor)


def _numero(valor: Any) -> float | None:
    if valor is None or valor == "" or isinstance(valor, bool):
        return None
    try:
        return float(valor)
    except (TypeError, ValueError):
        return None


def _inteiro(valor: Any) -> int | None:
    numero = _numero(valor)
    return int(numero) if numero is not None else None
