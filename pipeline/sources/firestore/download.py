# pipeline/sources/firestore/download.py
#
# IO-only: page through a document-store collection and save it as one JSON
# file.
#
# Design decisions:
#   - Uses the Firestore REST "list documents" endpoint (pageSize/pageToken)
#     so the pipeline needs no Google SDK, only httpx.
#   - All pages are accumulated and written once, to a .tmp file renamed into
#     place at the end. A failed run never leaves a truncated export behind.
#   - HTTP errors propagate. An incomplete collection would silently drop
#     points from every report, which is worse than an aborted run.
#   - The client is injectable so tests can use httpx.MockTransport.
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from pipeline.log import log

_MAX_PAGES = 10_000


def download_colecao(
    documents_url: str,
    colecao: str,
    raw_dir: Path,
    *,
    token: str = "",
    timeout: int = 60,
    page_size: int = 300,
    client: httpx.Client | None = None,
) -> Path:
    """Download every document of ``colecao`` into ``raw_dir/<colecao>.json``.

    Args:
        documents_url: ``.../projects/<id>/databases/(default)/documents``.
        colecao:       Collection name (e.g. ``pontos_captacao``).
        raw_dir:       Output directory; created if missing.
        token:         Optional OAuth bearer token.
        timeout:       HTTP timeout per request in seconds.
        page_size:     Documents per page.
        client:        Optional pre-built client (tests).

    Returns:
        Path to the JSON file, shaped ``{"documents": [...]}``.

    Raises:
        httpx.HTTPStatusError: on any non-2xx response.
    """
    raw_dir.mkdir(parents=True, exist_ok=True)
    destino = raw_dir / f"{colecao}.json"
    tmp = destino.with_suffix(".json.tmp")

    headers = {"Authorization": f"Bearer {token}"} if token else {}
    own_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)

    documentos: list[dict[str, Any]] = []
    try:
        page_token: str | None = None
        for page in range(1, _MAX_PAGES + 1):
            params: dict[str, Any] = {"pageSize": page_size}
            if page_token:
                params["pageToken"] = page_token
            response = http.get(f"{documents_url}/{colecao}", params=params, headers=headers)
            response.raise_for_status()

            payload: dict[str, Any] = response.json()
            documentos.extend(payload.get("documents", []))
            page_token = payload.get("nextPageToken")
            if page % 10 == 0:
                log(f"  {colecao}: page {page}, {len(documentos):,} documents so far")
            if not page_token:
                break
    finally:
        if own_client:
            http.close()

    tmp.write_text(json.dumps({"documents": documentos}, ensure_ascii=False), encoding="utf-8")
    tmp.replace(destino)
    log(f"  {colecao}: {len(documentos):,} documents")
    return destino
