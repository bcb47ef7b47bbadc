# api/domain/ponto/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import PontoCaptacao


class PontoRepository(Protocol):
    def listar(self) -> list[PontoCaptacao]: ...
    def buscar_por_id(self, ponto_id: str) -> PontoCaptacao | None: ...
    def buscar_por_nome_ou_cnpj(self, query: str) -> list[PontoCaptacao]: ...
