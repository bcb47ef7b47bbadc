# api/domain/empreendimento/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Empreendimento


class EmpreendimentoRepository(Protocol):
    def listar(self) -> list[Empreendimento]: ...
    def buscar_por_id(self, empreendimento_id: str) -> Empreendimento | None: ...
