# api/application/dtos/empreendimento_dto.py
from pydantic import BaseModel


class EmpreendimentoDTO(BaseModel):
    id: str
    nome: str
    responsavel: str
    observacoes: str
