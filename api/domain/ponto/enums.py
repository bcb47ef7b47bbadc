# api/domain/ponto/enums.py
from enum import Enum


class StatusPonto(str, Enum):
    ATIVO = "ativo"
    ENCERRADO = "encerrado"
