# api/domain/ponto/formatacao.py
#
# Formatacao para tela e exportacao (pt-BR).
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Context, Decimal

from .value_objects import como_decimal

_CENTAVOS = Decimal("0.01")
_NAO_DIGITO = re.compile(r"\D")

# (tamanho do grupo, separador que o antecede)
_GRUPOS_CNPJ: tuple[tuple[int, str], ...] = ((2, ""), (3, "."), (3, "."), (4, "/"), (2, "-"))
CNPJ_DIGITOS = 14


def formatar_moeda(valor: Decimal | int | float) -> str:
    """Real brasileiro: R$ 1.234,50. Negativos saem como -R$ 50,00."""
    numero = como_decimal(valor)
    # Precisao do contexto cobre todos os digitos inteiros mais os centavos.
    contexto = Context(prec=max(28, numero.adjusted() + 3))
    quantizado = numero.quantize(_CENTAVOS, rounding=ROUND_HALF_UP, context=contexto)
    sinal = "-" if quantizado < 0 else ""
    # Formata com separadores en-US e troca: "," -> ".", "." -> ","
    en_us = f"{quantizado.copy_abs():,.2f}"
    pt_br = en_us.replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sinal}R$ {pt_br}"


def formatar_data(data: date | datetime) -> str:
    """dd/mm/aaaa."""
    return data.strftime("%d/%m/%Y")


def formatar_cnpj(raw: str) -> str:
    """Aplica a mascara XX.XXX.XXX/XXXX-XX conforme os digitos vao sendo digitados.

    Qualquer caractere nao numerico e removido e o excedente apos o 14o digito
    e descartado. Um separador so aparece quando ja existe digito depois dele:
    "1234" -> "12.34", "1234567890123" -> "12.345.678/9012-3".
    """
    digitos = _NAO_DIGITO.sub("", raw)[:CNPJ_DIGITOS]
    partes: list[str] = []
    inicio = 0
    for tamanho, separador in _GRUPOS_CNPJ:
        grupo = digitos[inicio:inicio + tamanho]
        if not grupo:
            break
        partes.append(separador + grupo)
        inicio += tamanho
    return "".join(partes)
