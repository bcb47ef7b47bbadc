# api/domain/ponto/entities.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from decimal import Decimal

from .derivacao import derivar_campos
from .enums import StatusPonto
from .formatacao import formatar_cnpj
from .value_objects import CamposDerivados, TermosContrato


@dataclass(frozen=True)
class PontoCaptacao:
    """Aggregate Root. Entradas (termos) e saidas (derivados) ficam separadas;
    derivados so sao produzidos por derivar_campos, nunca passados de fora."""

    id: str
    nome_ponto: str
    cnpj: str
    termos: TermosContrato
    status: StatusPonto = StatusPonto.ATIVO
    endereco: str = ""
    empreendimento_id: str = ""
    responsavel: str = ""
    valor_real: Decimal = Decimal("0")
    criado_em: datetime | None = None
    derivados: CamposDerivados = field(init=False)

    def __post_init__(self) -> None:
        nome = self.nome_ponto.strip()
        if not nome:
            raise ValueError("Nome do ponto nao pode ser vazio")
        object.__setattr__(self, "nome_ponto", nome)
        object.__setattr__(self, "cnpj", formatar_cnpj(self.cnpj))
        object.__setattr__(self, "derivados", derivar_campos(self.termos))

    @classmethod
    def novo(cls, id: str, nome_ponto: str, cnpj: str, hoje: date, **kwargs: object) -> PontoCaptacao:  # noqa: A002
        """Ponto recem-criado com os termos padrao (hoje, 12 meses, zero)."""
        return cls(id=id, nome_ponto=nome_ponto, cnpj=cnpj, termos=TermosContrato.padrao(hoje), **kwargs)  # type: ignore[arg-type]

    def com_termos(
        self,
        *,
        valor_fechado: Decimal | None = None,
        percentual: Decimal | None = None,
        data_inicio: date | None = None,
        tempo_contrato: int | None = None,
    ) -> PontoCaptacao:
        """Copia com as entradas informadas trocadas e os derivados recalculados."""
        termos = TermosContrato(
            valor_fechado=self.termos.valor_fechado if valor_fechado is None else valor_fechado,
            percentual=self.termos.percentual if percentual is None else percentual,
            data_inicio=self.termos.data_inicio if data_inicio is None else data_inicio,
            tempo_contrato=self.termos.tempo_contrato if tempo_contrato is None else tempo_contrato,
        )
        return replace(self, termos=termos)

    @property
    def valor_fechado(self) -> Decimal:
        return self.termos.valor_fechado

    @property
    def percentual(self) -> Decimal:
        return self.termos.percentual

    @property
    def data_inicio(self) -> date:
        return self.termos.data_inicio

    @property
    def tempo_contrato(self) -> int:
        return self.termos.tempo_contrato

    @property
    def valor_repassado(self) -> Decimal:
        return self.derivados.valor_repassado

    @property
    def margem_lucro(self) -> Decimal:
        return self.derivados.margem_lucro

    @property
    def data_termino(self) -> date:
        return self.derivados.data_termino

    @property
    def ativo(self) -> bool:
        return self.status is StatusPonto.ATIVO

    def vence_em(self, hoje: date, janela_dias: int = 30) -> bool:
        """Termino estritamente entre hoje e hoje + janela_dias."""
        return hoje < self.data_termino < hoje + timedelta(days=janela_dias)
