# api/application/services/export_service.py
from __future__ import annotations

import csv
import io
from datetime import date
from decimal import Decimal

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from api.domain.ponto.formatacao import formatar_data, formatar_moeda

from ..dtos.relatorio_dto import RelatorioDTO, RelatorioLinhaDTO

COLUNAS: tuple[str, ...] = (
    "Ponto",
    "CNPJ",
    "Responsavel",
    "Inicio",
    "Termino",
    "Valor Fechado",
    "Valor Repassado",
    "Margem Lucro",
    "Status",
)

_FORMATO_MOEDA_XLSX = '"R$" #,##0.00'
_FORMATO_DATA_XLSX = "DD/MM/YYYY"


class ExportService:
    def exportar_json(self, relatorio: RelatorioDTO) -> str:
        return relatorio.model_dump_json(indent=2)

    def exportar_csv(self, relatorio: RelatorioDTO) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(COLUNAS)
        for linha in relatorio.linhas:
            writer.writerow([
                linha.nome_ponto,
                linha.cnpj,
                linha.responsavel,
                formatar_data(date.fromisoformat(linha.data_inicio)),
                formatar_data(date.fromisoformat(linha.data_termino)),
                formatar_moeda(Decimal(linha.valor_fechado)),
                formatar_moeda(Decimal(linha.valor_repassado)),
                formatar_moeda(Decimal(linha.margem_lucro)),
                linha.status,
            ])
        totais = relatorio.totais
        writer.writerow([
            "Totais", "", "", "", "",
            formatar_moeda(Decimal(totais.faturado)),
            formatar_moeda(Decimal(totais.repassado)),
            formatar_moeda(Decimal(totais.lucro)),
            "",
        ])
        return output.getvalue()

    def exportar_xlsx(self, relatorio: RelatorioDTO) -> bytes:
        """Planilha 'Relatorio' com valores numericos (formatados so na exibicao)."""
        wb = Workbook()
        ws = wb.active
        ws.title = "Relatorio"

        ws.append(list(COLUNAS))
        for cell in ws[1]:
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = PatternFill(start_color="6366F1", end_color="6366F1", fill_type="solid")

        for linha in relatorio.linhas:
            ws.append(_linha_xlsx(linha))
            _formatar_linha(ws, ws.max_row)

        totais = relatorio.totais
        ws.append([
            "Totais", None, None, None, None,
            float(Decimal(totais.faturado)),
            float(Decimal(totais.repassado)),
            float(Decimal(totais.lucro)),
            None,
        ])
        _formatar_linha(ws, ws.max_row)
        for cell in ws[ws.max_row]:
            cell.font = Font(bold=True)

        for col, largura in zip("ABCDEFGHI", (30, 20, 22, 12, 12, 16, 16, 16, 12), strict=True):
            ws.column_dimensions[col].width = largura

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()


def _linha_xlsx(linha: RelatorioLinhaDTO) -> list[object]:
    return [
        linha.nome_ponto,
        linha.cnpj,
        linha.responsavel,
        date.fromisoformat(linha.data_inicio),
        date.fromisoformat(linha.data_termino),
        float(Decimal(linha.valor_fechado)),
        float(Decimal(linha.valor_repassado)),
        float(Decimal(linha.margem_lucro)),
        linha.status,
    ]


def _formatar_linha(ws: Worksheet, row: int) -> None:
    for col in ("D", "E"):
        ws[f"{col}{row}"].number_format = _FORMATO_DATA_XLSX
    for col in ("F", "G", "H"):
        ws[f"{col}{row}"].number_format = _FORMATO_MOEDA_XLSX
