# api/infrastructure/pdf_generator.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from html import escape
from typing import TYPE_CHECKING

from api.domain.ponto.formatacao import formatar_data, formatar_moeda

if TYPE_CHECKING:
    from api.application.dtos.relatorio_dto import RelatorioDTO


def gerar_pdf_relatorio(relatorio: RelatorioDTO) -> bytes:
    """Generate a PDF for the filtered capture-point report.

    Raises RuntimeError if weasyprint is not installed.
    """
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install pontos-captacao[pdf]"
        raise RuntimeError(msg) from err

    html = build_html(relatorio)
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def build_html(relatorio: RelatorioDTO) -> str:
    gerado_em = datetime.fromisoformat(relatorio.gerado_em)
    linhas = "".join(
        f"<tr><td>{escape(p.nome_ponto)}</td><td>{escape(p.cnpj)}</td>"
        f"<td>{formatar_data(date.fromisoformat(p.data_inicio))}</td>"
        f"<td class=\"num\">{formatar_moeda(Decimal(p.valor_fechado))}</td>"
        f"<td class=\"num\">{formatar_moeda(Decimal(p.valor_repassado))}</td>"
        f"<td class=\"num\">{formatar_moeda(Decimal(p.margem_lucro))}</td>"
        f"<td>{escape(p.status)}</td></tr>"
        for p in relatorio.linhas
    )
    totais = relatorio.totais

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Relatorio de Pontos de Captacao</title>
<style>
    body {{ font-family: Arial, sans-serif; margin: 40px; font-size: 10px; color: #333; }}
    h1 {{ font-size: 16px; margin-bottom: 4px; }}
    .gerado {{ font-size: 9px; color: #888; margin-bottom: 16px; }}
    table {{ width: 100%; border-collapse: collapse; }}
    th, td {{ border: 1px solid #ddd; padding: 5px 7px; text-align: left; }}
    th {{ background-color: #6366f1; color: #fff; }}
    tfoot td {{ font-weight: bold; background-color: #f5f5f5; }}
    .num {{ text-align: right; }}
</style>
</head>
<body>
<h1>Relatorio de Pontos de Captacao</h1>
<p class="gerado">Gerado em: {formatar_data(gerado_em)} {gerado_em:%H:%M}</p>
<table>
    <thead>
        <tr><th>Ponto</th><th>CNPJ</th><th>Inicio</th><th>Faturado</th><th>Repassado</th><th>Lucro</th><th>Status</th></tr>
    </thead>
    <tbody>
        {linhas}
    </tbody>
    <tfoot>
        <tr><td>Totais</td><td></td><td></td>
        <td class="num">{formatar_moeda(Decimal(totais.faturado))}</td>
        <td class="num">{formatar_moeda(Decimal(totais.repassado))}</td>
        <td class="num">{formatar_moeda(Decimal(totais.lucro))}</td><td></td></tr>
    </tfoot>
</table>
</body>
</html>"""
