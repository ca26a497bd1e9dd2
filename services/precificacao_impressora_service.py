"""
Precificação de venda/locação de impressoras por prazo de contrato.

Cadeia de custo:
  entrada      = custo base ÷ (1 - ICMS compra) × (1 + IPI)
  operacionais → comissão → margem  (cada etapa multiplica o valor anterior)
  preço venda  = custo com margem ÷ (1 - alíquota de saída)

Alíquota de saída por regime:
  Simples Nacional : 6%  (Anexo I - Comércio)
  Lucro Presumido  : ICMS venda + PIS/COFINS + 1,2 (IRPJ + CSLL presumido)
  Lucro Real       : ICMS venda + PIS/COFINS + 2,5 (IRPJ + CSLL real)
"""

from typing import Dict

from models.entidades import PeriodoLocacao, PrinterPricing
from services.erros import PrecoIndefinidoError

# Fator de desconto sobre o preço de venda por prazo (meses)
PERIODOS_LOCACAO: Dict[int, float] = {
    12: 1.00,
    24: 0.92,
    36: 0.85,
    48: 0.80,
    60: 0.75,
}

PERIODO_DRE = 36


def aliquota_saida(regime_tributario: str, icms_venda: float, pis_cofins_saida: float) -> float:
    if regime_tributario == "Simples Nacional":
        return 6.0
    if regime_tributario == "Lucro Presumido":
        return icms_venda + pis_cofins_saida + 1.2
    if regime_tributario == "Lucro Real":
        return icms_venda + pis_cofins_saida + 2.5
    return 0.0


def _divide(a: float, b: float, oque: str) -> float:
    if b == 0:
        raise PrecoIndefinidoError(f"Divisão por zero ao calcular {oque}")
    return a / b


def calcular_precificacao(
    custo_base: float,
    margem_desejada: float = 25,
    regime_tributario: str = "Simples Nacional",
    icms_compra: float = 12,
    icms_venda: float = 18,
    ipi_compra: float = 0,
    pis_cofins_saida: float = 3.65,
    comissao_venda: float = 3,
    custos_operacionais: float = 8,
) -> dict:
    """
    Returns ``precificacao`` (PrinterPricing), ``breakdown`` and ``dre``.

    The DRE is built over the 36-month period.
    """
    custo_com_icms = _divide(custo_base, 1 - icms_compra / 100, "custo com ICMS")
    custo_entrada = custo_com_icms * (1 + ipi_compra / 100)

    aliquota = aliquota_saida(regime_tributario, icms_venda, pis_cofins_saida)

    custo_operacionais = custo_entrada * (1 + custos_operacionais / 100)
    custo_comissao = custo_operacionais * (1 + comissao_venda / 100)
    custo_margem = custo_comissao * (1 + margem_desejada / 100)
    preco_venda = _divide(custo_margem, 1 - aliquota / 100, "preço de venda")

    periodos = {}
    for meses, fator in PERIODOS_LOCACAO.items():
        valor_total = preco_venda * fator
        valor_mensal = valor_total / meses
        periodos[meses] = PeriodoLocacao(
            meses=meses,
            valorMensal=valor_mensal,
            valorTotal=valor_total,
            paybackMeses=_divide(custo_entrada, valor_mensal, "payback"),
            roi=_divide(valor_total - custo_entrada, custo_entrada, "ROI") * 100,
        )

    precificacao = PrinterPricing(
        custoBase=custo_base,
        margemDesejada=margem_desejada,
        regimeTributario=regime_tributario,
        icmsCompra=icms_compra,
        icmsVenda=icms_venda,
        ipiCompra=ipi_compra,
        pisCofinsSaida=pis_cofins_saida,
        comissaoVenda=comissao_venda,
        custosOperacionais=custos_operacionais,
        precoVendaSugerido=preco_venda,
        periodosLocacao=periodos,
    )

    breakdown = {
        "custoBase": custo_base,
        "custoTotalEntrada": custo_entrada,
        "custoComOperacionais": custo_operacionais,
        "custoComComissao": custo_comissao,
        "custoComMargem": custo_margem,
        "impostosSaida": preco_venda * aliquota / 100,
        "margemLiquida": preco_venda - custo_margem,
        "aliquotaImpostos": aliquota,
    }

    return {
        "precificacao": precificacao,
        "breakdown": breakdown,
        "dre": calcular_dre(
            periodos[PERIODO_DRE].valorTotal,
            aliquota,
            custo_entrada,
            custo_operacionais,
            custo_comissao,
        ),
    }


def calcular_dre(
    receita_bruta: float,
    aliquota: float,
    custo_entrada: float,
    custo_operacionais: float,
    custo_comissao: float,
) -> dict:
    """Simplified income statement (DRE) over one contract period."""
    impostos = receita_bruta * aliquota / 100
    receita_liquida = receita_bruta - impostos
    lucro_bruto = receita_liquida - custo_entrada
    despesas_operacionais = custo_operacionais - custo_entrada
    despesas_comissao = custo_comissao - custo_operacionais
    lucro_operacional = lucro_bruto - despesas_operacionais - despesas_comissao

    return {
        "receitaBruta": receita_bruta,
        "impostos": impostos,
        "receitaLiquida": receita_liquida,
        "custoMercadoria": custo_entrada,
        "lucroBruto": lucro_bruto,
        "despesasOperacionais": despesas_operacionais,
        "despesasComissao": despesas_comissao,
        "lucroOperacional": lucro_operacional,
        "lucroLiquido": lucro_operacional,
        "margemBruta": _divide(lucro_bruto, receita_bruta, "margem bruta") * 100,
        "margemLiquida": _divide(lucro_operacional, receita_bruta, "margem líquida") * 100,
    }
