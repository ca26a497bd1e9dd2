"""
Motor de precificação de TI - Vendas, Locação e Serviços.

Três estratégias distintas, mantidas separadas de propósito:

  Vendas   : gross-up  - margem, comissão e impostos são % do preço final
  Locação  : gross-up amortizado - mesmo gross-up sobre o custo mensal
             (aquisição ÷ prazo do contrato)
  Serviços : aditivo   - margem/comissão somadas ao custo; impostos apurados
             à parte (preço final = custo + margem)

Alíquota efetiva:
  vendas/locação : (PIS + COFINS + CSLL + IRPJ) × base presunção venda + ICMS
  serviços       : (PIS + COFINS + CSLL + IRPJ) × base presunção serviço + ISS
"""

import logging
from typing import Dict, Optional

import config
from models.entidades import (
    CostsExpenses,
    LaborCosts,
    PricingCalculation,
    ProductItem,
    TaxRegime,
)
from services.erros import ConfiguracaoNaoCarregadaError, PrecoIndefinidoError

logger = logging.getLogger(__name__)

# ── Alíquotas interestaduais de ICMS por UF de destino ──────────────────────
ICMS_INTERESTADUAL: Dict[str, float] = {
    "AC": 7, "AL": 7, "AP": 7, "AM": 7, "BA": 7, "CE": 7, "DF": 7, "ES": 7, "GO": 7, "MA": 7,
    "MT": 7, "MS": 7, "MG": 7, "PA": 7, "PB": 7, "PR": 7, "PE": 7, "PI": 7, "RJ": 12, "RN": 7,
    "RS": 7, "RO": 7, "RR": 7, "SC": 7, "SP": 12, "SE": 7, "TO": 7,
}

NOMES_ESTADOS: Dict[str, str] = {
    "AC": "Acre", "AL": "Alagoas", "AP": "Amapá", "AM": "Amazonas", "BA": "Bahia",
    "CE": "Ceará", "DF": "Distrito Federal", "ES": "Espírito Santo", "GO": "Goiás",
    "MA": "Maranhão", "MT": "Mato Grosso", "MS": "Mato Grosso do Sul", "MG": "Minas Gerais",
    "PA": "Pará", "PB": "Paraíba", "PR": "Paraná", "PE": "Pernambuco", "PI": "Piauí",
    "RJ": "Rio de Janeiro", "RN": "Rio Grande do Norte", "RS": "Rio Grande do Sul",
    "RO": "Rondônia", "RR": "Roraima", "SC": "Santa Catarina", "SP": "São Paulo",
    "SE": "Sergipe", "TO": "Tocantins",
}


def aliquota_interestadual(uf: str, tabela: Optional[Dict[str, float]] = None) -> float:
    tabela = ICMS_INTERESTADUAL if tabela is None else tabela
    return float(tabela.get((uf or "").upper(), config.ALIQUOTA_INTERESTADUAL_PADRAO))


def _zerado(estrategia: str) -> PricingCalculation:
    return PricingCalculation(
        strategy=estrategia, baseCost=0.0, marginCommission=0.0, taxes=0.0, finalPrice=0.0
    )


class MotorPrecificacao:
    """
    Pricing engine bound to one configuration snapshot.

    The snapshot (tax regime, costs, labor) is injected once and never
    mutated; every calculation is a pure function of its arguments and
    the snapshot.
    """

    def __init__(
        self,
        regime: TaxRegime,
        custos: CostsExpenses,
        mao_de_obra: Optional[LaborCosts] = None,
    ):
        self.regime = regime
        self.custos = custos
        self.mao_de_obra = mao_de_obra

    # ── alíquotas efetivas ───────────────────────────────────────────────
    def _federais(self) -> float:
        r = self.regime
        return r.pis + r.cofins + r.csll + r.irpj

    def aliquota_venda(self) -> float:
        """Effective tax rate (% of revenue) for goods: sales and rental."""
        return self._federais() * self.regime.basePresuncaoVenda / 100 + self.regime.icms

    def aliquota_servico(self) -> float:
        """Effective tax rate (% of revenue) for services."""
        return self._federais() * self.regime.basePresuncaoServico / 100 + self.regime.iss

    def _gross_up(self, base: float, margem: float, comissao: float, estrategia: str) -> PricingCalculation:
        aliquota = self.aliquota_venda()
        markup = margem + comissao
        denominador = 1 - (markup + aliquota) / 100
        if denominador == 0:
            raise PrecoIndefinidoError(
                f"Margem {margem}% + comissão {comissao}% + impostos {aliquota}% somam 100%"
            )
        preco = base / denominador
        return PricingCalculation(
            strategy=estrategia,
            baseCost=base,
            marginCommission=preco * markup / 100,
            taxes=preco * aliquota / 100,
            finalPrice=preco,
        )

    # ── Vendas ───────────────────────────────────────────────────────────
    def calcular_preco_venda(
        self, unit_cost: float, quantity: float, desired_margin: float
    ) -> PricingCalculation:
        """
        Sales price by gross-up.

        finalPrice = baseCost / (1 - (margin + sales commission + tax rate) / 100),
        so that margin+commission and taxes are percentages of the final price.
        """
        base = unit_cost * quantity
        if base == 0:
            return _zerado("gross-up")
        return self._gross_up(base, desired_margin, self.custos.comissaoVenda, "gross-up")

    def calcular_difal(
        self,
        item: ProductItem,
        destination_uf: str,
        icms_rates: Optional[Dict[str, float]] = None,
        is_final_consumer_contributor: bool = False,
    ) -> float:
        # DIFAL só se aplica a consumidor final contribuinte do ICMS
        if not is_final_consumer_contributor:
            return 0.0
        diferenca = item.icmsSalePercent - aliquota_interestadual(destination_uf, icms_rates)
        if diferenca <= 0:
            return 0.0
        return item.totalCost * diferenca / 100

    def calcular_icms_st(self, item: ProductItem, icms_sale_percent: float) -> float:
        """ICMS-ST: (base ST × alíquota) - ICMS próprio, base ST = custo × (1 + MVA)."""
        if not item.icmsST:
            return 0.0
        base_st = item.totalCost * (1 + config.MVA_ICMS_ST / 100)
        icms_st = base_st * icms_sale_percent / 100
        icms_proprio = item.totalCost * item.icmsSalePercent / 100
        return max(0.0, icms_st - icms_proprio)

    # ── Locação ──────────────────────────────────────────────────────────
    def calcular_preco_locacao(
        self,
        unit_value: float,
        quantity: float,
        contract_period: float,
        desired_margin: float,
    ) -> PricingCalculation:
        """Rental: the acquisition total is amortized per month, then grossed up."""
        total = unit_value * quantity
        if total == 0:
            return _zerado("amortized-gross-up")
        if contract_period == 0:
            raise PrecoIndefinidoError("Prazo de contrato zero na locação")
        base_mensal = total / contract_period
        return self._gross_up(
            base_mensal, desired_margin, self.custos.comissaoLocacao, "amortized-gross-up"
        )

    # ── Serviços ─────────────────────────────────────────────────────────
    def calcular_preco_servico(
        self,
        hourly_rate: Optional[float],
        total_hours: float,
        desired_margin: float,
    ) -> PricingCalculation:
        """
        Service price, additive model.

        When ``hourly_rate`` is None the labor configuration's sell rate per
        hour is used. Taxes are reported but not part of ``finalPrice``.
        """
        if hourly_rate is None:
            hourly_rate = self.mao_de_obra.valorVendaHora if self.mao_de_obra else 0.0
        base = hourly_rate * total_hours
        margem_comissao = base * (desired_margin + self.custos.comissaoServico) / 100
        impostos = (base + margem_comissao) * self.aliquota_servico() / 100
        return PricingCalculation(
            strategy="additive",
            baseCost=base,
            marginCommission=margem_comissao,
            taxes=impostos,
            finalPrice=base + margem_comissao,
        )


def criar_motor_configurado(
    regime: Optional[TaxRegime],
    custos: Optional[CostsExpenses],
    mao_de_obra: Optional[LaborCosts] = None,
) -> MotorPrecificacao:
    """
    Builds an engine from an explicit configuration snapshot.

    Raises ConfiguracaoNaoCarregadaError when the active regime or the costs
    configuration is missing; no default rates are ever substituted.
    """
    faltando = []
    if regime is None:
        faltando.append("Nenhum regime tributário ativo encontrado.")
    if custos is None:
        faltando.append("Configurações de custos não encontradas.")
    if faltando:
        logger.warning("Precificação bloqueada: %s", " ".join(faltando))
        raise ConfiguracaoNaoCarregadaError(faltando)
    return MotorPrecificacao(regime, custos, mao_de_obra)
