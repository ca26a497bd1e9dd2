"""
Custos de mão de obra CLT.

  totalEncargos   = soma dos 10 percentuais de encargos sociais
  totalBeneficios = vale-transporte + plano de saúde + vale-alimentação (R$)
  custoHora       = (salário × (1 + encargos%) + benefícios) / (dias úteis × horas/dia)
  valorVendaHora  = custoHora × multiplicador de venda (1,66)
"""

import logging
from datetime import datetime

import config
from models.entidades import LaborCosts
from services.erros import PrecoIndefinidoError

logger = logging.getLogger(__name__)

ENCARGOS = (
    "ferias", "umTercoFerias", "decimoTerceiro",
    "inssBase", "inssSistemaS", "inssFeriasDecimo",
    "fgts", "fgtsFeriasDecimo", "multaFgtsRescisao",
    "outros",
)

BENEFICIOS = ("valeTransporte", "planoSaude", "valeAlimentacao")


def calcular_custos_mao_obra(mao_de_obra: LaborCosts) -> LaborCosts:
    """Recomputes the derived aggregates. Called on explicit save only."""
    total_encargos = sum(getattr(mao_de_obra, campo) for campo in ENCARGOS)
    total_beneficios = sum(getattr(mao_de_obra, campo) for campo in BENEFICIOS)

    horas_mes = mao_de_obra.diasUteisNoMes * mao_de_obra.horasPorDia
    if horas_mes == 0:
        raise PrecoIndefinidoError("Dias úteis × horas por dia é zero")

    custo_hora = (
        mao_de_obra.salarioBasePadrao * (1 + total_encargos / 100) + total_beneficios
    ) / horas_mes
    valor_venda_hora = custo_hora * config.MULTIPLICADOR_VENDA_HORA

    logger.info(
        "Mão de obra recalculada: encargos=%.2f%% custoHora=%.2f vendaHora=%.2f",
        total_encargos, custo_hora, valor_venda_hora,
    )
    return mao_de_obra.model_copy(update={
        "totalEncargos": total_encargos,
        "totalBeneficios": total_beneficios,
        "custoHora": custo_hora,
        "valorVendaHora": valor_venda_hora,
        "updatedAt": datetime.now(),
    })
