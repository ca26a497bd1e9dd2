"""
Configurações de precificação em memória: regimes tributários, custos e
despesas, e custos de mão de obra.

A loja garante que no máximo um regime fique ativo; o motor de
precificação apenas consome o regime ativo.
"""

import logging
from datetime import datetime
from typing import List, Optional

from models.entidades import CostsExpenses, LaborCosts, TaxRegime
from services.custos_mao_obra_service import calcular_custos_mao_obra
from services.erros import RegimeNaoEncontradoError
from services.motor_precificacao import MotorPrecificacao, criar_motor_configurado

logger = logging.getLogger(__name__)

REGIMES_INICIAIS = [
    {
        "id": "1", "name": "Lucro Presumido", "active": True,
        "pis": 0.65, "cofins": 3, "csll": 9, "irpj": 15, "icms": 18, "iss": 5,
        "basePresuncaoVenda": 8, "basePresuncaoServico": 32,
    },
    {
        "id": "2", "name": "Lucro Real", "active": False,
        "pis": 1.65, "cofins": 7.6, "csll": 9, "irpj": 15, "icms": 18, "iss": 5,
        "basePresuncaoVenda": 0, "basePresuncaoServico": 0,
    },
    {
        # Simples Nacional: alíquotas já são % da receita (base 100%)
        "id": "3", "name": "Simples Nacional", "active": False,
        "pis": 0.28, "cofins": 1.28, "csll": 0.35, "irpj": 0.38, "icms": 0.90, "iss": 2.0,
        "basePresuncaoVenda": 100, "basePresuncaoServico": 100,
    },
]

MAO_DE_OBRA_INICIAL = {
    "ferias": 8.33, "umTercoFerias": 2.78, "decimoTerceiro": 8.33,
    "inssBase": 20, "inssSistemaS": 7.8, "inssFeriasDecimo": 1.52,
    "fgts": 8, "fgtsFeriasDecimo": 1.56, "multaFgtsRescisao": 1.91, "outros": 1,
    "valeTransporte": 200, "planoSaude": 300, "valeAlimentacao": 550,
    "salarioBasePadrao": 5000, "diasUteisNoMes": 21, "horasPorDia": 8,
}


class ConfiguracaoStore:
    def __init__(self):
        self.regimes: List[TaxRegime] = [TaxRegime(**r) for r in REGIMES_INICIAIS]
        self.custos: Optional[CostsExpenses] = CostsExpenses()
        self.mao_de_obra: LaborCosts = calcular_custos_mao_obra(LaborCosts(**MAO_DE_OBRA_INICIAL))

    # ── regimes ──────────────────────────────────────────────────────────
    def regime_ativo(self) -> Optional[TaxRegime]:
        return next((r for r in self.regimes if r.active), None)

    def listar_regimes(self) -> List[TaxRegime]:
        return list(self.regimes)

    def obter_regime(self, regime_id: str) -> TaxRegime:
        for r in self.regimes:
            if r.id == regime_id:
                return r
        raise RegimeNaoEncontradoError(f"Regime {regime_id} não encontrado")

    def salvar_regime(self, regime: TaxRegime) -> TaxRegime:
        """Insert or replace by id. Saving an active regime deactivates the others."""
        regime = regime.model_copy(update={"updatedAt": datetime.now()})
        novos = []
        substituido = False
        for r in self.regimes:
            if r.id == regime.id:
                novos.append(regime)
                substituido = True
            elif regime.active and r.active:
                novos.append(r.model_copy(update={"active": False}))
            else:
                novos.append(r)
        if not substituido:
            novos.append(regime)
        self.regimes = novos
        logger.info("Regime %s (%s) salvo, ativo=%s", regime.id, regime.name, regime.active)
        return regime

    def ativar_regime(self, regime_id: str) -> TaxRegime:
        regime = self.obter_regime(regime_id)
        return self.salvar_regime(regime.model_copy(update={"active": True}))

    def desativar_regimes(self) -> None:
        self.regimes = [r.model_copy(update={"active": False}) for r in self.regimes]
        logger.info("Todos os regimes tributários desativados")

    # ── custos e mão de obra ─────────────────────────────────────────────
    def definir_custos(self, custos: Optional[CostsExpenses]) -> Optional[CostsExpenses]:
        if custos is not None:
            custos = custos.model_copy(update={"updatedAt": datetime.now()})
        self.custos = custos
        logger.info("Custos e despesas atualizados")
        return custos

    def salvar_mao_de_obra(self, mao_de_obra: LaborCosts) -> LaborCosts:
        self.mao_de_obra = calcular_custos_mao_obra(mao_de_obra)
        return self.mao_de_obra

    def motor(self) -> MotorPrecificacao:
        return criar_motor_configurado(self.regime_ativo(), self.custos, self.mao_de_obra)


store = ConfiguracaoStore()


def get_configuracao() -> ConfiguracaoStore:
    return store
