"""
Propostas comerciais em memória.

Ciclo de vida do status:
  draft → active → completed
  draft → cancelled, active → cancelled
  completed e cancelled são finais. Propostas nunca são apagadas.
"""

import logging
import time
from datetime import datetime
from typing import Dict, List, Optional

from models.entidades import Budget, ProposalData, ProposalInfo
from services.erros import PropostaNaoEncontradaError, TransicaoStatusInvalidaError

logger = logging.getLogger(__name__)

TRANSICOES: Dict[str, set] = {
    "draft": {"active", "cancelled"},
    "active": {"completed", "cancelled"},
    "completed": set(),
    "cancelled": set(),
}


def transicao_valida(atual: str, novo: str) -> bool:
    return novo == atual or novo in TRANSICOES.get(atual, set())


class PropostaStore:
    def __init__(self):
        self.propostas: List[ProposalData] = []
        self._sequencia = 0

    def _novo_id(self, prefixo: str) -> str:
        self._sequencia += 1
        return f"{prefixo}-{int(time.time() * 1000)}-{self._sequencia}"

    def _indice(self, proposta_id: str) -> int:
        for idx, p in enumerate(self.propostas):
            if p.id == proposta_id:
                return idx
        raise PropostaNaoEncontradaError(f"Proposta {proposta_id} não encontrada")

    def obter(self, proposta_id: str) -> ProposalData:
        return self.propostas[self._indice(proposta_id)]

    def _substituir(self, proposta: ProposalData) -> ProposalData:
        self.propostas[self._indice(proposta.id)] = proposta
        return proposta

    def criar_proposta(self, dados: ProposalInfo) -> ProposalData:
        proposta = ProposalData(**dados.model_dump(), id=self._novo_id("PROP"))
        self.propostas.append(proposta)
        logger.info("Proposta %s criada para %s", proposta.id, proposta.clientName)
        return proposta

    def atualizar_proposta(self, proposta_id: str, dados: dict) -> ProposalData:
        """
        Partial update of client/project/manager fields.

        The result is validated before it is stored; a bad value raises
        pydantic's ValidationError and leaves the proposal unchanged.
        """
        permitidos = set(ProposalInfo.model_fields)
        alteracoes = {k: v for k, v in dados.items() if k in permitidos}
        proposta = self.obter(proposta_id)
        return self._substituir(ProposalData.model_validate({
            **proposta.model_dump(),
            **alteracoes,
            "updatedAt": datetime.now(),
        }))

    def adicionar_orcamento(self, proposta_id: str, orcamento: Budget) -> ProposalData:
        """Attaches a budget; a draft proposal becomes active."""
        proposta = self.obter(proposta_id)
        if not transicao_valida(proposta.status, "active"):
            raise TransicaoStatusInvalidaError(proposta.status, "active")

        agora = datetime.now()
        orcamento = orcamento.model_copy(update={
            "id": self._novo_id("BUDGET"),
            "proposalId": proposta_id,
            "createdAt": agora,
            "updatedAt": agora,
        })
        logger.info(
            "Orçamento %s (%s) adicionado à proposta %s: total=%.2f",
            orcamento.id, orcamento.module, proposta_id, orcamento.totalValue,
        )
        return self._substituir(proposta.model_copy(update={
            "budgets": [*proposta.budgets, orcamento],
            "status": "active",
            "updatedAt": agora,
        }))

    def atualizar_status(self, proposta_id: str, status: str) -> ProposalData:
        proposta = self.obter(proposta_id)
        if not transicao_valida(proposta.status, status):
            raise TransicaoStatusInvalidaError(proposta.status, status)
        logger.info("Proposta %s: %s → %s", proposta_id, proposta.status, status)
        return self._substituir(
            proposta.model_copy(update={"status": status, "updatedAt": datetime.now()})
        )

    def buscar_propostas(self, termo: str = "", status: Optional[str] = "all") -> List[ProposalData]:
        termo = (termo or "").lower()

        def combina(p: ProposalData) -> bool:
            return (
                termo in p.clientName.lower()
                or termo in p.projectName.lower()
                or termo in p.clientCompany.lower()
            )

        return [
            p for p in self.propostas
            if combina(p) and (status in (None, "all") or p.status == status)
        ]


store = PropostaStore()


def get_propostas() -> PropostaStore:
    return store
