"""Formatação pt-BR de valores monetários e percentuais."""

from typing import Optional

import config


def _pt_br(valor: float, casas: int) -> str:
    return f"{valor:,.{casas}f}".replace(",", "X").replace(".", ",").replace("X", ".")


def formatar_moeda(valor: Optional[float], casas: int = config.CASAS_MOEDA) -> str:
    """formatar_moeda(1234.5) -> 'R$ 1.234,50'. Undefined values render as '—'."""
    if valor is None:
        return "—"
    sinal = "-" if valor < 0 else ""
    return f"{sinal}R$ {_pt_br(abs(valor), casas)}"


def formatar_custo_pagina(valor: Optional[float]) -> str:
    return formatar_moeda(valor, config.CASAS_CUSTO_PAGINA)


def formatar_percentual(valor: float, casas: int = 2) -> str:
    return f"{_pt_br(valor, casas)}%"
