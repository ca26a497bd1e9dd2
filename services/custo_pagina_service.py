"""
Custo por página - Outsourcing de impressão.

Componentes por página:
  suprimentos  : custo unitário ÷ rendimento (toner, fotocondutor, fusor)
  manutenção   : custo mensal × 12 × 5 anos ÷ vida útil em páginas
  energia      : consumo mensal (kWh) × tarifa ÷ volume mensal estimado (2000)
  depreciação  : custo de aquisição ÷ vida útil em páginas

A página colorida sempre soma os toners C/M/Y por cima do custo P&B.

Modalidades de cobrança:
  franquia   : valor mensal fixo; o custo por página inclui os custos fixos
  por_pagina : locação do equipamento + volume × custo por página, onde o
               custo por página é só de suprimentos (os fixos já estão na locação)

Uma divisão por zero (rendimento, vida útil ou volume zerados) devolve None,
que se propaga para os totais.
"""

import logging
from typing import Iterable, List, Optional

import config
from models.entidades import ContratoImpressao, CustoPorPagina, Printer, Suprimento

logger = logging.getLogger(__name__)

TONER_PB = ("Toner P&B", "Toner Preto")
TONERS_COR = ("Toner Ciano", "Toner Magenta", "Toner Amarelo")


def _por_pagina(custo: float, paginas: float) -> Optional[float]:
    if custo == 0:
        return 0.0
    if paginas == 0:
        return None
    return custo / paginas


def _soma(*partes: Optional[float]) -> Optional[float]:
    if any(p is None for p in partes):
        return None
    return sum(partes)


def _multiplica(valor: Optional[float], fator: float) -> Optional[float]:
    return None if valor is None else valor * fator


def _suprimento(suprimentos: List[Suprimento], tipos: Iterable[str]) -> Optional[float]:
    tipos = tuple(tipos)
    sup = next((s for s in suprimentos if s.tipo in tipos), None)
    if sup is None:
        return 0.0
    return _por_pagina(sup.custoUnitario, sup.rendimentoPaginas)


def calcular_custo_por_pagina(
    printer: Printer,
    suprimentos: List[Suprimento],
    tarifa_energia: float = config.TARIFA_ENERGIA_KWH,
    volume_estimado: float = config.VOLUME_MENSAL_ESTIMADO,
) -> CustoPorPagina:
    """Blended cost per page (mono and color) for one printer and its supplies."""
    proprios = [s for s in suprimentos if s.printerId == printer.id]

    toner_pb = _suprimento(proprios, TONER_PB)
    toner_cor = _soma(*(_suprimento(proprios, [t]) for t in TONERS_COR))
    fotocondutor = _suprimento(proprios, ["Fotocondutor"])
    fusor = _suprimento(proprios, ["Fusor"])

    manutencao = _por_pagina(
        printer.custoManutencaoMensal * 12 * config.ANOS_VIDA_UTIL_MANUTENCAO,
        printer.vidaUtilPaginas,
    )
    energia = _por_pagina(printer.consumoEnergia * tarifa_energia, volume_estimado)
    depreciacao = _por_pagina(printer.custoAquisicao, printer.vidaUtilPaginas)

    suprimentos_pb = _soma(toner_pb, fotocondutor, fusor)
    suprimentos_cor = _soma(suprimentos_pb, toner_cor)
    total_pb = _soma(suprimentos_pb, manutencao, energia, depreciacao)
    total_cor = _soma(total_pb, toner_cor)

    if total_pb is None:
        logger.warning("Custo por página indefinido para impressora %s", printer.id)

    return CustoPorPagina(
        printerId=printer.id,
        custoTonerPB=toner_pb,
        custoTonerColor=toner_cor,
        custoFotocondutor=fotocondutor,
        custoFusor=fusor,
        custoManutencao=manutencao,
        custoEnergia=energia,
        custoDepreciacao=depreciacao,
        suprimentosPB=suprimentos_pb,
        suprimentosColor=suprimentos_cor,
        custoTotalPB=total_pb,
        custoTotalColor=total_cor,
    )


def _media(valores: List[Optional[float]]) -> Optional[float]:
    definidos = [v for v in valores if v is not None]
    if not definidos:
        return None
    return sum(definidos) / len(definidos)


def calcular_custos_impressoras(
    printers: List[Printer],
    suprimentos: List[Suprimento],
    tarifa_energia: float = config.TARIFA_ENERGIA_KWH,
) -> dict:
    """Cost per page for every active printer, plus fleet averages."""
    custos = [
        calcular_custo_por_pagina(p, suprimentos, tarifa_energia)
        for p in printers
        if p.ativo
    ]
    return {
        "custos": custos,
        "mediaPB": _media([c.custoTotalPB for c in custos]),
        "mediaColor": _media([c.custoTotalColor for c in custos]),
    }


def locacao_equipamento(
    printer: Printer, prazo_meses: int, tarifa_energia: float = config.TARIFA_ENERGIA_KWH
) -> Optional[float]:
    """Monthly equipment fee covering the fixed costs in per-page billing."""
    amortizacao = _por_pagina(printer.custoAquisicao, prazo_meses)
    return _soma(
        amortizacao,
        printer.custoManutencaoMensal,
        printer.consumoEnergia * tarifa_energia,
    )


def calcular_contrato(
    custo: CustoPorPagina,
    printer: Printer,
    modalidade: str,
    volume_pb: float,
    volume_color: float,
    prazo_meses: int,
    margem: float = 0,
    valor_locacao_mensal: Optional[float] = None,
    tarifa_energia: float = config.TARIFA_ENERGIA_KWH,
) -> ContratoImpressao:
    if modalidade == "franquia":
        custo_pb = custo.custoTotalPB
        custo_cor = custo.custoTotalColor
        locacao = 0.0
    elif modalidade == "por_pagina":
        custo_pb = custo.suprimentosPB
        custo_cor = custo.suprimentosColor
        locacao = valor_locacao_mensal
        if locacao is None:
            locacao = locacao_equipamento(printer, prazo_meses, tarifa_energia)
    else:
        raise ValueError(f"Modalidade desconhecida: {modalidade}")

    custo_paginas = _soma(
        _multiplica(custo_pb, volume_pb),
        _multiplica(custo_cor, volume_color),
    )
    fator_margem = 1 + margem / 100

    if modalidade == "franquia":
        custo_mensal = custo_paginas
        valor_mensal = _multiplica(custo_paginas, fator_margem)
    else:
        custo_mensal = _soma(locacao, custo_paginas)
        valor_mensal = _soma(locacao, _multiplica(custo_paginas, fator_margem))

    return ContratoImpressao(
        printerId=printer.id,
        modalidade=modalidade,
        volumeMensalPB=volume_pb,
        volumeMensalColor=volume_color,
        prazoContrato=prazo_meses,
        custoPaginaPB=custo_pb,
        custoPaginaColor=custo_cor,
        valorLocacaoMensal=locacao,
        custoMensal=custo_mensal,
        valorMensal=valor_mensal,
        valorAnual=_multiplica(valor_mensal, 12),
        custoTotalContrato=_multiplica(custo_mensal, prazo_meses),
        valorTotalContrato=_multiplica(valor_mensal, prazo_meses),
    )
