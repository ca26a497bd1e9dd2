from pydantic import BaseModel
from typing import Optional, List, Any, Dict, Literal

import config
from models.entidades import (
    Printer,
    ProductItem,
    RentalItem,
    ServiceItem,
    StatusProposta,
    Suprimento,
    Valor,
)


class CalculoResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None


# ── Cálculos avulsos ────────────────────────────────────────────────────────

class CalculoVendaInput(BaseModel):
    unitCost: Valor
    quantity: Valor = 1
    desiredMargin: float = 20


class CalculoLocacaoInput(BaseModel):
    unitValue: Valor
    quantity: Valor = 1
    contractPeriod: Valor = 12
    desiredMargin: float = 20


class CalculoServicoInput(BaseModel):
    hourlyRate: Optional[Valor] = None  # None usa o valor/hora da mão de obra
    totalHours: Valor
    desiredMargin: float = 20


class DifalInput(BaseModel):
    item: ProductItem
    destinationUF: str = "SP"
    isFinalConsumer: bool = False


class IcmsStInput(BaseModel):
    item: ProductItem
    icmsSalePercent: Optional[float] = None  # padrão: alíquota de venda do item


# ── Vendas ──────────────────────────────────────────────────────────────────

CampoVenda = Literal[
    "description", "quantity", "unitCost", "icmsCredit",
    "icmsSalePercent", "icmsDestLocalPercent", "icmsST",
]


class ContextoVenda(BaseModel):
    desiredMargin: float = 20
    destinationUF: str = "SP"
    isFinalConsumer: bool = False
    icmsRates: Optional[Dict[str, float]] = None  # None usa a tabela interestadual padrão


class ItensVendaInput(ContextoVenda):
    itens: List[ProductItem]


class AtualizarProdutoInput(ContextoVenda):
    item: ProductItem
    field: CampoVenda
    value: Any


# ── Locação ─────────────────────────────────────────────────────────────────

CampoLocacao = Literal["description", "quantity", "unitValue", "icmsCompra", "icmsPR", "freight"]


class ContextoLocacao(BaseModel):
    contractPeriod: Valor = 12
    desiredMargin: float = 20


class ItensLocacaoInput(ContextoLocacao):
    itens: List[RentalItem]


class AtualizarItemLocacaoInput(ContextoLocacao):
    item: RentalItem
    field: CampoLocacao
    value: Any


# ── Serviços ────────────────────────────────────────────────────────────────

CampoServico = Literal["description", "quantity", "serviceType", "hourlyRate", "totalHours"]


class ContextoServico(BaseModel):
    desiredMargin: float = 20


class ItensServicoInput(ContextoServico):
    itens: List[ServiceItem]


class AtualizarItemServicoInput(ContextoServico):
    item: ServiceItem
    field: CampoServico
    value: Any


# ── Propostas ───────────────────────────────────────────────────────────────

class StatusInput(BaseModel):
    status: StatusProposta


# ── Outsourcing de impressão ────────────────────────────────────────────────

class CustoPaginaInput(BaseModel):
    printer: Printer
    suprimentos: List[Suprimento] = []
    tarifaEnergia: float = config.TARIFA_ENERGIA_KWH
    volumeEstimado: float = config.VOLUME_MENSAL_ESTIMADO


class FrotaInput(BaseModel):
    printers: List[Printer]
    suprimentos: List[Suprimento] = []
    tarifaEnergia: float = config.TARIFA_ENERGIA_KWH


class ContratoInput(CustoPaginaInput):
    modalidade: Literal["franquia", "por_pagina"]
    volumeMensalPB: Valor = 0
    volumeMensalColor: Valor = 0
    prazoContrato: int = 36
    margem: float = 0
    valorLocacaoMensal: Optional[Valor] = None


class PrecificacaoImpressoraInput(BaseModel):
    custoBase: Valor
    margemDesejada: float = 25
    regimeTributario: Literal["Simples Nacional", "Lucro Presumido", "Lucro Real"] = "Simples Nacional"
    icmsCompra: float = 12
    icmsVenda: float = 18
    ipiCompra: float = 0
    pisCofinsSaida: float = 3.65
    comissaoVenda: float = 3
    custosOperacionais: float = 8
