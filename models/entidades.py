import math
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _numero_ou_zero(valor: Any) -> float:
    """Parse-or-default used at the input boundary: NaN, negatives and junk become 0."""
    if valor is None or isinstance(valor, bool):
        return 0.0
    if isinstance(valor, str):
        valor = valor.strip().replace(",", ".")
        if not valor:
            return 0.0
    try:
        numero = float(valor)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(numero) or numero < 0:
        return 0.0
    return numero


Valor = Annotated[float, BeforeValidator(_numero_ou_zero)]


def _agora() -> datetime:
    return datetime.now()


# ── Configurações ───────────────────────────────────────────────────────────

class TaxRegime(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    active: bool = False
    pis: float = 0
    cofins: float = 0
    csll: float = 0
    irpj: float = 0
    icms: float = 0
    iss: float = 0
    basePresuncaoVenda: float = 0
    basePresuncaoServico: float = 0
    createdAt: datetime = Field(default_factory=_agora)
    updatedAt: datetime = Field(default_factory=_agora)


class CostsExpenses(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = "1"
    comissaoVenda: float = 3
    comissaoLocacao: float = 10
    comissaoServico: float = 5
    margemLucroServico: float = 20
    despesasAdmin: float = 2
    outrasDespesas: float = 1
    custoFinanceiroMensal: float = 1.17
    taxaDescontoVPL: float = 15
    depreciacao: float = 0
    createdAt: datetime = Field(default_factory=_agora)
    updatedAt: datetime = Field(default_factory=_agora)


class LaborCosts(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = "1"
    # Encargos sociais (CLT) - percentuais
    ferias: Valor = 0
    umTercoFerias: Valor = 0
    decimoTerceiro: Valor = 0
    inssBase: Valor = 0
    inssSistemaS: Valor = 0
    inssFeriasDecimo: Valor = 0
    fgts: Valor = 0
    fgtsFeriasDecimo: Valor = 0
    multaFgtsRescisao: Valor = 0
    outros: Valor = 0
    # Benefícios (CLT) - valores em reais
    valeTransporte: Valor = 0
    planoSaude: Valor = 0
    valeAlimentacao: Valor = 0
    # Parâmetros gerais
    salarioBasePadrao: Valor = 0
    diasUteisNoMes: Valor = 0
    horasPorDia: Valor = 0
    # Campos calculados
    totalEncargos: float = 0
    totalBeneficios: float = 0
    custoHora: float = 0
    valorVendaHora: float = 0
    createdAt: datetime = Field(default_factory=_agora)
    updatedAt: datetime = Field(default_factory=_agora)


# ── Itens de precificação ───────────────────────────────────────────────────

Estrategia = Literal["gross-up", "amortized-gross-up", "additive"]


class PricingCalculation(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategy: Estrategia
    baseCost: float
    marginCommission: float
    taxes: float
    finalPrice: float


class ProductItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    quantity: Valor = 1
    unitCost: Valor = 0
    icmsCredit: Valor = 0
    icmsSalePercent: Valor = 12
    icmsDestLocalPercent: Valor = 7
    icmsST: bool = False
    # derivados
    totalCost: float = 0
    difalSale: float = 0
    marginCommission: float = 0
    taxes: float = 0
    grossRevenue: float = 0


class RentalItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    quantity: Valor = 1
    unitValue: Valor = 0
    icmsCompra: Valor = 0
    icmsPR: Valor = 12
    freight: Valor = 0
    # derivados
    totalValue: float = 0
    taxes: float = 0
    totalActiveCost: float = 0
    monthlyActiveCost: float = 0
    marginCommission: float = 0


class ServiceItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    quantity: Valor = 1
    serviceType: str = "Consultoria"
    hourlyRate: Valor = 0
    totalHours: Valor = 0
    # derivados
    totalValue: float = 0
    marginCommission: float = 0
    taxes: float = 0
    finalPrice: float = 0


# ── Propostas ───────────────────────────────────────────────────────────────

Modulo = Literal["sales", "rental", "services"]
StatusProposta = Literal["draft", "active", "completed", "cancelled"]


class BudgetItem(BaseModel):
    id: str
    description: str = ""
    quantity: float = 0
    unitPrice: float = 0
    totalPrice: float = 0
    module: Modulo
    moduleData: Dict[str, Any] = Field(default_factory=dict)


class Budget(BaseModel):
    id: str
    proposalId: str
    module: Modulo
    items: List[BudgetItem] = Field(default_factory=list)
    totalValue: float = 0
    createdAt: datetime = Field(default_factory=_agora)
    updatedAt: datetime = Field(default_factory=_agora)


class ProposalInfo(BaseModel):
    # Dados do cliente
    clientName: str = ""
    clientEmail: str = ""
    clientPhone: str = ""
    clientCompany: str = ""
    clientCNPJ: str = ""
    clientAddress: str = ""
    # Dados do projeto
    projectName: str = ""
    projectType: str = ""
    projectDescription: str = ""
    deliveryDate: str = ""
    estimatedBudget: str = ""
    # Gerente de contas
    managerName: str = ""
    managerEmail: str = ""
    managerPhone: str = ""
    managerDepartment: str = ""


class ProposalData(ProposalInfo):
    id: str
    status: StatusProposta = "draft"
    budgets: List[Budget] = Field(default_factory=list)
    createdAt: datetime = Field(default_factory=_agora)
    updatedAt: datetime = Field(default_factory=_agora)


# ── Outsourcing de impressão ────────────────────────────────────────────────

TipoSuprimento = Literal[
    "Toner P&B", "Toner Preto", "Toner Ciano", "Toner Magenta", "Toner Amarelo",
    "Fotocondutor", "Fusor", "Kit Manutenção", "Papel",
]


class PeriodoLocacao(BaseModel):
    meses: int
    valorMensal: float
    valorTotal: float
    paybackMeses: float
    roi: float


class PrinterPricing(BaseModel):
    custoBase: float
    margemDesejada: float
    regimeTributario: str
    icmsCompra: float
    icmsVenda: float
    ipiCompra: float
    pisCofinsSaida: float
    comissaoVenda: float
    custosOperacionais: float
    precoVendaSugerido: float
    periodosLocacao: Dict[int, PeriodoLocacao] = Field(default_factory=dict)
    calculadoEm: datetime = Field(default_factory=_agora)


class Printer(BaseModel):
    id: str
    marca: str = ""
    modelo: str = ""
    tipo: str = "Laser P&B"
    velocidadePPM: Valor = 0
    custoAquisicao: Valor = 0
    vidaUtilPaginas: Valor = 0
    consumoEnergia: Valor = 0  # kWh por mês
    custoManutencaoMensal: Valor = 0
    ativo: bool = True
    precificacao: Optional[PrinterPricing] = None


class Suprimento(BaseModel):
    id: str
    printerId: str
    tipo: TipoSuprimento
    descricao: str = ""
    rendimentoPaginas: Valor = 0
    custoUnitario: Valor = 0
    estoqueMinimo: int = 0
    estoqueAtual: int = 0
    fornecedor: str = ""
    codigoOriginal: str = ""
    compativel: bool = False


class CustoPorPagina(BaseModel):
    """Cost per page breakdown; ``None`` marks a component that divides by zero."""

    printerId: str
    custoTonerPB: Optional[float]
    custoTonerColor: Optional[float]
    custoFotocondutor: Optional[float]
    custoFusor: Optional[float]
    custoManutencao: Optional[float]
    custoEnergia: Optional[float]
    custoDepreciacao: Optional[float]
    suprimentosPB: Optional[float]
    suprimentosColor: Optional[float]
    custoTotalPB: Optional[float]
    custoTotalColor: Optional[float]


Modalidade = Literal["franquia", "por_pagina"]


class ContratoImpressao(BaseModel):
    printerId: str
    modalidade: Modalidade
    volumeMensalPB: float
    volumeMensalColor: float
    prazoContrato: int
    custoPaginaPB: Optional[float]
    custoPaginaColor: Optional[float]
    valorLocacaoMensal: Optional[float]  # None com prazo zerado (amortização indefinida)
    custoMensal: Optional[float]
    valorMensal: Optional[float]
    valorAnual: Optional[float]
    custoTotalContrato: Optional[float]
    valorTotalContrato: Optional[float]
