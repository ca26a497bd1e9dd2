"""
Fluxos de itens dos módulos de Vendas, Locação e Serviços.

Cada item é imutável: atualizar um campo devolve um novo item com os campos
derivados recalculados pelo motor. "Recalcular todos" é apenas N chamadas
independentes, uma por item (sem transação entre itens).
"""

from typing import Any, List

from models.entidades import (
    Budget,
    BudgetItem,
    ProductItem,
    RentalItem,
    ServiceItem,
)
from models.schemas import ContextoLocacao, ContextoServico, ContextoVenda
from services.motor_precificacao import MotorPrecificacao

# Campos que disparam recálculo em cada módulo
GATILHOS_VENDA = {"quantity", "unitCost", "icmsSalePercent", "icmsST"}
GATILHOS_LOCACAO = {"quantity", "unitValue"}
GATILHOS_SERVICO = {"hourlyRate", "totalHours"}


# ── Vendas ──────────────────────────────────────────────────────────────────

def recalcular_produto(motor: MotorPrecificacao, item: ProductItem, ctx: ContextoVenda) -> ProductItem:
    calc = motor.calcular_preco_venda(item.unitCost, item.quantity, ctx.desiredMargin)
    item = item.model_copy(update={"totalCost": item.quantity * item.unitCost})

    receita = calc.finalPrice
    if item.icmsST:
        receita += motor.calcular_icms_st(item, item.icmsSalePercent)

    return item.model_copy(update={
        "marginCommission": calc.marginCommission,
        "taxes": calc.taxes,
        "grossRevenue": receita,
        "difalSale": motor.calcular_difal(
            item, ctx.destinationUF, ctx.icmsRates, ctx.isFinalConsumer
        ),
    })


def atualizar_produto(
    motor: MotorPrecificacao, item: ProductItem, campo: str, valor: Any, ctx: ContextoVenda
) -> ProductItem:
    """Sets one field; derived fields are recomputed only for price-relevant fields."""
    atualizado = ProductItem.model_validate({**item.model_dump(), campo: valor})
    if campo in GATILHOS_VENDA:
        return recalcular_produto(motor, atualizado, ctx)
    return atualizado


def recalcular_produtos(
    motor: MotorPrecificacao, itens: List[ProductItem], ctx: ContextoVenda
) -> List[ProductItem]:
    return [recalcular_produto(motor, i, ctx) for i in itens]


def totais_vendas(itens: List[ProductItem]) -> dict:
    return {
        "baseCost": sum(i.totalCost for i in itens),
        "marginCommission": sum(i.marginCommission for i in itens),
        "taxes": sum(i.taxes for i in itens),
        "difal": sum(i.difalSale for i in itens),
        "grossRevenue": sum(i.grossRevenue for i in itens),
    }


# ── Locação ─────────────────────────────────────────────────────────────────

def recalcular_item_locacao(motor: MotorPrecificacao, item: RentalItem, ctx: ContextoLocacao) -> RentalItem:
    calc = motor.calcular_preco_locacao(
        item.unitValue, item.quantity, ctx.contractPeriod, ctx.desiredMargin
    )
    prazo = ctx.contractPeriod
    return item.model_copy(update={
        "totalValue": calc.baseCost * prazo,
        "totalActiveCost": (calc.baseCost + calc.taxes) * prazo,
        "monthlyActiveCost": calc.finalPrice,
        "marginCommission": calc.marginCommission,
        "taxes": calc.taxes,
    })


def atualizar_item_locacao(
    motor: MotorPrecificacao, item: RentalItem, campo: str, valor: Any, ctx: ContextoLocacao
) -> RentalItem:
    atualizado = RentalItem.model_validate({**item.model_dump(), campo: valor})
    if campo in GATILHOS_LOCACAO:
        return recalcular_item_locacao(motor, atualizado, ctx)
    return atualizado


def recalcular_itens_locacao(
    motor: MotorPrecificacao, itens: List[RentalItem], ctx: ContextoLocacao
) -> List[RentalItem]:
    """Batch recalculation after contract period or margin changes."""
    return [recalcular_item_locacao(motor, i, ctx) for i in itens]


def totais_locacao(itens: List[RentalItem]) -> dict:
    mensal = sum(i.monthlyActiveCost for i in itens)
    return {
        "monthlyCost": mensal,
        "marginCommission": sum(i.marginCommission for i in itens),
        "taxes": sum(i.taxes for i in itens),
        "totalActiveCost": sum(i.totalActiveCost for i in itens),
        "suggestedPrice": mensal,
    }


# ── Serviços ────────────────────────────────────────────────────────────────

def recalcular_item_servico(motor: MotorPrecificacao, item: ServiceItem, ctx: ContextoServico) -> ServiceItem:
    calc = motor.calcular_preco_servico(item.hourlyRate, item.totalHours, ctx.desiredMargin)
    return item.model_copy(update={
        "totalValue": calc.baseCost,
        "marginCommission": calc.marginCommission,
        "taxes": calc.taxes,
        "finalPrice": calc.finalPrice,
    })


def atualizar_item_servico(
    motor: MotorPrecificacao, item: ServiceItem, campo: str, valor: Any, ctx: ContextoServico
) -> ServiceItem:
    atualizado = ServiceItem.model_validate({**item.model_dump(), campo: valor})
    if campo in GATILHOS_SERVICO:
        return recalcular_item_servico(motor, atualizado, ctx)
    return atualizado


def recalcular_itens_servico(
    motor: MotorPrecificacao, itens: List[ServiceItem], ctx: ContextoServico
) -> List[ServiceItem]:
    return [recalcular_item_servico(motor, i, ctx) for i in itens]


def totais_servicos(itens: List[ServiceItem]) -> dict:
    base = sum(i.totalValue for i in itens)
    margem = sum(i.marginCommission for i in itens)
    impostos = sum(i.taxes for i in itens)
    return {
        "baseCost": base,
        "marginCommission": margem,
        "taxes": impostos,
        "finalPrice": base + margem,
        # preço sugerido do módulo inclui os impostos apurados
        "suggestedPrice": base + margem + impostos,
    }


# ── Orçamentos ──────────────────────────────────────────────────────────────

def _orcamento(proposal_id: str, modulo: str, itens: List[BudgetItem]) -> Budget:
    return Budget(
        id="",
        proposalId=proposal_id,
        module=modulo,
        items=itens,
        totalValue=sum(i.totalPrice for i in itens),
    )


def orcamento_de_vendas(proposal_id: str, itens: List[ProductItem]) -> Budget:
    return _orcamento(proposal_id, "sales", [
        BudgetItem(
            id=p.id,
            description=p.description,
            quantity=p.quantity,
            unitPrice=p.unitCost,
            totalPrice=p.grossRevenue,
            module="sales",
            moduleData=p.model_dump(
                include={"icmsCredit", "icmsSalePercent", "icmsDestLocalPercent",
                         "difalSale", "icmsST", "marginCommission", "taxes"}
            ),
        )
        for p in itens
    ])


def orcamento_de_locacao(proposal_id: str, itens: List[RentalItem]) -> Budget:
    return _orcamento(proposal_id, "rental", [
        BudgetItem(
            id=r.id,
            description=r.description,
            quantity=r.quantity,
            unitPrice=r.unitValue,
            totalPrice=r.monthlyActiveCost,
            module="rental",
            moduleData=r.model_dump(
                include={"icmsCompra", "icmsPR", "freight", "taxes",
                         "totalActiveCost", "monthlyActiveCost", "marginCommission"}
            ),
        )
        for r in itens
    ])


def orcamento_de_servicos(proposal_id: str, itens: List[ServiceItem]) -> Budget:
    return _orcamento(proposal_id, "services", [
        BudgetItem(
            id=s.id,
            description=s.description,
            quantity=s.quantity,
            unitPrice=s.hourlyRate,
            totalPrice=s.totalValue + s.marginCommission,
            module="services",
            moduleData=s.model_dump(
                include={"serviceType", "hourlyRate", "totalHours", "totalValue", "marginCommission"}
            ),
        )
        for s in itens
    ])
