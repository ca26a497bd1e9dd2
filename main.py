import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers.configuracoes import router as configuracoes_router
from routers.impressoras import router as impressoras_router
from routers.precificacao import router as precificacao_router
from routers.propostas import router as propostas_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Calculadora de Precificação de TI - Backend",
    description="Precificação de vendas, locação, serviços e outsourcing de impressão",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(precificacao_router)
app.include_router(configuracoes_router)
app.include_router(propostas_router)
app.include_router(impressoras_router)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "Calculadora de Precificação de TI Backend"}
