# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI da API de Pagamentos.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import config
from src.database import engine, Base
from src.exceptions import registrar_handlers

# Registra todos os modelos na Base antes do create_all
from src.models import categoria, lancamento, pessoa, usuario  # noqa: F401

from src.routes import auth_fastapi, categorias_fastapi, lancamentos_fastapi, pessoas_fastapi

import create_first_user


logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=config.LOG_FILE
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas no banco de dados e o primeiro administrador
    Base.metadata.create_all(bind=engine)
    logging.info("Tabelas verificadas/criadas.")
    create_first_user.create_first_user()
    yield


docs_url = "/docs" if config.ENVIRONMENT != "production" else None
redoc_url = "/redoc" if config.ENVIRONMENT != "production" else None

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Pagamentos",
    description="API para gerenciamento de lançamentos financeiros, pessoas e categorias",
    version="1.0.0",
    docs_url=docs_url,   # Será None em produção (desativa /docs)
    redoc_url=redoc_url, # Será None em produção (desativa /redoc)
    openapi_url="/openapi.json" if config.ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)

origins = [
    config.FRONTEND_URL,
    "http://localhost:4200",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

registrar_handlers(app)

# Montagem dos routers
app.include_router(pessoas_fastapi.router, prefix="/pessoas")
app.include_router(categorias_fastapi.router, prefix="/categorias")
app.include_router(lancamentos_fastapi.router, prefix="/lancamentos")
app.include_router(auth_fastapi.router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Pagamentos",
        "documentacao": docs_url,
        "endpoints": [
            {"login": "/api/auth/login"},
            {"pessoas": "/pessoas"},
            {"categorias": "/categorias"},
            {"lancamentos": "/lancamentos"},
            {"resumo": "/lancamentos/resumo"}
        ]
    }
