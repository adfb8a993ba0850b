# -*- coding: utf-8 -*-
"""
Exceções de domínio e tratadores globais que as convertem em respostas JSON
no formato {status, error, timestamp}.
"""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErroDominio(Exception):
    """Base das falhas de regra de negócio. Cada subclasse define seu status HTTP."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem


class RecursoNaoEncontradoException(ErroDominio):
    status_code = status.HTTP_404_NOT_FOUND


class RecursoEmUsoException(ErroDominio):
    """Violação de integridade referencial ao remover um registro referenciado."""
    status_code = status.HTTP_409_CONFLICT


class EstadoInvalidoException(ErroDominio):
    status_code = status.HTTP_409_CONFLICT


class OrdenacaoInvalidaException(ErroDominio):
    """Campo ou direção de 'sort' fora dos permitidos para o recurso."""


class AutenticacaoException(ErroDominio):
    status_code = status.HTTP_401_UNAUTHORIZED


def corpo_erro(status_code: int, mensagem: str) -> dict:
    return {
        "status": status_code,
        "error": mensagem,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def tratar_erro_dominio(request: Request, exc: ErroDominio):
    headers = None
    if isinstance(exc, AutenticacaoException):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=corpo_erro(exc.status_code, exc.mensagem),
        headers=headers,
    )


async def tratar_erro_validacao(request: Request, exc: RequestValidationError):
    campos = []
    for erro in exc.errors():
        # Descarta o primeiro elemento ('body', 'query'...) para ficar só o nome do campo
        caminho = [str(parte) for parte in erro.get("loc", ())[1:]]
        campos.append({"campo": ".".join(caminho) or "body", "mensagem": erro.get("msg")})

    conteudo = corpo_erro(status.HTTP_400_BAD_REQUEST, "Dados inválidos")
    conteudo["campos"] = campos
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(conteudo))


async def tratar_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=corpo_erro(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def registrar_handlers(app: FastAPI):
    app.add_exception_handler(ErroDominio, tratar_erro_dominio)
    app.add_exception_handler(RequestValidationError, tratar_erro_validacao)
    app.add_exception_handler(StarletteHTTPException, tratar_http_exception)
    logging.debug("Tratadores de exceção registrados.")
