# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Lançamentos (contas a pagar e a receber).
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Request, Response, status

from src import auth
from src.schemas.lancamento import (
    LancamentoCreate, LancamentoFilter, LancamentoPage, LancamentoRead,
    LancamentoUpdate, ResumoLancamentoPage,
)
from src.schemas.paginacao import Pageable, get_pageable
from src.services.dependencies import get_lancamento_service
from src.services.lancamento_service import LancamentoService

router = APIRouter(
    tags=["Lancamentos"],
    responses={404: {"description": "Lançamento não encontrado"}},
)


def get_filtro(
    descricao: Optional[str] = None,
    data_vencimento_de: Optional[date] = None,
    data_vencimento_ate: Optional[date] = None,
) -> LancamentoFilter:
    return LancamentoFilter(
        descricao=descricao,
        data_vencimento_de=data_vencimento_de,
        data_vencimento_ate=data_vencimento_ate,
    )


@router.get("", response_model=LancamentoPage, dependencies=[Depends(auth.get_admin_or_user)])
def pesquisar_lancamentos(
    filtro: LancamentoFilter = Depends(get_filtro),
    pageable: Pageable = Depends(get_pageable),
    service: LancamentoService = Depends(get_lancamento_service),
):
    """
    Pesquisa lançamentos por descrição e intervalo de vencimento (todos opcionais).
    """
    return service.pesquisar(filtro, pageable)


@router.get("/resumo", response_model=ResumoLancamentoPage, dependencies=[Depends(auth.get_admin_or_user)])
def resumir_lancamentos(
    filtro: LancamentoFilter = Depends(get_filtro),
    pageable: Pageable = Depends(get_pageable),
    service: LancamentoService = Depends(get_lancamento_service),
):
    """
    Mesmo filtro da pesquisa, retornando só os nomes de categoria e pessoa.
    """
    return service.resumir(filtro, pageable)


@router.get("/{codigo}", response_model=LancamentoRead, dependencies=[Depends(auth.get_admin_or_user)])
def buscar_lancamento(codigo: int, service: LancamentoService = Depends(get_lancamento_service)):
    return service.buscar_por_codigo(codigo)


@router.post("", response_model=LancamentoRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(auth.get_admin_or_user)])
def criar_lancamento(
    lancamento: LancamentoCreate,
    request: Request,
    response: Response,
    service: LancamentoService = Depends(get_lancamento_service),
):
    criado = service.criar(lancamento)
    response.headers["Location"] = f"{str(request.url.replace(query='')).rstrip('/')}/{criado.codigo}"
    return criado


@router.put("/{codigo}", response_model=LancamentoRead, dependencies=[Depends(auth.get_admin_or_user)])
def atualizar_lancamento(
    codigo: int,
    lancamento: LancamentoUpdate,
    service: LancamentoService = Depends(get_lancamento_service),
):
    return service.atualizar(codigo, lancamento)


@router.delete("/{codigo}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(auth.get_admin_user)])
def remover_lancamento(codigo: int, service: LancamentoService = Depends(get_lancamento_service)):
    service.remover(codigo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
