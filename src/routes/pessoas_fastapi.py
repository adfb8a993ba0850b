# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Pessoas.
"""
from typing import Optional
from fastapi import APIRouter, Body, Depends, Request, Response, status

from src import auth
from src.schemas.paginacao import Pageable, get_pageable
from src.schemas.pessoa import PessoaCreate, PessoaPage, PessoaRead, PessoaUpdate
from src.services.dependencies import get_pessoa_service
from src.services.pessoa_service import PessoaService

router = APIRouter(
    tags=["Pessoas"],
    responses={404: {"description": "Pessoa não encontrada"}},
)


@router.get("", response_model=PessoaPage, dependencies=[Depends(auth.get_admin_or_user)])
def listar_pessoas(
    nome: Optional[str] = None,
    pageable: Pageable = Depends(get_pageable),
    service: PessoaService = Depends(get_pessoa_service),
):
    """
    Lista pessoas paginadas, filtrando pelo nome (parcial, sem diferenciar maiúsculas).
    """
    return service.listar(nome, pageable)


@router.get("/{codigo}", response_model=PessoaRead, dependencies=[Depends(auth.get_admin_or_user)])
def buscar_pessoa(codigo: int, service: PessoaService = Depends(get_pessoa_service)):
    return service.buscar_por_codigo(codigo)


@router.post("", response_model=PessoaRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(auth.get_admin_or_user)])
def criar_pessoa(
    pessoa: PessoaCreate,
    request: Request,
    response: Response,
    service: PessoaService = Depends(get_pessoa_service),
):
    """
    Cadastra uma nova pessoa. O header Location aponta para o recurso criado.
    """
    criada = service.criar(pessoa)
    response.headers["Location"] = f"{str(request.url.replace(query='')).rstrip('/')}/{criada.codigo}"
    return criada


@router.put("/{codigo}", response_model=PessoaRead, dependencies=[Depends(auth.get_admin_or_user)])
def atualizar_pessoa(codigo: int, pessoa: PessoaUpdate, service: PessoaService = Depends(get_pessoa_service)):
    """
    Atualiza nome e status. O endereço só é substituído quando enviado.
    """
    return service.atualizar(codigo, pessoa)


@router.patch("/{codigo}/ativo", response_model=PessoaRead, dependencies=[Depends(auth.get_admin_user)])
def atualizar_status(
    codigo: int,
    ativo: bool = Body(...),
    service: PessoaService = Depends(get_pessoa_service),
):
    """
    Corpo é apenas o booleano (true/false). Repetir o status atual retorna 409.
    """
    return service.atualizar_status(codigo, ativo)


@router.delete("/{codigo}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(auth.get_admin_user)])
def remover_pessoa(codigo: int, service: PessoaService = Depends(get_pessoa_service)):
    service.remover(codigo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
