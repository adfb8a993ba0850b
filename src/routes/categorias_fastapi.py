# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Categorias.
"""
from typing import List
from fastapi import APIRouter, Depends, Request, Response, status

from src import auth
from src.schemas.categoria import CategoriaCreate, CategoriaRead, CategoriaUpdate
from src.services.categoria_service import CategoriaService
from src.services.dependencies import get_categoria_service

router = APIRouter(
    tags=["Categorias"],
    responses={404: {"description": "Categoria não encontrada"}},
)

@router.get("", response_model=List[CategoriaRead], dependencies=[Depends(auth.get_admin_or_user)])
def listar_categorias(service: CategoriaService = Depends(get_categoria_service)):
    """
    Lista todas as categorias, ordenadas pelo nome.
    """
    return service.listar_todas()

@router.get("/{codigo}", response_model=CategoriaRead, dependencies=[Depends(auth.get_admin_or_user)])
def buscar_categoria(codigo: int, service: CategoriaService = Depends(get_categoria_service)):
    return service.buscar_por_codigo(codigo)

@router.post("", response_model=CategoriaRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(auth.get_admin_or_user)])
def criar_categoria(
    categoria: CategoriaCreate,
    request: Request,
    response: Response,
    service: CategoriaService = Depends(get_categoria_service),
):
    criada = service.criar(categoria)
    response.headers["Location"] = f"{str(request.url.replace(query='')).rstrip('/')}/{criada.codigo}"
    return criada

@router.put("/{codigo}", response_model=CategoriaRead, dependencies=[Depends(auth.get_admin_or_user)])
def atualizar_categoria(codigo: int, categoria: CategoriaUpdate, service: CategoriaService = Depends(get_categoria_service)):
    return service.atualizar(codigo, categoria)

@router.delete("/{codigo}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(auth.get_admin_user)])
def remover_categoria(codigo: int, service: CategoriaService = Depends(get_categoria_service)):
    """
    Remove a categoria. Se houver lançamentos usando-a, retorna 409.
    """
    service.remover(codigo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
