# src/schemas/paginacao.py
"""
Parâmetros de paginação (page/size/sort) e montagem do envelope de página.
"""
import math
from dataclasses import dataclass
from typing import Optional

from fastapi import Query

TAMANHO_PADRAO = 20
TAMANHO_MAXIMO = 100


@dataclass
class Pageable:
    page: int = 0
    size: int = TAMANHO_PADRAO
    sort: Optional[str] = None

    @property
    def offset(self):
        return self.page * self.size


def get_pageable(
    page: int = Query(0, ge=0, description="Índice da página, começando em 0"),
    size: int = Query(TAMANHO_PADRAO, ge=1, le=TAMANHO_MAXIMO),
    sort: Optional[str] = Query(None, description="campo[,asc|desc]"),
) -> Pageable:
    return Pageable(page=page, size=size, sort=sort)


def montar_pagina(conteudo, total: int, pageable: Pageable) -> dict:
    return {
        "content": conteudo,
        "number": pageable.page,
        "size": pageable.size,
        "total_elements": total,
        "total_pages": math.ceil(total / pageable.size) if pageable.size else 0,
    }
