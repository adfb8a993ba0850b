# src/repositories/base.py
"""
Consultas comuns aos repositórios: paginação e ordenação por campos permitidos.
"""
from sqlalchemy.orm import Query

from src.exceptions import OrdenacaoInvalidaException
from src.schemas.paginacao import Pageable


def aplicar_ordenacao(query: Query, pageable: Pageable, campos: dict, padrao):
    """
    Ordena pela expressão de 'sort' ("campo" ou "campo,desc").
    'campos' mapeia o nome aceito na URL para a coluna; sem 'sort' usa 'padrao'.
    """
    if not pageable.sort:
        return query.order_by(padrao)

    nome, _, direcao = pageable.sort.partition(",")
    nome = nome.strip()
    direcao = direcao.strip().lower() or "asc"
    coluna = campos.get(nome)
    if coluna is None or direcao not in ("asc", "desc"):
        raise OrdenacaoInvalidaException(f"Ordenação inválida: '{pageable.sort}'.")

    ordem = coluna.desc() if direcao == "desc" else coluna.asc()
    # Desempate pela chave padrão para a paginação ser estável
    return query.order_by(ordem, padrao)


def paginar(query: Query, pageable: Pageable):
    """Retorna (itens da página, total de registros que satisfazem a consulta)."""
    total = query.order_by(None).count()
    itens = query.offset(pageable.offset).limit(pageable.size).all()
    return itens, total
