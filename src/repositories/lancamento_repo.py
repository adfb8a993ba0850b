# src/repositories/lancamento_repo.py
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from src.models.categoria import Categoria
from src.models.lancamento import Lancamento
from src.models.pessoa import Pessoa
from src.repositories.base import aplicar_ordenacao, paginar
from src.schemas.lancamento import LancamentoFilter
from src.schemas.paginacao import Pageable

CAMPOS_ORDENACAO = {
    "codigo": Lancamento.codigo,
    "descricao": Lancamento.descricao,
    "valor": Lancamento.valor,
    "data_vencimento": Lancamento.data_vencimento,
    "data_pagamento": Lancamento.data_pagamento,
    "tipo": Lancamento.tipo,
}


def aplicar_filtro(query, filtro: LancamentoFilter):
    """Cada predicado só entra na condição quando informado (combinação com AND)."""
    if filtro.descricao and filtro.descricao.strip():
        query = query.filter(Lancamento.descricao.ilike(f"%{filtro.descricao.strip()}%"))
    if filtro.data_vencimento_de:
        query = query.filter(Lancamento.data_vencimento >= filtro.data_vencimento_de)
    if filtro.data_vencimento_ate:
        query = query.filter(Lancamento.data_vencimento <= filtro.data_vencimento_ate)
    return query


class LancamentoRepository:

    def __init__(self, db: Session) -> None:
        self._db = db

    def buscar_por_codigo(self, codigo: int, bloquear: bool = False) -> Optional[Lancamento]:
        query = self._db.query(Lancamento).filter(Lancamento.codigo == codigo)
        if bloquear:
            query = query.with_for_update()
        return query.first()

    def buscar_completo(self, codigo: int) -> Optional[Lancamento]:
        """Carrega o lançamento junto com categoria e pessoa (joined)."""
        return (
            self._db.query(Lancamento)
            .options(joinedload(Lancamento.categoria), joinedload(Lancamento.pessoa))
            .filter(Lancamento.codigo == codigo)
            .first()
        )

    def filtrar(self, filtro: LancamentoFilter, pageable: Pageable):
        query = self._db.query(Lancamento).options(
            joinedload(Lancamento.categoria), joinedload(Lancamento.pessoa)
        )
        query = aplicar_filtro(query, filtro)
        query = aplicar_ordenacao(query, pageable, CAMPOS_ORDENACAO, Lancamento.codigo)
        return paginar(query, pageable)

    def resumir(self, filtro: LancamentoFilter, pageable: Pageable):
        """Projeção reduzida com os nomes de categoria e pessoa via JOIN explícito."""
        query = (
            self._db.query(
                Lancamento.codigo,
                Lancamento.descricao,
                Lancamento.data_vencimento,
                Lancamento.data_pagamento,
                Lancamento.valor,
                Lancamento.tipo,
                Categoria.nome.label("categoria"),
                Pessoa.nome.label("pessoa"),
            )
            .join(Categoria, Lancamento.categoria_codigo == Categoria.codigo)
            .join(Pessoa, Lancamento.pessoa_codigo == Pessoa.codigo)
        )
        query = aplicar_filtro(query, filtro)
        query = aplicar_ordenacao(query, pageable, CAMPOS_ORDENACAO, Lancamento.codigo)
        return paginar(query, pageable)

    def salvar(self, lancamento: Lancamento) -> Lancamento:
        self._db.add(lancamento)
        self._db.flush()
        return lancamento

    def remover(self, lancamento: Lancamento) -> None:
        self._db.delete(lancamento)
        self._db.flush()
