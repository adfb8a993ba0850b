# -*- coding: utf-8 -*-
"""
Regras de negócio de Lancamento: pesquisa com filtros opcionais, resumo,
atualização com troca opcional de categoria/pessoa e remoção.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import RecursoEmUsoException, RecursoNaoEncontradoException
from src.models.categoria import Categoria
from src.models.lancamento import Lancamento
from src.models.pessoa import Pessoa
from src.repositories.lancamento_repo import LancamentoRepository
from src.schemas.lancamento import (
    LancamentoCreate, LancamentoFilter, LancamentoRead, LancamentoUpdate, ResumoLancamento,
)
from src.schemas.paginacao import Pageable, montar_pagina


class LancamentoService:

    def __init__(self, db: Session, lancamento_repo: LancamentoRepository = None) -> None:
        self._db = db
        self._repo = lancamento_repo or LancamentoRepository(db)

    def _categoria_existente(self, codigo: int) -> Categoria:
        categoria = self._db.get(Categoria, codigo)
        if categoria is None:
            raise RecursoNaoEncontradoException(f"Categoria com código {codigo} não encontrada.")
        return categoria

    def _pessoa_existente(self, codigo: int) -> Pessoa:
        pessoa = self._db.get(Pessoa, codigo)
        if pessoa is None:
            raise RecursoNaoEncontradoException("Pessoa não encontrada")
        return pessoa

    def _ler_completo(self, codigo: int) -> LancamentoRead:
        lancamento = self._repo.buscar_completo(codigo)
        if lancamento is None:
            raise RecursoNaoEncontradoException("Lançamento não encontrado")
        return LancamentoRead.model_validate(lancamento)

    def _gravar(self, lancamento: Lancamento) -> None:
        # Categoria ou pessoa removida depois da verificação acima cai na FK
        try:
            self._repo.salvar(lancamento)
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logging.warning(f"Lançamento com referência inexistente: {e.orig}")
            raise RecursoNaoEncontradoException("Categoria ou pessoa não encontrada.")

    def criar(self, dados: LancamentoCreate) -> LancamentoRead:
        categoria = self._categoria_existente(dados.categoria.codigo)
        pessoa = self._pessoa_existente(dados.pessoa.codigo)

        lancamento = Lancamento(
            **dados.model_dump(exclude={"categoria", "pessoa"}),
            categoria_codigo=categoria.codigo,
            pessoa_codigo=pessoa.codigo,
        )
        self._gravar(lancamento)
        logging.info(f"Lançamento {lancamento.codigo} cadastrado.")
        return self._ler_completo(lancamento.codigo)

    def buscar_por_codigo(self, codigo: int) -> LancamentoRead:
        return self._ler_completo(codigo)

    def pesquisar(self, filtro: LancamentoFilter, pageable: Pageable) -> dict:
        lancamentos, total = self._repo.filtrar(filtro, pageable)
        conteudo = [LancamentoRead.model_validate(l) for l in lancamentos]
        return montar_pagina(conteudo, total, pageable)

    def resumir(self, filtro: LancamentoFilter, pageable: Pageable) -> dict:
        linhas, total = self._repo.resumir(filtro, pageable)
        conteudo = [ResumoLancamento.model_validate(linha) for linha in linhas]
        return montar_pagina(conteudo, total, pageable)

    def atualizar(self, codigo: int, dados: LancamentoUpdate) -> LancamentoRead:
        lancamento = self._repo.buscar_por_codigo(codigo, bloquear=True)
        if lancamento is None:
            raise RecursoNaoEncontradoException("Lançamento não encontrado")

        for campo, valor in dados.model_dump(exclude={"categoria", "pessoa"}).items():
            setattr(lancamento, campo, valor)

        # Referências omitidas mantêm as atuais
        if dados.categoria is not None:
            lancamento.categoria_codigo = self._categoria_existente(dados.categoria.codigo).codigo
        if dados.pessoa is not None:
            lancamento.pessoa_codigo = self._pessoa_existente(dados.pessoa.codigo).codigo

        self._gravar(lancamento)
        return self._ler_completo(codigo)

    def remover(self, codigo: int) -> None:
        lancamento = self._repo.buscar_por_codigo(codigo, bloquear=True)
        if lancamento is None:
            raise RecursoNaoEncontradoException("Lançamento não encontrado")
        try:
            self._repo.remover(lancamento)
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logging.warning(f"Lançamento {codigo} em uso, remoção recusada: {e.orig}")
            raise RecursoEmUsoException("Lançamento em uso e não pode ser removido.")
        logging.info(f"Lançamento {codigo} removido.")
