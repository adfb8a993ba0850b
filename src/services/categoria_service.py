# -*- coding: utf-8 -*-
"""
Regras de negócio de Categoria.
"""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import RecursoEmUsoException, RecursoNaoEncontradoException
from src.models.categoria import Categoria
from src.repositories.categoria_repo import CategoriaRepository
from src.schemas.categoria import CategoriaCreate, CategoriaUpdate


class CategoriaService:

    def __init__(self, db: Session, categoria_repo: CategoriaRepository = None) -> None:
        self._db = db
        self._repo = categoria_repo or CategoriaRepository(db)

    def listar_todas(self) -> List[Categoria]:
        return self._repo.listar_todas()

    def buscar_por_codigo(self, codigo: int, bloquear: bool = False) -> Categoria:
        categoria = self._repo.buscar_por_codigo(codigo, bloquear=bloquear)
        if categoria is None:
            raise RecursoNaoEncontradoException(f"Categoria com código {codigo} não encontrada.")
        return categoria

    def criar(self, dados: CategoriaCreate) -> Categoria:
        categoria = self._repo.salvar(Categoria(nome=dados.nome))
        self._db.commit()
        self._db.refresh(categoria)
        logging.info(f"Categoria {categoria.codigo} cadastrada.")
        return categoria

    def atualizar(self, codigo: int, dados: CategoriaUpdate) -> Categoria:
        categoria = self.buscar_por_codigo(codigo, bloquear=True)
        categoria.nome = dados.nome
        self._repo.salvar(categoria)
        self._db.commit()
        self._db.refresh(categoria)
        return categoria

    def remover(self, codigo: int) -> None:
        categoria = self.buscar_por_codigo(codigo, bloquear=True)
        try:
            self._repo.remover(categoria)
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logging.warning(f"Categoria {codigo} em uso, remoção recusada: {e.orig}")
            raise RecursoEmUsoException("Categoria em uso e não pode ser removida.")
        logging.info(f"Categoria {codigo} removida.")
