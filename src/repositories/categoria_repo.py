# src/repositories/categoria_repo.py
from typing import List, Optional

from sqlalchemy.orm import Session

from src.models.categoria import Categoria


class CategoriaRepository:

    def __init__(self, db: Session) -> None:
        self._db = db

    def listar_todas(self) -> List[Categoria]:
        return self._db.query(Categoria).order_by(Categoria.nome).all()

    def buscar_por_codigo(self, codigo: int, bloquear: bool = False) -> Optional[Categoria]:
        query = self._db.query(Categoria).filter(Categoria.codigo == codigo)
        if bloquear:
            query = query.with_for_update()
        return query.first()

    def salvar(self, categoria: Categoria) -> Categoria:
        self._db.add(categoria)
        self._db.flush()
        return categoria

    def remover(self, categoria: Categoria) -> None:
        self._db.delete(categoria)
        self._db.flush()
