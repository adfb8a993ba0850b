# src/repositories/pessoa_repo.py
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from src.models.pessoa import Pessoa
from src.repositories.base import aplicar_ordenacao, paginar
from src.schemas.paginacao import Pageable

CAMPOS_ORDENACAO = {
    "codigo": Pessoa.codigo,
    "nome": Pessoa.nome,
    "ativo": Pessoa.ativo,
    "cidade": Pessoa.cidade,
    "estado": Pessoa.estado,
}


class PessoaRepository:

    def __init__(self, db: Session) -> None:
        self._db = db

    def buscar_por_codigo(self, codigo: int, bloquear: bool = False) -> Optional[Pessoa]:
        query = self._db.query(Pessoa).filter(Pessoa.codigo == codigo)
        if bloquear:
            # SELECT ... FOR UPDATE: leitura e escrita na mesma transação
            query = query.with_for_update()
        return query.first()

    def listar_por_nome(self, nome: Optional[str], pageable: Pageable):
        query = self._db.query(Pessoa)
        if nome and nome.strip():
            query = query.filter(Pessoa.nome.ilike(f"%{nome.strip()}%"))
        query = aplicar_ordenacao(query, pageable, CAMPOS_ORDENACAO, Pessoa.codigo)
        return paginar(query, pageable)

    def trocar_status(self, codigo: int, ativo: bool) -> int:
        """
        UPDATE condicionado ao valor atual ser diferente do novo.
        Retorna quantas linhas mudaram (0 quando o status já era 'ativo').
        """
        resultado = self._db.execute(
            update(Pessoa)
            .where(Pessoa.codigo == codigo, Pessoa.ativo != ativo)
            .values(ativo=ativo)
            .execution_options(synchronize_session=False)
        )
        return resultado.rowcount

    def salvar(self, pessoa: Pessoa) -> Pessoa:
        self._db.add(pessoa)
        self._db.flush()
        return pessoa

    def remover(self, pessoa: Pessoa) -> None:
        self._db.delete(pessoa)
        self._db.flush()
