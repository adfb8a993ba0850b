# src/services/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.autenticacao_service import AutenticacaoService
from src.services.categoria_service import CategoriaService
from src.services.lancamento_service import LancamentoService
from src.services.pessoa_service import PessoaService


def get_pessoa_service(db: Session = Depends(get_db)) -> PessoaService:
    return PessoaService(db)


def get_categoria_service(db: Session = Depends(get_db)) -> CategoriaService:
    return CategoriaService(db)


def get_lancamento_service(db: Session = Depends(get_db)) -> LancamentoService:
    return LancamentoService(db)


def get_autenticacao_service(db: Session = Depends(get_db)) -> AutenticacaoService:
    return AutenticacaoService(db)
