# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Pessoa e seu endereço embutido.
"""
from dataclasses import dataclass

from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import composite
from src.database import Base


@dataclass
class Endereco:
    """Valor embutido na linha da pessoa. Sem identidade própria."""
    logradouro: str
    cidade: str
    estado: str
    cep: str


class Pessoa(Base):
    __tablename__ = 'pessoa'

    codigo = Column(Integer, primary_key=True, index=True)
    nome = Column(String(50), index=True, nullable=False)
    ativo = Column(Boolean, nullable=False, default=True)

    # Colunas do endereço ficam na própria tabela 'pessoa'
    logradouro = Column(String(100), nullable=False)
    cidade = Column(String(50), nullable=False)
    estado = Column(String(2), nullable=False)
    cep = Column(String(9), nullable=False)

    # Um novo Endereco substitui as quatro colunas de uma vez
    endereco = composite(Endereco, logradouro, cidade, estado, cep)
