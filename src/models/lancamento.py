# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Lancamento (contas a pagar e a receber).
"""
import enum

from sqlalchemy import Column, Integer, String, Numeric, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base


class TipoLancamento(str, enum.Enum):
    RECEITA = "RECEITA"
    DESPESA = "DESPESA"


class Lancamento(Base):
    __tablename__ = 'lancamento'

    codigo = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(100), nullable=False)
    valor = Column(Numeric(10, 2), nullable=False)
    data_vencimento = Column(Date, nullable=False, index=True)
    data_pagamento = Column(Date, nullable=True)  # Só é preenchida quando pago
    observacao = Column(String(255), nullable=True)
    tipo = Column(Enum(TipoLancamento, name="tipo_lancamento"), nullable=False)

    # --- CHAVES ESTRANGEIRAS (sem cascade: exclusão de referência gera conflito) ---
    categoria_codigo = Column(Integer, ForeignKey("categoria.codigo"), nullable=False)
    pessoa_codigo = Column(Integer, ForeignKey("pessoa.codigo"), nullable=False)

    # Relacionamentos apenas deste lado: o ORM nunca tenta anular a FK ao excluir
    # uma categoria ou pessoa. Os serviços carregam ambos com joinedload.
    categoria = relationship("Categoria")
    pessoa = relationship("Pessoa")
