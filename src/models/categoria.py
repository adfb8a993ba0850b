# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Categoria.
"""
from sqlalchemy import Column, Integer, String
from src.database import Base

class Categoria(Base):
    __tablename__ = 'categoria'

    codigo = Column(Integer, primary_key=True, index=True)
    nome = Column(String(50), index=True, nullable=False)
