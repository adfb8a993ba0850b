# src/schemas/lancamento.py
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date
from decimal import Decimal

from src.models.lancamento import TipoLancamento
from src.schemas.categoria import CategoriaRead
from src.schemas.pessoa import PessoaRead


class ReferenciaCodigo(BaseModel):
    """Referência a uma entidade existente pelo código, ex.: {"codigo": 1}."""
    codigo: int


class LancamentoBase(BaseModel):
    descricao: str = Field(..., min_length=1, max_length=100)
    valor: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    data_vencimento: date
    data_pagamento: Optional[date] = None
    observacao: Optional[str] = Field(None, max_length=255)
    tipo: TipoLancamento


class LancamentoCreate(LancamentoBase):
    categoria: ReferenciaCodigo
    pessoa: ReferenciaCodigo


class LancamentoUpdate(LancamentoBase):
    # Referências omitidas mantêm a categoria/pessoa atuais
    categoria: Optional[ReferenciaCodigo] = None
    pessoa: Optional[ReferenciaCodigo] = None


class LancamentoRead(LancamentoBase):
    codigo: int
    categoria: CategoriaRead
    pessoa: PessoaRead

    class Config:
        from_attributes = True


class ResumoLancamento(BaseModel):
    codigo: int
    descricao: str
    data_vencimento: date
    data_pagamento: Optional[date] = None
    valor: Decimal
    tipo: TipoLancamento
    categoria: str
    pessoa: str

    class Config:
        from_attributes = True


class LancamentoFilter(BaseModel):
    descricao: Optional[str] = None
    data_vencimento_de: Optional[date] = None
    data_vencimento_ate: Optional[date] = None


class LancamentoPage(BaseModel):
    content: List[LancamentoRead]
    number: int
    size: int
    total_elements: int
    total_pages: int


class ResumoLancamentoPage(BaseModel):
    content: List[ResumoLancamento]
    number: int
    size: int
    total_elements: int
    total_pages: int
