# src/schemas/pessoa.py
from pydantic import BaseModel, Field
from typing import Optional, List


class EnderecoSchema(BaseModel):
    logradouro: str = Field(..., min_length=1, max_length=100)
    cidade: str = Field(..., min_length=1, max_length=50)
    estado: str = Field(..., min_length=2, max_length=2)
    cep: str = Field(..., min_length=8, max_length=9)

    class Config:
        from_attributes = True


class PessoaBase(BaseModel):
    nome: str = Field(..., min_length=3, max_length=50)
    ativo: bool


class PessoaCreate(PessoaBase):
    endereco: EnderecoSchema


class PessoaUpdate(PessoaCreate):
    # Endereço omitido (ou null) mantém o endereço atual da pessoa
    endereco: Optional[EnderecoSchema] = None


class PessoaRead(PessoaBase):
    codigo: int
    endereco: EnderecoSchema

    class Config:
        from_attributes = True


class PessoaPage(BaseModel):
    content: List[PessoaRead]
    number: int
    size: int
    total_elements: int
    total_pages: int
