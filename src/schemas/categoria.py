# src/schemas/categoria.py
from pydantic import BaseModel, Field


class CategoriaBase(BaseModel):
    nome: str = Field(..., min_length=3, max_length=50)


class CategoriaCreate(CategoriaBase):
    pass


class CategoriaUpdate(CategoriaBase):
    pass


class CategoriaRead(CategoriaBase):
    codigo: int

    class Config:
        from_attributes = True
