from pydantic import BaseModel, Field
from typing import List, Optional

class UsuarioRead(BaseModel):
    codigo: int
    username: str
    nome: Optional[str] = None
    papeis: List[str]

    @classmethod
    def from_usuario(cls, usuario):
        return cls(
            codigo=usuario.codigo,
            username=usuario.username,
            nome=usuario.nome,
            papeis=sorted(usuario.lista_papeis),
        )

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)

class LoginResponse(BaseModel):
    token: str
    expires_at: int  # Tempo de expiração do token em milissegundos
    token_type: str = "bearer"

class Token(BaseModel):
    access_token: str
    token_type: str
    user_info: UsuarioRead
