from sqlalchemy import Column, Integer, String
from src.database import Base

PAPEL_ADMIN = "ADMIN"
PAPEL_USER = "USER"

class Usuario(Base):
    __tablename__ = "usuario"

    codigo = Column(Integer, primary_key=True, index=True)

    # Login do usuário (obrigatório e único)
    username = Column(String(50), unique=True, index=True, nullable=False)

    nome = Column(String(100))
    hashed_password = Column(String, nullable=False)

    # Conjunto de papéis separado por vírgula, ex.: "ADMIN,USER"
    papeis = Column(String(100), nullable=False, default=PAPEL_USER)

    @property
    def lista_papeis(self):
        return {p.strip() for p in (self.papeis or "").split(",") if p.strip()}
