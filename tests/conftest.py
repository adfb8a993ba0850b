# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src import auth
from src.database import Base, get_db, habilitar_chaves_estrangeiras
from src.models.usuario import PAPEL_ADMIN, PAPEL_USER, Usuario

SENHA_PADRAO = "senha123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
habilitar_chaves_estrangeiras(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session")
def senha_hash() -> str:
    """Hash bcrypt calculado uma vez só (é lento de propósito)."""
    return auth.get_password_hash(SENHA_PADRAO)


@pytest.fixture()
def db(senha_hash: str) -> Generator[Session, None, None]:
    """Banco SQLite in-memory recriado a cada teste, com um ADMIN e um USER."""
    from main import app  # noqa: F401  registra todos os modelos

    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    session.add_all([
        Usuario(username="admin", nome="Admin", hashed_password=senha_hash,
                papeis=f"{PAPEL_ADMIN},{PAPEL_USER}"),
        Usuario(username="maria", nome="Maria", hashed_password=senha_hash,
                papeis=PAPEL_USER),
    ])
    session.commit()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session_factory(db: Session):
    return TestingSessionLocal


@pytest.fixture()
def client(db: Session) -> Generator[TestClient, None, None]:
    from main import app

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Sem o 'with': o lifespan (create_all no banco real) não roda nos testes
    yield TestClient(app)
    app.dependency_overrides.clear()


def _headers_para(db: Session, username: str) -> dict:
    user = db.query(Usuario).filter(Usuario.username == username).first()
    return {"Authorization": f"Bearer {auth.create_token_for_user(user)}"}


@pytest.fixture()
def admin_headers(db: Session) -> dict:
    return _headers_para(db, "admin")


@pytest.fixture()
def user_headers(db: Session) -> dict:
    return _headers_para(db, "maria")


ENDERECO_PADRAO = {
    "logradouro": "Rua A",
    "cidade": "Manaus",
    "estado": "AM",
    "cep": "69000000",
}


@pytest.fixture()
def criar_pessoa(client: TestClient, admin_headers: dict):
    def _criar(nome="Ana Silva", ativo=True, endereco=None):
        payload = {"nome": nome, "ativo": ativo, "endereco": endereco or dict(ENDERECO_PADRAO)}
        response = client.post("/pessoas", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _criar


@pytest.fixture()
def criar_categoria(client: TestClient, admin_headers: dict):
    def _criar(nome="Alimentação"):
        response = client.post("/categorias", json={"nome": nome}, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _criar


@pytest.fixture()
def criar_lancamento(client: TestClient, admin_headers: dict, criar_pessoa, criar_categoria):
    def _criar(descricao="Conta de luz", data_vencimento="2024-03-10", valor="150.00",
               tipo="DESPESA", categoria=None, pessoa=None, data_pagamento=None):
        categoria = categoria or criar_categoria()
        pessoa = pessoa or criar_pessoa()
        payload = {
            "descricao": descricao,
            "valor": valor,
            "data_vencimento": data_vencimento,
            "data_pagamento": data_pagamento,
            "observacao": None,
            "tipo": tipo,
            "categoria": {"codigo": categoria["codigo"]},
            "pessoa": {"codigo": pessoa["codigo"]},
        }
        response = client.post("/lancamentos", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _criar
