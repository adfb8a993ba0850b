# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy para a aplicação FastAPI.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from src import config

DATABASE_URL = config.DATABASE_URL

# Configuração de argumentos de conexão
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# Cria a engine SQLAlchemy com configurações de robustez (Pool Pre-Ping)
engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    # pool_pre_ping=True: Verifica se a conexão está viva antes de usar
    pool_pre_ping=True,
    # pool_recycle: Recicla conexões a cada hora para evitar timeouts do banco
    pool_recycle=3600
)


def habilitar_chaves_estrangeiras(engine_alvo):
    """
    O SQLite só verifica chaves estrangeiras com o PRAGMA ligado em cada conexão.
    Sem isso, excluir uma categoria ou pessoa em uso não gera IntegrityError.
    """
    if engine_alvo.dialect.name != "sqlite":
        return

    @event.listens_for(engine_alvo, "connect")
    def _ligar_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


habilitar_chaves_estrangeiras(engine)

# Cria uma SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Cria uma Base class
Base = declarative_base()

# Função para obter uma sessão do banco de dados (usada com Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
