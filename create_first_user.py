import logging

from sqlalchemy.exc import SQLAlchemyError

from src import config
from src.database import SessionLocal
from src.auth import get_password_hash
from src.models.usuario import Usuario, PAPEL_ADMIN, PAPEL_USER


def create_first_user(session_factory=SessionLocal):
    db = session_factory()

    try:
        # Verifica se o administrador já existe
        user = db.query(Usuario).filter(Usuario.username == config.ADMIN_USERNAME).first()

        if not user:
            logging.info("Criando primeiro usuário administrador...")
            db_user = Usuario(
                username=config.ADMIN_USERNAME,
                nome="Administrador do Sistema",
                hashed_password=get_password_hash(str(config.ADMIN_PASSWORD)),
                papeis=f"{PAPEL_ADMIN},{PAPEL_USER}"
            )
            db.add(db_user)
            db.commit()
            logging.info(f"Usuário '{config.ADMIN_USERNAME}' criado com sucesso.")
        else:
            logging.info(f"Usuário administrador '{config.ADMIN_USERNAME}' já existe.")

    except SQLAlchemyError as e:
        logging.error(f"Erro ao criar usuário administrador: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    from src.database import engine, Base
    from src.models import categoria, lancamento, pessoa  # noqa: F401
    Base.metadata.create_all(bind=engine)
    create_first_user()
