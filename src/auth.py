# src/auth.py
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from src import config, database
from src.models import usuario as models_usuario


# --- CONFIGURAÇÃO DE SEGURANÇA ---
SECRET_KEY = str(config.SECRET_KEY)
ALGORITHM = config.ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = config.ACCESS_TOKEN_EXPIRE_MINUTES

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def get_expiration_time():
    """Tempo de vida do token em milissegundos."""
    return ACCESS_TOKEN_EXPIRE_MINUTES * 60 * 1000

def create_access_token(data: dict):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def create_token_for_user(user: models_usuario.Usuario):
    return create_access_token(
        data={"sub": user.username, "roles": sorted(user.lista_papeis)}
    )

# --- DEPENDÊNCIAS DE AUTENTICAÇÃO E AUTORIZAÇÃO ---
def get_user(db: Session, username: str):
    return db.query(models_usuario.Usuario).filter(models_usuario.Usuario.username == username).first()

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(database.get_db)):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Credenciais inválidas", headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        username: str = payload.get("sub")
        if username is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception
    user = get_user(db, username=username)
    if user is None:
        raise credentials_exception
    return user

def exigir_papeis(*papeis):
    """
    Cria uma dependência que só deixa passar usuários com pelo menos um dos papéis
    informados. Ex.: Depends(exigir_papeis("ADMIN", "USER")).
    """
    def verificar(current_user: models_usuario.Usuario = Depends(get_current_user)):
        if not current_user.lista_papeis.intersection(papeis):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Acesso negado para o seu perfil."
            )
        return current_user
    return verificar

get_admin_or_user = exigir_papeis(models_usuario.PAPEL_ADMIN, models_usuario.PAPEL_USER)
get_admin_user = exigir_papeis(models_usuario.PAPEL_ADMIN)
