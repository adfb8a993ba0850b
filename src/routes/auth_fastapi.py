# src/routes/auth_fastapi.py
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from src import auth
from src.models.usuario import Usuario
from src.schemas import usuario as schemas_usuario # Importa especificamente e dá um apelido
from src.services.autenticacao_service import AutenticacaoService
from src.services.dependencies import get_autenticacao_service


router = APIRouter(
    prefix="/api/auth",
    tags=["Authentication"]
)

@router.post("/login", response_model=schemas_usuario.LoginResponse)
def login(dados: schemas_usuario.LoginRequest, service: AutenticacaoService = Depends(get_autenticacao_service)):
    """
    Valida usuário e senha e devolve o token JWT com seu tempo de expiração.
    """
    return service.gerar_login(dados.username, dados.password)

@router.post("/token", response_model=schemas_usuario.Token)
def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(),
                           service: AutenticacaoService = Depends(get_autenticacao_service)):
    """
    Mesmo login em formato de formulário OAuth2, usado pelo botão 'Authorize' do /docs.
    """
    user = service.autenticar(form_data.username, form_data.password)
    access_token = auth.create_token_for_user(user)

    user_info = schemas_usuario.UsuarioRead.from_usuario(user)
    return {"access_token": access_token, "token_type": "bearer", "user_info": user_info}

@router.get("/me", response_model=schemas_usuario.UsuarioRead)
def read_users_me(current_user: Usuario = Depends(auth.get_current_user)):
    """
    Retorna os dados do usuário atualmente logado.
    """
    return schemas_usuario.UsuarioRead.from_usuario(current_user)
