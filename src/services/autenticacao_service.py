# -*- coding: utf-8 -*-
"""
Autenticação de usuários por username e senha.
"""
import logging

from sqlalchemy.orm import Session

from src import auth
from src.exceptions import AutenticacaoException
from src.models.usuario import Usuario


class AutenticacaoService:

    def __init__(self, db: Session) -> None:
        self._db = db

    def autenticar(self, username: str, password: str) -> Usuario:
        user = auth.get_user(self._db, username=username)
        if not user or not user.hashed_password or not auth.verify_password(password, user.hashed_password):
            logging.warning(f"Falha de login para o usuário '{username}'.")
            raise AutenticacaoException("Usuário ou senha inválidos")
        return user

    def gerar_login(self, username: str, password: str) -> dict:
        user = self.autenticar(username, password)
        return {
            "token": auth.create_token_for_user(user),
            "expires_at": auth.get_expiration_time(),
            "token_type": "bearer",
        }
