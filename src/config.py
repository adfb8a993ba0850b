# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida do ambiente (ou de um arquivo .env).
"""
from starlette.config import Config
from starlette.datastructures import Secret

config = Config('.env')  # Lê as variáveis do arquivo .env, se existir

DATABASE_URL = config("DATABASE_URL", default="sqlite:///./api_pagamentos.db")

# Se for PostgreSQL no Render, ajusta o prefixo se necessário
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# --- SEGURANÇA ---
SECRET_KEY = config("SECRET_KEY", cast=Secret, default="4f1c2b9e8d7a6f5e3c2b1a09f8e7d6c5b4a39281706f5e4d3c2b1a0f9e8d7c6b")
ALGORITHM = config("ALGORITHM", default="HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = config("ACCESS_TOKEN_EXPIRE_MINUTES", cast=int, default=60 * 8)

# --- APLICAÇÃO ---
ENVIRONMENT = config("ENVIRONMENT", default="development")
FRONTEND_URL = config("FRONTEND_URL", default="http://localhost:4200")

LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_FILE = config("LOG_FILE", default=None)

# Usuário administrador criado na primeira inicialização
ADMIN_USERNAME = config("ADMIN_USERNAME", default="admin")
ADMIN_PASSWORD = config("ADMIN_PASSWORD", cast=Secret, default="admin")
