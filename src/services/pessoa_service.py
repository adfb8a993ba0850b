# -*- coding: utf-8 -*-
"""
Regras de negócio de Pessoa: cadastro, atualização parcial do endereço,
troca de status e remoção com tradução de conflito.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import EstadoInvalidoException, RecursoEmUsoException, RecursoNaoEncontradoException
from src.models.pessoa import Endereco, Pessoa
from src.repositories.pessoa_repo import PessoaRepository
from src.schemas.paginacao import Pageable, montar_pagina
from src.schemas.pessoa import EnderecoSchema, PessoaCreate, PessoaRead, PessoaUpdate


def para_endereco(dados: EnderecoSchema) -> Endereco:
    return Endereco(
        logradouro=dados.logradouro,
        cidade=dados.cidade,
        estado=dados.estado,
        cep=dados.cep,
    )


class PessoaService:

    def __init__(self, db: Session, pessoa_repo: PessoaRepository = None) -> None:
        self._db = db
        self._repo = pessoa_repo or PessoaRepository(db)

    def _buscar_ou_falhar(self, codigo: int, bloquear: bool = False) -> Pessoa:
        pessoa = self._repo.buscar_por_codigo(codigo, bloquear=bloquear)
        if pessoa is None:
            raise RecursoNaoEncontradoException("Pessoa não encontrada")
        return pessoa

    def _salvar_e_confirmar(self, pessoa: Pessoa) -> PessoaRead:
        self._repo.salvar(pessoa)
        self._db.commit()
        self._db.refresh(pessoa)
        return PessoaRead.model_validate(pessoa)

    def criar(self, dados: PessoaCreate) -> PessoaRead:
        pessoa = Pessoa(
            nome=dados.nome,
            ativo=dados.ativo,
            endereco=para_endereco(dados.endereco),
        )
        criada = self._salvar_e_confirmar(pessoa)
        logging.info(f"Pessoa {criada.codigo} cadastrada.")
        return criada

    def buscar_por_codigo(self, codigo: int) -> PessoaRead:
        return PessoaRead.model_validate(self._buscar_ou_falhar(codigo))

    def listar(self, nome, pageable: Pageable) -> dict:
        pessoas, total = self._repo.listar_por_nome(nome, pageable)
        conteudo = [PessoaRead.model_validate(p) for p in pessoas]
        return montar_pagina(conteudo, total, pageable)

    def atualizar(self, codigo: int, dados: PessoaUpdate) -> PessoaRead:
        pessoa = self._buscar_ou_falhar(codigo, bloquear=True)

        pessoa.nome = dados.nome
        pessoa.ativo = dados.ativo
        # Endereço só é trocado quando enviado, e sempre por inteiro
        if dados.endereco is not None:
            pessoa.endereco = para_endereco(dados.endereco)

        return self._salvar_e_confirmar(pessoa)

    def atualizar_status(self, codigo: int, ativo: bool) -> PessoaRead:
        pessoa = self._buscar_ou_falhar(codigo, bloquear=True)

        # A comparação com o valor atual fica no próprio UPDATE: entre a leitura
        # acima e a escrita outra requisição pode ter trocado o status
        if self._repo.trocar_status(codigo, ativo) == 0:
            self._db.rollback()
            raise EstadoInvalidoException(
                f"O status 'ativo' já está definido como {str(ativo).lower()}."
            )

        self._db.commit()
        self._db.refresh(pessoa)
        logging.info(f"Pessoa {codigo} com status ativo={ativo}.")
        return PessoaRead.model_validate(pessoa)

    def remover(self, codigo: int) -> None:
        pessoa = self._buscar_ou_falhar(codigo, bloquear=True)
        try:
            self._repo.remover(pessoa)
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logging.warning(f"Pessoa {codigo} em uso, remoção recusada: {e.orig}")
            raise RecursoEmUsoException("Pessoa em uso e não pode ser removida.")
        logging.info(f"Pessoa {codigo} removida.")
