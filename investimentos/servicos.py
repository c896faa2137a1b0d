"""Persistence services for authentication, accounts, wallets and orders."""

from __future__ import annotations

import os
import re
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional, Union

from .dominios import CPF, Codigo, CodigoNegociacao, DominioException, Nome, Perfil, Senha
from .entidades import Carteira, Conta, Ordem
from .valores import Data, Dinheiro, Quantidade

__all__ = [
    "DIRETORIO_PADRAO",
    "ServicoAutenticacao",
    "ServicoConta",
    "ServicoCarteira",
    "ServicoOrdem",
]

Caminho = Union[str, "os.PathLike[str]"]

DIRETORIO_PADRAO = "Data"

_TABELA_USUARIOS = (
    "CREATE TABLE IF NOT EXISTS usuarios ("
    "cpf TEXT PRIMARY KEY, senha TEXT NOT NULL, nome TEXT NOT NULL)"
)

# Leading numeric prefix, read the way a C string-to-double conversion reads it.
_PREFIXO_NUMERICO = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _abrir(diretorio: Path, arquivo: str) -> sqlite3.Connection:
    diretorio.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(diretorio / arquivo, isolation_level=None)


def _texto(valor: object) -> str:
    """Text stored for an optional domain value; unset values become ''."""
    return "" if valor is None else str(valor)


class ServicoAutenticacao:
    """Checks and registers user credentials in ``usuarios.db``."""

    ARQUIVO = "usuarios.db"

    def __init__(self, diretorio: Caminho = DIRETORIO_PADRAO) -> None:
        self._diretorio = Path(diretorio)
        with self._conectar() as conexao:
            conexao.execute(_TABELA_USUARIOS)

    def _conectar(self) -> closing[sqlite3.Connection]:
        return closing(_abrir(self._diretorio, self.ARQUIVO))

    def autenticar(self, cpf: CPF, senha: Senha) -> bool:
        """Return True if a user with this CPF and password exists."""
        with self._conectar() as conexao:
            linha = conexao.execute(
                "SELECT 1 FROM usuarios WHERE cpf = ? AND senha = ?",
                (str(cpf), str(senha)),
            ).fetchone()
        return linha is not None

    def registrar(self, cpf: CPF, senha: Senha, nome: Nome) -> None:
        """Store a new user; raise DominioException if the CPF is taken."""
        with self._conectar() as conexao:
            try:
                conexao.execute(
                    "INSERT INTO usuarios (cpf, senha, nome) VALUES (?, ?, ?)",
                    (str(cpf), str(senha), str(nome)),
                )
            except sqlite3.Error as erro:
                raise DominioException(f"Falha ao registrar conta: {erro}") from erro


class ServicoConta:
    """Reads and changes user accounts; keeps its connection open until closed."""

    ARQUIVO = "usuarios.db"

    def __init__(self, diretorio: Caminho = DIRETORIO_PADRAO) -> None:
        self._conexao = _abrir(Path(diretorio), self.ARQUIVO)
        self._conexao.execute(_TABELA_USUARIOS)

    def __enter__(self) -> ServicoConta:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.fechar()

    def fechar(self) -> None:
        """Close the database connection."""
        self._conexao.close()

    def criar(self, conta: Conta) -> bool:
        """Insert an account; unset name or password are stored empty."""
        try:
            self._conexao.execute(
                "INSERT INTO usuarios (cpf, senha, nome) VALUES (?, ?, ?)",
                (str(conta.cpf), _texto(conta.senha), _texto(conta.nome)),
            )
        except sqlite3.Error:
            return False
        return True

    def ler(self, cpf: CPF) -> Optional[Conta]:
        """Return the account with this CPF, or None if there is none."""
        linha = self._conexao.execute(
            "SELECT nome, senha FROM usuarios WHERE cpf = ?", (str(cpf),)
        ).fetchone()
        if linha is None:
            return None
        nome, senha = linha
        return Conta(cpf=cpf, nome=Nome(nome), senha=Senha(senha))

    def editar(self, conta: Conta) -> bool:
        """Update name and password, keeping the stored value of any left unset."""
        atual = self.ler(conta.cpf)
        nome = conta.nome if conta.nome is not None else (atual.nome if atual else None)
        senha = conta.senha if conta.senha is not None else (atual.senha if atual else None)
        try:
            self._conexao.execute(
                "UPDATE usuarios SET nome = ?, senha = ? WHERE cpf = ?",
                (_texto(nome), _texto(senha), str(conta.cpf)),
            )
        except sqlite3.Error:
            return False
        return True

    def excluir(self, cpf: CPF) -> bool:
        """Delete the account; False if no account had this CPF."""
        try:
            cursor = self._conexao.execute("DELETE FROM usuarios WHERE cpf = ?", (str(cpf),))
        except sqlite3.Error:
            return False
        return cursor.rowcount > 0


class ServicoCarteira:
    """Stores wallets in ``carteiras.db``, at most five per CPF."""

    ARQUIVO = "carteiras.db"
    LIMITE_POR_CPF = 5

    def __init__(self, diretorio: Caminho = DIRETORIO_PADRAO) -> None:
        self._diretorio = Path(diretorio)
        with self._conectar() as conexao:
            conexao.execute(
                "CREATE TABLE IF NOT EXISTS carteiras ("
                "codigo TEXT PRIMARY KEY, nome TEXT NOT NULL, "
                "perfil TEXT NOT NULL, cpf TEXT NOT NULL)"
            )

    def _conectar(self) -> closing[sqlite3.Connection]:
        return closing(_abrir(self._diretorio, self.ARQUIVO))

    def criar_carteira_para(self, cpf: CPF, carteira: Carteira) -> bool:
        """Add a wallet for a CPF; raise DominioException past the limit."""
        with self._conectar() as conexao:
            (total,) = conexao.execute(
                "SELECT COUNT(*) FROM carteiras WHERE cpf = ?", (str(cpf),)
            ).fetchone()
            if total >= self.LIMITE_POR_CPF:
                raise DominioException("Limite de 5 carteiras atingido para este CPF.")
            try:
                conexao.execute(
                    "INSERT INTO carteiras (codigo, nome, perfil, cpf) VALUES (?, ?, ?, ?)",
                    (str(carteira.codigo), str(carteira.nome), str(carteira.perfil), str(cpf)),
                )
            except sqlite3.Error:
                return False
        return True

    def listar_carteiras_por(self, cpf: CPF) -> list[Carteira]:
        """Return the wallets that belong to a CPF."""
        with self._conectar() as conexao:
            linhas = conexao.execute(
                "SELECT codigo, nome, perfil FROM carteiras WHERE cpf = ?", (str(cpf),)
            ).fetchall()
        return [
            Carteira(codigo=Codigo(codigo), nome=Nome(nome), perfil=Perfil(perfil))
            for codigo, nome, perfil in linhas
        ]

    def ler(self, codigo: Codigo) -> Optional[Carteira]:
        """Return the wallet with this code, or None if there is none."""
        with self._conectar() as conexao:
            linha = conexao.execute(
                "SELECT nome, perfil FROM carteiras WHERE codigo = ?", (str(codigo),)
            ).fetchone()
        if linha is None:
            return None
        nome, perfil = linha
        return Carteira(codigo=codigo, nome=Nome(nome), perfil=Perfil(perfil))

    def editar(self, carteira: Carteira) -> bool:
        """Update the name and profile of the wallet with the same code."""
        with self._conectar() as conexao:
            try:
                conexao.execute(
                    "UPDATE carteiras SET nome = ?, perfil = ? WHERE codigo = ?",
                    (str(carteira.nome), str(carteira.perfil), str(carteira.codigo)),
                )
            except sqlite3.Error:
                return False
        return True

    def excluir(self, codigo: Codigo) -> bool:
        """Delete the wallet with this code."""
        with self._conectar() as conexao:
            try:
                conexao.execute("DELETE FROM carteiras WHERE codigo = ?", (str(codigo),))
            except sqlite3.Error:
                return False
        return True


class ServicoOrdem:
    """Stores trade orders per CPF in ``ordens.db``."""

    ARQUIVO = "ordens.db"
    TAMANHO_MINIMO_LINHA = 126

    def __init__(self, diretorio: Caminho = DIRETORIO_PADRAO) -> None:
        self._conexao = _abrir(Path(diretorio), self.ARQUIVO)
        self._conexao.execute(
            "CREATE TABLE IF NOT EXISTS ordens ("
            "cpf TEXT NOT NULL, codigo TEXT NOT NULL, codigo_negociacao TEXT NOT NULL, "
            "data TEXT NOT NULL, preco TEXT NOT NULL, quantidade TEXT NOT NULL)"
        )

    def __enter__(self) -> ServicoOrdem:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.fechar()

    def fechar(self) -> None:
        """Close the database connection."""
        self._conexao.close()

    def inserir_ordem(self, cpf: CPF, ordem: Ordem) -> bool:
        """Store an order for a CPF."""
        try:
            self._conexao.execute(
                "INSERT INTO ordens (cpf, codigo, codigo_negociacao, data, preco, quantidade) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    str(cpf),
                    _texto(ordem.codigo),
                    str(ordem.codigo_negociacao),
                    str(ordem.data),
                    f"{ordem.preco.valor:f}",
                    str(ordem.quantidade.valor),
                ),
            )
        except sqlite3.Error:
            return False
        return True

    def listar_ordens(self, cpf: CPF) -> list[Ordem]:
        """Return the orders stored for a CPF, in insertion order."""
        linhas = self._conexao.execute(
            "SELECT codigo, codigo_negociacao, data, preco, quantidade "
            "FROM ordens WHERE cpf = ?",
            (str(cpf),),
        ).fetchall()
        return [
            Ordem(
                codigo=Codigo(codigo) if codigo else None,
                codigo_negociacao=CodigoNegociacao(codigo_negociacao),
                data=Data.parse(data),
                preco=Dinheiro(float(preco)),
                quantidade=Quantidade.parse(quantidade),
            )
            for codigo, codigo_negociacao, data, preco, quantidade in linhas
        ]

    def importar_de_arquivo(self, cpf: CPF, caminho: Caminho) -> bool:
        """Import fixed-width quote lines as orders of quantity 1.

        Lines shorter than 126 characters or with invalid fields are skipped.
        Returns False only if the file cannot be opened.
        """
        try:
            arquivo = open(caminho, encoding="latin-1")
        except OSError:
            return False
        with arquivo:
            for linha in arquivo:
                ordem = self._ordem_da_linha(linha.rstrip("\n"))
                if ordem is not None:
                    self.inserir_ordem(cpf, ordem)
        return True

    @classmethod
    def _ordem_da_linha(cls, linha: str) -> Optional[Ordem]:
        if len(linha) < cls.TAMANHO_MINIMO_LINHA:
            return None
        preco = _PREFIXO_NUMERICO.match(linha[113:126])
        if preco is None:
            return None
        try:
            return Ordem(
                codigo_negociacao=CodigoNegociacao(linha[12:24]),
                data=Data.parse(linha[2:10]),
                preco=Dinheiro(float(preco.group()) / 100.0),
                quantidade=Quantidade.parse("1"),
            )
        except DominioException:
            return None