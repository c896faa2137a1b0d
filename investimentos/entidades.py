"""Entities built from validated domain values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dominios import CPF, Codigo, CodigoNegociacao, Nome, Perfil, Senha
from .valores import Data, Dinheiro, Quantidade

__all__ = ["Carteira", "Conta", "Ordem"]


@dataclass(kw_only=True)
class Carteira:
    """Investment wallet with a code, a name and a profile."""

    codigo: Codigo
    nome: Nome
    perfil: Perfil


@dataclass(kw_only=True)
class Conta:
    """User account identified by CPF; name and password may be left unset."""

    cpf: CPF
    nome: Optional[Nome] = None
    senha: Optional[Senha] = None


@dataclass(kw_only=True)
class Ordem:
    """Trade order; its own code may be left unset."""

    codigo_negociacao: CodigoNegociacao
    data: Data
    preco: Dinheiro
    quantidade: Quantidade
    codigo: Optional[Codigo] = None