"""Validated value objects for accounts, wallets and orders."""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = [
    "DominioException",
    "Codigo",
    "CodigoNegociacao",
    "CPF",
    "Nome",
    "Perfil",
    "Senha",
]

_DIGITOS = frozenset(string.digits)
_ALFANUMERICOS = frozenset(string.ascii_letters + string.digits)


class DominioException(ValueError):
    """Raised when a value breaks the rules of its domain."""


@dataclass(frozen=True)
class _Dominio:
    """Immutable string value checked on construction."""

    valor: str

    def __post_init__(self) -> None:
        if not isinstance(self.valor, str):
            raise TypeError(f"{type(self).__name__} expects a str, got {type(self.valor).__name__}")
        self._validar(self.valor)

    @classmethod
    def _validar(cls, valor: str) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.valor


class Codigo(_Dominio):
    """Five-digit numeric code."""

    TAMANHO = 5

    @classmethod
    def _validar(cls, valor: str) -> None:
        if not valor:
            raise DominioException("Por favor, digite algum valor para continuar")
        if len(valor) != cls.TAMANHO:
            raise DominioException(
                "O tamanho esta invalido! Codigo deve conter exatamente 5 digitos."
            )
        if not set(valor) <= _DIGITOS:
            raise DominioException("O Codigo deve conter apenas digitos!")


class CodigoNegociacao(_Dominio):
    """Trading code: 1 to 12 ASCII letters, digits or spaces."""

    MAXIMO = 12

    @classmethod
    def _validar(cls, valor: str) -> None:
        if not valor or len(valor) > cls.MAXIMO:
            raise DominioException("Tamanho do codigo invalido!")
        if any(c not in _ALFANUMERICOS and c != " " for c in valor):
            raise DominioException("Caractere invalido")


class CPF(_Dominio):
    """Brazilian taxpayer number: eleven digits with two check digits."""

    TAMANHO = 11

    @classmethod
    def _validar(cls, valor: str) -> None:
        if not valor:
            raise DominioException("Por favor, digite algum valor para continuar")
        if len(valor) != cls.TAMANHO:
            raise DominioException(
                "O tamanho esta invalido! CPF deve conter exatamente 11 digitos sem pontuacao."
            )
        if not set(valor) <= _DIGITOS:
            raise DominioException("O CPF deve conter apenas digitos!")
        if len(set(valor)) == 1:
            raise DominioException("O CPF deve conter digitos diferentes!")
        if not cls._digitos_verificadores_validos(valor):
            raise DominioException("Digitos verificadores do CPF invalidos")

    @staticmethod
    def _digito_verificador(digitos: list[int]) -> int:
        peso_inicial = len(digitos) + 1
        soma = sum(d * peso for d, peso in zip(digitos, range(peso_inicial, 1, -1)))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @classmethod
    def _digitos_verificadores_validos(cls, valor: str) -> bool:
        digitos = [int(c) for c in valor]
        primeiro = cls._digito_verificador(digitos[:9])
        segundo = cls._digito_verificador(digitos[:10])
        return digitos[9] == primeiro and digitos[10] == segundo


class Nome(_Dominio):
    """Name of ASCII letters, digits and single spaces."""

    MAXIMO = 21

    @classmethod
    def _validar(cls, valor: str) -> None:
        if len(valor) > cls.MAXIMO:
            raise DominioException("Nome invalido! Nome deve conter no maximo 20 caracteres")
        if not valor or valor == " ":
            raise DominioException(
                "Nome invalido! Nome deve conter no minimo 1 caracter que deve ser diferente de ' '."
            )
        for atual, seguinte in zip(valor, valor[1:] + "\0"):
            if atual == " " and seguinte == " ":
                raise DominioException(
                    "Nome invalido! Nome nao pode conter dois espacos consecultivos"
                )
            if atual not in _ALFANUMERICOS and atual != " ":
                raise DominioException(
                    "Nome invalido! O nome deve conter apenas letras ou numeros."
                )


class Perfil(_Dominio):
    """Investment profile: Conservador, Moderado or Agressivo."""

    VALORES = ("Conservador", "Moderado", "Agressivo")

    @classmethod
    def _validar(cls, valor: str) -> None:
        if valor not in cls.VALORES:
            raise DominioException("Tipo de perfil incorreto!")


class Senha(_Dominio):
    """Six distinct characters with an upper, a lower, a digit and one of #$%&."""

    CARACTERES = 6
    ESPECIAIS = frozenset("#$%&")

    @classmethod
    def _validar(cls, valor: str) -> None:
        if len(valor) != cls.CARACTERES:
            raise DominioException("Tamanho invalido! Senha deve conter exatamente 6 caracteres")
        vistos: set[str] = set()
        for c in valor:
            if c in vistos:
                raise DominioException(
                    "Formato invalido! Senha não pode conter dois caracteres iguais"
                )
            vistos.add(c)
        if not any(c in string.ascii_uppercase for c in valor):
            raise DominioException("Formato invalido! Senha nao possui letra maiuscula")
        if not any(c in string.ascii_lowercase for c in valor):
            raise DominioException("Formato invalido! Senha nao possui letra minuscula")
        if not any(c in _DIGITOS for c in valor):
            raise DominioException("Formato invalido! Senha nao possui numero")
        if not any(c in cls.ESPECIAIS for c in valor):
            raise DominioException("Formato invalido! Senha nao possui caracter especial")