"""Validated numeric values: dates, money and quantities."""

from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .dominios import DominioException

__all__ = ["Data", "Dinheiro", "Quantidade"]

_DIGITOS = frozenset(string.digits)
_LETRAS = frozenset(string.ascii_letters)
_MESES_DE_30_DIAS = frozenset({4, 6, 9, 11})

# Leading numeric prefix, in the manner of a C string-to-double conversion.
_PREFIXO_NUMERICO = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _bissexto(ano: int) -> bool:
    return (ano % 4 == 0 and ano % 100 != 0) or ano % 400 == 0


@dataclass(frozen=True)
class Data:
    """Calendar date checked for valid month and day."""

    dia: int
    mes: int
    ano: int

    def __post_init__(self) -> None:
        if not 1 <= self.mes <= 12:
            raise DominioException("Mes invalido.")
        if not 1 <= self.dia <= 31:
            raise DominioException("Dia invalido.")
        if self.mes in _MESES_DE_30_DIAS and self.dia > 30:
            raise DominioException("Dia invalido para o mes.")
        if self.mes == 2 and self.dia > (29 if _bissexto(self.ano) else 28):
            raise DominioException("Dia invalido para fevereiro.")

    @classmethod
    def parse(cls, texto: str) -> Data:
        """Build a date from an eight-digit AAAAMMDD string."""
        if len(texto) != 8 or not set(texto) <= _DIGITOS:
            raise DominioException("Data deve estar no formato AAAAMMDD.")
        return cls(dia=int(texto[6:8]), mes=int(texto[4:6]), ano=int(texto[0:4]))

    def __str__(self) -> str:
        return f"{self.ano:04d}{self.mes:02d}{self.dia:02d}"


def _arredondar(valor: float) -> float:
    """Round to two decimal places, halves away from zero."""
    if not math.isfinite(valor):
        return valor
    centavos = Decimal(valor * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(centavos) / 100


@dataclass(frozen=True)
class Dinheiro:
    """Amount of money between 0 and 1,000,000, kept to two decimal places."""

    valor: float

    MAXIMO = 1_000_000.00

    def __post_init__(self) -> None:
        valor = _arredondar(float(self.valor))
        if valor < 0.00 or valor > self.MAXIMO:
            raise DominioException(
                "Valor invalido, voce deve inserir um valor entre 0.01 e 1,000,000.00 "
            )
        object.__setattr__(self, "valor", valor)

    @classmethod
    def parse(cls, texto: str) -> Dinheiro:
        """Build an amount from user input of at most nine characters."""
        if not texto:
            raise DominioException("Por favor, digite algum valor para continuar.")
        if len(texto) > 9:
            raise DominioException(
                "Valor invalida! O valor que voce digitou esta fora da faixa de valores."
            )
        if set(texto) <= _LETRAS:
            raise DominioException("O valor deve conter apenas numeros.")
        encontrado = _PREFIXO_NUMERICO.match(texto)
        if encontrado is None:
            raise DominioException(f"Valor nao numerico: {texto!r}")
        return cls(float(encontrado.group()))

    def __float__(self) -> float:
        return self.valor


@dataclass(frozen=True)
class Quantidade:
    """Whole quantity between 0 and 1,000,000."""

    valor: int

    MAXIMO = 1_000_000

    def __post_init__(self) -> None:
        if self.valor < 0 or self.valor > self.MAXIMO:
            raise DominioException(
                "Quantiade invalida! O valor digitado deve estar entre 0 e 1,000,000"
            )

    @classmethod
    def parse(cls, texto: str) -> Quantidade:
        """Build a quantity from up to seven decimal digits."""
        if not texto:
            raise DominioException("Por favor, digite algum valor para continuar.")
        if len(texto) > 7:
            raise DominioException(
                "Quantidade invalida! O valor que voce digitou esta fora da faixa de valores."
            )
        if not set(texto) <= _DIGITOS:
            raise DominioException("O valor da quantidade deve conter apenas numeros.")
        return cls(int(texto))

    def __int__(self) -> int:
        return self.valor