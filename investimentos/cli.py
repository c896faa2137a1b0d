"""Command-line entry point: wires services and menus and starts the login menu."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .controladoras import CtrlAutenticacao, CtrlCarteira, CtrlConta
from .servicos import DIRETORIO_PADRAO, ServicoAutenticacao, ServicoCarteira, ServicoConta

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive investment system on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="investimentos",
        description="Gerencia contas e carteiras de investimento.",
    )
    parser.add_argument(
        "--diretorio",
        default=DIRETORIO_PADRAO,
        help="diretorio dos bancos de dados (padrao: %(default)s)",
    )
    args = parser.parse_args(argv)

    servico_autenticacao = ServicoAutenticacao(args.diretorio)
    servico_carteira = ServicoCarteira(args.diretorio)
    with ServicoConta(args.diretorio) as servico_conta:
        ctrl_carteira = CtrlCarteira(servico_carteira)
        ctrl_conta = CtrlConta(servico_conta, ctrl_carteira)
        CtrlAutenticacao(servico_autenticacao, servico_conta, ctrl_conta).menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())