"""Interactive text menus for login, accounts and wallets."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from .dominios import CPF, Codigo, DominioException, Nome, Perfil, Senha
from .entidades import Carteira, Conta

__all__ = ["CtrlAutenticacao", "CtrlConta", "CtrlCarteira"]


class _LNAutenticacao(Protocol):
    def autenticar(self, cpf: CPF, senha: Senha) -> bool: ...

    def registrar(self, cpf: CPF, senha: Senha, nome: Nome) -> None: ...


class _LNConta(Protocol):
    def criar(self, conta: Conta) -> bool: ...

    def ler(self, cpf: CPF) -> Optional[Conta]: ...

    def editar(self, conta: Conta) -> bool: ...

    def excluir(self, cpf: CPF) -> bool: ...


class _LNCarteira(Protocol):
    def criar_carteira_para(self, cpf: CPF, carteira: Carteira) -> bool: ...

    def listar_carteiras_por(self, cpf: CPF) -> list[Carteira]: ...

    def editar(self, carteira: Carteira) -> bool: ...

    def excluir(self, codigo: Codigo) -> bool: ...


class _IUConta(Protocol):
    def menu(self, cpf: CPF) -> None: ...


class _Terminal:
    """Line-oriented prompts over a pair of text streams."""

    def __init__(self, entrada: Optional[TextIO], saida: Optional[TextIO]) -> None:
        self._entrada = entrada if entrada is not None else sys.stdin
        self._saida = saida if saida is not None else sys.stdout

    def escrever(self, texto: str) -> None:
        self._saida.write(texto)

    def erro(self, erro: Exception) -> None:
        self._saida.write(f"Erro: {erro}\n")

    def perguntar(self, prompt: str) -> str:
        """Show a prompt and return the next line; EOFError at end of input."""
        self._saida.write(prompt)
        self._saida.flush()
        linha = self._entrada.readline()
        if not linha:
            raise EOFError
        return linha.rstrip("\n")

    def opcao(self) -> int:
        """Read a menu choice; input that is not a number counts as 0."""
        linha = self.perguntar("Escolha: ")
        try:
            return int(linha.strip())
        except ValueError:
            return 0


def _texto(valor: object) -> str:
    return "" if valor is None else str(valor)


_MENU_CARTEIRA = (
    "\n--- MENU CARTEIRA ---\n"
    "1 - Criar carteira\n"
    "2 - Listar carteiras\n"
    "3 - Editar carteira\n"
    "4 - Excluir carteira\n"
    "0 - Voltar\n"
)

_MENU_CONTA = (
    "\n--- MENU CONTA ---\n"
    "1 - Gerenciar carteiras\n"
    "2 - Visualizar conta\n"
    "3 - Editar conta\n"
    "4 - Excluir conta\n"
    "0 - Logout\n"
)

_MENU_EDITAR = (
    "\n--- EDITAR CONTA ---\n"
    "1 - Editar nome\n"
    "2 - Editar senha\n"
    "3 - Editar ambos\n"
    "0 - Cancelar\n"
)

_MENU_AUTENTICACAO = (
    "\n--- MENU AUTENTICACAO ---\n"
    "1 - Login\n"
    "2 - Registrar usuario\n"
    "0 - Sair\n"
)


class CtrlCarteira:
    """Menu to create, list, edit and delete the wallets of a user."""

    def __init__(
        self,
        servico: _LNCarteira,
        entrada: Optional[TextIO] = None,
        saida: Optional[TextIO] = None,
    ) -> None:
        self._servico = servico
        self._terminal = _Terminal(entrada, saida)

    def menu(self, cpf: CPF) -> None:
        """Run the wallet menu until the user goes back or input ends."""
        terminal = self._terminal
        while True:
            terminal.escrever(_MENU_CARTEIRA)
            try:
                opcao = terminal.opcao()
                if opcao == 0:
                    return
                if opcao == 1:
                    self._criar(cpf)
                elif opcao == 2:
                    self._listar(cpf)
                elif opcao == 3:
                    self._editar()
                elif opcao == 4:
                    self._excluir()
            except EOFError:
                return

    def _ler_carteira(self, prompts: tuple[str, str, str]) -> tuple[str, str, str]:
        codigo, nome, perfil = (self._terminal.perguntar(p) for p in prompts)
        return codigo, nome, perfil

    def _criar(self, cpf: CPF) -> None:
        codigo, nome, perfil = self._ler_carteira(
            ("Codigo: ", "Nome: ", "Perfil (Conservador, Moderado, Agressivo): ")
        )
        try:
            carteira = Carteira(codigo=Codigo(codigo), nome=Nome(nome), perfil=Perfil(perfil))
            criada = self._servico.criar_carteira_para(cpf, carteira)
        except DominioException as erro:
            self._terminal.erro(erro)
            return
        self._terminal.escrever(
            "Carteira criada com sucesso.\n" if criada else "Falha ao criar carteira.\n"
        )

    def _listar(self, cpf: CPF) -> None:
        for carteira in self._servico.listar_carteiras_por(cpf):
            self._terminal.escrever(
                f"- {carteira.codigo} | {carteira.nome} | {carteira.perfil}\n"
            )

    def _editar(self) -> None:
        codigo, nome, perfil = self._ler_carteira(
            ("Codigo da carteira: ", "Novo Nome: ", "Novo Perfil: ")
        )
        try:
            carteira = Carteira(codigo=Codigo(codigo), nome=Nome(nome), perfil=Perfil(perfil))
            editada = self._servico.editar(carteira)
        except DominioException as erro:
            self._terminal.erro(erro)
            return
        self._terminal.escrever(
            "Carteira atualizada.\n" if editada else "Falha ao atualizar carteira.\n"
        )

    def _excluir(self) -> None:
        texto = self._terminal.perguntar("Codigo da carteira: ")
        try:
            excluida = self._servico.excluir(Codigo(texto))
        except DominioException as erro:
            self._terminal.erro(erro)
            return
        self._terminal.escrever(
            "Carteira excluída.\n" if excluida else "Falha ao excluir carteira.\n"
        )


class CtrlConta:
    """Menu for a logged-in user's account."""

    def __init__(
        self,
        servico: _LNConta,
        ctrl_carteira: Optional[CtrlCarteira] = None,
        servico_carteira: Optional[_LNCarteira] = None,
        entrada: Optional[TextIO] = None,
        saida: Optional[TextIO] = None,
    ) -> None:
        self._servico = servico
        self._ctrl_carteira = ctrl_carteira
        self._servico_carteira = servico_carteira
        self._terminal = _Terminal(entrada, saida)

    def menu(self, cpf: CPF) -> None:
        """Run the account menu until logout, deletion or end of input."""
        terminal = self._terminal
        while True:
            terminal.escrever(_MENU_CONTA)
            try:
                opcao = terminal.opcao()
                if opcao == 0:
                    return
                if opcao == 1:
                    if self._ctrl_carteira is not None:
                        self._ctrl_carteira.menu(cpf)
                elif opcao == 2:
                    self._visualizar(cpf)
                elif opcao == 3:
                    self.editar(cpf)
                elif opcao == 4:
                    self.excluir(cpf)
                    return
            except EOFError:
                return

    def _visualizar(self, cpf: CPF) -> None:
        terminal = self._terminal
        try:
            conta = self._servico.ler(cpf)
            terminal.escrever(f"CPF: {cpf}\n")
            terminal.escrever(f"Nome: {_texto(conta.nome if conta else None)}\n")
            if self._servico_carteira is not None:
                carteiras = self._servico_carteira.listar_carteiras_por(cpf)
                terminal.escrever(f"Total de carteiras: {len(carteiras)}\n")
                for carteira in carteiras:
                    terminal.escrever(
                        f"- [{carteira.codigo}] {carteira.nome} - {carteira.perfil}\n"
                    )
        except DominioException as erro:
            terminal.erro(erro)

    def criar(self) -> None:
        """Ask for a CPF and a name and create an account without a password."""
        terminal = self._terminal
        cpf = terminal.perguntar("CPF: ")
        nome = terminal.perguntar("Nome: ")
        try:
            criada = self._servico.criar(Conta(cpf=CPF(cpf), nome=Nome(nome)))
        except DominioException as erro:
            terminal.erro(erro)
            return
        terminal.escrever("Conta criada com sucesso.\n" if criada else "Falha ao criar conta.\n")

    def ler(self) -> None:
        """Ask for a CPF and show the name of its account."""
        terminal = self._terminal
        texto = terminal.perguntar("CPF da conta a visualizar: ")
        try:
            conta = self._servico.ler(CPF(texto))
        except DominioException as erro:
            terminal.erro(erro)
            return
        terminal.escrever(f"Nome: {_texto(conta.nome if conta else None)}\n")

    def editar(self, cpf: CPF) -> None:
        """Ask which fields to change and update the account of this CPF."""
        terminal = self._terminal
        terminal.escrever(_MENU_EDITAR)
        opcao = terminal.opcao()
        if opcao == 0:
            terminal.escrever("Edição cancelada.\n")
            return
        nome: Optional[Nome] = None
        senha: Optional[Senha] = None
        try:
            if opcao in (1, 3):
                nome = Nome(terminal.perguntar("Novo Nome: "))
            if opcao in (2, 3):
                senha = Senha(terminal.perguntar("Nova Senha: "))
            editada = self._servico.editar(Conta(cpf=cpf, nome=nome, senha=senha))
        except DominioException as erro:
            terminal.erro(erro)
            return
        terminal.escrever("Conta atualizada.\n" if editada else "Falha ao atualizar conta.\n")

    def excluir(self, cpf: CPF) -> None:
        """Delete the account of this CPF."""
        try:
            excluida = self._servico.excluir(cpf)
        except DominioException as erro:
            self._terminal.erro(erro)
            return
        self._terminal.escrever("Conta excluída.\n" if excluida else "Falha ao excluir conta.\n")


class CtrlAutenticacao:
    """Entry menu: log in, register a user or leave."""

    def __init__(
        self,
        servico: _LNAutenticacao,
        servico_conta: Optional[_LNConta] = None,
        ctrl_conta: Optional[_IUConta] = None,
        entrada: Optional[TextIO] = None,
        saida: Optional[TextIO] = None,
    ) -> None:
        self._servico = servico
        self._servico_conta = servico_conta
        self._ctrl_conta = ctrl_conta
        self._terminal = _Terminal(entrada, saida)

    def autenticar(self) -> bool:
        """Ask for credentials; on success open the account menu and return True."""
        terminal = self._terminal
        texto_cpf = terminal.perguntar("Digite CPF: ")
        texto_senha = terminal.perguntar("Digite Senha: ")
        try:
            cpf = CPF(texto_cpf)
            senha = Senha(texto_senha)
            if not self._servico.autenticar(cpf, senha):
                terminal.escrever("CPF ou senha incorretos.\n")
                return False
            terminal.escrever("\nAutenticado com sucesso!\n")
            if self._servico_conta is not None and self._ctrl_conta is not None:
                self._ctrl_conta.menu(cpf)
            return True
        except DominioException as erro:
            terminal.erro(erro)
            return False

    def menu(self) -> None:
        """Run the entry menu until the user leaves or input ends."""
        terminal = self._terminal
        while True:
            terminal.escrever(_MENU_AUTENTICACAO)
            try:
                opcao = terminal.opcao()
                if opcao == 0:
                    return
                if opcao == 1:
                    self.autenticar()
                elif opcao == 2:
                    self._registrar()
            except EOFError:
                return

    def _registrar(self) -> None:
        terminal = self._terminal
        texto_cpf = terminal.perguntar("Digite o seu CPF: ")
        texto_senha = terminal.perguntar("Digite sua senha: ")
        texto_nome = terminal.perguntar("Digite o seu nome: ")
        try:
            cpf = CPF(texto_cpf)
            senha = Senha(texto_senha)
            nome = Nome(texto_nome)
            self._servico.registrar(cpf, senha, nome)
            terminal.escrever("Usuario registrado com sucesso.\n")
            if self._servico_conta is not None:
                # The user row is already stored by registrar, so the account
                # insert is expected to be refused as a duplicate.
                if self._servico_conta.criar(Conta(cpf=cpf, nome=nome, senha=senha)):
                    terminal.escrever("Falha ao registrar conta.\n")
                else:
                    terminal.escrever("Conta registrada com sucesso!\n")
        except DominioException as erro:
            terminal.erro(erro)