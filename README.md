# investimentos

A console system for managing investments. Users register, log in, and
manage up to five investment portfolios (*carteiras*) per account. All data
is kept in SQLite databases on disk.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
investimentos
```

The databases are kept in the directory `Data` under the current working
directory, which is created if missing. Another directory can be chosen:

```
investimentos --diretorio /path/to/databases
```

The command opens the authentication menu:

```
--- MENU AUTENTICACAO ---
1 - Login
2 - Registrar usuario
0 - Sair
```

After a successful login the account menu offers:

```
--- MENU CONTA ---
1 - Gerenciar carteiras
2 - Visualizar conta
3 - Editar conta
4 - Excluir conta
0 - Logout
```

"Gerenciar carteiras" opens the portfolio menu, which creates, lists, edits
and deletes the portfolios of the logged-in account. "Editar conta" lets
you change the name, the password or both; a field left unchanged keeps its
stored value. Deleting the account returns to the authentication menu.

A menu choice that is not a number is treated as `0`, and every menu is
left when standard input ends.

## Input rules

Every value typed in is validated; an invalid value is reported as
`Erro: <message>` and the operation is abandoned.

| Field | Rule |
|-------|------|
| CPF | exactly 11 digits, not all equal, with valid check digits |
| Senha (password) | exactly 6 distinct characters, with at least one upper-case letter, one lower-case letter, one digit and one of `#`, `$`, `%`, `&` |
| Nome | 1 to 21 ASCII letters, digits or spaces, not a single space, without two consecutive spaces |
| Codigo (portfolio or order code) | exactly 5 digits |
| Perfil | `Conservador`, `Moderado` or `Agressivo` (case-sensitive) |
| Codigo de negociacao | 1 to 12 ASCII letters, digits or spaces |
| Data | `AAAAMMDD`, a valid calendar date (leap years included) |
| Dinheiro | between 0 and 1,000,000.00, rounded to two decimals (halves away from zero); typed input at most 9 characters |
| Quantidade | a whole number between 0 and 1,000,000; typed input at most 7 digits |

## Using the library

### Domain values

`investimentos.dominios` holds immutable, validated string values: `CPF`,
`Senha`, `Nome`, `Codigo`, `CodigoNegociacao` and `Perfil`. Each is built
from a string, raises `DominioException` (a subclass of `ValueError`) when
the string breaks its rules, and converts back with `str()`:

```python
from investimentos.dominios import CPF, DominioException

cpf = CPF("10145408108")
str(cpf)            # '10145408108'

try:
    CPF("11111111111")
except DominioException as erro:
    print(erro)     # O CPF deve conter digitos diferentes!
```

`investimentos.valores` holds `Data(dia, mes, ano)`, `Dinheiro(valor)` and
`Quantidade(valor)`. Each has a `parse` class method that reads user input:

```python
from investimentos.valores import Data, Dinheiro, Quantidade

str(Data.parse("20250422"))        # '20250422'
Dinheiro.parse("20863.67").valor   # 20863.67
int(Quantidade.parse("150000"))    # 150000
```

### Entities

`investimentos.entidades` has three dataclasses, built with keyword
arguments:

- `Conta(cpf, nome=None, senha=None)`;
- `Carteira(codigo, nome, perfil)`;
- `Ordem(codigo_negociacao, data, preco, quantidade, codigo=None)`.

### Persistence

The classes in `investimentos.servicos` take the directory that holds
their database (default `DIRETORIO_PADRAO`, i.e. `Data`):

- `ServicoAutenticacao` — `registrar(cpf, senha, nome)` stores a user in
  `usuarios.db` and raises `DominioException` if the CPF is already taken;
  `autenticar(cpf, senha)` returns whether the pair is stored.
- `ServicoConta` — `criar`, `ler`, `editar`, `excluir` on the same
  `usuarios.db`. `ler` returns `None` for an unknown CPF; `editar` keeps the
  stored name or password for any field left `None`; `excluir` returns
  `False` if no account had the CPF. It keeps its connection open; close it
  with `fechar()` or use it as a context manager.
- `ServicoCarteira` — `criar_carteira_para(cpf, carteira)`,
  `listar_carteiras_por(cpf)`, `ler(codigo)`, `editar(carteira)`,
  `excluir(codigo)` on `carteiras.db`. Creating a sixth portfolio for one
  CPF raises `DominioException`.
- `ServicoOrdem` — `inserir_ordem(cpf, ordem)`, `listar_ordens(cpf)` and
  `importar_de_arquivo(cpf, caminho)` on `ordens.db`; closed with
  `fechar()` or as a context manager.

`importar_de_arquivo` reads a fixed-width quotation file (Latin-1). From
each line of at least 126 characters it takes the date from columns 3–10
(`AAAAMMDD`), the trading code from columns 13–24 and the price, in
hundredths, from columns 114–126, and stores an order of quantity 1. Lines
that are too short or whose fields are invalid are skipped. It returns
`False` only when the file cannot be opened.

### Menus

`investimentos.controladoras` provides `CtrlAutenticacao`, `CtrlConta` and
`CtrlCarteira`. Each takes the services it works with and optional `entrada`
and `saida` text streams (standard input and output by default), so the
menus can be driven from any text source:

```python
import io
from investimentos.controladoras import CtrlAutenticacao
from investimentos.servicos import ServicoAutenticacao

entrada = io.StringIO("0\n")
saida = io.StringIO()
CtrlAutenticacao(ServicoAutenticacao("dados"), entrada=entrada, saida=saida).menu()
```

`CtrlConta` also has `criar()` and `ler()`, which prompt for a CPF; they are
not reachable from the menus.

## What it does not do

Orders are only available through the library: the command has no menu to
enter, list or import orders, and `ServicoOrdem` is not used by it.
Passwords are stored in the database as typed, without hashing.