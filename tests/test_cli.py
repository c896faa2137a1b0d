import io
import sys

from investimentos.cli import main
from investimentos.dominios import CPF, Senha
from investimentos.servicos import ServicoAutenticacao, ServicoCarteira

CPF_VALIDO = "10145408108"
SENHA_VALIDA = "A1b2C#"


def _entrada(monkeypatch, *linhas):
    monkeypatch.setattr(sys, "stdin", io.StringIO("".join(f"{linha}\n" for linha in linhas)))


def test_fim_da_entrada_encerra(monkeypatch, tmp_path, capsys):
    _entrada(monkeypatch)
    assert main(["--diretorio", str(tmp_path)]) == 0
    assert capsys.readouterr().out.count("--- MENU AUTENTICACAO ---") == 1


def test_registro_persistido(monkeypatch, tmp_path, capsys):
    _entrada(monkeypatch, "2", CPF_VALIDO, SENHA_VALIDA, "Joao Silva", "0")
    assert main(["--diretorio", str(tmp_path)]) == 0
    assert "Conta registrada com sucesso!" in capsys.readouterr().out
    assert ServicoAutenticacao(tmp_path).autenticar(CPF(CPF_VALIDO), Senha(SENHA_VALIDA)) is True


def test_login_e_criacao_de_carteira(monkeypatch, tmp_path, capsys):
    _entrada(
        monkeypatch,
        "2", CPF_VALIDO, SENHA_VALIDA, "Joao Silva",
        "1", CPF_VALIDO, SENHA_VALIDA,
        "1", "1", "12345", "Minha Carteira", "Moderado", "0",
        "0",
        "0",
    )
    assert main(["--diretorio", str(tmp_path)]) == 0
    texto = capsys.readouterr().out
    assert "Autenticado com sucesso!" in texto
    assert "Carteira criada com sucesso." in texto
    carteiras = ServicoCarteira(tmp_path).listar_carteiras_por(CPF(CPF_VALIDO))
    assert [str(c.codigo) for c in carteiras] == ["12345"]


def test_diretorio_padrao(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    _entrada(monkeypatch, "0")
    assert main([]) == 0
    assert (tmp_path / "Data" / "usuarios.db").is_file()
    assert (tmp_path / "Data" / "carteiras.db").is_file()