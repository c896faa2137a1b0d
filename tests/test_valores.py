import pytest

from investimentos.dominios import DominioException
from investimentos.valores import Data, Dinheiro, Quantidade


class TestData:
    def test_valid_string_round_trips(self):
        assert str(Data.parse("20250422")) == "20250422"

    def test_parse_splits_fields(self):
        data = Data.parse("20250508")
        assert (data.ano, data.mes, data.dia) == (2025, 5, 8)

    def test_feb_29_on_common_year_rejected(self):
        with pytest.raises(DominioException):
            Data.parse("20250229")

    @pytest.mark.parametrize("texto", ["20240229", "20000229"])
    def test_feb_29_on_leap_year_accepted(self, texto):
        assert str(Data.parse(texto)) == texto

    def test_century_not_leap(self):
        with pytest.raises(DominioException, match="fevereiro"):
            Data.parse("19000229")

    @pytest.mark.parametrize("texto", ["20250431", "20250631", "20250931", "20251131"])
    def test_thirty_day_months(self, texto):
        with pytest.raises(DominioException, match="Dia invalido para o mes."):
            Data.parse(texto)

    @pytest.mark.parametrize("texto", ["20251301", "20250001"])
    def test_bad_month(self, texto):
        with pytest.raises(DominioException, match="Mes invalido."):
            Data.parse(texto)

    @pytest.mark.parametrize("texto", ["20250100", "20250132"])
    def test_bad_day(self, texto):
        with pytest.raises(DominioException, match="Dia invalido."):
            Data.parse(texto)

    @pytest.mark.parametrize("texto", ["2025-01-01", "2025011", "202501011", "", "2025O101"])
    def test_bad_format(self, texto):
        with pytest.raises(DominioException, match="AAAAMMDD"):
            Data.parse(texto)

    def test_direct_construction_pads_output(self):
        assert str(Data(dia=1, mes=2, ano=999)) == "09990201"

    def test_direct_construction_validates(self):
        with pytest.raises(DominioException):
            Data(dia=31, mes=4, ano=2025)

    def test_is_immutable(self):
        data = Data.parse("20250422")
        with pytest.raises(AttributeError):
            data.dia = 1
        assert data.dia == 22
        assert str(data) == "20250422"


class TestDinheiro:
    def test_valid_value_stored(self):
        assert Dinheiro.parse("20863.67").valor == float("20863.67")

    def test_empty_rejected(self):
        with pytest.raises(DominioException, match="digite algum valor"):
            Dinheiro.parse("")

    def test_letters_only_rejected(self):
        with pytest.raises(DominioException, match="apenas numeros"):
            Dinheiro.parse("abc")

    def test_no_numeric_prefix_rejected(self):
        with pytest.raises(DominioException):
            Dinheiro.parse("a1")

    def test_numeric_prefix_used(self):
        assert Dinheiro.parse("12abc").valor == float("12")

    def test_rounds_to_two_places(self):
        assert Dinheiro.parse("1.999").valor == 2.0

    def test_upper_limit_inclusive(self):
        assert Dinheiro.parse("1000000").valor == float("1000000")

    def test_above_limit_rejected(self):
        with pytest.raises(DominioException, match="1,000,000.00"):
            Dinheiro.parse("1000000.1")

    def test_negative_rejected(self):
        with pytest.raises(DominioException):
            Dinheiro.parse("-1")

    def test_zero_accepted(self):
        assert Dinheiro.parse("0").valor == 0.0

    def test_float_conversion(self):
        assert float(Dinheiro(float("150.25"))) == float("150.25")

    def test_constructor_validates(self):
        with pytest.raises(DominioException):
            Dinheiro(2_000_000.0)

    def test_equal_after_rounding(self):
        assert Dinheiro.parse("5.001") == Dinheiro.parse("5.00")


class TestQuantidade:
    def test_valid_value_stored(self):
        assert Quantidade.parse("150000").valor == int("150000")

    def test_too_long_rejected(self):
        with pytest.raises(DominioException, match="fora da faixa"):
            Quantidade.parse("111111111")

    def test_eight_digits_rejected(self):
        with pytest.raises(DominioException):
            Quantidade.parse("12345678")

    def test_empty_rejected(self):
        with pytest.raises(DominioException, match="digite algum valor"):
            Quantidade.parse("")

    @pytest.mark.parametrize("texto", ["12a", "-1", "1.5", " 12"])
    def test_non_digits_rejected(self, texto):
        with pytest.raises(DominioException, match="apenas numeros"):
            Quantidade.parse(texto)

    def test_upper_limit(self):
        assert int(Quantidade.parse("1000000")) == 1_000_000
        with pytest.raises(DominioException):
            Quantidade.parse("1000001")

    def test_constructor_validates(self):
        with pytest.raises(DominioException):
            Quantidade(-1)