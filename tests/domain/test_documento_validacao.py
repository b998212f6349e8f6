import pytest

from api.domain.documento.errors import DocumentoInvalidoError
from api.domain.documento.validacao import (
    is_valid_cnpj,
    is_valid_cpf,
    is_valid_document,
    validate_document,
)

CPFS_VALIDOS = ["42156492859", "02712943961", "31464238049", "98089811868", "21960671804", "11144477735"]
CNPJS_VALIDOS = ["20955843000159", "41720647000175", "11222333000181"]


@pytest.mark.parametrize("cpf", CPFS_VALIDOS)
def test_cpf_valido(cpf: str) -> None:
    assert is_valid_cpf(cpf)
    assert is_valid_document(cpf)


@pytest.mark.parametrize("cnpj", CNPJS_VALIDOS)
def test_cnpj_valido(cnpj: str) -> None:
    assert is_valid_cnpj(cnpj)
    assert is_valid_document(cnpj)


def test_cpf_preserva_zero_a_esquerda() -> None:
    """O zero inicial faz parte do documento; sem ele o comprimento quebra."""
    assert is_valid_cpf("02712943961")
    assert not is_valid_cpf("2712943961")


@pytest.mark.parametrize("cpf", ["42156492858", "42156492869", "52156492859", "12345678900"])
def test_cpf_digito_alterado_invalido(cpf: str) -> None:
    assert not is_valid_cpf(cpf)
    assert not is_valid_document(cpf)


@pytest.mark.parametrize("cnpj", ["20955843000158", "20955843000169", "30955843000159", "41720647000174"])
def test_cnpj_digito_alterado_invalido(cnpj: str) -> None:
    assert not is_valid_cnpj(cnpj)
    assert not is_valid_document(cnpj)


@pytest.mark.parametrize("digito", "0123456789")
def test_todos_digitos_iguais_invalido(digito: str) -> None:
    """Sequencias repetidas sao rejeitadas mesmo quando passam no checksum."""
    assert not is_valid_cpf(digito * 11)
    assert not is_valid_cnpj(digito * 14)
    assert not is_valid_document(digito * 11)
    assert not is_valid_document(digito * 14)


def test_cpf_nao_e_cnpj_e_vice_versa() -> None:
    assert not is_valid_cnpj("42156492859")
    assert not is_valid_cpf("20955843000159")


@pytest.mark.parametrize(
    "entrada",
    ["", "123", "4215649285", "421564928590", "2095584300015", "209558430001590"],
)
def test_comprimento_errado_retorna_false(entrada: str) -> None:
    assert not is_valid_cpf(entrada)
    assert not is_valid_cnpj(entrada)
    assert not is_valid_document(entrada)


@pytest.mark.parametrize(
    "entrada",
    [
        "4215649285a",
        "421.564.928-59",
        " 4215649285",
        "2095584300015x",
        "20.955.843/0001-59",
        "４２１５６４９２８５９",  # digitos unicode de largura total
        "421564928²59",
    ],
)
def test_caracteres_nao_digitos_retorna_false_sem_excecao(entrada: str) -> None:
    assert not is_valid_document(entrada)


@pytest.mark.parametrize("entrada", [None, 42156492859, 20955843000159, b"42156492859"])
def test_tipo_nao_string_retorna_false(entrada: object) -> None:
    assert not is_valid_cpf(entrada)
    assert not is_valid_cnpj(entrada)
    assert not is_valid_document(entrada)


def test_validate_document_aceita_validos() -> None:
    for documento in CPFS_VALIDOS + CNPJS_VALIDOS:
        assert validate_document(documento) is None


@pytest.mark.parametrize("entrada", ["12345678900", "11111111111", "abc", "", "20955843000158", None])
def test_validate_document_levanta_com_documento(entrada: object) -> None:
    with pytest.raises(DocumentoInvalidoError) as exc_info:
        validate_document(entrada)
    assert exc_info.value.documento == entrada


def test_documento_invalido_e_value_error() -> None:
    with pytest.raises(ValueError, match="nao esta no formato exigido"):
        validate_document("12345678900")
