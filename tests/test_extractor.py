"""Testes do extrator de linha digitável em texto livre (e-mails, PDFs)."""

from __future__ import annotations

from decimal import Decimal

from boletocoding.utils.extractor import (
    extrair_boleto_de_texto,
    extrair_linhas_digitaveis,
    extrair_valor_do_texto,
    limpar_codigo,
)

LINHA_ITAU = "34191790010104351004791020150008284660000002000"
LINHA_ARREC_6 = "836000000015234501382027403151234560789012345672"
BARRAS_SEM_VALOR = "00196100000000000001234567890123456789012345"

EMAIL_ITAU = """
Olá, segue sua fatura do mês.
Linha digitável: 34191.79001 01043.510047 91020.150008 2 84660000002000
Total a pagar: R$ 20,00
"""


def test_limpar_codigo():
    assert limpar_codigo("34191.79001 01043.510047") == "341917900101043510047"
    assert limpar_codigo("") is None
    assert limpar_codigo(None) is None


def test_finds_formatted_bank_line():
    assert extrair_linhas_digitaveis(EMAIL_ITAU) == [LINHA_ITAU]


def test_finds_formatted_dealership_line():
    texto = "Conta de luz: 83600000001-5 23450138202-7 40315123456-0 78901234567-2 vencimento 15/03"
    assert extrair_linhas_digitaveis(texto) == [LINHA_ARREC_6]


def test_finds_bare_48_line_without_cutting_it():
    assert extrair_linhas_digitaveis(f"codigo {LINHA_ARREC_6} fim") == [LINHA_ARREC_6]


def test_finds_bare_barcode():
    assert extrair_linhas_digitaveis(f"barras:{BARRAS_SEM_VALOR}.") == [BARRAS_SEM_VALOR]


def test_ignores_short_numbers():
    assert extrair_linhas_digitaveis("CPF 123.456.789-00, pedido 987654321") == []
    assert extrair_linhas_digitaveis("") == []


def test_extrair_valor_do_texto_uses_last_amount():
    texto = "Subtotal R$ 1.200,00 Juros R$ 3,50 Total R$ 1.203,50"
    assert extrair_valor_do_texto(texto) == Decimal("1203.50")
    assert extrair_valor_do_texto("sem valor") is None


def test_extrair_boleto_de_texto():
    boleto = extrair_boleto_de_texto(EMAIL_ITAU)
    assert boleto is not None
    assert boleto.is_valid() is True
    assert boleto.get_value() == Decimal("20.00")
    assert boleto.get_due_date() == "2020-12-11"


def test_skips_invalid_candidate(caplog):
    texto = (
        "Linha antiga: 34191.79001 01043.510047 91020.150008 5 84660000002000\n"
        "Linha correta: 34191.79001 01043.510047 91020.150008 2 84660000002000\n"
    )
    with caplog.at_level("WARNING", logger="boletocoding"):
        boleto = extrair_boleto_de_texto(texto)
    assert boleto.digitable_line == LINHA_ITAU
    assert "DV não confere" in caplog.text


def test_no_valid_candidate_returns_none():
    assert extrair_boleto_de_texto("34191.79001 01043.510047 91020.150008 5 84660000002000") is None
    assert extrair_boleto_de_texto("nenhum código aqui") is None


def test_value_from_text_when_barcode_has_none():
    texto = f"Código de barras {BARRAS_SEM_VALOR}\nValor do documento: R$ 1.367,30"
    boleto = extrair_boleto_de_texto(texto)
    assert boleto.get_value() == Decimal("1367.30")
    assert boleto.get_subtotal() == Decimal("1367.30")


def test_barcode_value_wins_over_text():
    boleto = extrair_boleto_de_texto(EMAIL_ITAU + "\nMulta: R$ 999,99")
    assert boleto.get_value() == Decimal("20.00")
