from boletocoding.core.logger import logger
from boletocoding.core.layout import DocumentType


def formatar_moeda_brasileira(valor):
    """Auxiliar simples para exibir valores formatados no console ou logs."""
    return "{:,.2f}".format(valor).replace(',', 'v').replace('.', ',').replace('v', '.')


def exibir_resultado_extracao(boleto, formato_data="%d/%m/%Y"):
    """
    Exibe um resumo no console sempre que um boleto é processado.
    Útil para debug e acompanhamento manual.
    """
    tipo = "Arrecadação" if boleto.document_type is DocumentType.DEALERSHIP else "Bancário"

    print("\n" + "═" * 60)
    logger.info(f"🔢 LINHA: {boleto.digitable_line}")
    logger.info(f"📊 CÓDIGO DE BARRAS: {boleto.barcode}")

    if not boleto.is_valid():
        logger.warning("⚠️ Atenção: DV não confere, boleto inválido.")
        print("═" * 60 + "\n")
        return

    logger.info(f"📂 TIPO: {tipo}")
    logger.info(f"💸 VALOR: R$ {formatar_moeda_brasileira(boleto.get_value())}")
    if boleto.get_subtotal() != boleto.get_value():
        logger.info(f"🧾 SUBTOTAL: R$ {formatar_moeda_brasileira(boleto.get_subtotal())}")
    logger.info(f"📅 VENCIMENTO: {boleto.get_due_date(formato_data) or '---'}")

    print("═" * 60 + "\n")
