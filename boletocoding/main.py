import argparse
from decimal import Decimal, InvalidOperation

from boletocoding.core.boleto import BoletoCode
from boletocoding.core.config import Config
from boletocoding.core.errors import BoletoError
from boletocoding.core.logger import configurar_logging, logger
from boletocoding.utils.helpers import exibir_resultado_extracao
from boletocoding.utils.parser_pdf import extrair_boleto_pdf


def _valor(texto):
    try:
        return Decimal(texto.replace(",", "."))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"valor inválido: {texto!r}") from None


def criar_parser():
    parser = argparse.ArgumentParser(
        prog="boletocoding",
        description="Valida linhas digitáveis de boletos e extrai valor e vencimento.",
    )
    parser.add_argument("linhas", nargs="*", help="linha digitável (44, 47 ou 48 dígitos, com ou sem pontuação)")
    parser.add_argument("--pdf", action="append", default=[], help="PDF do boleto para procurar a linha digitável")
    parser.add_argument("--senha", default=Config.PDF_SENHA, help="senha do PDF protegido")
    parser.add_argument(
        "--sem-completar",
        dest="auto_complete",
        action="store_false",
        default=Config.AUTO_COMPLETE,
        help="não completa com zeros linhas de 45/46 dígitos",
    )
    parser.add_argument(
        "--validar-blocos",
        dest="validate_blocks",
        action="store_true",
        default=Config.VALIDAR_BLOCOS,
        help="confere também o DV de cada campo/bloco",
    )
    parser.add_argument("--formato-data", default=Config.FORMATO_DATA, help="formato strftime do vencimento")
    parser.add_argument("--valor", type=_valor, help="valor do documento quando o código de barras não traz")
    parser.add_argument("--acrescimo", type=_valor, action="append", default=[], help="acréscimo (juros/multa)")
    parser.add_argument("--desconto", type=_valor, action="append", default=[], help="desconto")
    parser.add_argument("--log-level", default=None, help="nível de log (padrão: LOG_LEVEL)")
    return parser


def processar_boleto(boleto, args):
    """Aplica os ajustes pedidos na linha de comando. Retorna False se algo falhar."""
    if not boleto.is_valid():
        exibir_resultado_extracao(boleto, args.formato_data)
        return False

    try:
        if args.valor is not None:
            boleto.set_value(args.valor)
    except BoletoError as e:
        logger.error(f"❌ {e}")
        return False

    for acrescimo in args.acrescimo:
        boleto.surcharge(acrescimo)
    for desconto in args.desconto:
        boleto.discount(desconto)

    exibir_resultado_extracao(boleto, args.formato_data)
    return True


def main(argv=None):
    parser = criar_parser()
    args = parser.parse_args(argv)
    configurar_logging(args.log_level)

    if not args.linhas and not args.pdf:
        parser.error("informe ao menos uma linha digitável ou --pdf")

    boletos = [BoletoCode(linha, args.auto_complete, validate_blocks=args.validate_blocks) for linha in args.linhas]

    falhas = 0
    for caminho in args.pdf:
        try:
            boleto = extrair_boleto_pdf(
                caminho,
                password=args.senha,
                auto_complete=args.auto_complete,
                validate_blocks=args.validate_blocks,
            )
        except Exception as e:
            logger.error(f"❌ Erro ao ler PDF {caminho}: {e}")
            falhas += 1
            continue
        if boleto is None:
            logger.warning(f"⚠️ Nenhum boleto válido em {caminho}")
            falhas += 1
            continue
        boletos.append(boleto)

    for boleto in boletos:
        if not processar_boleto(boleto, args):
            falhas += 1

    logger.info(f"✅ {len(boletos)} boleto(s) processado(s), {falhas} com problema.")
    return 1 if falhas else 0


if __name__ == "__main__":
    raise SystemExit(main())
