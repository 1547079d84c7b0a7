import logging
import sys

from boletocoding.core.config import Config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger("boletocoding")


def configurar_logging(nivel=None):
    """Configura a saída dos logs no stdout. Chamado apenas pelo ponto de entrada."""
    nivel_str = (nivel or Config.LOG_LEVEL).upper()
    nivel_log = getattr(logging, nivel_str, logging.INFO)
    logging.basicConfig(level=nivel_log, format=LOG_FORMAT, stream=sys.stdout)
    logger.setLevel(nivel_log)
    return logger
