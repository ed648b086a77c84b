import requests

from libs.config.config_errors import FetchError
from libs.config.config_variables import (
    CATALOG_URL,
    CATALOG_ENCODING,
    TIMEOUT_API_REQUEST,
)

from libs.config.config_logger import get_logger

logger = get_logger()


class NOAExtractor:
    """Extractor para el catálogo del Laboratorio de Sismología de Atenas"""

    BASE_URL = CATALOG_URL

    @staticmethod
    def fetch_text(
        url: str = BASE_URL,
        timeout: int = TIMEOUT_API_REQUEST,
        encoding: str = CATALOG_ENCODING,
    ) -> str:
        """Descarga el catálogo como texto plano con una única petición GET"""
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error descargando catálogo desde {url}: {e}")
            raise FetchError(f"No se pudo descargar {url}: {e}") from e

        response.encoding = encoding
        text = response.text
        logger.info(f"Catálogo descargado: {len(text)} caracteres")
        return text
