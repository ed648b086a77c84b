import pandas as pd

from typing import List

from libs.config.config_errors import ParseError
from libs.config.config_variables import CATALOG_COLUMNS
from libs.helpers.df_helpers import normalize_row, rows_to_numeric_df

from libs.config.config_logger import get_logger

logger = get_logger()


def _data_lines(text: str) -> List[str]:
    """Líneas con contenido, sin comentarios."""
    return [
        line
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]


def parse_catalog_text(text: str, columns: List[str] = CATALOG_COLUMNS) -> pd.DataFrame:
    """
    Convierte el catálogo en texto plano a un DataFrame numérico.

    La primera línea es la cabecera y se descarta: los nombres de las columnas
    los define `columns`. Las filas cortas se rellenan con NaN, las largas se
    truncan y los valores no numéricos quedan como NaN (se descartan al filtrar).

    Args:
        text (str): Cuerpo de la respuesta.
        columns (List[str]): Esquema ordenado de columnas.

    Returns:
        pd.DataFrame: Una fila por evento, columnas float64.

    Raises:
        ParseError: Si el texto está vacío o no tiene cabecera.
    """
    lines = _data_lines(text or "")
    if not lines:
        raise ParseError("El catálogo está vacío: no se encontró la cabecera")

    n_fields = len(columns)
    rows = []
    n_short = 0
    for line_no, line in enumerate(lines[1:], start=2):
        tokens = line.split()
        if len(tokens) > n_fields:
            logger.warning(
                f"Línea {line_no}: {len(tokens)} campos, se truncan a {n_fields}"
            )
        elif len(tokens) < n_fields:
            n_short += 1
        rows.append(normalize_row(tokens, n_fields))

    if n_short:
        logger.info(f"{n_short} filas incompletas rellenadas con NaN")

    df = rows_to_numeric_df(rows, columns)
    logger.info(f"Leídos {len(df)} registros del catálogo")
    return df
