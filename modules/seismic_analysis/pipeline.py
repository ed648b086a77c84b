from pathlib import Path
from typing import Dict, Optional

from modules.plotter.renderer import render_outputs
from modules.catalog_scraper.api_extractor import NOAExtractor
from modules.catalog_scraper.text_extractor import parse_catalog_text
from modules.seismic_analysis.seismic_event import events_from_df
from modules.seismic_analysis.event_filter import prepare_catalog, split_strongest

from libs.config.config_logger import get_logger, log_execution_time

logger = get_logger()


@log_execution_time
def run_pipeline(output_dir: Optional[Path] = None, text: Optional[str] = None) -> Dict[str, Path]:
    """
    Ejecuta descarga, lectura, filtrado y generación de gráficos.

    Args:
        output_dir (Path, optional): Carpeta de salida de las imágenes.
        text (str, optional): Catálogo ya descargado; si es None se descarga.

    Returns:
        Dict[str, Path]: Imágenes generadas.
    """
    if text is None:
        text = NOAExtractor.fetch_text()

    catalog = parse_catalog_text(text)
    filtered = prepare_catalog(catalog)
    logger.info(f"{len(filtered)} eventos seleccionados para graficar")

    _, strongest = split_strongest(filtered)
    for event in events_from_df(strongest):
        logger.info(
            f"Evento más fuerte: M{event.magnitude:.1f} el {event.event_time} "
            f"({event.latitude:.2f}, {event.longitude:.2f}, {event.depth:.1f} km)"
        )

    return render_outputs(filtered, output_dir)
