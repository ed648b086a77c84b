import pandas as pd

from pathlib import Path
from typing import Dict, Optional

from modules.plotter.map import EarthquakeMap
from modules.plotter.combined import CombinedPlot
from modules.plotter.timeline import EarthquakeTimeline
from libs.config.config_errors import RenderError
from libs.config.config_variables import (
    OUTPUT_MAP,
    OUTPUT_TIMELINE,
    OUTPUT_COMBINED,
)

from libs.config.config_logger import get_logger, log_execution_time

logger = get_logger()


@log_execution_time
def render_outputs(
    df: pd.DataFrame, output_dir: Optional[Path] = None
) -> Dict[str, Path]:
    """
    Genera el mapa, la serie temporal y el gráfico combinado.

    Args:
        df (pd.DataFrame): Catálogo filtrado y categorizado (con `DateTime`).
        output_dir (Path, optional): Carpeta de salida. Por defecto, la actual.

    Returns:
        Dict[str, Path]: Ruta escrita por cada gráfico.

    Raises:
        RenderError: Si no hay eventos que dibujar o falla la escritura.
    """
    if df.empty:
        raise RenderError("No hay eventos en la región y periodo seleccionados")

    output_dir = Path.cwd() if output_dir is None else Path(output_dir)
    dates = sorted(df["DateTime"])

    plotters = {
        "map": (lambda: EarthquakeMap(), OUTPUT_MAP),
        "timeline": (lambda: EarthquakeTimeline(dates=dates), OUTPUT_TIMELINE),
        "combined": (lambda: CombinedPlot(dates=dates), OUTPUT_COMBINED),
    }

    outputs = {}
    for name, (build_plotter, filename) in plotters.items():
        try:
            with build_plotter() as plotter:
                plotter.draw(df)
                outputs[name] = plotter.save_plot(output_dir / filename)[0]
        except OSError as e:
            logger.error(f"Error guardando el gráfico '{name}': {e}")
            raise RenderError(f"No se pudo escribir '{filename}': {e}") from e

    return outputs
