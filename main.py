import sys

from modules.seismic_analysis.pipeline import run_pipeline
from libs.config.config_errors import SeismicPipelineError

from libs.config.config_logger import get_logger

logger = get_logger()


def main():
    try:
        outputs = run_pipeline()
    except SeismicPipelineError as e:
        logger.error(f"Fallo en la etapa {e.stage}: {e.message}")
        return 1

    for name, path in outputs.items():
        logger.info(f"{name}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
