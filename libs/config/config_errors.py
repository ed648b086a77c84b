class SeismicPipelineError(Exception):
    """Error base del pipeline. Todas las subclases son fatales para la ejecución."""

    stage = "pipeline"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"[{self.stage}] {self.message}"


class FetchError(SeismicPipelineError):
    """Fallo de red o estado HTTP no exitoso al descargar el catálogo."""

    stage = "fetch"


class ParseError(SeismicPipelineError):
    """Texto tabular vacío o sin cabecera."""

    stage = "parse"


class DateParseError(SeismicPipelineError):
    """Fecha compuesta inválida (p. ej. 2025-02-30)."""

    stage = "filter"


class RenderError(SeismicPipelineError):
    """Conjunto filtrado vacío o error de escritura de imágenes."""

    stage = "render"
