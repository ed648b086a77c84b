from pathlib import Path


def validate_folder(path: str | Path, create_if_missing: bool = False) -> Path:
    """
    Valida si una carpeta existe. Opcionalmente, la crea si no existe.

    Parámetros:
    ----------
    path : str | Path
        Ruta a validar.
    create_if_missing : bool
        Si es True, crea la carpeta si no existe.

    Retorna:
    -------
    Path
        Objeto Path de la ruta validada o creada.

    Lanza:
    -----
    FileNotFoundError si la ruta no existe y `create_if_missing` es False.
    """
    path = Path(path)

    if path.is_dir():
        return path

    if create_if_missing:
        path.mkdir(parents=True, exist_ok=True)
        return path
    else:
        raise FileNotFoundError(f"La ruta no existe: {path}")


def validate_file(path: str | Path, create_parents: bool = True) -> Path:
    """
    Prepara la ruta de un archivo de salida.

    Args:
        path (str | Path): Ruta del archivo.
        create_parents (bool, opcional): Si True, crea las carpetas padre si no existen.

    Retorna:
        Path: ruta validada.

    Lanza:
        FileExistsError: si la ruta existe pero es una carpeta.
        FileNotFoundError: si la carpeta padre no existe y `create_parents` es False.
    """
    path = Path(path)

    if path.is_dir():
        raise FileExistsError(f"La ruta existe pero no es un archivo: {path}")

    if create_parents:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.is_dir():
        raise FileNotFoundError(f"La carpeta no existe: {path.parent}")

    return path
