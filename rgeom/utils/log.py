# File: rgeom/utils/log.py
# Project: RusticGeom (RGEOM)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + archivo opcional) para apps que usan la lib.
# Notes: La librería nunca configura logging al importarse; solo lo hace el host.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILENAME = "rgeom.log"


def setup_logging(log_dir: str | os.PathLike | None = None, level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo (si se pasa `log_dir`).

    Nota:
        - Idempotente: una segunda llamada no agrega handlers.
        - No lanza excepción si no puede escribir el archivo; cae a consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILENAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
