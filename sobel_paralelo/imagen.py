import logging
from functools import partial

import cv2
import numpy as np

from . import config
from .errores import DimensionesInvalidas, ErrorCodificacion, ErrorDecodificacion
from .grilla import validar_grilla
from .particion import dividir_filas, ejecutar_en_paralelo

logger = logging.getLogger(__name__)


def decodificar(datos):
    if not datos:
        raise ErrorDecodificacion("No se recibieron bytes de imagen")
    try:
        imagen = cv2.imdecode(np.frombuffer(datos, np.uint8), cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise ErrorDecodificacion(f"Error al decodificar imagen: {e}") from e
    if imagen is None:
        raise ErrorDecodificacion("Los bytes recibidos no son una imagen válida")
    return imagen


def leer_imagen(ruta):
    with open(ruta, "rb") as f:
        datos = f.read()
    logger.info("[IMG] Imagen leída: %s (%d bytes)", ruta, len(datos))
    return decodificar(datos)


def _escala(imagen):
    if np.issubdtype(imagen.dtype, np.integer):
        return float(np.iinfo(imagen.dtype).max)
    return 1.0


def _a_gris(bloque):
    if bloque.ndim == 2:
        return bloque
    canales = bloque.shape[2]
    if canales == 1:
        return bloque[:, :, 0]
    if canales == 3:
        return cv2.cvtColor(bloque, cv2.COLOR_BGR2GRAY)
    if canales == 4:
        return cv2.cvtColor(bloque, cv2.COLOR_BGRA2GRAY)
    raise DimensionesInvalidas(f"Cantidad de canales no soportada: {canales}")


def _luminancia_filas(imagen, destino, inicio, fin, escala):
    destino[...] = _a_gris(imagen[inicio:fin]) / escala


def luminancia(imagen, nro_workers=None):
    """
    Convierte la imagen a una grilla de luminancia en [0, 1].

    Las imágenes color (BGR o BGRA) se pasan a grises; la conversión se
    reparte por rangos de filas igual que la convolución.
    """
    if imagen.ndim not in (2, 3) or imagen.shape[0] < 1 or imagen.shape[1] < 1:
        raise DimensionesInvalidas(f"Imagen con forma no soportada: {imagen.shape}")
    if nro_workers is None:
        nro_workers = config.nro_workers()

    alto, ancho = imagen.shape[:2]
    grilla = np.empty((alto, ancho), dtype=np.float64)
    escala = _escala(imagen)
    rangos = dividir_filas(alto, nro_workers)
    tareas = [
        partial(_luminancia_filas, imagen, grilla[inicio:fin], inicio, fin, escala)
        for inicio, fin in rangos
    ]
    ejecutar_en_paralelo(tareas, len(rangos))
    return grilla


def _cuantizar_filas(grilla, destino, inicio, fin):
    bloque = np.nan_to_num(grilla[inicio:fin], nan=0.0, posinf=255.0, neginf=0.0)
    # astype trunca la parte decimal, no redondea
    destino[...] = np.clip(bloque, 0.0, 255.0).astype(np.uint8)


def cuantizar(grilla, nro_workers=None):
    """Pasa una grilla ya escalada a [0, 255] a una imagen gris de 8 bits."""
    alto, ancho = validar_grilla(grilla)
    if nro_workers is None:
        nro_workers = config.nro_workers()

    imagen = np.empty((alto, ancho), dtype=np.uint8)
    rangos = dividir_filas(alto, nro_workers)
    tareas = [partial(_cuantizar_filas, grilla, imagen[inicio:fin], inicio, fin) for inicio, fin in rangos]
    ejecutar_en_paralelo(tareas, len(rangos))
    return imagen


def codificar(imagen, ruta):
    try:
        ok = cv2.imwrite(ruta, imagen)
    except cv2.error as e:
        raise ErrorCodificacion(f"Error al guardar imagen en {ruta}: {e}") from e
    if not ok:
        raise ErrorCodificacion(f"No se pudo guardar la imagen en {ruta}")
    logger.info("[IMG] Imagen guardada en: %s", ruta)


def codificar_bytes(imagen, extension=".jpg"):
    try:
        ok, buffer = cv2.imencode(extension, imagen)
    except cv2.error as e:
        raise ErrorCodificacion(f"Error al codificar imagen como {extension}: {e}") from e
    if not ok:
        raise ErrorCodificacion(f"No se pudo codificar la imagen como {extension}")
    return buffer.tobytes()
