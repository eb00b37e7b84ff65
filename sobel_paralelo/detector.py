import logging
import time

from . import config
from .combinador import combinar_y_normalizar
from .convolucion import convolucionar_secuencial, convolucionar_varios
from .grilla import validar_grilla
from .imagen import codificar, cuantizar, leer_imagen, luminancia
from .kernels import SOBEL_X, SOBEL_Y

logger = logging.getLogger(__name__)


def _resolver(nro_workers, modo):
    if modo is None:
        modo = config.modo()
    if modo not in config.MODOS:
        raise ValueError(f"Modo desconocido: {modo!r}")
    if modo == "secuencial":
        return 1, modo
    if nro_workers is None:
        nro_workers = config.nro_workers()
    if nro_workers < 1:
        raise ValueError(f"La cantidad de workers debe ser >= 1, se recibió {nro_workers}")
    return nro_workers, modo


def gradientes(grilla, nro_workers=None, modo=None):
    """Devuelve (gx, gy) aplicando los kernels de Sobel en X y en Y."""
    validar_grilla(grilla)
    nro_workers, modo = _resolver(nro_workers, modo)
    if modo == "secuencial":
        return convolucionar_secuencial(grilla, SOBEL_X), convolucionar_secuencial(grilla, SOBEL_Y)
    gx, gy = convolucionar_varios(grilla, [SOBEL_X, SOBEL_Y], nro_workers)
    return gx, gy


def detectar_bordes(grilla, nro_workers=None, modo=None):
    """
    Aplica Sobel sobre una grilla de luminancia.

    :return: Grilla de magnitudes escalada a [0, 255], sin redondear.
    """
    gx, gy = gradientes(grilla, nro_workers, modo)
    return combinar_y_normalizar(gx, gy)


def procesar_imagen(imagen, nro_workers=None, modo=None):
    nro_workers, modo = _resolver(nro_workers, modo)
    grilla = luminancia(imagen, nro_workers)
    bordes = detectar_bordes(grilla, nro_workers, modo)
    return cuantizar(bordes, nro_workers)


def procesar_archivo(entrada, salida=None, nro_workers=None, modo=None):
    """
    Lee la imagen de `entrada`, detecta bordes y guarda el resultado.

    Si SOBEL_ORIGINAL está definida también guarda la imagen original en
    grises. Devuelve la ruta de salida.
    """
    if salida is None:
        salida = config.ruta_salida()
    nro_workers, modo = _resolver(nro_workers, modo)

    imagen = leer_imagen(entrada)
    inicio = time.perf_counter()
    resultado = procesar_imagen(imagen, nro_workers, modo)
    duracion = time.perf_counter() - inicio

    ruta_original = config.ruta_original()
    if ruta_original:
        codificar(cuantizar(luminancia(imagen, nro_workers) * 255.0, nro_workers), ruta_original)

    codificar(resultado, salida)
    logger.info("[⏱️] Duración con %d workers (%s): %.4fs", nro_workers, modo, duracion)
    return salida
