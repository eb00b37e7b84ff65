import logging
from functools import partial

import numpy as np

from . import config
from .grilla import validar_grilla
from .kernels import crear_kernel, medio_kernel
from .particion import dividir_filas, ejecutar_en_paralelo
from .relleno import rellenar

logger = logging.getLogger(__name__)


def _correlacionar_filas(relleno, kernel, destino, inicio):
    """
    Calcula las filas [inicio, inicio + len(destino)) del resultado.

    `destino` es la vista del resultado que le toca a este worker; no se
    escribe nada fuera de ella. Cada celda acumula desde 0.0 sumando los
    términos del kernel en orden (a, b), igual en modo secuencial y
    paralelo, así ambos dan exactamente los mismos bits.
    """
    filas, ancho = destino.shape
    alto_k, ancho_k = kernel.shape
    destino[...] = 0.0
    for a in range(alto_k):
        for b in range(ancho_k):
            destino += relleno[inicio + a:inicio + a + filas, b:b + ancho] * kernel[a, b]


def _rellenar_compartido(grilla, pad_alto, pad_ancho):
    relleno = rellenar(grilla, pad_alto, pad_ancho)
    relleno.flags.writeable = False
    return relleno


def convolucionar_secuencial(grilla, kernel):
    alto, ancho = validar_grilla(grilla)
    kernel = crear_kernel(kernel)

    relleno = _rellenar_compartido(grilla, *medio_kernel(kernel))
    resultado = np.empty((alto, ancho), dtype=np.float64)
    _correlacionar_filas(relleno, kernel, resultado, 0)
    return resultado


def convolucionar_varios(grilla, kernels, nro_workers=None):
    """
    Aplica varios kernels sobre la misma grilla en un único pool de hilos.

    Se arma un solo relleno por cada medio-tamaño de kernel distinto y se
    comparte (de solo lectura) entre todas las pasadas. Cada kernel
    produce su propio resultado, dividido en rangos de filas disjuntos.

    :param grilla: Grilla de luminancia (alto x ancho).
    :param kernels: Secuencia de kernels de dimensiones impares.
    :param nro_workers: Cantidad de workers; None usa SOBEL_WORKERS.
    :return: Lista de grillas resultado, en el orden de los kernels.
    """
    alto, ancho = validar_grilla(grilla)
    kernels = [crear_kernel(kernel) for kernel in kernels]
    if nro_workers is None:
        nro_workers = config.nro_workers()
    rangos = dividir_filas(alto, nro_workers)

    rellenos = {}
    resultados = []
    tareas = []
    for kernel in kernels:
        pads = medio_kernel(kernel)
        if pads not in rellenos:
            rellenos[pads] = _rellenar_compartido(grilla, *pads)
        resultado = np.empty((alto, ancho), dtype=np.float64)
        resultados.append(resultado)
        for inicio, fin in rangos:
            tareas.append(partial(_correlacionar_filas, rellenos[pads], kernel, resultado[inicio:fin], inicio))

    logger.debug("[SOBEL] %d kernels, %d rangos de filas por kernel", len(kernels), len(rangos))
    ejecutar_en_paralelo(tareas, len(rangos))
    return resultados


def convolucionar_paralelo(grilla, kernel, nro_workers=None):
    return convolucionar_varios(grilla, [kernel], nro_workers)[0]


def convolucionar(grilla, kernel, nro_workers=None, modo=None):
    if modo is None:
        modo = config.modo()
    if modo == "secuencial":
        return convolucionar_secuencial(grilla, kernel)
    if modo == "paralelo":
        return convolucionar_paralelo(grilla, kernel, nro_workers)
    raise ValueError(f"Modo desconocido: {modo!r}")
