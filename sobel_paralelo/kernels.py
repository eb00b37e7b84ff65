import numpy as np

from .errores import DimensionesInvalidas


def crear_kernel(pesos):
    """
    Crea un kernel de solo lectura a partir de una matriz de pesos.

    Los kernels se comparten entre todos los workers de una convolución,
    por eso se copian y se marcan como no modificables.
    """
    try:
        kernel = np.array(pesos, dtype=np.float64, copy=True)
    except (TypeError, ValueError):
        raise DimensionesInvalidas("Los pesos del kernel deben formar una matriz rectangular") from None
    if kernel.ndim != 2 or kernel.size == 0:
        raise DimensionesInvalidas(f"El kernel debe ser 2D y no vacío, forma {kernel.shape}")
    alto, ancho = kernel.shape
    if alto % 2 == 0 or ancho % 2 == 0:
        raise DimensionesInvalidas(f"El kernel debe tener dimensiones impares, forma {alto}x{ancho}")
    kernel.flags.writeable = False
    return kernel


def medio_kernel(kernel):
    alto, ancho = kernel.shape
    return alto // 2, ancho // 2


SOBEL_X = crear_kernel([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
])

SOBEL_Y = crear_kernel([
    [-1, -2, -1],
    [0, 0, 0],
    [1, 2, 1],
])
