import numpy as np

from .errores import DimensionesInvalidas
from .grilla import validar_grilla
from .kernels import medio_kernel


def rellenar(grilla, pad_alto, pad_ancho):
    """Devuelve una copia de la grilla con un borde de ceros alrededor."""
    alto, ancho = validar_grilla(grilla)
    if pad_alto < 0 or pad_ancho < 0:
        raise DimensionesInvalidas(f"Relleno negativo: {pad_alto}x{pad_ancho}")

    relleno = np.zeros((alto + 2 * pad_alto, ancho + 2 * pad_ancho), dtype=np.float64)
    relleno[pad_alto:pad_alto + alto, pad_ancho:pad_ancho + ancho] = grilla
    return relleno


def rellenar_para(grilla, kernel):
    pad_alto, pad_ancho = medio_kernel(kernel)
    return rellenar(grilla, pad_alto, pad_ancho)
