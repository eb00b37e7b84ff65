import numpy as np

from .errores import DimensionesInvalidas
from .grilla import validar_grilla


def magnitud(gx, gy):
    validar_grilla(gx, "gx")
    validar_grilla(gy, "gy")
    if gx.shape != gy.shape:
        raise DimensionesInvalidas(f"Gradientes de distinta forma: {gx.shape} y {gy.shape}")
    # En enteros gx * gx desborda sin avisar
    gx = np.asarray(gx, dtype=np.float64)
    gy = np.asarray(gy, dtype=np.float64)
    return np.sqrt(gx * gx + gy * gy)


def normalizar(grilla, maximo=255.0):
    """
    Escala linealmente la grilla al rango [0, maximo].

    Si todos los valores son iguales no hay rango que escalar y el
    resultado es todo ceros.
    """
    validar_grilla(grilla)
    grilla = np.asarray(grilla, dtype=np.float64)
    minimo = grilla.min()
    tope = grilla.max()
    if tope == minimo:
        return np.zeros_like(grilla)
    return maximo * (grilla - minimo) / (tope - minimo)


def combinar_y_normalizar(gx, gy):
    return normalizar(magnitud(gx, gy))
