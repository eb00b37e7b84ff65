import numpy as np

from .errores import DimensionesInvalidas


def nueva_grilla(alto, ancho):
    if alto < 1 or ancho < 1:
        raise DimensionesInvalidas(f"La grilla debe tener al menos 1x1, se pidió {alto}x{ancho}")
    return np.zeros((alto, ancho), dtype=np.float64)


def validar_grilla(grilla, nombre="grilla"):
    """
    Verifica que la grilla sea un arreglo 2D no vacío.

    :param grilla: Arreglo numpy a verificar.
    :param nombre: Nombre usado en el mensaje de error.
    :return: Tupla (alto, ancho).
    """
    if not isinstance(grilla, np.ndarray) or grilla.ndim != 2:
        raise DimensionesInvalidas(f"{nombre} debe ser un arreglo 2D")
    alto, ancho = grilla.shape
    if alto < 1 or ancho < 1:
        raise DimensionesInvalidas(f"{nombre} vacía: {alto}x{ancho}")
    return alto, ancho


def como_grilla(datos):
    """Copia listas de filas (o un arreglo) a una grilla float64 nueva."""
    if isinstance(datos, np.ndarray):
        grilla = np.array(datos, dtype=np.float64, order="C", copy=True)
    else:
        try:
            filas = [list(fila) for fila in datos]
        except TypeError:
            raise DimensionesInvalidas("Se esperaba una secuencia de filas") from None
        if filas and len({len(fila) for fila in filas}) != 1:
            raise DimensionesInvalidas("Todas las filas deben tener el mismo ancho")
        grilla = np.array(filas, dtype=np.float64)
    validar_grilla(grilla)
    return grilla
