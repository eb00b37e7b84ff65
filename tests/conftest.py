import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def impulso():
    return np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 0.0]])


def correlacion_directa(grilla, kernel):
    """Versión celda por celda, en el mismo orden de suma que el motor."""
    alto, ancho = grilla.shape
    alto_k, ancho_k = kernel.shape
    pad_alto, pad_ancho = alto_k // 2, ancho_k // 2
    relleno = [[0.0] * (ancho + 2 * pad_ancho) for _ in range(alto + 2 * pad_alto)]
    for i in range(alto):
        for j in range(ancho):
            relleno[i + pad_alto][j + pad_ancho] = float(grilla[i, j])

    resultado = np.zeros((alto, ancho))
    for i in range(alto):
        for j in range(ancho):
            suma = 0.0
            for a in range(alto_k):
                for b in range(ancho_k):
                    suma += relleno[i + a][j + b] * float(kernel[a, b])
            resultado[i, j] = suma
    return resultado
