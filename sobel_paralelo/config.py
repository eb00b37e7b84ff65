import os

MODOS = ("paralelo", "secuencial")

SALIDA_POR_DEFECTO = "edge_detected_image.jpg"


def _entero(nombre, defecto):
    valor = os.getenv(nombre)
    if valor is None or valor.strip() == "":
        return defecto
    try:
        return int(valor)
    except ValueError:
        raise ValueError(f"{nombre} debe ser un entero, se recibió {valor!r}") from None


def nro_workers():
    """Cantidad de workers para la convolución (SOBEL_WORKERS o los CPUs del host)."""
    n = _entero("SOBEL_WORKERS", os.cpu_count() or 1)
    if n < 1:
        raise ValueError(f"SOBEL_WORKERS debe ser >= 1, se recibió {n}")
    return n


def modo():
    valor = os.getenv("SOBEL_MODO", "paralelo").strip().lower()
    if valor not in MODOS:
        raise ValueError(f"SOBEL_MODO debe ser uno de {MODOS}, se recibió {valor!r}")
    return valor


def ruta_salida():
    return os.getenv("SOBEL_SALIDA", SALIDA_POR_DEFECTO)


def ruta_original():
    # Vacío = no se guarda la copia en grises de la imagen original
    return os.getenv("SOBEL_ORIGINAL") or None


def nivel_log():
    return os.getenv("LOG_LEVEL", "INFO").upper()


def host():
    return os.getenv("HOST", "0.0.0.0")


def puerto():
    return _entero("PORT", 80)
