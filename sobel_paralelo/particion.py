import logging
from concurrent.futures import ThreadPoolExecutor, wait

logger = logging.getLogger(__name__)


def dividir_filas(alto, n):
    """
    Divide las filas [0, alto) en n rangos contiguos.

    Cada rango tiene alto // n filas y el último absorbe el resto.
    Si hay más workers que filas se usan solo `alto` workers, así
    ningún rango queda vacío.

    :param alto: Cantidad de filas de la grilla.
    :param n: Cantidad de workers pedidos.
    :return: Lista de tuplas (inicio, fin).
    """
    if n < 1:
        raise ValueError(f"La cantidad de workers debe ser >= 1, se recibió {n}")
    if alto < 1:
        return []
    n = min(n, alto)
    paso = alto // n
    rangos = []
    for i in range(n):
        inicio = i * paso
        fin = (i + 1) * paso if i != n - 1 else alto
        rangos.append((inicio, fin))
    return rangos


def ejecutar_en_paralelo(tareas, nro_workers):
    """
    Ejecuta las tareas en un pool de hilos y espera a que terminen todas.

    Si alguna tarea falla, la excepción se relanza después de que el
    resto haya terminado, para que nadie lea un resultado a medio escribir.
    """
    if nro_workers < 1:
        raise ValueError(f"La cantidad de workers debe ser >= 1, se recibió {nro_workers}")
    if not tareas:
        return

    logger.debug("[POOL] %d tareas en %d hilos", len(tareas), nro_workers)
    with ThreadPoolExecutor(max_workers=nro_workers, thread_name_prefix="sobel") as pool:
        futuros = [pool.submit(tarea) for tarea in tareas]
        wait(futuros)

    for futuro in futuros:
        futuro.result()
