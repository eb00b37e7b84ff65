import logging
import sys

from . import config
from .detector import procesar_archivo
from .errores import ErrorSobel

USO = "Uso: python -m sobel_paralelo imagen_entrada.jpg [imagen_salida.jpg] [nro_workers]"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.nivel_log(), format="%(asctime)s %(levelname)s %(message)s")

    if len(args) < 1 or len(args) > 3:
        print(USO)
        return 1

    entrada = args[0]
    salida = args[1] if len(args) > 1 else None
    nro_workers = None
    if len(args) > 2:
        try:
            nro_workers = int(args[2])
        except ValueError:
            print(f"nro_workers debe ser un entero: {args[2]}")
            return 1

    try:
        ruta = procesar_archivo(entrada, salida, nro_workers)
    except (ErrorSobel, OSError, ValueError) as e:
        logging.error("[❌] %s", e)
        return 1

    print(f"Imagen procesada guardada en: {ruta}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
