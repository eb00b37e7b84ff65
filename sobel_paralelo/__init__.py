from .combinador import combinar_y_normalizar, magnitud, normalizar
from .convolucion import convolucionar, convolucionar_paralelo, convolucionar_secuencial, convolucionar_varios
from .detector import detectar_bordes, procesar_archivo, procesar_imagen
from .errores import DimensionesInvalidas, ErrorCodificacion, ErrorDecodificacion, ErrorSobel
from .grilla import como_grilla, nueva_grilla
from .kernels import SOBEL_X, SOBEL_Y, crear_kernel
from .particion import dividir_filas
from .relleno import rellenar, rellenar_para

__version__ = "0.1.0"
