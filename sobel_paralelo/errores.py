class ErrorSobel(Exception):
    """Error base del detector de bordes."""


class DimensionesInvalidas(ErrorSobel, ValueError):
    """Grilla o kernel vacíos, de rango incorrecto, o gradientes de distinta forma."""


class ErrorDecodificacion(ErrorSobel):
    """Los bytes recibidos no son una imagen válida."""


class ErrorCodificacion(ErrorSobel, OSError):
    """No se pudo codificar o escribir la imagen de salida."""
