"""Excepciones del paquete."""


class EncuestaError(Exception):
    """Error base de encuesta."""


class ValidationError(EncuestaError, ValueError):
    """Una regla de validación rechazó el valor.

    Las reglas pueden lanzarla en lugar de retornar el mensaje.
    """
