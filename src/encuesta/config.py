"""Modelos Pydantic para la configuración de formularios."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from encuesta.theme import ThemeName


class FormSettings(BaseSettings):
    """
    Configuración de presentación y comportamiento de un formulario.

    Se carga desde variables de entorno con prefijo ENCUESTA_
    (ENCUESTA_THEME, ENCUESTA_ACCESSIBLE, ENCUESTA_WIDTH, ENCUESTA_EDITOR...).
    Sin ENCUESTA_EDITOR el comando del editor cae en $VISUAL y $EDITOR al
    momento de abrirlo.
    """
    theme: ThemeName = Field(default=ThemeName.DEFAULT, description="Tema de colores")
    unicode: Optional[bool] = Field(default=None, description="Iconos Unicode (None = detectar)")
    show_help: bool = Field(default=True, description="Mostrar la línea de ayuda")
    show_errors: bool = Field(default=True, description="Mostrar errores junto a cada campo")
    width: Optional[int] = Field(default=None, gt=0, description="Ancho disponible (columnas)")
    accessible: bool = Field(default=False, description="Modo accesible (línea por línea)")
    editor: Optional[str] = Field(default=None, description="Comando del editor externo (None = $VISUAL o $EDITOR)")

    model_config = SettingsConfigDict(
        env_prefix="ENCUESTA_",
        extra="ignore",
    )

    @field_validator("theme", mode="before")
    @classmethod
    def normalize_theme(cls, v: Any) -> Any:
        """Acepta el nombre del tema sin distinguir mayúsculas."""
        if isinstance(v, str):
            return v.lower()
        return v

    @classmethod
    def from_env(cls, **overrides) -> "FormSettings":
        """
        Configuración del entorno con argumentos explícitos encima.

        Los argumentos en None se ignoran (ej: opciones de CLI sin indicar).
        """
        return cls(**{k: v for k, v in overrides.items() if v is not None})
