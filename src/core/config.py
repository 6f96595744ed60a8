"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno y `.env` (pydantic-settings) sin contaminar
  la CLI ni los servicios.
- Los nombres son los que ya usan los proyectos (IOS_*, AOS_*), sin prefijo.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "rn-device-runner"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def env_files_for(project_root: Path) -> tuple[Path, ...]:
    """`.env` files in increasing priority: user config first, then the project."""

    return (get_user_env_file(), project_root / ".env")


class AppSettings(BaseSettings):
    """Valores leídos del entorno y de `.env`.

    Reglas:
    - El entorno del proceso gana siempre sobre `.env`.
    - Una variable vacía cuenta como no definida.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    ios_scheme: str | None = Field(default=None, description="IOS_SCHEME")
    ios_configuration: str | None = Field(default=None, description="IOS_CONFIGURATION")
    ios_workspace: str | None = Field(default=None, description="IOS_WORKSPACE")
    ios_derived_data: str | None = Field(default=None, description="IOS_DERIVED_DATA")
    ios_bundle_id: str | None = Field(default=None, description="IOS_BUNDLE_ID")
    aos_app_id: str | None = Field(default=None, description="AOS_APP_ID")
    aos_module: str | None = Field(default=None, description="AOS_MODULE")
    aos_variant: str | None = Field(default=None, description="AOS_VARIANT")

    force_project_type: str | None = Field(
        default=None,
        description="Fuerza el tipo de proyecto (expo, expo-bare, react-native-cli...).",
    )
    expo_config_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout para `npx expo config --json` (segundos).",
    )


def load_settings(project_root: Path | None = None) -> AppSettings:
    """Build settings reading `.env` from `project_root` instead of the cwd."""

    if project_root is None:
        return AppSettings()
    return AppSettings(_env_file=env_files_for(project_root))
