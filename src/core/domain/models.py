"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida en el borde lo que llega de herramientas externas (JSON de devicectl,
  `app.json`, `npx expo config`) sin acoplar el Core a esas herramientas.
- Los modelos de valor son inmutables (`frozen`): se construyen una vez por
  ejecución y se pasan hacia abajo por la cadena de llamadas.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Platform(str, Enum):
    """Mobile platforms the runner can target."""

    IOS = "ios"
    ANDROID = "android"

    def label(self) -> str:
        return "iOS" if self is Platform.IOS else "Android"


class ProjectType(str, Enum):
    """Kind of React Native project found in the working directory."""

    EXPO_MANAGED = "expo-managed"
    EXPO_BARE = "expo-bare"
    REACT_NATIVE_CLI = "react-native-cli"

    @property
    def is_expo(self) -> bool:
        return self is not ProjectType.REACT_NATIVE_CLI

    def label(self) -> str:
        return {
            ProjectType.EXPO_MANAGED: "Expo (managed)",
            ProjectType.EXPO_BARE: "Expo (bare)",
            ProjectType.REACT_NATIVE_CLI: "React Native CLI",
        }[self]


class DeviceConfig(BaseModel):
    """Configuración efectiva de build/run para una ejecución.

    Por qué todos los campos son opcionales:
    - Se rellena por capas (entorno, config del proyecto, defaults) y cada capa
      solo completa lo que sigue sin valor.
    """

    model_config = ConfigDict(frozen=True)

    ios_scheme: str | None = Field(default=None, description="Xcode scheme.")
    ios_configuration: str | None = Field(default=None, description="Xcode build configuration.")
    ios_workspace: str | None = Field(default=None, description="Ruta al .xcworkspace.")
    ios_derived_data: str | None = Field(default=None, description="Ruta de DerivedData.")
    ios_bundle_id: str | None = Field(default=None, description="Bundle identifier iOS.")
    android_app_id: str | None = Field(default=None, description="applicationId Android.")
    android_module: str | None = Field(default=None, description="Módulo Gradle de la app.")
    android_variant: str | None = Field(default=None, description="Build variant Android.")

    def fill_missing(self, **values: str | None) -> "DeviceConfig":
        """Return a copy where only unset fields take the given values."""

        updates = {
            key: value
            for key, value in values.items()
            if value and not getattr(self, key)
        }
        if not updates:
            return self
        return self.model_copy(update=updates)


class DeviceInfo(BaseModel):
    """A physical device found by one of the platform tools."""

    model_config = ConfigDict(frozen=True)

    platform: Platform
    identifier: str = Field(
        ...,
        min_length=1,
        description="UDID (iOS) o serial (Android).",
    )
    name: str | None = Field(default=None, description="Nombre visible del dispositivo.")

    @property
    def udid(self) -> str | None:
        return self.identifier if self.platform is Platform.IOS else None

    @property
    def serial(self) -> str | None:
        return self.identifier if self.platform is Platform.ANDROID else None


class DetectedDevices(BaseModel):
    """At most one device per platform."""

    model_config = ConfigDict(frozen=True)

    ios: DeviceInfo | None = None
    android: DeviceInfo | None = None

    def for_platform(self, platform: Platform) -> DeviceInfo | None:
        return self.ios if platform is Platform.IOS else self.android


class ExpoIosConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    bundle_identifier: str | None = Field(default=None, alias="bundleIdentifier")


class ExpoAndroidConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    package: str | None = None


class ExpoConfig(BaseModel):
    """Subconjunto de la config de Expo (`app.json` -> `expo`, o `expo config --json`).

    Solo lectura: el runner nunca escribe la config del proyecto.
    """

    model_config = ConfigDict(extra="ignore")

    ios: ExpoIosConfig | None = None
    android: ExpoAndroidConfig | None = None
    extra: dict[str, object] | None = Field(
        default=None,
        description="Campo `extra` de Expo; se leen las claves IOS_*/AOS_*.",
    )

    def extra_value(self, key: str) -> str | None:
        if not self.extra:
            return None
        value = self.extra.get(key)
        if isinstance(value, str) and value:
            return value
        return None


class CommandResult(BaseModel):
    """Captured outcome of an external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
