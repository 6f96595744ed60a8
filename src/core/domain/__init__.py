"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce subprocess, CLI ni el sistema de ficheros: solo
  conceptos del problema (dispositivos, tipo de proyecto, config).
"""
