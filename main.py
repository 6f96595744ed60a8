"""Lanzador local de rn-device-runner sin instalar el paquete.

Uso, desde la raíz del repo:
- `python -m main --prefer android`
- `python -m main doctor`

Los paquetes (`cli`, `core`, `adapters`) viven bajo `src/`; sin un
`pip install -e .` no están en `sys.path`, así que se añade aquí.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src_dir = Path(__file__).resolve().parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
