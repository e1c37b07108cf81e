#!/usr/bin/env python3
"""Wrapper para o comando de relatório Excel do extrato."""

from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_SRC_PATH = _PROJECT_ROOT / "src"
if _SRC_PATH.exists() and str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from extratos.commands.report import main

if __name__ == "__main__":  # pragma: no cover - compatibilidade com execução directa
    raise SystemExit(main())
