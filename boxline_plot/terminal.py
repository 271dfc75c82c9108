from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO


CLEAR_SCREEN = "\x1b[2J\x1b[H"


def clear_screen(stream: TextIO | None = None) -> None:
    if os.name == "nt":
        subprocess.run(["cmd", "/c", "cls"], check=False)
        return
    out = stream if stream is not None else sys.stdout
    out.write(CLEAR_SCREEN)
    out.flush()
