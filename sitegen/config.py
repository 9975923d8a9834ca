import math
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


OUTPUT_DIR = Path(os.getenv("SITEGEN_OUTPUT_DIR", "outputs"))

# Modular type scale (Major Third over a 16px root by default)
SCALE_RATIO = _env_float("SITEGEN_SCALE_RATIO", "1.25")
BASE_FONT_SIZE = _env_float("SITEGEN_BASE_FONT_SIZE", "16")

# WCAG AA for normal text
MIN_CONTRAST = _env_float("SITEGEN_MIN_CONTRAST", "4.5")

LOG_LEVEL = os.getenv("SITEGEN_LOG_LEVEL", "INFO").upper()


def settings_problems() -> List[str]:
    """Human-readable problems with the loaded settings; empty when usable."""
    problems = []
    if not (math.isfinite(SCALE_RATIO) and SCALE_RATIO > 1):
        problems.append(f"SITEGEN_SCALE_RATIO must be greater than 1, got {SCALE_RATIO}")
    if not (math.isfinite(BASE_FONT_SIZE) and BASE_FONT_SIZE > 0):
        problems.append(f"SITEGEN_BASE_FONT_SIZE must be greater than 0, got {BASE_FONT_SIZE}")
    if not (math.isfinite(MIN_CONTRAST) and 1 <= MIN_CONTRAST <= 21):
        problems.append(f"SITEGEN_MIN_CONTRAST must be between 1 and 21, got {MIN_CONTRAST}")
    return problems
