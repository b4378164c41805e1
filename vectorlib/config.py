"""Default configuration values for vectorlib logging and the demo."""

from __future__ import annotations

import logging
import math

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO

DEFAULT_VERBOSE = True

DEFAULT_DEMO_ANGLE = math.pi / 2.0
DEFAULT_DEMO_SCALE = 10.0
