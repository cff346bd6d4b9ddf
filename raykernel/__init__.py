#
# PROJECT: raykernel
# MODULE: raykernel/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .fuzzy import EPSILON, FuzzyEq, fuzzy_eq, fuzzy_ne, assert_fuzzy_eq, assert_fuzzy_ne
from .math_utils import Tuple, NotAVectorError, point, vector
from .color import Color, to_channel_byte
from .canvas import Canvas
from .config import DemoConfig
from .logging_config import setup_logging
