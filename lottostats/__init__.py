"""
Lottery draw history ingestion and statistics

Modules:
- reader: spreadsheet / delimited-text result files to a grid of cells
- dates: day/month/year date cells
- header: header row and column detection
- extractor: grid rows to validated draws
- loader: multi-file loading and consolidation by contest
- analysis: frequency, pairs, parity, intervals, repeated draws
- predictor: hot / cold / mixed / custom number suggestions
- filters: date-range and search helpers over a history
- profiles: game configurations
"""

from .errors import (
    FileProcessingError,
    HeaderNotFoundError,
    LotteryDataError,
    MalformedFileError,
    NoValidDrawsError,
)
from .extractor import Draw
from .profiles import PROFILES, LotteryProfile, get_profile
from .loader import analyze_files, load_draw_history
from .analysis import get_full_analysis

__all__ = [
    "Draw",
    "LotteryProfile",
    "PROFILES",
    "get_profile",
    "load_draw_history",
    "analyze_files",
    "get_full_analysis",
    "LotteryDataError",
    "MalformedFileError",
    "HeaderNotFoundError",
    "FileProcessingError",
    "NoValidDrawsError",
]
