"""
codeowners-gen - code ownership files from contributor statistics

Turns per-file contributor statistics into a GitHub ``CODEOWNERS`` file or a
hierarchical ``OWNERS`` file, attributing each path to its top contributors.
"""

__version__ = "0.1.0"

from .attribution import get_top_contributors
from .config import load_attribution_config
from .filenames import clean_filename
from .models import AttributionConfig, AuthorStat, OutputOptions
from .stats import load_file_stats
from .writer import generate_output_file

__all__ = [
    "generate_output_file",  # Main entry point
    "get_top_contributors",
    "clean_filename",
    "load_attribution_config",
    "load_file_stats",
    "AttributionConfig",
    "AuthorStat",
    "OutputOptions",
]
