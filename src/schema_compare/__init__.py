"""Schema Compare - Diff two versions of a structured schema description."""

import logging
import warnings

__version__ = "0.1.0"
__author__ = "Schema Compare Team"
__license__ = "Apache-2.0"

# Suppress verbose third-party library logging
logging.getLogger("markdown_it").setLevel(logging.WARNING)

# Suppress common warnings from third-party libraries
warnings.filterwarnings("ignore", category=DeprecationWarning, module="dotenv")
