"""
Static configuration for the unused-assets scan.

Defaults mirror the conventional layout of a JavaScript/React Native project:
sources live under `src/`, media under `src/assets/`, and assets that are
re-exported through a constants module are declared in
`src/constants/images.js` with `require("...")` calls.
"""

import re
from pathlib import Path

from models import MediaExtension, ResolutionVariant

DEFAULT_PROJECT_DIR = Path("src")

# Relative to the project directory
DEFAULT_ASSETS_SUBDIR = Path("assets")
DEFAULT_CONSTANTS_FILE = Path("constants") / "images.js"

# Written next to the project directory
REPORT_FILE_NAME = "unused_assets.txt"

SIZE_CONVERSION_FACTOR = 1024 * 1024

MEDIA_FILE_PATTERN = re.compile(rf"\.({'|'.join(MediaExtension)})$")

HIGH_RESOLUTION_SUFFIX_PATTERN = re.compile(
    rf"(?:{'|'.join(ResolutionVariant)})\."
)

# Everything from the first dot to the end of the path
EXTENSION_PATTERN = re.compile(r"\.(.+)$")

# const logo = require("./path/to/logo.png");
REQUIRE_CALL_PATTERN = re.compile(r"""require\(["'](.+?)["']\)""")
