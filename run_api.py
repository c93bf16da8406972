#!/usr/bin/env python3
"""Run the SkinCare AI web server."""

import os
import sys
from pathlib import Path

# Allow running from a checkout without installing the package.
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from skincare.api import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    app.run(
        host=os.getenv("SKINCARE_HOST", "127.0.0.1"),
        port=int(os.getenv("SKINCARE_PORT", "5000")),
        debug=os.getenv("SKINCARE_DEBUG", "").lower() in {"1", "true", "yes"},
        threaded=True,
    )
