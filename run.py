#!/usr/bin/env python3
"""Run the Streamlit dashboard, or the HTTP API with `python run.py api`."""

import subprocess
import sys
from pathlib import Path

if sys.argv[1:] == ["api"]:
    from web.server import run_server

    run_server()
else:
    app = Path(__file__).parent / "web" / "streamlit" / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)])
