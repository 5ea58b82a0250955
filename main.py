"""Scholomance dev launcher. Starts the API server in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Scholomance dev launcher")
    parser.add_argument("--host", default=HOST, help=f"Bind address (default: {HOST})")
    parser.add_argument("--port", default=PORT, help=f"Port (default: {PORT})")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "info"),
                        help="Log level for uvicorn and the scholomance loggers")
    args = parser.parse_args()

    env = os.environ.copy()
    env["LOG_LEVEL"] = args.log_level.upper()

    print(f"Starting Scholomance on http://localhost:{args.port} ...")
    proc = subprocess.Popen(
        ["uvicorn", "scholomance.app:app", "--reload",
         "--host", args.host, "--port", str(args.port),
         "--log-level", args.log_level.lower()],
        cwd=ROOT, env=env,
    )
    try:
        sys.exit(proc.wait())
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
