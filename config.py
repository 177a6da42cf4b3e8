import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).parent
load_dotenv(BASE_DIR / ".env")

# External tool path (override via environment variable); may name the binary
# itself or the directory that holds it
GNUPLOT_PATH = os.environ.get("GNUPLOT_PATH", "gnuplot")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

# Server settings
SERVER_HOST = os.environ.get("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("SERVER_PORT", "8000"))
