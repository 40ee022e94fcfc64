"""
Configuration constants for graphwalk.

Values come from environment variables (optionally via a .env file in the
project root) with sensible defaults for local development.
"""

import os
import secrets
from pathlib import Path

from dotenv import load_dotenv

# Project root is the directory holding this file
PROJECT_ROOT = Path(__file__).parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Edge list preloaded into every new session graph (unset = start empty)
EDGE_LIST_PATH = os.environ.get("GRAPHWALK_EDGE_LIST")

# =============================================================================
# Loading Configuration
# =============================================================================

# Fail the whole load on the first malformed line instead of skipping it
STRICT_EDGE_LIST = os.environ.get("GRAPHWALK_STRICT", "false").lower() in ("1", "true", "yes")

# =============================================================================
# Web Server Configuration
# =============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
HOST = os.environ.get("GRAPHWALK_HOST", "127.0.0.1")
PORT = int(os.environ.get("GRAPHWALK_PORT", "5000"))
DEBUG = os.environ.get("GRAPHWALK_DEBUG", "false").lower() in ("1", "true", "yes")

# Session graphs kept in memory; the least recently used one is dropped past this
MAX_GRAPHS = int(os.environ.get("GRAPHWALK_MAX_GRAPHS", "1000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
