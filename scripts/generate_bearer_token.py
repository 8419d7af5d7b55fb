#!/usr/bin/env python3
"""
Print a new bearer token for the BEARER_TOKEN setting.

Usage:
  python scripts/generate_bearer_token.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.infrastructure.auth.tokens import generate_bearer_token  # noqa: E402

if __name__ == "__main__":
    print(generate_bearer_token())
