#!/usr/bin/env python3
"""
Generate OpenAPI JSON schema for the FastAPI application.

Usage:
  python scripts/generate_openapi.py
"""

import json
import os
import sys
from pathlib import Path

# Set minimal environment for OpenAPI generation (no DB required)
os.environ.setdefault("DATABASE_URL_APP", "sqlite+aiosqlite:///:memory:")

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.main import create_app  # noqa: E402


def main():
    """Generate OpenAPI JSON and save to docs/openapi.json."""
    app = create_app()
    openapi_schema = app.openapi()

    docs_dir = Path("docs")
    docs_dir.mkdir(exist_ok=True)

    output_file = docs_dir / "openapi.json"
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(openapi_schema, f, indent=2)
        f.write("\n")

    print(f"[OK] OpenAPI schema generated: {output_file}")
    print(f"   Title: {openapi_schema['info']['title']}")
    print(f"   Version: {openapi_schema['info']['version']}")
    print(f"   Endpoints: {len(openapi_schema['paths'])} paths")

    print("\nEndpoint Summary:")
    for path, methods in openapi_schema["paths"].items():
        for method, details in methods.items():
            tags = details.get("tags", [""])
            summary = details.get("summary", "No summary")
            print(f"   {method.upper():6} {path:40} [{tags[0]}] {summary}")


if __name__ == "__main__":
    main()
