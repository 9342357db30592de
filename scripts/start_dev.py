#!/usr/bin/env python3
"""
Development startup script.

Runs pre-flight checks and starts the storefront API in reload mode.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import dotenv
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Create .env from the example if it is missing."""
    env_file = PROJECT_ROOT / ".env"
    env_example = PROJECT_ROOT / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created .env from example")
    else:
        print("! No configuration file, using defaults")
    return True


def check_database():
    """Report where the JSON database lives; it is created on first write."""
    sys.path.insert(0, str(PROJECT_ROOT))
    from dotenv import load_dotenv
    load_dotenv(PROJECT_ROOT / ".env")

    from storefront.core.config import get_settings

    settings = get_settings()
    db_path = PROJECT_ROOT / settings.db_path
    if db_path.exists():
        print(f"✓ Database found at {db_path}")
    else:
        print(f"! Database {db_path} will be created on first registration")

    products_path = Path(settings.get_products_path())
    if not products_path.exists():
        print(f"✗ Catalog not found at {products_path}")
        return False
    print(f"✓ Catalog found at {products_path}")
    return True


def start_service():
    """Start the storefront in development mode."""
    port = os.getenv("STOREFRONT_PORT", "3000")
    print(f"\n🛒 Starting Storefront on http://localhost:{port} ...")
    print(f"📍 API docs: http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")

    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port,
        ],
        cwd=PROJECT_ROOT,
        env={**os.environ, "STOREFRONT_DEBUG": os.getenv("STOREFRONT_DEBUG", "true")},
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    check_env()

    if not check_database():
        sys.exit(1)

    print("\n✓ All checks passed!")

    start_service()


if __name__ == "__main__":
    main()
