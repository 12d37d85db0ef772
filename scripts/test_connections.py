#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the configured storage backend is reachable.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from portal.core.config import get_settings
from portal.storage.selector import create_storage, select_backend_kind


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREERS PORTAL - CONNECTION TEST")
    print("=" * 50)

    kind = select_backend_kind(settings)
    print(f"\n[1] Selected storage backend: {kind}")
    if kind == "relational":
        print(f"    URL: {settings.safe_database_url}")
    elif kind == "kv":
        print(f"    URI: {settings.mongodb_uri}")
        print(f"    Database: {settings.mongodb_db} / collection: {settings.kv_collection}")
    else:
        print("    ⚠️  In-memory storage: nothing is persisted")

    print("\n[2] Pinging backend...")
    storage = create_storage(settings)
    if storage.ping():
        print(f"    ✅ {kind}: CONNECTED")
    else:
        print(f"    ❌ {kind}: FAILED")
        sys.exit(1)

    print("\n[3] Reading About Us...")
    about = storage.get_about_us()
    print(f"    ✅ content: {about.content[:60]!r}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
