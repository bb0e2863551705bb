# scripts/setup/init_db.py
"""
Initialize the storage database - creates the local_storage table and
reports how many visitors are stored.
Usage: python scripts/setup/init_db.py [--reset]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine, SessionLocal
from app.config import settings
from app.services.local_storage import LocalStorage
from app.services.visitor_store import VisitorStore
from sqlalchemy import text


def main():
    parser = argparse.ArgumentParser(description="Create storage tables for the visitor API")
    parser.add_argument("--reset", action="store_true", help="Delete the stored visitor list")
    args = parser.parse_args()

    print("🗄️  Church Visitors DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    print("✅ local_storage table ready")

    storage = LocalStorage(SessionLocal)
    if args.reset:
        storage.remove_item(settings.STORAGE_KEY)
        print(f"🧹 Removed key '{settings.STORAGE_KEY}'")

    store = VisitorStore(storage, settings.STORAGE_KEY)
    store.load()
    print(f"\n👥 Visitors stored under '{settings.STORAGE_KEY}': {len(store)}")

    print("\n🎉 Storage ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
