# scripts/setup/init_db.py
"""
Initialize database — creates all tables and seeds default roles/users.
Run once before first launch, or after adding new models. Safe to re-run.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import SessionLocal, create_tables, engine
from app.config import settings
from app.services.seed_service import seed_default_users
from sqlalchemy import inspect, text


def main():
    print("🗄️  Fleet Management DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {engine.url.render_as_string(hide_password=True)}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running, or point DATABASE_URL at SQLite:")
        print("  DATABASE_URL=sqlite:///./fms.db python scripts/setup/init_db.py")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    print("✅ All tables created")

    print("\n👤 Seeding default roles and users...")
    db = SessionLocal()
    try:
        seed_default_users(db)
    finally:
        db.close()
    print(f"✅ Accounts present: {settings.ADMIN_USERNAME} (ROLE_ADMIN), {settings.USER_USERNAME} (ROLE_USER)")

    tables = sorted(inspect(engine).get_table_names())
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
