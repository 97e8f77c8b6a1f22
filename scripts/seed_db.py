import sys
import os
from sqlmodel import Session

# Add current directory to path
sys.path.append(os.getcwd())

from app.db.session import engine, init_db
from app.db.seed import seed_database, SAMPLE_PASSWORD

def seed():
    print("--- Seeding Database ---")
    print("WARNING: every user, project and assignment will be deleted.")

    init_db()
    with Session(engine) as session:
        counts = seed_database(session)

    for table, count in counts.items():
        print(f"✓ {table}: {count}")
    print(f"Sample password for all users: {SAMPLE_PASSWORD}")

if __name__ == "__main__":
    if "--yes" not in sys.argv:
        print("Refusing to wipe the database without --yes")
        sys.exit(1)
    seed()
