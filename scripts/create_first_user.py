import sys
import os
from sqlmodel import Session, select

# Add current directory to path
sys.path.append(os.getcwd())

from app.db.session import engine, init_db
from app.models.user import User, UserRole
from app.core.security import get_password_hash

def create_initial_manager(email: str, password: str, name: str = "First Manager"):
    print("--- Initial Manager Creation ---")

    init_db()

    with Session(engine) as session:
        # Check if user already exists
        statement = select(User).where(User.email == email)
        user = session.exec(statement).first()

        if user:
            print(f"User with email {email} already exists.")
            return

        print(f"Creating manager {email}...")
        db_user = User(
            email=email,
            name=name,
            password=get_password_hash(password),
            role=UserRole.MANAGER,
        )
        session.add(db_user)
        session.commit()
        print("Initial manager created successfully!")
        print(f"Email: {email}")
        print(f"Role: {UserRole.MANAGER.value}")

if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python scripts/create_first_user.py <email> <password> [name]")
        sys.exit(1)
    create_initial_manager(*sys.argv[1:4])
