from app.db.base import Base
from app.db.session import engine
from app.db import models  # noqa: F401  # Registers the activity tables

if __name__ == "__main__":
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created.")
