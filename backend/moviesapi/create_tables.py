from moviesapi.core.config import get_settings
from moviesapi.db import engine, Base, SessionLocal
from moviesapi.models import *
from moviesapi.repositories.genre_repository import GenreRepository

def seed_genres(db, names) -> int:
    """Insert any default genre that is not present yet"""
    repository = GenreRepository(db)
    created = 0
    for name in names:
        if repository.get_by_name(name) is None:
            repository.insert({"name": name})
            created += 1
    return created

def main():
    """Create all database tables and seed the default genres"""
    Base.metadata.create_all(bind=engine)
    print("All tables created successfully.")

    db = SessionLocal()
    try:
        created = seed_genres(db, get_settings().default_genres())
        print(f"Seeded {created} genre(s).")
    finally:
        db.close()

if __name__ == "__main__":
    main()
