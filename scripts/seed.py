from userfields.core.config import settings
from userfields.core.logs import configure_logging
from userfields.db.session import engine, Session, init_db
from userfields.db.seed import seed_all

def run_seed():
    configure_logging()
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=settings.SEED_PATH)

if __name__ == "__main__":
    run_seed()
