# tutorhub/db/base.py
from sqlalchemy.orm import declarative_base

# Models register themselves on import; tutorhub.models imports all of them.
Base = declarative_base()
