# tutorhub/db/deps.py
from typing import Generator

from fastapi import Request

from tutorhub.db.session import Database


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_db(request: Request) -> Generator:
    db = get_database(request).SessionLocal()
    try:
        yield db
    finally:
        db.close()
