# tutorhub/models/resource.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from tutorhub.db.base import Base

class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)  # document / video / audio / worksheet

    # path relative to the public uploads mount, e.g. "uploads/3f2a....pdf"
    file_path = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    level = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
