# app/database/models.py
from sqlalchemy import Column, String, JSON
from app.database.db import Base
from app.core.settings import settings


class KeyValueEntry(Base):
    __tablename__ = settings.kv_table_name

    key = Column(String, primary_key=True, index=True)
    value = Column(JSON, nullable=False)
