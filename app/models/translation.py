from app.core.db import Base
from sqlalchemy import Column, Integer, DateTime, Text, func


class Translation(Base):
    __tablename__ = "translations"
    id = Column(Integer, primary_key=True, autoincrement=True)
    banjara_text = Column(Text, nullable=False)
    telugu_text = Column(Text, nullable=False)
    english_text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
