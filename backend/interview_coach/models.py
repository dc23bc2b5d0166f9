from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text
from .db import Base


class Question(Base):
	__tablename__ = "questions"
	# Write-only analytics log of model-generated questions
	id = Column(Integer, primary_key=True, autoincrement=True)
	topic = Column(String(128), nullable=True, index=True)
	sub_topic = Column(String(128), nullable=True)
	difficulty = Column(String(32), nullable=True)
	question = Column(Text, nullable=False)
	ideal_answer = Column(Text, nullable=True)
	embedding = Column(Text, nullable=True)  # JSON list of floats
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
