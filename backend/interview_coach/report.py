from __future__ import annotations
import math
from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Scores at or above this are shown as strong answers
STRONG_THRESHOLD = 70


class HistoryItem(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	question: str
	user_answer: str = Field(alias="userAnswer")
	ideal_answer: str = Field(alias="idealAnswer")
	score: int = Field(ge=0, le=100)
	feedback: str = ""


class SessionReport(BaseModel):
	average_score: int
	count: int
	strong_count: int
	items: List[HistoryItem]


def summarize_history(items: List[HistoryItem]) -> SessionReport:
	if items:
		average = math.floor(sum(i.score for i in items) / len(items) + 0.5)
	else:
		average = 0
	strong = sum(1 for i in items if i.score >= STRONG_THRESHOLD)
	return SessionReport(average_score=average, count=len(items), strong_count=strong, items=list(items))
