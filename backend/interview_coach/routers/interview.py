from __future__ import annotations
import logging
from typing import Dict, List

from fastapi import APIRouter, BackgroundTasks, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ..catalog import DIFFICULTIES, TOPICS
from ..generator import DEFAULT_IDEAL_ANSWER, generate_question, record_question
from ..report import HistoryItem, SessionReport, summarize_history
from ..scoring import evaluate_answer

router = APIRouter(prefix="/api/interview", tags=["interview"])

logger = logging.getLogger("interview-coach.routers.interview")


class GenerateRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	topic: str
	sub_topic: str = Field(alias="subTopic")
	difficulty: str = "Medium"


class GenerateResponse(BaseModel):
	question: str
	ideal_answer: str


class EvaluateRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	user_answer: str = Field(alias="userAnswer")
	ideal_answer: str = Field(alias="idealAnswer")


class EvaluateResponse(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	score: int = Field(ge=0, le=100)
	feedback: str
	ideal_answer: str = Field(alias="idealAnswer")


class TopicsResponse(BaseModel):
	topics: Dict[str, List[str]]
	difficulties: List[str]


class ReportRequest(BaseModel):
	history: List[HistoryItem] = []


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest, background_tasks: BackgroundTasks):
	try:
		result = await generate_question(req.topic, req.sub_topic, req.difficulty)
		if result.source == "model":
			# Logged after the response is sent
			background_tasks.add_task(record_question, req.topic, req.sub_topic, req.difficulty, result)
		return GenerateResponse(question=result.question, ideal_answer=result.ideal_answer)
	except Exception:
		logger.exception("Question generation failed outside the fallback chain")
		return GenerateResponse(
			question=f"Tell me about {req.sub_topic} in {req.topic}.",
			ideal_answer=DEFAULT_IDEAL_ANSWER,
		)


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
	try:
		evaluation = evaluate_answer(req.user_answer, req.ideal_answer)
	except Exception:
		logger.exception("Evaluation failed")
		raise HTTPException(status_code=500, detail="Evaluation failed")
	return EvaluateResponse(score=evaluation.score, feedback=evaluation.feedback, ideal_answer=evaluation.ideal_answer)


@router.get("/topics", response_model=TopicsResponse)
def topics():
	return TopicsResponse(topics=TOPICS, difficulties=DIFFICULTIES)


@router.post("/report", response_model=SessionReport)
def report(req: ReportRequest):
	return summarize_history(req.history)
