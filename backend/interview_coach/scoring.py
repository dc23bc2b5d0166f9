from __future__ import annotations
import math
from typing import Optional

from pydantic import BaseModel
from sentence_transformers import SentenceTransformer
from sentence_transformers.util import cos_sim

from .embeddings import VectorEngine

# Feedback bands (strictly greater than)
GREAT_THRESHOLD = 75
GOOD_THRESHOLD = 50


class Evaluation(BaseModel):
	score: int
	feedback: str
	ideal_answer: str


def similarity_to_score(similarity: float) -> int:
	"""Scale a cosine similarity to a 0–100 integer, rounding halves up."""
	score = math.floor(float(similarity) * 100 + 0.5)
	return max(0, min(100, score))


def feedback_for(score: int) -> str:
	if score > GREAT_THRESHOLD:
		return "Great job!"
	if score > GOOD_THRESHOLD:
		return "Good attempt."
	return "Needs improvement."


def evaluate_answer(user_answer: str, ideal_answer: str, *, model: Optional[SentenceTransformer] = None) -> Evaluation:
	"""Score ``user_answer`` by its semantic closeness to ``ideal_answer``."""
	model = model or VectorEngine.get_instance()
	user_emb = model.encode(user_answer, normalize_embeddings=True)
	ideal_emb = model.encode(ideal_answer, normalize_embeddings=True)
	similarity = cos_sim(user_emb, ideal_emb)[0][0].item()
	score = similarity_to_score(similarity)
	return Evaluation(score=score, feedback=feedback_for(score), ideal_answer=ideal_answer)
