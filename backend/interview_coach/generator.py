"""
Question Generation
===================

Produces one interview question (plus a short reference answer) for a
topic / sub-topic / difficulty selection.

Generation is best-effort and never fails:
1. Each hosted model in ``settings.hf_models`` is tried in order with a short
   timeout. The first response that contains a JSON object with a non-empty
   ``question`` wins.
2. If every model fails (or no API key is configured) a question is built from
   fixed templates and a randomly chosen topic aspect.

Model-generated questions are logged to the ``questions`` table together with
the embedding of their ideal answer. The log is analytics only and is never
read back.
"""

from __future__ import annotations

import json
import logging
import random
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .db import SessionLocal
from .embeddings import embed
from .inference_client import InferenceClient
from .models import Question
from .settings import settings

logger = logging.getLogger("interview-coach.generator")

DEFAULT_IDEAL_ANSWER = "Explain the concept."

# ============================================================================
# FALLBACK CONTENT
# ============================================================================

ASPECTS: List[str] = [
	"memory management",
	"performance optimization",
	"security implications",
	"error handling",
	"scalability",
	"best practices",
	"internal architecture",
]

# (question template, ideal answer hint); filled with topic, sub_topic, aspect
TEMPLATES: List[tuple[str, str]] = [
	("How does {sub_topic} handle {aspect} in {topic}?", "Discuss how {sub_topic} manages {aspect}."),
	("Can you explain the lifecycle of {sub_topic} in {topic} specifically regarding {aspect}?", "Focus on the execution flow."),
	("What are the common pitfalls when using {sub_topic} in {topic}?", "Mention anti-patterns and debugging."),
	("Compare {sub_topic} with its alternatives in {topic}. When would you use it?", "Discuss trade-offs and use cases."),
	("How would you debug a critical issue involving {sub_topic} in a production {topic} app?", "Explain your troubleshooting steps."),
]


# ============================================================================
# MODELS
# ============================================================================

class GeneratedQuestion(BaseModel):
	question: str
	ideal_answer: str


class GenerationResult(GeneratedQuestion):
	"""
	A generated question together with where it came from.

	Attributes:
		source: "model" when a hosted model produced it, "fallback" otherwise
		model: Identifier of the hosted model that answered, if any
	"""
	source: str = "fallback"
	model: Optional[str] = None


# ============================================================================
# PROMPT / PARSING
# ============================================================================

def build_prompt(topic: str, sub_topic: str, difficulty: str) -> str:
	"""Build the chat-turn prompt sent to every hosted model."""
	return (
		"<start_of_turn>user\n"
		f"Generate a unique {difficulty} interview question about {sub_topic} in {topic}.\n"
		'Return ONLY valid JSON: { "question": "...", "ideal_answer": "..." }<end_of_turn>\n'
		"<start_of_turn>model"
	)


def extract_json_block(text: str) -> Dict[str, Any]:
	"""Extract a JSON object from raw model output.

	Markdown code fences are stripped first. The whole text is then parsed as
	JSON; failing that, the span from the first ``{`` to the last ``}`` is.

	Args:
		text: Raw generated text that should contain a JSON object

	Returns:
		Parsed JSON object as dictionary

	Raises:
		ValueError: If no JSON object can be extracted from the text
	"""
	cleaned = (text or "").replace("```json", "").replace("```", "").strip()
	try:
		data = json.loads(cleaned)
		if isinstance(data, dict):
			return data
	except Exception:
		pass
	match = re.search(r"\{[\s\S]*\}", cleaned)
	if match:
		try:
			data = json.loads(match.group(0))
			if isinstance(data, dict):
				return data
		except Exception:
			pass
	raise ValueError("Failed to parse JSON from model output")


def _to_question(data: Dict[str, Any]) -> Optional[GeneratedQuestion]:
	question = data.get("question")
	if not isinstance(question, str) or not question.strip():
		return None
	ideal_answer = data.get("ideal_answer")
	if not isinstance(ideal_answer, str) or not ideal_answer.strip():
		ideal_answer = DEFAULT_IDEAL_ANSWER
	return GeneratedQuestion(question=question.strip(), ideal_answer=ideal_answer.strip())


# ============================================================================
# GENERATION
# ============================================================================

def smart_fallback(topic: str, sub_topic: str, difficulty: str) -> GeneratedQuestion:
	"""Build a question locally from the fixed templates.

	Used when no hosted model is reachable. ``difficulty`` is accepted for
	symmetry with the model path; the templates do not vary by it.
	"""
	aspect = random.choice(ASPECTS)
	q_template, a_template = random.choice(TEMPLATES)
	fields = {"topic": topic, "sub_topic": sub_topic, "aspect": aspect}
	logger.info("Generated fallback question")
	return GeneratedQuestion(
		question=q_template.format(**fields),
		ideal_answer=a_template.format(**fields),
	)


async def _try_models(client: InferenceClient, prompt: str) -> Optional[GenerationResult]:
	for model in settings.hf_models:
		try:
			logger.info(f"Inference request ({model})...")
			raw = await client.generate(model, prompt)
			generated = _to_question(extract_json_block(raw))
			if generated is None:
				logger.warning(f"{model} returned no question")
				continue
			logger.info(f"{model} succeeded")
			return GenerationResult(**generated.model_dump(), source="model", model=model)
		except Exception as e:
			logger.warning(f"{model} failed: {e}")
	return None


async def generate_question(
	topic: str,
	sub_topic: str,
	difficulty: str,
	*,
	client: Optional[InferenceClient] = None,
) -> GenerationResult:
	"""Generate a question, falling back to templates when every model fails.

	Args:
		topic: Domain, e.g. "Backend Engineering"
		sub_topic: Sub-topic within the domain, e.g. "REST APIs"
		difficulty: "Easy", "Medium" or "Hard"
		client: Inference client to use; one is created (and closed) per call
			when omitted

	Returns:
		GenerationResult with a non-empty question
	"""
	owns_client = client is None
	if client is None:
		try:
			client = InferenceClient()
		except ValueError as e:
			logger.warning(f"Hosted generation disabled: {e}")
	result: Optional[GenerationResult] = None
	if client is not None:
		try:
			result = await _try_models(client, build_prompt(topic, sub_topic, difficulty))
		finally:
			if owns_client:
				await client.aclose()
	if result is not None:
		return result
	logger.info("Hosted models unavailable, using fallback generator")
	fallback = smart_fallback(topic, sub_topic, difficulty)
	return GenerationResult(**fallback.model_dump(), source="fallback")


def record_question(topic: str, sub_topic: str, difficulty: str, generated: GeneratedQuestion) -> None:
	"""Log a generated question with the embedding of its ideal answer."""
	db = SessionLocal()
	try:
		embedding = embed(generated.ideal_answer)
		row = Question(
			topic=topic,
			sub_topic=sub_topic,
			difficulty=difficulty,
			question=generated.question,
			ideal_answer=generated.ideal_answer,
			embedding=json.dumps(embedding),
		)
		db.add(row)
		db.commit()
	except Exception as e:
		db.rollback()
		logger.warning(f"Failed to record question: {e}")
	finally:
		db.close()
