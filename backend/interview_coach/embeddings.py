from __future__ import annotations
import logging
from threading import Lock
from typing import List, Optional

from sentence_transformers import SentenceTransformer

from .settings import settings

logger = logging.getLogger("interview-coach.embeddings")


class VectorEngine:
	"""Process-wide handle on the sentence-embedding model.

	The model is loaded on first use and reused by every request afterwards.
	"""
	_instance: Optional[SentenceTransformer] = None
	_lock = Lock()

	@classmethod
	def get_instance(cls) -> SentenceTransformer:
		if cls._instance is None:
			with cls._lock:
				# Re-check in case another thread loaded it while we waited
				if cls._instance is None:
					logger.info(f"Loading embedding model: {settings.embedding_model}...")
					cls._instance = SentenceTransformer(settings.embedding_model)
					logger.info("Embedding model ready")
		return cls._instance

	@classmethod
	def reset(cls) -> None:
		with cls._lock:
			cls._instance = None


def embed(text: str) -> List[float]:
	"""Mean-pooled, L2-normalised embedding of ``text`` as a plain list."""
	model = VectorEngine.get_instance()
	vector = model.encode(text, normalize_embeddings=True)
	return [float(x) for x in vector]
