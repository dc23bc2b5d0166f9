import os
import tempfile
from pathlib import Path

# Must be set before interview_coach.settings is imported
_DB_DIR = tempfile.mkdtemp(prefix="interview-coach-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["HF_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from interview_coach.db import Base, SessionLocal, engine
from interview_coach.embeddings import VectorEngine
from interview_coach.main import app


class FakeEmbeddingModel:
	"""Maps known texts to fixed unit vectors; anything else is orthogonal."""

	def __init__(self, vectors=None):
		self.vectors = vectors or {}
		self.calls = []

	def encode(self, text, normalize_embeddings=False):
		self.calls.append(text)
		return self.vectors.get(text, [0.0, 0.0, 1.0])


@pytest.fixture
def fake_model(monkeypatch):
	model = FakeEmbeddingModel()
	monkeypatch.setattr(VectorEngine, "_instance", model)
	return model


@pytest.fixture
def client():
	Base.metadata.create_all(bind=engine)
	with TestClient(app) as c:
		yield c


@pytest.fixture
def db():
	Base.metadata.create_all(bind=engine)
	session = SessionLocal()
	try:
		yield session
	finally:
		session.close()


@pytest.fixture
def built_models(monkeypatch):
	"""Swap the SentenceTransformer constructor for one that records each build."""
	from interview_coach import embeddings

	built = []

	class CountingModel(FakeEmbeddingModel):
		def __init__(self, name):
			super().__init__({"hello": (0.6, 0.8, 0.0)})
			built.append(name)

	monkeypatch.setattr(embeddings, "SentenceTransformer", CountingModel)
	monkeypatch.setattr(VectorEngine, "_instance", None)
	return built
