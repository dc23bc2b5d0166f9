import pytest

from interview_coach.embeddings import VectorEngine, embed
from interview_coach.settings import settings


def test_get_instance_builds_once(built_models):
	first = VectorEngine.get_instance()
	second = VectorEngine.get_instance()
	assert first is second
	assert built_models == [settings.embedding_model]


def test_reset_forces_rebuild(built_models):
	first = VectorEngine.get_instance()
	VectorEngine.reset()
	second = VectorEngine.get_instance()
	assert first is not second
	assert len(built_models) == 2


def test_embed_returns_plain_floats(built_models):
	vector = embed("hello")
	assert isinstance(vector, list)
	assert all(type(x) is float for x in vector)
	assert vector == pytest.approx([0.6, 0.8, 0.0])
	assert len(built_models) == 1
