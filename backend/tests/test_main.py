from fastapi.testclient import TestClient

from interview_coach.embeddings import VectorEngine
from interview_coach.main import create_app
from interview_coach.settings import settings


def test_frontend_served_when_directory_exists(monkeypatch, tmp_path):
	(tmp_path / "index.html").write_text("<h1>Interview Coach</h1>")
	monkeypatch.setattr(settings, "frontend_dir", str(tmp_path))
	with TestClient(create_app()) as c:
		r = c.get("/", follow_redirects=False)
		assert r.status_code in (302, 307)
		assert r.headers["location"] == "/app"
		page = c.get("/app/")
		assert page.status_code == 200
		assert "Interview Coach" in page.text


def test_no_frontend_without_directory(monkeypatch, tmp_path):
	monkeypatch.setattr(settings, "frontend_dir", str(tmp_path / "missing"))
	with TestClient(create_app()) as c:
		assert c.get("/").status_code == 404
		assert c.get("/app/").status_code == 404


def test_startup_preloads_embedding_model(monkeypatch, built_models):
	monkeypatch.setattr(settings, "preload_embedding_model", True)
	with TestClient(create_app()):
		assert built_models == [settings.embedding_model]
		assert VectorEngine._instance is not None


def test_startup_leaves_model_lazy_by_default(monkeypatch, built_models):
	monkeypatch.setattr(settings, "preload_embedding_model", False)
	with TestClient(create_app()):
		assert built_models == []
