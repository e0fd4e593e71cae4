import tempfile
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from spellbee.config import Settings
from spellbee.main import create_app


class ApiTestCase(unittest.TestCase):
    max_reported_words = 1000

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        tmpdir = Path(self._tmp.name)
        dict_path = tmpdir / "dict.txt"
        dict_path.write_text("cat\ncats\ndog\nscat\ntact\nacts\n", encoding="utf-8")
        self.settings = Settings(
            dictionary_path=dict_path,
            data_dir=tmpdir / "reports",
            max_reported_words=self.max_reported_words,
            random_seed=5,
        )
        self.sio = MagicMock()
        self.sio.emit = AsyncMock()
        self.app = create_app(self.settings, sio=self.sio)
        self.client = TestClient(self.app)


class DictionaryEndpointTests(ApiTestCase):
    def test_valid_words(self) -> None:
        resp = self.client.post("/api/dictionary", json={"letters": ["c", "a", "t", "s"], "minLength": 3})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"validWords": ["CAT", "CATS", "SCAT", "TACT", "ACTS"], "count": 5})

    def test_rejects_missing_or_bad_fields(self) -> None:
        bad_bodies = [
            {},
            {"minLength": 3},
            {"letters": [], "minLength": 3},
            {"letters": ["c", "a"]},
            {"letters": ["c", "a"], "minLength": 0},
            {"letters": ["c", "a"], "minLength": "many"},
            {"letters": ["ca"], "minLength": 3},
            {"letters": ["c", "a"], "minLength": "3"},
            {"letters": ["c", "a"], "minLength": True},
            {"letters": ["c", "a"], "minLength": 3.0},
        ]
        for body in bad_bodies:
            with self.subTest(body=body):
                resp = self.client.post("/api/dictionary", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("error", resp.json())

    def test_validate_word(self) -> None:
        resp = self.client.get("/dict/validate", params={"word": "cats"})
        self.assertEqual(resp.json(), {"word": "CATS", "valid": True})
        resp = self.client.get("/dict/validate", params={"word": "bird"})
        self.assertFalse(resp.json()["valid"])

    def test_error_schema_is_documented(self) -> None:
        paths = self.client.get("/openapi.json").json()["paths"]
        responses = paths["/api/dictionary/report"]["post"]["responses"]
        self.assertIn("400", responses)
        self.assertIn("429", responses)
        self.assertIn("500", paths["/api/newgame"]["get"]["responses"])

    def test_health_reports_dictionary_size(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.json(), {"status": "ok", "dictionarySize": 6})


class NewGameEndpointTests(ApiTestCase):
    def test_new_game_shape(self) -> None:
        resp = self.client.get("/api/newgame")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data["letters"]), 7)
        self.assertEqual(len(set(data["letters"])), 7)
        self.assertIn(data["centerLetter"], data["letters"])
        self.assertEqual(
            set(data["stats"]), {"usedLetterCount", "totalPossibleScore", "heuristicScore"}
        )
        for word in data["validWords"]:
            self.assertGreaterEqual(len(word), 4)
            self.assertTrue(set(word) <= set(data["letters"]))

    def test_min_length_query(self) -> None:
        resp = self.client.get("/api/newgame", params={"minLength": 3})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get("/api/newgame", params={"minLength": 0}).status_code, 400)

    def test_generation_failure_is_server_error(self) -> None:
        self.app.state.context.generator.attempts = 0
        resp = self.client.get("/api/newgame")
        self.assertEqual(resp.status_code, 500)
        self.assertIn("error", resp.json())


class ReportEndpointTests(ApiTestCase):
    max_reported_words = 2

    def test_report_and_read_back(self) -> None:
        resp = self.client.post("/api/dictionary/report", json={"word": "hello", "type": "add"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b"")
        self.client.post("/api/dictionary/report", json={"word": "Hello", "type": "add"})
        self.client.post("/api/dictionary/report", json={"word": "cat", "type": "remove"})
        resp = self.client.get("/api/dictionary/report")
        self.assertEqual(resp.json(), {"add": ["HELLO"], "remove": ["CAT"]})

    def test_report_broadcasts_only_on_change(self) -> None:
        self.client.post("/api/dictionary/report", json={"word": "hello", "type": "add"})
        self.client.post("/api/dictionary/report", json={"word": "hello", "type": "add"})
        self.sio.emit.assert_awaited_once_with("reports:updated", {"add": ["HELLO"], "remove": []})

    def test_invalid_report(self) -> None:
        bad_bodies = [
            {"type": "add"},
            {"word": "hello"},
            {"word": "   ", "type": "add"},
            {"word": "two words", "type": "add"},
            {"word": "hello", "type": "maybe"},
        ]
        for body in bad_bodies:
            with self.subTest(body=body):
                resp = self.client.post("/api/dictionary/report", json=body)
                self.assertEqual(resp.status_code, 400)

    def test_full_list_returns_429(self) -> None:
        for word in ("one", "two"):
            self.client.post("/api/dictionary/report", json={"word": word, "type": "add"})
        resp = self.client.post("/api/dictionary/report", json={"word": "three", "type": "add"})
        self.assertEqual(resp.status_code, 429)
        self.assertIn("error", resp.json())
        # The other list is unaffected
        resp = self.client.post("/api/dictionary/report", json={"word": "three", "type": "remove"})
        self.assertEqual(resp.status_code, 200)

    def test_clear(self) -> None:
        self.client.post("/api/dictionary/report", json={"word": "one", "type": "add"})
        self.client.post("/api/dictionary/report", json={"word": "two", "type": "remove"})
        resp = self.client.delete("/api/dictionary/report")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b"")
        self.assertEqual(self.client.get("/api/dictionary/report").json(), {"add": [], "remove": []})
        self.sio.emit.assert_awaited_with("reports:updated", {"add": [], "remove": []})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
