import inspect
import io
import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from PIL import Image

from tournament_scan.api.main import app, get_scanner, parse_fragments, scan_photographs
from tournament_scan.config import ScannerConfig
from tournament_scan.orchestration import TournamentScanner


def _fragment(text, x, y):
    return {"text": text, "box": {"x": x, "y": y, "w": 0.1, "h": 0.02}}


def _png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


class TestScannerAPI(unittest.TestCase):
    def setUp(self):
        self.recognizer = MagicMock()
        scanner = TournamentScanner(
            recognizer=self.recognizer,
            config=ScannerConfig(config_path="/nonexistent/scanner_config.json"),
        )
        app.dependency_overrides[get_scanner] = lambda: scanner
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_scanning_handlers_run_in_threadpool(self):
        self.assertFalse(inspect.iscoroutinefunction(parse_fragments))
        self.assertFalse(inspect.iscoroutinefunction(scan_photographs))

    def test_parse_merges_captures(self):
        captures = [
            [
                _fragment("Monday PLO Bounty", 0.1, 0.9),
                _fragment("Total Buy-In", 0.1, 0.8),
                _fragment("$150", 0.5, 0.8),
            ],
            [
                _fragment("Guarantee", 0.1, 0.9),
                _fragment("$2,500", 0.5, 0.9),
            ],
        ]

        response = self.client.post("/parse", json={"captures": captures})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["name"], "Monday PLO Bounty")
        self.assertEqual(body["game_type"], "PLO")
        self.assertEqual(body["buy_in"], 150)
        self.assertEqual(body["guarantee"], 2500)
        self.assertEqual(body["levels"], [])

    def test_parse_without_captures(self):
        response = self.client.post("/parse", json={"captures": []})

        self.assertEqual(response.status_code, 400)

    def test_parse_blank_capture(self):
        response = self.client.post("/parse", json={"captures": [[_fragment("  ", 0.1, 0.5)]]})

        self.assertEqual(response.status_code, 422)

    def test_scan_invalid_image(self):
        response = self.client.post(
            "/scan", files=[("files", ("listing.png", b"not an image", "image/png"))]
        )

        self.assertEqual(response.status_code, 400)

    def test_scan_ocr_failure(self):
        self.recognizer.recognize.side_effect = ConnectionError("refused")

        response = self.client.post(
            "/scan", files=[("files", ("listing.png", _png_bytes(), "image/png"))]
        )

        self.assertEqual(response.status_code, 502)

    def test_scan_no_text(self):
        self.recognizer.recognize.return_value = []

        response = self.client.post(
            "/scan", files=[("files", ("listing.png", _png_bytes(), "image/png"))]
        )

        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
