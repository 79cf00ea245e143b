"""Tests for api.py — FastAPI REST endpoints."""

import io
import unittest

from fastapi.testclient import TestClient
from PIL import Image

from huewheel.api import _controller, app, configure_auth
from huewheel.core.models import Selection


class _ApiTestCase(unittest.TestCase):

    def setUp(self):
        configure_auth(None)
        _controller.selection = Selection()
        self.client = TestClient(app)


class TestHealthEndpoint(_ApiTestCase):
    """GET /health always returns 200."""

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "ok")
        self.assertIn("version", data)


class TestAuthMiddleware(unittest.TestCase):
    """Token auth middleware."""

    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        configure_auth(None)

    def test_no_token_required(self):
        configure_auth(None)
        self.assertEqual(self.client.get("/selection").status_code, 200)

    def test_token_required_rejects_missing(self):
        configure_auth("secret123")
        self.assertEqual(self.client.get("/selection").status_code, 401)

    def test_token_required_rejects_wrong(self):
        configure_auth("secret123")
        resp = self.client.get("/selection", headers={"X-API-Token": "wrong"})
        self.assertEqual(resp.status_code, 401)

    def test_token_required_accepts_correct(self):
        configure_auth("secret123")
        resp = self.client.get("/selection", headers={"X-API-Token": "secret123"})
        self.assertEqual(resp.status_code, 200)

    def test_health_bypasses_auth(self):
        configure_auth("secret123")
        self.assertEqual(self.client.get("/health").status_code, 200)


class TestColorEndpoint(_ApiTestCase):

    def test_defaults_to_red(self):
        data = self.client.get("/color").json()
        self.assertEqual(data["hex"], "#FF0000")
        self.assertEqual(data["rgb"], [255, 0, 0])

    def test_query(self):
        data = self.client.get("/color", params={"hue": 0.5, "brightness": 0.5}).json()
        self.assertEqual(data["hex"], "#008080")

    def test_out_of_range_clamped(self):
        data = self.client.get("/color", params={"hue": 1.25, "saturation": 3}).json()
        self.assertAlmostEqual(data["hue"], 0.25)
        self.assertEqual(data["saturation"], 1.0)


class TestWheelEndpoints(_ApiTestCase):

    def test_wheel_geometry(self):
        data = self.client.get("/wheel").json()
        ring_count = _controller.wheel.ring_count
        segment_count = _controller.wheel.segment_count
        self.assertEqual(len(data), ring_count * segment_count)
        first = data[0]
        self.assertEqual((first["ring"], first["segment"]), (0, 0))
        self.assertEqual(first["outer_radius"], 1.0)
        self.assertEqual(first["hex"], "#FF0000")

    def test_wheel_png(self):
        resp = self.client.get("/wheel.png", params={"size": 64})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "image/png")
        img = Image.open(io.BytesIO(resp.content))
        self.assertEqual(img.size, (64, 64))

    def test_wheel_png_size_bounds(self):
        self.assertEqual(self.client.get("/wheel.png", params={"size": 4}).status_code, 422)
        self.assertEqual(self.client.get("/wheel.png", params={"size": 99999}).status_code, 422)


class TestSelectionEndpoints(_ApiTestCase):

    def test_initial(self):
        data = self.client.get("/selection").json()
        self.assertEqual(data["hue"], 0.0)
        self.assertEqual(data["brightness"], 1.0)
        self.assertEqual(data["hex"], "#FF0000")

    def test_post_selection(self):
        resp = self.client.post("/selection", json={"hue": 2 / 3, "brightness": 1.0})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["hex"], "#0000FF")
        self.assertEqual(self.client.get("/selection").json()["hex"], "#0000FF")

    def test_post_selection_rejects_bad_brightness(self):
        resp = self.client.post("/selection", json={"hue": 0.1, "brightness": 2.0})
        self.assertEqual(resp.status_code, 422)

    def test_select_segment(self):
        resp = self.client.post("/selection/segment", json={"ring": 0, "segment": 0})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["hex"], "#FF0000")

    def test_select_segment_out_of_range(self):
        resp = self.client.post("/selection/segment", json={"ring": 999, "segment": 0})
        self.assertEqual(resp.status_code, 404)

    def test_shift(self):
        self.client.post("/selection", json={"hue": 0.0, "brightness": 0.5})
        data = self.client.post("/selection/shift", json={"degrees": 180}).json()
        self.assertAlmostEqual(data["hue"], 0.5)
        self.assertEqual(data["brightness"], 0.5)

    def test_fine_swatches(self):
        data = self.client.get("/selection/fine").json()
        self.assertEqual(len(data), 9)
        self.assertEqual(data[4]["offset"], 0.0)
        self.assertEqual(data[4]["hex"], "#FF0000")

    def test_harmony_swatches(self):
        data = self.client.get("/selection/harmonies").json()
        self.assertEqual([s["name"] for s in data][:3],
                         ["Complementary", "Triadic +", "Triadic -"])
        self.assertEqual(data[0]["hex"], "#00FFFF")


class TestSelectionResponseOwnership(_ApiTestCase):
    """Responses describe the selection made by that request.

    A callback that replaces the controller state mid-request stands in for
    another request handled on a different worker thread.
    """

    def setUp(self):
        super().setUp()
        _controller.on_selection_changed = self._interleave

    def tearDown(self):
        _controller.on_selection_changed = None

    def _interleave(self, sel):
        _controller.selection = Selection(0.5, 0.3)

    def test_post_selection(self):
        data = self.client.post("/selection", json={"hue": 2 / 3, "brightness": 1.0}).json()
        self.assertEqual(data["hex"], "#0000FF")

    def test_select_segment(self):
        data = self.client.post("/selection/segment", json={"ring": 0, "segment": 0}).json()
        self.assertEqual(data["hex"], "#FF0000")
        self.assertEqual(data["brightness"], 1.0)

    def test_shift(self):
        data = self.client.post("/selection/shift", json={"degrees": 120}).json()
        self.assertEqual(data["hex"], "#00FF00")


if __name__ == '__main__':
    unittest.main()
