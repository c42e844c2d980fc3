import json
import unittest

from app import app as flask_app
from app import state_to_json
from game import Board, state_for_board


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_given_new_game_when_posted_then_returns_idle_state_and_permitted(self):
        r = self._post("/api/new", {})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        state = data["state"]
        self.assertEqual(state["kind"], "idle")
        self.assertEqual(len(state["board"]), 15)
        self.assertFalse(state["board"][0])
        self.assertEqual(state["pickOptions"], [3, 5])
        self.assertIsNone(state["selected"])
        self.assertEqual(state["moveOptions"], [])
        self.assertIsNone(state["remaining"])
        self.assertEqual(data["permitted"], [3, 5])
        self.assertNotIn("message", data)

    def test_given_empty_hole_when_new_game_then_board_opens_there(self):
        r = self._post("/api/new", {"empty": 4})
        self.assertEqual(r.status_code, 200)
        state = r.get_json()["state"]
        self.assertFalse(state["board"][4])
        self.assertEqual(state["pickOptions"], [11, 13])

    def test_given_start_when_activating_single_landing_then_jump_applied(self):
        start = self._post("/api/new", {}).get_json()["state"]
        r = self._post("/api/activate", {"state": start, "index": 3})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        state = data["state"]
        self.assertEqual(state["kind"], "idle")
        self.assertTrue(state["board"][0])
        self.assertFalse(state["board"][1])
        self.assertFalse(state["board"][3])
        self.assertEqual(state["pickOptions"], [5, 8, 10, 12])

    def test_given_two_landings_when_picking_then_deselect_round_trips(self):
        idle = state_to_json(state_for_board(Board.with_empty(0, 5)))
        r = self._post("/api/activate", {"state": idle, "index": 3})
        self.assertEqual(r.status_code, 200)
        picked = r.get_json()["state"]
        self.assertEqual(picked["kind"], "picked")
        self.assertEqual(picked["selected"], 3)
        self.assertEqual(picked["moveOptions"], [0, 5])
        self.assertEqual(r.get_json()["permitted"], [0, 3, 5])

        r2 = self._post("/api/activate", {"state": picked, "index": 3})
        self.assertEqual(r2.status_code, 200)
        self.assertEqual(r2.get_json()["state"], idle)

        r3 = self._post("/api/activate", {"state": picked, "index": 0})
        self.assertEqual(r3.status_code, 200)
        self.assertEqual(sum(r3.get_json()["state"]["board"]), 12)

    def test_given_last_jump_when_activating_then_done_with_message(self):
        s = state_to_json(state_for_board(Board.from_pegs([0, 1])))
        r = self._post("/api/activate", {"state": s, "index": 0})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["state"]["kind"], "done")
        self.assertEqual(data["state"]["remaining"], 1)
        self.assertEqual(data["permitted"], [])
        self.assertEqual(data["message"], "You are a genius.")

    def test_given_state_when_asking_options_then_permitted_listed(self):
        s = state_to_json(state_for_board(Board.with_empty(0, 5)))
        r = self._post("/api/options", {"state": s})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertIn(3, data["permitted"])
        self.assertEqual(data["permitted"], s["pickOptions"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
