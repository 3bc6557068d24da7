import json
import unittest

from app import app as flask_app  # noqa: E402
from app import state_to_json     # noqa: E402
import app as app_mod             # noqa: E402
from game import NimGame, Player  # noqa: E402


class TestFlaskAPIEdges(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def _new_id(self, **payload):
        r = self._post("/api/new", payload)
        self.assertEqual(r.status_code, 200)
        return r.get_json()["gameId"]

    def test_given_no_body_when_new_then_default_piles_and_human_starts(self):
        r = self.client.post("/api/new")
        self.assertEqual(r.status_code, 200)
        s = r.get_json()["state"]
        self.assertTrue(s["piles"])
        self.assertEqual(s["currentPlayer"], "user")

    def test_given_malformed_config_when_new_then_400(self):
        r = self._post("/api/new", {"piles": "a, b, -1"})
        self.assertEqual(r.status_code, 400)
        d = r.get_json()
        self.assertFalse(d["ok"])
        self.assertIn("pile sizes", d["error"])

        r2 = self._post("/api/new", {"piles": "3", "starter": "robot"})
        self.assertEqual(r2.status_code, 400)

    def test_given_non_list_piles_when_new_then_400(self):
        for piles in (5, True, {"a": 1}):
            r = self._post("/api/new", {"piles": piles})
            self.assertEqual(r.status_code, 400, piles)
            self.assertFalse(r.get_json()["ok"])

        gid = self._new_id(piles="3,4")
        r2 = self._post("/api/restart", {"gameId": gid, "piles": 7})
        self.assertEqual(r2.status_code, 400)

    def test_given_json_list_body_when_posting_then_treated_as_empty(self):
        r = self.client.post("/api/state", data=json.dumps([1, 2]), content_type="application/json")
        self.assertEqual(r.status_code, 404)
        self.assertFalse(r.get_json()["ok"])

        r2 = self.client.post("/api/new", data=json.dumps([1, 2]), content_type="application/json")
        self.assertEqual(r2.status_code, 200)
        self.assertEqual(r2.get_json()["state"]["currentPlayer"], "user")

        r3 = self.client.post("/api/move", data=json.dumps(["x"]), content_type="application/json")
        self.assertEqual(r3.status_code, 400)

    def test_given_previous_game_id_when_new_then_old_game_dropped(self):
        old = self._new_id(piles="3")
        new = self._new_id(piles="4", gameId=old)
        self.assertNotEqual(old, new)
        self.assertEqual(self._post("/api/state", {"gameId": old}).status_code, 404)
        self.assertEqual(self._post("/api/state", {"gameId": new}).status_code, 200)

    def test_given_many_new_games_when_registry_full_then_least_recent_evicted(self):
        orig_max = app_mod.MAX_GAMES
        app_mod.MAX_GAMES = 3
        try:
            first = self._new_id()
            second = self._new_id()
            # Touching the first game makes the second the least recently used
            self.assertEqual(self._post("/api/state", {"gameId": first}).status_code, 200)
            for _ in range(20):
                self._new_id()
            self.assertLessEqual(len(app_mod._GAMES), 3)
            self.assertEqual(self._post("/api/state", {"gameId": second}).status_code, 404)
        finally:
            app_mod.MAX_GAMES = orig_max

    def test_given_illegal_move_when_posted_then_400_and_state_unchanged(self):
        gid = self._new_id(piles="3,4,5")
        r = self._post("/api/move", {"gameId": gid, "pile": 0, "amount": 10})
        self.assertEqual(r.status_code, 400)
        d = r.get_json()
        self.assertFalse(d["ok"])
        self.assertEqual([p["count"] for p in d["state"]["piles"]], [3, 4, 5])
        self.assertEqual(d["state"]["currentPlayer"], "user")

        r2 = self._post("/api/move", {"gameId": gid, "pile": 9, "amount": 1})
        self.assertEqual(r2.status_code, 400)

    def test_given_non_integer_move_when_posted_then_400(self):
        gid = self._new_id()
        r = self._post("/api/move", {"gameId": gid, "pile": "x", "amount": 1})
        self.assertEqual(r.status_code, 400)
        r2 = self._post("/api/move", {"gameId": gid})
        self.assertEqual(r2.status_code, 400)

    def test_given_human_turn_when_ai_called_then_409(self):
        gid = self._new_id()
        r = self._post("/api/ai", {"gameId": gid})
        self.assertEqual(r.status_code, 409)
        self.assertFalse(r.get_json()["ok"])

    def test_given_game_over_when_moves_attempted_then_rejected(self):
        gid = self._new_id(piles="1")
        self._post("/api/move", {"gameId": gid, "pile": 0, "amount": 1})
        r = self._post("/api/ai", {"gameId": gid})
        self.assertEqual(r.status_code, 409)
        r2 = self._post("/api/hint", {"gameId": gid})
        self.assertEqual(r2.status_code, 200)
        self.assertIsNone(r2.get_json()["move"])

    def test_given_unknown_game_when_calling_any_endpoint_then_404(self):
        for path in ("/api/state", "/api/move", "/api/ai", "/api/restart", "/api/hint"):
            r = self._post(path, {"gameId": "nope", "pile": 0, "amount": 1})
            self.assertEqual(r.status_code, 404, path)
            self.assertFalse(r.get_json()["ok"])

    def test_given_bad_restart_config_then_400_and_game_kept(self):
        gid = self._new_id(piles="3,4")
        r = self._post("/api/restart", {"gameId": gid, "piles": "zero"})
        self.assertEqual(r.status_code, 400)
        s = self._post("/api/state", {"gameId": gid}).get_json()["state"]
        self.assertEqual([p["count"] for p in s["piles"]], [3, 4])

    def test_given_finished_engine_when_serialized_then_winner_value(self):
        g = NimGame([0, 2], Player.COMPUTER)
        g.make_ai_move()
        s = state_to_json(g)
        self.assertTrue(s["gameOver"])
        self.assertEqual(s["winner"], "computer")
        self.assertEqual(s["nimSum"], 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
