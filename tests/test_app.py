import json
import unittest

from app import app as flask_app  # noqa: E402
import app as app_mod             # noqa: E402


def _cell(kind, r, c, tile_id):
    return {"type": kind, "id": tile_id, "position": {"row": r, "col": c}}


def _board_json(rows):
    out = []
    next_id = 0
    for r, row in enumerate(rows):
        cells = []
        for c, kind in enumerate(row):
            if kind is None:
                cells.append(None)
            else:
                cells.append(_cell(kind, r, c, next_id))
                next_id += 1
        out.append(cells)
    return out


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_given_health_when_requested_then_service_reported(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["status"], "healthy")
        self.assertEqual(d["service"], app_mod.SERVICE_NAME)
        self.assertIn("timestamp", d)

    def test_given_new_game_when_started_then_full_board_and_config(self):
        r = self._post("/api/game/start", {"difficulty": "medium", "seed": 123})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        game = d["game"]
        self.assertEqual(game["config"], {"size": 8, "tileTypes": 12, "difficulty": "medium"})
        self.assertEqual(game["moves"], 0)
        self.assertEqual(len(game["board"]), 8)
        self.assertTrue(all(len(row) == 8 and all(cell is not None for cell in row) for row in game["board"]))

        again = self._post("/api/game/start", {"difficulty": "medium", "seed": 123}).get_json()
        self.assertEqual(again["game"]["board"], game["board"])

    def test_given_unknown_or_missing_difficulty_when_started_then_easy_preset(self):
        d = self._post("/api/game/start", {"difficulty": "nightmare"}).get_json()
        self.assertEqual(d["game"]["config"]["difficulty"], "easy")
        d2 = self._post("/api/game/start", {}).get_json()
        self.assertEqual(d2["game"]["config"]["size"], 6)

    def test_given_bad_seed_when_started_then_400(self):
        r = self._post("/api/game/start", {"seed": "abc"})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_connectable_pair_when_validated_then_path_and_new_board(self):
        board = _board_json([
            [1, None, 1],
            [2, 3, 2],
            [3, 4, 4],
        ])
        r = self._post("/api/game/validate", {"board": board, "start": {"row": 0, "col": 0}, "end": {"row": 0, "col": 2}})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["valid"])
        self.assertEqual(d["path"], [{"row": 0, "col": 0}, {"row": 0, "col": 2}])
        self.assertIsNone(d["newBoard"][0][0])
        self.assertIsNone(d["newBoard"][0][2])
        self.assertFalse(d["completed"])

    def test_given_last_pair_when_validated_then_completed(self):
        board = _board_json([
            [1, 1],
            [None, None],
        ])
        d = self._post("/api/game/validate", {"board": board, "start": [0, 0], "end": [0, 1]}).get_json()
        self.assertTrue(d["valid"])
        self.assertTrue(d["completed"])
        self.assertEqual(d["newBoard"], [[None, None], [None, None]])

    def test_given_unconnectable_pair_when_validated_then_invalid_without_board(self):
        board = _board_json([
            [1, 2],
            [2, 1],
        ])
        d = self._post("/api/game/validate", {"board": board, "start": [0, 0], "end": [1, 1]}).get_json()
        self.assertTrue(d["ok"])
        self.assertFalse(d["valid"])
        self.assertIsNone(d["path"])
        self.assertNotIn("newBoard", d)

    def test_given_missing_or_malformed_fields_when_validated_then_400(self):
        r = self._post("/api/game/validate", {"start": [0, 0], "end": [0, 1]})
        self.assertEqual(r.status_code, 400)
        r2 = self._post("/api/game/validate", {"board": [[1, 2], [3]], "start": [0, 0], "end": [0, 1]})
        self.assertEqual(r2.status_code, 400)
        r3 = self._post("/api/game/validate", {"board": _board_json([[1, 1]]), "start": "a", "end": [0, 1]})
        self.assertEqual(r3.status_code, 400)
        self.assertFalse(r3.get_json()["ok"])

    def test_given_board_when_hint_requested_then_first_connectable_pair(self):
        board = _board_json([
            [1, 2],
            [2, 1],
            [3, 3],
        ])
        d = self._post("/api/game/hint", {"board": board}).get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(d["move"], [{"row": 2, "col": 0}, {"row": 2, "col": 1}])

        stuck = self._post("/api/game/hint", {"board": _board_json([[1, 2], [2, 1]])}).get_json()
        self.assertIsNone(stuck["move"])

    def test_given_plausible_result_when_submitted_then_scored(self):
        payload = {"timeSeconds": 60, "moves": 18, "boardSize": 6, "difficulty": "easy", "completed": True}
        r = self._post("/api/game/submit", payload)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["score"], 600)

    def test_given_incomplete_game_when_submitted_then_zero_score(self):
        payload = {"timeSeconds": 60, "moves": 3, "boardSize": 6, "difficulty": "easy", "completed": False}
        d = self._post("/api/game/submit", payload).get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(d["score"], 0)

    def test_given_implausible_result_when_submitted_then_400(self):
        for payload in (
            {"timeSeconds": 2, "moves": 18, "boardSize": 6, "difficulty": "easy", "completed": True},
            {"timeSeconds": 60, "moves": 500, "boardSize": 6, "difficulty": "easy", "completed": True},
            {"timeSeconds": 60, "moves": 18, "boardSize": 6, "difficulty": "nightmare", "completed": True},
            {"timeSeconds": 60, "moves": 18, "boardSize": 8, "difficulty": "easy", "completed": True},
        ):
            r = self._post("/api/game/submit", payload)
            self.assertEqual(r.status_code, 400, payload)
            self.assertIn("validation", r.get_json()["error"])

    def test_given_mistyped_or_out_of_range_fields_when_submitted_then_400(self):
        for payload in (
            {"timeSeconds": "60", "moves": 18, "boardSize": 6, "difficulty": "easy", "completed": True},
            {"timeSeconds": 60, "moves": 18, "boardSize": 6, "difficulty": "easy", "completed": "yes"},
            {"timeSeconds": 60, "moves": 18, "boardSize": 3, "difficulty": "easy", "completed": True},
            {"timeSeconds": -1, "moves": 18, "boardSize": 6, "difficulty": "easy", "completed": True},
        ):
            r = self._post("/api/game/submit", payload)
            self.assertEqual(r.status_code, 400, payload)
        r = self.client.post("/api/game/submit", data="not json", content_type="application/json")
        self.assertEqual(r.status_code, 400)


if __name__ == "__main__":
    unittest.main(verbosity=2)
