# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from carely.kv import MemoryStore, SQLiteStore, create_store
from carely.meditation.storage import export_filename
from carely.plans.generator import format_ai_text
from carely.plans.storage import PlanHistoryRepository, plan_title
from carely.profile.storage import ProfileRepository


class _StoreContract:
    store = None

    def test_get_default_and_roundtrip(self) -> None:
        self.assertIsNone(self.store.get("missing"))
        self.assertEqual(self.store.get("missing", []), [])

        self.store.set("k", {"name": "Ana", "goals": ["Better Sleep"]})
        self.assertEqual(self.store.get("k"), {"name": "Ana", "goals": ["Better Sleep"]})

    def test_returned_values_are_copies(self) -> None:
        self.store.set("k", [1, 2])
        value = self.store.get("k")
        value.append(3)
        self.assertEqual(self.store.get("k"), [1, 2])

    def test_update_and_delete(self) -> None:
        self.store.update("log", lambda items: items + ["a"], [])
        stored = self.store.update("log", lambda items: items + ["b"], [])
        self.assertEqual(stored, ["a", "b"])
        self.assertEqual(self.store.get("log"), ["a", "b"])

        self.store.delete("log")
        self.store.delete("log")
        self.assertIsNone(self.store.get("log"))


class TestMemoryStore(_StoreContract, unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()


class TestSQLiteStore(_StoreContract, unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="carely-kv-"))
        self.store = SQLiteStore(self._tmp / "nested" / "kv.db")

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_values_survive_a_new_instance(self) -> None:
        self.store.set("k", {"v": 1})
        reopened = SQLiteStore(self.store.db_path)
        self.assertEqual(reopened.get("k"), {"v": 1})


class TestCreateStore(unittest.TestCase):
    def test_backends(self) -> None:
        self.assertIsInstance(create_store("memory"), MemoryStore)
        with self.assertRaises(ValueError):
            create_store("sqlite")
        with self.assertRaises(ValueError):
            create_store("redis")


class TestRepositories(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()

    def test_profile_keeps_created_at(self) -> None:
        repo = ProfileRepository(self.store, "c1")
        self.assertIsNone(repo.get())
        first = repo.save({"age": 30})
        second = repo.save({"age": 31})
        self.assertEqual(second["createdAt"], first["createdAt"])
        self.assertEqual(repo.get()["age"], 31)
        self.assertIsNone(ProfileRepository(self.store, "c2").get())

    def test_history_lookup(self) -> None:
        repo = PlanHistoryRepository(self.store, "c1")
        self.assertEqual(repo.list(), [])
        self.assertIsNone(repo.get("nope"))


class TestTextHelpers(unittest.TestCase):
    def test_plan_title(self) -> None:
        self.assertEqual(plan_title(["Weight Loss", "Better Sleep"]), "Your Path to a Lighter You")
        self.assertEqual(plan_title(["Improve Flexibility"]), "Your Flexibility and Mobility Plan")
        self.assertEqual(plan_title(["Run a marathon"]), "Your Personalized Wellness Plan")
        self.assertEqual(plan_title([]), "Your Personalized Wellness Plan")
        self.assertEqual(plan_title(None), "Your Personalized Wellness Plan")
        self.assertEqual(plan_title("Better Sleep"), "Journey to Restful Nights")
        self.assertEqual(plan_title([{"label": "Weight Loss"}]), "Your Personalized Wellness Plan")

    def test_format_ai_text(self) -> None:
        self.assertEqual(format_ai_text("*Exercise*\nWalk daily.\n\n\n\nStretch."), "Walk daily.\n\nStretch.")
        self.assertEqual(format_ai_text("  plain advice  "), "plain advice")
        self.assertEqual(format_ai_text(""), "")

    def test_export_filename(self) -> None:
        self.assertEqual(export_filename("Calm & Quiet Night"), "calm___quiet_night_meditation.txt")


if __name__ == "__main__":
    unittest.main()
