import os
import unittest

from ClipAI.clipboard.items import ClipKind, text_item
from ClipAI.clipboard.stores import ClipStores, FavoritesStore, HistoryStore, WorkingSet

from tests.fakes import isolated_dirs


class ClipStoresTests(unittest.TestCase):
    def setUp(self):
        _root, self.data_dir, _images = isolated_dirs(self)
        self.stores = ClipStores(base_dir=self.data_dir, history_limit=100)
        self.stores.load_all()

    def test_history_skips_duplicate_text(self):
        first = self.stores.history.add_text("hello")
        self.assertIsNotNone(first)
        self.assertIsNone(self.stores.history.add_text("hello"))
        self.assertEqual(len(self.stores.history), 1)
        self.assertEqual(self.stores.history.items[0].id, first.id)

    def test_history_is_newest_first_and_capped(self):
        for i in range(101):
            self.stores.history.add_text(f"clip {i}")
        items = self.stores.history.items
        self.assertEqual(len(items), 100)
        self.assertEqual(items[0].content, "clip 100")
        self.assertEqual(items[-1].content, "clip 1")
        self.assertFalse(self.stores.history.contains_text("clip 0"))

    def test_history_ignores_empty_text(self):
        self.assertIsNone(self.stores.history.add_text(""))
        self.assertEqual(len(self.stores.history), 0)

    def test_toggle_favorite_closure_and_revert(self):
        entry = self.stores.history.add_text("x")
        self.stores.history.add_text("y")

        self.assertTrue(self.stores.toggle_favorite(entry))
        favs = [f for f in self.stores.favorites if f.key == (ClipKind.TEXT.value, "x")]
        self.assertEqual(len(favs), 1)
        self.assertTrue(favs[0].is_favorite)
        for item in self.stores.history:
            self.assertEqual(item.is_favorite, item.content == "x")

        self.assertFalse(self.stores.toggle_favorite(entry))
        self.assertEqual(len(self.stores.favorites), 0)
        self.assertFalse(any(i.is_favorite for i in self.stores.history))

    def test_favorite_is_keyed_by_content_not_id(self):
        other = text_item("recaptured")
        self.stores.toggle_favorite(other)
        added = self.stores.history.add_text("recaptured")
        self.assertTrue(added.is_favorite)

    def test_toggle_favorite_never_touches_working_set(self):
        self.stores.working_set.add_text("x")
        entry = self.stores.history.add_text("x")
        self.stores.toggle_favorite(entry)
        self.assertEqual(len(self.stores.working_set), 1)
        self.assertFalse(self.stores.working_set.items[0].is_favorite)

    def test_sync_does_not_mutate_favorites(self):
        self.stores.toggle_favorite(text_item("kept"))
        self.stores.history.clear()
        self.stores.sync_favorites()
        self.assertEqual([f.content for f in self.stores.favorites], ["kept"])

    def test_favorites_insert_at_head(self):
        self.stores.toggle_favorite(text_item("a"))
        self.stores.toggle_favorite(text_item("b"))
        self.assertEqual([f.content for f in self.stores.favorites], ["b", "a"])

    def test_remove_favorite_by_id_resyncs_history(self):
        entry = self.stores.history.add_text("z")
        self.stores.toggle_favorite(entry)
        fav_id = self.stores.favorites.items[0].id
        self.assertTrue(self.stores.remove_favorite(fav_id))
        self.assertFalse(self.stores.history.items[0].is_favorite)

    def test_working_set_dedups_text_only(self):
        ws = self.stores.working_set
        self.assertIsNotNone(ws.add_text("same"))
        self.assertIsNone(ws.add_text("same"))
        ws.add_image("/tmp/a.png")
        ws.add_image("/tmp/a.png")
        ws.add_file("/tmp/f.txt")
        ws.add_file("/tmp/f.txt")
        self.assertEqual(len(ws), 5)
        self.assertEqual(len(ws.image_items()), 2)

    def test_working_set_appends_in_order(self):
        ws = self.stores.working_set
        ws.add_text("one")
        ws.add_text("two")
        self.assertEqual([i.content for i in ws], ["one", "two"])

    def test_remove_and_clear(self):
        a = self.stores.history.add_text("a")
        self.stores.history.add_text("b")
        self.assertTrue(self.stores.history.remove(a.id))
        self.assertFalse(self.stores.history.remove(a.id))
        self.assertEqual([i.content for i in self.stores.history], ["b"])
        self.stores.history.clear()
        self.assertEqual(len(self.stores.history), 0)

    def test_subscribers_receive_change_events(self):
        events = []
        self.stores.subscribe(lambda store, action, item: events.append((store, action)))
        self.stores.history.add_text("e")
        self.stores.working_set.add_text("e")
        self.stores.working_set.clear()
        self.assertIn(("history", "added"), events)
        self.assertIn(("working_set", "added"), events)
        self.assertIn(("working_set", "cleared"), events)

    def test_failing_subscriber_does_not_break_store(self):
        def _boom(store, action, item):
            raise RuntimeError("ui gone")

        self.stores.history.subscribe(_boom)
        self.assertIsNotNone(self.stores.history.add_text("still stored"))
        self.assertEqual(len(self.stores.history), 1)

    def test_items_view_is_read_only(self):
        self.stores.history.add_text("v")
        view = self.stores.history.items
        self.assertIsInstance(view, tuple)

    def test_passed_in_empty_stores_are_kept(self):
        other_dir = os.path.join(self.data_dir, "elsewhere")
        history = HistoryStore(base_dir=other_dir, limit=5)
        favorites = FavoritesStore(base_dir=other_dir)
        working_set = WorkingSet(base_dir=other_dir)
        stores = ClipStores(history=history, favorites=favorites, working_set=working_set)
        self.assertIs(stores.history, history)
        self.assertIs(stores.favorites, favorites)
        self.assertIs(stores.working_set, working_set)
        self.assertIs(history.favorites, favorites)

        stores.working_set.add_text("kept local")
        self.assertTrue(os.path.isfile(os.path.join(other_dir, "working_set.json")))


if __name__ == "__main__":
    unittest.main()
