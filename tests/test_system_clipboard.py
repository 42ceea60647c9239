import os
import tempfile
import unittest

from ClipAI.clipboard import system
from ClipAI.clipboard.items import ClipKind

from tests.fakes import FakeImage


class ClassifyTests(unittest.TestCase):
    def test_image_wins_over_text(self):
        content = system.classify(FakeImage(), "also text")
        self.assertIs(content.kind, ClipKind.IMAGE)

    def test_file_list_wins_over_text(self):
        content = system.classify(["/tmp/a.txt", "", "/tmp/b.txt"], "a.txt")
        self.assertIs(content.kind, ClipKind.FILE)
        self.assertEqual(content.paths, ("/tmp/a.txt", "/tmp/b.txt"))

    def test_plain_text(self):
        content = system.classify(None, "hello")
        self.assertIs(content.kind, ClipKind.TEXT)
        self.assertEqual(content.text, "hello")

    def test_empty_clipboard(self):
        self.assertIsNone(system.classify(None, ""))
        self.assertIsNone(system.classify([], ""))


class SystemClipboardTests(unittest.TestCase):
    def setUp(self):
        self.old_grab = system._grab
        self.old_paste = system._paste
        self.grabbed = None
        self.text = ""
        system._grab = lambda: self.grabbed
        system._paste = lambda: self.text

    def tearDown(self):
        system._grab = self.old_grab
        system._paste = self.old_paste

    def test_change_count_moves_only_on_new_content(self):
        clip = system.SystemClipboard()
        base = clip.change_count()
        self.assertEqual(clip.change_count(), base)
        self.text = "one"
        self.assertEqual(clip.change_count(), base + 1)
        self.assertEqual(clip.current().text, "one")
        self.assertEqual(clip.change_count(), base + 1)
        self.text = "two"
        self.assertEqual(clip.change_count(), base + 2)

    def test_recopying_same_text_after_other_content_counts(self):
        clip = system.SystemClipboard()
        self.text = "same"
        first = clip.change_count()
        self.grabbed = ["/tmp/x.txt"]
        clip.change_count()
        self.grabbed = None
        self.assertEqual(clip.change_count(), first + 2)


class ImageFingerprintTests(unittest.TestCase):
    def test_image_fingerprint_samples_pixels(self):
        image = FakeImage(size=(640, 480))
        content = system.classify(image, "")
        self.assertEqual(system.fingerprint(content), system.fingerprint(content))
        self.assertEqual(image.tobytes_calls, 0)

    def test_different_images_fingerprint_differently(self):
        first = system.classify(FakeImage(payload=b"abcdefgh"), "")
        resized = system.classify(FakeImage(payload=b"abcdefgh", size=(8, 8)), "")
        repainted = system.classify(FakeImage(payload=b"zyxwvuts"), "")
        prints = {system.fingerprint(c) for c in (first, resized, repainted)}
        self.assertEqual(len(prints), 3)

    def test_new_image_bumps_change_count(self):
        old_grab, old_paste = system._grab, system._paste
        grabbed = [FakeImage(payload=b"one")]
        system._grab = lambda: grabbed[0]
        system._paste = lambda: ""
        try:
            clip = system.SystemClipboard()
            base = clip.change_count()
            self.assertEqual(clip.change_count(), base)
            grabbed[0] = FakeImage(payload=b"two")
            self.assertEqual(clip.change_count(), base + 1)
        finally:
            system._grab, system._paste = old_grab, old_paste


class TempImageAreaTests(unittest.TestCase):
    def test_write_png_creates_unique_files(self):
        with tempfile.TemporaryDirectory() as td:
            area = system.TempImageArea(os.path.join(td, "images"))
            first = area.write_png(FakeImage())
            second = area.write_png(FakeImage())
            self.assertNotEqual(first, second)
            self.assertTrue(os.path.isfile(first))
            self.assertTrue(first.endswith(".png"))
            self.assertTrue(os.path.basename(first).startswith("image_"))


if __name__ == "__main__":
    unittest.main()
