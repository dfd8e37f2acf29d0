import unittest

from optionalpy import Optional, Failure


class TestFailure(unittest.TestCase):
    def test_failure_keeps_error_value(self):
        err = ("lookup", 42)
        f = Failure(err)
        self.assertIs(f.error, err)
        self.assertEqual(f.annotations, [])
        self.assertIsInstance(f, Exception)

    def test_annotate_and_render(self):
        f = Failure("missing user").annotate("user_id=7").annotate("op=load")
        self.assertEqual(f.annotations, ["user_id=7", "op=load"])
        rendered = f.render()
        self.assertIn("@ user_id=7", rendered)
        self.assertIn("@ op=load", rendered)
        self.assertTrue(rendered.rstrip().endswith("Fail('missing user')"))

    def test_annotations_copied(self):
        notes = ["a"]
        f = Failure("e", notes)
        f.annotate("b")
        self.assertEqual(notes, ["a"])

    def test_raised_from_or_throw_can_be_annotated(self):
        try:
            Optional.of(None).or_throw(lambda: "no config")
        except Failure as f:
            f.annotate("path=/etc/app.toml")
            self.assertEqual(f.error, "no config")
            self.assertIn("@ path=/etc/app.toml", f.render())
        else:
            self.fail("or_throw should raise on empty")
