import io, unittest

from pagespeed_batch.progress import ProgressReporter


class TestProgressReporter(unittest.TestCase):

  def test_renders_counts(self):
    buf = io.StringIO()
    p = ProgressReporter(4, file=buf)
    p.increment()
    p.increment()
    p.stop()
    self.assertEqual(p.count, 2)
    out = buf.getvalue()
    self.assertIn("Progress [", out)
    self.assertIn("2/4", out)
    self.assertIn("ETA:", out)

  def test_disabled_still_counts(self):
    p = ProgressReporter(3, disable=True)
    p.increment()
    p.stop()
    self.assertEqual(p.count, 1)

  def test_write_goes_to_given_stream(self):
    p = ProgressReporter(1, disable=True)
    buf = io.StringIO()
    p.write("[Error] boom", file=buf)
    p.stop()
    self.assertIn("[Error] boom", buf.getvalue())
