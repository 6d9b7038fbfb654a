import json, os, tempfile, unittest

import pandas as pd

from pagespeed_batch.stats import load_reports, pct, summarize, write_summary

RECORDS = [
  {"url": "https://a.test", "scores": {"Performance": 90, "Accessibility": 80, "BestPractices": 70, "SEO": 60,
                                       "Contrast": "NA", "User_Experience": "NA", "Mobile_Friendly": "NA"}},
  {"url": "https://b.test", "scores": {"Performance": 40, "Accessibility": 100, "BestPractices": 90, "SEO": 100,
                                       "Contrast": "Background and foreground colors do not have a sufficient contrast ratio.",
                                       "User_Experience": "NA", "Mobile_Friendly": "Links do not have descriptive text"}},
  None,
]


class TestStats(unittest.TestCase):

  def setUp(self):
    self.tmp = tempfile.TemporaryDirectory()
    self.path = os.path.join(self.tmp.name, "lighthouse_reports.json")
    with open(self.path, "w", encoding="utf-8") as f:
      json.dump(RECORDS, f)

  def tearDown(self):
    self.tmp.cleanup()

  def test_load_reports_flattens_and_skips_nulls(self):
    df = load_reports(self.path)
    self.assertEqual(len(df), 2)
    self.assertEqual(list(df["url"]), ["https://a.test", "https://b.test"])
    self.assertEqual(df.loc[1, "Performance"], 40)

  def test_summarize(self):
    m = summarize(load_reports(self.path))
    self.assertEqual(m["num_sites"], 2)
    self.assertEqual(m["Performance_mean"], 65.0)
    self.assertEqual(m["Performance_min"], 40.0)
    self.assertEqual(m["SEO_median"], 80.0)
    self.assertEqual(m["pct_contrast_issues"], 50.0)
    self.assertEqual(m["pct_user_experience_issues"], 0.0)
    self.assertEqual(m["pct_mobile_friendly_issues"], 50.0)
    self.assertEqual(m["pct_performance_below_50"], 50.0)

  def test_summarize_empty(self):
    with open(self.path, "w", encoding="utf-8") as f:
      json.dump([], f)
    m = summarize(load_reports(self.path))
    self.assertEqual(m["num_sites"], 0)
    self.assertIsNone(m["Performance_mean"])
    self.assertEqual(m["pct_contrast_issues"], 0.0)

  def test_write_summary(self):
    out_json = os.path.join(self.tmp.name, "summary.json")
    out_csv = os.path.join(self.tmp.name, "summary.csv")
    write_summary({"num_sites": 2, "SEO_mean": 80.0}, out_json, out_csv)
    with open(out_json, encoding="utf-8") as f:
      self.assertEqual(json.load(f), {"num_sites": 2, "SEO_mean": 80.0})
    df = pd.read_csv(out_csv)
    self.assertEqual(list(df["metric"]), ["num_sites", "SEO_mean"])

  def test_pct_handles_zero_denominator(self):
    self.assertEqual(pct(0, 0), 0.0)
    self.assertEqual(pct(1, 3), 33.33)
