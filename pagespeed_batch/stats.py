import json
import pandas as pd

from .fetcher import SCORE_FIELDS, AUDIT_FIELDS, NA

def pct(n, d):
  return round(100.0*n/max(1,d), 2)

def load_reports(path):
  """Flatten lighthouse_reports.json into one row per URL."""
  with open(path, "r", encoding="utf-8") as f:
    records = json.load(f)
  rows = []
  for r in records:
    if not r:
      continue
    rows.append({"url": r.get("url", ""), **(r.get("scores") or {})})
  cols = ["url"] + [k for k, _ in SCORE_FIELDS] + [k for k, _, _ in AUDIT_FIELDS]
  return pd.DataFrame(rows, columns=cols)

def summarize(df):
  n = len(df)
  metrics = {"num_sites": n}

  for key, _ in SCORE_FIELDS:
    col = pd.to_numeric(df[key], errors="coerce")
    metrics[f"{key}_mean"] = round(float(col.mean()), 2) if n else None
    metrics[f"{key}_median"] = round(float(col.median()), 2) if n else None
    metrics[f"{key}_min"] = float(col.min()) if n else None

  # share of sites where the audit reported a problem title instead of NA
  for key, _, _ in AUDIT_FIELDS:
    flagged = (df[key].fillna(NA) != NA).sum()
    metrics[f"pct_{key.lower()}_issues"] = pct(int(flagged), n)

  perf = pd.to_numeric(df["Performance"], errors="coerce")
  metrics["pct_performance_below_50"] = pct(int((perf < 50).sum()), n)
  return metrics

def write_summary(metrics, out_json, out_csv):
  with open(out_json, "w", encoding="utf-8") as f:
    json.dump(metrics, f, indent=2)
  rows = [{"metric": k, "value": v} for k, v in metrics.items()]
  pd.DataFrame(rows).to_csv(out_csv, index=False)
