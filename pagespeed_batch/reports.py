# Aggregation and orchestration for the fetch stage (02_fetch_reports.py).
import asyncio, json, sys, time

from .config import DEFAULT_CONCURRENCY, DEFAULT_STRATEGY, RAW_RESPONSE_PATH, REPORTS_PATH
from .dispatcher import dispatch
from .progress import ProgressReporter
from .urls import validate_urls

def collect_records(outcomes):
  return [o.record for o in outcomes if o.ok]

def write_reports(records, path=REPORTS_PATH):
  try:
    with open(path, "w", encoding="utf-8") as f:
      json.dump(records, f, indent=2)
  except (OSError, TypeError, ValueError) as e:
    print(f"[Error] Error writing to {path}: {e}", file=sys.stderr)
    return False
  print(f"[Done] Lighthouse reports written to {path}")
  return True

async def fetch_lighthouse_reports(urls, api_key, concurrency=DEFAULT_CONCURRENCY, out_path=REPORTS_PATH,
                                   raw_path=RAW_RESPONSE_PATH, strategy=DEFAULT_STRATEGY,
                                   session=None, show_progress=True):
  start = time.perf_counter()

  valid = validate_urls(urls)
  progress = ProgressReporter(len(valid), disable=not show_progress)
  try:
    outcomes = await dispatch(valid, api_key, concurrency, progress, raw_path, session, strategy)
  finally:
    progress.stop()

  records = collect_records(outcomes)
  total_ms = (time.perf_counter() - start) * 1000
  print(f"Total time taken: {total_ms} milliseconds")

  write_reports(records, out_path)
  return records

def run_reports(urls, api_key, **kwargs):
  """Outermost boundary: returns the records, or None if the run itself could not proceed."""
  try:
    return asyncio.run(fetch_lighthouse_reports(urls, api_key, **kwargs))
  except Exception as e:
    print(f"[Error] Error in main function: {e}", file=sys.stderr)
    return None
