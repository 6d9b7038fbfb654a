#!/usr/bin/env python3
# Fetch PageSpeed Insights (Lighthouse) reports for a list of URLs, at most --concurrency
# requests in flight. Writes the successful score records to lighthouse_reports.json and the
# raw body of the last response to land to response.json.
import argparse, sys

from pagespeed_batch.config import (load_config, get_api_key, get_setting, DEFAULT_CONCURRENCY,
                                    DEFAULT_STRATEGY, REPORTS_PATH, RAW_RESPONSE_PATH, API_KEY_ENV)
from pagespeed_batch.reports import run_reports
from pagespeed_batch.urls import load_url_file

def main():
  ap = argparse.ArgumentParser()
  ap.add_argument("urls", nargs="*", help="URLs to audit (or use --in)")
  ap.add_argument("--in", dest="in_path", default=None, help="Text file with one URL per line")
  ap.add_argument("--config", default=None, help="config.yaml with pagespeed_api_key and optional settings")
  ap.add_argument("--concurrency", type=int, default=None, help=f"Max in-flight requests (default {DEFAULT_CONCURRENCY})")
  ap.add_argument("--strategy", choices=["mobile", "desktop"], default=None, help=f"PSI strategy (default {DEFAULT_STRATEGY})")
  ap.add_argument("--out-json", default=None, help=f"Aggregate output (default {REPORTS_PATH})")
  ap.add_argument("--raw-json", default=None, help=f"Raw response output (default {RAW_RESPONSE_PATH})")
  ap.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
  args = ap.parse_args()

  cfg = load_config(args.config)
  api_key = get_api_key(cfg)
  if not api_key:
    print(f"[Error] No API key. Set pagespeed_api_key in --config or {API_KEY_ENV}.", file=sys.stderr)
    sys.exit(1)

  urls = list(args.urls)
  if args.in_path:
    urls += load_url_file(args.in_path)
  if not urls:
    print("[Error] No URLs given. Pass URLs as arguments or use --in.", file=sys.stderr)
    sys.exit(1)

  concurrency = int(get_setting(cfg, "concurrency", args.concurrency, DEFAULT_CONCURRENCY))
  print(f"[Fetch] {len(urls)} URLs, concurrency={concurrency}")

  records = run_reports(
    urls, api_key,
    concurrency=concurrency,
    strategy=get_setting(cfg, "strategy", args.strategy, DEFAULT_STRATEGY),
    out_path=get_setting(cfg, "output_json", args.out_json, REPORTS_PATH),
    raw_path=get_setting(cfg, "raw_response_json", args.raw_json, RAW_RESPONSE_PATH),
    show_progress=not args.no_progress,
  )
  if records is None:
    sys.exit(1)
  print(f"[Fetch] {len(records)} reports fetched")

if __name__ == "__main__":
  main()
