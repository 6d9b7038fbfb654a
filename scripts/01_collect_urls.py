#!/usr/bin/env python3
# Build the URL list for 02_fetch_reports.py from a sitemap (sitemapindex is followed)
# or from one column of a CSV. Writes one URL per line.
import argparse, sys
from pathlib import Path
import requests

from pagespeed_batch.urls import collect_sitemap_urls, load_url_csv, validate_urls

USER_AGENT = "PageSpeedBatch/1.0 (+sitemap collector)"

def main():
  ap = argparse.ArgumentParser()
  src = ap.add_mutually_exclusive_group(required=True)
  src.add_argument("--sitemap", help="sitemap.xml or sitemap index URL")
  src.add_argument("--csv", help="CSV with a column of website URLs")
  ap.add_argument("--column", default="website", help="CSV column holding the URL (default website)")
  ap.add_argument("--limit", type=int, default=None, help="Stop after this many URLs")
  ap.add_argument("--out", required=True, help="Output text file, one URL per line")
  args = ap.parse_args()

  if args.sitemap:
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    try:
      urls = collect_sitemap_urls(session, args.sitemap, limit=args.limit)
    except requests.RequestException as e:
      print(f"[Error] Could not fetch sitemap {args.sitemap}: {e}", file=sys.stderr)
      sys.exit(1)
    print(f"[Sitemap] {args.sitemap}: {len(urls)} URLs")
  else:
    urls = load_url_csv(args.csv, args.column)
    if args.limit is not None:
      urls = urls[:args.limit]
    print(f"[Load] {args.csv}: {len(urls)} rows from column '{args.column}'")

  skipped = len(urls) - len(validate_urls(urls))
  if skipped:
    print(f"[Warning] {skipped} entries are not http(s) URLs and will be skipped by the fetch stage", file=sys.stderr)

  Path(args.out).parent.mkdir(parents=True, exist_ok=True)
  with open(args.out, "w", encoding="utf-8") as f:
    for u in urls:
      f.write(u + "\n")
  print("[Done] Wrote:", args.out)

if __name__ == "__main__":
  main()
