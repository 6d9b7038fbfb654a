#!/usr/bin/env python3
import argparse, json

from pagespeed_batch.stats import load_reports, summarize, write_summary

def main():
  ap = argparse.ArgumentParser()
  ap.add_argument("--in", dest="in_path", required=True, help="lighthouse_reports.json from 02_fetch_reports.py")
  ap.add_argument("--out-json", required=True)
  ap.add_argument("--out-csv", required=True)
  args = ap.parse_args()

  df = load_reports(args.in_path)
  metrics = summarize(df)
  write_summary(metrics, args.out_json, args.out_csv)

  print("=== Summary ===")
  print(json.dumps(metrics, indent=2))

if __name__ == "__main__":
  main()
