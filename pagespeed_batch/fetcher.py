# One PageSpeed Insights request per URL: build endpoint -> GET -> extract scores -> save raw body.
import asyncio, json, sys
from urllib.parse import quote

from .config import PAGESPEED_API_URL, CATEGORIES, DEFAULT_STRATEGY, RAW_RESPONSE_PATH

# (output key, category id)
SCORE_FIELDS = [
  ("Performance", "performance"),
  ("Accessibility", "accessibility"),
  ("BestPractices", "best-practices"),
  ("SEO", "seo"),
]

# (output key, audit id, title Lighthouse uses when the audit passes)
AUDIT_FIELDS = [
  ("Contrast", "color-contrast", "Background and foreground colors have a sufficient contrast ratio"),
  ("User_Experience", "font-size", "Document uses legible font sizes"),
  ("Mobile_Friendly", "link-text", "Links have descriptive text"),
]

NA = "NA"

class PageSpeedError(Exception):
  pass

class MalformedResponseError(PageSpeedError):
  """Response is missing lighthouseResult.categories / audits or a required score."""

def encode_component(s):
  # same reserved set as JS encodeURIComponent
  return quote(s, safe="!*'()")

def build_endpoint(url, api_key, strategy=DEFAULT_STRATEGY, categories=CATEGORIES):
  parts = [f"url={encode_component(url)}", f"strategy={strategy}"]
  parts += [f"category={c}" for c in categories]
  parts.append(f"key={api_key}")
  return PAGESPEED_API_URL + "?" + "&".join(parts)

async def request_report(session, endpoint):
  async with session.get(endpoint) as resp:
    resp.raise_for_status()
    return await resp.json(content_type=None)

def audit_title(audits, audit_id, passing_title):
  audit = audits.get(audit_id)
  title = audit.get("title") if isinstance(audit, dict) else None
  if not title or title == passing_title:
    return NA
  return title

def extract_scores(data):
  lr = data.get("lighthouseResult") if isinstance(data, dict) else None
  if not isinstance(lr, dict) or lr.get("categories") is None or lr.get("audits") is None:
    raise MalformedResponseError("Lighthouse report is missing necessary data")
  categories = lr["categories"]
  audits = lr["audits"]

  scores = {}
  for key, cat_id in SCORE_FIELDS:
    cat = categories.get(cat_id)
    if not isinstance(cat, dict) or "score" not in cat:
      raise MalformedResponseError(f"Lighthouse report has no score for category '{cat_id}'")
    score = cat["score"]
    # Lighthouse reports null when it could not score the category (e.g. NO_FCP)
    if score is None:
      score = 0
    if isinstance(score, bool) or not isinstance(score, (int, float)):
      raise MalformedResponseError(f"Lighthouse report has a non-numeric score for category '{cat_id}'")
    scores[key] = score * 100
  for key, audit_id, passing_title in AUDIT_FIELDS:
    scores[key] = audit_title(audits, audit_id, passing_title)
  return scores

def write_json(path, data):
  with open(path, "w", encoding="utf-8") as f:
    json.dump(data, f, indent=2)

def log_error(msg, progress=None):
  if progress is not None:
    progress.write(msg, file=sys.stderr)
  else:
    print(msg, file=sys.stderr)

async def fetch_report(session, url, api_key, progress=None, raw_path=RAW_RESPONSE_PATH, strategy=DEFAULT_STRATEGY):
  """Fetch one report and return {"url", "scores"}, or None after logging the failure."""
  try:
    endpoint = build_endpoint(url, api_key, strategy)
    data = await request_report(session, endpoint)
    scores = extract_scores(data)

    # counted once scores are in hand; a failed raw write below still drops the record
    if progress is not None:
      progress.increment()

    # shared path: concurrent fetches overwrite each other, last write wins
    await asyncio.to_thread(write_json, raw_path, data)
    return {"url": url, "scores": scores}
  except Exception as e:
    log_error(f"[Error] Error fetching Lighthouse report for {url}: {e}", progress)
    return None
