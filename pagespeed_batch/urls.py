# URL input handling: validation for the fetch stage, plus loaders used by 01_collect_urls.py.
import csv, sys
from bs4 import BeautifulSoup

SITEMAP_TIMEOUT = 20
MAX_SITEMAP_DEPTH = 3

def validate_urls(urls):
  """Keep absolute http(s) URLs, in input order. Anything else is dropped silently."""
  return [u for u in urls if isinstance(u, str) and (u.startswith("http://") or u.startswith("https://"))]

def load_url_file(path):
  out = []
  with open(path, "r", encoding="utf-8-sig") as f:
    for line in f:
      line = line.strip()
      if not line or line.startswith("#"):
        continue
      out.append(line)
  return out

def load_url_csv(path, column="website"):
  out = []
  with open(path, "r", encoding="utf-8-sig") as f:
    for r in csv.DictReader(f):
      v = (r.get(column) or "").strip()
      if v:
        out.append(v)
  return out

def parse_sitemap(xml_text):
  """Return (page_urls, child_sitemap_urls) from a urlset or sitemapindex document."""
  soup = BeautifulSoup(xml_text, "html.parser")
  if soup.find("sitemapindex"):
    return [], [loc.get_text(strip=True) for loc in soup.find_all("loc")]
  return [loc.get_text(strip=True) for loc in soup.find_all("loc")], []

def collect_sitemap_urls(session, sitemap_url, limit=None, max_depth=MAX_SITEMAP_DEPTH, _depth=0, _seen=None):
  seen = _seen if _seen is not None else {}
  if _depth >= max_depth:
    print(f"[Sitemap] Max depth {max_depth} reached at {sitemap_url}; skipping", file=sys.stderr)
    return list(seen)

  r = session.get(sitemap_url, timeout=SITEMAP_TIMEOUT)
  r.raise_for_status()
  pages, children = parse_sitemap(r.text)

  for u in pages:
    if limit is not None and len(seen) >= limit:
      return list(seen)
    # dict keeps first-seen order
    seen.setdefault(u, None)

  for child in children:
    if limit is not None and len(seen) >= limit:
      break
    try:
      collect_sitemap_urls(session, child, limit, max_depth, _depth + 1, seen)
    except Exception as e:
      print(f"[Sitemap] Failed to read {child}: {e}", file=sys.stderr)
  return list(seen)
