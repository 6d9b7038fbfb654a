# Settings for the PageSpeed batch scripts: constants plus config.yaml / env loading.
import os

PAGESPEED_API_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
CATEGORIES = ["performance", "accessibility", "best-practices", "seo"]
DEFAULT_STRATEGY = "mobile"
DEFAULT_CONCURRENCY = 30

RAW_RESPONSE_PATH = "response.json"
REPORTS_PATH = "lighthouse_reports.json"

API_KEY_ENV = "PAGESPEED_API_KEY"

def load_config(path):
  import yaml
  if not path:
    return {}
  with open(path, "r", encoding="utf-8") as f:
    return yaml.safe_load(f) or {}

def get_api_key(cfg):
  """Config file first, then the PAGESPEED_API_KEY environment variable."""
  return (cfg.get("pagespeed_api_key") or os.environ.get(API_KEY_ENV) or "").strip()

def get_setting(cfg, key, cli_value=None, default=None):
  # CLI flag > config.yaml > built-in default
  if cli_value is not None:
    return cli_value
  value = cfg.get(key)
  return default if value is None else value
