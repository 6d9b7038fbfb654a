# Runs fetch_report over every URL with at most `concurrency` requests in flight.
import asyncio
import aiohttp

from . import fetcher
from .config import DEFAULT_CONCURRENCY, DEFAULT_STRATEGY, RAW_RESPONSE_PATH

class Outcome:
  __slots__ = ("url", "record", "error")

  def __init__(self, url, record=None, error=None):
    self.url = url
    self.record = record
    self.error = error

  @property
  def ok(self) -> bool:
    return self.record is not None

  def __repr__(self):
    return f"Outcome(url={self.url!r}, ok={self.ok}, error={self.error!r})"

async def bounded_fetch(sem, session, url, api_key, progress, raw_path, strategy):
  async with sem:
    record = await fetcher.fetch_report(session, url, api_key, progress, raw_path, strategy)
  return Outcome(url, record, None if record is not None else "fetch failed")

async def _settle(url, task):
  # as_completed hands back the awaitable only, so keep the url alongside
  try:
    return await task
  except Exception as e:
    return Outcome(url, None, f"{type(e).__name__}: {e}")

async def dispatch(urls, api_key, concurrency=DEFAULT_CONCURRENCY, progress=None,
                   raw_path=RAW_RESPONSE_PATH, session=None, strategy=DEFAULT_STRATEGY):
  """Settle every fetch and return Outcomes in completion order."""
  if concurrency < 1:
    raise ValueError(f"concurrency must be >= 1, got {concurrency}")
  sem = asyncio.Semaphore(concurrency)

  async def run(s):
    tasks = [asyncio.ensure_future(_settle(u, bounded_fetch(sem, s, u, api_key, progress, raw_path, strategy)))
             for u in urls]
    outcomes = []
    for done in asyncio.as_completed(tasks):
      outcomes.append(await done)
    return outcomes

  if session is not None:
    return await run(session)
  connector = aiohttp.TCPConnector(limit=concurrency)
  async with aiohttp.ClientSession(connector=connector) as s:
    return await run(s)
