import sys
from tqdm import tqdm

BAR_FORMAT = "Progress [{bar}] {percentage:3.0f}% | ETA: {remaining} | {n_fmt}/{total_fmt}"

class ProgressReporter:
  """Counter bound to a known total, rendered as a single tqdm line on stderr."""

  def __init__(self, total, file=None, disable=False):
    self.total = total
    # tqdm leaves n untouched when disabled, so count here
    self.count = 0
    self._bar = tqdm(total=total, bar_format=BAR_FORMAT, ascii=" #", file=file or sys.stderr, disable=disable)

  def increment(self):
    self.count += 1
    self._bar.update(1)

  def write(self, msg, file=None):
    # print above the bar without tearing it
    tqdm.write(msg, file=file or sys.stderr)

  def stop(self):
    self._bar.close()
