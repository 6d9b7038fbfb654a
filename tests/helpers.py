PASSING_CONTRAST = "Background and foreground colors have a sufficient contrast ratio"
PASSING_FONT = "Document uses legible font sizes"
PASSING_LINKS = "Links have descriptive text"

def make_response(performance=0.9, accessibility=0.8, best_practices=0.7, seo=0.6, audits=None):
  if audits is None:
    audits = {"color-contrast": {"title": PASSING_CONTRAST}}
  return {
    "lighthouseResult": {
      "categories": {
        "performance": {"score": performance},
        "accessibility": {"score": accessibility},
        "best-practices": {"score": best_practices},
        "seo": {"score": seo},
      },
      "audits": audits,
    },
  }
