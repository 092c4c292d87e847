from .custom_button import normalize_custom_button
from .page import normalize_page

def normalize_render(outcome, buttons=()):
    """
    Render outcome for the client.

    Buttons are only present for page outcomes; each one is either an
    in-app link (internal) or an anchor honouring openInNewTab.
    """
    data = {
        "kind": outcome.kind,
        "path": outcome.path,
        "found": outcome.found,
    }

    if outcome.page is not None:
        data["page"] = normalize_page(outcome.page)
        data["buttons"] = [normalize_custom_button(b) for b in buttons]

    if outcome.url is not None:
        data["url"] = outcome.url

    return data
