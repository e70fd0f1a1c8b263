"""Web search plugin entry point, run by the Python plugin host."""

from urllib.parse import quote_plus

ENGINES = {
    "duckduckgo": "https://duckduckgo.com/?q={}",
    "google": "https://www.google.com/search?q={}",
}


def query(search: str, settings: dict) -> list:
    url = ENGINES.get(settings.get("engine", ""), ENGINES["duckduckgo"]).format(quote_plus(search))
    return [{"title": f"Search for {search}", "subTitle": url, "url": url}]
