"""Verify the structure of a rendered link-directory homepage."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bs4 import BeautifulSoup

DOCTYPE = "<!DOCTYPE html>"


def _card_errors(soup: BeautifulSoup) -> list[str]:
    errors: list[str] = []
    for index, card in enumerate(soup.select("div.ld-link-card-outer"), start=1):
        onclick = card.get("onclick", "")
        if "window.open(" not in onclick:
            errors.append(f"Link card #{index} has no window.open onclick handler")
        if card.select_one("div.ld-link-card-text") is None:
            errors.append(f"Link card #{index} is missing its text")
    return errors


def verify_html(html: str) -> list[str]:
    errors: list[str] = []
    if not html.startswith(DOCTYPE):
        errors.append("Document does not start with the HTML5 doctype")

    soup = BeautifulSoup(html, "html.parser")
    root = soup.find("html")
    if root is None:
        return errors + ["No <html> element found"]
    if not root.get("lang"):
        errors.append("<html> element has no lang attribute")

    title = soup.find("title")
    if title is None or not title.get_text(strip=True):
        errors.append("Document has no title")

    stacks = soup.select("div.ld-link-stack")
    if not stacks:
        errors.append("No link stacks found")
    for stack in stacks:
        header = stack.select_one("div.ld-link-stack-header")
        heading = header.get_text(strip=True) if header else ""
        if not heading:
            errors.append("Link stack without a header")
        if not stack.select("div.ld-link-card-outer"):
            errors.append(f"Link stack '{heading}' has no link cards")

    errors.extend(_card_errors(soup))
    return errors


def verify_page(path: Path) -> list[str]:
    if not path.exists():
        return [f"Rendered page not found: {path}"]
    return verify_html(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a rendered link-directory homepage.")
    parser.add_argument("--page", required=True, help="Rendered HTML file (e.g., generated/index.html)")
    args = parser.parse_args(argv)

    page = Path(args.page)
    errors = verify_page(page)
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1

    print(f"Verified homepage structure at {page}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
