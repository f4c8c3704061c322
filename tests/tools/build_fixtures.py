#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the fixture tree used by the datauri
test-suite.

Idempotent and 100 % Python.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()
FIX = ROOT  # alias used by the tests

# Smallest valid 1x1 images; the tail bytes include CR/LF and NUL on purpose.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000"
    "000049454e44ae426082"
)
GIF_BYTES = bytes.fromhex(
    "47494638396101000100800000000000ffffff21f90401000000002c"
    "00000000010001000002024401003b"
)
JPEG_BYTES = bytes.fromhex("ffd8ffe000104a46494600010100000100010000ffd9")


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


# ───────────────────── images ─────────────────────
def _populate_images() -> None:
    img = ROOT / "img"
    _write_bytes(img / "photo.png", PNG_BYTES)
    _write_bytes(img / "icon.gif", GIF_BYTES)
    _write_bytes(img / "shot.jpg", JPEG_BYTES)
    _write_bytes(img / "shot.jpeg", JPEG_BYTES)
    _write_bytes(img / "LOUD.PNG", PNG_BYTES)


# ───────────────────── text ─────────────────────
def _populate_text() -> None:
    web = ROOT / "web"
    _write(web / "page.html", """
        <!doctype html>
        <html><body><p>héllo</p></body></html>
    """)
    _write(web / "page.htm", "<p>legacy</p>\n")
    _write(web / "page.txt", "plain text\n")
    _write(web / "style.css", "body { color: #333; }\n")
    _write(web / "app.js", "console.log('ready');\n")
    _write(web / "feed.xml", "<?xml version=\"1.0\"?><feed/>\n")
    _write(web / "doc.xhtml", "<html xmlns=\"http://www.w3.org/1999/xhtml\"/>\n")
    _write_bytes(web / "crlf.txt", b"line one\r\nline two\r\n\x00end")
    _write_bytes(web / "empty.txt", b"")


# ───────────────────── unresolvable names ─────────────────────
def _populate_unknown() -> None:
    misc = ROOT / "misc"
    _write_bytes(misc / "notes.dat", b"\x01\x02\x03")
    _write_bytes(misc / "README", b"no extension\n")
    _write_bytes(misc / "trailing.", b"trailing dot\n")


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"⚙️  Rebuilding fixture tree → {ROOT}")
    _populate_images()
    _populate_text()
    _populate_unknown()
    print("✅  Fixture tree READY")


if __name__ == "__main__":  # pragma: no cover
    main()
