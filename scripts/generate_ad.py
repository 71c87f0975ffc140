#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
"""CLI for generating a UGC ad video against a running Ad Studio API.

Ensures project root is on sys.path before importing from the "app" package.
"""

# Ensure project root is on sys.path so 'app' is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.catalog import selection_warnings
from app.presentation.client.api_client import AdStudioApiClient
from app.presentation.client.controller import (
    AdStudioController,
    ViewKind,
    render_catalog,
    render_view,
)


def list_catalog(client: AdStudioApiClient) -> None:
    try:
        catalog = client.fetch_catalog()
    except RuntimeError as e:
        raise SystemExit(str(e)) from e
    print(render_catalog(catalog))


def resolve_script(args: argparse.Namespace, client: AdStudioApiClient) -> str:
    if args.script_file:
        return Path(args.script_file).read_text(encoding="utf-8")
    if args.product:
        reply = client.generate_script(args.product)
        if not reply.ok:
            raise SystemExit(f"Script generation failed: {reply.text}")
        script = reply.json()["script"]
        print(f"Generated script:\n{script}\n")
        return script
    return args.script or ""


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a talking-avatar UGC ad video and print its URL",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--script", help="Ad script text")
    source.add_argument("--script-file", help="Path to a file holding the ad script")
    source.add_argument(
        "--product", help="Draft the script from a product name first"
    )
    parser.add_argument(
        "--avatar", help="Avatar asset path, e.g. /avatars/female/female1.png"
    )
    parser.add_argument("--voice", help="Voice id, e.g. en-US-GuyNeural")
    parser.add_argument("--api-url", help="Base URL of the Ad Studio API")
    parser.add_argument(
        "--list", action="store_true", help="List avatars and voices, then exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    client = AdStudioApiClient(args.api_url)
    if args.list:
        list_catalog(client)
        return

    for warning in selection_warnings(args.avatar, args.voice):
        print(f"Warning: {warning}", file=sys.stderr)

    controller = AdStudioController(client, voice_id=args.voice)
    controller.set_script(resolve_script(args, client))
    controller.select_avatar(args.avatar)

    print("Generating...", flush=True)
    view = controller.generate_video()
    print(render_view(view))
    if view.kind is ViewKind.RESULT and view.result is not None and args.verbose:
        print(json.dumps(view.result.raw_payload, indent=2))
    if view.kind is ViewKind.ERROR:
        sys.exit(1)


if __name__ == "__main__":
    main()
