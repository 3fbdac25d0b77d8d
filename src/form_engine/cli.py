"""
Form Engine command line entry point.

Usage:
    # Compute field state
    form-engine state schema.json data.json

    # Finalize a submission with config fallback data
    form-engine submit schema.json data.json --config record.json

    # Select the auto-save payload
    form-engine autosave schema.json data.json

    # Lint a schema
    form-engine lint schema.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from form_engine.config import get_config
from form_engine.guardrails import lint_schema
from form_engine.models.schema import SchemaError, load_schema
from form_engine.orchestrator import compute_form_state
from form_engine.use_cases import handle_auto_save, process_submission


def _read_json(path: str | None) -> dict[str, Any]:
    if path is None:
        return {}
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _run(args: argparse.Namespace) -> Any:
    raw_schema = _read_json(args.schema)
    options = {"isDebug": args.debug}

    if args.command == "lint":
        return [issue.model_dump() for issue in lint_schema(raw_schema)]

    schema = load_schema(raw_schema)

    data = _read_json(args.data)
    if args.command == "state":
        state = compute_form_state(schema, data, _read_json(args.config), options)
        return state.to_dict()
    if args.command == "submit":
        result = process_submission(schema, data, _read_json(args.config), options)
        return result.model_dump()
    return handle_auto_save(schema, data, options).model_dump(by_alias=True)


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Form Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  FORM_ENGINE_DEBUG       Emit diagnostic logging by default (default: false)
  FORM_ENGINE_LOG_LEVEL   Log level for diagnostic output (default: DEBUG)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("state", "Compute field state"),
        ("submit", "Finalize a submission payload"),
        ("autosave", "Select the auto-save payload"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("schema", help="Path to the schema JSON file")
        sub.add_argument("data", help="Path to the form data JSON file")
        if name != "autosave":
            sub.add_argument("--config", default=None, help="Path to config data JSON file")
        sub.add_argument("--debug", action="store_true", default=config.debug)

    lint = subparsers.add_parser("lint", help="Statically check a schema")
    lint.add_argument("schema", help="Path to the schema JSON file")
    lint.add_argument("--debug", action="store_true", default=config.debug)

    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, config.log_level, logging.DEBUG))

    try:
        output = _run(args)
    except (OSError, json.JSONDecodeError, SchemaError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(output, indent=config.indent_json_output))


if __name__ == "__main__":
    main()
