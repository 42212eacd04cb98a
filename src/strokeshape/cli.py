"""
Command-line interface for strokeshape.

Recognizes a stroke stored as JSON and writes out the default configuration.
"""

import argparse
import json
import sys

from strokeshape.config import load_config, save_default_config
from strokeshape.tracer import configure_tracer, get_tracer


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="strokeshape: turn freehand strokes into rectangles, circles and triangles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    recognize_parser = subparsers.add_parser("recognize", help="Classify a stroke JSON file")
    recognize_parser.add_argument(
        "--input", "-i",
        required=True,
        help="Stroke JSON file ({\"points\": [[x, y], ...]} or a bare point list)",
    )
    recognize_parser.add_argument(
        "--style", "-s",
        default=None,
        help="Style tag for the result (overrides the file's style)",
    )
    recognize_parser.add_argument(
        "--out", "-o",
        default=None,
        help="Write the result here instead of stdout",
    )
    recognize_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    recognize_parser.add_argument(
        "--explain",
        action="store_true",
        help="Include every family's candidate and confidence",
    )
    recognize_parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    recognize_parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    recognize_parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    recognize_parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="strokeshape_config.yaml",
        help="Output path for config file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "recognize":
        return handle_recognize(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def handle_recognize(args):
    """Handle the recognize command."""
    tracer = get_tracer()

    try:
        config = load_config(args.config)

        tracing = config.tracing
        configure_tracer(
            enabled=args.trace or tracing.enabled,
            level=args.trace_level if args.trace else tracing.level,
            file_path=args.trace_file or tracing.file_path,
            json_output=args.trace_json or tracing.json_output,
        )

        from strokeshape.io.stroke_files import load_stroke, save_json
        from strokeshape.models import shape_to_dict
        from strokeshape.recognize import classify_candidates, recognize

        with tracer.span("cli_recognize", module="cli"):
            stroke = load_stroke(args.input)
            style = args.style if args.style is not None else stroke.style

            shape = recognize(stroke.points, style=style, config=config)
            result = shape_to_dict(shape)

            if args.explain:
                candidates = classify_candidates(stroke.points, style=style, config=config)
                result = {
                    "shape": result,
                    "candidates": [
                        {
                            "kind": c.kind.value,
                            "confidence": c.confidence,
                            "reason": c.reason,
                        }
                        for c in candidates
                    ],
                }

            if args.out:
                save_json(result, args.out)
                print(f"Result saved to: {args.out}")
            else:
                print(json.dumps(result, indent=2))

        return 0

    except Exception as e:
        tracer.event(f"Recognition failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1

    finally:
        tracer.config.close()


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
