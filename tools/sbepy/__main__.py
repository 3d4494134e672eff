"""
CLI entry point for sbepy (message constants generator).

Usage:
    python3 -m tools.sbepy schemas/tradeCapture.yaml --outdir gen/
"""

import argparse
import logging
import os
import sys

from .emitter import emit_constants_module
from .naming import format_module_name
from .schema import ValidationError, parse_message_yaml
from .types import python_endian_code

log = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Python constants generator for binary-encoding messages"
    )
    parser.add_argument("yaml", help="Input message .yaml file")
    parser.add_argument("--outdir", required=True, help="Output directory")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print debug detail")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(args.yaml) as f:
        yaml_str = f.read()

    try:
        desc = parse_message_yaml(yaml_str)
        code = emit_constants_module(desc)
    except (ValidationError, ValueError) as e:
        print(f"Error: {args.yaml}: {e}", file=sys.stderr)
        sys.exit(1)

    log.debug("message %s: %d fields, byte order %s",
              desc.name, len(desc.fields), python_endian_code(desc.byte_order))

    os.makedirs(args.outdir, exist_ok=True)

    filename = f"{format_module_name(desc.name)}.py"
    path = os.path.join(args.outdir, filename)
    with open(path, "w") as f:
        f.write(code)

    print(f"  wrote {path}")
    print(f"\nGenerated {filename} for message '{desc.name}'")


if __name__ == "__main__":
    main()
