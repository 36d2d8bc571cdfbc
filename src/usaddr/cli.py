"""Command-line interface for the U.S. address parser."""

import argparse
import json
import logging
import sys

from usaddr import __version__


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Parse U.S. addresses into labeled components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse single address
  usaddr "123 Main St., Springfield, IL 62704"

  # Parse from file, merging multi-word components
  usaddr --input addresses.txt --output parsed.json --group

  # Measure accuracy on a tagged corpus
  usaddr --evaluate labeled.xml --fuzzy
        """
    )

    parser.add_argument(
        "address",
        nargs="?",
        help="Address to parse (or use --input for file)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Input file with addresses (one per line)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output JSON file"
    )
    parser.add_argument(
        "--model", "-m",
        help="Path to a CRFsuite model (defaults to the bundled model)"
    )
    parser.add_argument(
        "--group", "-g",
        action="store_true",
        help="Merge adjacent tokens with the same label"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["json", "table", "simple"],
        default="json",
        help="Output format (default: json)"
    )
    parser.add_argument(
        "--evaluate", "-e",
        metavar="XML",
        help="Evaluate against a tagged address corpus instead of parsing"
    )
    parser.add_argument(
        "--fuzzy",
        action="store_true",
        help="Collapse label variants when evaluating"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"usaddr {__version__}"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Import here to avoid slow startup
    from usaddr import AddressParser, InitializationError, ResultMarshaler
    from usaddr.models import MarshalFormat

    try:
        address_parser = AddressParser.from_pretrained(args.model)
    except InitializationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.evaluate:
        from usaddr.evaluation import evaluate

        report = evaluate(address_parser, args.evaluate, fuzzy=args.fuzzy)
        print(report.summary())
        sys.exit(1 if report.errors else 0)

    # Get addresses to parse
    addresses = []
    if args.input:
        with open(args.input, encoding="utf-8") as f:
            addresses = [line.strip() for line in f if line.strip()]
    elif args.address:
        addresses = [args.address]
    else:
        parser.print_help()
        sys.exit(1)

    results = [address_parser.parse(addr, group=args.group) for addr in addresses]

    # Output
    if args.format == "json":
        marshaler = ResultMarshaler(MarshalFormat.NATIVE_STRUCT)
        json_str = json.dumps(marshaler.marshal_many(results), indent=2, ensure_ascii=False)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(json_str)
            print(f"Saved to {args.output}", file=sys.stderr)
        else:
            print(json_str)

    elif args.format == "table":
        for i, (address, result) in enumerate(zip(addresses, results)):
            print(f"\n{'='*60}")
            print(f"Address {i+1}: {address[:50]}")
            print(f"{'='*60}")
            if not result.is_success:
                print(f"Error: {result.error}")
                continue
            print(f"{'Label':<28} {'Token':<30}")
            print("-" * 60)
            for token, label in result.data:
                print(f"{label:<28} {token:<30}")

    else:  # simple
        for result in results:
            if not result.is_success:
                print(f"Error: {result.error}")
            elif result.data:
                print(" | ".join(f"{label}: {token}" for token, label in result.data))
            else:
                print("No tokens found")

    if any(not result.is_success for result in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
