"""Command-line entrypoint for pratyāhāra queries."""

import argparse
import logging
import sys
from typing import List, Optional

from pratyahara.embedder.group_embedder import GroupEmbedder
from pratyahara.registry.membership import find_groups_containing, membership
from pratyahara.registry.named_groups import REGISTRY
from pratyahara.sivasutra.alphabet import SIVASUTRA_BLOCKS
from pratyahara.sivasutra.classifier import classify
from pratyahara.sivasutra.constructor import construct
from pratyahara.util.examples import get_pratyahara_examples
from pratyahara.util.normalization import normalize_iast


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for pratyāhāra queries."""
    parser = argparse.ArgumentParser(
        description="Construct and query pratyāhāras from the Śivasūtras."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("construct", help="Build the group from START up to MARKER.")
    p.add_argument("start", help="Start phoneme (IAST), e.g. 'a'.")
    p.add_argument("marker", help="Marker letter (IAST), e.g. 'c'.")

    p = sub.add_parser("group", help="Show a named pratyāhāra (ac, hal, ik, ...).")
    p.add_argument("name")

    p = sub.add_parser("member", help="Test whether PHONEME belongs to GROUP.")
    p.add_argument("phoneme")
    p.add_argument("group", help="Registered name or start+marker shorthand.")

    p = sub.add_parser("find", help="List named groups containing PHONEME.")
    p.add_argument("phoneme")

    p = sub.add_parser("classify", help="Coarse category of a phoneme set.")
    p.add_argument("phonemes", nargs="+")

    p = sub.add_parser("embed", help="Render group-membership vectors.")
    p.add_argument("phonemes", nargs="+")
    p.add_argument(
        "--style",
        choices=["short", "long"],
        default="short",
        help="Display style for encoding_to_string output (default: short).",
    )

    sub.add_parser("alphabet", help="Print the Śivasūtras with their markers.")
    sub.add_parser("examples", help="Print the traditional worked examples.")
    return parser.parse_args(argv)


def _print_phonemes(label: str, phonemes: List[str]) -> None:
    print(f"{label}: {' '.join(phonemes)}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for CLI execution; returns the process exit status."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "construct":
        result = construct(normalize_iast(args.start), normalize_iast(args.marker))
        if not result.valid:
            print(f"error ({result.error}): {result.message}", file=sys.stderr)
            return 1
        _print_phonemes(f"{result.start}…{result.marker}", result.phonemes)
        print(f"category: {result.category} | traditional: {result.traditional}")
        return 0

    if args.command == "group":
        lookup = REGISTRY.get(normalize_iast(args.name))
        if not lookup.valid:
            print(f"error ({lookup.error}): {args.name}", file=sys.stderr)
            return 1
        _print_phonemes(lookup.name, lookup.phonemes)
        print(f"category: {lookup.category}")
        return 0

    if args.command == "member":
        res = membership(normalize_iast(args.phoneme), normalize_iast(args.group))
        if res.error:
            print(f"error ({res.error}): {args.group}", file=sys.stderr)
            return 1
        print("yes" if res.belongs else "no")
        return 0

    if args.command == "find":
        names = find_groups_containing(normalize_iast(args.phoneme))
        print(" ".join(names) if names else "-")
        return 0

    if args.command == "classify":
        print(classify([normalize_iast(ph) for ph in args.phonemes]))
        return 0

    if args.command == "embed":
        emb = GroupEmbedder()
        print(
            emb.encoding_to_string(
                emb.encode_sequence(args.phonemes), style=args.style
            )
        )
        return 0

    if args.command == "alphabet":
        for i, (label, phonemes, marker) in enumerate(SIVASUTRA_BLOCKS, start=1):
            print(f"{i:>2}. {label:<12} {' '.join(phonemes)} | {marker}")
        return 0

    examples = get_pratyahara_examples()
    print(examples["principle"])
    for ex in examples["common"]["examples"]:
        start, marker = ex["construction"]
        print(f"{ex['name']} ({start}+{marker}) {ex['meaning']}: {' '.join(ex['phonemes'])}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
