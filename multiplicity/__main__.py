"""
CLI entry point. Run as: python -m multiplicity A B --domain <name>
"""

import argparse
import json

from .core.enat import NotFiniteError
from .core.query import search_multiplicity
from .core.witness import certify, decompose, print_certificate
from .domains import DOMAINS, get_carrier
from .laws import run_law_suite, print_law_results
from .report import print_result, print_table, export_dot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multiplicity",
        description="Multiplicity of a divisor: the largest n with a^n | b, or ∞",
    )
    parser.add_argument("a", nargs="?", help="divisor")
    parser.add_argument("b", nargs="?", help="dividend")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="int",
        help="Which carrier to compute in",
    )
    parser.add_argument("--modulus", type=int, default=None,
                        help="n for zmod, prime p for gfpoly")
    parser.add_argument("--steps", type=int, default=None,
                        help="Search bound (carriers without a finiteness oracle)")
    parser.add_argument("--certify", action="store_true", help="Print the divisibility chain")
    parser.add_argument("--decompose", action="store_true", help="Print b = a^m * c")
    parser.add_argument("--dot", type=str, default=None, help="Export the chain as a DOT graph")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--laws", action="store_true", help="Run the law suite for the domain")
    parser.add_argument("--table", action="store_true", help="Tabulate multiplicity(a, b) for b = 0..UPTO")
    parser.add_argument("--upto", type=int, default=32, help="Last b for --table")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    entry = DOMAINS[args.domain]

    if entry.get("needs_modulus") and args.modulus is None:
        parser.error(f"--domain {args.domain} needs --modulus")
    try:
        carrier = get_carrier(args.domain, args.modulus)
    except ValueError as e:
        parser.error(str(e))

    # The law suite is a sweep over sample elements, not a single query.
    if args.laws:
        results = run_law_suite(args.domain, args.modulus,
                                verbose=not args.quiet and not args.json)
        if args.json:
            print(json.dumps(results, indent=2))
        else:
            print_law_results(results, domain=carrier.name)
        return

    if args.a is None:
        parser.error("a divisor is required (or use --laws)")

    try:
        a = carrier.parse(args.a)
        b = None if args.table or args.b is None else carrier.parse(args.b)
    except (ValueError, SyntaxError) as e:
        parser.error(f"cannot parse input for {carrier.name}: {e}")

    if args.table:
        print_table(a, args.upto, carrier)
        return
    if b is None:
        parser.error("a dividend is required")

    state = search_multiplicity(a, b, carrier, max_steps=args.steps,
                                verbose=not args.quiet and not args.json)
    result = state.result

    output = {
        "carrier": carrier.name,
        "a": carrier.show(a),
        "b": carrier.show(b),
        "multiplicity": result.to_dict(),
    }

    if not args.json:
        print_result(a, b, result, carrier)

    if args.certify or args.dot:
        cert = certify(a, b, carrier)
        output["certificate"] = cert.to_dict()
        if args.certify and not args.json:
            print_certificate(cert)
        if args.dot:
            export_dot(cert, args.dot, verbose=not args.json)

    if args.decompose:
        try:
            d = decompose(a, b, carrier)
        except NotFiniteError as e:
            output["decomposition"] = None
            if not args.json:
                print(f"\nNo decomposition: {e}")
        else:
            output["decomposition"] = {
                "exponent": d.exponent,
                "cofactor": carrier.show(d.cofactor),
            }
            if not args.json:
                print(f"\n  {carrier.show(b)} = ({carrier.show(a)})^{d.exponent} * "
                      f"{carrier.show(d.cofactor)}")

    if args.json:
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
