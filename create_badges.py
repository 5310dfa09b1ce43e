"""
Generate a PDF of camp name badges from a CSV of badge names, titles and pronouns.
"""

from badge_cli import base_parser, configure_logging, run
from badge_document import build_context, write_badges_pdf
from badge_records import read_badge_records
from badge_settings import BADGES_PDF, DEFAULT_CSV, DEFAULT_FONT, NAME_START_SIZES
from badge_templates import load_rules


def parse_args(argv=None):
    p = base_parser("Lay out name badges 12 to a Letter page.", BADGES_PDF)
    p.add_argument("--csv", default=DEFAULT_CSV, help=f"Badge data CSV (default {DEFAULT_CSV})")
    p.add_argument("--font", default=DEFAULT_FONT,
                   help="TTF/OTF path or a standard PDF font name")
    p.add_argument("--rules", help="Optional pattern,template CSV replacing the built-in rules")
    p.add_argument("--preset", choices=sorted(NAME_START_SIZES), default="default",
                   help="Name size preset (default 30pt, plain 24pt)")
    p.add_argument("--no-fill-blank", dest="fill_blank", action="store_false",
                   help="Leave cells after the last badge empty instead of plain badges")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    def job():
        rules = load_rules(args.rules) if args.rules else None
        context = build_context(args.font, args.img_dir, rules=rules,
                                preset=args.preset, fill_blank_cells=args.fill_blank)
        records = read_badge_records(args.csv)
        write_badges_pdf(records, context, args.output)

    run(job)


if __name__ == "__main__":
    main()
