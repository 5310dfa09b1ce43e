"""
Generate one Letter page tiled with the plain badge template for handwritten badges.
"""

from badge_cli import base_parser, configure_logging, run
from badge_document import write_tiled_sheet
from badge_settings import BLANK_PDF, DEFAULT_RULE


def main(argv=None):
    args = base_parser("Tile a page with blank badges.", BLANK_PDF).parse_args(argv)
    configure_logging(args.verbose)
    run(lambda: write_tiled_sheet(DEFAULT_RULE[1], args.img_dir, args.output))


if __name__ == "__main__":
    main()
