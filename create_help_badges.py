"""
Generate one Letter page tiled with the "Help" badge template.
"""

from badge_cli import base_parser, configure_logging, run
from badge_document import write_tiled_sheet
from badge_settings import HELP_PDF, HELP_TEMPLATE


def main(argv=None):
    args = base_parser("Tile a page with help desk badges.", HELP_PDF).parse_args(argv)
    configure_logging(args.verbose)
    run(lambda: write_tiled_sheet(HELP_TEMPLATE, args.img_dir, args.output))


if __name__ == "__main__":
    main()
