# --- rmap.py ---
import argparse
import logging
import os
import sys

from rmap_lib.api import process_directory, process_room_file
from rmap_lib.config import ConfigService
from rmap_lib.decoder import RoomDecodeError
from rmap_lib.log_utils import setup_logging


def get_cli_args(argv=None):
    """Configures and parses command-line arguments."""
    p = argparse.ArgumentParser(
        description="Decodes binary room records and renders their terrain to PNG."
    )
    p.add_argument(
        "-i",
        "--input",
        help="A room file, or a directory of room files (default: [Paths] input_dir).",
    )
    p.add_argument("-o", "--output", help="Output directory (default: [Paths] output_dir).")
    p.add_argument(
        "-c",
        "--config",
        default="rmap.cfg",
        help="Path to the config file; created with defaults if missing (default: rmap.cfg).",
    )
    p.add_argument(
        "--json", action="store_true", help="Also save each decoded room as <id>.json."
    )
    p.add_argument(
        "--cleanup-iterations",
        type=int,
        help="Number of seam cleanup passes (default: [Render] cleanup_iterations).",
    )
    p.add_argument(
        "--no-outline", action="store_true", help="Do not draw the room border outline."
    )
    # Logging arguments
    g_log = p.add_argument_group("Logging & Output")
    g_log.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO logging."
    )
    g_log.add_argument(
        "--color-logs", action="store_true", help="Enable colored logging."
    )
    g_log.add_argument(
        "--log-file", metavar="FILE", help="Redirect log output to a file."
    )
    g_log.add_argument(
        "--ascii-debug",
        action="store_true",
        help="Log an ASCII map of each classified room for debugging.",
    )
    g_log.add_argument(
        "-d",
        "--debug",
        nargs="?",
        const="all",
        dest="debug_topics",
        metavar="TOPICS",
        help="Enable DEBUG logging (all,api,config,decode,classify,geometry,render).",
    )
    return p.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the rmap CLI."""
    args = get_cli_args(argv)
    log_level = logging.INFO if args.verbose else logging.WARNING
    if args.debug_topics:
        log_level = logging.DEBUG

    setup_logging(log_level, args.color_logs, args.debug_topics, args.log_file)
    log = logging.getLogger("rmap.main")

    log.info("--- RMAP CLI Initialized ---")
    log.debug("Arguments received: %s", vars(args))

    config = ConfigService(args.config)
    settings = config.get_settings()
    style_options = config.get_render_options()
    if args.cleanup_iterations is not None:
        style_options["cleanup_iterations"] = args.cleanup_iterations
    if args.no_outline:
        style_options["outline"] = False

    input_path = args.input or settings["Paths"]["input_dir"]
    output_dir = args.output or settings["Paths"]["output_dir"]
    id_separator = settings["Rooms"]["id_separator"]

    if os.path.isfile(input_path):
        try:
            process_room_file(
                input_path,
                output_dir,
                style_options=style_options,
                id_separator=id_separator,
                save_json=args.json,
                ascii_debug=args.ascii_debug,
            )
        except (RoomDecodeError, OSError) as e:
            log.critical("Could not process %s: %s", input_path, e)
            return 1
        log.info("--- Processing complete. ---")
        return 0

    if not os.path.isdir(input_path):
        log.critical("Input not found: %s", input_path)
        log.critical("Resolved path: %s", os.path.abspath(input_path))
        return 1

    result = process_directory(
        input_path,
        output_dir,
        extension=settings["Paths"]["extension"],
        style_options=style_options,
        id_separator=id_separator,
        save_json=args.json,
        ascii_debug=args.ascii_debug,
    )
    log.info("--- Processing complete. ---")
    return 1 if result.failed and not result.processed else 0


if __name__ == "__main__":
    sys.exit(main())
