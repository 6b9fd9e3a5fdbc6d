"""
Render a Kolam template (or a stroke CSV) onto the dot grid and save it.

    python kolamcanvas_cli.py --template star --out star.png --symmetry
    python kolamcanvas_cli.py --csv strokes.csv --out traced.jpg
"""

import argparse
import logging
import sys

from kolam_canvas.config import CanvasConfig, configure_logging
from kolam_canvas.strokes_csv import load_strokes_csv, save_strokes_csv
from kolam_canvas.surface import KolamCanvas
from kolam_canvas.templates import TEMPLATE_IDS

logger = logging.getLogger("kolamcanvas_cli")


def build_canvas(args, config):
    canvas = KolamCanvas(
        grid_size=args.grid if args.grid is not None else config.grid_size,
        dot_spacing=args.spacing if args.spacing is not None else config.dot_spacing,
        width=args.size or config.width,
        height=args.size or config.height,
        show_symmetry=args.symmetry or config.show_symmetry,
    )
    if args.template:
        canvas.load_template(args.template)
    if args.csv:
        paths, err = load_strokes_csv(args.csv)
        if err is not None:
            return None, err
        # Replay each stroke as pointer input so it goes through the recorder
        for path in paths:
            canvas.pointer_down(*path[0])
            for x, y in path[1:]:
                canvas.pointer_move(x, y)
            canvas.pointer_up()
    return canvas, None


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--template", help=f"one of: {', '.join(TEMPLATE_IDS)}")
    ap.add_argument("--csv", help="stroke CSV to draw on top of the template")
    ap.add_argument("--out", default="my-kolam.png")
    ap.add_argument("--save-csv", help="also write the committed strokes to this CSV")
    ap.add_argument("--symmetry", action="store_true")
    ap.add_argument("--grid", type=int)
    ap.add_argument("--spacing", type=float)
    ap.add_argument("--size", type=int)
    args = ap.parse_args(argv)

    config = CanvasConfig.from_env()
    configure_logging(config.log_level)

    canvas, err = build_canvas(args, config)
    if err is not None:
        logger.error("[CLI] Could not read strokes: %s", err)
        return 1

    saved, err = canvas.export_image(args.out)
    if err is not None:
        logger.error("[CLI] Export failed: %s", err)
        return 1
    print(f"Saved {saved} ({len(canvas.committed_paths)} paths)")

    if args.save_csv:
        save_strokes_csv(canvas.committed_paths, args.save_csv)
        print(f"Saved {args.save_csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
