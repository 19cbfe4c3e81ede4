"""Generate plan and section SVGs for a foundation from the command line.

Parameter values are taken as raw text and go through the same lenient
parse and clamp as the interactive page, so any input yields a drawing.

    foundation-drawings --length 12000 --rebar-spacing 150 --view plan
"""
import os, sys, argparse, datetime

from shared.svg import git_describe
from foundation.config import FoundationConfig, default_config, apply_updates
from foundation.constants import PARAM_LIMITS, VIEWS
from foundation.metrics import compute_specs, format_specs
from foundation.plan_view import build_plan_data, render_plan_svg
from foundation.section_view import build_section_data, render_section_svg


def make_stamp() -> tuple[str, str]:
    """(generated-at, git describe) pair for title blocks."""
    return datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S"), git_describe()


def render_view(config: FoundationConfig, view: str, stamp=None) -> str:
    """Render one view ("plan" or "section") of *config* as SVG."""
    if view == "plan":
        return render_plan_svg(build_plan_data(config), stamp)
    if view == "section":
        return render_section_svg(build_section_data(config), stamp)
    raise ValueError(f"Unknown view {view!r}; expected one of {VIEWS}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    for key, (lo, hi) in PARAM_LIMITS.items():
        ap.add_argument("--" + key.replace("_", "-"), dest=key, metavar="MM",
                        help=f"{key.replace('_', ' ')} in mm, clamped to {lo:g}-{hi:g}")
    ap.add_argument("--view", choices=[*VIEWS, "both"], default="both")
    ap.add_argument("--out-dir", default=".", help="directory for plan.svg / section.svg")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    raw = {key: getattr(args, key) for key in PARAM_LIMITS if getattr(args, key) is not None}
    config = apply_updates(default_config(), raw)

    views = VIEWS if args.view == "both" else (args.view,)
    stamp = make_stamp()
    os.makedirs(args.out_dir, exist_ok=True)
    for view in views:
        svg_path = os.path.join(args.out_dir, f"{view}.svg")
        with open(svg_path, "w", encoding="utf-8") as f:
            f.write(render_view(config, view, stamp))
        print(f"{view.capitalize()} view written to {svg_path}")

    print()
    for key, value in config._asdict().items():
        print(f"  {key:<15s} {value:10.1f} mm")
    print()
    for caption, text in format_specs(compute_specs(config)).items():
        print(f"{caption + ':':<20s} {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
