import argparse

from figure_classification import config
from figure_classification.generation.figure_generator import generate_figures
from figure_classification.models.figure import GeneratedFigure


def report_figure(generated: GeneratedFigure, index: int, language=None):
    """
    Prints one generated figure:
      1. Points in drawing order, with their colors
      2. Edges
      3. Classification label
    """

    print(f"\n=== Figure {index} ===")

    if not generated.points:
        print("[WARN] Empty figure. Skipping.")
        return

    for p in generated.points:
        print(f"  ({p.x:>3}, {p.y:>3})  {p.color}")

    if generated.edges:
        print("  edges: " + ", ".join(f"{e.start}-{e.end}" for e in generated.edges))
    else:
        print("  edges: none")

    print(f"[OK] {generated.figure.label(language)}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate random grid figures and classify them.")
    parser.add_argument("--count", type=int, default=config.FIGURE_COUNT,
                        help="number of figures to generate")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="seed for reproducible figures")
    parser.add_argument("--language", choices=sorted(config.LABELS), default=None,
                        help="label language (defaults to config.LANGUAGE)")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point:
      - Reads count / seed / language
      - Generates and classifies each figure
      - Prints the results
    """
    args = parse_args(argv)

    if args.count < 1:
        print(f"[ERROR] Nothing to generate: --count is {args.count}")
        return 1

    for i, generated in enumerate(generate_figures(args.count, seed=args.seed), start=1):
        report_figure(generated, i, language=args.language)

    print("\n=== All figures classified ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
