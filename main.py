import sys

from config import PROGRAM_NAME, EXIT_OK
from models.errors import IntersectError
from parsing.arguments import parse_arguments
from solvers.intersection_solver import solve_intersection
from formatting.equations import render_report


def run(argv=None) -> str:
    """
    Runs the complete pipeline and returns the text to print:
      1. Parse flags and the six numeric tokens
      2. Resolve slopes (angle -> gradient)
      3. Solve the intersection
      4. Render both equations and the coordinates

    Nothing is printed here, so an error in any step leaves no partial
    output behind.
    """

    # ------------------------------
    # STEP 1+2 — ARGUMENTS & SLOPES
    # ------------------------------
    line1, line2, settings = parse_arguments(argv)

    # ------------------------------
    # STEP 3 — INTERSECTION
    # ------------------------------
    result = solve_intersection(line1, line2)

    # ------------------------------
    # STEP 4 — OUTPUT
    # ------------------------------
    return render_report(line1, line2, result, settings)


def main(argv=None) -> int:
    """
    Console entry point. Prints the report, or a single diagnostic on
    stderr, and returns the process exit status.
    """
    try:
        report = run(argv)
    except IntersectError as exc:
        print(f"{PROGRAM_NAME}: {exc}", file=sys.stderr)
        return exc.exit_code

    print(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
