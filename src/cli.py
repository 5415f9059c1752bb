import argparse
import sys

from parttime_training_duration.calculations import (
    calculate,
    form_values_from_selection,
    split_years_months,
)
from parttime_training_duration.config import (
    DEFAULT_DURATION_MONTHS,
    DEFAULT_FULLTIME_HOURS,
    DEFAULT_PARTTIME_HOURS,
)
from parttime_training_duration.logging_setup import get_logger, setup_logging
from parttime_training_duration.models import Rounding

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the duration of a part-time vocational training."
    )
    parser.add_argument("--weekly-full", type=float, default=DEFAULT_FULLTIME_HOURS)
    parser.add_argument("--weekly-part", type=float, default=DEFAULT_PARTTIME_HOURS)
    parser.add_argument("--months", type=int, default=DEFAULT_DURATION_MONTHS,
                        help="regular full-time duration in months")
    parser.add_argument("--degree", default=None,
                        help="school degree id (hs, mr, fhr, abi)")
    parser.add_argument("--qualification", action="append", default=[],
                        help="qualification reason code, repeatable")
    parser.add_argument("--manual", type=float, default=0,
                        help="manual reduction in months")
    parser.add_argument("--rounding", choices=[r.value for r in Rounding],
                        default=Rounding.ROUND.value)
    return parser


def main(argv=None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    form = form_values_from_selection(
        weekly_full=args.weekly_full,
        weekly_part=args.weekly_part,
        full_duration_months=args.months,
        degree_id=args.degree,
        manual_months=args.manual,
        selection=args.qualification,
        rounding=args.rounding,
    )
    result = calculate(form)
    logger.debug("Result: %s", result.to_dict())

    print("=== Part-time training – Estimate ===")
    print(f"Full-time hours/week:  {form.weekly_full:g}")
    print(f"Part-time hours/week:  {form.weekly_part:g}")
    print(f"Regular duration:      {result.fulltime_months} months")
    print()

    if not result.allowed:
        print(f"Not allowed:           {result.error_code.value}")
        return 1

    years, months = split_years_months(result.parttime_final_months)
    print(f"Total reduction:       {result.total_reduction_months:g} months")
    print(f"Part-time duration:    {result.parttime_final_months} months ({years}y {months}m)")
    print(f"Delta vs full-time:    {result.delta_months:+d} months ({result.delta_direction.value})")
    if result.qualification_cap_exceeded:
        print("Note: qualification reasons were capped.")
    if result.legal_hint:
        print("Note: reductions above 6 months require an application (§8 BBiG).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
