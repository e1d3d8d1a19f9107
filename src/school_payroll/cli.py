"""Salary Command Line Interface.

Provides operator tools for:
- Base salary lookup by role
- Deduction breakdowns
- Net pay for a role
- Tax table listing
- Parsing formatted peso amounts

Usage:
    python -m school_payroll.cli base-salary --role Teacher
    python -m school_payroll.cli breakdown --base-salary 30000 --allowance 0 --json
    python -m school_payroll.cli net-pay --role Registrar --allowance 2000
    python -m school_payroll.cli brackets
    python -m school_payroll.cli parse --value "₱1,234.50"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from school_payroll.calculators import SalaryCalculator
from school_payroll.calculators.tables import ROLE_SALARY_RANGES, TAX_BRACKETS
from school_payroll.calculators.tax_calculator import default_tax_calculator
from school_payroll.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


def parse_decimal(s: str) -> Decimal:
    """Parse a decimal argument, accepting formatted amounts."""
    try:
        return Decimal(s.replace(",", "").strip())
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}")


class SalaryCli:
    """Salary Command Line Interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()
        self.symbol = get_settings().currency_symbol

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m school_payroll.cli",
            description="School payroll salary tools",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=None,
            help="Logging level (default: $LOG_LEVEL or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # base-salary command
        base = subparsers.add_parser(
            "base-salary",
            help="Show base salary for a role",
        )
        base.add_argument(
            "--role",
            type=str,
            default="",
            help=f"Role name (known: {', '.join(ROLE_SALARY_RANGES)})",
        )

        # breakdown command
        breakdown = subparsers.add_parser(
            "breakdown",
            help="Itemize deductions for a base salary",
        )
        breakdown.add_argument(
            "--base-salary",
            type=parse_decimal,
            required=True,
            help="Monthly base salary",
        )
        breakdown.add_argument(
            "--allowance",
            type=parse_decimal,
            default=Decimal("0"),
            help="Taxable monthly allowance (default: 0)",
        )
        breakdown.add_argument(
            "--json",
            action="store_true",
            help="Output JSON",
        )

        # net-pay command
        net = subparsers.add_parser(
            "net-pay",
            help="Compute net pay for a role",
        )
        net.add_argument(
            "--role",
            type=str,
            required=True,
            help="Role name",
        )
        net.add_argument(
            "--allowance",
            type=parse_decimal,
            default=Decimal("0"),
            help="Taxable monthly allowance (default: 0)",
        )
        net.add_argument(
            "--json",
            action="store_true",
            help="Output JSON",
        )

        # brackets command
        subparsers.add_parser(
            "brackets",
            help="List the monthly withholding tax table",
        )

        # parse command
        parse = subparsers.add_parser(
            "parse",
            help="Parse a formatted peso amount",
        )
        parse.add_argument(
            "--value",
            type=str,
            required=True,
            help="Formatted amount, e.g. '₱1,234.50'",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        configure_logging(parsed.log_level)

        if not parsed.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "base-salary": self._cmd_base_salary,
            "breakdown": self._cmd_breakdown,
            "net-pay": self._cmd_net_pay,
            "brackets": self._cmd_brackets,
            "parse": self._cmd_parse,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _money(self, value: Decimal) -> str:
        return SalaryCalculator.format_currency(value, self.symbol)

    def _cmd_base_salary(self, args: argparse.Namespace) -> int:
        """Show base salary for a role."""
        base_salary = SalaryCalculator.calculate_base_salary(args.role)
        if args.role not in ROLE_SALARY_RANGES:
            print(f"Unknown role {args.role!r}, using 'Other' band", file=sys.stderr)
        print(f"{args.role or '(none)'}: {self._money(base_salary)}")
        return 0

    def _cmd_breakdown(self, args: argparse.Namespace) -> int:
        """Itemize deductions."""
        breakdown = SalaryCalculator.get_deduction_breakdown(args.base_salary, args.allowance)

        if args.json:
            print(json.dumps(breakdown.to_dict(), indent=2))
            return 0

        bracket = default_tax_calculator.describe_bracket(args.base_salary + args.allowance)
        print(f"Base salary:       {self._money(args.base_salary):>16}")
        print(f"Allowance:         {self._money(args.allowance):>16}")
        print(f"  Social insurance {self._money(breakdown.social_insurance):>16}")
        print(f"  Health insurance {self._money(breakdown.health_insurance):>16}")
        print(f"  Housing fund     {self._money(breakdown.housing_fund):>16}")
        print(f"  Withholding tax  {self._money(breakdown.withholding_tax):>16}  ({bracket.label})")
        print(f"Total deductions:  {self._money(breakdown.total):>16}")
        return 0

    def _cmd_net_pay(self, args: argparse.Namespace) -> int:
        """Compute net pay for a role."""
        base_salary = SalaryCalculator.calculate_base_salary(args.role)
        bonus = SalaryCalculator.calculate_bonus(base_salary)
        deductions = SalaryCalculator.calculate_total_deductions(base_salary, args.allowance)
        net_salary = SalaryCalculator.calculate_total_salary(
            base_salary, args.allowance, bonus, deductions
        )
        if net_salary < 0:
            logger.warning("Net salary for %s is negative: %s", args.role, net_salary)

        result: dict[str, Any] = {
            "role": args.role,
            "base_salary": str(base_salary),
            "allowance": str(args.allowance),
            "bonus": str(bonus),
            "deductions": str(deductions),
            "net_salary": str(net_salary),
        }
        if args.json:
            print(json.dumps(result, indent=2))
        else:
            for key, value in result.items():
                if key == "role":
                    print(f"{key:<12} {value}")
                else:
                    print(f"{key:<12} {self._money(Decimal(value))}")
        return 0

    def _cmd_brackets(self, args: argparse.Namespace) -> int:
        """List the tax table."""
        print(f"{'Over':>14}  {'Up to':>14}  Rate")
        for bracket in TAX_BRACKETS:
            upper = "-" if bracket.upper_bound is None else SalaryCalculator.format_number(bracket.upper_bound)
            print(
                f"{SalaryCalculator.format_number(bracket.lower_bound):>14}  "
                f"{upper:>14}  {bracket.rate:.0%}"
            )
        return 0

    def _cmd_parse(self, args: argparse.Namespace) -> int:
        """Parse a formatted amount."""
        print(SalaryCalculator.parse_currency(args.value))
        return 0


def main() -> int:
    """CLI entry point."""
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
